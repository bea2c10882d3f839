"""gh-polyrepos - run GitHub CLI pull-request actions across many checkouts.

Prompts for a `gh pr` action and its arguments, then applies it to every
selected repository under a root directory, one at a time.
"""

__version__ = "0.1.0"
