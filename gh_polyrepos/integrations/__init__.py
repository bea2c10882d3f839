"""Integrations with external tools and the interactive terminal."""
