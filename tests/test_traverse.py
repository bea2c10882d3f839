"""Tests for repository traversal."""

from unittest.mock import Mock

import pytest

from gh_polyrepos.workflows.traverse import TraversalError, list_entries, traverse_directories


class TestListEntries:
    """Test root directory listing."""

    def test_lists_files_and_directories(self, repo_root):
        assert list_entries(repo_root) == ["repoA", "repoB", "repoC"]

    def test_missing_root(self, tmp_path):
        with pytest.raises(TraversalError, match="Root directory not found"):
            list_entries(tmp_path / "missing")

    def test_root_is_a_file(self, repo_root):
        with pytest.raises(TraversalError):
            list_entries(repo_root / "repoA")


class TestTraverseDirectories:
    """Test sequential directory traversal."""

    def test_visits_every_directory_once(self, repo_root):
        """Test each child directory is processed exactly once and files are skipped."""
        process = Mock(side_effect=lambda path: path.name)

        results = traverse_directories(repo_root, process)

        assert results == ["repoB", "repoC"]
        assert process.call_count == 2

    def test_visits_selected_subset_in_order(self, repo_root):
        """Test only selected entries are visited, in selection order."""
        visited = []

        traverse_directories(repo_root, lambda path: visited.append(path.name), entries=["repoC", "repoB"])

        assert visited == ["repoC", "repoB"]

    def test_selected_file_is_skipped(self, repo_root):
        process = Mock()

        results = traverse_directories(repo_root, process, entries=["repoA"])

        assert results == []
        process.assert_not_called()

    def test_empty_selection(self, repo_root):
        process = Mock()

        assert traverse_directories(repo_root, process, entries=[]) == []
        process.assert_not_called()

    def test_processing_error_stops_traversal(self, repo_root):
        """Test an error in one directory aborts the remaining ones."""
        process = Mock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            traverse_directories(repo_root, process)
        assert process.call_count == 1
