"""Tests for tusk.objects.status module."""

from __future__ import annotations

from tusk.objects.status import GitStatus, StatusEntry, parse_status


class TestStatusEntry:
    """Tests for StatusEntry dataclass."""

    def test_staged_entry(self) -> None:
        entry = StatusEntry(xy="M ", path="file.py")
        assert entry.is_staged is True
        assert entry.is_unstaged is False
        assert entry.is_untracked is False

    def test_unstaged_entry(self) -> None:
        entry = StatusEntry(xy=" M", path="file.py")
        assert entry.is_staged is False
        assert entry.is_unstaged is True

    def test_both_staged_and_unstaged(self) -> None:
        entry = StatusEntry(xy="MM", path="file.py")
        assert entry.is_staged is True
        assert entry.is_unstaged is True

    def test_untracked_entry(self) -> None:
        entry = StatusEntry(xy="??", path="new_file.py")
        assert entry.is_staged is False
        assert entry.is_unstaged is False
        assert entry.is_untracked is True

    def test_conflicted(self) -> None:
        assert StatusEntry(xy="UU", path="f").is_conflicted is True
        assert StatusEntry(xy="AA", path="f").is_conflicted is True
        assert StatusEntry(xy="MM", path="f").is_conflicted is False

    def test_pretty_xy(self) -> None:
        assert StatusEntry(xy="M ", path="f").pretty_xy() == "M."
        assert StatusEntry(xy=" M", path="f").pretty_xy() == ".M"
        assert StatusEntry(xy="??", path="f").pretty_xy() == "??"


class TestGitStatus:
    """Tests for GitStatus dataclass."""

    def test_clean_status(self) -> None:
        status = GitStatus(branch="main", upstream="origin/main")
        assert status.is_clean is True
        assert status.has_divergence is False
        assert status.is_detached is False

    def test_divergence(self) -> None:
        assert GitStatus(branch="main", upstream="origin/main", ahead=3).has_divergence is True
        assert GitStatus(branch="main", upstream="origin/main", behind=2).has_divergence is True
        assert GitStatus(branch="feature").has_divergence is True

    def test_partitions(self) -> None:
        entries = (
            StatusEntry(xy="M ", path="staged.py"),
            StatusEntry(xy=" D", path="unstaged.py"),
            StatusEntry(xy="??", path="untracked.py"),
            StatusEntry(xy="UU", path="conflict.py"),
        )
        status = GitStatus(branch="main", entries=entries)
        assert [e.path for e in status.staged] == ["staged.py", "conflict.py"]
        assert [e.path for e in status.unstaged] == ["unstaged.py", "conflict.py"]
        assert status.untracked_count == 1
        assert [e.path for e in status.conflicted] == ["conflict.py"]


class TestParseStatus:
    def test_clean_with_upstream(self) -> None:
        status = parse_status("## main...origin/main\n")
        assert status.branch == "main"
        assert status.upstream == "origin/main"
        assert status.is_clean is True

    def test_entries(self) -> None:
        status = parse_status("## main\nM  staged.py\n M unstaged.py\n?? new.py\n")
        assert status.upstream is None
        assert status.staged_count == 1
        assert status.unstaged_count == 1
        assert status.untracked_count == 1

    def test_ahead_behind(self) -> None:
        status = parse_status("## feature...origin/feature [ahead 3, behind 2]\n")
        assert (status.ahead, status.behind) == (3, 2)
        assert status.upstream == "origin/feature"

    def test_gone(self) -> None:
        status = parse_status("## feature...origin/feature [gone]\n")
        assert status.upstream_gone is True
        assert status.ahead == 0

    def test_detached(self) -> None:
        status = parse_status("## HEAD (no branch)\n M file.py\n")
        assert status.is_detached is True
        assert status.branch == ""

    def test_no_commits_yet(self) -> None:
        status = parse_status("## No commits yet on main\n?? README.md\n")
        assert status.branch == "main"
        assert status.untracked_count == 1

    def test_rename(self) -> None:
        status = parse_status("## main\nR  old name.py -> new.py\n")
        entry = status.entries[0]
        assert entry.is_renamed is True
        assert entry.path == "new.py"
        assert entry.orig_path == "old name.py"

    def test_quoted_path(self) -> None:
        status = parse_status('## main\n?? "caf\\303\\251.txt"\n')
        assert status.entries[0].path == "café.txt"

    def test_empty_output(self) -> None:
        status = parse_status("")
        assert status.branch == ""
        assert status.is_clean is True
