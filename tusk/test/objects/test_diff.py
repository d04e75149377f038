"""Tests for tusk.objects.diff module."""

from __future__ import annotations

import pytest

from tusk.objects.diff import DiffLineKind, DiffMode, parse_diff

IDX = "index " + "a" * 40 + ".." + "b" * 40

MODIFIED = f"""diff --git a/src/app.py b/src/app.py
{IDX} 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,4 +1,5 @@ def main():
 import sys
-import os
+import os.path
+import re

 def main():
@@ -20 +21 @@
-    return 0
+    return 1
"""

ADDED = f"""diff --git a/NEWS b/NEWS
new file mode 100644
{IDX}
--- /dev/null
+++ b/NEWS
@@ -0,0 +1,2 @@
+line one
+line two
\\ No newline at end of file
"""

DELETED = f"""diff --git a/old.txt b/old.txt
deleted file mode 100644
{IDX}
--- a/old.txt
+++ /dev/null
@@ -1 +0,0 @@
-gone
"""

RENAMED = """diff --git a/docs/a.md b/docs/b.md
similarity index 100%
rename from docs/a.md
rename to docs/b.md
"""

BINARY = f"""diff --git a/logo.png b/logo.png
{IDX} 100644
Binary files a/logo.png and b/logo.png differ
"""


class TestParseDiff:
    def test_modified_file(self) -> None:
        diff = parse_diff(MODIFIED)
        assert len(diff) == 1
        f = diff.files[0]
        assert f.mode is DiffMode.MODIFIED
        assert f.old_path == "src/app.py"
        assert f.new_path == "src/app.py"
        assert len(f.chunks) == 2
        assert f.additions == 3
        assert f.deletions == 2

    def test_chunk_header_and_line_numbers(self) -> None:
        chunk = parse_diff(MODIFIED).files[0].chunks[0]
        assert (chunk.old_start, chunk.old_count, chunk.new_start, chunk.new_count) == (1, 4, 1, 5)
        assert chunk.header == "def main():"
        first, removed, added = chunk.lines[0], chunk.lines[1], chunk.lines[2]
        assert first.kind is DiffLineKind.UNCHANGED
        assert (first.old_number, first.new_number) == (1, 1)
        assert removed.kind is DiffLineKind.DELETED
        assert (removed.content, removed.old_number, removed.new_number) == ("import os", 2, None)
        assert (added.old_number, added.new_number) == (None, 2)
        assert chunk.lines[-1].content == "def main():"
        assert chunk.lines[-1].old_number == 4

    def test_blank_context_line(self) -> None:
        chunk = parse_diff(MODIFIED).files[0].chunks[0]
        blank = chunk.lines[4]
        assert blank.kind is DiffLineKind.UNCHANGED
        assert blank.content == ""

    def test_single_line_hunk_counts_default_to_one(self) -> None:
        chunk = parse_diff(MODIFIED).files[0].chunks[1]
        assert (chunk.old_start, chunk.old_count, chunk.new_start, chunk.new_count) == (20, 1, 21, 1)

    def test_added_file(self) -> None:
        f = parse_diff(ADDED).files[0]
        assert f.mode is DiffMode.ADDED
        assert f.old_path is None
        assert f.path == "NEWS"
        assert [ln.content for ln in f.chunks[0].lines] == ["line one", "line two"]

    def test_deleted_file(self) -> None:
        f = parse_diff(DELETED).files[0]
        assert f.mode is DiffMode.DELETED
        assert f.new_path is None
        assert f.path == "old.txt"
        assert f.deletions == 1

    def test_rename(self) -> None:
        f = parse_diff(RENAMED).files[0]
        assert f.mode is DiffMode.RENAMED
        assert (f.old_path, f.new_path) == ("docs/a.md", "docs/b.md")
        assert f.chunks == ()

    def test_binary(self) -> None:
        f = parse_diff(BINARY).files[0]
        assert f.is_binary is True
        assert f.chunks == ()

    def test_multiple_files(self) -> None:
        diff = parse_diff(MODIFIED + ADDED + DELETED + RENAMED + BINARY)
        assert [f.path for f in diff] == ["src/app.py", "NEWS", "old.txt", "docs/b.md", "logo.png"]
        assert diff.additions == 5
        assert diff.deletions == 3
        assert diff.get("docs/a.md") is not None
        assert diff.get("missing") is None

    def test_empty(self) -> None:
        assert len(parse_diff("")) == 0

    def test_short_hunk_is_rejected(self) -> None:
        truncated = "diff --git a/a.txt b/a.txt\n--- a/a.txt\n+++ b/a.txt\n@@ -1,3 +1,3 @@\n-old\n"
        with pytest.raises(ValueError, match="malformed patch"):
            parse_diff(truncated)
