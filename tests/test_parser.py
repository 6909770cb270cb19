"""Tests for artifact metadata extraction."""

from pathlib import Path

import pytest

from skillindex.base import IndexIOError
from skillindex.parser import extract_field, header_block, read_artifact


SKILL_CONTENT = """---
name: functional-kotlin
description: Prefer expressions and immutable data in Kotlin
---

# Functional Kotlin

name: not-this-one
"""


class TestHeaderBlock:
    """Tests for header_block function."""

    def test_fenced_header(self):
        """Only the text inside the fence is returned."""
        header = header_block(SKILL_CONTENT)

        assert "name: functional-kotlin" in header
        assert "# Functional Kotlin" not in header

    def test_no_fence_returns_whole_text(self):
        """Files without a fence are scanned entirely."""
        text = "name: plain\ndescription: No fence\n"
        assert header_block(text) == text

    def test_unclosed_fence_returns_whole_text(self):
        """An opening fence with no closing fence scans everything."""
        text = "---\nname: open\ndescription: Never closed\n"
        assert header_block(text) == text


class TestExtractField:
    """Tests for extract_field function."""

    def test_name_and_description(self):
        """Extract both fields from a fenced header."""
        assert extract_field(SKILL_CONTENT, "name") == "functional-kotlin"
        assert extract_field(SKILL_CONTENT, "description") == (
            "Prefer expressions and immutable data in Kotlin"
        )

    def test_first_match_wins(self):
        """The first line carrying the key is used."""
        text = "name: first\nname: second\n"
        assert extract_field(text, "name") == "first"

    def test_body_lines_ignored_when_fenced(self):
        """Lines after the header never match."""
        text = "---\ndescription: Only a description\n---\nname: body\n"
        assert extract_field(text, "name") == ""

    def test_missing_key_is_empty(self):
        """Absent keys yield an empty string."""
        assert extract_field("---\nname: alpha\n---\n", "description") == ""

    def test_whitespace_trimmed(self):
        """Whitespace after the colon and at line end is stripped."""
        assert extract_field("name:    spaced   \n", "name") == "spaced"

    def test_no_space_after_colon(self):
        """Values directly after the colon are accepted."""
        assert extract_field("name:tight\n", "name") == "tight"

    def test_value_kept_verbatim(self):
        """Colons, pipes and quotes in the value are not interpreted."""
        text = '---\ndescription: "Review tweets: tone | length"\n---\n'
        assert extract_field(text, "description") == '"Review tweets: tone | length"'

    def test_indented_key_not_matched(self):
        """Only lines starting with the key match."""
        text = "---\nmeta:\n  name: nested\n---\n"
        assert extract_field(text, "name") == ""

    def test_prefix_of_other_key_not_matched(self):
        """A key that merely starts with the field name does not match."""
        text = "---\nnamespace: other\nname: real\n---\n"
        assert extract_field(text, "name") == "real"

    def test_crlf_line_endings(self):
        """Windows line endings do not leak into values."""
        text = "---\r\nname: windows\r\ndescription: CRLF file\r\n---\r\n"
        assert extract_field(text, "name") == "windows"
        assert extract_field(text, "description") == "CRLF file"


class TestReadArtifact:
    """Tests for read_artifact function."""

    def test_reads_artifact(self, tmp_path: Path):
        """Build an Artifact with a root-relative link."""
        skill_dir = tmp_path / "kotlin" / "functional"
        skill_dir.mkdir(parents=True)
        path = skill_dir / "SKILL.md"
        path.write_text(SKILL_CONTENT, encoding="utf-8")

        artifact = read_artifact(path, tmp_path)

        assert artifact.name == "functional-kotlin"
        assert artifact.description == "Prefer expressions and immutable data in Kotlin"
        assert artifact.relative_path == "kotlin/functional"
        assert artifact.source == path

    def test_link_from_other_directory(self, tmp_path: Path):
        """The link is relative to the given base, not the artifact's root."""
        skill_dir = tmp_path / "skills" / "alpha"
        skill_dir.mkdir(parents=True)
        path = skill_dir / "SKILL.md"
        path.write_text(SKILL_CONTENT, encoding="utf-8")

        artifact = read_artifact(path, tmp_path / "docs")

        assert artifact.relative_path == "../skills/alpha"

    def test_missing_description(self, tmp_path: Path):
        """A file without description still produces an artifact."""
        path = tmp_path / "SKILL.md"
        path.write_text("---\nname: lonely\n---\n", encoding="utf-8")

        artifact = read_artifact(path, tmp_path)

        assert artifact.name == "lonely"
        assert artifact.description == ""
        assert artifact.relative_path == "."

    def test_byte_order_mark(self, tmp_path: Path):
        """A UTF-8 BOM does not hide the header."""
        path = tmp_path / "SKILL.md"
        path.write_bytes("\ufeff---\nname: bom\n---\n".encode("utf-8"))

        assert read_artifact(path, tmp_path).name == "bom"

    def test_missing_file(self, tmp_path: Path):
        """Unreadable files raise IndexIOError naming the path."""
        path = tmp_path / "SKILL.md"

        with pytest.raises(IndexIOError, match="SKILL.md") as exc_info:
            read_artifact(path, tmp_path)

        assert exc_info.value.path == path

    def test_invalid_utf8(self, tmp_path: Path):
        """Undecodable files raise IndexIOError."""
        path = tmp_path / "SKILL.md"
        path.write_bytes(b"name: \xff\xfe\xfa\n")

        with pytest.raises(IndexIOError, match="decode"):
            read_artifact(path, tmp_path)
