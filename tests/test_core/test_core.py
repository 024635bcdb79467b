"""Tests for the top-level fix/clean entry points."""

import pytest

from fixmdtables import FILLER, clean_table_alignment, fix_table_alignment
from fixmdtables.config.schema import AlignmentOptions
from fixmdtables.core import get_transform
from fixmdtables.types import Mode


def _count_filler(text: str) -> int:
    return text.count(FILLER)


class TestFixTableAlignment:
    def test_processes_tables(self):
        content = (
            "# Title\n\n"
            "| Status | Description |\n"
            "| ------ | ----------- |\n"
            "| 🌟     | Star        |\n\n"
            "Some text after."
        )
        result = fix_table_alignment(content)
        assert result.startswith("# Title\n\n")
        assert result.endswith("\n\nSome text after.")
        assert FILLER in result

    def test_example_table(self):
        content = "| Status | Meaning |\n| ------ | ------- |\n| ✅     | Complete |"
        lines = fix_table_alignment(content).split("\n")
        assert lines[0] == f"| Status{FILLER}| Meaning |"
        assert lines[1] == f"| -----{FILLER}| ------- |"
        assert lines[2] == "| ✅     | Complete |"

    def test_status_table(self, status_table):
        lines = fix_table_alignment(status_table).split("\n")
        assert lines[0] == f"| Status{FILLER}| Meaning     |"
        assert lines[2] == "| ✅      | Complete    |"
        assert lines[3] == "| 🚧      | In Progress |"
        assert lines[4] == "| ❌      | Failed      |"

    def test_multiple_tables(self):
        content = "| A | B |\n| - | - |\n| 🌟 | X |\n\n| C | D |\n| - | - |\n| 🎉 | Y |"
        lines = fix_table_alignment(content).split("\n")
        assert FILLER in lines[0]
        assert FILLER in lines[4]

    def test_varying_counts(self):
        content = (
            "| Col1   | Col2        |\n"
            "| ------ | ----------- |\n"
            "| ✅     | Text        |\n"
            "| Text   | 🔴 🟡 🟢    |"
        )
        lines = fix_table_alignment(content).split("\n")
        assert _count_filler(lines[0]) == 3
        assert _count_filler(lines[2]) == 2
        assert _count_filler(lines[3]) == 3

    def test_max_glyph_row_without_room(self):
        content = (
            "| Status   | Icons       |\n"
            "| -------- | ----------- |\n"
            "| ✅ Done  | 🔴 🟡 🟢 🔵 ⚪ |\n"
            "| Pending  | 🔴          |"
        )
        lines = fix_table_alignment(content).split("\n")
        assert _count_filler(lines[2]) == 0

    def test_glyph_free_content_unchanged(self):
        content = (
            "# Title\n\nRegular paragraph.\n\n- List item\n\n"
            "| A | B |\n| - | - |\n| X | Y |\n\n```code\nconst x = 1;\n```"
        )
        assert fix_table_alignment(content) == content

    def test_fenced_tables_untouched(self):
        content = (
            "# Example\n\n```markdown\n| Status | Description |\n"
            "| ------ | ----------- |\n| ✅     | Complete    |\n```\n\nSome text."
        )
        assert fix_table_alignment(content) == content

    def test_table_after_fence(self):
        content = "```\ncode\n```\n\n| A | B |\n| - | - |\n| 🌟 | X |"
        assert FILLER in fix_table_alignment(content)

    def test_idempotent(self, status_table):
        once = fix_table_alignment(status_table)
        assert fix_table_alignment(once) == once

    def test_options(self):
        content = "| Kind   |\n| ---- |\n| ℹ️ x |"
        assert fix_table_alignment(content, AlignmentOptions(include_letterlike=False)) == content

    def test_crlf_line_endings(self):
        content = "| Status | Meaning |\r\n| --- | --- |\r\n| ✅ | Done |\r\n"
        result = fix_table_alignment(content)
        assert result == f"| Status{FILLER}| Meaning |\r\n| --{FILLER}| --- |\r\n| ✅ | Done |\r\n"

    @pytest.mark.parametrize(
        "content",
        ["", "\n", "|", "||\n||", "| a |\n| - |", "```\n| ✅ |\n| - |", "| ✅ |\n|-|\n|"],
    )
    def test_never_raises(self, content):
        assert isinstance(fix_table_alignment(content), str)
        assert isinstance(clean_table_alignment(content), str)


class TestCleanTableAlignment:
    def test_removes_filler_from_tables(self):
        content = f"| Header{FILLER}| Header |\n| ---{FILLER}| --- |\n| 🌟 | Text |"
        result = clean_table_alignment(content)
        assert FILLER not in result
        assert "| Header  | Header |" in result

    def test_fenced_filler_kept(self):
        content = f"```\n| Header{FILLER} |\n```"
        assert clean_table_alignment(content) == content

    def test_non_table_filler_kept(self):
        content = f"# Title\n\nSome paragraph with {FILLER} space."
        assert clean_table_alignment(content) == content

    def test_clean_then_fix_is_stable(self, status_table):
        fixed = fix_table_alignment(status_table)
        assert fix_table_alignment(clean_table_alignment(fixed)) == fixed

    @pytest.mark.parametrize(
        "content",
        [
            "| Status | Meaning |\n| ------ | ------- |\n| ✅     | Complete |",
            "| Mark |\n| :---: |\n| ✅ |",
            "| Col1   | Col2        |\n| :----- | ----------: |\n| ✅     | Text        |\n"
            "| Text   | 🔴 🟡 🟢    |",
        ],
    )
    def test_repeated_clean_fix_cycles(self, content):
        fixed = fix_table_alignment(content)
        separator = fixed.split("\n")[1]
        current = fixed
        for _ in range(4):
            current = fix_table_alignment(clean_table_alignment(current))
            assert current.split("\n")[1] == separator
        assert current == fixed


class TestGetTransform:
    def test_fix(self):
        transform = get_transform(Mode.FIX)
        assert FILLER in transform("| A |\n| - |\n| ✅ |")

    def test_clean_by_name(self):
        transform = get_transform("clean")
        assert transform(f"| A{FILLER}|\n| - |") == "| A  |\n| - |"

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            get_transform("reformat")
