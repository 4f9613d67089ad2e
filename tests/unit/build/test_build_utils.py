"""
Unit tests for build path utilities.
"""

from idlbridge.build.build_utils import (
    fix_separator,
    format_command_line,
    get_canonical_path,
    to_relative_and_fix_separator,
)


class TestFixSeparator:
    """Test suite for fix_separator."""

    def test_backslashes_replaced(self):
        assert fix_separator("target\\generated\\idl") == "target/generated/idl"

    def test_forward_slashes_untouched(self):
        assert fix_separator("target/generated/idl") == "target/generated/idl"


class TestToRelativeAndFixSeparator:
    """Test suite for to_relative_and_fix_separator."""

    def test_same_directory_is_dot(self, tmp_path):
        assert to_relative_and_fix_separator(tmp_path, tmp_path) == "."

    def test_dot_target_is_dot(self, tmp_path):
        assert to_relative_and_fix_separator(tmp_path, ".") == "."

    def test_descendant_strips_prefix(self, tmp_path):
        target = tmp_path / "target" / "idl"

        assert to_relative_and_fix_separator(tmp_path, target) == "target/idl"

    def test_relative_target_resolved_against_base(self, tmp_path):
        assert to_relative_and_fix_separator(tmp_path, "target/idl") == "target/idl"

    def test_idempotent(self, tmp_path):
        first = to_relative_and_fix_separator(tmp_path, tmp_path / "target" / "idl")
        second = to_relative_and_fix_separator(tmp_path, first)

        assert first == second

    def test_outside_base_is_absolute(self, tmp_path):
        base = tmp_path / "project"
        base.mkdir()
        other = tmp_path / "elsewhere" / "idl"

        result = to_relative_and_fix_separator(base, other)

        assert result == fix_separator(get_canonical_path(other))

    def test_sibling_with_common_name_prefix_is_not_descendant(self, tmp_path):
        base = tmp_path / "proj"
        sibling = tmp_path / "project" / "idl"

        result = to_relative_and_fix_separator(base, sibling)

        assert result == fix_separator(get_canonical_path(sibling))

    def test_backslashes_normalized(self, tmp_path):
        result = to_relative_and_fix_separator(tmp_path, "target\\generated\\idl")

        assert "\\" not in result
        assert result == "target/generated/idl"

    def test_replace_slashes_with_dashes(self, tmp_path):
        result = to_relative_and_fix_separator(
            tmp_path, tmp_path / "target" / "idl", replace_slashes_with_dashes=True
        )

        assert result == "target-idl"

    def test_replace_slashes_with_dashes_absolute(self, tmp_path):
        base = tmp_path / "project"
        other = tmp_path / "elsewhere"

        result = to_relative_and_fix_separator(base, other, replace_slashes_with_dashes=True)

        assert "/" not in result
        assert ":" not in result


class TestFormatCommandLine:
    """Test suite for format_command_line."""

    def test_joins_class_and_arguments(self):
        result = format_command_line("org.jacorb.idl.parser", ["-d", "out", "a.idl"])

        assert result == "org.jacorb.idl.parser -d out a.idl"
