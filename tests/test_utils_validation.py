"""
Tests for command-line argument validation and the exception hierarchy.
"""

from pathlib import Path

import pytest

from bookmark_converter.core.exporters import ExportError
from bookmark_converter.utils.error_handler import (
    BookmarkConverterError,
    ConfigurationError,
    ConversionError,
    DocumentParseError,
    InputReadError,
    StructureParseError,
    ValidationError,
)
from bookmark_converter.utils.validation import (
    validate_config_file,
    validate_conflicting_arguments,
    validate_indent,
    validate_input_file,
    validate_output_file,
)


class TestValidateInputFile:
    """Tests for validate_input_file."""

    def test_none_means_stdin(self):
        assert validate_input_file(None) is None

    def test_existing_file(self, simple_bookmark_file):
        """Test an existing file is returned as an absolute path."""
        result = validate_input_file(str(simple_bookmark_file))

        assert result == simple_bookmark_file.absolute()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValidationError, match="does not exist"):
            validate_input_file(tmp_path / "missing.html")

    def test_directory(self, tmp_path):
        with pytest.raises(ValidationError, match="not a file"):
            validate_input_file(tmp_path)


class TestValidateOutputFile:
    """Tests for validate_output_file."""

    def test_none_means_stdout(self):
        assert validate_output_file(None) is None

    def test_missing_parent_directory_not_created(self, tmp_path):
        """Test missing parent directories are accepted but left uncreated."""
        target = tmp_path / "new" / "nested" / "out.json"

        result = validate_output_file(target)

        assert result == target.absolute()
        assert not (tmp_path / "new").exists()

    def test_parent_is_a_file(self, tmp_path):
        """Test an output path below a regular file is rejected."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(ValidationError, match="not a directory"):
            validate_output_file(blocker / "sub" / "out.json")

    def test_directory_rejected(self, tmp_path):
        with pytest.raises(ValidationError, match="is a directory"):
            validate_output_file(tmp_path)


class TestValidateConfigFile:
    """Tests for validate_config_file."""

    @pytest.mark.parametrize("name", ["settings.toml", "settings.json", "SETTINGS.TOML"])
    def test_supported_extensions(self, tmp_path, name):
        path = tmp_path / name
        path.write_text("", encoding="utf-8")

        assert validate_config_file(path) == path.absolute()

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ValidationError, match="must be .toml or .json"):
            validate_config_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValidationError, match="does not exist"):
            validate_config_file(tmp_path / "missing.toml")


class TestArgumentChecks:
    """Tests for indent and conflicting argument checks."""

    @pytest.mark.parametrize("indent", [None, 0, 2, 8])
    def test_valid_indent(self, indent):
        assert validate_indent(indent) == indent

    def test_negative_indent(self):
        with pytest.raises(ValidationError, match="negative"):
            validate_indent(-1)

    def test_large_indent(self):
        with pytest.raises(ValidationError, match="exceed 8"):
            validate_indent(9)

    def test_indent_with_compact(self):
        with pytest.raises(ValidationError, match="--indent and --compact"):
            validate_conflicting_arguments(2, True)

    def test_compact_alone(self):
        validate_conflicting_arguments(None, True)


class TestErrorHierarchy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "error_class",
        [InputReadError, DocumentParseError, StructureParseError],
    )
    def test_conversion_errors(self, error_class):
        """Test every conversion failure is a ConversionError."""
        assert issubclass(error_class, ConversionError)
        assert issubclass(error_class, BookmarkConverterError)

    @pytest.mark.parametrize(
        "error_class", [ValidationError, ConfigurationError, ExportError]
    )
    def test_other_errors_share_base(self, error_class):
        assert issubclass(error_class, BookmarkConverterError)
        assert not issubclass(error_class, ConversionError)

    def test_structure_error_without_folder(self):
        error = StructureParseError("too deep")

        assert str(error) == "too deep"
        assert error.folder_name is None

    def test_structure_error_wrap(self):
        """Test wrapping prefixes the folder name and keeps the cause."""
        inner = StructureParseError("too deep")

        error = StructureParseError.wrap("Work", inner)

        assert str(error) == "parsing children for folder 'Work': too deep"
        assert error.original_error is inner

    def test_export_error_message(self):
        """Test export errors include format, path and cause."""
        error = ExportError(
            "write failed",
            format_name="JSON",
            path=Path("out.json"),
            original_error=OSError("disk full"),
        )

        assert str(error) == (
            "[JSON] write failed (path: out.json) Caused by: OSError: disk full"
        )
