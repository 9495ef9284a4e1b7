"""
Pydantic-based configuration system for the Bookmark Converter.

Settings are grouped into parsing, output and logging sections and can be
loaded from a TOML or JSON file, with environment variable and command-line
overrides.
"""

import codecs
import json
import os
from pathlib import Path
from typing import Dict, List, Literal, Optional

import toml
from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
)

DEFAULT_CONFIG_FILENAMES = ("bookmark_converter.toml", "bookmark_converter.json")

ENV_LOG_LEVEL = "BOOKMARK_CONVERTER_LOG_LEVEL"
ENV_PARSER = "BOOKMARK_CONVERTER_PARSER"


class ParsingConfig(BaseModel):
    """Input decoding and document parsing settings."""

    parser_backend: Literal["html.parser", "lxml"] = Field(
        default="html.parser",
        description="BeautifulSoup tree builder",
        json_schema_extra={
            "error_msg": "Parser backend must be 'html.parser' or 'lxml'. "
            "The lxml backend requires the lxml package."
        },
    )
    encodings: List[str] = Field(
        default_factory=lambda: ["utf-8-sig", "iso-8859-1"],
        min_length=1,
        description="Encodings tried in order when decoding input bytes",
        json_schema_extra={
            "error_msg": "At least one input encoding is required. "
            "Recommended: utf-8-sig followed by iso-8859-1."
        },
    )
    max_nesting_depth: int = Field(
        default=200,
        ge=1,
        le=500,
        description="Maximum folder nesting depth",
        json_schema_extra={
            "error_msg": "Max nesting depth must be between 1 and 500. "
            "Real bookmark hierarchies rarely exceed 20 levels."
        },
    )

    @field_validator("encodings")
    @classmethod
    def validate_encodings(cls, v):
        """Reject codec names Python does not know."""
        for encoding in v:
            try:
                codecs.lookup(encoding)
            except LookupError:
                raise ValueError(f"Unknown encoding: {encoding}")
        return v


class OutputConfig(BaseModel):
    """JSON output settings."""

    indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Spaces per indentation level",
        json_schema_extra={
            "error_msg": "Indent must be between 0 and 8 spaces. "
            "Use compact = true for single-line output."
        },
    )
    compact: bool = Field(
        default=False,
        description="Emit JSON on a single line",
    )
    ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters",
    )


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level for console and file output",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("log_file", mode="before")
    @classmethod
    def validate_log_file(cls, v):
        """Ensure the log file is a Path object."""
        if v == "":
            return None
        if isinstance(v, str):
            return Path(v)
        return v


class ConverterConfig(BaseModel):
    """Main configuration model."""

    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationManager:
    """Manages loading and validation of configuration from multiple sources."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)
        """
        self._config: Optional[ConverterConfig] = None
        self._load_configuration(config_path)

    def _get_default_config_paths(self) -> List[Path]:
        """Get list of default configuration file paths to try."""
        return [Path.cwd() / name for name in DEFAULT_CONFIG_FILENAMES]

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data: Dict = {}

        if config_path:
            config_data = self._load_config_file(Path(config_path))
        else:
            for path in self._get_default_config_paths():
                if path.exists():
                    config_data = self._load_config_file(path)
                    break

        self._apply_env_overrides(config_data)

        try:
            self._config = ConverterConfig(**config_data)
        except ValidationError as e:
            raise ValueError(format_config_error(e))

    def _load_config_file(self, config_path: Path) -> Dict:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            if config_path.suffix.lower() == ".toml":
                return toml.load(config_path)
            elif config_path.suffix.lower() == ".json":
                with open(config_path, "r", encoding="utf-8") as f:
                    return json.load(f)
            else:
                raise ValueError(
                    f"Unsupported configuration file format: {config_path.suffix}"
                )
        except (OSError, ValueError, toml.TomlDecodeError) as e:
            raise ValueError(f"Failed to load configuration from {config_path}: {e}")

    def _apply_env_overrides(self, config_data: Dict) -> None:
        """Apply environment variable overrides on top of file values."""
        log_level = os.getenv(ENV_LOG_LEVEL)
        if log_level:
            config_data.setdefault("logging", {})["level"] = log_level

        parser_backend = os.getenv(ENV_PARSER)
        if parser_backend:
            config_data.setdefault("parsing", {})["parser_backend"] = parser_backend

    def update_from_cli_args(self, args: Dict) -> None:
        """Update configuration from command-line arguments."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")

        config_dict = self._config.model_dump()

        if args.get("indent") is not None:
            config_dict["output"]["indent"] = args["indent"]

        if args.get("compact"):
            config_dict["output"]["compact"] = True

        if args.get("parser_backend"):
            config_dict["parsing"]["parser_backend"] = args["parser_backend"]

        if args.get("verbose"):
            config_dict["logging"]["level"] = "DEBUG"

        if args.get("log_file"):
            config_dict["logging"]["log_file"] = args["log_file"]

        try:
            self._config = ConverterConfig(**config_dict)
        except ValidationError as e:
            raise ValueError(format_config_error(e))

    @property
    def config(self) -> ConverterConfig:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config

    @staticmethod
    def create_sample_config(output_path: Path, format: str = "toml") -> None:
        """Create a sample configuration file."""
        sample_config = {
            "parsing": {
                "parser_backend": "html.parser",
                "encodings": ["utf-8-sig", "iso-8859-1"],
                "max_nesting_depth": 200,
            },
            "output": {"indent": 2, "compact": False, "ensure_ascii": False},
            "logging": {"level": "WARNING"},
        }

        if format.lower() == "toml":
            with open(output_path, "w", encoding="utf-8") as f:
                toml.dump(sample_config, f)
        elif format.lower() == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(sample_config, f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")


class ConfigurationErrorFormatter:
    """Formats Pydantic validation errors into user-friendly messages."""

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        """
        Convert Pydantic ValidationError into a user-friendly error message.

        Args:
            error: Pydantic ValidationError instance

        Returns:
            Formatted error message
        """
        error_messages = []

        for error_detail in error.errors():
            location = ConfigurationErrorFormatter._format_error_location(
                error_detail["loc"]
            )
            error_messages.append(
                ConfigurationErrorFormatter._format_by_error_type(
                    location,
                    error_detail["type"],
                    error_detail,
                    error_detail.get("input", "N/A"),
                )
            )

        header = "Configuration Validation Failed:\n"
        separator = "-" * 60 + "\n"
        footer = (
            "\n\nTips:\n"
            "- Check the configuration file format (TOML or JSON)\n"
            "- Ensure numeric values are within the allowed ranges"
        )

        return header + separator + "\n".join(error_messages) + footer

    @staticmethod
    def _format_error_location(location: tuple) -> str:
        """Format the error location path."""
        if not location:
            return "Configuration"

        path_parts = []
        for part in location:
            if isinstance(part, str):
                path_parts.append(part)
            else:
                path_parts.append(f"[{part}]")

        return " -> ".join(path_parts)

    @staticmethod
    def _format_by_error_type(
        location: str, error_type: str, error_detail: dict, input_value
    ) -> str:
        """Format error message based on Pydantic error type."""

        if error_type == "missing":
            return f"{location}: Required field is missing"

        elif error_type in [
            "greater_than_equal",
            "less_than_equal",
            "greater_than",
            "less_than",
        ]:
            ctx = error_detail.get("ctx", {})
            limit = next(iter(ctx.values()), "limit")
            operator = {
                "greater_than_equal": ">=",
                "less_than_equal": "<=",
                "greater_than": ">",
                "less_than": "<",
            }.get(error_type, "?")
            return f"{location}: Value must be {operator} {limit} (got: {input_value})"

        elif error_type == "literal_error":
            expected = error_detail.get("ctx", {}).get("expected", "valid option")
            return f"{location}: Must be one of {expected} (got: {input_value})"

        elif error_type == "too_short":
            return f"{location}: At least one value is required (got: {input_value})"

        else:
            msg = error_detail.get("msg", "Invalid configuration value")
            return f"{location}: {msg} (got: {input_value})"


def format_config_error(error: Exception) -> str:
    """
    Format any configuration-related error into a user-friendly message.

    Args:
        error: Exception that occurred during configuration

    Returns:
        Formatted error message
    """
    if isinstance(error, ValidationError):
        return ConfigurationErrorFormatter.format_validation_error(error)

    elif isinstance(error, FileNotFoundError):
        return (
            f"Configuration File Not Found:\n"
            f"Could not find configuration file: {error.filename or error}\n\n"
            f"Use the default configuration by omitting the --config parameter "
            f"or check that the file path is correct."
        )

    else:
        return f"Configuration Error:\n{error}"
