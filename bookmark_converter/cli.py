"""
Command-line interface for the Bookmark Converter.

This module provides the CLI that converts a Netscape bookmark file export
into a hierarchical JSON document.
"""

import argparse
import logging
import sys
from pathlib import Path

from bookmark_converter import __version__
from bookmark_converter.config.configuration import Configuration
from bookmark_converter.config.pydantic_config import (
    ConfigurationManager,
    format_config_error,
)
from bookmark_converter.core.data_models import summarize_items
from bookmark_converter.core.exporters import ExportError, JSONExporter
from bookmark_converter.core.netscape_html_parser import NetscapeHTMLParser
from bookmark_converter.utils.error_handler import (
    BookmarkConverterError,
    ConfigurationError,
    ValidationError,
)
from bookmark_converter.utils.logging_setup import setup_logging
from bookmark_converter.utils.validation import (
    validate_config_file,
    validate_conflicting_arguments,
    validate_indent,
    validate_input_file,
    validate_output_file,
)


class CLIInterface:
    """Command line interface for bookmark conversion."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser."""
        parser = argparse.ArgumentParser(
            prog="bookmark-converter",
            description=(
                "Convert a Netscape bookmark file export (Chrome, Firefox, "
                "Edge, ...) to hierarchical JSON"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  bookmark-converter -f bookmarks.html
  bookmark-converter -f bookmarks.html -o bookmarks.json
  cat bookmarks.html | bookmark-converter --compact
  bookmark-converter -f bookmarks.html --config bookmark_converter.toml -v
  bookmark-converter --create-config toml

Output Format:
  A JSON array of items. Each item has a "type" of "bookmark", "folder" or
  "separator". Folders hold their items under "children". Empty fields
  are omitted.

Configuration:
  Settings can be provided in a TOML or JSON file. Without --config,
  bookmark_converter.toml or bookmark_converter.json in the current
  directory is used when present.

  Example configuration (bookmark_converter.toml):
  [parsing]
  parser_backend = "html.parser"
  encodings = ["utf-8-sig", "iso-8859-1"]

  [output]
  indent = 2

  [logging]
  level = "INFO"
            """,
        )

        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )

        # Configuration template generation
        parser.add_argument(
            "--create-config",
            choices=["toml", "json"],
            help="Write a sample configuration file (bookmark_converter.toml or "
            "bookmark_converter.json) to the current directory and exit",
        )

        parser.add_argument(
            "--file",
            "-f",
            help="Path to the Netscape bookmark file. Reads from stdin if not provided.",
        )
        parser.add_argument(
            "--output",
            "-o",
            help="Write JSON to this file instead of stdout",
        )
        parser.add_argument(
            "--config",
            "-c",
            help="Custom configuration file path (TOML or JSON format)",
        )
        parser.add_argument(
            "--indent",
            type=int,
            help="Spaces per JSON indentation level (default: 2)",
        )
        parser.add_argument(
            "--compact",
            action="store_true",
            help="Emit JSON on a single line",
        )
        parser.add_argument(
            "--parser",
            dest="parser_backend",
            choices=["html.parser", "lxml"],
            help="BeautifulSoup tree builder (default: html.parser)",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Enable debug logging and print a conversion summary to stderr",
        )
        parser.add_argument(
            "--log-file",
            help="Also write log messages to this file",
        )

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> dict:
        """
        Validate all arguments and return processed values.

        Args:
            args: Parsed arguments from argparse

        Returns:
            Dictionary of validated and processed arguments

        Raises:
            ValidationError: If any validation fails
        """
        input_path = validate_input_file(args.file)
        output_path = validate_output_file(args.output)
        config_path = validate_config_file(args.config)
        indent = validate_indent(args.indent)

        validate_conflicting_arguments(indent, args.compact)

        if input_path is None and sys.stdin.isatty():
            raise ValidationError(
                "No input file provided and no data on stdin.\n"
                "Usage: bookmark-converter -f <filepath>\n"
                "   or: cat bookmarks.html | bookmark-converter"
            )

        return {
            "input_path": input_path,
            "output_path": output_path,
            "config_path": config_path,
            "indent": indent,
            "compact": args.compact,
            "parser_backend": args.parser_backend,
            "verbose": args.verbose,
            "log_file": args.log_file,
        }

    def process_arguments(self, validated_args: dict) -> Configuration:
        """
        Load configuration, apply argument overrides and set up logging.

        Raises:
            ConfigurationError: If the configuration cannot be loaded
        """
        try:
            config = Configuration(validated_args["config_path"])
            config.update_from_args(validated_args)
        except (ValueError, FileNotFoundError) as e:
            raise ConfigurationError(format_config_error(e)) from e

        setup_logging(config.config, verbose=validated_args["verbose"])

        return config

    def convert(self, validated_args: dict, config: Configuration) -> int:
        """Run the conversion and write the JSON output."""
        logger = logging.getLogger(__name__)

        parser = NetscapeHTMLParser.from_config(config.config)
        exporter = JSONExporter.from_config(config.config)

        input_path = validated_args["input_path"]
        if input_path is not None:
            logger.info(f"Input file: {input_path}")
            items = parser.parse_file(input_path)
        else:
            logger.info("Reading bookmarks from stdin")
            items = parser.parse_stream(sys.stdin.buffer)

        output_path = validated_args["output_path"]
        if output_path is not None:
            result = exporter.export(items, output_path)
            for warning in result.warnings:
                logger.warning(warning)
        else:
            exporter.write(items, sys.stdout)

        if validated_args["verbose"]:
            self._print_summary(validated_args, parser, items)

        return 0

    def _print_summary(self, validated_args: dict, parser, items) -> None:
        summary = summarize_items(items)
        input_path = validated_args["input_path"]

        print("Conversion summary:", file=sys.stderr)
        print(f"  Input: {input_path or 'stdin'}", file=sys.stderr)
        print(f"  Input size: {parser.input_size / 1024:.1f} KB", file=sys.stderr)
        if not parser.has_netscape_doctype:
            print("  Warning: Netscape DOCTYPE not found", file=sys.stderr)
        print(f"  Output: {validated_args['output_path'] or 'stdout'}", file=sys.stderr)
        print(f"  Top-level items: {len(items)}", file=sys.stderr)
        print(f"  Bookmarks: {summary['bookmarks']}", file=sys.stderr)
        print(f"  Folders: {summary['folders']}", file=sys.stderr)
        print(f"  Separators: {summary['separators']}", file=sys.stderr)
        print(f"  Max folder depth: {summary['max_depth']}", file=sys.stderr)

    def _handle_create_config(self, config_format: str) -> int:
        """Write a sample configuration file to the current directory."""
        output_path = Path.cwd() / f"bookmark_converter.{config_format}"

        if output_path.exists():
            print(
                f"Configuration file already exists: {output_path}",
                file=sys.stderr,
            )
            return 1

        ConfigurationManager.create_sample_config(output_path, format=config_format)
        print(f"Created configuration file: {output_path}", file=sys.stderr)
        return 0

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        try:
            parsed_args = self.parse_args(args)

            if parsed_args.create_config:
                return self._handle_create_config(parsed_args.create_config)

            validated_args = self.validate_args(parsed_args)
            config = self.process_arguments(validated_args)
            return self.convert(validated_args, config)

        except ValidationError as e:
            print(f"Validation Error: {e}", file=sys.stderr)
            return 1
        except ConfigurationError as e:
            print(str(e), file=sys.stderr)
            return 1
        except ExportError as e:
            print(f"Error writing JSON: {e}", file=sys.stderr)
            return 1
        except BookmarkConverterError as e:
            print(f"Error parsing bookmarks: {e}", file=sys.stderr)
            logging.getLogger(__name__).debug("Conversion failed", exc_info=True)
            return 1
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            logging.getLogger(__name__).debug("Unexpected error in CLI", exc_info=True)
            return 1


def main(args=None):
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
