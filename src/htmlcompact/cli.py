"""Command-line interface for htmlcompact."""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional

# Verify core dependencies
try:
    import bs4  # noqa: F401
    import pydantic  # noqa: F401
    import rich  # noqa: F401
    import yaml  # noqa: F401
except ImportError as e:
    print(f"\nERROR: Missing required dependency: {e.name}", file=sys.stderr)
    print("\nhtmlcompact requires all core dependencies to be installed.", file=sys.stderr)
    print("\nRecommended fixes:", file=sys.stderr)
    print("  1. For pip users: pip install --upgrade --force-reinstall htmlcompact", file=sys.stderr)
    print("  2. For development: pip install -e .[dev]", file=sys.stderr)
    sys.exit(1)

from rich.console import Console
from rich.markup import escape

from . import __version__
from .clipboard import write_clipboard
from .core.compressor import Compressor
from .logging_config import setup_logging
from .models.config import CompressConfig


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="htmlcompact",
        description="Compress an HTML file into a compact, LLM-friendly form",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Compress and copy to the clipboard
  htmlcompact page.html

  # Write to a file instead
  htmlcompact page.html -o page.min.html

  # Pipe the result
  htmlcompact page.html --stdout | wc -c

  # Collapse pairs of repeated siblings too
  htmlcompact page.html --profile aggressive

  # Use a config file
  htmlcompact page.html --config htmlcompact.yaml
        """,
    )

    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="HTML file to compress",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Run diagnostic checks",
    )

    # Configuration
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--profile",
        "-p",
        choices=["balanced", "aggressive", "minimal"],
        default=None,
        help="Preset profile (default: balanced)",
    )

    # Deduplication
    dedup_group = parser.add_argument_group("deduplication")
    dedup_group.add_argument(
        "--min-repeat",
        type=int,
        default=None,
        metavar="N",
        help="Collapse sibling groups of at least N structurally identical elements (default: 3)",
    )
    dedup_group.add_argument(
        "--no-dedup",
        action="store_true",
        help="Disable structural deduplication",
    )
    dedup_group.add_argument(
        "--marker-style",
        choices=["comment", "text"],
        default=None,
        help="Node type used for collapsed-group markers (default: comment)",
    )

    # Cleanup
    cleanup_group = parser.add_argument_group("cleanup")
    cleanup_group.add_argument(
        "--keep-generated",
        action="store_true",
        help="Keep machine-generated class names and ids",
    )
    cleanup_group.add_argument(
        "--max-url-length",
        type=int,
        default=None,
        metavar="N",
        help="Truncate href/src values longer than N characters (default: 80)",
    )
    cleanup_group.add_argument(
        "--max-text-length",
        type=int,
        default=None,
        metavar="N",
        help="Truncate text runs longer than N characters (default: 300)",
    )
    cleanup_group.add_argument(
        "--max-passes",
        type=int,
        default=None,
        metavar="N",
        help="Maximum empty-element cleanup passes (default: 10)",
    )

    # Output control
    output_group = parser.add_argument_group("output control")
    destination = output_group.add_mutually_exclusive_group()
    destination.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the compressed HTML to this file instead of the clipboard",
    )
    destination.add_argument(
        "--stdout",
        action="store_true",
        help="Print the compressed HTML instead of copying it to the clipboard",
    )
    output_group.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write logs to this file",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress the size report",
    )

    return parser


def build_config(args: argparse.Namespace) -> CompressConfig:
    """
    Build the configuration from an optional config file and CLI overrides.

    Raises:
        pydantic.ValidationError: If a value is out of range
        FileNotFoundError: If the config file does not exist
    """
    config_kwargs: dict[str, Any] = {}
    if args.config:
        config_kwargs = CompressConfig.from_yaml_file(args.config).model_dump(exclude_unset=True)

    def section(name: str) -> dict[str, Any]:
        return config_kwargs.setdefault(name, {})

    if args.profile:
        config_kwargs["profile"] = args.profile

    # Dedup settings
    if args.min_repeat is not None:
        section("dedup")["min_repeat_count"] = args.min_repeat
    if args.no_dedup:
        section("dedup")["enabled"] = False
    if args.marker_style:
        section("dedup")["marker_style"] = args.marker_style

    # Cleanup settings
    if args.keep_generated:
        section("attributes")["drop_generated_identifiers"] = False
    if args.max_url_length is not None:
        section("truncation")["max_url_length"] = args.max_url_length
    if args.max_text_length is not None:
        section("truncation")["max_text_length"] = args.max_text_length
    if args.max_passes is not None:
        section("cleanup")["max_passes"] = args.max_passes

    # Log level
    if args.verbose:
        config_kwargs["log_level"] = "DEBUG"
    elif args.quiet:
        config_kwargs["log_level"] = "ERROR"
    if args.log_file:
        config_kwargs["log_file"] = args.log_file

    return CompressConfig(**config_kwargs)


def run_compress(args: argparse.Namespace) -> int:
    """Compress the given file and deliver the result."""
    # Keep stdout free for the HTML when --stdout is used
    console = Console(stderr=args.stdout)

    if not args.file:
        console.print("[red]Error:[/red] Please provide an HTML file to compress")
        return 1

    try:
        config = build_config(args)
    except Exception as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1

    setup_logging(config.log_level, str(config.log_file) if config.log_file else None)

    try:
        html = args.file.read_text(encoding="utf-8")
    except FileNotFoundError:
        console.print(f"[red]Error:[/red] File '{escape(str(args.file))}' not found")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    try:
        result = Compressor(config).compress(html)

        if args.output:
            args.output.write_text(result.html, encoding="utf-8")
            done_message = f"Compressed HTML written to {args.output}"
        elif args.stdout:
            sys.stdout.write(result.html + "\n")
            done_message = None
        else:
            write_clipboard(result.html)
            done_message = "Compressed HTML copied to clipboard!"
    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    if not args.quiet:
        console.print(f"Original: {result.original_length:,} characters")
        console.print(f"Compressed: {result.compressed_length:,} characters")
        console.print(f"Reduction: {result.reduction_percent:.1f}%")
        if args.verbose:
            for key, value in sorted(result.stats.items()):
                console.print(f"  {key}: {value}")
        if done_message:
            console.print(f"\n[green]✓[/green] {escape(done_message)}")

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.doctor:
        from .doctor import run_doctor

        return run_doctor()

    return run_compress(args)


if __name__ == "__main__":
    sys.exit(main())
