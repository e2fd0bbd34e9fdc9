"""
Command-line interface for AASX Package.

Usage:
    aasx info package.aasx
    aasx info package.aasx --json
    aasx list package.aasx
    aasx extract package.aasx /aasx/aas.json --output aas.json
    aasx create out.aasx --spec aas.json --supplementary manual.pdf --thumbnail thumb.png
    aasx version
"""

import argparse
import json
import logging
import mimetypes
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .api import Packaging, PackageRead
from .config import PackageConfig
from .exceptions import AasxPackageError
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)

SPEC_DIR = "/aasx"
SUPPLEMENTARY_DIR = "/aasx-suppl"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="aasx",
        description="AASX Package - read and write AASX packages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  aasx info package.aasx
  aasx list package.aasx
  aasx extract package.aasx /aasx/aas.json -o aas.json
  aasx create out.aasx --spec aas.json --supplementary manual.pdf:application/pdf
  aasx version
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: AASX_LOG_LEVEL or WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Info command
    info_parser = subparsers.add_parser("info", help="Show specs, supplementary files and thumbnail")
    info_parser.add_argument("input", help="Input AASX file")
    info_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )

    # List command
    list_parser = subparsers.add_parser("list", help="List all parts")
    list_parser.add_argument("input", help="Input AASX file")

    # Extract command
    extract_parser = subparsers.add_parser("extract", help="Write the content of a part to a file")
    extract_parser.add_argument("input", help="Input AASX file")
    extract_parser.add_argument("part", help="Part path, e.g. /aasx/aas.json")
    extract_parser.add_argument(
        "-o", "--output",
        help="Output file path (default: part file name)"
    )

    # Create command
    create_parser_ = subparsers.add_parser("create", help="Create a package from local files")
    create_parser_.add_argument("output", help="Output AASX file")
    create_parser_.add_argument(
        "--spec",
        action="append",
        default=[],
        metavar="FILE[:CONTENT_TYPE]",
        help="Spec file, stored under /aasx/ (repeatable)"
    )
    create_parser_.add_argument(
        "--supplementary",
        action="append",
        default=[],
        metavar="FILE[:CONTENT_TYPE]",
        help="Supplementary file related to every spec, stored under /aasx-suppl/ (repeatable)"
    )
    create_parser_.add_argument(
        "--thumbnail",
        metavar="FILE[:CONTENT_TYPE]",
        help="Thumbnail image, stored at the package root"
    )

    # Version command
    subparsers.add_parser("version", help="Show version information")

    return parser


def _parse_file_arg(value: str) -> Tuple[Path, str]:
    """Split ``FILE[:CONTENT_TYPE]``; the content type is guessed when omitted."""
    path_str, sep, content_type = value.rpartition(":")
    # A colon can also be part of the path (Windows drives); content types contain "/"
    if not sep or "/" not in content_type:
        path_str, content_type = value, ""

    path = Path(path_str)
    if not content_type:
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    return path, content_type


def _package_info(pkg: PackageRead, input_path: Path) -> dict:
    thumbnail = pkg.thumbnail()
    return {
        "file": str(input_path),
        "size_bytes": input_path.stat().st_size,
        "origin": pkg.origin.path,
        "parts": len(pkg.parts()),
        "specs": [
            {"path": spec.path, "content_type": spec.content_type, "size": spec.size}
            for spec in pkg.specs()
        ],
        "supplementary_relationships": [
            {"spec": rel.spec.path, "supplementary": rel.supplementary.path}
            for rel in pkg.supplementary_relationships()
        ],
        "thumbnail": thumbnail.path if thumbnail else None,
    }


def cmd_info(args, console: Console) -> int:
    """Handle info command."""
    input_path = Path(args.input)
    if not input_path.exists():
        console.print(f"[red]Error: File not found: {escape(str(input_path))}[/red]")
        return 1

    with Packaging(args.config).open_read(input_path) as pkg:
        info = _package_info(pkg, input_path)

    if args.json:
        console.print_json(json.dumps(info))
        return 0

    console.print(f"File: {info['file']} ({info['size_bytes']:,} bytes)")
    console.print(f"Origin: {info['origin']}")
    console.print(f"Parts: {info['parts']}")
    console.print(f"Thumbnail: {info['thumbnail'] or '-'}")

    specs_table = Table(title="Specs")
    specs_table.add_column("Path", style="cyan")
    specs_table.add_column("Content type", style="magenta")
    specs_table.add_column("Size", justify="right")
    for spec in info["specs"]:
        specs_table.add_row(spec["path"], spec["content_type"], f"{spec['size']:,}")
    console.print(specs_table)

    if info["supplementary_relationships"]:
        suppl_table = Table(title="Supplementary files")
        suppl_table.add_column("Spec", style="cyan")
        suppl_table.add_column("Supplementary", style="magenta")
        for rel in info["supplementary_relationships"]:
            suppl_table.add_row(rel["spec"], rel["supplementary"])
        console.print(suppl_table)

    return 0


def cmd_list(args, console: Console) -> int:
    """Handle list command."""
    input_path = Path(args.input)
    if not input_path.exists():
        console.print(f"[red]Error: File not found: {escape(str(input_path))}[/red]")
        return 1

    table = Table(title=str(input_path))
    table.add_column("Path", style="cyan")
    table.add_column("Content type", style="magenta")
    table.add_column("Size", justify="right")

    with Packaging(args.config).open_read(input_path) as pkg:
        for part in pkg.parts():
            table.add_row(part.path, part.content_type, f"{part.size:,}")

    console.print(table)
    return 0


def cmd_extract(args, console: Console) -> int:
    """Handle extract command."""
    input_path = Path(args.input)
    if not input_path.exists():
        console.print(f"[red]Error: File not found: {escape(str(input_path))}[/red]")
        return 1

    with Packaging(args.config).open_read(input_path) as pkg:
        part = pkg.must_part(args.part)
        output_path = Path(args.output) if args.output else Path(Path(part.path).name)
        output_path.write_bytes(part.read_bytes())

    console.print(f"Extracted {part.path} -> {output_path} ({part.size:,} bytes)")
    return 0


def cmd_create(args, console: Console) -> int:
    """Handle create command."""
    files: List[Tuple[str, Path, str]] = []
    for value in args.spec:
        files.append(("spec", *_parse_file_arg(value)))
    for value in args.supplementary:
        files.append(("supplementary", *_parse_file_arg(value)))
    if args.thumbnail:
        files.append(("thumbnail", *_parse_file_arg(args.thumbnail)))

    for _, path, _ in files:
        if not path.exists():
            console.print(f"[red]Error: File not found: {escape(str(path))}[/red]")
            return 1

    with Packaging(args.config).create(args.output) as pkg:
        specs = []
        supplementaries = []
        for role, path, content_type in files:
            if role == "spec":
                part = pkg.put_part(f"{SPEC_DIR}/{path.name}", content_type, path.read_bytes())
                pkg.make_spec(part)
                specs.append(part)
            elif role == "supplementary":
                part = pkg.put_part(f"{SUPPLEMENTARY_DIR}/{path.name}", content_type, path.read_bytes())
                supplementaries.append(part)
            else:
                part = pkg.put_part(f"/{path.name}", content_type, path.read_bytes())
                pkg.set_thumbnail(part)

        for spec in specs:
            for supplementary in supplementaries:
                pkg.relate_supplementary_to_spec(supplementary, spec)

        data = pkg.flush()

    console.print(f"Created {args.output} ({len(specs)} spec(s), "
                  f"{len(supplementaries)} supplementary file(s), {len(data):,} bytes)")
    return 0


def cmd_version(args=None, console: Optional[Console] = None) -> int:
    """Handle version command."""
    from .version import __version__
    console = console or Console()
    console.print(f"AASX Package v{__version__}")
    return 0


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    args.config = PackageConfig.from_env()
    setup_logging(args.log_level or args.config.log_level)

    commands = {
        "info": cmd_info,
        "list": cmd_list,
        "extract": cmd_extract,
        "create": cmd_create,
        "version": cmd_version,
    }
    command = commands.get(args.command)
    if command is None:
        # No command specified, show help
        parser.print_help()
        return 0

    try:
        return command(args, console)
    except AasxPackageError as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
