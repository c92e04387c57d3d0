"""
Command-line interface for circuit notation.

Parse notation strings into schematic layouts without the editor.

Usage::

    python -m cli parse "R//R1nt(R2//R3)"
    python -m cli parse "UntKdntR1" --output layout.json --terminals
    python -m cli tokens "R1ntR2"
    python -m cli tree "R//R1nt(R2//R3)"
    python -m cli check "R1nt(R2"
    python -m cli batch circuits.txt --output-dir layouts/
"""

import argparse
import logging
import sys
from pathlib import Path

from models.circuit import CircuitLayout
from notation.formatter import format_notation
from notation.nodes import count_leaves, describe_tree
from notation.parser import NotationParser
from notation.pipeline import parse_notation, parse_notation_with_warnings
from notation.settings import LayoutSettings, SettingsError, load_layout_settings
from notation.tokenizer import tokenize

__version__ = "0.3.0"


def try_load_settings(args: argparse.Namespace) -> tuple[LayoutSettings | None, str]:
    """Load layout settings from --config (or the default file) without exiting.

    Returns:
        (settings, "") on success, or (None, error_message) on failure.
    """
    config = getattr(args, "config", None)
    if config and not Path(config).exists():
        return None, f"config file not found: {config}"

    try:
        settings = load_layout_settings(Path(config) if config else None)
    except SettingsError as e:
        return None, f"invalid layout settings: {e}"

    if getattr(args, "terminals", False):
        settings.terminal_leads = True
    return settings, ""


def load_settings(args: argparse.Namespace) -> LayoutSettings:
    """Load layout settings, exiting with an error message on failure."""
    settings, error = try_load_settings(args)
    if settings is None:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)
    return settings


def cmd_parse(args: argparse.Namespace) -> int:
    """Parse a notation string and output the layout as JSON."""
    settings = load_settings(args)
    layout = parse_notation(args.notation, settings)
    output_text = layout.to_json()

    if args.output:
        Path(args.output).write_text(output_text, encoding="utf-8")
        print(f"Layout written to {args.output}: {summarize_layout(layout)}", file=sys.stderr)
    else:
        print(output_text)
    return 0


def cmd_tokens(args: argparse.Namespace) -> int:
    """Print the tokens of a notation string, one per line."""
    for token in tokenize(args.notation):
        print(f"{token.offset:>4}  {token.kind.value:<18} {token.text}")
    return 0


def cmd_tree(args: argparse.Namespace) -> int:
    """Print the expression tree of a notation string."""
    parser = NotationParser(tokenize(args.notation))
    tree = parser.parse()
    if tree is None:
        print("(empty)")
        return 0

    for line in describe_tree(tree):
        print(line)
    print()
    print(f"Canonical: {format_notation(tree)}")
    print(f"Components: {count_leaves(tree)}")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Report recoveries the parser had to make."""
    parser = NotationParser(tokenize(args.notation))
    tree = parser.parse()

    if tree is None:
        print(f"Notation is empty: {args.notation!r}", file=sys.stderr)
        return 1

    if not parser.warnings:
        print(f"Notation is well-formed: {format_notation(tree)}")
        return 0

    print(f"Notation has problems: {args.notation}", file=sys.stderr)
    for warning in parser.warnings:
        print(f"  - {warning}", file=sys.stderr)
    return 1


def read_notation_lines(path: Path) -> list[tuple[int, str]]:
    """Read notations from a text file, one per line.

    Blank lines and lines starting with '#' are skipped.

    Returns:
        List of (line_number, notation) tuples.
    """
    entries = []
    for number, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        entries.append((number, stripped))
    return entries


def cmd_batch(args: argparse.Namespace) -> int:
    """Parse every notation in a file and print a summary table."""
    path = Path(args.path)
    if not path.is_file():
        print(f"Error: file not found: {args.path}", file=sys.stderr)
        return 1

    try:
        entries = read_notation_lines(path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading {path}: {e}", file=sys.stderr)
        return 1

    if not entries:
        print(f"No notations found in: {args.path}", file=sys.stderr)
        return 1

    settings = load_settings(args)

    output_dir = None
    if args.output_dir:
        output_dir = Path(args.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    results_summary = []
    any_failed = False

    for number, notation in entries:
        layout, warnings = parse_notation_with_warnings(notation, settings)

        status = "OK"
        if layout.is_empty():
            status = "EMPTY"
            any_failed = True
        elif warnings:
            status = "RECOVERED"
            if args.strict:
                any_failed = True

        results_summary.append(
            {
                "line": number,
                "notation": notation,
                "status": status,
                "components": len(layout.components),
                "wires": len(layout.wires),
            }
        )

        if output_dir:
            out_path = output_dir / f"line_{number:03d}.json"
            out_path.write_text(layout.to_json(), encoding="utf-8")

    print(f"\n{'Line':<6} {'Notation':<32} {'Status':<10} {'Parts':>5} {'Wires':>5}")
    print("-" * 62)
    for entry in results_summary:
        print(
            f"{entry['line']:<6} {entry['notation'][:32]:<32} {entry['status']:<10} "
            f"{entry['components']:>5} {entry['wires']:>5}"
        )

    total = len(results_summary)
    clean = sum(1 for e in results_summary if e["status"] == "OK")
    print(f"\n{clean}/{total} parsed cleanly, {total - clean} with problems")

    return 1 if any_failed else 0


def summarize_layout(layout: CircuitLayout) -> str:
    """One-line description of a layout, used in log output."""
    box = layout.bounding_box()
    if box is None:
        return "empty layout"
    min_x, min_y, max_x, max_y = box
    return (
        f"{len(layout.components)} components, {len(layout.wires)} wires, "
        f"extent ({min_x:g}, {min_y:g})-({max_x:g}, {max_y:g})"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="circuit-notation",
        description="Turn series/parallel circuit notation into schematic layouts from the command line.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # parse
    parse_parser = subparsers.add_parser("parse", help="Lay out a notation and print the JSON result")
    parse_parser.add_argument("notation", help="Circuit notation, e.g. 'R//R1nt(R2//R3)'")
    parse_parser.add_argument("--output", "-o", help="Write the layout to file instead of stdout")
    parse_parser.add_argument("--config", help="Path to a layout settings JSON file")
    parse_parser.add_argument("--terminals", action="store_true", help="Add lead wires at both outer ends")

    # tokens
    tokens_parser = subparsers.add_parser("tokens", help="Show how a notation is tokenized")
    tokens_parser.add_argument("notation", help="Circuit notation")

    # tree
    tree_parser = subparsers.add_parser("tree", help="Show the parsed expression tree")
    tree_parser.add_argument("notation", help="Circuit notation")

    # check
    check_parser = subparsers.add_parser("check", help="Report malformed parts of a notation")
    check_parser.add_argument("notation", help="Circuit notation")

    # batch
    batch_parser = subparsers.add_parser("batch", help="Lay out every notation in a text file")
    batch_parser.add_argument("path", help="Text file with one notation per line")
    batch_parser.add_argument("--output-dir", help="Write one layout JSON per line to this directory")
    batch_parser.add_argument("--config", help="Path to a layout settings JSON file")
    batch_parser.add_argument("--terminals", action="store_true", help="Add lead wires at both outer ends")
    batch_parser.add_argument("--strict", action="store_true", help="Treat recovered notations as failures")

    return parser


def main(argv=None) -> int:
    """CLI entry point. Returns exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    handlers = {
        "parse": cmd_parse,
        "tokens": cmd_tokens,
        "tree": cmd_tree,
        "check": cmd_check,
        "batch": cmd_batch,
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
