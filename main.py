#!/usr/bin/env python3
"""
plistbridge - Apple property lists to and from shell values

Command line front end for the plist commands. ``from-plist`` prints a
property list as tagged JSON values, ``to-plist`` turns tagged JSON values
back into an XML or binary property list.
"""

import logging
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from plistbridge.config import config
from plistbridge.errors import LabeledError
from plistbridge.models import BinaryValue, dynamic_from_json, dynamic_to_json
from plistbridge.plugin import FROM_PLIST, TO_PLIST, PlistPlugin


def setup_logging(verbose: bool = False):
    """Configure logging for the application."""
    level_name = "DEBUG" if verbose else config.log_level
    level = getattr(logging, level_name.upper(), logging.WARNING)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_filename:
        handlers.append(logging.FileHandler(config.log_filename))

    logging.basicConfig(
        level=level,
        format=config.log_format,
        handlers=handlers
    )


def read_input(path: Optional[str]) -> bytes:
    """
    Read command input from a file, or from stdin when no path is given.

    Args:
        path: File path or None

    Returns:
        Raw input bytes
    """
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def write_output(data: bytes, path: Optional[str]) -> None:
    """Write command output to a file, or to stdout when no path is given."""
    if path is None or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return

    Path(path).write_bytes(data)
    logging.info(f"Wrote {len(data)} bytes to {path}")


def run_from_plist(plugin: PlistPlugin, args: argparse.Namespace) -> None:
    """Parse a property list and print its values as JSON."""
    data = read_input(args.input)
    value = plugin.run(FROM_PLIST, BinaryValue(val=data))
    text = dynamic_to_json(value, indent=config.json_indent)
    write_output((text + "\n").encode("utf-8"), args.output)


def run_to_plist(plugin: PlistPlugin, args: argparse.Namespace) -> None:
    """Read JSON values and write them as a property list."""
    data = read_input(args.input)
    value = dynamic_from_json(data)
    binary = args.binary or config.binary_output
    result = plugin.run(TO_PLIST, value, binary=binary)

    if isinstance(result, BinaryValue):
        write_output(result.val, args.output)
    else:
        write_output(result.val.encode("utf-8"), args.output)


def run_signatures(plugin: PlistPlugin, args: argparse.Namespace) -> None:
    """Print the signature of every plugin command."""
    for signature in plugin.signature():
        print(f"{signature.name}: {signature.usage}")
        for switch in signature.switches:
            short = f", -{switch.short}" if switch.short else ""
            print(f"  --{switch.name}{short}  {switch.description}")
        for example in signature.examples:
            print(f"  > {example.example}  # {example.description}")


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="plistbridge - Apple property lists to and from shell values",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py from-plist Info.plist                  # Print a plist as JSON values
  python main.py to-plist values.json                   # Write JSON values as an XML plist
  python main.py to-plist values.json --binary -o out.plist  # Write a binary plist
        """
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to a YAML configuration file"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="plistbridge 0.1.0"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    from_parser = subparsers.add_parser("from-plist", help="Convert a plist into JSON values")
    from_parser.add_argument("input", nargs="?", help="Plist file (default: stdin)")
    from_parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    from_parser.set_defaults(handler=run_from_plist)

    to_parser = subparsers.add_parser("to-plist", help="Convert JSON values into a plist")
    to_parser.add_argument("input", nargs="?", help="JSON values file (default: stdin)")
    to_parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    to_parser.add_argument(
        "-b", "--binary",
        action="store_true",
        help="Output plist in binary format"
    )
    to_parser.set_defaults(handler=run_to_plist)

    signatures_parser = subparsers.add_parser("signatures", help="List plugin command signatures")
    signatures_parser.set_defaults(handler=run_signatures)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    if args.config:
        config.load(args.config)
    setup_logging(args.verbose)

    plugin = PlistPlugin()

    try:
        args.handler(plugin, args)
    except LabeledError as e:
        logging.error(f"Command failed: {e}")
        print(f"{e.label}: {e.msg}", file=sys.stderr)
        return 1
    except ValueError as e:
        # pydantic ValidationError is a ValueError
        logging.error(f"Invalid input values: {e}")
        print(f"Invalid input values: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logging.error(f"I/O error: {e}")
        print(f"I/O error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
