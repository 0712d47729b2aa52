"""
Main Entry Point for relay-module-formatter CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `relay_module_formatter.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from relay_module_formatter.cli import commands
from relay_module_formatter.enums import RewriteMode
from relay_module_formatter import __version__


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="relay-module-formatter: Relay artifact formatter")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: FORMAT ---
  cmd_fmt = subparsers.add_parser("format", help="Assemble TypeScript artifacts from JSON input records")
  cmd_fmt.add_argument("path", type=Path, help="Input JSON record or directory of records")
  cmd_fmt.add_argument("--out", type=Path, help="Output destination (file or dir)")
  cmd_fmt.add_argument(
    "--module",
    default=None,
    help="Target module kind, e.g. commonjs, es2015, esnext (default: from pyproject.toml/tsconfig.json)",
  )
  cmd_fmt.add_argument(
    "--no-implicit-any",
    action="store_true",
    default=None,
    help="Cast payload object literals to `any` (Overrides config)",
  )
  cmd_fmt.add_argument("--tsconfig", type=Path, default=None, help="tsconfig.json to read compilerOptions from")

  # --- Command: REWRITE ---
  cmd_rw = subparsers.add_parser("rewrite", help="Rewrite require() calls in an existing TypeScript file")
  cmd_rw.add_argument("path", type=Path, help="Input TypeScript file")
  cmd_rw.add_argument(
    "--mode",
    choices=[m.value for m in RewriteMode],
    default=RewriteMode.STATIC_IMPORTS.value,
    help="Import style to emit (default: static)",
  )
  cmd_rw.add_argument("--out", type=Path, help="Output file (default: stdout)")

  args = parser.parse_args(argv)

  if args.command == "format":
    return commands.handle_format(args.path, args.out, args.module, args.no_implicit_any, args.tsconfig)

  elif args.command == "rewrite":
    return commands.handle_rewrite(args.path, args.out, args.mode)

  return 0


if __name__ == "__main__":
  sys.exit(main())
