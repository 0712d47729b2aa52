"""
CLI Command Handlers Facade.

Re-exports handlers from `relay_module_formatter.cli.handlers` so the
dispatcher and tests share a single import location.
"""

from relay_module_formatter.cli.handlers.format import (
  handle_format,
  _format_single_file,
  _print_batch_summary,
)
from relay_module_formatter.cli.handlers.rewrite import handle_rewrite

__all__ = [
  "_format_single_file",
  "_print_batch_summary",
  "handle_format",
  "handle_rewrite",
]
