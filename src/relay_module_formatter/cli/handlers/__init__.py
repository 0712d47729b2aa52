from .format import handle_format, _format_single_file, _print_batch_summary
from .rewrite import handle_rewrite

__all__ = [
  "_format_single_file",
  "_print_batch_summary",
  "handle_format",
  "handle_rewrite",
]
