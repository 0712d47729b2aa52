"""
Rewrite Command Handler.

Runs only the require() rewriter over an existing TypeScript file, for
artifacts produced before the module system changed.
"""

from pathlib import Path
from typing import Optional

from rich.markup import escape

from relay_module_formatter.core.rewriter import find_unmatched_requires, rewrite_requires
from relay_module_formatter.enums import RewriteMode
from relay_module_formatter.utils.console import log_error, log_success, log_warning


def handle_rewrite(input_path: Path, output_path: Optional[Path], mode: str) -> int:
  """
  Handles the 'rewrite' command execution.

  Args:
      input_path: TypeScript file to rewrite.
      output_path: Destination file. Prints to stdout when None.
      mode: One of 'unmodified', 'static', 'dynamic'.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_file():
    log_error(f"Input file not found: {input_path}")
    return 1

  rewrite_mode = RewriteMode(mode)
  try:
    with open(input_path, "rt", encoding="utf-8") as f:
      content = f.read()
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to read {input_path}: {escape(str(e))}")
    return 1

  rewritten = rewrite_requires(content, rewrite_mode)

  leftover = find_unmatched_requires(rewritten)
  if leftover and rewrite_mode != RewriteMode.UNMODIFIED:
    log_warning(f"{len(leftover)} require() call(s) left unrewritten: {escape(', '.join(leftover))}")

  if output_path:
    try:
      output_path.parent.mkdir(parents=True, exist_ok=True)
      with open(output_path, "wt", encoding="utf-8") as f:
        f.write(rewritten)
    except OSError as e:
      log_error(f"Failed to write {output_path}: {escape(str(e))}")
      return 1
    log_success(f"Rewrote: [path]{input_path}[/path] -> [path]{output_path}[/path]")
  else:
    print(rewritten)
  return 0
