"""
Format Command Handler.

This module implements the logic for the `relay-module-formatter format`
command. It orchestrates:
1. Configuration loading (CLI flags, pyproject.toml, tsconfig.json).
2. Decoding JSON input records into `GeneratedModule` objects.
3. Formatting via `ModuleFormatter`.
4. Output writing and the batch summary report.
"""

import json
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from relay_module_formatter.config import FormatterConfig
from relay_module_formatter.core.format_result import FormatResult
from relay_module_formatter.core.formatter import ModuleFormatter
from relay_module_formatter.core.generated_module import GeneratedModule
from relay_module_formatter.utils.console import (
  console,
  log_error,
  log_info,
  log_success,
  log_warning,
)


def handle_format(
  input_path: Path,
  output_path: Optional[Path],
  module: Optional[str],
  no_implicit_any: Optional[bool],
  tsconfig: Optional[Path] = None,
) -> int:
  """
  Handles the 'format' command execution.

  Args:
      input_path: A JSON input record, or a directory of them.
      output_path: Destination file (single input) or directory (batch).
      module: Override for the target module kind (e.g. 'es2020').
      no_implicit_any: If True, forces `as any` casts on payload literals.
      tsconfig: Explicit tsconfig.json to read compiler options from.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    config = FormatterConfig.load(
      module=module,
      no_implicit_any=no_implicit_any,
      tsconfig=tsconfig,
      search_path=input_path if input_path.is_dir() else input_path.parent,
    )
  except ValueError as e:
    log_error(f"Invalid configuration: {escape(str(e))}")
    return 1

  formatter = ModuleFormatter(config)
  batch_results: Dict[str, FormatResult] = {}

  if input_path.is_file():
    result = _format_single_file(input_path, output_path, formatter)
    batch_results[input_path.name] = result
    if not result.success:
      return 1

  else:
    if not output_path:
      log_error("Directory formatting requires --out destination directory.")
      return 1

    json_files = sorted(input_path.rglob("*.json"))
    if not json_files:
      log_warning(f"No .json files found in {input_path}")
      return 0

    log_info(f"Formatting {len(json_files)} artifacts from {input_path}...")

    for src_file in json_files:
      rel_path = src_file.relative_to(input_path)
      dest_file = (output_path / rel_path).with_suffix(".ts")
      batch_results[str(rel_path)] = _format_single_file(src_file, dest_file, formatter)

  _print_batch_summary(batch_results)
  return 0 if all(r.success for r in batch_results.values()) else 1


def _format_single_file(
  input_path: Path,
  output_path: Optional[Path],
  formatter: ModuleFormatter,
) -> FormatResult:
  """
  Formats one JSON input record.

  Args:
      input_path: Path to the JSON record.
      output_path: Destination file, or a directory to write `<stem>.ts`
          into. Prints to stdout when None.
      formatter: Configured formatter instance.

  Returns:
      FormatResult: Result object containing status and code.
  """
  try:
    with open(input_path, "rt", encoding="utf-8") as f:
      record = json.load(f)
    module = GeneratedModule.model_validate(record)
  except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
    log_error(f"Failed to read {input_path}: {escape(str(e))}")
    return FormatResult(success=False, errors=[str(e)])

  result = formatter.render(module)

  if output_path:
    if output_path.is_dir():
      output_path = output_path / input_path.with_suffix(".ts").name
    try:
      output_path.parent.mkdir(parents=True, exist_ok=True)
      with open(output_path, "wt", encoding="utf-8") as f:
        f.write(result.code)
    except OSError as e:
      log_error(f"Failed to write {output_path}: {escape(str(e))}")
      return FormatResult(code=result.code, success=False, errors=[str(e)])
    log_success(f"Formatted: [path]{input_path}[/path] -> [path]{output_path}[/path]")
  else:
    print(result.code)

  return result


def _print_batch_summary(results: Dict[str, FormatResult]) -> None:
  """
  Renders a summary table of formatting results to the console.

  Args:
      results: Dictionary mapping filenames to format results.
  """
  total = len(results)
  clean = sum(1 for r in results.values() if r.success and not r.has_warnings)
  issues = total - clean

  if issues == 0:
    log_success(f"Batch Complete: {clean}/{total} artifacts formatted.")
    return

  table = Table(title="Formatting Report")
  table.add_column("File", style="cyan")
  table.add_column("Status", justify="center")
  table.add_column("Issues", style="red")

  for filename, res in results.items():
    if res.success and not res.has_warnings:
      continue
    if not res.success:
      status = "❌ Failed"
      detail = "; ".join(res.errors) if res.errors else "Unknown Error"
    else:
      status = "⚠️ Warnings"
      detail = "Unrewritten: " + "; ".join(res.unmatched_requires)
    table.add_row(escape(filename), status, escape(detail))

  console.print(table)
  console.print(f"\n[bold]Summary:[/bold] {clean} Clean, {issues} with Issues.")
