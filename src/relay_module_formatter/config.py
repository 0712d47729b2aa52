"""
Formatter Configuration Store.

Resolves the module-system settings that decide how generated artifacts are
emitted. Values come from (highest priority first):

1. Explicit arguments (CLI flags).
2. `[tool.relay_module_formatter]` in the nearest `pyproject.toml`.
3. `compilerOptions` in `tsconfig.json`.
4. Defaults (unset module, permissive typing off).
"""

import json
import re
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator
from rich.markup import escape

from relay_module_formatter.enums import ModuleKind, RewriteMode, rewrite_mode_for
from relay_module_formatter.utils.console import log_warning

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

TOOL_SECTION = "relay_module_formatter"

# Spellings accepted by tsc's `--module` option.
_TSCONFIG_MODULE_NAMES: Dict[str, ModuleKind] = {
  "none": ModuleKind.NONE,
  "commonjs": ModuleKind.COMMONJS,
  "amd": ModuleKind.AMD,
  "umd": ModuleKind.UMD,
  "system": ModuleKind.SYSTEM,
  "es6": ModuleKind.ES2015,
  "es2015": ModuleKind.ES2015,
  "es2020": ModuleKind.ES2020,
  "es2022": ModuleKind.ES2022,
  "esnext": ModuleKind.ESNEXT,
  "node16": ModuleKind.NODE16,
  "nodenext": ModuleKind.NODENEXT,
  "preserve": ModuleKind.PRESERVE,
}

_JSONC_COMMENT_RE = re.compile(r'("(?:[^"\\]|\\.)*")|//[^\n]*|/\*[\s\S]*?\*/')
_JSONC_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")


def parse_module_kind(value: Union[int, str, ModuleKind, None]) -> int:
  """
  Normalizes a module-kind setting to its integer value.

  Args:
      value: An int, a `ModuleKind`, a tsconfig spelling ("esnext"), an enum
          member name ("ES2020"), a digit string, or None (unset).

  Returns:
      int: The module kind value (-1 when unset).

  Raises:
      ValueError: If a string does not name a known module kind.
  """
  if value is None:
    return int(ModuleKind.UNSET)
  if isinstance(value, bool):
    raise ValueError(f"Invalid module kind: {value!r}")
  if isinstance(value, int):
    return int(value)

  key = str(value).strip().lower()
  if key.lstrip("-").isdigit():
    return int(key)
  if key in _TSCONFIG_MODULE_NAMES:
    return int(_TSCONFIG_MODULE_NAMES[key])
  known = sorted(_TSCONFIG_MODULE_NAMES)
  raise ValueError(f"Unknown module kind: '{value}'. Supported values: {known}")


class FormatterConfig(BaseModel):
  """
  Module-system settings shared by every artifact a formatter emits.
  """

  module: int = Field(int(ModuleKind.UNSET), description="Target module kind (ts.ModuleKind numbering).")
  no_implicit_any: bool = Field(False, description="If True, cast payload literals to `any`.")

  @field_validator("module", mode="before")
  @classmethod
  def validate_module(cls, v: Any) -> int:
    """
    Accepts module kinds by number or by name.

    Args:
        v (Any): Raw value.

    Returns:
        int: The numeric module kind.
    """
    return parse_module_kind(v)

  @property
  def rewrite_mode(self) -> RewriteMode:
    """
    The require() rewrite strategy implied by the module kind.

    Returns:
        RewriteMode: See `rewrite_mode_for`.
    """
    return rewrite_mode_for(self.module)

  @classmethod
  def load(
    cls,
    module: Union[int, str, None] = None,
    no_implicit_any: Optional[bool] = None,
    tsconfig: Optional[Path] = None,
    search_path: Optional[Path] = None,
  ) -> "FormatterConfig":
    """
    Loads configuration from project files and overrides with arguments.

    Args:
        module: Override for the module kind.
        no_implicit_any: Override for permissive typing.
        tsconfig: Explicit tsconfig.json path. If omitted, the path from
            pyproject.toml is used, then an upward search for tsconfig.json.
        search_path: Directory to start searching from (defaults to cwd).

    Returns:
        FormatterConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    ts_path = tsconfig
    if ts_path is None and "tsconfig" in toml_config and toml_dir:
      ts_path = (toml_dir / Path(toml_config["tsconfig"])).resolve()
    if ts_path is None:
      ts_path = _find_upwards(start_dir, "tsconfig.json")
    compiler_options = _load_compiler_options(ts_path) if ts_path else {}

    # 1. Module kind
    if module is not None:
      final_module = module
    elif "module" in toml_config:
      final_module = toml_config["module"]
    else:
      final_module = compiler_options.get("module")

    # 2. noImplicitAny (tsc's `strict` turns it on unless set explicitly)
    if no_implicit_any is not None:
      final_any = no_implicit_any
    elif "no_implicit_any" in toml_config:
      final_any = toml_config["no_implicit_any"]
    elif "noImplicitAny" in compiler_options:
      final_any = compiler_options["noImplicitAny"]
    else:
      final_any = compiler_options.get("strict", False)

    return cls(module=final_module, no_implicit_any=bool(final_any))


def _find_upwards(start_path: Path, filename: str) -> Optional[Path]:
  current = start_path.resolve()
  for parent in [current, *current.parents]:
    candidate = parent / filename
    if candidate.is_file():
      return candidate
  return None


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  toml_path = _find_upwards(start_path, "pyproject.toml")
  if toml_path is None:
    return {}, None

  try:
    with open(toml_path, "rb") as f:
      data = tomllib.load(f)
  except (OSError, tomllib.TOMLDecodeError) as e:
    log_warning(f"Ignoring unreadable {toml_path}: {escape(str(e))}")
    return {}, None

  tool_section = data.get("tool", {})
  return tool_section.get(TOOL_SECTION, {}), toml_path.parent


def _load_compiler_options(tsconfig_path: Path) -> Dict[str, Any]:
  """
  Reads `compilerOptions` from a tsconfig.json.

  tsconfig files are JSONC: comments and trailing commas are stripped
  before decoding. `extends` chains are not followed.

  Args:
      tsconfig_path (Path): Location of the tsconfig file.

  Returns:
      Dict[str, Any]: The compiler options (empty if unreadable).
  """
  try:
    raw = tsconfig_path.read_text(encoding="utf-8")
  except OSError as e:
    log_warning(f"Ignoring unreadable {tsconfig_path}: {escape(str(e))}")
    return {}

  cleaned = _JSONC_COMMENT_RE.sub(lambda m: m.group(1) or "", raw)
  cleaned = _JSONC_TRAILING_COMMA_RE.sub(r"\1", cleaned)
  try:
    data = json.loads(cleaned)
  except json.JSONDecodeError as e:
    log_warning(f"Ignoring malformed {tsconfig_path}: {escape(str(e))}")
    return {}

  options = data.get("compilerOptions", {}) if isinstance(data, dict) else {}
  return options if isinstance(options, dict) else {}
