"""
Enumerations for relay-module-formatter.

This module defines the module-system identifiers consumed from compiler
configuration and the rewrite strategies derived from them.
"""

from enum import Enum, IntEnum


class ModuleKind(IntEnum):
  """
  Target module system, numbered like TypeScript's `ts.ModuleKind`.

  Values are ordered so that comparisons express "supports at least".
  An unset module is represented by `UNSET` (-1), which predates every kind.
  """

  UNSET = -1
  NONE = 0
  COMMONJS = 1
  AMD = 2
  UMD = 3
  SYSTEM = 4
  ES2015 = 5
  ES2020 = 6
  ES2022 = 7
  ESNEXT = 99
  NODE16 = 100
  NODENEXT = 199
  PRESERVE = 200


class RewriteMode(str, Enum):
  """
  Strategy applied to `require('...')` calls found in generated content.
  """

  UNMODIFIED = "unmodified"  # leave require() calls alone
  STATIC_IMPORTS = "static"  # top-level `import { x } from "..."`
  DYNAMIC_IMPORTS = "dynamic"  # inline `await import('...')`


def rewrite_mode_for(module: int) -> RewriteMode:
  """
  Maps a module kind onto the import syntax it permits.

  Args:
      module (int): A `ModuleKind` value (or its raw integer).

  Returns:
      RewriteMode: `UNMODIFIED` below ES2015, `STATIC_IMPORTS` from ES2015
      up to (excluding) ES2020, `DYNAMIC_IMPORTS` from ES2020 onwards.
  """
  if module >= ModuleKind.ES2020:
    return RewriteMode.DYNAMIC_IMPORTS
  if module >= ModuleKind.ES2015:
    return RewriteMode.STATIC_IMPORTS
  return RewriteMode.UNMODIFIED
