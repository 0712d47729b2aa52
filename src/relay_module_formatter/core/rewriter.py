"""
Require-to-Import Rewriter.

Rewrites CommonJS-style `require('<path>')` calls in generated TypeScript into
ES module syntax. Content is treated as opaque text: call sites are located by
pattern, never by parsing.

Modes:
- STATIC_IMPORTS: each call becomes a bare identifier and a sorted block of
  `import { name } from "path";` declarations is prepended to the content.
- DYNAMIC_IMPORTS: each call becomes `await import('path')` in place.
- UNMODIFIED: the content is returned as-is.
"""

import logging
import re
from typing import Iterable, List

from relay_module_formatter.enums import RewriteMode

logger = logging.getLogger(__name__)

# A single-quoted literal without quotes, escapes or line breaks.
_REQUIRE_RE = re.compile(r"require\('([^'\\\n]*)'\)")

# Any call-shaped `require(`, used to spot sites the strict pattern rejects.
_REQUIRE_CALL_RE = re.compile(r"\brequire\([^)\n]*\)?")

_SOURCE_EXT_RE = re.compile(r"\.tsx?$")


def get_module_name(path: str) -> str:
  """
  Derives the import binding for a dependency path.

  A leading `./` is removed and the segment before the first `.` is kept,
  so `./FooQuery.graphql.ts` binds as `FooQuery`. Paths outside that shape
  may produce an empty or unusual identifier; no error is raised.

  Args:
      path (str): The path captured from the require literal.

  Returns:
      str: The identifier used in place of the call.
  """
  if path.startswith("./"):
    path = path[2:]
  return path.split(".")[0]


def strip_source_extension(path: str) -> str:
  """
  Removes a trailing `.ts` / `.tsx` suffix so the path is importable.

  Args:
      path (str): Dependency path.

  Returns:
      str: The path without its TypeScript source extension.
  """
  return _SOURCE_EXT_RE.sub("", path)


def collect_require_paths(content: str) -> List[str]:
  """
  Finds the distinct paths loaded via `require('...')`.

  Args:
      content (str): Generated module text.

  Returns:
      List[str]: Paths in order of first occurrence, without duplicates.
  """
  seen = {}
  for match in _REQUIRE_RE.finditer(content):
    seen.setdefault(match.group(1), None)
  return list(seen)


def find_unmatched_requires(content: str) -> List[str]:
  """
  Lists `require(` call sites that discovery would not rewrite.

  These are calls whose argument is not a plain single-quoted literal
  (escaped quotes, double quotes, expressions). They survive rewriting
  untouched.

  Args:
      content (str): Generated module text.

  Returns:
      List[str]: The raw text of each unmatched call site.
  """
  matched = {m.start() for m in _REQUIRE_RE.finditer(content)}
  return [m.group(0) for m in _REQUIRE_CALL_RE.finditer(content) if m.start() not in matched]


def build_import_header(paths: Iterable[str]) -> str:
  """
  Synthesizes the static import block for a set of dependency paths.

  Declarations are sorted by path so output is stable regardless of the
  order in which calls were discovered.

  Args:
      paths (Iterable[str]): Distinct dependency paths.

  Returns:
      str: Newline-joined import declarations (empty if there are none).
  """
  return "\n".join(
    f'import {{ {get_module_name(path)} }} from "{strip_source_extension(path)}";' for path in sorted(paths)
  )


def _replacement_for(path: str, mode: RewriteMode) -> str:
  if mode == RewriteMode.DYNAMIC_IMPORTS:
    return f"await import('{strip_source_extension(path)}')"
  return get_module_name(path)


def rewrite_requires(content: str, mode: RewriteMode) -> str:
  """
  Converts `require('...')` calls in `content` according to `mode`.

  Every occurrence of a discovered call is substituted, not just the
  first. An occurrence whose text differs from the discovered call (e.g.
  extra whitespace inside the parentheses) is left as it is.

  Args:
      content (str): Raw generated module body.
      mode (RewriteMode): Target import style.

  Returns:
      str: The rewritten text. In STATIC_IMPORTS mode the sorted import
      declarations and a newline precede the body, even when there are none.
  """
  mode = RewriteMode(mode)
  if mode == RewriteMode.UNMODIFIED:
    return content

  paths = collect_require_paths(content)
  logger.debug("Rewriting %d require path(s) as %s", len(paths), mode.value)

  for path in paths:
    content = content.replace(f"require('{path}')", _replacement_for(path, mode))

  if mode == RewriteMode.STATIC_IMPORTS:
    return f"{build_import_header(paths)}\n{content}"
  return content
