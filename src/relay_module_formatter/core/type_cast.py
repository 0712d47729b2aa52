"""
`as any` Type-Cast Normalization.

Generated payloads are object literals that rarely satisfy strict typing
(`noImplicitAny`). This module appends `as any` to every outermost object
literal in a statement so the emitted module type-checks:

    const node: ConcreteRequest = {"kind": "Request"};
Becomes:
    const node: ConcreteRequest = {"kind": "Request"} as any;

The scan is lexical. A small regex tokenizer separates strings, comments
and punctuation so that braces inside literals are never counted; brace
depth is then tracked to find the end of each literal. Literals nested
inside an already-cast literal are left alone, while function bodies and
parenthesized expressions are descended into.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Generator, List, Optional


class CastTokenKind(str, Enum):
  """Lexer token types for the cast scanner."""

  COMMENT = "COMMENT"
  STRING = "STRING"
  IDENTIFIER = "IDENTIFIER"
  OPERATOR = "OPERATOR"
  SYMBOL = "SYMBOL"
  WHITESPACE = "WHITESPACE"
  OTHER = "OTHER"


@dataclass
class CastToken:
  kind: CastTokenKind
  text: str


class CastTokenizer:
  PATTERN_DEFS = [
    (CastTokenKind.COMMENT, r"//[^\n]*|/\*[\s\S]*?\*/"),
    (CastTokenKind.STRING, r"'(?:[^'\\\n]|\\.)*'|\"(?:[^\"\\\n]|\\.)*\"|`(?:[^`\\]|\\.)*`"),
    (CastTokenKind.IDENTIFIER, r"[A-Za-z_$][\w$]*"),
    (CastTokenKind.OPERATOR, r"=>|[=!<>]==?|&&|\|\||\?\?|\?\."),
    (CastTokenKind.SYMBOL, r"[{}()\[\],:;?=]"),
    (CastTokenKind.WHITESPACE, r"\s+"),
    (CastTokenKind.OTHER, r"."),
  ]

  _REGEX = re.compile("|".join(f"(?P<{kind.value}>{pattern})" for kind, pattern in PATTERN_DEFS))

  def __init__(self, text: str):
    self.text = text

  def tokenize(self) -> Generator[CastToken, None, None]:
    for mo in self._REGEX.finditer(self.text):
      yield CastToken(CastTokenKind(mo.lastgroup), mo.group())


# Tokens after which `{` opens an object literal rather than a block.
_EXPRESSION_LEADERS = {"=", "(", "[", ",", ":", "?", "return"}

_TRIVIA = (CastTokenKind.WHITESPACE, CastTokenKind.COMMENT)


def _opens_object_literal(previous: Optional[CastToken]) -> bool:
  if previous is None:
    return True
  return previous.text in _EXPRESSION_LEADERS


def _find_closing_brace(tokens: List[CastToken], start: int) -> Optional[int]:
  depth = 0
  for idx in range(start, len(tokens)):
    tk = tokens[idx]
    if tk.kind != CastTokenKind.SYMBOL:
      continue
    if tk.text == "{":
      depth += 1
    elif tk.text == "}":
      depth -= 1
      if depth == 0:
        return idx
  return None


def add_any_type_cast(source: str) -> str:
  """
  Casts each outermost object literal in `source` to `any`.

  Args:
      source (str): A TypeScript statement or expression.

  Returns:
      str: The text with ` as any` inserted after every top-level object
      literal. Unbalanced braces leave the remainder unchanged.
  """
  tokens = list(CastTokenizer(source).tokenize())
  out: List[str] = []
  previous: Optional[CastToken] = None
  idx = 0

  while idx < len(tokens):
    tk = tokens[idx]
    if tk.kind == CastTokenKind.SYMBOL and tk.text == "{" and _opens_object_literal(previous):
      end = _find_closing_brace(tokens, idx)
      if end is None:
        out.extend(t.text for t in tokens[idx:])
        break
      out.extend(t.text for t in tokens[idx : end + 1])
      out.append(" as any")
      previous = tokens[end]
      idx = end + 1
      continue

    out.append(tk.text)
    if tk.kind not in _TRIVIA:
      previous = tk
    idx += 1

  return "".join(out)
