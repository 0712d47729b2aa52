"""
Generated Module Formatter.

Assembles the final TypeScript text of a compiler artifact from its
fragments. The layout is fixed:

    /* tslint:disable */
    /* eslint-disable */
    // @ts-nocheck
    /* <hash> */                                   (only when a hash is set)

    import { ConcreteRequest } from "relay-runtime"; (only with a document type)
    <type declarations>

    /*
    <document text>
    */
    const node: ConcreteRequest = <payload>;
    (node as any).hash = '<source hash>';
    export default node;

The body (everything after the type import) then passes through the
require rewriter in the mode implied by the configured module kind.
"""

import logging
from typing import Callable, Optional

from rich.markup import escape

from relay_module_formatter.config import FormatterConfig
from relay_module_formatter.core.format_result import FormatResult
from relay_module_formatter.core.generated_module import GeneratedModule
from relay_module_formatter.core.rewriter import find_unmatched_requires, rewrite_requires
from relay_module_formatter.core.type_cast import add_any_type_cast
from relay_module_formatter.enums import RewriteMode
from relay_module_formatter.utils.console import log_warning

logger = logging.getLogger(__name__)

RUNTIME_PACKAGE = "relay-runtime"

SUPPRESSION_HEADER = "/* tslint:disable */\n/* eslint-disable */\n// @ts-nocheck\n"

TypeCast = Callable[[str], str]


class ModuleFormatter:
  """
  Turns `GeneratedModule` records into final module source.

  Instances hold only configuration; `format` is a pure function of its
  input and may be called concurrently.
  """

  def __init__(self, config: Optional[FormatterConfig] = None, type_cast: Optional[TypeCast] = None) -> None:
    """
    Args:
        config: Module-system settings. Defaults to an unset module kind.
        type_cast: Text transform applied to the node statement when
            `no_implicit_any` is enabled. Defaults to `add_any_type_cast`.
    """
    self.config = config or FormatterConfig()
    self.type_cast = type_cast or add_any_type_cast

  def format(self, module: GeneratedModule) -> str:
    """
    Builds the artifact text for one module.

    Args:
        module (GeneratedModule): The generated fragments.

    Returns:
        str: The complete, lint-suppressed module source.
    """
    return self.render(module).code

  def render(self, module: GeneratedModule) -> FormatResult:
    """
    Builds the artifact text and reports require() calls left in it.

    Only the node statement is checked for unrewritten calls; type
    declarations and the doc comment may mention `require(` freely.

    Args:
        module (GeneratedModule): The generated fragments.

    Returns:
        FormatResult: The module source and any unrewritten call sites.
    """
    header = SUPPRESSION_HEADER
    if module.hash:
      header += f"/* {module.hash} */\n"

    document_type_import = (
      f'import {{ {module.document_type} }} from "{RUNTIME_PACKAGE}";' if module.document_type else ""
    )

    node_statement = self.build_node_statement(module)
    body = self.build_body(module, node_statement)
    mode = self.config.rewrite_mode
    logger.debug("Formatting '%s' with %s imports", module.module_name, mode.value)
    content = rewrite_requires(body, mode)

    leftover = find_unmatched_requires(node_statement) if mode != RewriteMode.UNMODIFIED else []
    if leftover:
      sites = ", ".join(escape(site) for site in leftover)
      log_warning(f"{module.module_name or 'module'}: require() calls left unrewritten: {sites}")

    return FormatResult(code=f"{header}\n{document_type_import}\n{content}", unmatched_requires=leftover)

  def build_node_statement(self, module: GeneratedModule) -> str:
    """
    Renders the typed `node` constant, cast to `any` when configured.

    Args:
        module (GeneratedModule): The generated fragments.

    Returns:
        str: The `const node: ... = ...;` statement.
    """
    node_statement = f"const node: {module.document_type or 'never'} = {module.concrete_text};"
    if self.config.no_implicit_any:
      node_statement = self.type_cast(node_statement).strip()
    return node_statement

  def build_body(self, module: GeneratedModule, node_statement: Optional[str] = None) -> str:
    """
    Renders the module body before require() rewriting.

    Args:
        module (GeneratedModule): The generated fragments.
        node_statement (str, optional): Pre-rendered node statement.

    Returns:
        str: Type declarations, doc comment and the node definition.
    """
    if node_statement is None:
      node_statement = self.build_node_statement(module)
    doc_comment = f"\n/*\n{module.doc_text.strip()}\n*/\n" if module.doc_text else ""

    return (
      f"{module.type_text or ''}\n"
      "\n"
      f"{doc_comment}\n"
      f"{node_statement}\n"
      f"(node as any).hash = '{module.source_hash}';\n"
      "export default node;\n"
    )


def formatter_factory(
  config: Optional[FormatterConfig] = None, type_cast: Optional[TypeCast] = None
) -> Callable[[GeneratedModule], str]:
  """
  Creates the formatting callable handed to the compiler pipeline.

  Args:
      config: Module-system settings fixed for every artifact.
      type_cast: Optional replacement for the `as any` normalization.

  Returns:
      Callable[[GeneratedModule], str]: Formats one module per call.
  """
  return ModuleFormatter(config, type_cast=type_cast).format


def format_module(module: GeneratedModule, config: Optional[FormatterConfig] = None) -> str:
  """
  Formats a single module with the given (or default) configuration.

  Args:
      module (GeneratedModule): The generated fragments.
      config (FormatterConfig, optional): Module-system settings.

  Returns:
      str: The final module source.
  """
  return ModuleFormatter(config).format(module)
