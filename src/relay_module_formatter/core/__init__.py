"""
Core formatting components: the require rewriter and the module assembler.
"""

from relay_module_formatter.core.format_result import FormatResult
from relay_module_formatter.core.formatter import ModuleFormatter, format_module, formatter_factory
from relay_module_formatter.core.generated_module import GeneratedModule
from relay_module_formatter.core.rewriter import rewrite_requires

__all__ = [
  "FormatResult",
  "GeneratedModule",
  "ModuleFormatter",
  "format_module",
  "formatter_factory",
  "rewrite_requires",
]
