"""
relay-module-formatter Package.

Formats the TypeScript artifacts emitted by the Relay compiler: assembles
the lint-suppressed module text and rewrites `require('...')` calls into ES
module imports suited to the configured module system.

Usage
-----

.. code-block:: python

    from relay_module_formatter import FormatterConfig, GeneratedModule, formatter_factory

    fmt = formatter_factory(FormatterConfig(module="es2015"))
    text = fmt(
      GeneratedModule(
        moduleName="AppQuery.graphql",
        documentType="ConcreteRequest",
        concreteText="{ fragment: require('./AppFragment.graphql.ts') }",
        sourceHash="abc123",
      )
    )
"""

from relay_module_formatter.config import FormatterConfig
from relay_module_formatter.core.formatter import ModuleFormatter, format_module, formatter_factory
from relay_module_formatter.core.generated_module import GeneratedModule
from relay_module_formatter.core.rewriter import rewrite_requires
from relay_module_formatter.enums import ModuleKind, RewriteMode, rewrite_mode_for

__version__ = "0.1.0"

__all__ = [
  "FormatterConfig",
  "GeneratedModule",
  "ModuleFormatter",
  "ModuleKind",
  "RewriteMode",
  "format_module",
  "formatter_factory",
  "rewrite_mode_for",
  "rewrite_requires",
  "__version__",
]
