"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so tests that capture logs do not leak backends.
- Factories for generated module records.
"""

import sys
import pytest
from pathlib import Path

# Add src to path so we can import 'relay_module_formatter' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from relay_module_formatter.core.generated_module import GeneratedModule  # noqa: E402
from relay_module_formatter.utils.console import reset_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures the console proxy writes to a fresh stdout console per test."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def make_module():
  """Builds a `GeneratedModule` with sensible defaults for each field."""

  def _make(**overrides) -> GeneratedModule:
    fields = {
      "module_name": "AppQuery.graphql",
      "document_type": "ConcreteRequest",
      "doc_text": None,
      "concrete_text": '{"kind": "Request"}',
      "type_text": None,
      "hash": None,
      "source_hash": "abc123",
    }
    fields.update(overrides)
    return GeneratedModule(**fields)

  return _make
