"""
Entry point for module execution (``python -m relay_module_formatter``).

This module delegates execution to the CLI handler in ``relay_module_formatter.cli.__main__``.
"""

import sys
from relay_module_formatter.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
