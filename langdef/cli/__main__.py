"""
Main entry point for the langdef CLI when run as a module.

This allows the CLI to be executed using:
    python -m langdef.cli

or the equivalent ``langdef`` console script.
"""

import sys

from . import main

if __name__ == '__main__':
    sys.exit(main())
