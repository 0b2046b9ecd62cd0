"""
Entry point for running stylecascade as a module.

Usage:
    python -m stylecascade resolve theme.json Button -a outline --state active
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
