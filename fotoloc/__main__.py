"""
Main entry point for the fotoloc package.

Allows running: python -m fotoloc <command>
"""

import sys
from fotoloc.cli import main

if __name__ == "__main__":
    sys.exit(main())
