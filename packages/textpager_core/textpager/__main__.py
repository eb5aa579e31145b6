"""
Entry point for running textpager as a module.

Usage:
    python -m textpager assessment.txt --output assessment.pdf
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main() or 0)
