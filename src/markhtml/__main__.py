#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Allow ``python -m markhtml``."""

import sys

from markhtml.cli import main

if __name__ == "__main__":
    sys.exit(main())
