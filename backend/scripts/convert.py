"""CLI wrapper for a single CAD conversion."""

from __future__ import annotations

import sys

from cad_converter.cli import main


if __name__ == "__main__":
    sys.exit(main())
