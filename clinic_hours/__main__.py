"""
Package entry point.

Allows running: python -m clinic_hours clinics.csv
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
