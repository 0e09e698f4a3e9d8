#!/usr/bin/env python3
"""automapper developer tool - Entry point for running from a checkout."""
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from automapper.cli import cli


if __name__ == "__main__":
    cli()
