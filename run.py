#!/usr/bin/env python3
"""Run the wp-export CLI from a source checkout."""

import sys
from pathlib import Path

# Project root holds both the src and cli packages
sys.path.insert(0, str(Path(__file__).parent))

from cli.main import app

if __name__ == "__main__":
    app()
