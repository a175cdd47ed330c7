#!/usr/bin/env python3
"""Main entry point for the ARB translator."""

import os
import sys

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

if __name__ == "__main__":
    from arb_translator.main import main
    sys.exit(main())
