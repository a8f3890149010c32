#!/usr/bin/env python3
"""Script to run the git-code CLI from a source checkout."""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from git_code.cli import main


if __name__ == "__main__":
    sys.exit(main())
