#!/usr/bin/env python3
"""
Module: main.py

Author: Michael Economou
Date: 2026-02-02

Entry point for running attredit from a source checkout:
    python main.py [--print] PATH...
"""

import os
import sys

# Add the project root to the path FIRST - before any local imports
project_root = os.path.normpath(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from attredit.boot.app_factory import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
