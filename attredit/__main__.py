#!/usr/bin/env python3
"""
Module: attredit.__main__

This module allows the attredit package to be executed as a module using:
    python -m attredit
"""

import sys

from attredit.boot.app_factory import main

if __name__ == "__main__":
    sys.exit(main())
