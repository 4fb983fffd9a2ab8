#!/usr/bin/env python3
"""Evaluate the potential-field bot against a baseline player."""

import sys

from pincerhex.evaluation.cli import main

if __name__ == "__main__":
    sys.exit(main())
