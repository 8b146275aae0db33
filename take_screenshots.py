#!/usr/bin/env python3
"""Take the demo page screenshots. Start the dev server first."""
import sys

from democap_core.cli import main

if __name__ == "__main__":
    sys.exit(main())
