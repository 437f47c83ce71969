#!/usr/bin/env python3
"""TalkTimer — entry point.

Run with:
    python main.py [SECONDS]
    python -m talktimer [SECONDS]
"""

import sys

from talktimer.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
