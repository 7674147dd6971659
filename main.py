"""Entry point for running the generate/save/reload flow via ``python main.py``."""

import sys

from adjgraph.cli import main

if __name__ == "__main__":
    sys.exit(main())
