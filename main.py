"""
Crucible Pathfinder - Entry Point

Example:
    python main.py input.txt
    python main.py input.txt --min-run 4 --max-run 10
"""

import sys

from crucible.cli import main


if __name__ == "__main__":
    sys.exit(main())
