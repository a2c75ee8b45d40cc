"""
Crucible - Limited-turn grid pathfinder.

Subpackages:
    - search: Cost grid, run constraints and the best-first search engine

Modules:
    - settings: Persistent JSON settings
    - render: PNG rendering of a grid and a found path
"""

__version__ = "0.1.0"
