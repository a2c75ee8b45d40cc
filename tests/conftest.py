"""
Shared fixtures for the pathfinder tests.
"""

import sys
from pathlib import Path

import pytest

# Add src/ to path so tests run without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from crucible.search import CostGrid


# Example city map: 102 with runs of at most 3, 94 with runs of 4..10
EXAMPLE_MAP = """\
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
"""

# Cheap top row, expensive body, cheap right column: forces long runs
FORCING_MAP = """\
111111111111
999999999991
999999999991
999999999991
999999999991
"""


@pytest.fixture
def example_grid() -> CostGrid:
    return CostGrid.from_text(EXAMPLE_MAP)


@pytest.fixture
def forcing_grid() -> CostGrid:
    return CostGrid.from_text(FORCING_MAP)
