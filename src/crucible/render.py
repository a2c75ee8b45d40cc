"""
Path Rendering Utilities

Draws a cost grid and a found path to a PNG for inspection.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .search.grid import CostGrid
from .search.solution import Solution

logger = logging.getLogger(__name__)

# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

CELL_SIZE = 24
PATH_COLOR = (220, 40, 40)
ENDPOINT_COLOR = (40, 90, 220)


def cost_image(grid: CostGrid, cell_size: int = CELL_SIZE) -> Image.Image:
    """
    Render the grid as greyscale blocks, darker for costlier cells.

    Args:
        grid: Cost grid
        cell_size: Side of each cell in pixels

    Returns:
        RGB PIL Image
    """
    shade = 255 - (grid.cells.astype(np.uint16) * 255 // 9).astype(np.uint8)
    blocks = np.kron(shade, np.ones((cell_size, cell_size), dtype=np.uint8))
    return Image.fromarray(blocks).convert("RGB")


def render_path(
    grid: CostGrid,
    solution: Optional[Solution],
    path: Union[str, Path],
    cell_size: int = CELL_SIZE,
) -> Path:
    """
    Save an annotated image of the grid with the solution path.

    Annotations include:
    - Cell costs drawn as digits
    - Path as a polyline through cell centres
    - Start and end cells outlined
    - Cost and step count summary

    Args:
        grid: Cost grid that was searched
        solution: Search result (None draws the grid only)
        path: Output file path
        cell_size: Side of each cell in pixels

    Returns:
        Path of the written image
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    img = cost_image(grid, cell_size)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    for r, row in enumerate(grid.to_list()):
        for c, value in enumerate(row):
            color = "white" if value >= 5 else "black"
            draw.text((c * cell_size + 3, r * cell_size + 3), str(value),
                      fill=color, font=font)

    if solution and solution.path:
        half = cell_size // 2
        points = [(c * cell_size + half, r * cell_size + half) for r, c in solution.path]
        if len(points) > 1:
            draw.line(points, fill=PATH_COLOR, width=max(2, cell_size // 8))
        for r, c in (solution.path[0], solution.path[-1]):
            box = [c * cell_size, r * cell_size,
                   (c + 1) * cell_size - 1, (r + 1) * cell_size - 1]
            draw.rectangle(box, outline=ENDPOINT_COLOR, width=2)
        summary = f"cost {solution.cost}, {solution.step_count} steps"
        draw.text((3, img.height - 14), summary, fill=PATH_COLOR, font=font)

    img.save(out_path, "PNG")
    logger.info(f"Path image saved: {out_path}")

    # Only our own debug directory is pruned
    if out_path.parent.resolve() == DEBUG_DIR.resolve():
        _cleanup_debug_images(DEBUG_DIR)
    return out_path


def _cleanup_debug_images(directory: Path) -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not directory.exists():
        return

    # Get all debug images sorted by modification time
    debug_files = sorted(
        directory.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError as e:
            logger.warning(f"Could not remove {old_file}: {e}")
