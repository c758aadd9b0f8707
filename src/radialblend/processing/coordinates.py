"""Normalized pixel coordinates and radial distance."""

import torch

from radialblend.processing.channels import REAL_DTYPE
from radialblend.types import DistanceTensor, NormalizedGrid


def normalized_grid(
    height: int, width: int, device: torch.device | None = None
) -> NormalizedGrid:
    """Map pixel indices onto the normalized coordinate system.

    Pixel ``(x, y)`` maps to ``((x / width * 2 - 1) * aspect, y / height * 2 - 1)``
    with ``aspect = width / height``.

    Args:
        height: Image height, at least 1
        width: Image width, at least 1
        device: Device to create the coordinates on

    Returns:
        Normalized grid with float64 axes
    """
    if height < 1 or width < 1:
        raise ValueError(f"Image size must be positive, got {height}x{width}")

    aspect_ratio = float(width) / float(height)

    x_coords = torch.arange(width, device=device, dtype=REAL_DTYPE)
    y_coords = torch.arange(height, device=device, dtype=REAL_DTYPE)

    x_local = (x_coords / width * 2.0 - 1.0) * aspect_ratio
    y_local = y_coords / height * 2.0 - 1.0

    return NormalizedGrid(
        x_local=x_local.view(1, width), y_local=y_local.view(height, 1)
    )


def radial_distance(grid: NormalizedGrid) -> DistanceTensor:
    """Euclidean distance of every grid point from the normalized origin.

    Returns:
        Distances of shape [H, W]
    """
    return torch.hypot(grid.x_local, grid.y_local)
