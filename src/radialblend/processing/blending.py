"""Blend factor policy and per-channel mixing."""

import torch

from radialblend.processing.coordinates import normalized_grid, radial_distance
from radialblend.types import BlendTensor, DistanceTensor, RealImageTensor


def blend_factor(
    distance: DistanceTensor, circle_size: float, edge_fuzz: float
) -> BlendTensor:
    """Compute the weight of the background image for every pixel.

    Args:
        distance: Distances from the normalized centre of shape [H, W]
        circle_size: Radius of the region that keeps the main image
        edge_fuzz: Width of the linear transition band outside the circle.
            Zero gives a hard edge; the sign is ignored.

    Returns:
        Blend factors in [0, 1] of shape [H, W]
    """
    offset = distance - circle_size

    if edge_fuzz == 0:
        blend = (offset > 0).to(distance.dtype)
    else:
        blend = offset / abs(edge_fuzz)

    return torch.clamp(blend, 0.0, 1.0)


def radial_blend_mask(
    height: int,
    width: int,
    circle_size: float,
    edge_fuzz: float,
    device: torch.device | None = None,
) -> BlendTensor:
    """Build the blend factor mask of an image of the given size.

    Returns:
        float64 blend factors of shape [H, W]
    """
    grid = normalized_grid(height, width, device=device)
    return blend_factor(radial_distance(grid), circle_size, edge_fuzz)


def mix(
    main: RealImageTensor, background: RealImageTensor, blend: BlendTensor
) -> RealImageTensor:
    """Linearly interpolate each channel from main toward background.

    Args:
        main: Main image of shape [C, H, W] in the real domain
        background: Background image of shape [C, H, W] in the real domain
        blend: Blend factors of shape [H, W] or [1, H, W]

    Returns:
        Mixed image of shape [C, H, W]
    """
    if blend.dim() == 2:
        blend = blend.unsqueeze(0)  # Broadcast over channels

    mixed: torch.Tensor = main * (1.0 - blend) + background * blend

    return mixed
