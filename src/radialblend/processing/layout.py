"""Reconcile the background image with the main image's pixel layout."""

import torch
from torchvision.transforms.v2 import functional as F

from radialblend.processing.channels import channel_type_for

# Channel count -> (colour channels, has alpha)
_LAYOUTS: dict[int, tuple[int, bool]] = {
    1: (1, False),  # L
    2: (1, True),  # LA
    3: (3, False),  # RGB
    4: (3, True),  # RGBA
}


def _split_alpha(image: torch.Tensor) -> tuple[torch.Tensor, torch.Tensor | None]:
    _, has_alpha = _LAYOUTS[image.size(-3)]
    if has_alpha:
        return image[..., :-1, :, :], image[..., -1:, :, :]
    return image, None


def _convert_colour(colour: torch.Tensor, num_channels: int) -> torch.Tensor:
    if colour.size(-3) == num_channels:
        return colour
    if num_channels == 1:
        return F.rgb_to_grayscale(colour, num_output_channels=1)
    return F.grayscale_to_rgb(colour)


def match_layout(background: torch.Tensor, like: torch.Tensor) -> torch.Tensor:
    """Convert ``background`` to the dtype and channel layout of ``like``.

    Values are rescaled between dtypes the way ``to_dtype(scale=True)`` does.
    Grey and RGB colour channels are converted into each other and a missing
    alpha channel is filled as fully opaque; a surplus one is dropped.

    Args:
        background: Image of shape [C, H, W]
        like: Image of shape [C', H', W'] whose dtype and channels to match

    Returns:
        Background image of shape [C', H, W] with the dtype of ``like``

    Raises:
        ValueError: If the channel counts differ and are not grey/RGB layouts
    """
    background = F.to_dtype(background, like.dtype, scale=True)

    src_channels, dst_channels = background.size(-3), like.size(-3)
    if src_channels == dst_channels:
        return background
    if src_channels not in _LAYOUTS or dst_channels not in _LAYOUTS:
        raise ValueError(
            f"Cannot convert a {src_channels}-channel background "
            f"to a {dst_channels}-channel image"
        )

    colour_channels, has_alpha = _LAYOUTS[dst_channels]
    colour, alpha = _split_alpha(background)
    colour = _convert_colour(colour, colour_channels)

    if not has_alpha:
        return colour

    if alpha is None:
        opaque = channel_type_for(like.dtype).max_value
        alpha = torch.full_like(colour[..., :1, :, :], opaque)
    return torch.cat([colour, alpha], dim=-3)
