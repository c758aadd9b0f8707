"""Data structures shared by the compositing steps."""

from dataclasses import dataclass

import torch

from radialblend.compile_util import validation_hook


@dataclass(frozen=True, slots=True)
class NormalizedGrid:
    """Normalized pixel coordinates of an image, one axis per field.

    ``x_local`` has shape [1, W] and ``y_local`` has shape [H, 1]; together they
    broadcast to the full [H, W] coordinate grid. The vertical axis spans
    [-1, 1) and the horizontal axis is scaled by the aspect ratio so that a
    radius describes a circle regardless of the image proportions.
    """

    x_local: torch.Tensor
    y_local: torch.Tensor

    @validation_hook
    def __post_init__(self) -> None:
        """Validate axis shapes."""
        if self.x_local.dim() != 2 or self.x_local.size(0) != 1:
            raise ValueError("x_local must have shape [1, W]")
        if self.y_local.dim() != 2 or self.y_local.size(1) != 1:
            raise ValueError("y_local must have shape [H, 1]")
