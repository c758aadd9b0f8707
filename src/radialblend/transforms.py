"""PyTorch transforms for radial compositing."""

from typing import Any, Dict, Union

import torch

from radialblend.compositor import RadialCompositor
from radialblend.config import RadialBlendConfig
from radialblend.types import ImageTensor


class RadialCompositeTransform(torch.nn.Module):
    """PyTorch Transform wrapper around ``RadialCompositor``.

    Every input image is composited over the same background. The input is
    cloned first, so the transform can sit in a torchvision pipeline without
    modifying dataset samples. Accepted inputs:
    - a tensor of shape [C, H, W] or [H, W]
    - a dictionary with an 'image' key; other keys are forwarded unchanged
    """

    def __init__(
        self,
        background: ImageTensor,
        config: RadialBlendConfig | None = None,
    ) -> None:
        """Initialize radial composite transform.

        Args:
            background: Background image, resized to each input image
            config: Blend parameters and resize filter
        """
        super().__init__()
        self.background: ImageTensor = background
        self.compositor: RadialCompositor = RadialCompositor(config)

    def forward(
        self, sample: Union[ImageTensor, Dict[str, Any]]
    ) -> Union[ImageTensor, Dict[str, Any]]:
        """Composite the sample image over the background.

        Args:
            sample: Image tensor or dictionary containing an 'image' key

        Returns:
            Composited image, or a copy of the dictionary holding it
        """
        if isinstance(sample, dict):
            result = dict(sample)
            result["image"] = self.compositor(sample["image"].clone(), self.background)
            return result

        return self.compositor(sample.clone(), self.background)

    def __repr__(self) -> str:
        """Return string representation of transform."""
        return (
            f"{self.__class__.__name__}("
            f"background_shape={tuple(self.background.shape)}, "
            f"config={self.compositor.config})"
        )
