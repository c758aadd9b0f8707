"""Radial compositing of a main image over a resized background."""

import logging

import torch
from torchvision.transforms.v2 import functional as F

from radialblend.config import RadialBlendConfig
from radialblend.processing import (
    ChannelType,
    channel_type_for,
    match_layout,
    mix,
    radial_blend_mask,
)
from radialblend.types import ImageTensor, RealImageTensor

logger = logging.getLogger(__name__)


def _as_chw(image: torch.Tensor, name: str) -> torch.Tensor:
    """Return a plain [C, H, W] view of an image sharing its storage."""
    view = image.as_subclass(torch.Tensor)
    if view.dim() == 2:
        view = view.unsqueeze(0)
    if view.dim() != 3:
        raise ValueError(
            f"{name} image must have shape [C, H, W] or [H, W], "
            f"got {tuple(image.shape)}"
        )
    if 0 in view.shape:
        raise ValueError(f"{name} image must not be empty, got {tuple(image.shape)}")
    return view


class RadialCompositor:
    """Composite a main image over a background through a radial mask.

    Pixels within ``circle_size`` of the normalized centre keep the main
    image, pixels further than ``circle_size + |edge_fuzz|`` take the
    background resized to the main image, and pixels in between are mixed
    linearly.
    """

    def __init__(self, config: RadialBlendConfig | None = None):
        """Initialize the compositor.

        Args:
            config: Blend parameters and resize filter, defaults if omitted
        """
        self.config = config if config is not None else RadialBlendConfig()

    def composite(self, main: ImageTensor, background: ImageTensor) -> ImageTensor:
        """Composite ``background`` into ``main`` in place.

        Args:
            main: Image of shape [C, H, W] or [H, W], overwritten with the result
            background: Image of any size; converted to the dtype and channel
                layout of ``main`` and resampled to its size

        Returns:
            ``main``, holding the composited image
        """
        image = _as_chw(main, "main")
        back = _as_chw(background, "background")
        height, width = image.shape[-2:]
        channel_type = channel_type_for(image.dtype)

        logger.debug(
            f"Compositing {width}x{height} main over "
            f"{back.shape[-1]}x{back.shape[-2]} background with {self.config}"
        )

        resized = self._resize_background(back, image, channel_type)
        blend = radial_blend_mask(
            height,
            width,
            self.config.circle_size,
            self.config.edge_fuzz,
            device=image.device,
        )
        mixed = mix(channel_type.to_real(image), resized, blend)

        image.copy_(channel_type.from_real(mixed))
        return main

    def _resize_background(
        self, background: torch.Tensor, like: torch.Tensor, channel_type: ChannelType
    ) -> RealImageTensor:
        """Bring the background to the layout and size of ``like`` as float64."""
        matched = match_layout(background.to(like.device), like)
        real = channel_type.to_real(matched)
        return F.resize(
            real,
            list(like.shape[-2:]),
            interpolation=self.config.interpolation_mode,
            antialias=True,
        )

    def __call__(self, main: ImageTensor, background: ImageTensor) -> ImageTensor:
        return self.composite(main, background)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(config={self.config})"


def composite(
    main: ImageTensor,
    background: ImageTensor,
    circle_size: float = 0.5,
    edge_fuzz: float = 0.01,
) -> ImageTensor:
    """Composite ``background`` into ``main`` in place through a radial mask.

    Args:
        main: Image of shape [C, H, W] or [H, W], overwritten with the result
        background: Image of any size
        circle_size: Radius of the region keeping the main image
        edge_fuzz: Width of the transition band, 0 for a hard edge

    Returns:
        ``main``, holding the composited image
    """
    config = RadialBlendConfig(circle_size=circle_size, edge_fuzz=edge_fuzz)
    return RadialCompositor(config).composite(main, background)
