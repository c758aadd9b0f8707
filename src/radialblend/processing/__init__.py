"""Per-pixel building blocks of radial compositing."""

from radialblend.processing.blending import blend_factor, mix, radial_blend_mask
from radialblend.processing.channels import (
    ChannelType,
    FloatChannel,
    IntegerChannel,
    channel_type_for,
)
from radialblend.processing.coordinates import normalized_grid, radial_distance
from radialblend.processing.layout import match_layout

__all__ = [
    "ChannelType",
    "FloatChannel",
    "IntegerChannel",
    "blend_factor",
    "channel_type_for",
    "match_layout",
    "mix",
    "normalized_grid",
    "radial_blend_mask",
    "radial_distance",
]
