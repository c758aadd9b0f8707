"""Numeric channel types: conversion between native subpixels and reals."""

import math
from dataclasses import dataclass
from typing import Protocol

import torch

REAL_DTYPE = torch.float64


class ChannelType(Protocol):
    """Protocol for converting subpixel values to and from the real domain."""

    dtype: torch.dtype

    @property
    def max_value(self) -> float:
        """Value of a fully opaque alpha channel."""
        ...

    def to_real(self, tensor: torch.Tensor) -> torch.Tensor:
        """Convert native channel values to float64."""
        ...

    def from_real(self, tensor: torch.Tensor) -> torch.Tensor:
        """Convert float64 values back to the native dtype."""
        ...


@dataclass(frozen=True, slots=True)
class IntegerChannel:
    """Bounded integer subpixels (uint8, uint16, int16, ...).

    Values are rounded to the nearest integer and saturated to the range of
    the dtype, so out-of-range reals never wrap around.
    """

    dtype: torch.dtype

    @property
    def min_value(self) -> float:
        return float(torch.iinfo(self.dtype).min)

    @property
    def max_value(self) -> float:
        limit = torch.iinfo(self.dtype).max
        value = float(limit)
        # 64-bit maxima round up to a power of two in float64
        return value if int(value) <= limit else math.nextafter(value, 0.0)

    def to_real(self, tensor: torch.Tensor) -> torch.Tensor:
        return tensor.to(REAL_DTYPE)

    def from_real(self, tensor: torch.Tensor) -> torch.Tensor:
        rounded = torch.round(tensor)
        return rounded.clamp(self.min_value, self.max_value).to(self.dtype)


@dataclass(frozen=True, slots=True)
class FloatChannel:
    """Floating point subpixels, unbounded."""

    dtype: torch.dtype

    @property
    def max_value(self) -> float:
        return 1.0

    def to_real(self, tensor: torch.Tensor) -> torch.Tensor:
        return tensor.to(REAL_DTYPE)

    def from_real(self, tensor: torch.Tensor) -> torch.Tensor:
        return tensor.to(self.dtype)


def channel_type_for(dtype: torch.dtype) -> ChannelType:
    """Select the channel type for a tensor dtype.

    Args:
        dtype: Dtype shared by all channels of an image

    Returns:
        Channel type converting that dtype to and from float64

    Raises:
        ValueError: If the dtype has no meaningful real representation
    """
    if dtype == torch.bool or dtype.is_complex:
        raise ValueError(f"Unsupported channel dtype: {dtype}")
    if dtype.is_floating_point:
        return FloatChannel(dtype)
    return IntegerChannel(dtype)
