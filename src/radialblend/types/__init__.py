"""Type definitions for the radialblend package.

This module contains the tensor aliases and data structures used throughout
the package.
"""

from radialblend.types.data_structures import NormalizedGrid
from radialblend.types.type_aliases import (
    BlendTensor,
    DistanceTensor,
    ImageTensor,
    RealImageTensor,
)

__all__ = [
    "NormalizedGrid",
    "ImageTensor",
    "RealImageTensor",
    "BlendTensor",
    "DistanceTensor",
]
