from radialblend.compositor import RadialCompositor, composite
from radialblend.config import RadialBlendConfig
from radialblend.errors import (
    DecodeError,
    EncodeError,
    MissingArgumentError,
    ParseError,
    RadialBlendError,
    UsageError,
)
from radialblend.io import load_image, save_image
from radialblend.transforms import RadialCompositeTransform
from radialblend.types import NormalizedGrid

__all__ = [
    "DecodeError",
    "EncodeError",
    "MissingArgumentError",
    "NormalizedGrid",
    "ParseError",
    "RadialBlendConfig",
    "RadialBlendError",
    "RadialCompositeTransform",
    "RadialCompositor",
    "UsageError",
    "composite",
    "load_image",
    "save_image",
]
