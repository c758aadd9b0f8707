"""Configuration for radial compositing."""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from torchvision.transforms import InterpolationMode

_INTERPOLATION_MODES = {
    "bicubic": InterpolationMode.BICUBIC,
    "bilinear": InterpolationMode.BILINEAR,
}


class RadialBlendConfig(BaseModel):
    """Configuration for compositing a main image over a background."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    # Radius of the region keeping the main image, in normalized units
    circle_size: float = 0.5

    # Width of the transition band; 0 gives a hard edge, the sign is ignored
    edge_fuzz: float = 0.01

    # Filter used to resample the background to the main image size
    interpolation: Literal["bicubic", "bilinear"] = "bicubic"

    @property
    def interpolation_mode(self) -> InterpolationMode:
        return _INTERPOLATION_MODES[self.interpolation]
