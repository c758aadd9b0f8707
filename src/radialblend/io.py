"""Image decoding and encoding backed by Pillow."""

import logging
import os
from typing import Union

import torch
from PIL import Image, ImageOps
from torchvision import tv_tensors
from torchvision.transforms.v2 import functional as F

from radialblend.errors import DecodeError, EncodeError
from radialblend.types import ImageTensor

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike[str]]

# Pillow modes that map directly onto a [C, H, W] tensor
_TENSOR_MODES = {"L", "LA", "RGB", "RGBA", "I;16"}

# Largest value of a 16-bit channel
_UINT16_MAX = 65535


def _to_tensor_mode(image: Image.Image) -> Image.Image:
    if image.mode in _TENSOR_MODES:
        return image
    if image.mode == "1":
        return image.convert("L")
    if image.mode in ("P", "PA"):
        has_alpha = image.mode == "PA" or "transparency" in image.info
        return image.convert("RGBA" if has_alpha else "RGB")
    if image.mode in ("La", "RGBa"):
        return image.convert(image.mode.upper())
    return image.convert("RGB")


def _decode(image: Image.Image) -> tv_tensors.Image:
    """Convert a Pillow image into a tensor with a known value range."""
    if image.mode == "I":
        # 32-bit integers: 8-bit data stays 8-bit, wider data becomes 16-bit
        _, high = image.getextrema()
        if high <= 255:
            return F.to_image(image.convert("L"))
        wide = F.to_image(image).as_subclass(torch.Tensor)
        return tv_tensors.Image(wide.clamp(0, _UINT16_MAX).to(torch.uint16))
    if image.mode == "F":
        # Pillow float images hold 8-bit intensities
        scaled = F.to_image(image).as_subclass(torch.Tensor) / 255.0
        return tv_tensors.Image(scaled)
    return F.to_image(_to_tensor_mode(image))


def load_image(path: PathLike) -> tv_tensors.Image:
    """Decode an image file into a tensor.

    Palette, bilevel and other colour modes are converted to grey, RGB or
    RGBA. 32-bit integer images become uint8 when their values fit in 8 bits
    and uint16 (clipped) otherwise; float images are scaled from [0, 255] to
    [0, 1]. The EXIF orientation, if any, is applied.

    Args:
        path: Path of the image file

    Returns:
        Image of shape [C, H, W] with uint8, uint16 or float32 channels

    Raises:
        DecodeError: If the file cannot be read or decoded
    """
    try:
        with Image.open(path) as pil_image:
            pil_image = ImageOps.exif_transpose(pil_image)
            image = _decode(pil_image)
    except (OSError, ValueError) as err:
        raise DecodeError(f'failed to load image at "{path}": {err}') from err

    logger.debug(f"Loaded {path} as {tuple(image.shape)} {image.dtype}")
    return image


def save_image(image: ImageTensor, path: PathLike) -> None:
    """Encode an image tensor to a file; the format follows the extension.

    Non-uint8 images are rescaled to uint8, floating point values are
    clipped to [0, 1] first.

    Args:
        image: Image of shape [C, H, W] or [H, W] with 1 to 4 channels
        path: Destination path, its directory must exist

    Raises:
        EncodeError: If the image cannot be encoded or written
    """
    tensor = image.as_subclass(torch.Tensor).detach().cpu()
    if tensor.dim() == 2:
        tensor = tensor.unsqueeze(0)

    if tensor.is_floating_point():
        tensor = tensor.clamp(0.0, 1.0)
    if tensor.dtype != torch.uint8:
        tensor = F.to_dtype(tensor, torch.uint8, scale=True)

    try:
        F.to_pil_image(tensor).save(path)
    except (OSError, ValueError, TypeError) as err:
        raise EncodeError(f"error saving the image: {err}") from err

    logger.debug(f"Saved {tuple(tensor.shape)} image to {path}")
