"""Type aliases for tensor types used throughout the package."""

import torch

ImageTensor = torch.Tensor  # [C, H, W] or [H, W] - native channel dtype
RealImageTensor = torch.Tensor  # [C, H, W] - float64 channel values
BlendTensor = torch.Tensor  # [H, W] - blend factors toward the background
DistanceTensor = torch.Tensor  # [H, W] - distance from the normalized centre
