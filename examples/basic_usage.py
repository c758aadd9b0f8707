"""Example usage of radial compositing."""

import torch

from radialblend import RadialBlendConfig, RadialCompositor, composite


def create_dummy_images() -> tuple[torch.Tensor, torch.Tensor]:
    """Create a striped main image and a smaller gradient background."""
    main_image = torch.zeros(3, 256, 384, dtype=torch.uint8)
    main_image[0, :, ::16] = 255  # Red vertical stripes
    main_image[1, ::16, :] = 255  # Green horizontal stripes

    ramp = torch.linspace(0, 255, 64).round().to(torch.uint8)
    background = torch.stack([ramp.view(1, 64).expand(48, 64)] * 3)

    return main_image, background


def main() -> None:
    """Demonstrate hard and fuzzy radial compositing."""
    print("Radial Compositing Example")
    print("=" * 40)

    main_image, background = create_dummy_images()
    print(f"Main image shape: {tuple(main_image.shape)}")
    print(f"Background shape: {tuple(background.shape)}")

    # Hard edge: every pixel is either main or background
    hard = composite(main_image.clone(), background, circle_size=0.5, edge_fuzz=0.0)
    kept = (hard == main_image).all(dim=0).float().mean().item()
    print(f"\nHard edge keeps {kept:.1%} of the main image")

    # Fuzzy edge with a wider band and bilinear resampling
    config = RadialBlendConfig(
        circle_size=0.5, edge_fuzz=0.25, interpolation="bilinear"
    )
    compositor = RadialCompositor(config)
    fuzzy = compositor(main_image.clone(), background)
    kept = (fuzzy == main_image).all(dim=0).float().mean().item()
    print(f"{compositor} keeps {kept:.1%} of the main image")


if __name__ == "__main__":
    main()
