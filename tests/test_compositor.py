"""Tests for radial compositing."""

import pytest
import torch
from torchvision import tv_tensors

from radialblend import RadialBlendConfig, RadialCompositor, composite
from radialblend.processing import radial_blend_mask
from tests.shared import constant_image, gradient_image


def hard_edge(circle_size: float) -> RadialCompositor:
    return RadialCompositor(RadialBlendConfig(circle_size=circle_size, edge_fuzz=0.0))


class TestScenarios:
    """Concrete compositing scenarios on tiny images."""

    def test_circle_covering_image_keeps_main(self) -> None:
        """Test a 4x4 image fully inside the circle stays main."""
        main = constant_image(200)
        background = constant_image(0)

        result = composite(main, background, circle_size=10.0, edge_fuzz=0.0)

        assert torch.all(result == 200)

    def test_negative_circle_takes_background(self) -> None:
        """Test a 4x4 image with a negative radius becomes background."""
        main = constant_image(200)
        background = constant_image(0)

        result = composite(main, background, circle_size=-1.0, edge_fuzz=0.0)

        assert torch.all(result == 0)

    def test_fuzzy_corner_is_background(self) -> None:
        """Test a 2x2 image with a zero radius and unit fuzz."""
        main = constant_image(200, (1, 2, 2))
        background = constant_image(0, (1, 2, 2))

        result = composite(main, background, circle_size=0.0, edge_fuzz=1.0)

        # (0, 0) lies at distance sqrt(2), (1, 1) maps onto the centre
        assert result[0].tolist() == [[0, 0], [0, 200]]

    def test_fuzzy_band_mixes(self) -> None:
        """Test pixels inside the band are a linear mix."""
        main = constant_image(200)
        background = constant_image(0)

        result = composite(main, background, circle_size=0.0, edge_fuzz=1.0)

        assert result[0, 2, 2] == 200  # distance 0
        assert result[0, 2, 3] == 100  # distance 0.5
        assert result[0, 1, 2] == 100  # distance 0.5
        assert result[0, 3, 3] == 59  # distance sqrt(0.5)
        assert result[0, 0, 0] == 0  # distance sqrt(2)


class TestRadialCompositor:
    """Test cases for RadialCompositor."""

    def test_returns_main_mutated_in_place(self) -> None:
        """Test the main buffer holds the result."""
        main = gradient_image()
        original = main.clone()
        background = constant_image(0, (3, 10, 10))

        result = hard_edge(0.5)(main, background)

        assert result is main
        assert not torch.equal(main, original)
        assert torch.all(main[:, 0, 0] == 0)

    def test_dimensions_follow_main(self) -> None:
        """Test the background is resampled to the main size."""
        main = gradient_image((3, 30, 50))
        background = gradient_image((3, 7, 5))

        result = RadialCompositor().composite(main, background)

        assert result.shape == (3, 30, 50)
        assert result.dtype == torch.uint8

    def test_inside_and_outside_regions(self) -> None:
        """Test pixels inside the circle are kept and outside replaced."""
        main = gradient_image((3, 40, 60))
        original = main.clone()
        background = constant_image(17, (3, 9, 13))
        config = RadialBlendConfig(circle_size=0.6, edge_fuzz=0.2)

        result = RadialCompositor(config).composite(main, background)

        blend = radial_blend_mask(40, 60, 0.6, 0.2)
        inside = blend == 0.0
        outside = blend == 1.0
        assert inside.any() and outside.any()
        assert torch.equal(result[:, inside], original[:, inside])
        assert torch.all(result[:, outside] == 17)

    def test_negative_fuzz_matches_positive(self) -> None:
        """Test the sign of the edge fuzz is ignored."""
        background = gradient_image((3, 11, 11)).flip(-1)

        positive = composite(gradient_image(), background, 0.4, 0.3)
        negative = composite(gradient_image(), background, 0.4, -0.3)

        assert torch.equal(positive, negative)

    def test_hard_edge_takes_only_endpoints(self) -> None:
        """Test zero fuzz never produces intermediate values."""
        main = constant_image(200, (1, 32, 48))
        background = constant_image(0, (1, 16, 16))

        result = hard_edge(0.7)(main, background)

        assert set(result.unique().tolist()) == {0, 200}

    def test_single_channel_2d_image(self) -> None:
        """Test [H, W] images are composited in place."""
        main = torch.full((6, 6), 50, dtype=torch.uint8)
        background = constant_image(250, (1, 3, 3))

        result = hard_edge(-1.0)(main, background)

        assert result is main
        assert result.shape == (6, 6)
        assert torch.all(main == 250)

    def test_tv_tensor_image_is_preserved(self) -> None:
        """Test torchvision Image inputs keep their type."""
        main = tv_tensors.Image(gradient_image())
        background = constant_image(3, (3, 4, 4))

        result = hard_edge(-1.0)(main, background)

        assert isinstance(result, tv_tensors.Image)
        assert torch.all(result == 3)

    def test_float_main_with_uint8_background(self) -> None:
        """Test background values are rescaled to the main dtype."""
        main = torch.zeros(3, 8, 8, dtype=torch.float32)
        background = constant_image(255, (3, 5, 5))

        result = hard_edge(-1.0)(main, background)

        torch.testing.assert_close(result, torch.ones(3, 8, 8))

    def test_rgba_main_with_rgb_background(self) -> None:
        """Test outside pixels get an opaque alpha."""
        main = torch.zeros(4, 8, 8, dtype=torch.uint8)
        background = constant_image(90, (3, 4, 4))

        result = hard_edge(-1.0)(main, background)

        assert torch.all(result[:3] == 90)
        assert torch.all(result[3] == 255)

    def test_bilinear_filter(self) -> None:
        """Test the bilinear filter resamples the background."""
        config = RadialBlendConfig(
            circle_size=-1.0, edge_fuzz=0.0, interpolation="bilinear"
        )
        main = gradient_image((3, 20, 20))
        background = constant_image(40, (3, 5, 5))

        result = RadialCompositor(config)(main, background)

        assert torch.all(result == 40)

    def test_integer_results_do_not_wrap(self) -> None:
        """Test bicubic overshoot is saturated instead of wrapped."""
        main = torch.zeros(1, 64, 64, dtype=torch.uint8)
        background = torch.zeros(1, 4, 4, dtype=torch.uint8)
        background[:, :, 2:] = 255

        result = hard_edge(-1.0)(main, background)

        assert result[0, 0, 0] == 0
        assert result[0, 0, -1] == 255
        # Without saturation the ringing next to the step wraps around
        assert torch.all(result[0, :, :16] < 128)
        assert torch.all(result[0, :, -16:] > 127)

    def test_main_and_background_may_alias(self) -> None:
        """Test compositing an image with itself leaves it unchanged."""
        main = gradient_image()
        original = main.clone()

        RadialCompositor()(main, main)

        assert torch.equal(main, original)

    @pytest.mark.parametrize(
        "shape",
        [(2, 3, 4, 4), (3, 0, 4), (4,)],
    )
    def test_invalid_shapes(self, shape: tuple[int, ...]) -> None:
        """Test malformed main images are rejected before writing."""
        main = torch.zeros(shape, dtype=torch.uint8)
        with pytest.raises(ValueError):
            RadialCompositor()(main, constant_image(1, (3, 2, 2)))

    def test_invalid_background_leaves_main_untouched(self) -> None:
        """Test failures happen before any pixel is written."""
        main = gradient_image()
        original = main.clone()

        with pytest.raises(ValueError):
            hard_edge(-1.0)(main, torch.zeros(5, 4, 4, dtype=torch.uint8))

        assert torch.equal(main, original)

    def test_repr(self) -> None:
        """Test string representation includes the configuration."""
        assert "circle_size=0.5" in repr(RadialCompositor())
