from __future__ import annotations

import io

import pytest
from PIL import Image

from app.Catalog.exceptions import ImageProcessingError
from app.Catalog.services.image_optimizer import ImageOptimizer, OptimizerConfig
from tests.conftest import make_image


def open_result(data: bytes) -> Image.Image:
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


def test_wide_image_is_downscaled_to_max_width() -> None:
    optimizer = ImageOptimizer()
    output = open_result(optimizer.optimize(make_image(2400, 1600), "perfume.png"))

    assert output.format == "WEBP"
    assert output.size == (1200, 800)


def test_narrow_image_is_not_enlarged() -> None:
    optimizer = ImageOptimizer()
    output = open_result(optimizer.optimize(make_image(640, 480, fmt="JPEG"), "small.jpg"))

    assert output.format == "WEBP"
    assert output.size == (640, 480)


def test_custom_max_width() -> None:
    optimizer = ImageOptimizer(OptimizerConfig(max_width=100))
    output = open_result(optimizer.optimize(make_image(400, 200)))

    assert output.size == (100, 50)


def test_palette_image_with_transparency_keeps_alpha() -> None:
    image = Image.new("P", (50, 50), 0)
    image.info["transparency"] = 0
    buffer = io.BytesIO()
    image.save(buffer, format="PNG", transparency=0)

    output = open_result(ImageOptimizer().optimize(buffer.getvalue(), "logo.png"))
    assert output.mode == "RGBA"


def test_undecodable_payload_raises() -> None:
    with pytest.raises(ImageProcessingError):
        ImageOptimizer().optimize(b"definitely not an image", "broken.jpg")


def test_empty_payload_raises() -> None:
    with pytest.raises(ImageProcessingError):
        ImageOptimizer().optimize(b"", "empty.png")
