"""Unit tests for ImagePreprocessor."""

import base64
import io
from pathlib import Path

import pytest
from PIL import Image

from mealscan.domain.errors import ImageEncodingError
from mealscan.infrastructure.image.preprocessor import ImagePreprocessor


def png_bytes(size=(1024, 768), mode="RGB", color=(200, 40, 40)) -> bytes:
    if mode == "RGBA":
        color = color + (128,)
    buffer = io.BytesIO()
    Image.new(mode, size, color).save(buffer, format="PNG")
    return buffer.getvalue()


def decode(payload: str) -> Image.Image:
    return Image.open(io.BytesIO(base64.b64decode(payload)))


class TestPrepare:
    """Optimized path."""

    @pytest.mark.asyncio
    async def test_large_image_is_resized_to_jpeg(self) -> None:
        payload = await ImagePreprocessor(max_width=512, quality=70).prepare(png_bytes())

        img = decode(payload)
        assert img.format == "JPEG"
        assert img.size == (512, 384)

    @pytest.mark.asyncio
    async def test_small_image_is_not_upscaled(self) -> None:
        payload = await ImagePreprocessor(max_width=512).prepare(png_bytes(size=(200, 100)))

        assert decode(payload).size == (200, 100)

    @pytest.mark.asyncio
    async def test_transparency_is_flattened(self) -> None:
        payload = await ImagePreprocessor().prepare(png_bytes(size=(64, 64), mode="RGBA"))

        img = decode(payload)
        assert img.mode == "RGB"

    @pytest.mark.asyncio
    async def test_reads_from_path(self, tmp_path: Path) -> None:
        path = tmp_path / "lunch.png"
        path.write_bytes(png_bytes(size=(800, 600)))

        payload = await ImagePreprocessor().prepare(str(path))

        assert decode(payload).size == (512, 384)


class TestRawFallback:
    """Undecodable input and hard failures."""

    @pytest.mark.asyncio
    async def test_undecodable_bytes_are_encoded_raw(self) -> None:
        data = b"definitely not an image"

        payload = await ImagePreprocessor().prepare(data)

        assert base64.b64decode(payload) == data

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ImageEncodingError):
            await ImagePreprocessor().prepare(tmp_path / "missing.jpg")

    @pytest.mark.asyncio
    async def test_empty_bytes_raise(self) -> None:
        with pytest.raises(ImageEncodingError):
            await ImagePreprocessor().prepare(b"")

    def test_invalid_quality(self) -> None:
        with pytest.raises(ValueError):
            ImagePreprocessor(quality=0)
        with pytest.raises(ValueError):
            ImagePreprocessor(quality=100)
