"""Image preprocessing for vision providers.

Shrinks the photo to a small JPEG before base64 encoding so provider calls
stay fast and cheap. When Pillow cannot decode or transform the image the
original bytes are encoded unchanged.
"""

import asyncio
import base64
import io
import logging
from pathlib import Path
from typing import Union

from PIL import Image, ImageOps, UnidentifiedImageError

from mealscan.domain.errors import ImageEncodingError

logger = logging.getLogger(__name__)

ImageRef = Union[str, Path, bytes]


def _read_bytes(image_ref: ImageRef) -> bytes:
    if isinstance(image_ref, (bytes, bytearray)):
        return bytes(image_ref)
    return Path(image_ref).read_bytes()


def _to_rgb(img: Image.Image) -> Image.Image:
    """Flatten transparency onto white, convert anything else to RGB."""
    if img.mode in ("RGBA", "LA", "P"):
        if img.mode == "P":
            img = img.convert("RGBA")
        background = Image.new("RGB", img.size, (255, 255, 255))
        background.paste(img, mask=img.split()[-1])
        return background
    if img.mode != "RGB":
        return img.convert("RGB")
    return img


class ImagePreprocessor:
    """
    Convert an image reference (path or bytes) into a base64 JPEG payload.

    Example:
        >>> preprocessor = ImagePreprocessor(max_width=512, quality=70)
        >>> payload = await preprocessor.prepare("/tmp/lunch.jpg")
    """

    def __init__(self, max_width: int = 512, quality: int = 70):
        if max_width < 1:
            raise ValueError(f"max_width must be positive, got {max_width}")
        if not 1 <= quality <= 95:
            raise ValueError(f"quality must be between 1 and 95, got {quality}")
        self.max_width = max_width
        self.quality = quality

    async def prepare(self, image_ref: ImageRef) -> str:
        """
        Encode the image for transmission.

        Raises:
            ImageEncodingError: Both the optimized and the raw path failed
        """
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, self.optimize, image_ref)
        except (OSError, ValueError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
            logger.warning("Image optimization failed, using raw encode", extra={"error": str(exc)})

        try:
            return await loop.run_in_executor(None, self.encode_raw, image_ref)
        except (OSError, ValueError) as exc:
            raise ImageEncodingError(f"Could not encode image: {exc}") from exc

    def optimize(self, image_ref: ImageRef) -> str:
        """Resize to max_width (never upscale), recompress, base64 encode."""
        data = _read_bytes(image_ref)
        with Image.open(io.BytesIO(data)) as opened:
            img = ImageOps.exif_transpose(opened)
            img = _to_rgb(img)

            width, height = img.size
            if width > self.max_width:
                new_height = max(1, round(height * self.max_width / width))
                img = img.resize((self.max_width, new_height), Image.Resampling.LANCZOS)

            output = io.BytesIO()
            img.save(output, format="JPEG", quality=self.quality, optimize=True)

        encoded = output.getvalue()
        logger.debug(
            "Image optimized",
            extra={"original_bytes": len(data), "encoded_bytes": len(encoded), "width": img.size[0]},
        )
        return base64.b64encode(encoded).decode("ascii")

    @staticmethod
    def encode_raw(image_ref: ImageRef) -> str:
        data = _read_bytes(image_ref)
        if not data:
            raise ValueError("image is empty")
        return base64.b64encode(data).decode("ascii")
