"""
Format-dispatched decoding and encoding of thumbnail images.
"""
from pathlib import Path
from typing import Optional, Union
from PIL import Image, ImageOps, UnidentifiedImageError
import logging

from ..core.errors import ImageProcessingError
from ..core.extensions import DECODER_FORMATS, is_jpeg, is_webp
from ..core.interfaces import EncoderSettings, IImageEncoder

logger = logging.getLogger(__name__)

_DECODE_ERRORS = (UnidentifiedImageError, OSError, SyntaxError, ValueError, Image.DecompressionBombError)


def webp_native_quality(level: int) -> int:
    """Map a 0-9 quality level onto libwebp's 0-100 scale."""
    return int(level * 100 / 9 + 0.5)


class ImageDecoder:
    """Decodes a source image using the format implied by its extension."""

    def __init__(self, auto_orient: bool = True):
        self.auto_orient = auto_orient

    def decode(self, image_path: Union[str, Path]) -> Image.Image:
        """
        Load an image fully into memory.

        Only the first frame of animated GIF/WebP sources is used.

        Raises:
            ImageProcessingError: If the extension is unsupported or the
                file cannot be decoded as that format
        """
        image_path = Path(image_path)
        fmt = DECODER_FORMATS.get(image_path.suffix.lower())
        if fmt is None:
            raise ImageProcessingError(image_path, f"unsupported source format {image_path.suffix!r}")

        try:
            with Image.open(image_path, formats=[fmt]) as img:
                img.load()
                if self.auto_orient:
                    return ImageOps.exif_transpose(img)
                return img.copy()
        except FileNotFoundError as e:
            raise ImageProcessingError(image_path, "source file does not exist", e)
        except _DECODE_ERRORS as e:
            raise ImageProcessingError(image_path, f"cannot decode as {fmt}: {e}", e)


class ImageEncoder(IImageEncoder):
    """
    Writes thumbnails in the format implied by the destination extension:
    JPEG and WebP are lossy, anything else is written as PNG.
    """

    def __init__(self, settings: Optional[EncoderSettings] = None):
        self.settings = settings or EncoderSettings()

    def encode(self, img: Image.Image, output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        try:
            if is_jpeg(output_path):
                self._save_jpeg(img, output_path)
            elif is_webp(output_path):
                self._save_webp(img, output_path)
            else:
                self._save_png(img, output_path)
        except (OSError, ValueError) as e:
            output_path.unlink(missing_ok=True)
            raise ImageProcessingError(output_path, f"cannot encode thumbnail: {e}", e)
        return output_path

    def _save_jpeg(self, img: Image.Image, output_path: Path) -> None:
        # JPEG has no alpha channel; it is dropped, not composited
        if img.mode == "LA":
            img = img.convert("L")
        elif img.mode not in ("RGB", "L"):
            img = img.convert("RGB")
        img.save(
            output_path,
            format="JPEG",
            quality=self.settings.jpeg_quality,
            optimize=True,
        )

    def _save_webp(self, img: Image.Image, output_path: Path) -> None:
        if img.mode not in ("RGB", "RGBA"):
            img = img.convert("RGBA" if "A" in img.getbands() else "RGB")
        img.save(
            output_path,
            format="WEBP",
            quality=webp_native_quality(self.settings.webp_quality),
            lossless=False,
        )

    def _save_png(self, img: Image.Image, output_path: Path) -> None:
        img.save(
            output_path,
            format="PNG",
            compress_level=self.settings.png_compression,
        )
