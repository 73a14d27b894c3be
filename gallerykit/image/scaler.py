"""
Bounding-box thumbnail scaling.
"""
from PIL import Image
import logging

from ..core.interfaces import IImageScaler, ImageDimensions

logger = logging.getLogger(__name__)


class ImageScaler(IImageScaler):
    """
    Scales images so the larger side equals the target size.

    Transparency survives scaling: palette and grey+alpha images are
    promoted to RGBA first and nothing is composited onto a background.
    """

    def __init__(self, resample: Image.Resampling = Image.Resampling.LANCZOS):
        self.resample = resample

    def scale(self, img: Image.Image, size: int) -> Image.Image:
        prepared = self.prepare(img)
        target = self.target_dimensions(prepared, size)
        logger.debug(f"Scaling {prepared.width}x{prepared.height} -> {target.width}x{target.height}")
        return prepared.resize(target.as_tuple(), self.resample)

    @staticmethod
    def target_dimensions(img: Image.Image, size: int) -> ImageDimensions:
        return ImageDimensions(img.width, img.height).fit_within(size)

    @staticmethod
    def has_alpha(img: Image.Image) -> bool:
        return img.mode in ("RGBA", "LA", "PA", "RGBa", "La") or "transparency" in img.info

    @classmethod
    def prepare(cls, img: Image.Image) -> Image.Image:
        """Convert to a mode that resamples smoothly (L, RGB or RGBA)."""
        if cls.has_alpha(img):
            return img if img.mode == "RGBA" else img.convert("RGBA")
        if img.mode in ("RGB", "L"):
            return img
        if img.mode == "1":
            return img.convert("L")
        if img.mode == "I" or img.mode.startswith("I;16"):
            # 16-bit samples: rescale to 8 bits, a plain convert would clip
            return img.convert("I").point(lambda v: v * (1 / 256)).convert("L")
        return img.convert("RGB")
