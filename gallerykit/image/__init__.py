"""
Image processing module for gallerykit.
"""
from .scaler import ImageScaler
from .codec import ImageDecoder, ImageEncoder, webp_native_quality

__all__ = [
    'ImageScaler',
    'ImageDecoder',
    'ImageEncoder',
    'webp_native_quality',
]
