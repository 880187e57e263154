"""
Image preprocessing before blob detection.

Blurring and then quantizing merges the small color variations of a scan
into larger flat regions, so each photo becomes a few large blobs.
"""

import cv2
import numpy as np


def blur(image: np.ndarray, amount: int) -> np.ndarray:
    """
    Gaussian blur with standard deviation amount.

    Args:
        image: Grayscale or color image (uint8)
        amount: Sigma in pixels. 0 or less returns an unmodified copy.

    Returns:
        Blurred copy of the image
    """
    if amount <= 0:
        return image.copy()
    return cv2.GaussianBlur(image, (0, 0), sigmaX=amount, sigmaY=amount)


def quantize(image: np.ndarray, levels: int) -> np.ndarray:
    """
    Round each channel down into a fixed number of bins.

    Args:
        image: Grayscale or color image (uint8)
        levels: Number of bins per channel, at least 2

    Returns:
        Quantized copy of the image (uint8)

    Raises:
        ValueError: If levels < 2
    """
    if levels < 2:
        raise ValueError(f"levels must be >= 2, got {levels}")

    # levels-1 so we get "levels" bins instead of levels+1
    divisor = 256 // (levels - 1)
    quantized = (image.astype(np.int32) // divisor) * divisor
    return np.clip(quantized, 0, 255).astype(np.uint8)


def preprocess(image: np.ndarray, blur_amount: int, quantize_levels: int) -> np.ndarray:
    """Blur then quantize."""
    return quantize(blur(image, blur_amount), quantize_levels)
