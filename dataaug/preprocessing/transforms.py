"""
Transform catalog: pure functions image -> image (split_channels -> list).

Images are uint8 numpy arrays, BGR for colour (OpenCV default) or 2-D for a
single channel. No function modifies its input in place.

Flips and the two blurs go through Albumentations with their parameters pinned
(p=1.0, single-value kernel range); the rest is plain OpenCV / numpy.
"""
from __future__ import annotations
from functools import lru_cache
from typing import List, Tuple, Union

import cv2
import numpy as np
import albumentations as A

from ..config import CLAHE_CLIP, CLAHE_TILEGR
from ..errors import InvalidImage
from ..utils.io import jpeg_roundtrip

FLIP_CODES = {"vertical": 0, "horizontal": 1, "both": -1}
JPEG_CHANNELS = (1, 3, 4)                # what the JPEG codec accepts

# ---------- validation -------------------------------------------------------
def n_channels(img: np.ndarray) -> int:
    return 1 if img.ndim == 2 else img.shape[2]

def check_image(img, channels: Union[int, Tuple[int, ...], None] = None) -> np.ndarray:
    """
    Raise InvalidImage unless `img` is a non-empty uint8 HxW or HxWxC array.
    `channels` is the channel count, or tuple of counts, the caller supports.
    """
    if not isinstance(img, np.ndarray):
        raise InvalidImage(f"expected numpy array, got {type(img).__name__}")
    if img.dtype != np.uint8:
        raise InvalidImage(f"expected uint8 pixels, got {img.dtype}")
    if img.ndim not in (2, 3):
        raise InvalidImage(f"expected 2 or 3 dimensions, got shape {img.shape}")
    if 0 in img.shape:
        raise InvalidImage(f"zero-sized image {img.shape}")
    if channels is not None:
        allowed = (channels,) if isinstance(channels, int) else tuple(channels)
        if n_channels(img) not in allowed:
            raise InvalidImage(f"expected {' or '.join(map(str, allowed))} channels, "
                               f"got {n_channels(img)}")
    return img

def _saturate(arr: np.ndarray) -> np.ndarray:
    """Round and clamp to [0, 255] (OpenCV saturate_cast semantics)."""
    return np.clip(np.rint(arr), 0, 255).astype(np.uint8)

# ---------- albumentations steps (built once per parameter) ------------------
@lru_cache(maxsize=None)
def T_Flip(axis: str):
    if axis == "vertical":
        return A.VerticalFlip(p=1.0)
    if axis == "horizontal":
        return A.HorizontalFlip(p=1.0)
    return A.Compose([A.VerticalFlip(p=1.0), A.HorizontalFlip(p=1.0)])

@lru_cache(maxsize=None)
def T_Blur(ksize: int):
    return A.Blur(blur_limit=(ksize, ksize), p=1.0)

@lru_cache(maxsize=None)
def T_MedianBlur(ksize: int):
    return A.MedianBlur(blur_limit=(ksize, ksize), p=1.0)

def _albu(transform, img: np.ndarray) -> np.ndarray:
    return np.ascontiguousarray(transform(image=img)["image"])

# ---------- geometry ---------------------------------------------------------
def rotate(img: np.ndarray, angle: float) -> np.ndarray:
    """Rotate about the image centre, scale 1.0, same canvas (corners go black)."""
    check_image(img)
    h, w = img.shape[:2]
    M = cv2.getRotationMatrix2D((w / 2.0, h / 2.0), angle, 1.0)
    return cv2.warpAffine(img, M, (w, h))

def flip(img: np.ndarray, axis: str) -> np.ndarray:
    if axis not in FLIP_CODES:
        raise ValueError(f"Unknown flip axis: {axis!r}")
    check_image(img)
    return _albu(T_Flip(axis), img)

def zoom(img: np.ndarray, factor: float) -> np.ndarray:
    """Centre-crop (h // factor, w // factor) then resize back to (h, w)."""
    if factor <= 1:
        raise ValueError(f"zoom factor must be > 1, got {factor}")
    check_image(img)
    h, w = img.shape[:2]
    nh, nw = int(h / factor), int(w / factor)
    if nh == 0 or nw == 0:
        raise InvalidImage(f"image {w}x{h} too small to zoom by {factor}")
    y0, x0 = (h - nh) // 2, (w - nw) // 2
    crop = img[y0:y0 + nh, x0:x0 + nw]
    return cv2.resize(crop, (w, h), interpolation=cv2.INTER_LINEAR)

def translate(img: np.ndarray, dx: float, dy: float) -> np.ndarray:
    check_image(img)
    h, w = img.shape[:2]
    M = np.float32([[1, 0, dx], [0, 1, dy]])
    return cv2.warpAffine(img, M, (w, h))

# ---------- colour -----------------------------------------------------------
def rgb_shift(img: np.ndarray, r_shift: int, g_shift: int, b_shift: int) -> np.ndarray:
    check_image(img, channels=3)
    shift = np.array([b_shift, g_shift, r_shift], dtype=np.int32)  # BGR storage
    return np.clip(img.astype(np.int32) + shift, 0, 255).astype(np.uint8)

def shift_hue(hue: np.ndarray, shift: int) -> np.ndarray:
    """OpenCV hue lives in [0, 180); wrap the shifted value back into it."""
    # numpy's % is non-negative for a positive modulus
    return ((hue.astype(np.int32) + shift) % 180).astype(np.uint8)

def hue_saturation_value(img: np.ndarray, hue_shift: int,
                         sat_mult: float, val_mult: float) -> np.ndarray:
    check_image(img, channels=3)
    hsv = cv2.cvtColor(img, cv2.COLOR_BGR2HSV)
    h, s, v = cv2.split(hsv)
    h = shift_hue(h, hue_shift)
    s = _saturate(s * float(sat_mult))
    v = _saturate(v * float(val_mult))
    return cv2.cvtColor(cv2.merge((h, s, v)), cv2.COLOR_HSV2BGR)

def channel_shuffle(img: np.ndarray, rng=None) -> np.ndarray:
    """
    Reorder the channel planes with `rng.permutation(n)`.
    `rng` is anything with a numpy-style permutation(); None draws a fresh
    default_rng(), so the order is not reproducible.
    """
    check_image(img)
    if img.ndim == 2:
        return img.copy()
    rng = np.random.default_rng() if rng is None else rng
    order = np.asarray(rng.permutation(img.shape[2]))
    return np.ascontiguousarray(img[..., order])

def clahe(img: np.ndarray, clip_limit: float = CLAHE_CLIP,
          tile_grid: Tuple[int, int] = CLAHE_TILEGR) -> np.ndarray:
    """CLAHE on the L channel of Lab only; a and b are untouched."""
    check_image(img, channels=3)
    lab = cv2.cvtColor(img, cv2.COLOR_BGR2LAB)
    l, a, b = cv2.split(lab)
    eq = cv2.createCLAHE(clipLimit=clip_limit, tileGridSize=tuple(tile_grid))
    l2 = eq.apply(l)
    lab = cv2.merge((l2, a, b))
    return cv2.cvtColor(lab, cv2.COLOR_LAB2BGR)

def to_gray(img: np.ndarray) -> np.ndarray:
    check_image(img, channels=3)
    return cv2.cvtColor(img, cv2.COLOR_BGR2GRAY)

# ---------- intensity --------------------------------------------------------
def adjust_contrast(img: np.ndarray, alpha: float) -> np.ndarray:
    check_image(img)
    return _saturate(img * float(alpha))

def adjust_gamma(img: np.ndarray, gamma: float) -> np.ndarray:
    if gamma <= 0:
        raise ValueError(f"gamma must be > 0, got {gamma}")
    check_image(img)
    lut = _saturate(255.0 * (np.arange(256) / 255.0) ** gamma)
    return cv2.LUT(img, lut)

def adjust_brightness(img: np.ndarray, beta: int) -> np.ndarray:
    check_image(img)
    return np.clip(img.astype(np.int32) + int(beta), 0, 255).astype(np.uint8)

# ---------- filters & compression --------------------------------------------
def blur(img: np.ndarray, ksize: int) -> np.ndarray:
    check_image(img)
    return _albu(T_Blur(ksize), img)

def median_blur(img: np.ndarray, ksize: int) -> np.ndarray:
    if ksize % 2 == 0 or ksize < 3:
        raise ValueError("median ksize must be odd and >= 3")
    check_image(img)
    return _albu(T_MedianBlur(ksize), img)

def jpeg_compression(img: np.ndarray, quality: int) -> np.ndarray:
    """Lossy round-trip through an in-memory JPEG stream."""
    check_image(img, channels=JPEG_CHANNELS)
    return jpeg_roundtrip(img, quality)

def split_channels(img: np.ndarray) -> List[np.ndarray]:
    """Single-channel planes in source (B, G, R) order."""
    check_image(img)
    if img.ndim == 2:
        return [img.copy()]
    return list(cv2.split(img))
