"""
Tiny helpers for filesystem and image IO.
"""
from pathlib import Path
from typing import Iterator

import cv2
import numpy as np

from ..errors import DecodeError, PersistError

def ensure_dir(d: Path) -> Path:
    d = Path(d)
    d.mkdir(parents=True, exist_ok=True)
    return d

def iter_files(folder: Path) -> Iterator[Path]:
    """Regular files directly inside `folder`, sorted by name (no recursion)."""
    for p in sorted(Path(folder).iterdir()):
        if p.is_file():
            yield p

def load_image_bgr(path: Path) -> np.ndarray:
    """
    Load an image as BGR uint8 (OpenCV default). Raises DecodeError on failure.
    Bytes are read by Python and decoded in memory, so any name the filesystem
    accepts works, including names that are not valid UTF-8.
    """
    try:
        buf = np.fromfile(path, dtype=np.uint8)
    except OSError as e:
        raise DecodeError(f"could not read file: {path} ({e})") from e
    if buf.size == 0:
        raise DecodeError(f"empty file: {path}")
    try:
        img = cv2.imdecode(buf, cv2.IMREAD_COLOR)
    except cv2.error as e:
        raise DecodeError(f"OpenCV could not decode file: {path} ({e})") from e
    if img is None or img.size == 0:
        raise DecodeError(f"OpenCV could not read file: {path}")
    return img

def save_jpg(img: np.ndarray, path: Path, quality: int = 95) -> Path:
    """Encode in memory, then write the bytes from Python (same naming rules as load)."""
    path = Path(path)
    try:
        ok, buf = cv2.imencode(".jpg", img, [int(cv2.IMWRITE_JPEG_QUALITY), quality])
    except cv2.error as e:
        raise PersistError(f"{path}: {e}") from e
    if not ok:
        raise PersistError(f"{path}: cv2.imencode returned False")
    try:
        path.write_bytes(buf.tobytes())
    except OSError as e:
        raise PersistError(f"{path}: {e}") from e
    return path

def jpeg_roundtrip(img: np.ndarray, quality: int) -> np.ndarray:
    """Encode to JPEG in memory and decode straight back (keeps channel count)."""
    ok, buf = cv2.imencode(".jpg", img, [int(cv2.IMWRITE_JPEG_QUALITY), quality])
    if not ok:
        raise PersistError("cv2.imencode could not produce a JPEG stream")
    out = cv2.imdecode(buf, cv2.IMREAD_UNCHANGED)
    if out is None:
        raise DecodeError("cv2.imdecode could not read back the JPEG stream")
    return out

def printable(text: str) -> str:
    """Escape surrogates left by undecodable filenames so the line can be printed."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")
