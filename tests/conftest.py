from pathlib import Path

import cv2
import numpy as np
import pytest

@pytest.fixture
def bgr() -> np.ndarray:
    """Noisy 100x100 colour image with distinct channel planes."""
    return np.random.default_rng(0).integers(0, 256, size=(100, 100, 3), dtype=np.uint8)

@pytest.fixture
def gradient() -> np.ndarray:
    y, x = np.mgrid[0:100, 0:100]
    b = (x * 2.5).astype(np.uint8)
    g = (y * 2.5).astype(np.uint8)
    r = ((x + y) * 1.25).astype(np.uint8)
    return np.dstack([b, g, r])

@pytest.fixture
def cat_dir(tmp_path: Path, gradient: np.ndarray) -> Path:
    d = tmp_path / "in"
    d.mkdir()
    assert cv2.imwrite(str(d / "cat.jpg"), gradient)
    return d
