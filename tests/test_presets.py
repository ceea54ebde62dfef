import cv2
import numpy as np
import pytest

from dataaug import config
from dataaug.errors import InvalidImage
from dataaug.preprocessing import transforms as T
from dataaug.preprocessing.presets import PRESETS, Preset, channel_suffixes


def _suffixes(img, rng=None):
    return [s for p in PRESETS for s, _ in p.variants(img, rng)]

def test_colour_image_gets_38_uniquely_named_outputs(bgr):
    suffixes = _suffixes(bgr, np.random.default_rng(0))
    assert len(suffixes) == 38
    assert len(set(suffixes)) == len(suffixes)

def test_table_order_and_names(bgr):
    suffixes = _suffixes(bgr, np.random.default_rng(0))
    assert suffixes[:12] == [f"rot_{a}" for a in range(30, 361, 30)]
    assert suffixes[12:15] == ["zoom_12", "zoom_15", "zoom_20"]
    assert suffixes[15:18] == ["flip_v", "flip_h", "flip_both"]
    assert suffixes[18:21] == ["rgbshift_r", "rgbshift_g", "rgbshift_b"]
    assert suffixes[21:31] == ["hsv", "chshuffle", "clahe", "contrast", "gamma",
                               "bright", "blur", "medblur", "gray", "jpeg50"]
    assert suffixes[31:34] == ["B", "G", "R"]
    assert suffixes[34:] == ["trans_left", "trans_right", "trans_up", "trans_down"]

def test_presets_follow_config():
    rotations = [p for p in PRESETS if p.op is T.rotate]
    zooms = [p for p in PRESETS if p.op is T.zoom]
    assert [p.kwargs["angle"] for p in rotations] == list(config.ROTATION_ANGLES)
    assert [p.kwargs["factor"] for p in zooms] == list(config.ZOOM_FACTORS)
    assert len(PRESETS) == 36

def test_split_planes_are_named_by_storage_order(bgr):
    split = next(p for p in PRESETS if p.splits)
    named = dict(split.variants(bgr))
    assert np.array_equal(named["B"], bgr[..., 0])
    assert np.array_equal(named["R"], bgr[..., 2])

def test_channel_suffixes():
    assert channel_suffixes(3) == ("B", "G", "R")
    assert channel_suffixes(1) == ("ch0",)
    assert channel_suffixes(4) == ("ch0", "ch1", "ch2", "ch3")

def test_shuffle_preset_receives_rng(bgr):
    calls = []

    class Source:
        def permutation(self, n):
            calls.append(n)
            return np.arange(n)[::-1]

    shuffle = next(p for p in PRESETS if p.suffix == "chshuffle")
    (suffix, out), = shuffle.variants(bgr, Source())
    assert calls == [3]
    assert np.array_equal(out, bgr[..., ::-1])

def test_no_preset_mutates_its_input(bgr):
    before = bgr.copy()
    for preset in PRESETS:
        preset.variants(bgr, np.random.default_rng(1))
    assert np.array_equal(bgr, before)

def test_custom_preset_passes_kwargs(bgr):
    p = Preset("bright_10", T.adjust_brightness, {"beta": 10})
    (suffix, out), = p.variants(np.zeros((2, 2, 3), np.uint8))
    assert suffix == "bright_10"
    assert (out == 10).all()

def test_opencv_assertions_become_invalid_image():
    def needs_colour(img):
        return cv2.cvtColor(img, cv2.COLOR_BGR2GRAY)

    with pytest.raises(InvalidImage):
        Preset("x", needs_colour).variants(np.zeros((4, 4, 2), np.uint8))
