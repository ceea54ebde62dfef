"""
The fixed preset table: every (suffix, transform, params) the driver applies,
in output order. Values come from config; transforms stay pure.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

import cv2
import numpy as np

from .. import config
from ..errors import InvalidImage
from . import transforms as T


@dataclass(frozen=True)
class Preset:
    suffix: str                               # filename suffix, "" for splits
    op: Callable[..., Any]
    kwargs: Dict[str, Any] = field(default_factory=dict)
    uses_rng: bool = False                    # op takes the shuffle source
    splits: bool = False                      # op returns one plane per channel

    def variants(self, img: np.ndarray, rng=None) -> List[Tuple[str, np.ndarray]]:
        """Run the transform and name its output(s)."""
        kwargs = dict(self.kwargs)
        if self.uses_rng:
            kwargs["rng"] = rng
        try:
            out = self.op(img, **kwargs)
        except cv2.error as e:
            # OpenCV asserts on layouts check_image lets through (e.g. 2 channels)
            raise InvalidImage(f"{self.op.__name__}: {e}") from e
        if self.splits:
            return list(zip(channel_suffixes(len(out)), out))
        return [(self.suffix, out)]


def channel_suffixes(n: int) -> Tuple[str, ...]:
    """
    Plane names in storage order: B, G, R for colour, ch0..chN-1 otherwise.
    Plane 0 is blue in OpenCV storage, so it is written as _B, not _R.
    """
    if n == 3:
        return ("B", "G", "R")
    return tuple(f"ch{i}" for i in range(n))


def build_presets() -> Tuple[Preset, ...]:
    s = config.RGB_SHIFT
    t = config.TRANSLATE_PX
    hue, sat, val = config.HSV_PRESET

    presets: List[Preset] = []
    presets += [Preset(f"rot_{int(a)}", T.rotate, {"angle": a})
                for a in config.ROTATION_ANGLES]
    presets += [Preset(f"zoom_{int(round(z * 10))}", T.zoom, {"factor": z})
                for z in config.ZOOM_FACTORS]
    presets += [
        Preset("flip_v", T.flip, {"axis": "vertical"}),
        Preset("flip_h", T.flip, {"axis": "horizontal"}),
        Preset("flip_both", T.flip, {"axis": "both"}),
        Preset("rgbshift_r", T.rgb_shift, {"r_shift": s, "g_shift": 0, "b_shift": 0}),
        Preset("rgbshift_g", T.rgb_shift, {"r_shift": 0, "g_shift": s, "b_shift": 0}),
        Preset("rgbshift_b", T.rgb_shift, {"r_shift": 0, "g_shift": 0, "b_shift": s}),
        Preset("hsv", T.hue_saturation_value,
               {"hue_shift": hue, "sat_mult": sat, "val_mult": val}),
        Preset("chshuffle", T.channel_shuffle, uses_rng=True),
        Preset("clahe", T.clahe,
               {"clip_limit": config.CLAHE_CLIP, "tile_grid": config.CLAHE_TILEGR}),
        Preset("contrast", T.adjust_contrast, {"alpha": config.CONTRAST_ALPHA}),
        Preset("gamma", T.adjust_gamma, {"gamma": config.GAMMA}),
        Preset("bright", T.adjust_brightness, {"beta": config.BRIGHTNESS_BETA}),
        Preset("blur", T.blur, {"ksize": config.BLUR_KSIZE}),
        Preset("medblur", T.median_blur, {"ksize": config.MEDIAN_KSIZE}),
        Preset("gray", T.to_gray),
        Preset(f"jpeg{config.JPEG_QUALITY}", T.jpeg_compression,
               {"quality": config.JPEG_QUALITY}),
        Preset("", T.split_channels, splits=True),
        Preset("trans_left", T.translate, {"dx": -t, "dy": 0}),
        Preset("trans_right", T.translate, {"dx": t, "dy": 0}),
        Preset("trans_up", T.translate, {"dx": 0, "dy": -t}),
        Preset("trans_down", T.translate, {"dx": 0, "dy": t}),
    ]
    return tuple(presets)


PRESETS = build_presets()
