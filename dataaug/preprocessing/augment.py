"""
Fixed-catalog augmentation of a flat folder:
- Takes every regular file directly inside input_dir (no recursion)
- Applies every preset in PRESETS to each decodable image
- Filenames: <stem>_<suffix>.jpg, e.g. cat.png -> cat_rot_30.jpg ... cat_trans_down.jpg

Undecodable files are skipped; a transform that rejects an image is skipped for
that image only; a failed write is logged and the next output goes ahead.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from ..config import OUTPUT_EXT, OUTPUT_QUALITY
from ..errors import AugmentError, DecodeError, PersistError
from ..utils.io import ensure_dir, iter_files, load_image_bgr, printable, save_jpg
from .presets import PRESETS, Preset


@dataclass
class AugmentStats:
    files_seen: int = 0
    images_decoded: int = 0
    outputs_written: int = 0
    outputs_failed: int = 0
    transforms_skipped: int = 0


def output_path(output_dir: Path, stem: str, suffix: str) -> Path:
    return Path(output_dir) / f"{stem}_{suffix}{OUTPUT_EXT}"

def augment_image(
    img: np.ndarray,
    stem: str,
    output_dir: Path,
    rng=None,
    quality: int = OUTPUT_QUALITY,
    presets: Sequence[Preset] = PRESETS,
    stats: Optional[AugmentStats] = None,
) -> AugmentStats:
    """Write one output per (preset, variant) for a single decoded image."""
    stats = stats if stats is not None else AugmentStats()
    for preset in presets:
        try:
            variants = preset.variants(img, rng)
        except AugmentError as e:
            print(printable(f"[SKIP] {stem}_{preset.suffix or preset.op.__name__}: {e}"))
            stats.transforms_skipped += 1
            continue

        for suffix, out in variants:
            path = output_path(output_dir, stem, suffix)
            try:
                save_jpg(out, path, quality=quality)
            except PersistError as e:
                print(printable(f"[ERROR] Failed to save: {path} ({e})"))
                stats.outputs_failed += 1
                continue
            print(printable(f"[Augment] Saved: {path}"))
            stats.outputs_written += 1
    return stats

def augment_folder(
    input_dir: Path,
    output_dir: Path,
    rng=None,
    quality: int = OUTPUT_QUALITY,
) -> AugmentStats:
    """
    For every image in input_dir, write the full preset catalog to output_dir.
    `rng` feeds the channel shuffle; None means a fresh, unseeded generator.
    """
    input_dir = Path(input_dir)
    output_dir = ensure_dir(Path(output_dir))
    rng = np.random.default_rng() if rng is None else rng
    print(printable(f"[Augment] {input_dir} -> {output_dir} ({len(PRESETS)} presets per image)"))

    stats = AugmentStats()
    for src in iter_files(input_dir):
        stats.files_seen += 1
        try:
            img = load_image_bgr(src)
        except DecodeError as e:
            print(printable(f"[SKIP] {src}: {e}"))
            continue
        stats.images_decoded += 1
        augment_image(img, src.stem, output_dir, rng=rng, quality=quality, stats=stats)

    print(printable(f"✔ Augmentation complete: {stats.images_decoded}/{stats.files_seen} "
                    f"source images → {stats.outputs_written} files in {output_dir}"))
    return stats
