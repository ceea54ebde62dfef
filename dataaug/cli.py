import argparse
import sys
from pathlib import Path

import numpy as np

from .errors import UsageError
from .preprocessing.augment import augment_folder

def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="dataaug",
        description="Write the fixed augmentation catalog for every image in a folder")
    ap.add_argument("input_dir", nargs="?", type=Path,
                    help="Folder with source images (only direct entries are read)")
    ap.add_argument("output_dir", nargs="?", type=Path,
                    help="Folder for <stem>_<suffix>.jpg outputs; created if missing")
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for the channel shuffle (default: fresh entropy each run)")
    return ap

def parse_args(argv=None) -> argparse.Namespace:
    ap = build_argparser()
    args, _extra = ap.parse_known_args(argv)  # trailing extras are ignored
    if args.input_dir is None or args.output_dir is None:
        raise UsageError(ap.format_usage())
    return args

def main(argv=None) -> int:
    try:
        args = parse_args(argv)
    except UsageError as e:
        print(str(e).rstrip(), file=sys.stderr)
        return 1

    try:
        augment_folder(args.input_dir, args.output_dir,
                       rng=np.random.default_rng(args.seed))
    except OSError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
