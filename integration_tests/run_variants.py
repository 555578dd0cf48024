#!/usr/bin/env python3
"""
Inspect the quarter-turn variant set of one or more 3×3 grids.

For each grid literal logs the corner, bounding-box size, symmetry order
and every canonical variant with its fingerprint.

Usage:
    python run_variants.py "Oxx/xOx/xOx" "xxx/xOO/xOx"
    python run_variants.py --verbose --log-file logs/variants.log "OOx/xxx/xxx"
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shape_core.raw_grid import RawGrid
from shape_core.variants import available_shapes, sorted_shapes, symmetry_order

from utils import setup_logger


def inspect_grid(raw: RawGrid, logger: logging.Logger) -> None:
    corner = raw.corner()
    shapes = available_shapes(raw)

    logger.info(f"Grid: {raw}")
    logger.info(f"  corner: {tuple(corner) if corner is not None else 'none'}")
    logger.info(f"  size (w, h): {raw.size()}")
    logger.info(f"  symmetry order: {symmetry_order(raw)}")
    logger.info(f"  variants: {len(shapes)}")
    for shape in sorted_shapes(shapes):
        logger.info(f"    {str(shape):<12} size={shape.size} fingerprint={shape.fingerprint():016x}")


def main():
    parser = argparse.ArgumentParser(description="Quarter-turn variant inspection")
    parser.add_argument("grids", nargs="+", help="Grid literals, e.g. Oxx/xOx/xOx")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write the log here")
    parser.add_argument("--verbose", action="store_true", help="Include shape_core debug records")
    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logger("run_variants", args.log_file, level)
    if args.verbose:
        core_logger = logging.getLogger("shape_core")
        core_logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            core_logger.addHandler(handler)

    for literal in args.grids:
        try:
            raw = RawGrid.from_string(literal)
        except ValueError as e:
            logger.error(f"Bad grid literal {literal!r}: {e}")
            return 2
        inspect_grid(raw, logger)

    return 0


if __name__ == "__main__":
    sys.exit(main())
