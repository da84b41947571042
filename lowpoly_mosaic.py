#!/usr/bin/env python3
"""
lowpoly_mosaic.py
Render images as low-poly mosaics of two-triangle tiles.

Usage:
  python lowpoly_mosaic.py INPUT [--outdir DIR] [--tile-size N] [--jobs J] [--debug]

Input:
  Any Pillow-readable image, or a folder of them. Alpha is read but ignored.

Output:
  RGBA PNG named <stem>_lowpoly.png next to INPUT (or in --outdir). The output
  is cropped to a whole number of tiles in each direction.

Notes:
  Each tile is split along one diagonal, chosen from the hues of its four
  quadrants, and both halves are flat-filled. Folders are processed with
  --jobs files in parallel; per-file logs are printed in order.
"""

from __future__ import annotations

import argparse
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from lowpoly.constants import DEFAULT_TILE_SIZE, IMAGE_EXTENSIONS, OUTPUT_SUFFIX
from lowpoly.errors import ConfigError, LowPolyError
from lowpoly.image_io import load_image_source, save_canvas_png
from lowpoly.processor import TileGridProcessor
from lowpoly.utils import (
    captured_log,
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_total_duration_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
    warn,
)

# CLI args & small helpers


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        src: Path to image or folder
        outdir: optional Path for outputs
        tile_size: tile edge in pixels
        jobs: files processed in parallel
        debug: bool for verbose grid details
    """
    parser = argparse.ArgumentParser(
        prog="lowpoly_mosaic",
        description="Render image(s) as a low-poly triangle mosaic.",
    )
    parser.add_argument("src", type=Path, help="Input image or folder")
    parser.add_argument(
        "--outdir", type=Path, default=None, help="Output directory (optional)"
    )
    parser.add_argument(
        "--tile-size",
        type=int,
        default=DEFAULT_TILE_SIZE,
        help=f"Tile edge in pixels (default {DEFAULT_TILE_SIZE}).",
    )
    parser.add_argument(
        "--jobs", type=int, default=1, help="Files processed in parallel"
    )
    parser.add_argument("--debug", action="store_true", help="Verbose grid details")
    return parser.parse_args(argv)


def output_path_for(src_path: Path, outdir: Optional[Path]) -> Path:
    name = f"{src_path.stem}{OUTPUT_SUFFIX}.png"
    return (outdir / name) if outdir else src_path.with_name(name)


def list_image_files(folder: Path) -> List[Path]:
    """Images in folder by known extension, excluding earlier outputs, sorted by name."""
    files = [
        p
        for p in folder.iterdir()
        if p.is_file()
        and p.suffix.lower() in IMAGE_EXTENSIONS
        and not p.stem.endswith(OUTPUT_SUFFIX)
    ]
    files.sort(key=lambda p: p.name.lower())
    return files


# Per-file processing


def process_single_image(
    src_path: Path, out_path: Path, processor: TileGridProcessor
) -> bool:
    """
    Process a single image path end-to-end:
      load -> tile -> save -> report.
    Returns False when there was nothing to write.
    """
    t_start = time.perf_counter()
    print_banner(src_path.name)

    image = load_image_source(src_path)
    canvas = processor.process(image)
    if canvas.width == 0 or canvas.height == 0:
        warn(
            f"{src_path.name} is {image.width}x{image.height}, smaller than one "
            f"{processor.tile_size}px tile; nothing written"
        )
        return False

    out_path.parent.mkdir(parents=True, exist_ok=True)
    written = save_canvas_png(out_path, canvas)
    t_end = time.perf_counter()

    tiles = (canvas.width // processor.tile_size) * (canvas.height // processor.tile_size)
    log(f"Wrote {written.name} | size={canvas.width}x{canvas.height} | tiles={tiles:,}")
    log(
        key_value_pairs_to_string(
            [
                ("Cropped cols", image.width - canvas.width),
                ("Cropped rows", image.height - canvas.height),
            ]
        )
    )
    log(f"Total time {format_total_duration_compact(t_end - t_start)}")
    return True


def _process_one_live(
    path: Path, outdir: Optional[Path], processor: TileGridProcessor
) -> bool:
    """Process a single file, streaming logs. Returns False on failure."""
    try:
        process_single_image(path, output_path_for(path, outdir), processor)
    except (LowPolyError, OSError, ValueError) as e:
        error(f"{path.name}: {e}")
        return False
    return True


def _process_one_captured(
    path: Path, outdir: Optional[Path], processor: TileGridProcessor
) -> Tuple[str, bool]:
    """
    Process a single file with its log output captured.

    Useful for concurrent execution where output should be printed in order.
    """
    with captured_log() as buf:
        ok = _process_one_live(path, outdir, processor)
    return buf.getvalue(), ok


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    Handles single file or folder. In folder mode supports --jobs parallelism
    while preserving readable output ordering. Returns the exit status.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    try:
        processor = TileGridProcessor(args.tile_size, debug=args.debug)
    except ConfigError as e:
        error(str(e))
        return 2

    print_config_line(
        "run",
        [("Tile size", processor.tile_size), ("Jobs", args.jobs)],
        debug=False,
    )

    src: Path = args.src
    if not src.exists():
        error(f"not found: {src}")
        return 2

    if not src.is_dir():
        return 0 if _process_one_live(src, args.outdir, processor) else 1

    files = list_image_files(src)
    if args.debug:
        debug_log(
            key_value_pairs_to_string([("Images", len(files)), ("Jobs", args.jobs)])
        )

    if args.jobs <= 1:
        results = [_process_one_live(p, args.outdir, processor) for p in files]
    else:
        with ThreadPoolExecutor(max_workers=args.jobs) as ex:
            futures = [
                ex.submit(_process_one_captured, p, args.outdir, processor)
                for p in files
            ]
            blocks = [f.result() for f in futures]
        print("".join(text for text, _ok in blocks), end="", flush=True)
        results = [ok for _text, ok in blocks]

    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
