"""
Test Suite: Tile Grid Processing

Output cropping, configuration checks, and whole-image scenarios.
"""

import numpy as np
import pytest

from lowpoly.core_types import ArrayImage
from lowpoly.errors import ConfigError, DegenerateGeometryError
from lowpoly.processor import (
    TileGridProcessor,
    output_size,
    process,
    tile_origins,
)
from lowpoly.quadrants import quadrant_colours
from lowpoly.render import choose_split


def _solid(h, w, rgb):
    arr = np.zeros((h, w, 3), dtype=np.uint8)
    arr[...] = rgb
    return ArrayImage(arr)


class RecordingImage:
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.reads = 0

    def get_pixel(self, x, y):
        self.reads += 1
        return (1, 2, 3)


class TestGeometry:
    @pytest.mark.parametrize(
        "w, h, size, expected",
        [
            (64, 64, 32, (64, 64)),
            (35, 35, 32, (32, 32)),
            (100, 70, 32, (96, 64)),
            (31, 100, 32, (0, 96)),
            (7, 9, 3, (6, 9)),
        ],
    )
    def test_output_size(self, w, h, size, expected):
        assert output_size(w, h, size) == expected

    def test_tile_origins_cover_grid_once(self):
        origins = list(tile_origins(96, 64, 32))
        assert len(origins) == len(set(origins)) == 6
        assert set(origins) == {(x, y) for x in (0, 32, 64) for y in (0, 32)}

    def test_canvas_matches_output_size(self):
        canvas = process(_solid(70, 100, (5, 5, 5)), 32)
        assert (canvas.width, canvas.height) == (96, 64)


class TestConfig:
    def test_default_tile_size(self):
        assert TileGridProcessor().tile_size == 32

    @pytest.mark.parametrize("bad", [0, -1, -32])
    def test_non_positive_tile_size(self, bad):
        with pytest.raises(ConfigError):
            TileGridProcessor(bad)

    @pytest.mark.parametrize("bad", [2.5, "32", True, None])
    def test_non_int_tile_size(self, bad):
        with pytest.raises(ConfigError):
            TileGridProcessor(bad)

    @pytest.mark.parametrize("size", [np.int64(32), np.int32(8), np.uint16(4)])
    def test_numpy_integer_tile_size(self, size):
        proc = TileGridProcessor(size)
        assert proc.tile_size == int(size)
        assert type(proc.tile_size) is int
        canvas = proc.process(_solid(64, 64, (255, 0, 0)))
        assert canvas.width == canvas.height == 64

    def test_numpy_bool_tile_size(self):
        with pytest.raises(ConfigError):
            TileGridProcessor(np.bool_(True))

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            TileGridProcessor(0)

    def test_rejected_before_sampling(self):
        img = RecordingImage(64, 64)
        with pytest.raises(ConfigError):
            process(img, 0)
        assert img.reads == 0

    def test_tile_size_is_read_only(self):
        proc = TileGridProcessor(16)
        with pytest.raises(AttributeError):
            proc.tile_size = 8


class TestScenarios:
    def test_solid_red(self):
        canvas = process(_solid(64, 64, (255, 0, 0)), 32)
        assert (canvas.width, canvas.height) == (64, 64)
        assert np.all(canvas.pixels == (255, 0, 0, 255))

    def test_remainder_is_discarded(self):
        arr = np.zeros((35, 35, 3), dtype=np.uint8)
        arr[...] = (0, 255, 0)
        arr[:32, :32] = (255, 0, 0)
        canvas = process(ArrayImage(arr), 32)
        assert (canvas.width, canvas.height) == (32, 32)
        assert np.all(canvas.pixels == (255, 0, 0, 255))

    def test_tile_size_one_is_degenerate(self):
        with pytest.raises(DegenerateGeometryError):
            process(_solid(4, 4, (9, 9, 9)), 1)

    def test_blue_yellow_tile_splits_on_anti_diagonal(self):
        arr = np.zeros((32, 32, 3), dtype=np.uint8)
        arr[:, :16] = (0, 0, 255)
        arr[:, 16:] = (255, 255, 0)
        img = ArrayImage(arr)

        colours = quadrant_colours(img, 0, 0, 32)
        assert colours.top == colours.bottom == (127, 127, 127)

        canvas = process(img, 32)
        # top is 120 from blue (left) and 60 from yellow (right)
        assert canvas.get_pixel(2, 2) == (63, 63, 191, 255)
        assert canvas.get_pixel(29, 29) == (191, 191, 63, 255)

    def test_yellow_blue_tile_splits_on_main_diagonal(self):
        arr = np.zeros((32, 32, 3), dtype=np.uint8)
        arr[:, :16] = (255, 255, 0)
        arr[:, 16:] = (0, 0, 255)
        canvas = process(ArrayImage(arr), 32)
        assert canvas.get_pixel(29, 2) == (63, 63, 191, 255)
        assert canvas.get_pixel(2, 29) == (191, 191, 63, 255)

    def test_smaller_than_one_tile(self):
        canvas = process(_solid(10, 10, (1, 1, 1)), 32)
        assert (canvas.width, canvas.height) == (0, 0)

    @pytest.mark.parametrize("size", [4, 5, 16])
    def test_every_tile_uses_only_its_two_colours(self, size):
        rng = np.random.default_rng(size)
        img = ArrayImage(rng.integers(0, 256, size=(40, 50, 3), dtype=np.uint8))
        canvas = process(img, size)
        assert np.all(canvas.pixels[..., 3] == 255)
        for x, y in tile_origins(canvas.width, canvas.height, size):
            plan = choose_split(x, y, size, quadrant_colours(img, x, y, size))
            expected = {plan.first[1], plan.second[1]}
            tile = canvas.pixels[y : y + size, x : x + size, :3].reshape(-1, 3)
            seen = {tuple(int(v) for v in px) for px in tile.tolist()}
            assert seen <= expected

    def test_get_pixel_only_source(self):
        img = RecordingImage(8, 8)
        canvas = process(img, 4)
        assert np.all(canvas.pixels == (1, 2, 3, 255))
        assert img.reads > 0


class TestDebugOutput:
    def test_debug_lines(self, capsys):
        TileGridProcessor(32, debug=True).process(_solid(35, 70, (3, 3, 3)))
        out = capsys.readouterr().out
        assert "[debug] [grid]" in out
        assert "Output: 64x32" in out
        assert "Tiles: 2" in out

    def test_quiet_by_default(self, capsys):
        process(_solid(32, 32, (3, 3, 3)), 32)
        assert capsys.readouterr().out == ""
