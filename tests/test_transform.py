from pixel_studio.enums import FlipAxis, RotateDirection
from pixel_studio.logic.layer import Cell
from pixel_studio.logic.tools.transform import flip_pixels, rotate_pixels

PIXELS = {Cell(0, 0): "#111111", Cell(3, 1): "#222222", Cell(1, 2): "#333333"}


class TestRotate:

    def test_cw_single_pixel(self):
        # (x, y) -> (g-1-y, x)
        assert rotate_pixels({Cell(0, 1): "#A"}, RotateDirection.CW, 4) == {Cell(2, 0): "#A"}

    def test_ccw_single_pixel(self):
        # (x, y) -> (y, g-1-x)
        assert rotate_pixels({Cell(0, 1): "#A"}, "ccw", 4) == {Cell(1, 3): "#A"}

    def test_four_cw_turns_are_identity(self):
        pixels = PIXELS
        for _ in range(4):
            pixels = rotate_pixels(pixels, RotateDirection.CW, 4)
        assert pixels == PIXELS

    def test_cw_then_ccw_is_identity(self):
        turned = rotate_pixels(PIXELS, RotateDirection.CW, 4)
        assert rotate_pixels(turned, RotateDirection.CCW, 4) == PIXELS


class TestFlip:

    def test_horizontal(self):
        assert flip_pixels({Cell(0, 1): "#A"}, FlipAxis.HORIZONTAL, 4) == {Cell(3, 1): "#A"}

    def test_vertical(self):
        assert flip_pixels({Cell(0, 1): "#A"}, "vertical", 4) == {Cell(0, 2): "#A"}

    def test_double_flip_is_identity(self):
        for axis in FlipAxis:
            assert flip_pixels(flip_pixels(PIXELS, axis, 4), axis, 4) == PIXELS
