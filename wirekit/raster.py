"""Anti-aliased line drawing onto an RGBA pixel image."""

from __future__ import annotations

import math
from dataclasses import dataclass

WHITE = 0xFFFFFFFF
_COLOR_MASK = 0xFFFFFFFF
_ALPHA_CLEAR = 0xFFFFFF00


class Image:
    """A width x height grid of 32-bit RGBA colours, all zero at first."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside the image")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)``; raises ``IndexError`` outside the image."""
        self._pixels[self._offset(x, y)] = color & _COLOR_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Colour of the pixel at ``(x, y)``."""
        return self._pixels[self._offset(x, y)]


@dataclass
class DrawTargets:
    """The two endpoints of a line and their colours."""

    x0: int
    y0: int
    x1: int
    y1: int
    color_0: int = WHITE
    color_1: int = WHITE

    def swap(self) -> None:
        """Exchange the two endpoints."""
        self.x0, self.x1 = self.x1, self.x0
        self.y0, self.y1 = self.y1, self.y0


def targets_at_center(x_center: int, y_center: int) -> DrawTargets:
    """Targets with both endpoints at the centre and white colours."""
    return DrawTargets(x_center, y_center, x_center, y_center, WHITE, WHITE)


def guarantee_valid_pixel(x: float, y: float, image: Image) -> tuple[float, float]:
    """Clamp ``(x, y)`` into the image bounds."""
    if x >= image.width:
        x = image.width - 1
    if y >= image.height:
        y = image.height - 1
    if x < 0:
        x = 0
    if y < 0:
        y = 0
    return x, y


def faded_color(color: int, modifier: float) -> int:
    """Replace the alpha byte of ``color`` with ``255 * (1 - modifier)``."""
    alpha = int(255 * (1 - modifier))
    return ((color & _ALPHA_CLEAR) | (alpha & _COLOR_MASK)) & _COLOR_MASK


def endpoints_outside(targets: DrawTargets, image: Image) -> bool:
    """True when either endpoint lies outside the image."""

    def outside(x: int, y: int) -> bool:
        return not (0 <= x < image.width and 0 <= y < image.height)

    return outside(targets.x0, targets.y0) or outside(targets.x1, targets.y1)


def _c_round(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _put(image: Image, x: float, y: float, color: int) -> None:
    image.put_pixel(int(x), int(y), color)


def _horizontal_endpoint(image: Image, x: int, y: int, overlap: float) -> None:
    dist_start = y - int(y)
    px, py = guarantee_valid_pixel(int(x) + 0.5, int(y), image)
    _put(image, px, py, faded_color(WHITE, (1 - dist_start) * overlap))
    px, py = guarantee_valid_pixel(px, int(y) + 1, image)
    _put(image, px, py, faded_color(WHITE, dist_start * overlap))


def _horizontal_endpoints(image: Image, targets: DrawTargets) -> None:
    if endpoints_outside(targets, image):
        return
    overlap = 1 - (targets.x0 + 0.5) - int(targets.x0 + 0.5)
    _horizontal_endpoint(image, targets.x0, targets.y0, overlap)
    overlap = (targets.x1 - 0.5) - int(targets.x1 - 0.5)
    _horizontal_endpoint(image, targets.x1, targets.y1, overlap)


def draw_horizontal(image: Image, targets: DrawTargets) -> None:
    """Draw a line whose run is longer than its rise; endpoints are ordered left to right."""
    if targets.x1 < targets.x0:
        targets.swap()
    delta_x = targets.x1 - targets.x0
    delta_y = targets.y1 - targets.y0
    slope = delta_y / delta_x if delta_x != 0 else 1
    _horizontal_endpoints(image, targets)
    for i in range(1, _c_round(delta_x + 0.5) + 1):
        x = targets.x0 + i
        y = targets.y0 + i * slope
        pixel_delta = y - int(y)
        if (
            not (0 <= x < image.width)
            or not (0 <= y < image.height)
            or math.floor(y) + 1 >= image.height
        ):
            continue
        x, y = guarantee_valid_pixel(x, y, image)
        image.put_pixel(math.floor(x), math.floor(y), targets.color_0)
        image.put_pixel(
            math.floor(x), int(y) + 1, faded_color(targets.color_0, pixel_delta)
        )


def _vertical_first_pixel(image: Image, targets: DrawTargets) -> None:
    overlap = 1 - (targets.y0 + 0.5) - int(targets.y0 + 0.5)
    dist_start = targets.y0 - int(targets.y0)
    px, py = guarantee_valid_pixel(int(targets.x0) + 0.5, int(targets.y0), image)
    _put(image, px, py, faded_color(WHITE, (1 - dist_start) * overlap))
    px, py = guarantee_valid_pixel(px, int(targets.y0) + 1, image)
    _put(image, px, py, faded_color(WHITE, dist_start * overlap))


def _vertical_endpoints(image: Image, targets: DrawTargets) -> None:
    if endpoints_outside(targets, image):
        return
    _vertical_first_pixel(image, targets)
    overlap = (targets.y1 - 0.5) - int(targets.y1 - 0.5)
    dist_end = targets.y1 - int(targets.y1)
    px, py = guarantee_valid_pixel(int(targets.x1), int(targets.y1) + 0.5, image)
    _put(image, px, py, faded_color(WHITE, (1 - dist_end) * overlap))
    px, py = guarantee_valid_pixel(int(targets.x1) + 1, py, image)
    _put(image, px, py, faded_color(WHITE, dist_end * overlap))


def draw_vertical(image: Image, targets: DrawTargets) -> None:
    """Draw a line whose rise is at least its run; endpoints are ordered top to bottom."""
    if targets.y1 < targets.y0:
        targets.swap()
    delta_x = targets.x1 - targets.x0
    delta_y = targets.y1 - targets.y0
    slope = delta_x / delta_y if delta_y != 0 else 1
    _vertical_endpoints(image, targets)
    for i in range(1, _c_round(delta_y + 0.5) + 1):
        x = targets.x0 + i * slope
        y = targets.y0 + i
        pixel_delta = y - int(y)
        if (
            not (0 <= x < image.width)
            or not (0 <= y < image.height)
            or math.floor(x) + 1 >= image.width
        ):
            continue
        x, y = guarantee_valid_pixel(x, y, image)
        image.put_pixel(
            math.floor(x), math.floor(y), faded_color(targets.color_0, pixel_delta)
        )
        image.put_pixel(math.floor(x) + 1, math.floor(y), targets.color_0)


def draw_line(image: Image, targets: DrawTargets) -> None:
    """Draw the line between the targets, choosing the direction by its steeper axis."""
    if abs(targets.y1 - targets.y0) < abs(targets.x1 - targets.x0):
        draw_horizontal(image, targets)
    else:
        draw_vertical(image, targets)