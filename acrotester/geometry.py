"""Rectangle and size arithmetic for centring and scaling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


@dataclass(frozen=True)
class Size:
    width: int
    height: int


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    def center(self) -> tuple[int, int]:
        """Centre point, rounded toward zero."""
        return (
            _trunc_div(self.x + self.right, 2),
            _trunc_div(self.y + self.bottom, 2),
        )

    def contains(self, x: int, y: int) -> bool:
        """Tell whether the point lies inside the rectangle, edges included."""
        left, right = sorted((self.x, self.right))
        top, bottom = sorted((self.y, self.bottom))
        return left <= x <= right and top <= y <= bottom


def scale_keep_aspect(size: Size, target: Size) -> Size:
    """Largest size with the aspect ratio of ``size`` that fits inside ``target``."""
    if size.width == 0 or size.height == 0:
        return target
    rw = _trunc_div(target.height * size.width, size.height)
    if rw <= target.width:
        return Size(rw, target.height)
    return Size(target.width, _trunc_div(target.width * size.height, size.width))


def scaled_size(image_size: Size, widget_size: Size, scale_mode: int = 0) -> Size:
    """Size an image takes in a widget.

    Mode 0 shrinks only images that do not fit, mode 1 always scales keeping the
    aspect ratio, any other mode stretches to the widget.
    """
    if scale_mode == 0:
        if image_size.width > widget_size.width or image_size.height > widget_size.height:
            return scale_keep_aspect(image_size, widget_size)
        return image_size
    if scale_mode == 1:
        return scale_keep_aspect(image_size, widget_size)
    return widget_size


def center_rect(
    image_size: Size, widget_rect: Rect, border_width: int = 2, scale_mode: int = 0
) -> Rect:
    """Rectangle where an image is drawn centred inside ``widget_rect``.

    Even coordinates are moved one pixel along.
    """
    inner = Size(widget_rect.width - border_width, widget_rect.height - border_width)
    new_size = scaled_size(image_size, inner, scale_mode)
    cx, cy = widget_rect.center()
    x = cx - _trunc_div(new_size.width, 2)
    y = cy - _trunc_div(new_size.height, 2)
    x += 1 if x % 2 == 0 else 0
    y += 1 if y % 2 == 0 else 0
    return Rect(x, y, new_size.width, new_size.height)


def center_in(form_size: Size, base_rect: Rect) -> tuple[int, int]:
    """Top-left point that centres a form of ``form_size`` over ``base_rect``."""
    return (
        _trunc_div(base_rect.width, 2) - _trunc_div(form_size.width, 2) + base_rect.x,
        _trunc_div(base_rect.height, 2) - _trunc_div(form_size.height, 2) + base_rect.y,
    )


def check_center_rect(rect: Rect, desk_rect: Rect) -> Rect:
    """Centre ``rect`` on a screen; the vertical position ignores the screen's y offset."""
    x = _trunc_div(desk_rect.width, 2) - _trunc_div(rect.width, 2) + desk_rect.x
    y = _trunc_div(desk_rect.height, 2) - _trunc_div(rect.height, 2)
    return Rect(x, y, rect.width, rect.height)


def screen_index(rects: Iterable[Rect], x: int, y: int) -> int:
    """Index of the first screen containing the point, or 0."""
    return next((i for i, rect in enumerate(rects) if rect.contains(x, y)), 0)