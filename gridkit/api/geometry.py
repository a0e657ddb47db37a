"""Public geometry types for grid and pixel space."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GridParameters:
    """Grid shape supplied by the host on every computation.

    ``margin`` and ``container_padding`` are ``(x, y)`` pairs in pixels.
    ``max_rows`` caps vertical placement when finite.
    """

    cols: int
    container_width: float
    row_height: float = 150.0
    margin: tuple[float, float] = (10.0, 10.0)
    container_padding: tuple[float, float] = (10.0, 10.0)
    max_rows: float = math.inf

    def __post_init__(self) -> None:
        if self.cols < 1:
            raise ValueError(f"cols must be >= 1, got {self.cols!r}")
        if self.row_height <= 0:
            raise ValueError(f"row_height must be > 0, got {self.row_height!r}")
        if self.max_rows < 0:
            raise ValueError(f"max_rows must be >= 0, got {self.max_rows!r}")

    @property
    def margin_x(self) -> float:
        return float(self.margin[0])

    @property
    def margin_y(self) -> float:
        return float(self.margin[1])

    @property
    def padding_x(self) -> float:
        return float(self.container_padding[0])

    @property
    def padding_y(self) -> float:
        return float(self.container_padding[1])


@dataclass(frozen=True, slots=True)
class GridRect:
    """Column/row placement and span of an item in grid cells."""

    x: int
    y: int
    w: int
    h: int


@dataclass(frozen=True, slots=True)
class GridPoint:
    """Grid cell position."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class GridSpan:
    """Grid cell span."""

    w: int
    h: int


@dataclass(frozen=True, slots=True)
class PixelPosition:
    """Top/left pixel offset inside the grid container."""

    top: float
    left: float


@dataclass(frozen=True, slots=True)
class PixelSize:
    """Pixel extent."""

    width: float
    height: float


@dataclass(frozen=True, slots=True)
class PixelRect:
    """Pixel-space box of an item."""

    top: float
    left: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def position(self) -> PixelPosition:
        return PixelPosition(top=self.top, left=self.left)

    @property
    def size(self) -> PixelSize:
        return PixelSize(width=self.width, height=self.height)


@dataclass(frozen=True, slots=True)
class ResizeConstraints:
    """Pixel min/max sizes handed to the resize gesture layer."""

    min_size: PixelSize
    max_size: PixelSize


__all__ = [
    "GridParameters",
    "GridPoint",
    "GridRect",
    "GridSpan",
    "PixelPosition",
    "PixelRect",
    "PixelSize",
    "ResizeConstraints",
]
