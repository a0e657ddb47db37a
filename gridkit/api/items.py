"""Public grid item description supplied by the host."""

from __future__ import annotations

import math
from dataclasses import dataclass

from gridkit.api.geometry import GridRect


@dataclass(frozen=True, slots=True)
class GridItemSpec:
    """Host-owned placement, constraints and flags of one item.

    ``is_bounded`` and ``transform_scale`` fall back to runtime config when
    left as ``None``.
    """

    item_id: str
    x: int
    y: int
    w: int
    h: int
    min_w: int = 1
    max_w: float = math.inf
    min_h: int = 1
    max_h: float = math.inf
    is_draggable: bool = True
    is_resizable: bool = True
    is_bounded: bool | None = None
    static: bool = False
    transform_scale: float | None = None
    class_name: str = ""

    @property
    def rect(self) -> GridRect:
        return GridRect(x=self.x, y=self.y, w=self.w, h=self.h)

    @property
    def draggable(self) -> bool:
        return self.is_draggable and not self.static

    @property
    def resizable(self) -> bool:
        return self.is_resizable and not self.static


__all__ = ["GridItemSpec"]
