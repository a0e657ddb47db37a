"""Position descriptors for rendering an item box.

Percentage mode exists for rendering passes that do not know the final
container size: left and width are emitted relative to the container, which a
translate() transform cannot express because its percentages resolve against
the element itself.
"""

from __future__ import annotations

from enum import StrEnum

from gridkit.api.geometry import PixelRect


class RenderMode(StrEnum):
    """How a pixel box is encoded for the renderer."""

    TRANSFORM = "transform"
    TOP_LEFT = "top_left"
    PERCENTAGE = "percentage"


def _number(value: float) -> str:
    as_float = float(value)
    if as_float.is_integer():
        return str(int(as_float))
    return repr(as_float)


def _px(value: float) -> str:
    return f"{_number(value)}px"


def percentage(fraction: float) -> str:
    """Format a container fraction as a CSS percentage."""
    return f"{_number(fraction * 100)}%"


def transform_style(rect: PixelRect) -> dict[str, str]:
    """Encode a box as translate() plus explicit size."""
    translate = f"translate({_px(rect.left)},{_px(rect.top)})"
    return {
        "transform": translate,
        "width": _px(rect.width),
        "height": _px(rect.height),
        "position": "absolute",
    }


def top_left_style(rect: PixelRect) -> dict[str, str]:
    """Encode a box as absolute top/left offsets."""
    return {
        "top": _px(rect.top),
        "left": _px(rect.left),
        "width": _px(rect.width),
        "height": _px(rect.height),
        "position": "absolute",
    }


def create_style(rect: PixelRect, mode: RenderMode | str, container_width: float) -> dict[str, str]:
    """Build the style descriptor for ``rect`` in the requested mode."""
    resolved = RenderMode(mode)
    if resolved is RenderMode.TRANSFORM:
        return transform_style(rect)
    style = top_left_style(rect)
    if resolved is RenderMode.PERCENTAGE:
        if container_width <= 0:
            raise ValueError(f"container_width must be > 0 for percentage styles, got {container_width!r}")
        style["left"] = percentage(rect.left / container_width)
        style["width"] = percentage(rect.width / container_width)
    return style


def item_class_names(
    *,
    class_name: str = "",
    static: bool = False,
    resizing: bool = False,
    draggable: bool = False,
    dragging: bool = False,
    dropping: bool = False,
    css_transforms: bool = False,
) -> str:
    """Return the space-joined state classes of an item element."""
    names = ["grid-item"]
    if class_name.strip():
        names.append(class_name.strip())
    flags = (
        ("static", static),
        ("resizing", resizing),
        ("draggable", draggable),
        ("dragging", dragging),
        ("dropping", dropping),
        ("css-transforms", css_transforms),
    )
    names.extend(name for name, enabled in flags if enabled)
    return " ".join(names)


__all__ = [
    "RenderMode",
    "create_style",
    "item_class_names",
    "percentage",
    "top_left_style",
    "transform_style",
]
