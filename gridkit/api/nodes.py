"""Rendered-node geometry contracts read during gestures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class ClientRect(Protocol):
    """Viewport-relative box of a rendered element."""

    left: float
    top: float


@runtime_checkable
class PositionedAncestor(Protocol):
    """Nearest positioned ancestor of an item node."""

    scroll_left: float
    scroll_top: float
    client_height: float

    def bounding_client_rect(self) -> ClientRect:
        """Return the ancestor's viewport-relative box."""


@runtime_checkable
class ItemNode(Protocol):
    """Rendered item element as seen by the gesture layer."""

    @property
    def offset_parent(self) -> PositionedAncestor | None:
        """Return the positioned ancestor, or ``None`` when detached."""

    def bounding_client_rect(self) -> ClientRect:
        """Return the node's viewport-relative box."""


@dataclass(slots=True)
class NodeRect:
    """Plain viewport-relative box."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(slots=True)
class StaticAncestor:
    """In-memory positioned ancestor for headless hosts."""

    rect: NodeRect
    scroll_left: float = 0.0
    scroll_top: float = 0.0
    client_height: float = 0.0

    def bounding_client_rect(self) -> NodeRect:
        return self.rect


@dataclass(slots=True)
class StaticNode:
    """In-memory item node for headless hosts."""

    rect: NodeRect
    offset_parent: StaticAncestor | None = None

    def bounding_client_rect(self) -> NodeRect:
        return self.rect


__all__ = [
    "ClientRect",
    "ItemNode",
    "NodeRect",
    "PositionedAncestor",
    "StaticAncestor",
    "StaticNode",
]
