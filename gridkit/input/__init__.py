"""Per-item gesture controllers."""

from gridkit.input.item_controller import GridItemController
from gridkit.input.registry import GridItemRegistry

__all__ = ["GridItemController", "GridItemRegistry"]
