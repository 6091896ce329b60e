"""Bounding box enclosing a set of placements."""

from collections.abc import Iterable
from dataclasses import dataclass

from filegrid.layout.placement import Placement


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        x: Left edge
        y: Top edge
        width: Total width
        height: Total height
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        """Right edge."""
        return self.x + self.width

    @property
    def max_y(self) -> float:
        """Bottom edge."""
        return self.y + self.height

    @classmethod
    def enclosing(cls, placements: Iterable[Placement]) -> "BoundingBox | None":
        """Create the smallest box around the given placements.

        Args:
            placements: Placements to enclose

        Returns:
            A new BoundingBox, or None if there are no placements
        """
        placements = list(placements)
        if not placements:
            return None

        min_x = min(p.x for p in placements)
        min_y = min(p.y for p in placements)
        max_x = max(p.max_x for p in placements)
        max_y = max(p.max_y for p in placements)
        return cls(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)
