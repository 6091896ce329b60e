"""Grid placement for a single file vertex."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Placement:
    """2D grid position with dimensions.

    Attributes:
        index: 0-based position in the input sequence
        column: Grid column (index mod columns)
        row: Grid row (index div columns)
        x: Left edge
        y: Top edge
        width: Width of the cell
        height: Height of the cell
    """

    index: int
    column: int
    row: int
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

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"Placement(#{self.index} r{self.row}c{self.column}, "
            f"x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
        )
