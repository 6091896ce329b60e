"""Layout engine placing file descriptors on a fixed-column grid."""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from filegrid.errors import ValidationError, validate_minimum
from filegrid.layout.box import BoundingBox
from filegrid.layout.placement import Placement
from filegrid.model.descriptor import FileDescriptor


@dataclass(frozen=True)
class GridConfig:
    """Configuration for the grid layout.

    Attributes:
        origin_x: X coordinate of the first cell
        origin_y: Y coordinate of the first cell
        cell_width: Width of every cell
        cell_height: Height of every cell
        horizontal_gap: Space between columns
        vertical_gap: Space between rows
        columns_count: Number of columns (at least 1)
    """

    origin_x: float = 50.0
    origin_y: float = 50.0
    cell_width: float = 200.0
    cell_height: float = 100.0
    horizontal_gap: float = 30.0
    vertical_gap: float = 30.0
    columns_count: int = 3

    def validate(self) -> None:
        """Check the configuration.

        Raises:
            ValidationError: If a dimension or the column count is out of range
        """
        if isinstance(self.columns_count, bool) or not isinstance(self.columns_count, int):
            raise ValidationError("columns_count", self.columns_count, "an integer")
        validate_minimum(self.columns_count, 1, "columns_count")
        validate_minimum(self.origin_x, -math.inf, "origin_x")
        validate_minimum(self.origin_y, -math.inf, "origin_y")
        validate_minimum(self.cell_width, 0, "cell_width", inclusive=False)
        validate_minimum(self.cell_height, 0, "cell_height", inclusive=False)
        validate_minimum(self.horizontal_gap, 0, "horizontal_gap")
        validate_minimum(self.vertical_gap, 0, "vertical_gap")

    @property
    def column_pitch(self) -> float:
        """Distance between the left edges of neighbouring columns."""
        return self.cell_width + self.horizontal_gap

    @property
    def row_pitch(self) -> float:
        """Distance between the top edges of neighbouring rows."""
        return self.cell_height + self.vertical_gap


@dataclass
class LayoutResult:
    """Result of a layout operation.

    Attributes:
        items: (descriptor, placement) pairs in input order
        bounds: Box enclosing all placements (None when empty)
    """

    items: list[tuple[FileDescriptor, Placement]] = field(default_factory=list)
    bounds: BoundingBox | None = None

    @property
    def placements(self) -> list[Placement]:
        """Placements in input order."""
        return [placement for _, placement in self.items]

    def __len__(self) -> int:
        return len(self.items)


class GridLayoutEngine:
    """Engine for calculating grid positions for file descriptors."""

    def __init__(self, config: GridConfig | None = None) -> None:
        """Initialize the layout engine.

        Args:
            config: Grid configuration (uses defaults if None)

        Raises:
            ValidationError: If the configuration is invalid
        """
        self.config = config or GridConfig()
        self.config.validate()

    def calculate_placements(self, count: int) -> list[Placement]:
        """Calculate placements for the first ``count`` grid cells.

        Args:
            count: Number of cells

        Returns:
            List of placements, row-major
        """
        config = self.config
        config.validate()
        if count <= 0:
            return []

        indices = np.arange(count)
        columns = indices % config.columns_count
        rows = indices // config.columns_count
        xs = config.origin_x + columns * config.column_pitch
        ys = config.origin_y + rows * config.row_pitch

        return [
            Placement(
                index=int(i),
                column=int(col),
                row=int(row),
                x=float(x),
                y=float(y),
                width=float(config.cell_width),
                height=float(config.cell_height),
            )
            for i, col, row, x, y in zip(indices, columns, rows, xs, ys)
        ]

    def layout(self, descriptors: Sequence[FileDescriptor]) -> LayoutResult:
        """Place descriptors on the grid in the order given.

        Args:
            descriptors: Descriptors to place

        Returns:
            LayoutResult pairing each descriptor with its placement
        """
        placements = self.calculate_placements(len(descriptors))
        return LayoutResult(
            items=list(zip(descriptors, placements)),
            bounds=BoundingBox.enclosing(placements),
        )
