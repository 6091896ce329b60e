"""Layout engine for the file grid.

This module contains the grid algorithm that positions one cell per file
in a fixed number of columns.
"""

from filegrid.layout.box import BoundingBox
from filegrid.layout.engine import GridConfig, GridLayoutEngine, LayoutResult
from filegrid.layout.placement import Placement

__all__ = ["BoundingBox", "GridConfig", "GridLayoutEngine", "LayoutResult", "Placement"]
