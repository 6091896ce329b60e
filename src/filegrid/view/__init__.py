"""View layer for filegrid.

This module provides the diagram side of the application:

- DiagramGraph: Interface the file grid command inserts vertices through
- EditTransaction: Scoped begin/end/rollback around one batch of insertions
- SceneGraph: DiagramGraph on a QGraphicsScene with undo support
- VertexLabel: HTML label payload for one file
- VertexStyle: Fill/stroke/corner style of a vertex
- MainWindow: Main application window with the command menus
"""

from filegrid.view.graph import DiagramGraph, EditTransaction
from filegrid.view.label import VertexLabel
from filegrid.view.scene import SceneGraph, VertexItem
from filegrid.view.style import VertexStyle

__all__ = [
    "DiagramGraph",
    "EditTransaction",
    "SceneGraph",
    "VertexItem",
    "VertexLabel",
    "VertexStyle",
]
