"""QGraphicsScene-backed diagram with undoable batch updates."""

import logging

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QPainterPath, QPen, QUndoCommand, QUndoStack
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsPathItem, QGraphicsScene, QGraphicsTextItem

from filegrid.errors import RenderError
from filegrid.view.style import VertexStyle

logger = logging.getLogger(__name__)


class VertexItem(QGraphicsPathItem):
    """Rectangle vertex with a label, drawn on a QGraphicsScene."""

    ARC_FRACTION = 0.1  # Corner radius relative to the shorter side

    def __init__(
        self,
        label: str,
        x: float,
        y: float,
        width: float,
        height: float,
        style: VertexStyle,
    ) -> None:
        """Initialize the vertex.

        Args:
            label: Label markup (HTML if the style says so)
            x: Left edge in scene coordinates
            y: Top edge in scene coordinates
            width: Vertex width
            height: Vertex height
            style: Visual style
        """
        super().__init__()
        self.label = label
        self.style = style

        rect = QRectF(0.0, 0.0, width, height)
        path = QPainterPath()
        if style.rounded:
            radius = min(width, height) * self.ARC_FRACTION
            path.addRoundedRect(rect, radius, radius)
        else:
            path.addRect(rect)
        self.setPath(path)
        self.setPos(x, y)
        self.setBrush(QBrush(QColor(style.fill_color)))
        self.setPen(QPen(QColor(style.stroke_color)))
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsSelectable)

        self._text = QGraphicsTextItem(self)
        if style.html:
            self._text.setHtml(label)
        else:
            self._text.setPlainText(label)
        if style.wrap:
            self._text.setTextWidth(width)
        self.setToolTip(self._text.toPlainText())

    @property
    def text(self) -> str:
        """Plain text of the label."""
        return self._text.toPlainText()

    @property
    def geometry(self) -> tuple[float, float, float, float]:
        """(x, y, width, height) in scene coordinates."""
        rect = self.path().boundingRect()
        return (self.x(), self.y(), rect.width(), rect.height())


class InsertVertexCommand(QUndoCommand):
    """Undoable insertion of one vertex into a scene."""

    def __init__(self, scene: QGraphicsScene, item: VertexItem, parent: QUndoCommand | None = None) -> None:
        super().__init__("Insert vertex", parent)
        self._scene = scene
        self.item = item

    def redo(self) -> None:
        if self.item.scene() is None:
            self._scene.addItem(self.item)

    def undo(self) -> None:
        if self.item.scene() is not None:
            self._scene.removeItem(self.item)


class SceneGraph:
    """DiagramGraph implementation on top of QGraphicsScene.

    Vertices inserted between ``begin_update`` and the matching
    ``end_update`` become a single entry on the undo stack. Updates may
    nest; only the outermost one commits or rolls back.
    """

    BATCH_TEXT = "Create file grid"
    FIT_MARGIN = 20.0

    def __init__(
        self,
        scene: QGraphicsScene | None = None,
        undo_stack: QUndoStack | None = None,
    ) -> None:
        """Initialize the graph.

        Args:
            scene: Scene to draw on (created if None)
            undo_stack: Undo stack receiving one command per update (created if None)
        """
        self.scene = scene if scene is not None else QGraphicsScene()
        self.undo_stack = undo_stack if undo_stack is not None else QUndoStack()
        self._depth = 0
        self._batch: QUndoCommand | None = None
        self._aborted = False

    @property
    def in_update(self) -> bool:
        """Whether an update is open."""
        return self._depth > 0

    @property
    def vertices(self) -> list[VertexItem]:
        """Vertices currently in the scene, in insertion order."""
        return [item for item in self.scene.items(Qt.SortOrder.AscendingOrder) if isinstance(item, VertexItem)]

    def begin_update(self) -> None:
        """Open an update (nestable)."""
        if self._depth == 0:
            self._batch = QUndoCommand(self.BATCH_TEXT)
            self._aborted = False
        self._depth += 1

    def end_update(self) -> None:
        """Close an update, committing it if it is the outermost one."""
        self._close(abort=False)

    def rollback_update(self) -> None:
        """Close an update and discard everything the batch inserted."""
        self._close(abort=True)

    def _close(self, abort: bool) -> None:
        if self._depth == 0:
            raise RenderError("no diagram update in progress")

        self._depth -= 1
        self._aborted = self._aborted or abort
        if self._depth > 0:
            return

        batch, self._batch = self._batch, None
        if self._aborted:
            batch.undo()
            logger.info(f"Rolled back {batch.childCount()} vertex insertions")
        elif batch.childCount() > 0:
            self.undo_stack.push(batch)
            logger.debug(f"Committed {batch.childCount()} vertex insertions")

    def insert_vertex(
        self,
        label: str,
        x: float,
        y: float,
        width: float,
        height: float,
        style: str,
    ) -> VertexItem:
        """Insert a vertex as part of the open update.

        Raises:
            RenderError: If no update is open or the geometry is empty
        """
        if self._batch is None:
            raise RenderError("insert_vertex called outside of an update")
        if width <= 0 or height <= 0:
            raise RenderError(f"vertex size must be positive, got {width}x{height}")

        item = VertexItem(label, x, y, width, height, VertexStyle.from_style_string(style))
        command = InsertVertexCommand(self.scene, item, parent=self._batch)
        command.redo()
        return item

    def fit(self) -> None:
        """Fit every view of the scene to its contents."""
        rect = self.scene.itemsBoundingRect()
        if rect.isEmpty():
            return

        margin = self.FIT_MARGIN
        rect = rect.adjusted(-margin, -margin, margin, margin)
        self.scene.setSceneRect(rect)
        for view in self.scene.views():
            view.fitInView(rect, Qt.AspectRatioMode.KeepAspectRatio)
