"""Main application window for filegrid.

Hosts the diagram view, the menu bar commands register into, and the
directory picker and message boxes the file grid command reports through.
"""

from pathlib import Path
from typing import Callable

from PyQt6.QtGui import QAction, QPainter
from PyQt6.QtWidgets import QFileDialog, QGraphicsView, QMainWindow, QMenu, QMessageBox, QWidget

from filegrid.controller.result import GridOutcome
from filegrid.view.scene import SceneGraph


class QtDirectoryPicker:
    """Directory picker backed by QFileDialog."""

    def __init__(self, parent: QWidget | None = None, start_dir: Path | None = None) -> None:
        """Initialize the picker.

        Args:
            parent: Parent widget for the dialog
            start_dir: Directory the dialog opens in (home if None)
        """
        self._parent = parent
        self._last_dir = start_dir or Path.home()

    def pick_directory(self) -> Path | None:
        """Show the dialog; returns None if the user cancels."""
        path = QFileDialog.getExistingDirectory(
            self._parent,
            "Select Directory",
            str(self._last_dir),
        )
        if not path:
            return None
        self._last_dir = Path(path)
        return self._last_dir


class DiagramView(QGraphicsView):
    """Graphics view with wheel zoom."""

    ZOOM_STEP = 1.15

    def __init__(self, graph: SceneGraph, parent: QWidget | None = None) -> None:
        super().__init__(graph.scene, parent)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.ScrollHandDrag)
        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.AnchorUnderMouse)

    def wheelEvent(self, event) -> None:
        """Zoom in/out around the cursor."""
        factor = self.ZOOM_STEP if event.angleDelta().y() > 0 else 1 / self.ZOOM_STEP
        self.scale(factor, factor)


class MainWindow(QMainWindow):
    """Main window for the filegrid application.

    Implements the command registry: commands add actions by id, then
    group them under menus.
    """

    def __init__(self, graph: SceneGraph) -> None:
        """Initialize main window.

        Args:
            graph: Diagram shown in the central view
        """
        super().__init__()

        self._graph = graph
        self._actions: dict[str, QAction] = {}
        self._menus: dict[str, QMenu] = {}

        self._setup_ui()
        self._setup_menu_bar()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle("filegrid")
        self.resize(1000, 700)

        self._view = DiagramView(self._graph, self)
        self.setCentralWidget(self._view)
        self.statusBar().showMessage("Ready")

    def _setup_menu_bar(self) -> None:
        """Set up the built-in menus."""
        menubar = self.menuBar()

        # Edit menu
        edit_menu = menubar.addMenu("&Edit")

        undo_action = self._graph.undo_stack.createUndoAction(self, "&Undo")
        undo_action.setShortcut("Ctrl+Z")
        edit_menu.addAction(undo_action)

        redo_action = self._graph.undo_stack.createRedoAction(self, "&Redo")
        redo_action.setShortcut("Ctrl+Shift+Z")
        edit_menu.addAction(redo_action)

        # View menu
        view_menu = menubar.addMenu("&View")

        fit_action = QAction("&Fit to Contents", self)
        fit_action.setShortcut("Ctrl+0")
        fit_action.triggered.connect(self._graph.fit)
        view_menu.addAction(fit_action)

        # Help menu
        self._help_menu = menubar.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.triggered.connect(self._show_about)
        self._help_menu.addAction(about_action)

    @property
    def graph(self) -> SceneGraph:
        """The diagram this window shows."""
        return self._graph

    @property
    def view(self) -> DiagramView:
        """The central diagram view."""
        return self._view

    @property
    def actions_by_id(self) -> dict[str, QAction]:
        """Registered command actions, keyed by command id."""
        return dict(self._actions)

    # Command registry

    def add_action(self, command_id: str, title: str, callback: Callable[[], None]) -> None:
        """Register a command action.

        Args:
            command_id: Unique command id
            title: Menu text
            callback: Called with no arguments when the action fires
        """
        if command_id in self._actions:
            raise ValueError(f"Action '{command_id}' is already registered")

        action = QAction(title, self)
        action.triggered.connect(lambda checked=False: callback())
        self._actions[command_id] = action

    def add_menu(self, title: str, command_ids: list[str]) -> None:
        """Add a menu listing registered actions.

        Args:
            title: Menu title
            command_ids: Ids of previously registered actions
        """
        missing = [command_id for command_id in command_ids if command_id not in self._actions]
        if missing:
            raise ValueError(f"Unknown actions for menu '{title}': {', '.join(missing)}")

        # Keep Help last
        menu = QMenu(title, self)
        self.menuBar().insertMenu(self._help_menu.menuAction(), menu)
        for command_id in command_ids:
            menu.addAction(self._actions[command_id])
        self._menus[title] = menu

    # Outcome reporting

    def show_outcome(self, outcome: GridOutcome) -> None:
        """Report the result of a file grid command.

        Failures are shown in a modal warning, successes in the status bar.
        """
        self.statusBar().showMessage(outcome.message)
        if not outcome.ok:
            QMessageBox.warning(self, "File Grid", outcome.message)

    def _show_about(self) -> None:
        """Show about dialog."""
        QMessageBox.about(
            self,
            "About filegrid",
            "<h3>filegrid</h3>"
            "<p>Lays out the files of a directory as a grid of labeled rectangles.</p>"
            "<p>Version 0.1.0</p>"
            "<p>Use <b>File Grid &gt; Create File Grid</b> to pick a directory.</p>"
            "<ul>"
            "<li>Drag: Pan</li>"
            "<li>Scroll: Zoom in/out</li>"
            "<li>Ctrl+0: Fit to contents</li>"
            "<li>Ctrl+Z / Ctrl+Shift+Z: Undo / redo a grid</li>"
            "</ul>",
        )
