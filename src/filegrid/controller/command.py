"""The "create file grid" command.

Runs in two phases: the directory is read off the GUI thread and turned
into descriptors and placements, then every vertex is inserted in one
diagram update. The caller receives a GridOutcome instead of an exception.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Protocol

from PyQt6.QtCore import QObject, pyqtSignal

from filegrid.controller.result import GridFailure, GridOutcome, GridSuccess
from filegrid.errors import DirectoryAccessError, FileGridError, RenderError
from filegrid.layout.engine import GridLayoutEngine, LayoutResult
from filegrid.model.descriptor import FileDescriptorBuilder
from filegrid.model.entry import RawFileEntry
from filegrid.model.scanner import DirectoryScanner, ScannerWorker
from filegrid.view.graph import DiagramGraph, EditTransaction
from filegrid.view.label import VertexLabel
from filegrid.view.style import VertexStyle

logger = logging.getLogger(__name__)


class DirectoryPicker(Protocol):
    """Asks the user for a directory; returns None if they cancel."""

    def pick_directory(self) -> Path | None: ...


class CommandRegistry(Protocol):
    """Host menu system commands register themselves with."""

    def add_action(self, command_id: str, title: str, callback: Callable[[], None]) -> None: ...

    def add_menu(self, title: str, command_ids: list[str]) -> None: ...


class CreateFileGridCommand(QObject):
    """Generates one vertex per file of a picked directory.

    All collaborators are passed in; nothing is looked up globally.
    """

    command_id = "createFileGrid"
    title = "Create File Grid"
    menu_title = "File Grid"

    # Emits GridOutcome when an invocation started by trigger()/start() ends
    completed = pyqtSignal(object)

    def __init__(
        self,
        graph: DiagramGraph,
        picker: DirectoryPicker,
        scanner: DirectoryScanner | None = None,
        builder: FileDescriptorBuilder | None = None,
        engine: GridLayoutEngine | None = None,
        style: VertexStyle | None = None,
    ) -> None:
        """Initialize the command.

        Args:
            graph: Diagram receiving the vertices
            picker: Directory picker shown by trigger()
            scanner: Scanner reading the directory
            builder: Builder normalizing file metadata
            engine: Layout engine placing the vertices
            style: Vertex style
        """
        super().__init__()
        self._graph = graph
        self._picker = picker
        self._scanner = scanner or DirectoryScanner()
        self._builder = builder or FileDescriptorBuilder()
        self._engine = engine or GridLayoutEngine()
        self._style = style or VertexStyle()

        self._worker: ScannerWorker | None = None
        self._directory: Path | None = None

    @property
    def is_running(self) -> bool:
        """Whether a directory scan is in progress."""
        return self._worker is not None

    def register(self, registry: CommandRegistry) -> None:
        """Expose the command through the host menu system."""
        registry.add_action(self.command_id, self.title, self.trigger)
        registry.add_menu(self.menu_title, [self.command_id])

    # Asynchronous entry points

    def trigger(self) -> None:
        """Pick a directory and generate its grid (menu callback)."""
        if self.is_running:
            logger.warning("File grid already in progress, ignoring trigger")
            return

        path = self._picker.pick_directory()
        if path is None:
            self._finish(GridFailure(DirectoryAccessError(None, "No directory selected")))
            return
        self.start(path)

    def start(self, path: Path) -> None:
        """Scan ``path`` in a worker thread, then apply the grid.

        The outcome is emitted through ``completed``.
        """
        if self.is_running:
            logger.warning(f"File grid already in progress, ignoring {path}")
            return

        logger.info(f"Creating file grid for {path}")
        self._directory = path
        self._worker = self._scanner.scan_async(
            path,
            on_finished=self._on_scan_finished,
            on_error=self._on_scan_failed,
        )

    def _on_scan_finished(self, entries: list) -> None:
        directory = self._release_worker()
        self._finish(self.complete(directory, entries))

    def _on_scan_failed(self, error: FileGridError) -> None:
        self._release_worker()
        self._finish(GridFailure(error))

    def _release_worker(self) -> Path:
        if self._worker is not None:
            self._worker.wait()
            self._worker = None
        directory, self._directory = self._directory, None
        return directory

    def _finish(self, outcome: GridOutcome) -> None:
        if not outcome.ok:
            logger.error(outcome.message)
        self.completed.emit(outcome)

    # Synchronous pipeline

    def run(self, path: Path) -> GridOutcome:
        """Scan, plan and apply in the calling thread."""
        try:
            entries = self._scanner.scan(path)
        except FileGridError as e:
            return GridFailure(e)
        return self.complete(path, entries)

    def complete(self, directory: Path, entries: list[RawFileEntry]) -> GridOutcome:
        """Plan and apply the grid for already collected entries."""
        try:
            result = self.plan(entries)
            self.apply(result)
        except FileGridError as e:
            return GridFailure(e)
        return GridSuccess(directory=directory, placed=len(result), bounds=result.bounds)

    def plan(self, entries: list[RawFileEntry]) -> LayoutResult:
        """Normalize entries and place them on the grid (no side effects)."""
        descriptors = self._builder.build_all(entries)
        return self._engine.layout(descriptors)

    def apply(self, result: LayoutResult) -> list[Any]:
        """Insert every vertex of ``result`` in one diagram update.

        Nothing is touched for an empty result. On failure the update is
        rolled back and the error re-raised as a FileGridError.

        Returns:
            Cells created by the graph, in input order

        Raises:
            RenderError: If the graph rejects a mutation
        """
        if not result.items:
            return []

        style = self._style.to_style_string()
        cells = []
        try:
            with EditTransaction(self._graph):
                for descriptor, placement in result.items:
                    label = VertexLabel.from_descriptor(descriptor).to_html()
                    cells.append(
                        self._graph.insert_vertex(
                            label,
                            placement.x,
                            placement.y,
                            placement.width,
                            placement.height,
                            style,
                        )
                    )
                self._graph.fit()
        except FileGridError:
            raise
        except Exception as e:
            raise RenderError(str(e) or type(e).__name__) from e

        logger.debug(f"Inserted {len(cells)} vertices")
        return cells
