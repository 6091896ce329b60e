"""Diagram collaborator interface and the edit transaction around it."""

import logging
from types import TracebackType
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class DiagramGraph(Protocol):
    """Diagram that file vertices are inserted into.

    Mutations happen between ``begin_update`` and ``end_update``; an update
    closed with ``rollback_update`` instead leaves the diagram as it was
    before ``begin_update``.
    """

    def begin_update(self) -> None: ...

    def end_update(self) -> None: ...

    def rollback_update(self) -> None: ...

    def insert_vertex(
        self,
        label: str,
        x: float,
        y: float,
        width: float,
        height: float,
        style: str,
    ) -> Any: ...

    def fit(self) -> None: ...


class EditTransaction:
    """Scoped update on a DiagramGraph.

    Commits on normal exit and rolls back when the block raises. The
    exception is never suppressed.

    Example:
        with EditTransaction(graph):
            graph.insert_vertex(...)
    """

    def __init__(self, graph: DiagramGraph) -> None:
        self.graph = graph
        self.committed = False
        self.rolled_back = False

    def __enter__(self) -> "EditTransaction":
        self.graph.begin_update()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc_type is None:
            self.graph.end_update()
            self.committed = True
        else:
            logger.debug(f"Rolling back diagram update after {exc_type.__name__}")
            try:
                self.graph.rollback_update()
            except Exception:
                # The block's own exception is the one reported
                logger.exception("Rolling back the diagram update failed")
            else:
                self.rolled_back = True
        return False
