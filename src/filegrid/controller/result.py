"""Outcome of one file grid invocation."""

from dataclasses import dataclass
from pathlib import Path

from filegrid.errors import FileGridError, describe_error
from filegrid.layout.box import BoundingBox


@dataclass(frozen=True)
class GridSuccess:
    """The grid was generated.

    Attributes:
        directory: Directory the files were read from
        placed: Number of vertices inserted
        bounds: Area covered by the grid (None if the directory had no files)
    """

    directory: Path
    placed: int
    bounds: BoundingBox | None = None

    ok = True

    @property
    def message(self) -> str:
        """Status line describing the result."""
        noun = "file" if self.placed == 1 else "files"
        return f"Placed {self.placed} {noun} from {self.directory}"


@dataclass(frozen=True)
class GridFailure:
    """The grid was not generated; nothing was left in the diagram.

    Attributes:
        error: Error that aborted the invocation
    """

    error: FileGridError

    ok = False

    @property
    def kind(self) -> str:
        """Human-readable error kind."""
        return self.error.kind

    @property
    def message(self) -> str:
        """Message for the user."""
        return f"Error creating file grid: {describe_error(self.error)}"


GridOutcome = GridSuccess | GridFailure
