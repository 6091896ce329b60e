"""Raw file metadata as read from the filesystem."""

from dataclasses import dataclass
from pathlib import Path
from typing import Self

from filegrid.errors import FileReadError, ValidationError


@dataclass(frozen=True)
class RawFileEntry:
    """Unprocessed metadata for one file.

    Attributes:
        name: Base name of the file
        byte_size: Size in bytes
        modified_ms: Modification time as milliseconds since the epoch
        path: Path the entry was read from (None when built by hand)
    """

    name: str
    byte_size: int
    modified_ms: int
    path: Path | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("name", self.name, "non-empty file name")
        if self.byte_size < 0:
            raise ValidationError("byte_size", self.byte_size, "non-negative size")

    @classmethod
    def from_path(cls, path: Path) -> Self:
        """Create an entry from a filesystem path.

        Args:
            path: Path to a regular file

        Returns:
            A new RawFileEntry populated from ``stat``

        Raises:
            FileReadError: If the metadata cannot be read
        """
        try:
            stat_info = path.stat()
        except OSError as e:
            raise FileReadError(path, e.strerror or str(e)) from e

        return cls(
            name=path.name,
            byte_size=stat_info.st_size,
            modified_ms=stat_info.st_mtime_ns // 1_000_000,
            path=path,
        )
