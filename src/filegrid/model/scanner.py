"""Directory scanner producing raw file entries, with a QThread worker."""

import logging
from pathlib import Path
from typing import Callable

from PyQt6.QtCore import QThread, pyqtSignal

from filegrid.errors import DirectoryAccessError, FileGridError, validate_directory
from filegrid.model.entry import RawFileEntry

logger = logging.getLogger(__name__)


class DirectoryScanner:
    """Reads the top-level files of a single directory.

    Subdirectories are skipped, never descended into. Any file whose
    metadata cannot be read aborts the whole scan.
    """

    def __init__(self, show_hidden: bool = True, sort_entries: bool = True) -> None:
        """Initialize the scanner.

        Args:
            show_hidden: Whether to include files starting with '.'
                (False skips them)
            sort_entries: Whether to sort files by name; when False the order
                is whatever the filesystem enumerates
        """
        self.show_hidden = show_hidden
        self.sort_entries = sort_entries

    def scan(self, path: Path) -> list[RawFileEntry]:
        """Synchronously scan a directory.

        Args:
            path: Directory to scan

        Returns:
            One entry per regular file, in enumeration order

        Raises:
            DirectoryAccessError: If the directory cannot be listed
            FileReadError: If a file's metadata cannot be read
        """
        validate_directory(path)

        try:
            files = [
                child
                for child in path.iterdir()
                if child.is_file() and (self.show_hidden or not child.name.startswith("."))
            ]
            if self.sort_entries:
                files.sort(key=lambda child: child.name)

            entries = [RawFileEntry.from_path(child) for child in files]
        except PermissionError as e:
            raise DirectoryAccessError(path, "permission denied") from e
        except OSError as e:
            raise DirectoryAccessError(path, e.strerror or str(e)) from e

        logger.debug(f"Scanned {len(entries)} files in {path}")
        return entries

    def scan_async(
        self,
        path: Path,
        on_finished: Callable[[list], None] | None = None,
        on_error: Callable[[FileGridError], None] | None = None,
    ) -> "ScannerWorker":
        """Asynchronously scan a directory.

        Args:
            path: Directory to scan
            on_finished: Callback with the list of entries
            on_error: Callback with the error that aborted the scan

        Returns:
            The started worker thread
        """
        worker = ScannerWorker(self, path)
        if on_finished is not None:
            worker.scan_finished.connect(on_finished)
        if on_error is not None:
            worker.scan_failed.connect(on_error)
        worker.start()
        return worker


class ScannerWorker(QThread):
    """Worker thread running a DirectoryScanner off the GUI thread."""

    scan_finished = pyqtSignal(list)  # Emits list[RawFileEntry]
    scan_failed = pyqtSignal(object)  # Emits FileGridError

    def __init__(self, scanner: DirectoryScanner, path: Path) -> None:
        """Initialize the worker.

        Args:
            scanner: Scanner to run
            path: Directory to scan
        """
        super().__init__()
        self.scanner = scanner
        self.path = path

    def run(self) -> None:
        """Run the scan operation."""
        try:
            entries = self.scanner.scan(self.path)
        except FileGridError as e:
            logger.warning(f"Scan of {self.path} failed: {e}")
            self.scan_failed.emit(e)
        except OSError as e:
            # Nothing may escape run(); PyQt aborts on unhandled exceptions here
            logger.warning(f"Scan of {self.path} failed: {e}")
            self.scan_failed.emit(DirectoryAccessError(self.path, e.strerror or str(e)))
        else:
            self.scan_finished.emit(entries)
