"""Model layer for filegrid.

This module contains the raw and normalized file metadata types and the
scanner that reads them from a directory.
"""

from filegrid.model.descriptor import (
    FileDescriptor,
    FileDescriptorBuilder,
    extract_extension,
    format_modified_date,
    humanize_size,
)
from filegrid.model.entry import RawFileEntry
from filegrid.model.scanner import DirectoryScanner, ScannerWorker

__all__ = [
    "DirectoryScanner",
    "FileDescriptor",
    "FileDescriptorBuilder",
    "RawFileEntry",
    "ScannerWorker",
    "extract_extension",
    "format_modified_date",
    "humanize_size",
]
