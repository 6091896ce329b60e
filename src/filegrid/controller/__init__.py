"""Controller layer for filegrid.

Contains the file grid command and the outcome types it reports.
"""

from filegrid.controller.command import CommandRegistry, CreateFileGridCommand, DirectoryPicker
from filegrid.controller.result import GridFailure, GridOutcome, GridSuccess

__all__ = [
    "CommandRegistry",
    "CreateFileGridCommand",
    "DirectoryPicker",
    "GridFailure",
    "GridOutcome",
    "GridSuccess",
]
