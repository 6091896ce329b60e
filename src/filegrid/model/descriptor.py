"""Normalized, display-ready file descriptors."""

from dataclasses import dataclass
from fractions import Fraction
from typing import Callable

from PyQt6.QtCore import QDateTime, QLocale

from filegrid.errors import ValidationError
from filegrid.model.entry import RawFileEntry

SIZE_UNITS = ("Bytes", "KB", "MB", "GB")
SIZE_BASE = 1024


@dataclass(frozen=True)
class FileDescriptor:
    """Display-ready representation of one file.

    Attributes:
        name: File name, copied verbatim from the raw entry
        extension: Text after the last dot (the whole name if there is none)
        size_label: Human-readable size, e.g. "1.5 KB"
        modified_label: Modification date in the locale's short format
    """

    name: str
    extension: str
    size_label: str
    modified_label: str


def humanize_size(byte_size: int) -> str:
    """Format a byte count with binary units.

    Values are rounded to two decimals with trailing zeros dropped.
    GB is the largest unit, so anything from 1024 GB up is still
    reported in GB.

    Args:
        byte_size: Size in bytes

    Returns:
        Human-readable size string

    Raises:
        ValidationError: If byte_size is negative
    """
    if byte_size < 0:
        raise ValidationError("byte_size", byte_size, "non-negative size")
    if byte_size == 0:
        return "0 Bytes"

    # floor(log1024(size)) without float error on exact powers
    index = 0
    while index < len(SIZE_UNITS) - 1 and byte_size >= SIZE_BASE ** (index + 1):
        index += 1

    # Round half up on the exact quotient
    value = Fraction(byte_size, SIZE_BASE**index)
    hundredths = int(value * 100 + Fraction(1, 2))
    whole, fraction = divmod(hundredths, 100)

    number = str(whole)
    if fraction:
        number += "." + f"{fraction:02d}".rstrip("0")
    return f"{number} {SIZE_UNITS[index]}"


def extract_extension(name: str) -> str:
    """Return the text after the last dot in a file name.

    A name without any dot is returned unchanged, so "README" has the
    extension "README".
    """
    return name.split(".")[-1]


def format_modified_date(modified_ms: int, locale: QLocale | None = None) -> str:
    """Format an epoch timestamp as a local date in the locale's short format.

    Args:
        modified_ms: Milliseconds since the epoch
        locale: Locale to format with (defaults to the application locale)

    Returns:
        Short date string, e.g. "3/14/24" for en_US
    """
    date = QDateTime.fromMSecsSinceEpoch(modified_ms).date()
    if locale is None:
        locale = QLocale()
    return locale.toString(date, QLocale.FormatType.ShortFormat)


class FileDescriptorBuilder:
    """Builds FileDescriptor values from raw file entries."""

    def __init__(self, date_formatter: Callable[[int], str] | None = None) -> None:
        """Initialize the builder.

        Args:
            date_formatter: Callable turning epoch milliseconds into a date
                label (uses the application locale's short date if None)
        """
        self._format_date = date_formatter or format_modified_date

    def build(self, entry: RawFileEntry) -> FileDescriptor:
        """Normalize one raw entry."""
        return FileDescriptor(
            name=entry.name,
            extension=extract_extension(entry.name),
            size_label=humanize_size(entry.byte_size),
            modified_label=self._format_date(entry.modified_ms),
        )

    def build_all(self, entries: list[RawFileEntry]) -> list[FileDescriptor]:
        """Normalize entries, keeping their order."""
        return [self.build(entry) for entry in entries]
