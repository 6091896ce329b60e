"""HTML labels shown inside file vertices."""

import html
from dataclasses import dataclass
from typing import Self

from filegrid.model.descriptor import FileDescriptor


@dataclass(frozen=True)
class VertexLabel:
    """Structured label payload for one file vertex."""

    name: str
    extension: str
    size: str
    modified: str

    @classmethod
    def from_descriptor(cls, descriptor: FileDescriptor) -> Self:
        """Create a label from a file descriptor."""
        return cls(
            name=descriptor.name,
            extension=descriptor.extension,
            size=descriptor.size_label,
            modified=descriptor.modified_label,
        )

    def to_html(self) -> str:
        """Render the label as an HTML block.

        All text is escaped so file names containing markup render literally.
        """
        name = html.escape(self.name)
        extension = html.escape(self.extension)
        size = html.escape(self.size)
        modified = html.escape(self.modified)
        return (
            '<div style="font-family: Arial; font-size: 12px; padding: 5px;">'
            f'<div style="font-weight: bold; margin-bottom: 5px;">{name}</div>'
            f"<div>Extension: {extension}</div>"
            f"<div>Size: {size}</div>"
            f"<div>Modified: {modified}</div>"
            "</div>"
        )
