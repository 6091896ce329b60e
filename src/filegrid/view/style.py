"""Visual style for file vertices."""

from dataclasses import dataclass
from typing import Self

DEFAULT_FILL_COLOR = "#f5f5f5"
DEFAULT_STROKE_COLOR = "#666666"


@dataclass(frozen=True)
class VertexStyle:
    """Style of a file vertex.

    Serializes to the ``key=value;`` style strings understood by
    mxGraph-based diagram editors.

    Attributes:
        fill_color: Background color
        stroke_color: Border color
        rounded: Whether corners are rounded
        wrap: Whether label text wraps
        html: Whether the label is HTML
    """

    fill_color: str = DEFAULT_FILL_COLOR
    stroke_color: str = DEFAULT_STROKE_COLOR
    rounded: bool = True
    wrap: bool = True
    html: bool = True

    def to_style_string(self) -> str:
        """Serialize, e.g. ``rounded=1;whiteSpace=wrap;html=1;fillColor=#f5f5f5;strokeColor=#666666;``."""
        parts = [
            f"rounded={int(self.rounded)}",
            f"whiteSpace={'wrap' if self.wrap else 'nowrap'}",
            f"html={int(self.html)}",
            f"fillColor={self.fill_color}",
            f"strokeColor={self.stroke_color}",
        ]
        return ";".join(parts) + ";"

    @classmethod
    def from_style_string(cls, style: str) -> Self:
        """Parse a style string; unknown keys are ignored."""
        values: dict[str, str] = {}
        for part in style.split(";"):
            key, sep, value = part.partition("=")
            if sep:
                values[key.strip()] = value.strip()

        return cls(
            fill_color=values.get("fillColor", DEFAULT_FILL_COLOR),
            stroke_color=values.get("strokeColor", DEFAULT_STROKE_COLOR),
            rounded=values.get("rounded", "0") == "1",
            wrap=values.get("whiteSpace", "wrap") == "wrap",
            html=values.get("html", "0") == "1",
        )
