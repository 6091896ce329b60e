"""Tests for vertex labels and styles."""

from filegrid.model.descriptor import FileDescriptor
from filegrid.view.label import VertexLabel
from filegrid.view.style import VertexStyle


def test_label_from_descriptor():
    """The label carries the four descriptor fields."""
    descriptor = FileDescriptor("notes.txt", "txt", "1.5 KB", "3/14/24")

    label = VertexLabel.from_descriptor(descriptor)

    assert label == VertexLabel(name="notes.txt", extension="txt", size="1.5 KB", modified="3/14/24")


def test_label_html_lists_fields():
    """The HTML block shows the bold name and one line per attribute."""
    html = VertexLabel("notes.txt", "txt", "1.5 KB", "3/14/24").to_html()

    assert '<div style="font-weight: bold; margin-bottom: 5px;">notes.txt</div>' in html
    assert "<div>Extension: txt</div>" in html
    assert "<div>Size: 1.5 KB</div>" in html
    assert "<div>Modified: 3/14/24</div>" in html


def test_label_html_escapes_markup():
    """File names are shown literally, never interpreted as markup."""
    html = VertexLabel("<b>x</b>&.txt", "txt", "0 Bytes", "1/1/24").to_html()

    assert "&lt;b&gt;x&lt;/b&gt;&amp;.txt" in html
    assert "<b>x</b>" not in html


def test_default_style_string():
    """Defaults serialize to the classic light-grey rounded rectangle."""
    assert VertexStyle().to_style_string() == (
        "rounded=1;whiteSpace=wrap;html=1;fillColor=#f5f5f5;strokeColor=#666666;"
    )


def test_style_parses_back():
    """A serialized style parses to an equal style."""
    style = VertexStyle(fill_color="#dae8fc", stroke_color="#6c8ebf", rounded=False, wrap=False)

    assert VertexStyle.from_style_string(style.to_style_string()) == style


def test_style_parse_ignores_unknown_keys():
    """Unknown keys and empty segments are skipped."""
    style = VertexStyle.from_style_string("shadow=1;;fillColor=#ffffff;rounded=1")

    assert style.fill_color == "#ffffff"
    assert style.rounded is True
    assert style.html is False
