"""
Minimal SVG document builder.

Elements are kept as data (tag, ordered attributes, children) and only turned
into markup when the document is serialized, so single elements can be
inspected in tests without parsing text.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union
from xml.sax.saxutils import escape, quoteattr

from .utils.logging import get_logger

logger = get_logger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


class Color(Enum):
    """Named colors used by the renderers."""
    BLACK = "black"
    WHITE = "white"
    BLUE = "blue"
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def rgb(r: int, g: int, b: int) -> str:
        for channel in (r, g, b):
            if not 0 <= channel <= 255:
                raise ValueError(f"rgb channel out of range: {channel}")
        return f"rgb({r},{g},{b})"


def format_value(value: Any) -> str:
    """Serialize an attribute value; floats keep two decimals."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:.2f}"
    if isinstance(value, Color):
        return value.value
    return str(value)


@dataclass
class SvgElement:
    """One SVG element with ordered attributes and optional children."""
    tag: str
    attrs: Dict[str, Any] = field(default_factory=dict)
    children: List['SvgElement'] = field(default_factory=list)
    text: Optional[str] = None

    def get(self, name: str, default: Any = None) -> Any:
        return self.attrs.get(name, default)

    @property
    def id(self) -> Optional[str]:
        return self.attrs.get("id")

    def add(self, child: 'SvgElement') -> 'SvgElement':
        self.children.append(child)
        return child

    def iter(self) -> Iterator['SvgElement']:
        """Depth-first walk over this element and its descendants."""
        yield self
        for child in self.children:
            yield from child.iter()

    def render(self, indent: str = "") -> str:
        attrs = "".join(
            f" {name}={quoteattr(format_value(value))}" for name, value in self.attrs.items()
        )
        if not self.children and self.text is None:
            return f"{indent}<{self.tag}{attrs} />"
        parts = [f"{indent}<{self.tag}{attrs}>"]
        if self.text is not None:
            parts.append(f"{indent}    {escape(self.text)}")
        for child in self.children:
            parts.append(child.render(indent + "    "))
        parts.append(f"{indent}</{self.tag}>")
        return "\n".join(parts)


def circle(cx: float, cy: float, r: float, fill: Union[Color, str], **attrs) -> SvgElement:
    element = SvgElement("circle", dict(attrs))
    element.attrs.update({"cx": float(cx), "cy": float(cy), "r": r, "fill": fill})
    return element


def rect(x: float, y: float, width: float, height: float, **attrs) -> SvgElement:
    return SvgElement("rect", {"x": float(x), "y": float(y),
                               "width": float(width), "height": float(height), **attrs})


class SVG:
    """
    SVG document: width/height, optional full-surface background and a list
    of body elements in drawing order.
    """

    def __init__(self, width: float, height: float, background_color: Optional[Union[Color, str]] = None):
        if not width > 0 or not height > 0:
            raise ValueError(f"SVG size must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)
        self.background_color = background_color
        self.elements: List[SvgElement] = []

    def add_elem(self, element: SvgElement) -> SvgElement:
        self.elements.append(element)
        return element

    def __iter__(self) -> Iterator[SvgElement]:
        return iter(self.elements)

    def find_by_id(self, element_id: str) -> Optional[SvgElement]:
        for element in self.elements:
            for node in element.iter():
                if node.id == element_id:
                    return node
        return None

    def find_all(self, tag: str) -> List[SvgElement]:
        return [node for element in self.elements for node in element.iter() if node.tag == tag]

    def body_elements(self) -> List[SvgElement]:
        """Background (if any) followed by the body elements."""
        body = []
        if self.background_color is not None:
            body.append(SvgElement("rect", {"width": "100%", "height": "100%",
                                            "fill": self.background_color}))
        body.extend(self.elements)
        return body

    def to_string(self) -> str:
        """Body only, one element per line."""
        return "".join(element.render() + "\n" for element in self.body_elements())

    def to_file_string(self) -> str:
        """Complete standalone document."""
        header = (
            '<svg version="1.1"\n'
            'baseProfile="full"\n'
            f'width="{self.width:.2f}" height="{self.height:.2f}"\n'
            f'xmlns="{SVG_NS}"\n'
            f'xmlns:xlink="{XLINK_NS}">\n'
        )
        return header + self.to_string() + "</svg>\n"

    def to_string_insert_in_html(self) -> str:
        """Inline ``<svg>`` block for embedding in an HTML page."""
        header = f'<svg width="{self.width:.2f}" height="{self.height:.2f}">\n'
        return header + self.to_string() + "</svg>\n"

    def to_file(self, filename: str, file_path: Union[str, Path] = ".") -> Path:
        """
        Write the document to ``file_path/filename``.

        Raises:
            OSError: if the file cannot be created or written
        """
        path = Path(file_path) / filename
        content = self.to_file_string()
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.error("Could not write SVG to %s: %s", path, e)
            raise
        logger.info("SVG written to %s (%d bytes)", path, len(content))
        return path
