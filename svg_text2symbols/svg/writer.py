"""SVG output for rendered documents.

The tree has a <defs> block with one <path> per unique glyph and a
content group with one translated <g> per line holding <use> references.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from io import StringIO
from pathlib import Path

from svg_text2symbols.glyphs.outline import format_number
from svg_text2symbols.svg.document import RenderedDocument

SVG_NS = "http://www.w3.org/2000/svg"

DRAW_ANIMATION_CSS = """
  @keyframes draw {
    to {
      stroke-dashoffset: 0;
    }
  }

  .text {
    stroke-dasharray: 450 450;
    stroke-dashoffset: 450;
    animation: draw 2.3s ease forwards infinite;
  }
"""


@dataclass(frozen=True)
class PaintStyle:
    """Presentation attributes applied to the content group."""

    fill: str = "none"
    color: str = "#000"
    stroke_width: float = 1.0
    stroke_linejoin: str = "round"
    stroke_linecap: str = "round"


def build_svg(
    document: RenderedDocument,
    paint: PaintStyle | None = None,
    precision: int = 6,
    animate: bool = False,
) -> ET.Element:
    """Build the SVG element tree for a document."""
    paint = paint or PaintStyle()

    def num(value: float) -> str:
        return format_number(value, precision)

    width = num(document.width)
    height = num(document.height)
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": width,
            "height": height,
            "viewBox": f"0 0 {width} {height}",
        },
    )

    if animate:
        style = ET.SubElement(root, "style")
        style.text = DRAW_ANIMATION_CSS

    defs = ET.SubElement(root, "defs")
    for symbol in document.symbols:
        ET.SubElement(defs, "path", {"id": symbol.id, "d": symbol.path_data})

    content = ET.SubElement(
        root,
        "g",
        {
            "class": "text",
            "fill": paint.fill,
            "stroke": paint.color,
            "stroke-width": num(paint.stroke_width),
            "stroke-linejoin": paint.stroke_linejoin,
            "stroke-linecap": paint.stroke_linecap,
        },
    )

    for line in document.lines:
        group = ET.SubElement(content, "g", {"transform": f"translate(0,{num(line.offset_y)})"})
        for placement in line.placements:
            attrs = {
                "href": f"#{placement.symbol_id}",
                "x": num(placement.x),
                "y": num(placement.y),
            }
            if placement.color:
                attrs["stroke"] = placement.color
                if paint.fill != "none":
                    attrs["fill"] = placement.color
            ET.SubElement(group, "use", attrs)

    return root


def svg_to_string(root: ET.Element) -> str:
    """Serialize an SVG element tree with an XML declaration."""
    tree = ET.ElementTree(root)
    ET.indent(tree, space="  ")
    buffer = StringIO()
    tree.write(buffer, encoding="unicode", xml_declaration=True)
    return buffer.getvalue()


def write_svg(root: ET.Element, output_path: Path | str) -> Path:
    """Write an SVG element tree to disk, creating parent directories."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(svg_to_string(root), encoding="utf-8")
    return output_path
