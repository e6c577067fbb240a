"""SVG reader for loading shape trees.

This module provides the SvgReader class, which parses an SVG document into
the domain Scene: a tree of groups and paths with all transforms applied,
plus the declared canvas size.

Path data is decoded with fontTools' svgLib parser into a RecordingPen;
basic shapes (rect, circle, ellipse, line, polyline, polygon) are first
rewritten as path data so they go through the same parser.
"""

import math
import re
from pathlib import Path
from typing import Any
from xml.etree import ElementTree

from fontTools.misc.transform import Identity, Transform
from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.transformPen import TransformPen
from fontTools.svgLib.path import parse_path

from svgcombiner.domain import (
    Canvas,
    Close,
    CubicTo,
    GroupNode,
    LineTo,
    MoveTo,
    OtherNode,
    PathNode,
    PathSegment,
    Point,
    QuadTo,
    Scene,
    ShapeNode,
)
from svgcombiner.exceptions import DocumentReadError, ParseError

# Canvas size used when neither width/height nor viewBox is given
DEFAULT_CANVAS_SIZE = 100.0

# Font size assumed for em/ex lengths (no CSS cascade is evaluated)
DEFAULT_FONT_SIZE = 12.0

# User units (px) per unit, at 96 px per inch
UNIT_TO_PX = {
    None: 1.0,
    "px": 1.0,
    "in": 96.0,
    "cm": 96.0 / 2.54,
    "mm": 96.0 / 25.4,
    "pt": 96.0 / 72.0,
    "pc": 96.0 / 6.0,
    "em": DEFAULT_FONT_SIZE,
    "ex": DEFAULT_FONT_SIZE / 2.0,
}

CONTAINER_TAGS = frozenset({"svg", "g", "a", "switch"})
SHAPE_TAGS = frozenset({"path", "rect", "circle", "ellipse", "line", "polyline", "polygon"})

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_NUMBER_RE = re.compile(_NUMBER)
_LENGTH_RE = re.compile(rf"^\s*({_NUMBER})\s*(px|mm|cm|in|pt|pc|em|ex|%)?\s*$")
_TRANSFORM_RE = re.compile(r"(matrix|translate|scale|rotate|skewX|skewY)\s*\(([^)]*)\)")


def _local_name(tag: Any) -> str:
    """Strip the XML namespace from a tag."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _to_px(number: str, unit: str | None) -> float:
    """Convert a length to user units. Percentages keep their number."""
    return float(number) * UNIT_TO_PX.get(unit, 1.0)


def _parse_length(value: str | None, default: float = 0.0) -> float:
    """Parse an SVG length attribute into user units."""
    if value is None:
        return default
    match = _LENGTH_RE.match(value)
    if match is None:
        raise ParseError(f"invalid length '{value}'")
    return _to_px(match.group(1), match.group(2))


def _parse_size(value: str | None) -> float | None:
    """Parse a root width/height in user units; percentages count as unspecified."""
    if value is None:
        return None
    match = _LENGTH_RE.match(value)
    if match is None:
        raise ParseError(f"invalid size '{value}'")
    if match.group(2) == "%":
        return None
    return _to_px(match.group(1), match.group(2))


def _parse_view_box(value: str | None) -> tuple[float, float, float, float] | None:
    if value is None:
        return None
    numbers = [float(n) for n in _NUMBER_RE.findall(value)]
    if len(numbers) != 4 or numbers[2] <= 0 or numbers[3] <= 0:
        raise ParseError(f"invalid viewBox '{value}'")
    return numbers[0], numbers[1], numbers[2], numbers[3]


def parse_transform(value: str) -> Transform:
    """Parse an SVG transform list.

    Args:
        value: Transform attribute, e.g. "translate(10 20) rotate(45)"

    Returns:
        The composed transform (rightmost entry applied first)

    Raises:
        ParseError: If the attribute is malformed
    """
    leftover = _TRANSFORM_RE.sub("", value).replace(",", " ").strip()
    if leftover:
        raise ParseError(f"invalid transform '{value}'")

    transform = Transform()
    for name, raw_args in _TRANSFORM_RE.findall(value):
        args = [float(a) for a in _NUMBER_RE.findall(raw_args)]
        count = len(args)

        if name == "matrix" and count == 6:
            transform = transform.transform(args)
        elif name == "translate" and count in (1, 2):
            transform = transform.translate(args[0], args[1] if count == 2 else 0.0)
        elif name == "scale" and count in (1, 2):
            transform = transform.scale(args[0], args[1] if count == 2 else args[0])
        elif name == "rotate" and count == 1:
            transform = transform.rotate(math.radians(args[0]))
        elif name == "rotate" and count == 3:
            angle, cx, cy = args
            transform = transform.translate(cx, cy).rotate(math.radians(angle)).translate(-cx, -cy)
        elif name == "skewX" and count == 1:
            transform = transform.skew(math.radians(args[0]), 0)
        elif name == "skewY" and count == 1:
            transform = transform.skew(0, math.radians(args[0]))
        else:
            raise ParseError(f"invalid transform '{name}({raw_args})'")

    return transform


def _is_hidden(element: ElementTree.Element) -> bool:
    if element.get("display", "").strip() == "none":
        return True
    style = element.get("style", "").replace(" ", "")
    return "display:none" in style


def _fmt(value: float) -> str:
    return repr(float(value))


def _rect_path_data(element: ElementTree.Element) -> str | None:
    x = _parse_length(element.get("x"))
    y = _parse_length(element.get("y"))
    w = _parse_length(element.get("width"))
    h = _parse_length(element.get("height"))
    if w <= 0 or h <= 0:
        return None

    rx_attr = element.get("rx")
    ry_attr = element.get("ry")
    rx = _parse_length(rx_attr if rx_attr is not None else ry_attr)
    ry = _parse_length(ry_attr if ry_attr is not None else rx_attr)
    rx = min(max(rx, 0.0), w / 2)
    ry = min(max(ry, 0.0), h / 2)

    if rx == 0 or ry == 0:
        return f"M {_fmt(x)} {_fmt(y)} H {_fmt(x + w)} V {_fmt(y + h)} H {_fmt(x)} Z"

    arc = f"A {_fmt(rx)} {_fmt(ry)} 0 0 1"
    return (
        f"M {_fmt(x + rx)} {_fmt(y)} H {_fmt(x + w - rx)} "
        f"{arc} {_fmt(x + w)} {_fmt(y + ry)} V {_fmt(y + h - ry)} "
        f"{arc} {_fmt(x + w - rx)} {_fmt(y + h)} H {_fmt(x + rx)} "
        f"{arc} {_fmt(x)} {_fmt(y + h - ry)} V {_fmt(y + ry)} "
        f"{arc} {_fmt(x + rx)} {_fmt(y)} Z"
    )


def _ellipse_path_data(cx: float, cy: float, rx: float, ry: float) -> str | None:
    if rx <= 0 or ry <= 0:
        return None
    arc = f"A {_fmt(rx)} {_fmt(ry)} 0 1 1"
    return (
        f"M {_fmt(cx + rx)} {_fmt(cy)} "
        f"{arc} {_fmt(cx - rx)} {_fmt(cy)} "
        f"{arc} {_fmt(cx + rx)} {_fmt(cy)} Z"
    )


def _points_path_data(value: str | None, closed: bool) -> str | None:
    numbers = _NUMBER_RE.findall(value or "")
    pairs = [(numbers[i], numbers[i + 1]) for i in range(0, len(numbers) - 1, 2)]
    if not pairs:
        return None
    commands = [f"M {pairs[0][0]} {pairs[0][1]}"]
    commands.extend(f"L {x} {y}" for x, y in pairs[1:])
    if closed:
        commands.append("Z")
    return " ".join(commands)


def shape_to_path_data(tag: str, element: ElementTree.Element) -> str | None:
    """Express a shape element as SVG path data.

    Args:
        tag: Local element name
        element: The shape element

    Returns:
        Path data, or None if the shape does not render (e.g. zero size)
    """
    if tag == "path":
        return element.get("d")
    if tag == "rect":
        return _rect_path_data(element)
    if tag == "circle":
        r = _parse_length(element.get("r"))
        return _ellipse_path_data(
            _parse_length(element.get("cx")), _parse_length(element.get("cy")), r, r
        )
    if tag == "ellipse":
        rx_attr = element.get("rx")
        ry_attr = element.get("ry")
        return _ellipse_path_data(
            _parse_length(element.get("cx")),
            _parse_length(element.get("cy")),
            _parse_length(rx_attr if rx_attr is not None else ry_attr),
            _parse_length(ry_attr if ry_attr is not None else rx_attr),
        )
    if tag == "line":
        return (
            f"M {_fmt(_parse_length(element.get('x1')))} {_fmt(_parse_length(element.get('y1')))} "
            f"L {_fmt(_parse_length(element.get('x2')))} {_fmt(_parse_length(element.get('y2')))}"
        )
    if tag == "polyline":
        return _points_path_data(element.get("points"), closed=False)
    if tag == "polygon":
        return _points_path_data(element.get("points"), closed=True)
    return None


def _recording_to_segments(recording: list[tuple[str, tuple[Any, ...]]]) -> tuple[PathSegment, ...]:
    """Convert RecordingPen recording to path segments.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), ..., (xn, yn)))  # Quadratic
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
    - ('closePath', ()) / ('endPath', ())

    A line back to the subpath start right before closePath duplicates the
    implicit closing edge and is dropped.

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        Tuple of path segments
    """
    segments: list[PathSegment] = []
    start: Point | None = None

    for command, args in recording:
        if command == "moveTo":
            start = Point(*args[0])
            segments.append(MoveTo(start))

        elif command == "lineTo":
            segments.append(LineTo(Point(*args[0])))

        elif command == "qCurveTo":
            for control, to in decomposeQuadraticSegment(args):
                segments.append(QuadTo(Point(*control), Point(*to)))

        elif command == "curveTo":
            if len(args) == 3:
                parts = [args]
            else:
                parts = decomposeSuperBezierSegment(args)
            for c1, c2, to in parts:
                segments.append(CubicTo(Point(*c1), Point(*c2), Point(*to)))

        elif command == "closePath":
            last = segments[-1] if segments else None
            if isinstance(last, LineTo) and last.to == start:
                segments.pop()
            segments.append(Close())

    return tuple(segments)


def parse_path_data(path_data: str, transform: Transform = Identity) -> tuple[PathSegment, ...]:
    """Decode SVG path data into segments, applying ``transform``.

    Args:
        path_data: Contents of a ``d`` attribute
        transform: Transform mapping local to document coordinates

    Returns:
        Tuple of path segments

    Raises:
        ParseError: If the path data is malformed
    """
    recording = RecordingPen()
    pen = recording if transform == Identity else TransformPen(recording, transform)
    try:
        parse_path(path_data, pen)
    except (ValueError, IndexError) as e:
        raise ParseError(f"invalid path data '{path_data[:40]}': {e}") from e
    return _recording_to_segments(recording.value)


def _convert_element(element: ElementTree.Element, ctm: Transform) -> ShapeNode:
    tag = _local_name(element.tag)
    element_id = element.get("id")

    if _is_hidden(element) or (tag not in CONTAINER_TAGS and tag not in SHAPE_TAGS):
        return OtherNode(tag=tag, id=element_id)

    local = element.get("transform")
    if local:
        ctm = ctm.transform(parse_transform(local))

    if tag in CONTAINER_TAGS:
        if tag == "svg":
            # Nested viewport: honour its position only
            x = _parse_length(element.get("x"))
            y = _parse_length(element.get("y"))
            if x or y:
                ctm = ctm.translate(x, y)
        children = tuple(_convert_element(child, ctm) for child in element)
        return GroupNode(children=children, id=element_id)

    path_data = shape_to_path_data(tag, element)
    if not path_data:
        return OtherNode(tag=tag, id=element_id)
    return PathNode(segments=parse_path_data(path_data, ctm), id=element_id)


def _read_canvas(root: ElementTree.Element) -> tuple[Canvas, Transform]:
    """Determine the canvas size and the viewBox-to-canvas transform."""
    view_box = _parse_view_box(root.get("viewBox"))
    width = _parse_size(root.get("width"))
    height = _parse_size(root.get("height"))

    if width is None:
        width = view_box[2] if view_box else DEFAULT_CANVAS_SIZE
    if height is None:
        height = view_box[3] if view_box else DEFAULT_CANVAS_SIZE
    if width <= 0 or height <= 0:
        raise ParseError(f"invalid canvas size {width}x{height}")

    transform = Transform()
    if view_box is not None:
        min_x, min_y, vb_width, vb_height = view_box
        transform = transform.scale(width / vb_width, height / vb_height).translate(-min_x, -min_y)

    return Canvas(width=width, height=height), transform


def parse_svg_bytes(data: bytes, source: str | None = None) -> Scene:
    """Parse SVG document bytes into a Scene.

    Args:
        data: Raw document bytes
        source: Document name used in error messages

    Returns:
        Parsed scene

    Raises:
        ParseError: If the document is not a valid SVG
    """
    try:
        root = ElementTree.fromstring(data)
    except ElementTree.ParseError as e:
        raise ParseError(str(e), source) from e

    if _local_name(root.tag) != "svg":
        raise ParseError(f"root element is <{_local_name(root.tag)}>, expected <svg>", source)

    try:
        canvas, root_transform = _read_canvas(root)
        local = root.get("transform")
        if local:
            root_transform = root_transform.transform(parse_transform(local))
        children = tuple(_convert_element(child, root_transform) for child in root)
    except ParseError as e:
        if e.path is None and source is not None:
            raise ParseError(e.reason, source) from e
        raise

    return Scene(root=GroupNode(children=children, id=root.get("id")), canvas=canvas)


class SvgReader:
    """Loads SVG documents into domain scenes.

    Example:
        reader = SvgReader(Path("drawing.svg"))
        scene = reader.load()
        print(scene.canvas.width, scene.canvas.height)
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the reader.

        Args:
            svg_path: Path to the SVG document
        """
        self._svg_path = svg_path

    @property
    def path(self) -> Path:
        """Source document path."""
        return self._svg_path

    def read_bytes(self) -> bytes:
        """Read the raw document.

        Raises:
            DocumentReadError: If the file is missing or unreadable
        """
        if not self._svg_path.exists():
            raise DocumentReadError(str(self._svg_path), "file not found")
        if not self._svg_path.is_file():
            raise DocumentReadError(str(self._svg_path), "not a file")
        try:
            return self._svg_path.read_bytes()
        except OSError as e:
            raise DocumentReadError(str(self._svg_path), str(e)) from e

    def load(self) -> Scene:
        """Read and parse the document.

        Raises:
            DocumentReadError: If the file is missing or unreadable
            ParseError: If the document is not a valid SVG
        """
        return parse_svg_bytes(self.read_bytes(), source=str(self._svg_path))
