"""Serialization of polygon sets into SVG path data."""

from svgcombiner.domain import Canvas, OutputDocument, PolygonSet


def _format_coordinate(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    # Avoid "-0.0000" for values that round to zero
    if text.startswith("-") and float(text) == 0:
        return text[1:]
    return text


def polygons_to_path_data(polygons: PolygonSet, precision: int = 4) -> str:
    """Convert contours into a multi-subpath ``d`` attribute.

    Each non-empty contour becomes ``M x y``, ``L x y`` for every further
    point, and ``Z``. Under the nonzero fill rule oppositely wound inner
    contours render as holes.

    Args:
        polygons: Contours to serialize
        precision: Decimal places per coordinate

    Returns:
        Path data string, empty for an empty polygon set
    """
    commands: list[str] = []

    for contour in polygons:
        if not contour.points:
            continue

        first = contour.points[0]
        commands.append(
            f"M {_format_coordinate(first.x, precision)} {_format_coordinate(first.y, precision)}"
        )
        for point in contour.points[1:]:
            commands.append(
                f"L {_format_coordinate(point.x, precision)} {_format_coordinate(point.y, precision)}"
            )
        commands.append("Z")

    return " ".join(commands)


def build_document(
    polygons: PolygonSet,
    canvas: Canvas,
    unit: str = "mm",
    precision: int = 4,
) -> OutputDocument:
    """Wrap the combined polygons in an output document.

    Args:
        polygons: Final combined polygon set
        canvas: Canvas size of the source scene
        unit: Unit suffix for width/height
        precision: Decimal places per coordinate

    Returns:
        OutputDocument ready to be written
    """
    return OutputDocument(
        path_data=polygons_to_path_data(polygons, precision),
        canvas=canvas,
        unit=unit,
    )
