"""Output document model."""

from dataclasses import dataclass

from svgcombiner.domain.scene import Canvas

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def format_dimension(value: float) -> str:
    """Format a canvas dimension without trailing zeros ("210", "297.5")."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(frozen=True)
class OutputDocument:
    """A single-path SVG document.

    Attributes:
        path_data: Path drawing commands for the single <path> element
        canvas: Canvas size copied from the source document
        unit: Unit suffix for width/height ("mm", "px", or "")
    """

    path_data: str
    canvas: Canvas
    unit: str = "mm"

    def to_svg(self) -> str:
        """Render the document as SVG markup."""
        width = format_dimension(self.canvas.width)
        height = format_dimension(self.canvas.height)
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            f'<svg xmlns="{SVG_NAMESPACE}" '
            f'viewBox="0 0 {width} {height}" '
            f'width="{width}{self.unit}" '
            f'height="{height}{self.unit}">\n'
            f'    <path d="{self.path_data}" fill="black" fill-rule="nonzero" stroke="none"/>\n'
            "</svg>\n"
        )
