"""SVG writer for saving the combined document."""

from pathlib import Path

from svgcombiner.domain import OutputDocument
from svgcombiner.exceptions import OutputWriteError


class SvgWriter:
    """Writes an output document to disk.

    Example:
        writer = SvgWriter(Path("output.svg"))
        size = writer.write(document)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Path where the document will be saved
        """
        self._output_path = output_path

    @property
    def path(self) -> Path:
        """Destination path."""
        return self._output_path

    def write(self, document: OutputDocument) -> int:
        """Render and save the document as UTF-8.

        Args:
            document: Document to write

        Returns:
            Number of bytes written

        Raises:
            OutputWriteError: If the file cannot be written
        """
        data = document.to_svg().encode("utf-8")
        try:
            self._output_path.write_bytes(data)
        except OSError as e:
            raise OutputWriteError(str(self._output_path), str(e)) from e
        return len(data)
