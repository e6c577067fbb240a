"""Exception hierarchy for SVG Combiner."""


class SvgCombinerError(Exception):
    """Base exception for all SVG Combiner errors."""

    pass


class DocumentError(SvgCombinerError):
    """Errors related to reading or writing documents."""

    pass


class DocumentReadError(DocumentError):
    """Source document is missing or unreadable."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read document '{path}': {reason}")


class ParseError(DocumentError):
    """Malformed scene description."""

    def __init__(self, reason: str, path: str | None = None) -> None:
        self.path = path
        self.reason = reason
        if path is None:
            super().__init__(f"Invalid SVG: {reason}")
        else:
            super().__init__(f"Invalid SVG '{path}': {reason}")


class OutputWriteError(DocumentError):
    """Destination document could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write document '{path}': {reason}")


class GeometryError(SvgCombinerError):
    """Errors in geometric calculations."""

    pass


class ClipError(GeometryError):
    """Numeric degeneracy inside a polygon clipping operation."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Clipping operation '{operation}' failed: {reason}")
