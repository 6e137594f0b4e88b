"""Exception hierarchy for scanfill."""


class ScanfillError(Exception):
    """Base exception for all scanfill errors."""

    pass


class GeometryError(ScanfillError):
    """Errors related to polygon geometry."""

    pass


class InvalidCoordinateError(GeometryError):
    """A coordinate cannot be mapped onto the pixel grid."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid coordinate {value!r}: {reason}")


class MalformedPolygonError(GeometryError):
    """Polygon vertex data could not be interpreted."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed polygon: {reason}")


class CanvasError(ScanfillError):
    """Errors related to the output surface."""

    pass


class CanvasSpecError(CanvasError):
    """Invalid canvas dimensions."""

    def __init__(self, width: int, height: int, reason: str) -> None:
        self.width = width
        self.height = height
        self.reason = reason
        super().__init__(f"Invalid canvas {width}x{height}: {reason}")


class BufferShapeError(CanvasError):
    """Color buffer does not have the expected layout."""

    def __init__(self, shape: tuple[int, ...], reason: str) -> None:
        self.shape = shape
        self.reason = reason
        super().__init__(f"Unsupported buffer shape {shape}: {reason}")


class SceneError(ScanfillError):
    """Errors related to scene documents."""

    pass


class SceneLoadError(SceneError):
    """Error loading a scene file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load scene '{path}': {reason}")
