"""Scene reader for loading JSON scene files.

This module provides the SceneReader class for loading scene documents
and converting them into domain models.
"""

from pathlib import Path

from pydantic import ValidationError

from scanfill.exceptions import MalformedPolygonError, SceneLoadError
from scanfill.io.scene import Scene, SceneDocument, document_to_scene


class SceneReader:
    """Loads JSON scene files.

    Example:
        reader = SceneReader(Path("scene.json"))
        reader.load()
        for layer in reader.scene.layers:
            print(layer.name)
    """

    def __init__(self, scene_path: Path) -> None:
        """Initialize the scene reader.

        Args:
            scene_path: Path to the JSON scene file
        """
        self._scene_path = scene_path
        self._document: SceneDocument | None = None

    def load(self) -> None:
        """Load and validate the scene file.

        Raises:
            FileNotFoundError: If scene file does not exist
            SceneLoadError: If the file is not a valid scene document
        """
        if not self._scene_path.exists():
            raise FileNotFoundError(f"Scene file not found: {self._scene_path}")

        try:
            text = self._scene_path.read_text(encoding="utf-8")
            self._document = SceneDocument.model_validate_json(text)
        except (OSError, UnicodeDecodeError) as e:
            raise SceneLoadError(str(self._scene_path), str(e)) from e
        except ValidationError as e:
            raise SceneLoadError(
                str(self._scene_path), f"{e.error_count()} validation error(s): {e}"
            ) from e

    @property
    def document(self) -> SceneDocument:
        """Return the validated document.

        Raises:
            RuntimeError: If scene has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Scene not loaded. Call load() first.")
        return self._document

    @property
    def polygon_count(self) -> int:
        return len(self.document.polygons)

    @property
    def scene(self) -> Scene:
        """Return the scene as domain models.

        Raises:
            RuntimeError: If scene has not been loaded yet
            SceneLoadError: If a polygon cannot be built from its coordinates
        """
        try:
            return document_to_scene(self.document)
        except MalformedPolygonError as e:
            raise SceneLoadError(str(self._scene_path), e.reason) from e

    def __enter__(self) -> "SceneReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self._document = None
