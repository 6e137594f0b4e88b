"""Unit tests for the scene I/O layer.

Tests for SceneReader and document conversion.
"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from scanfill.core.color import LinearColor
from scanfill.domain import CanvasSpec, FillRule
from scanfill.exceptions import MalformedPolygonError, SceneLoadError
from scanfill.io import SceneDocument, SceneReader, document_to_scene


def write_scene(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def scene_data() -> dict:
    return {
        "width": 30,
        "height": 20,
        "background": "#ffffff",
        "polygons": [
            {"name": "left", "coords": [0, 0, 20, 0, 20, 10, 0, 10], "color": "#ff0000"},
            {"coords": [10, 0, 30, 0, 30, 10, 0, 10], "color": "#00ff00", "rule": "even-odd"},
        ],
    }


class TestSceneReader:
    """Tests for SceneReader class."""

    def test_init(self):
        """Test SceneReader initialization."""
        path = Path("scene.json")
        reader = SceneReader(path)
        assert reader._scene_path == path
        assert reader._document is None

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = SceneReader(Path("nonexistent.json"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_document_before_load(self):
        """Test accessing the document before loading raises RuntimeError."""
        reader = SceneReader(Path("scene.json"))
        with pytest.raises(RuntimeError, match="Scene not loaded"):
            _ = reader.document

    def test_scene_before_load(self):
        """Test accessing the scene before loading raises RuntimeError."""
        reader = SceneReader(Path("scene.json"))
        with pytest.raises(RuntimeError, match="Scene not loaded"):
            _ = reader.scene

    def test_load_valid_scene(self, tmp_path, scene_data):
        """Test loading a valid scene file."""
        reader = SceneReader(write_scene(tmp_path / "scene.json", scene_data))
        reader.load()

        assert reader.polygon_count == 2
        scene = reader.scene
        assert scene.spec == CanvasSpec(30, 20)
        assert scene.background == (255, 255, 255, 255)
        assert [layer.name for layer in scene.layers] == ["left", "polygon-1"]
        assert scene.layers[0].color == LinearColor(1.0, 0.0, 0.0)
        assert scene.layers[0].rule is None
        assert scene.layers[1].rule is FillRule.EVEN_ODD

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON raises SceneLoadError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        reader = SceneReader(path)
        with pytest.raises(SceneLoadError):
            reader.load()

    def test_invalid_color(self, tmp_path, scene_data):
        """Test that a malformed color is rejected at load time."""
        scene_data["polygons"][0]["color"] = "red"
        reader = SceneReader(write_scene(tmp_path / "scene.json", scene_data))
        with pytest.raises(SceneLoadError, match="validation error"):
            reader.load()

    def test_negative_dimensions(self, tmp_path, scene_data):
        """Test that negative canvas sizes are rejected."""
        scene_data["width"] = -1
        reader = SceneReader(write_scene(tmp_path / "scene.json", scene_data))
        with pytest.raises(SceneLoadError):
            reader.load()

    def test_odd_coordinate_count(self, tmp_path, scene_data):
        """Test that an odd coordinate count surfaces as SceneLoadError."""
        scene_data["polygons"][0]["coords"] = [0, 0, 5]
        reader = SceneReader(write_scene(tmp_path / "scene.json", scene_data))
        reader.load()
        with pytest.raises(SceneLoadError, match="odd number of coordinates"):
            _ = reader.scene

    def test_context_manager(self, tmp_path, scene_data):
        """Test context manager loads and releases the document."""
        path = write_scene(tmp_path / "scene.json", scene_data)
        with SceneReader(path) as reader:
            assert reader.polygon_count == 2
        assert reader._document is None


class TestDocumentToScene:
    """Tests for document conversion."""

    def test_defaults(self):
        """Test default color, background and empty layer list."""
        document = SceneDocument.model_validate(
            {"width": 4, "height": 3, "polygons": [{"coords": [0, 0, 4, 0, 4, 3]}]}
        )
        scene = document_to_scene(document)
        assert scene.background == (255, 255, 255, 255)
        assert scene.layers[0].color == LinearColor(0.0, 0.0, 0.0)

    def test_empty_scene(self):
        """Test a scene without polygons."""
        scene = document_to_scene(SceneDocument(width=0, height=0))
        assert scene.layers == []
        assert scene.spec.is_empty

    def test_background_with_alpha(self):
        """Test an eight-digit background color."""
        scene = document_to_scene(SceneDocument(width=1, height=1, background="#10203080"))
        assert scene.background == (0x10, 0x20, 0x30, 0x80)

    def test_odd_coordinates_raise(self):
        """Test MalformedPolygonError for an odd coordinate count."""
        document = SceneDocument.model_validate(
            {"width": 4, "height": 3, "polygons": [{"name": "bad", "coords": [1, 2, 3]}]}
        )
        with pytest.raises(MalformedPolygonError, match="'bad'"):
            document_to_scene(document)

    def test_unknown_rule_rejected(self):
        """Test that an unknown fill rule fails validation."""
        with pytest.raises(ValidationError):
            SceneDocument.model_validate(
                {"width": 4, "height": 3, "polygons": [{"coords": [0, 0], "rule": "winding"}]}
            )
