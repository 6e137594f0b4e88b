"""Scene I/O layer for scanfill.

This module handles reading scene documents: a canvas size, a background
and an ordered list of filled polygons. Documents are validated with
pydantic and converted into domain models for rendering.

Key classes:
- SceneReader: Load and validate JSON scene files
- SceneDocument, PolygonDocument: Validated document models
- Scene, Layer: Domain representation used by the renderer
"""

from scanfill.io.reader import SceneReader
from scanfill.io.scene import (
    Layer,
    PolygonDocument,
    Scene,
    SceneDocument,
    document_to_scene,
)

__all__ = [
    "Layer",
    "PolygonDocument",
    "Scene",
    "SceneDocument",
    "SceneReader",
    "document_to_scene",
]
