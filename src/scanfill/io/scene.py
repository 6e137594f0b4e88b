"""Scene documents and their domain representation.

A scene is a canvas plus an ordered list of polygons, each with a fill
color and optionally its own fill rule. Documents are validated with
pydantic and converted into domain types before rendering; polygons are
composited in document order.

Example document:

    {
        "width": 30,
        "height": 20,
        "background": "#ffffff",
        "polygons": [
            {"name": "left", "coords": [0, 0, 20, 0, 20, 10, 0, 10], "color": "#ff0000"},
            {"name": "right", "coords": [10, 0, 30, 0, 30, 10, 0, 10], "color": "#00ff00"}
        ]
    }
"""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from scanfill.core.color import LinearColor, parse_hex
from scanfill.domain import CanvasSpec, FillRule, Polygon
from scanfill.exceptions import MalformedPolygonError

HEX_COLOR_PATTERN = r"^#?[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$"


class PolygonDocument(BaseModel):
    """One polygon entry of a scene document."""

    name: str | None = Field(
        default=None,
        description="Label used in logs and reports",
    )
    coords: list[int | float] = Field(
        description="Flat vertex coordinates x0, y0, x1, y1, ...",
    )
    color: str = Field(
        default="#000000",
        pattern=HEX_COLOR_PATTERN,
        description="Fill color as #rrggbb or #rrggbbaa (sRGB)",
    )
    rule: FillRule | None = Field(
        default=None,
        description="Fill rule (configured default if omitted)",
    )


class SceneDocument(BaseModel):
    """Top-level scene document."""

    width: int = Field(ge=0, description="Canvas width in pixels")
    height: int = Field(ge=0, description="Canvas height in pixels")
    background: str = Field(
        default="#ffffff",
        pattern=HEX_COLOR_PATTERN,
        description="Background color as #rrggbb or #rrggbbaa (sRGB)",
    )
    polygons: list[PolygonDocument] = Field(default_factory=list)


@dataclass
class Layer:
    """A polygon to composite, with its paint."""

    name: str
    polygon: Polygon
    color: LinearColor
    rule: FillRule | None = None


@dataclass
class Scene:
    """Canvas, background and layers in compositing order."""

    spec: CanvasSpec
    background: tuple[int, int, int, int] = (255, 255, 255, 255)
    layers: list[Layer] = field(default_factory=list)


def document_to_scene(document: SceneDocument) -> Scene:
    """Convert a validated document into a domain scene.

    Raises:
        MalformedPolygonError: If a polygon has an odd number of coordinates
    """
    layers = []
    for index, entry in enumerate(document.polygons):
        name = entry.name or f"polygon-{index}"
        polygon = Polygon.from_flat(entry.coords)
        if polygon is None:
            raise MalformedPolygonError(
                f"'{name}' has an odd number of coordinates ({len(entry.coords)})"
            )
        layers.append(
            Layer(
                name=name,
                polygon=polygon,
                color=LinearColor.from_hex(entry.color),
                rule=entry.rule,
            )
        )

    return Scene(
        spec=CanvasSpec(document.width, document.height),
        background=parse_hex(document.background),
        layers=layers,
    )
