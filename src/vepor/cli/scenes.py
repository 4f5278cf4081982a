"""Built-in demo scenes.

Each scene is a named shape expression used by the CLI to demonstrate
resolution, boolean operations, measurement and containment queries.
"""

from dataclasses import dataclass

from vepor.domain import Circle, Point, Rectangle, Scale, Shape, Subtract, Union, Xor
from vepor.exceptions import UnknownSceneError


@dataclass(frozen=True)
class Scene:
    """A named demo shape.

    Attributes:
        name: Registry key
        description: One-line summary shown in listings
        shape: Shape expression to resolve
    """

    name: str
    description: str
    shape: Shape


_CIRCLE = Circle(Point(10.0, 10.0), 5.0)
_RECTANGLE = Rectangle(Point(8.0, 8.0), Point(15.0, 12.0))

SCENES: dict[str, Scene] = {
    scene.name: scene
    for scene in [
        Scene("circle", "Circle at (10, 10) with radius 5", _CIRCLE),
        Scene(
            "rectangle",
            "Rectangle from (0, 0) to (10, 5)",
            Rectangle(Point(0.0, 0.0), Point(10.0, 5.0)),
        ),
        Scene("scaled-circle", "Circle doubled about its starting point", Scale(_CIRCLE, 2.0)),
        Scene("union", "Circle united with an overlapping rectangle", Union(_CIRCLE, _RECTANGLE)),
        Scene("subtract", "Rectangle removed from a circle", Subtract(_CIRCLE, _RECTANGLE)),
        Scene("xor", "Circle and rectangle symmetric difference", Xor(_CIRCLE, _RECTANGLE)),
        Scene(
            "overlapping-circles",
            "Two radius 5 circles six units apart",
            Union(Circle(Point(0.0, 0.0), 5.0), Circle(Point(6.0, 0.0), 5.0)),
        ),
        Scene(
            "tangent-circles",
            "Two externally tangent radius 3 circles",
            Union(Circle(Point(0.0, 0.0), 3.0), Circle(Point(6.0, 0.0), 3.0)),
        ),
        Scene(
            "disjoint-circles",
            "Two radius 2 circles that do not touch",
            Union(Circle(Point(0.0, 0.0), 2.0), Circle(Point(10.0, 0.0), 2.0)),
        ),
    ]
}


def get_scene(name: str) -> Scene:
    """Look up a scene by name.

    Args:
        name: Scene name

    Returns:
        The registered scene

    Raises:
        UnknownSceneError: If no scene has that name
    """
    try:
        return SCENES[name]
    except KeyError:
        raise UnknownSceneError(name, sorted(SCENES)) from None


def list_scenes() -> list[Scene]:
    """All registered scenes in registration order."""
    return list(SCENES.values())
