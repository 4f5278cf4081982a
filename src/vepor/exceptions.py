"""Exception hierarchy for Vepor."""


class VeporError(Exception):
    """Base exception for all Vepor errors."""

    pass


class ShapeError(VeporError):
    """Errors related to shape expressions."""

    pass


class InvalidShapeError(ShapeError):
    """Shape expression violates a construction invariant."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Invalid {kind}: {reason}")


class SceneError(VeporError):
    """Errors related to the demo scene registry."""

    pass


class UnknownSceneError(SceneError):
    """Requested scene is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Scene '{name}' not found (available: {', '.join(available)})"
        )
