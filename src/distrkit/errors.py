from __future__ import annotations


class DistrkitError(Exception):
    """Base class for distribution errors."""

    pass


class ParameterShapeError(DistrkitError, ValueError):
    """Fatal error thrown when parameter matrices disagree on their number of
    components. Raised before any element is evaluated.

    Attributes
    ----------
    shapes: dict
        mapping of parameter name to the shape that was passed, appended to
        the error message
    """

    def __init__(self, *args, shapes: dict = None) -> None:
        super().__init__(*args)
        self.shapes = shapes

    def __str__(self) -> str:
        suffix = ""
        if self.shapes:
            suffix += "\nGot shapes " + ", ".join(
                f"{name}={shape}" for name, shape in self.shapes.items()
            )
        return super().__str__() + suffix
