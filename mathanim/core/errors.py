# mathanim/core/errors.py
"""
Exception types raised by the scene graph and curve construction code.
"""


class MathanimError(Exception):
    """Base class for errors raised by mathanim."""


class StructuralError(MathanimError):
    """A scene-graph edit would make a mobject contain itself."""

    def __init__(
        self,
        message=(
            "Mobject cannot create cyclic family relationships.\n"
            "A mobject may not be added to itself or to one of its descendants."
        ),
    ):
        super().__init__(message)


class InvalidParameterError(MathanimError, ValueError):
    """A constructor or curve builder received an unusable parameter."""

    def __init__(self, message="Invalid geometry parameter."):
        super().__init__(message)
