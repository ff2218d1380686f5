"""Exceptions raised by the planet generation pipeline."""


class PlanetGenError(Exception):
    """Base class for all planet generation errors."""


class InvalidGeneratedGeometryError(PlanetGenError):
    """Raised when a generated height grid is empty or not square."""


class SurfaceGenerationError(PlanetGenError):
    """Raised when a body's surface cannot be produced."""
