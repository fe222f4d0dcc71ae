# app/exceptions.py


class SoftwareEngineerError(Exception):
    """Base class for errors raised by the profile services."""


class InvalidInput(SoftwareEngineerError, ValueError):
    """A required argument is missing or blank."""


class NotFound(SoftwareEngineerError, LookupError):
    """No software engineer exists with the requested id."""


class GenerationFailure(SoftwareEngineerError, RuntimeError):
    """The chat backend could not produce a usable response."""
