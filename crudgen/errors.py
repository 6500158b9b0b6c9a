"""
Crudgen Errors - failure kinds raised by the generators

Fatal errors (invalid arguments, taken module names, bad config) are raised
before any file is touched. Emission failures are recorded per file.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for every error crudgen reports to the user."""


class InvalidArguments(GeneratorError):
    """Positional arguments do not form a valid resource descriptor."""


class NameUnavailable(GeneratorError):
    """A module name the generator wants to create is already defined."""

    def __init__(self, name: str, defined_in: str | None = None):
        self.name = name
        self.defined_in = defined_in
        message = f"module name {name} is already taken"
        if defined_in:
            message += f" (defined in {defined_in})"
        message += ", please choose another name"
        super().__init__(message)


class EmissionFailure(GeneratorError):
    """A single file could not be rendered or written."""

    def __init__(self, destination: str, reason: str):
        self.destination = destination
        self.reason = reason
        super().__init__(f"{destination}: {reason}")


class DelegateFailure(GeneratorError):
    """The model generator failed while handling a delegated invocation."""

    def __init__(self, message: str, files=None):
        self.files = files  # HTML outcomes emitted before delegation
        super().__init__(message)


class ConfigError(GeneratorError):
    """The generator configuration file could not be loaded."""
