"""Domain exception hierarchy.

Every error may carry a rendered dump of the subtree that was in scope when
the failure happened, so a failed parse explains itself without re-running.
"""

from __future__ import annotations


class ApiDocError(Exception):
    def __init__(self, message: str, dump: str = "") -> None:
        self.message = message
        self.dump = dump
        super().__init__(message + dump)


class ShapeError(ApiDocError):
    """A query result did not contain exactly the expected number of nodes."""


class StructuralError(ApiDocError):
    """A node had the wrong tag/class or an unexpected number of children."""


class RowShapeError(ApiDocError):
    def __init__(self, expected: int, actual: int, dump: str = "") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"row has {actual} cells, but header has {expected} columns", dump)


class MalformedTypeError(ApiDocError):
    def __init__(self, raw: str, reason: str = "") -> None:
        self.raw = raw
        message = f"malformed type string {raw!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class PatchRequiredError(ApiDocError):
    """The override registry has no entry for a resource, operation or class."""

    def __init__(self, resource_id: str, subject: str = "") -> None:
        self.resource_id = resource_id
        self.subject = subject
        if subject:
            message = f"override required for {subject} in resource {resource_id!r}"
        else:
            message = f"override required for resource {resource_id!r}"
        super().__init__(message)


class RegistryError(ApiDocError):
    pass


class DuplicateResourceError(RegistryError):
    def __init__(self, resource_id: str) -> None:
        self.resource_id = resource_id
        super().__init__(f"resource override already exists: {resource_id!r}")


class AmbiguousPatchError(RegistryError):
    def __init__(self, path: str, suffixes: list[str]) -> None:
        self.path = path
        self.suffixes = suffixes
        super().__init__(f"operation suffix {path!r} collides with {suffixes}")
