"""Domain exceptions."""

from typing import Any


class LogstoreError(Exception):
    """Base class for logstore errors."""


class NotFoundError(LogstoreError):
    """A record required to answer a request does not exist."""

    def __init__(self, kind: str, id: Any):
        self.kind = kind
        self.id = id
        super().__init__(f"{kind} {id} not found")


class UnknownCategoryGroupError(LogstoreError):
    """The requested event category group does not exist."""

    def __init__(self, group: str):
        self.group = group
        super().__init__(f"Unknown event category group: {group}")


class InvalidTargetError(LogstoreError):
    """The value is not a valid LRS target."""

    def __init__(self, target: Any):
        self.target = target
        super().__init__(f"Invalid LRS target: {target}")
