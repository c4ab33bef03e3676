"""Enumerated plugin configuration values."""

from enum import IntEnum


class Target(IntEnum):
    """LRS a course's statements are routed to."""

    NO_LRS = 0
    MAIN = 1
    SECONDARY = 2


class SyncMode(IntEnum):
    """Statement delivery mode."""

    SYNC = 0
    ASYNC = 1


class ActorsIdentification(IntEnum):
    """How actors are identified in statements."""

    ANONYMOUS = 0
    ACCOUNT_USERNAME = 1
    MBOX = 2
