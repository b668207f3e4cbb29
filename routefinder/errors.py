"""Errors raised while building and searching route graphs."""


class RouteError(Exception):

    """Base class for all route errors."""


class InvalidIdentifier(RouteError):

    """A vertex operation received a missing (None) identifier."""


class CycleDetected(RouteError):

    """Adding an edge would create a cycle, including a self-loop."""


class InvalidRecord(RouteError):

    """An input record lacks the required fields."""
