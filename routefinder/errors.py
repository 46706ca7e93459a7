"""
Errors
======
Exceptions signaled by the route finder.
"""


class RouteFinderError(Exception):
    """Base class for all route finder errors."""


class InputError(RouteFinderError, ValueError):
    """A route search was requested without both locations."""

    def __init__(self, message: str = "Please enter both locations"):
        super().__init__(message)
        self.message = message
