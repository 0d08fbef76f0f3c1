"""src/reqtarget/exceptions.py

Reqtarget Exceptions hierarchy.
"""


class ReqtargetError(Exception):
    """Base exception for all Reqtarget errors."""


class InvalidArgumentError(ReqtargetError, ValueError):
    """A required argument was missing or had an unusable value."""


class URLError(ReqtargetError):
    """
    Base exception for URI-related errors.
    """


class InvalidURL(URLError, ValueError):
    """Text could not be parsed as a URI reference."""


class URLBuildError(URLError):
    """
    Structured URI components could not be composed into a valid URI.

    Raised on demand when the composed URI is requested. The components
    themselves are left untouched.
    """

    def __init__(self, message: str = "Could not build URI"):
        super().__init__(message)
