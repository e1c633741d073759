"""
Exceptions that can be raised by the ``entitlements`` app.
"""


class EntitlementException(Exception):
    """
    Base exception class for the ``entitlements`` app.
    """


class AccessDenied(EntitlementException):
    """
    Raised when a user holds neither a direct grant nor an enrollment covering an asset.
    The message never says which of the two was missing.
    """
    def __init__(self, message='You do not have access to this content'):
        super().__init__(message)


class AssetNotPublished(EntitlementException):
    """
    Raised when an authorized user asks to play an asset that is not playable yet.
    """


class NotEnrolled(EntitlementException):
    """
    Raised when granting audio access to a user who is not enrolled in the audio's course.
    """
