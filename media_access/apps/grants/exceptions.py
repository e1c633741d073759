"""
Exceptions that can be raised by the ``grants`` app.
"""


class GrantsException(Exception):
    """
    Base exception class for the ``grants`` app.
    """


class DuplicateEnrollment(GrantsException):
    """
    Raised when enrolling a user in a course they are already enrolled in.
    """
