"""
Exceptions that can be raised by the ``sales_hierarchy`` app.
"""


class SalesHierarchyException(Exception):
    """
    Base exception class for the ``sales_hierarchy`` app.
    """


class PrincipalNotFound(SalesHierarchyException):
    """
    Raised when a referenced user does not exist.
    """


class InvalidPrincipal(SalesHierarchyException):
    """
    Raised when a referenced user does not hold the role an operation needs,
    or is inactive.
    """


class TeamNotFound(SalesHierarchyException):
    """
    Raised when a sales team does not exist or has been deactivated.
    """


class MembershipConflict(SalesHierarchyException):
    """
    Raised when a sales person who is already active in a team is assigned again.
    """


class MembershipNotFound(SalesHierarchyException):
    """
    Raised when unassigning a sales person who is not active in the given team.
    """


class WorkshopNotFound(SalesHierarchyException):
    """
    Raised when a workshop does not exist.
    """


class WorkshopAccessNotFound(SalesHierarchyException):
    """
    Raised when revoking workshop access that was never granted.
    """
