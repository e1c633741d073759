"""
API exceptions, and the translation of domain exceptions into them.
"""
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, PermissionDenied, ValidationError

from media_access.apps.catalog.exceptions import AssetNotFound, CourseNotFound, MediaFileNotFound
from media_access.apps.core.rules import UnknownRoleError
from media_access.apps.entitlements.exceptions import AccessDenied, AssetNotPublished, NotEnrolled
from media_access.apps.grants.exceptions import DuplicateEnrollment
from media_access.apps.sales_hierarchy.exceptions import (
    InvalidPrincipal,
    MembershipConflict,
    MembershipNotFound,
    PrincipalNotFound,
    TeamNotFound,
    WorkshopAccessNotFound,
    WorkshopNotFound
)
from media_access.apps.streaming.exceptions import RangeNotSatisfiable


class ConflictException(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'The request conflicts with the current state of the resource.'
    default_code = 'conflict'


class RangeNotSatisfiableException(APIException):
    """
    A 416 response.  ``content_range`` is sent as the ``Content-Range`` header.
    """
    status_code = status.HTTP_416_REQUESTED_RANGE_NOT_SATISFIABLE
    default_detail = 'Requested range not satisfiable.'
    default_code = 'range_not_satisfiable'

    def __init__(self, content_range, detail=None, code=None):
        super().__init__(detail=detail, code=code)
        self.content_range = content_range


NOT_FOUND_EXCEPTIONS = (
    AssetNotFound,
    CourseNotFound,
    MediaFileNotFound,
    PrincipalNotFound,
    TeamNotFound,
    MembershipNotFound,
    WorkshopNotFound,
    WorkshopAccessNotFound,
)

BAD_REQUEST_EXCEPTIONS = (
    AssetNotPublished,
    NotEnrolled,
    InvalidPrincipal,
)

CONFLICT_EXCEPTIONS = (
    MembershipConflict,
    DuplicateEnrollment,
)


def api_exception_for(exc):
    """
    Returns the ``APIException`` to respond with for a domain exception,
    or None if ``exc`` is not a domain exception with a stable status code.
    """
    if isinstance(exc, NOT_FOUND_EXCEPTIONS):
        return NotFound(detail=str(exc))
    if isinstance(exc, AccessDenied):
        return PermissionDenied(detail=str(exc))
    if isinstance(exc, UnknownRoleError):
        return PermissionDenied(detail='Your account role does not grant access to this resource.')
    if isinstance(exc, BAD_REQUEST_EXCEPTIONS):
        return ValidationError(detail={'detail': str(exc)})
    if isinstance(exc, CONFLICT_EXCEPTIONS):
        return ConflictException(detail=str(exc))
    if isinstance(exc, RangeNotSatisfiable):
        return RangeNotSatisfiableException(exc.content_range, detail=str(exc))
    return None
