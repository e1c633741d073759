""" Mixins for the api app. """
import logging

from media_access.apps.api.exceptions import RangeNotSatisfiableException, api_exception_for
from media_access.apps.core.rules import UnknownRoleError

logger = logging.getLogger(__name__)


class DomainExceptionMixin:
    """
    Mixin for views that let domain exceptions propagate out of their handlers.

    Domain exceptions are answered with the status code mapped to them in
    ``api.exceptions.api_exception_for``; anything else, database errors
    included, is left to the regular DRF handling.  A user whose stored role
    is outside ``UserRole`` is refused with a 403 and an error log entry.
    """

    def handle_exception(self, exc):
        api_exception = api_exception_for(exc)
        if api_exception is None:
            return super().handle_exception(exc)

        if isinstance(exc, UnknownRoleError):
            logger.error('Denied request from user %s: %s', self.request.user.id, exc)
        else:
            logger.info('%s handled as %s: %s', exc.__class__.__name__, api_exception.status_code, exc)
        response = super().handle_exception(api_exception)
        if isinstance(api_exception, RangeNotSatisfiableException):
            response['Content-Range'] = api_exception.content_range
        return response
