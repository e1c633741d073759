"""
The relational Grant Store: enrollment and direct-grant reads and writes.
"""
import logging

from django.db import IntegrityError, transaction

from media_access.apps.core.constants import AccessStates

from .exceptions import DuplicateEnrollment
from .models import GRANT_MODELS_BY_KIND, CourseEnrollment

logger = logging.getLogger(__name__)


class DjangoGrantStore:
    """
    Reads and writes ``CourseEnrollment`` and direct grant records.

    Database errors are never caught here; callers see them as-is.
    """

    def _grant_model(self, asset_kind):
        try:
            return GRANT_MODELS_BY_KIND[asset_kind]
        except KeyError as exc:
            raise ValueError(f'Unknown asset kind {asset_kind!r}') from exc

    def has_active_direct_grant(self, user_id, asset_kind, asset_id):
        return self._grant_model(asset_kind).objects.filter(
            user_id=user_id,
            asset_id=asset_id,
            state=AccessStates.ACTIVE,
        ).exists()

    def has_enrollment(self, user_id, course_id):
        return CourseEnrollment.objects.filter(user_id=user_id, course_id=course_id).exists()

    def enrolled_course_ids(self, user_id):
        return list(
            CourseEnrollment.objects.filter(user_id=user_id).values_list('course_id', flat=True)
        )

    def active_direct_grant_asset_ids(self, user_id, asset_kind):
        return list(
            self._grant_model(asset_kind).objects.filter(
                user_id=user_id,
                state=AccessStates.ACTIVE,
            ).values_list('asset_id', flat=True)
        )

    def get_direct_grant(self, user_id, asset_kind, asset_id):
        return self._grant_model(asset_kind).objects.filter(user_id=user_id, asset_id=asset_id).first()

    def upsert_direct_grant(self, user_id, asset_kind, asset_id, granted_by_id=None):
        """
        Creates an active grant, or re-activates the existing row for this user and asset.

        Returns:
            A ``(grant, created)`` tuple.
        """
        model = self._grant_model(asset_kind)
        with transaction.atomic():
            grant, created = model.objects.select_for_update().get_or_create(
                user_id=user_id,
                asset_id=asset_id,
                defaults={'granted_by_id': granted_by_id},
            )
            if not created:
                grant.activate(granted_by_id=granted_by_id)
                grant.save()
        return grant, created

    def ensure_direct_grant(self, user_id, asset_kind, asset_id, granted_by_id=None):
        """
        Creates an active grant unless a row already exists for this user and asset.
        An existing row, active or revoked, is left untouched.

        The write runs in its own savepoint, so a failure here leaves any
        enclosing transaction usable.

        Returns:
            A ``(grant, created)`` tuple.
        """
        model = self._grant_model(asset_kind)
        with transaction.atomic():
            return model.objects.get_or_create(
                user_id=user_id,
                asset_id=asset_id,
                defaults={'granted_by_id': granted_by_id},
            )

    def revoke_direct_grant(self, user_id, asset_kind, asset_id):
        """
        Revokes the active grant for this user and asset.

        Returns:
            The revoked grant, or ``None`` when there was no active grant.
        """
        model = self._grant_model(asset_kind)
        with transaction.atomic():
            grant = model.objects.select_for_update().filter(
                user_id=user_id,
                asset_id=asset_id,
                state=AccessStates.ACTIVE,
            ).first()
            if grant is None:
                return None
            grant.revoke()
            grant.save()
        return grant

    def create_enrollment(self, user_id, course_id):
        """
        Raises:
            DuplicateEnrollment: the user is already enrolled in this course.
        """
        if self.has_enrollment(user_id, course_id):
            raise DuplicateEnrollment('User is already enrolled in this course')
        try:
            with transaction.atomic():
                return CourseEnrollment.objects.create(user_id=user_id, course_id=course_id)
        except IntegrityError as exc:
            logger.info('Concurrent enrollment of user %s in course %s', user_id, course_id)
            raise DuplicateEnrollment('User is already enrolled in this course') from exc
