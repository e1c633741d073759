"""
Models for the grants app.

A user reaches a media asset either through a ``CourseEnrollment`` in the
asset's course or through a direct ``VideoAccess`` / ``AudioAccess`` grant.
Direct grants are never deleted; revoking one flips its ``state``.
"""
from django.conf import settings
from django.db import models
from django.utils import timezone
from django_extensions.db.models import TimeStampedModel
from simple_history.models import HistoricalRecords

from media_access.apps.catalog.constants import AssetKind
from media_access.apps.catalog.models import Audio, Course, Video
from media_access.apps.core.constants import AccessStates


class CourseEnrollment(TimeStampedModel):
    """
    Records that a user is enrolled in a course.  Enrollment implies access to
    every playable video and audio of the course, evaluated at request time.

    .. no_pii: This model has no PII
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='course_enrollments',
        on_delete=models.CASCADE,
    )
    course = models.ForeignKey(
        Course,
        related_name='enrollments',
        on_delete=models.CASCADE,
    )

    history = HistoricalRecords()

    class Meta:
        unique_together = [
            ('user', 'course'),
        ]

    def __str__(self):
        return f'<CourseEnrollment user={self.user_id}, course={self.course_id}>'


class DirectAccessGrant(TimeStampedModel):
    """
    Abstract base for a direct grant of one asset to one user.

    .. no_pii: This model has no PII
    """
    asset_kind = None

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='%(app_label)s_%(class)s',
        on_delete=models.CASCADE,
    )
    state = models.CharField(
        max_length=25,
        choices=AccessStates.CHOICES,
        default=AccessStates.ACTIVE,
        db_index=True,
    )
    granted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='granted_%(app_label)s_%(class)s',
        blank=True,
        null=True,
        on_delete=models.SET_NULL,
    )
    revoked_at = models.DateTimeField(
        null=True,
        blank=True,
    )

    class Meta:
        abstract = True

    @property
    def is_active(self):
        return self.state == AccessStates.ACTIVE

    def activate(self, granted_by_id=None):
        """
        Marks this grant active again, recording who granted it.  Does not save.
        """
        self.state = AccessStates.ACTIVE
        self.granted_by_id = granted_by_id
        self.revoked_at = None

    def revoke(self):
        """
        Marks this grant revoked.  Does not save.
        """
        self.state = AccessStates.REVOKED
        self.revoked_at = timezone.now()

    def __str__(self):
        return (
            f'<{self.__class__.__name__} user={self.user_id}, asset={self.asset_id}, state={self.state}>'
        )


class VideoAccess(DirectAccessGrant):
    """
    Direct grant of a video to a user.

    .. no_pii: This model has no PII
    """
    asset_kind = AssetKind.VIDEO

    asset = models.ForeignKey(
        Video,
        related_name='access_grants',
        on_delete=models.CASCADE,
    )

    history = HistoricalRecords()

    class Meta:
        unique_together = [
            ('user', 'asset'),
        ]
        verbose_name_plural = 'video access grants'


class AudioAccess(DirectAccessGrant):
    """
    Direct grant of an audio to a user.

    .. no_pii: This model has no PII
    """
    asset_kind = AssetKind.AUDIO

    asset = models.ForeignKey(
        Audio,
        related_name='access_grants',
        on_delete=models.CASCADE,
    )

    history = HistoricalRecords()

    class Meta:
        unique_together = [
            ('user', 'asset'),
        ]
        verbose_name_plural = 'audio access grants'


GRANT_MODELS_BY_KIND = {
    AssetKind.VIDEO: VideoAccess,
    AssetKind.AUDIO: AudioAccess,
}
