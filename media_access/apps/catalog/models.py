"""
Models for the catalog app.

Courses and their media assets are owned by the content management side of the
platform; this service only reads them.
"""
from django.db import models
from django_extensions.db.models import TimeStampedModel

from .constants import AssetKind


class Course(TimeStampedModel):
    """
    A course, the owner of videos and audios.

    .. no_pii: This model has no PII
    """
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    published = models.BooleanField(
        default=False,
        db_index=True,
        help_text='Unpublished courses block playback of every asset they own.',
    )

    def __str__(self):
        return f'<Course id={self.id}, title={self.title}>'


class MediaAssetQuerySet(models.QuerySet):
    """
    QuerySet helpers shared by videos and audios.
    """

    def playable(self):
        """
        Assets that are published and belong to a published course.
        """
        return self.filter(published=True, course__published=True)

    def for_courses(self, course_ids):
        return self.filter(course_id__in=course_ids)


class MediaAsset(TimeStampedModel):
    """
    Abstract base for a media asset that belongs to exactly one course.

    .. no_pii: This model has no PII
    """
    kind = None

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    media_file = models.CharField(
        max_length=512,
        help_text='Path of the media file, relative to the uploads root.',
    )
    thumbnail = models.CharField(max_length=512, blank=True, default='')
    duration = models.PositiveIntegerField(null=True, blank=True, help_text='Duration in seconds.')
    order = models.PositiveIntegerField(default=0, help_text='Display position within the course.')
    published = models.BooleanField(default=False, db_index=True)

    objects = MediaAssetQuerySet.as_manager()

    class Meta:
        abstract = True
        ordering = ['order', 'id']

    @property
    def is_playable(self):
        """
        True if this asset and its course are both published.
        """
        return self.published and self.course.published

    def __str__(self):
        return f'<{self.__class__.__name__} id={self.id}, course={self.course_id}, title={self.title}>'


class Video(MediaAsset):
    """
    A video lesson.

    .. no_pii: This model has no PII
    """
    kind = AssetKind.VIDEO

    course = models.ForeignKey(
        Course,
        related_name='videos',
        on_delete=models.CASCADE,
    )

    class Meta(MediaAsset.Meta):
        pass


class Audio(MediaAsset):
    """
    An audio lesson.

    .. no_pii: This model has no PII
    """
    kind = AssetKind.AUDIO

    course = models.ForeignKey(
        Course,
        related_name='audios',
        on_delete=models.CASCADE,
    )

    class Meta(MediaAsset.Meta):
        pass


ASSET_MODELS_BY_KIND = {
    AssetKind.VIDEO: Video,
    AssetKind.AUDIO: Audio,
}
