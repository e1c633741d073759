"""
Primary Python API for reading course and media asset records.

This service never writes to the catalog; ``DjangoAssetCatalog`` is the
read-only view of it that the entitlement and streaming code is built against.
"""
import logging
from pathlib import Path

from django.conf import settings

from .exceptions import AssetNotFound, CourseNotFound, MediaFileNotFound
from .models import ASSET_MODELS_BY_KIND, Course

logger = logging.getLogger(__name__)


def get_asset_model(asset_kind):
    """
    Returns the model class storing assets of ``asset_kind``.
    """
    try:
        return ASSET_MODELS_BY_KIND[asset_kind]
    except KeyError as exc:
        raise ValueError(f'Unknown asset kind {asset_kind!r}') from exc


def resolve_media_path(media_file, uploads_root=None):
    """
    Resolves an asset's stored ``media_file`` against the uploads root.

    Args:
        media_file (str): path relative to the uploads root, as stored on the asset.
        uploads_root (str): overrides ``settings.MEDIA_UPLOADS_ROOT``.

    Returns:
        pathlib.Path: the absolute path of the media file.

    Raises:
        MediaFileNotFound: if the path is empty or escapes the uploads root.
    """
    if not media_file:
        raise MediaFileNotFound('Asset has no media file')

    root = Path(uploads_root or settings.MEDIA_UPLOADS_ROOT).resolve()
    candidate = (root / media_file).resolve()
    try:
        candidate.relative_to(root)
    except ValueError as exc:
        logger.warning('Media path %s resolves outside of the uploads root', media_file)
        raise MediaFileNotFound('Media file not found') from exc
    return candidate


class DjangoAssetCatalog:
    """
    Reads courses, videos and audios from the relational store.
    """

    def get_asset(self, asset_kind, asset_id):
        """
        Fetch a single video or audio, with its course.

        Raises:
            AssetNotFound: no asset of ``asset_kind`` has this id.
        """
        model = get_asset_model(asset_kind)
        try:
            return model.objects.select_related('course').get(pk=asset_id)
        except model.DoesNotExist as exc:
            raise AssetNotFound(f'{asset_kind} {asset_id} not found') from exc

    def get_course(self, course_id):
        try:
            return Course.objects.get(pk=course_id)
        except Course.DoesNotExist as exc:
            raise CourseNotFound(f'Course {course_id} not found') from exc

    def is_playable(self, asset):
        return asset.is_playable

    def playable_assets_for_courses(self, asset_kind, course_ids):
        """
        Playable assets of ``asset_kind`` owned by any of ``course_ids``, in display order.
        """
        model = get_asset_model(asset_kind)
        return list(
            model.objects.playable().for_courses(course_ids).select_related('course')
        )

    def playable_assets_by_ids(self, asset_kind, asset_ids):
        model = get_asset_model(asset_kind)
        return list(
            model.objects.playable().filter(pk__in=asset_ids).select_related('course')
        )

    def asset_file_path(self, asset):
        return resolve_media_path(asset.media_file)
