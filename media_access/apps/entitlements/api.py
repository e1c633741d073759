"""
Primary Python API for entitlements: playback checks, direct grants and
enrollment with grant fan-out.

Every function accepts an optional ``grant_store`` and ``asset_catalog``;
when omitted the relational implementations are used.
"""
import logging

from django.db import DatabaseError

from media_access.apps.catalog.api import DjangoAssetCatalog
from media_access.apps.catalog.constants import AssetKind
from media_access.apps.grants.store import DjangoGrantStore

from .constants import BatchItemStatus
from .data import BatchOperationResult
from .exceptions import NotEnrolled
from .resolver import EntitlementResolver

logger = logging.getLogger(__name__)


def get_grant_store():
    return DjangoGrantStore()


def get_asset_catalog():
    return DjangoAssetCatalog()


def get_entitlement_resolver(grant_store=None, asset_catalog=None):
    """
    Returns an ``EntitlementResolver`` over the given, or default, storage.
    """
    return EntitlementResolver(
        grant_store=grant_store or get_grant_store(),
        asset_catalog=asset_catalog or get_asset_catalog(),
    )


def grant_direct_access(user_id, asset_kind, asset_id, granted_by_id=None, grant_store=None, asset_catalog=None):
    """
    Grants a user direct access to a video or audio.

    Granting is an upsert: an existing grant row for the user and asset,
    active or revoked, is re-activated in place.  Audio can only be granted
    to users enrolled in the audio's course.

    Returns:
        A ``(grant, created)`` tuple.

    Raises:
        AssetNotFound: the asset does not exist.
        NotEnrolled: granting audio to a user not enrolled in its course.
    """
    grant_store = grant_store or get_grant_store()
    asset_catalog = asset_catalog or get_asset_catalog()

    asset = asset_catalog.get_asset(asset_kind, asset_id)
    if asset_kind == AssetKind.AUDIO and not grant_store.has_enrollment(user_id, asset.course_id):
        raise NotEnrolled('User is not enrolled in this course')

    grant, created = grant_store.upsert_direct_grant(user_id, asset_kind, asset.id, granted_by_id=granted_by_id)
    logger.info(
        'User %s granted direct access to %s %s for user %s (created=%s)',
        granted_by_id, asset_kind, asset.id, user_id, created,
    )
    return grant, created


def revoke_direct_access(user_id, asset_kind, asset_id, grant_store=None, asset_catalog=None):
    """
    Revokes a user's direct access to a video or audio.

    Revoking when no active grant exists is a no-op.  Enrollment-derived
    access is unaffected.

    Returns:
        The revoked grant, or ``None`` if there was nothing to revoke.

    Raises:
        AssetNotFound: the asset does not exist.
    """
    grant_store = grant_store or get_grant_store()
    asset_catalog = asset_catalog or get_asset_catalog()

    asset = asset_catalog.get_asset(asset_kind, asset_id)
    grant = grant_store.revoke_direct_grant(user_id, asset_kind, asset.id)
    if grant is None:
        logger.info('No active direct grant on %s %s for user %s to revoke', asset_kind, asset.id, user_id)
    else:
        logger.info('Revoked direct access to %s %s for user %s', asset_kind, asset.id, user_id)
    return grant


def create_enrollment_grants(user_id, course_id, granted_by_id=None, grant_store=None, asset_catalog=None):
    """
    Creates a direct video grant for every playable video of a course.

    Each write is independent: a grant row that already exists for the user
    and video is left as it is, and a failed write is logged and recorded
    without stopping the others.

    Returns:
        A ``BatchOperationResult`` keyed by video id.
    """
    grant_store = grant_store or get_grant_store()
    asset_catalog = asset_catalog or get_asset_catalog()

    result = BatchOperationResult()
    for video in asset_catalog.playable_assets_for_courses(AssetKind.VIDEO, [course_id]):
        try:
            _, created = grant_store.ensure_direct_grant(
                user_id, AssetKind.VIDEO, video.id, granted_by_id=granted_by_id,
            )
        except DatabaseError as exc:
            logger.warning(
                'Could not create enrollment grant on video %s for user %s: %s',
                video.id, user_id, exc,
            )
            result.record(video.id, BatchItemStatus.ERRORED, error=str(exc))
        else:
            result.record(video.id, BatchItemStatus.CREATED if created else BatchItemStatus.EXISTING)
    return result


def enroll_user(user_id, course_id, granted_by_id=None, grant_store=None, asset_catalog=None):
    """
    Enrolls a user in a course, then grants them each playable video of the course.

    The enrollment succeeds whenever its row is created, no matter how many
    of the per-video grants fail; those outcomes come back to the caller.

    Returns:
        An ``(enrollment, BatchOperationResult)`` tuple.

    Raises:
        CourseNotFound: the course does not exist.
        DuplicateEnrollment: the user is already enrolled in the course.
    """
    grant_store = grant_store or get_grant_store()
    asset_catalog = asset_catalog or get_asset_catalog()

    course = asset_catalog.get_course(course_id)
    enrollment = grant_store.create_enrollment(user_id, course.id)
    logger.info('Enrolled user %s in course %s', user_id, course.id)

    result = create_enrollment_grants(
        user_id,
        course.id,
        granted_by_id=granted_by_id,
        grant_store=grant_store,
        asset_catalog=asset_catalog,
    )
    if result.has_errors:
        logger.warning(
            'Enrollment of user %s in course %s completed with %s failed video grants',
            user_id, course.id, len(result.errored),
        )
    return enrollment, result
