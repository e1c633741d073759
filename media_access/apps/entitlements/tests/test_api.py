"""
Tests for the ``api.py`` module of the ``entitlements`` app.
"""
import ddt
from django.db import IntegrityError
from django.test import SimpleTestCase, TestCase

from media_access.apps.catalog.constants import AssetKind
from media_access.apps.catalog.exceptions import AssetNotFound, CourseNotFound
from media_access.apps.catalog.tests.factories import AudioFactory, CourseFactory, VideoFactory
from media_access.apps.core.constants import AccessStates
from media_access.apps.core.tests.factories import AdminUserFactory, UserFactory
from media_access.apps.entitlements.api import (
    enroll_user,
    get_entitlement_resolver,
    grant_direct_access,
    revoke_direct_access
)
from media_access.apps.entitlements.constants import AccessType, BatchItemStatus
from media_access.apps.entitlements.exceptions import NotEnrolled
from media_access.apps.grants.exceptions import DuplicateEnrollment
from media_access.apps.grants.models import AudioAccess, CourseEnrollment, VideoAccess
from media_access.apps.grants.tests.factories import (
    AudioAccessFactory,
    CourseEnrollmentFactory,
    VideoAccessFactory
)
from test_utils.fakes import InMemoryAssetCatalog, InMemoryGrantStore


@ddt.ddt
class DirectAccessTests(TestCase):
    """
    Tests for granting and revoking direct access.
    """

    def setUp(self):
        super().setUp()
        self.admin = AdminUserFactory()
        self.user = UserFactory()
        self.course = CourseFactory()
        self.video = VideoFactory(course=self.course)
        self.audio = AudioFactory(course=self.course)

    def test_grant_video_without_enrollment(self):
        grant, created = grant_direct_access(self.user.id, AssetKind.VIDEO, self.video.id, granted_by_id=self.admin.id)

        self.assertTrue(created)
        self.assertEqual(grant.state, AccessStates.ACTIVE)
        self.assertEqual(grant.granted_by, self.admin)
        self.assertTrue(get_entitlement_resolver().has_access(self.user.id, AssetKind.VIDEO, self.video.id))

    def test_grant_audio_requires_enrollment(self):
        with self.assertRaisesMessage(NotEnrolled, 'User is not enrolled in this course'):
            grant_direct_access(self.user.id, AssetKind.AUDIO, self.audio.id, granted_by_id=self.admin.id)
        self.assertFalse(AudioAccess.objects.exists())

    def test_grant_audio_to_enrolled_user(self):
        CourseEnrollmentFactory(user=self.user, course=self.course)

        grant, created = grant_direct_access(self.user.id, AssetKind.AUDIO, self.audio.id, granted_by_id=self.admin.id)

        self.assertTrue(created)
        self.assertEqual(grant.asset, self.audio)

    @ddt.data(AssetKind.VIDEO, AssetKind.AUDIO)
    def test_grant_missing_asset(self, asset_kind):
        with self.assertRaises(AssetNotFound):
            grant_direct_access(self.user.id, asset_kind, 987654)

    def test_regrant_reuses_row(self):
        original = VideoAccessFactory(user=self.user, asset=self.video, state=AccessStates.REVOKED)

        grant, created = grant_direct_access(self.user.id, AssetKind.VIDEO, self.video.id, granted_by_id=self.admin.id)

        self.assertFalse(created)
        self.assertEqual(grant.id, original.id)
        self.assertEqual(grant.state, AccessStates.ACTIVE)

    def test_revoke_direct_grant_removes_access(self):
        VideoAccessFactory(user=self.user, asset=self.video)
        resolver = get_entitlement_resolver()
        self.assertTrue(resolver.has_access(self.user.id, AssetKind.VIDEO, self.video.id))

        grant = revoke_direct_access(self.user.id, AssetKind.VIDEO, self.video.id)

        self.assertEqual(grant.state, AccessStates.REVOKED)
        self.assertFalse(resolver.has_access(self.user.id, AssetKind.VIDEO, self.video.id))

    def test_revoke_keeps_enrollment_access(self):
        CourseEnrollmentFactory(user=self.user, course=self.course)
        AudioAccessFactory(user=self.user, asset=self.audio)

        revoke_direct_access(self.user.id, AssetKind.AUDIO, self.audio.id)

        self.assertTrue(get_entitlement_resolver().has_access(self.user.id, AssetKind.AUDIO, self.audio.id))

    def test_revoke_without_grant_is_noop(self):
        self.assertIsNone(revoke_direct_access(self.user.id, AssetKind.AUDIO, self.audio.id))
        self.assertIsNone(revoke_direct_access(self.user.id, AssetKind.AUDIO, self.audio.id))

    def test_accessible_assets_with_enrollment_and_direct_grant(self):
        CourseEnrollmentFactory(user=self.user, course=self.course)
        VideoAccessFactory(user=self.user, asset=self.video)
        enrolled_only = VideoFactory(course=self.course)

        accessible = get_entitlement_resolver().accessible_assets(self.user.id, AssetKind.VIDEO)

        self.assertEqual(
            {entry.asset.id: entry.access_type for entry in accessible},
            {self.video.id: AccessType.DIRECT, enrolled_only.id: AccessType.ENROLLMENT},
        )


class EnrollUserTests(TestCase):
    """
    Tests for ``enroll_user`` against the database.
    """

    def setUp(self):
        super().setUp()
        self.admin = AdminUserFactory()
        self.user = UserFactory()
        self.course = CourseFactory()
        self.videos = [VideoFactory(course=self.course) for _ in range(3)]
        self.unpublished_video = VideoFactory(course=self.course, published=False)

    def test_enroll_user_grants_playable_videos(self):
        enrollment, result = enroll_user(self.user.id, self.course.id, granted_by_id=self.admin.id)

        self.assertEqual(enrollment, CourseEnrollment.objects.get(user=self.user, course=self.course))
        self.assertCountEqual(result.created, [video.id for video in self.videos])
        self.assertEqual(result.errored, [])
        self.assertCountEqual(
            VideoAccess.objects.filter(user=self.user).values_list('asset_id', flat=True),
            [video.id for video in self.videos],
        )

    def test_enroll_user_leaves_existing_grants_untouched(self):
        revoked = VideoAccessFactory(user=self.user, asset=self.videos[0], state=AccessStates.REVOKED)

        _, result = enroll_user(self.user.id, self.course.id)

        self.assertEqual(result.existing, [self.videos[0].id])
        revoked.refresh_from_db()
        self.assertEqual(revoked.state, AccessStates.REVOKED)

    def test_duplicate_enrollment(self):
        enroll_user(self.user.id, self.course.id)
        with self.assertRaises(DuplicateEnrollment):
            enroll_user(self.user.id, self.course.id)

    def test_enroll_in_missing_course(self):
        with self.assertRaises(CourseNotFound):
            enroll_user(self.user.id, 987654)


class EnrollUserFanOutFailureTests(SimpleTestCase):
    """
    Per-video grant failures during enrollment are recorded in the batch result
    and logged, and never fail the enrollment itself.  The caller decides
    whether a partial failure is worth surfacing.
    """

    def setUp(self):
        super().setUp()
        self.catalog = InMemoryAssetCatalog()
        course = self.catalog.add_course(1)
        for video_id in (10, 11, 12):
            self.catalog.add_asset(AssetKind.VIDEO, video_id, course, order=video_id)
        self.grant_store = InMemoryGrantStore(
            failing_asset_ids=[11],
            failure_exception=IntegrityError('duplicate key'),
        )

    def test_failed_grant_is_recorded_not_raised(self):
        with self.assertLogs('media_access.apps.entitlements.api', level='WARNING') as logs:
            enrollment, result = enroll_user(
                5, 1, grant_store=self.grant_store, asset_catalog=self.catalog,
            )

        self.assertEqual(enrollment, (5, 1))
        self.assertEqual(result.created, [10, 12])
        self.assertEqual(result.errored, [11])
        self.assertTrue(result.has_errors)
        self.assertEqual(
            result.to_dict(),
            {'created': [10, 12], 'existing': [], 'errored': [{'id': 11, 'error': 'duplicate key'}]},
        )
        self.assertIn(BatchItemStatus.ERRORED, [outcome.status for outcome in result.outcomes])
        self.assertTrue(any('video 11' in line for line in logs.output))

    def test_unexpected_errors_propagate(self):
        grant_store = InMemoryGrantStore(failing_asset_ids=[10], failure_exception=RuntimeError('boom'))

        with self.assertRaises(RuntimeError):
            enroll_user(5, 1, grant_store=grant_store, asset_catalog=self.catalog)
