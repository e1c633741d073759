"""
Tests for the ``DjangoGrantStore``.
"""
import ddt
from django.test import TestCase

from media_access.apps.catalog.constants import AssetKind
from media_access.apps.catalog.tests.factories import AudioFactory, CourseFactory, VideoFactory
from media_access.apps.core.constants import AccessStates
from media_access.apps.core.tests.factories import AdminUserFactory, UserFactory
from media_access.apps.grants.exceptions import DuplicateEnrollment
from media_access.apps.grants.models import AudioAccess, CourseEnrollment, VideoAccess
from media_access.apps.grants.store import DjangoGrantStore
from media_access.apps.grants.tests.factories import (
    AudioAccessFactory,
    CourseEnrollmentFactory,
    VideoAccessFactory
)


@ddt.ddt
class DjangoGrantStoreTests(TestCase):
    """
    Tests for reading and writing grants through ``DjangoGrantStore``.
    """

    def setUp(self):
        super().setUp()
        self.store = DjangoGrantStore()
        self.user = UserFactory()
        self.admin = AdminUserFactory()
        self.course = CourseFactory()
        self.video = VideoFactory(course=self.course)
        self.audio = AudioFactory(course=self.course)

    def _asset(self, asset_kind):
        return self.video if asset_kind == AssetKind.VIDEO else self.audio

    def test_unknown_asset_kind(self):
        with self.assertRaises(ValueError):
            self.store.has_active_direct_grant(self.user.id, 'podcast', 1)

    @ddt.data(
        (AssetKind.VIDEO, VideoAccessFactory),
        (AssetKind.AUDIO, AudioAccessFactory),
    )
    @ddt.unpack
    def test_has_active_direct_grant(self, asset_kind, grant_factory):
        asset = self._asset(asset_kind)
        self.assertFalse(self.store.has_active_direct_grant(self.user.id, asset_kind, asset.id))

        grant = grant_factory(user=self.user, asset=asset)
        self.assertTrue(self.store.has_active_direct_grant(self.user.id, asset_kind, asset.id))

        grant.state = AccessStates.REVOKED
        grant.save()
        self.assertFalse(self.store.has_active_direct_grant(self.user.id, asset_kind, asset.id))

    def test_enrollment_reads(self):
        other_course = CourseFactory()
        CourseEnrollmentFactory(user=self.user, course=self.course)
        CourseEnrollmentFactory(course=other_course)

        self.assertTrue(self.store.has_enrollment(self.user.id, self.course.id))
        self.assertFalse(self.store.has_enrollment(self.user.id, other_course.id))
        self.assertEqual(self.store.enrolled_course_ids(self.user.id), [self.course.id])

    def test_active_direct_grant_asset_ids(self):
        revoked_video = VideoFactory(course=self.course)
        VideoAccessFactory(user=self.user, asset=self.video)
        VideoAccessFactory(user=self.user, asset=revoked_video, state=AccessStates.REVOKED)
        VideoAccessFactory(asset=self.video)

        self.assertEqual(
            self.store.active_direct_grant_asset_ids(self.user.id, AssetKind.VIDEO),
            [self.video.id],
        )
        self.assertEqual(self.store.active_direct_grant_asset_ids(self.user.id, AssetKind.AUDIO), [])

    @ddt.data(AssetKind.VIDEO, AssetKind.AUDIO)
    def test_upsert_creates_grant(self, asset_kind):
        asset = self._asset(asset_kind)

        grant, created = self.store.upsert_direct_grant(self.user.id, asset_kind, asset.id, self.admin.id)

        self.assertTrue(created)
        self.assertTrue(grant.is_active)
        self.assertEqual(grant.granted_by, self.admin)

    def test_upsert_reactivates_revoked_row(self):
        original = VideoAccessFactory(user=self.user, asset=self.video, state=AccessStates.REVOKED)

        grant, created = self.store.upsert_direct_grant(self.user.id, AssetKind.VIDEO, self.video.id, self.admin.id)

        self.assertFalse(created)
        self.assertEqual(grant.id, original.id)
        self.assertEqual(grant.state, AccessStates.ACTIVE)
        self.assertIsNone(grant.revoked_at)
        self.assertEqual(grant.granted_by, self.admin)
        self.assertEqual(VideoAccess.objects.filter(user=self.user, asset=self.video).count(), 1)

    def test_revoke_direct_grant(self):
        AudioAccessFactory(user=self.user, asset=self.audio)

        grant = self.store.revoke_direct_grant(self.user.id, AssetKind.AUDIO, self.audio.id)

        self.assertEqual(grant.state, AccessStates.REVOKED)
        self.assertIsNotNone(grant.revoked_at)
        # the row survives, with its history
        stored = AudioAccess.objects.get(user=self.user, asset=self.audio)
        self.assertEqual(stored.state, AccessStates.REVOKED)
        self.assertEqual(stored.history.count(), 2)

    def test_revoke_without_active_grant_returns_none(self):
        self.assertIsNone(self.store.revoke_direct_grant(self.user.id, AssetKind.AUDIO, self.audio.id))
        AudioAccessFactory(user=self.user, asset=self.audio, state=AccessStates.REVOKED)
        self.assertIsNone(self.store.revoke_direct_grant(self.user.id, AssetKind.AUDIO, self.audio.id))

    def test_ensure_direct_grant_leaves_existing_rows_alone(self):
        existing = VideoAccessFactory(user=self.user, asset=self.video, state=AccessStates.REVOKED)

        grant, created = self.store.ensure_direct_grant(self.user.id, AssetKind.VIDEO, self.video.id)

        self.assertFalse(created)
        self.assertEqual(grant.id, existing.id)
        self.assertEqual(grant.state, AccessStates.REVOKED)

    def test_create_enrollment(self):
        enrollment = self.store.create_enrollment(self.user.id, self.course.id)

        self.assertEqual(enrollment.user, self.user)
        self.assertEqual(CourseEnrollment.objects.filter(user=self.user).count(), 1)

    def test_create_enrollment_twice(self):
        self.store.create_enrollment(self.user.id, self.course.id)
        with self.assertRaises(DuplicateEnrollment):
            self.store.create_enrollment(self.user.id, self.course.id)
        self.assertEqual(CourseEnrollment.objects.filter(user=self.user).count(), 1)
