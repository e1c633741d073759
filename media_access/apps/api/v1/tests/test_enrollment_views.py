"""
Tests for the course enrollment view.
"""
from unittest import mock

import ddt
from django.db import IntegrityError
from rest_framework import status
from rest_framework.reverse import reverse

from media_access.apps.catalog.tests.factories import CourseFactory, VideoFactory
from media_access.apps.core.constants import AccessStates, UserRole
from media_access.apps.core.tests.factories import UserFactory
from media_access.apps.grants.models import CourseEnrollment, VideoAccess
from media_access.apps.grants.store import DjangoGrantStore
from media_access.apps.grants.tests.factories import CourseEnrollmentFactory, VideoAccessFactory
from test_utils import APITest


@ddt.ddt
class CourseEnrollmentViewTests(APITest):
    """
    Tests for ``POST /api/v1/courses/{id}/enrollments/``.
    """

    def setUp(self):
        super().setUp()
        self.learner = UserFactory()
        self.course = CourseFactory()
        self.url = reverse('api:v1:course-enrollments', kwargs={'pk': self.course.id})

    @ddt.data(UserRole.USER, UserRole.SALES_MANAGER, UserRole.SALES_PERSON)
    def test_non_admin_forbidden(self, role):
        self.login_as(role)

        response = self.client.post(self.url, {'user_id': self.learner.id})

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(CourseEnrollment.objects.exists())

    def test_enroll_grants_playable_videos(self):
        admin = self.login_as(UserRole.ADMIN)
        first = VideoFactory(course=self.course, order=1)
        second = VideoFactory(course=self.course, order=2)
        VideoFactory(course=self.course, published=False)
        VideoFactory()

        response = self.client.post(self.url, {'user_id': self.learner.id})

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertEqual(body['user_id'], self.learner.id)
        self.assertEqual(body['course_id'], self.course.id)
        self.assertEqual(body['video_grants'], {
            'created': [first.id, second.id],
            'existing': [],
            'errored': [],
        })
        grants = VideoAccess.objects.filter(user=self.learner).order_by('asset_id')
        self.assertEqual([grant.asset_id for grant in grants], [first.id, second.id])
        self.assertTrue(all(grant.granted_by_id == admin.id for grant in grants))

    def test_existing_grants_left_untouched(self):
        self.login_as(UserRole.ADMIN)
        video = VideoFactory(course=self.course)
        revoked = VideoAccessFactory(user=self.learner, asset=video, state=AccessStates.REVOKED)

        response = self.client.post(self.url, {'user_id': self.learner.id})

        self.assertEqual(response.json()['video_grants']['existing'], [video.id])
        revoked.refresh_from_db()
        self.assertEqual(revoked.state, AccessStates.REVOKED)

    def test_enrollment_survives_failed_video_grant(self):
        self.login_as(UserRole.ADMIN)
        failing = VideoFactory(course=self.course, order=1)
        succeeding = VideoFactory(course=self.course, order=2)
        original_ensure = DjangoGrantStore.ensure_direct_grant

        def ensure_or_fail(store, user_id, asset_kind, asset_id, granted_by_id=None):
            if asset_id == failing.id:
                raise IntegrityError('boom')
            return original_ensure(store, user_id, asset_kind, asset_id, granted_by_id=granted_by_id)

        with mock.patch.object(DjangoGrantStore, 'ensure_direct_grant', ensure_or_fail):
            response = self.client.post(self.url, {'user_id': self.learner.id})

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.json()['video_grants'], {
            'created': [succeeding.id],
            'existing': [],
            'errored': [{'id': failing.id, 'error': 'boom'}],
        })
        self.assertTrue(CourseEnrollment.objects.filter(user=self.learner, course=self.course).exists())

    def test_duplicate_enrollment(self):
        self.login_as(UserRole.ADMIN)
        CourseEnrollmentFactory(user=self.learner, course=self.course)

        response = self.client.post(self.url, {'user_id': self.learner.id})

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(CourseEnrollment.objects.count(), 1)

    def test_unknown_course(self):
        self.login_as(UserRole.ADMIN)

        response = self.client.post(
            reverse('api:v1:course-enrollments', kwargs={'pk': 987654}),
            {'user_id': self.learner.id},
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_unknown_user(self):
        self.login_as(UserRole.ADMIN)

        response = self.client.post(self.url, {'user_id': 987654})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
