"""
Tests for the video and audio views.
"""
import tempfile
from pathlib import Path

import ddt
from django.test import override_settings
from rest_framework import status
from rest_framework.reverse import reverse

from media_access.apps.catalog.tests.factories import AudioFactory, CourseFactory, VideoFactory
from media_access.apps.core.constants import AccessStates, UserRole
from media_access.apps.core.tests.factories import UserFactory
from media_access.apps.entitlements.constants import AccessType
from media_access.apps.grants.models import AudioAccess, VideoAccess
from media_access.apps.grants.tests.factories import (
    AudioAccessFactory,
    CourseEnrollmentFactory,
    VideoAccessFactory
)
from test_utils import APITest

MY_VIDEOS_ENDPOINT = reverse('api:v1:video-my-videos')
MY_AUDIOS_ENDPOINT = reverse('api:v1:audio-my-audios')

MEDIA_CONTENT = bytes(range(256)) * 4


class MediaFilesMixin:
    """
    Points the uploads root at a temporary directory for the duration of a test.
    """

    def setUp(self):
        super().setUp()
        tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(tmp_dir.cleanup)
        self.uploads_root = Path(tmp_dir.name)

        uploads_override = override_settings(MEDIA_UPLOADS_ROOT=tmp_dir.name)
        uploads_override.enable()
        self.addCleanup(uploads_override.disable)

    def write_media_file(self, asset, content=MEDIA_CONTENT):
        path = self.uploads_root / asset.media_file
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path


@ddt.ddt
class MyMediaViewTests(APITest):
    """
    Tests for the ``my-videos`` and ``my-audios`` listings.
    """

    def setUp(self):
        super().setUp()
        self.course = CourseFactory()

    def test_unauthenticated(self):
        self.client.logout()
        response = self.client.get(MY_VIDEOS_ENDPOINT)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_no_entitlements(self):
        VideoFactory(course=self.course)
        response = self.client.get(MY_VIDEOS_ENDPOINT)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), [])

    def test_enrollment_lists_playable_videos_in_order(self):
        CourseEnrollmentFactory(user=self.user, course=self.course)
        second = VideoFactory(course=self.course, order=2)
        first = VideoFactory(course=self.course, order=1)
        VideoFactory(course=self.course, order=0, published=False)

        response = self.client.get(MY_VIDEOS_ENDPOINT)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [(item['id'], item['access_type']) for item in response.json()],
            [(first.id, AccessType.ENROLLMENT), (second.id, AccessType.ENROLLMENT)],
        )

    def test_direct_grant_wins_over_enrollment(self):
        CourseEnrollmentFactory(user=self.user, course=self.course)
        video = VideoFactory(course=self.course)
        VideoAccessFactory(user=self.user, asset=video)

        response = self.client.get(MY_VIDEOS_ENDPOINT)

        self.assertEqual(
            [(item['id'], item['access_type']) for item in response.json()],
            [(video.id, AccessType.DIRECT)],
        )

    def test_direct_grant_outside_enrollments(self):
        video = VideoFactory()
        VideoAccessFactory(user=self.user, asset=video)
        VideoAccessFactory(user=self.user, asset=VideoFactory(), state=AccessStates.REVOKED)

        response = self.client.get(MY_VIDEOS_ENDPOINT)

        items = response.json()
        self.assertEqual([item['id'] for item in items], [video.id])
        self.assertEqual(items[0]['access_type'], AccessType.DIRECT)
        self.assertEqual(items[0]['title'], video.title)
        self.assertEqual(items[0]['course'], video.course_id)

    def test_my_audios(self):
        CourseEnrollmentFactory(user=self.user, course=self.course)
        audio = AudioFactory(course=self.course)
        VideoFactory(course=self.course)

        response = self.client.get(MY_AUDIOS_ENDPOINT)

        self.assertEqual(
            [(item['id'], item['access_type']) for item in response.json()],
            [(audio.id, AccessType.ENROLLMENT)],
        )

    @ddt.data(*UserRole.values)
    def test_every_role_can_list(self, role):
        self.login_as(role)
        response = self.client.get(MY_VIDEOS_ENDPOINT)
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_jwt_authentication(self):
        CourseEnrollmentFactory(user=self.user, course=self.course)
        video = VideoFactory(course=self.course)
        self.set_jwt_header()

        response = self.client.get(MY_VIDEOS_ENDPOINT)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item['id'] for item in response.json()], [video.id])


class StreamUrlViewTests(APITest):
    """
    Tests for the ``stream-url`` actions.
    """

    def test_no_access(self):
        video = VideoFactory()
        response = self.client.get(reverse('api:v1:video-stream-url', kwargs={'pk': video.id}))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json(), {'detail': 'You do not have access to this content'})

    def test_not_found(self):
        response = self.client.get(reverse('api:v1:video-stream-url', kwargs={'pk': 987654}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_not_published(self):
        video = VideoFactory(published=False)
        VideoAccessFactory(user=self.user, asset=video)

        response = self.client.get(reverse('api:v1:video-stream-url', kwargs={'pk': video.id}))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('not published', response.json()['detail'])

    def test_course_not_published(self):
        course = CourseFactory(published=False)
        audio = AudioFactory(course=course)
        CourseEnrollmentFactory(user=self.user, course=course)

        response = self.client.get(reverse('api:v1:audio-stream-url', kwargs={'pk': audio.id}))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_video_stream_url(self):
        video = VideoFactory()
        VideoAccessFactory(user=self.user, asset=video)

        response = self.client.get(reverse('api:v1:video-stream-url', kwargs={'pk': video.id}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertTrue(body['stream_url'].startswith('http'))
        self.assertTrue(body['stream_url'].endswith(f'/api/v1/videos/{video.id}/stream/'))
        self.assertEqual(body['video']['id'], video.id)

    def test_audio_stream_url(self):
        audio = AudioFactory()
        CourseEnrollmentFactory(user=self.user, course=audio.course)

        response = self.client.get(reverse('api:v1:audio-stream-url', kwargs={'pk': audio.id}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertTrue(body['stream_url'].endswith(f'/api/v1/audios/{audio.id}/stream/'))
        self.assertEqual(body['audio']['id'], audio.id)


@ddt.ddt
class StreamViewTests(MediaFilesMixin, APITest):
    """
    Tests for the ``stream`` actions.
    """

    def setUp(self):
        super().setUp()
        self.video = VideoFactory()
        self.audio = AudioFactory(course=self.video.course)
        CourseEnrollmentFactory(user=self.user, course=self.video.course)
        self.write_media_file(self.video)
        self.write_media_file(self.audio)

    def _stream(self, asset_kind, asset_id, **headers):
        response = self.client.get(reverse(f'api:v1:{asset_kind}-stream', kwargs={'pk': asset_id}), **headers)
        self.addCleanup(response.close)
        return response

    @ddt.data(
        # header, first byte, last byte
        ('bytes=0-99', 0, 99),
        ('bytes=100-', 100, 1023),
        ('bytes=1000-5000', 1000, 1023),
        ('bytes=1023-1023', 1023, 1023),
        ('bytes=10-20, 30-40', 10, 20),
    )
    @ddt.unpack
    def test_video_range(self, header, first, last):
        response = self._stream('video', self.video.id, HTTP_RANGE=header)

        self.assertEqual(response.status_code, status.HTTP_206_PARTIAL_CONTENT)
        self.assertEqual(response['Content-Range'], f'bytes {first}-{last}/1024')
        self.assertEqual(response['Accept-Ranges'], 'bytes')
        self.assertEqual(response['Content-Length'], str(last - first + 1))
        self.assertEqual(response['Content-Type'], 'video/mp4')
        self.assertEqual(b''.join(response.streaming_content), MEDIA_CONTENT[first:last + 1])

    @ddt.data('video', 'audio')
    def test_no_range_header_gets_whole_file(self, asset_kind):
        asset_id = self.video.id if asset_kind == 'video' else self.audio.id

        response = self._stream(asset_kind, asset_id)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response['Content-Length'], '1024')
        self.assertNotIn('Content-Range', response)
        self.assertEqual(b''.join(response.streaming_content), MEDIA_CONTENT)

    def test_audio_range(self):
        response = self._stream('audio', self.audio.id, HTTP_RANGE='bytes=512-')

        self.assertEqual(response.status_code, status.HTTP_206_PARTIAL_CONTENT)
        self.assertEqual(response['Content-Type'], 'audio/mpeg')
        self.assertEqual(response['Content-Range'], 'bytes 512-1023/1024')
        self.assertEqual(b''.join(response.streaming_content), MEDIA_CONTENT[512:])

    @ddt.data('bytes=1024-', 'bytes=2000-3000', 'bytes=50-10', 'bytes=-100', 'items=0-10', 'bytes=\xb2-')
    def test_unsatisfiable_range(self, header):
        response = self._stream('video', self.video.id, HTTP_RANGE=header)

        self.assertEqual(response.status_code, status.HTTP_416_REQUESTED_RANGE_NOT_SATISFIABLE)
        self.assertEqual(response['Content-Range'], 'bytes */1024')

    def test_missing_media_file(self):
        video = VideoFactory(course=self.video.course)

        response = self._stream('video', video.id, HTTP_RANGE='bytes=0-10')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_media_file_outside_uploads_root(self):
        video = VideoFactory(course=self.video.course, media_file='../../etc/passwd')

        response = self._stream('video', video.id)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_no_access(self):
        video = VideoFactory()
        self.write_media_file(video)

        response = self._stream('video', video.id, HTTP_RANGE='bytes=0-10')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_access_checked_before_publication(self):
        video = VideoFactory(published=False)
        self.write_media_file(video)

        response = self._stream('video', video.id)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_not_published(self):
        video = VideoFactory(course=self.video.course, published=False)
        self.write_media_file(video)

        response = self._stream('video', video.id)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_revoked_direct_grant_denies_playback(self):
        video = VideoFactory()
        self.write_media_file(video)
        VideoAccessFactory(user=self.user, asset=video, state=AccessStates.REVOKED)

        response = self._stream('video', video.id)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


@ddt.ddt
class MediaAccessViewTests(APITest):
    """
    Tests for granting and revoking direct access through the ``access`` actions.
    """

    def setUp(self):
        super().setUp()
        self.learner = UserFactory()
        self.video = VideoFactory()
        self.audio = AudioFactory()

    def _access_url(self, asset_kind, asset_id):
        return reverse(f'api:v1:{asset_kind}-access', kwargs={'pk': asset_id})

    @ddt.data(UserRole.USER, UserRole.SALES_MANAGER, UserRole.SALES_PERSON)
    def test_non_admin_forbidden(self, role):
        self.login_as(role)

        response = self.client.post(self._access_url('video', self.video.id), {'user_id': self.learner.id})

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(VideoAccess.objects.exists())

    def test_grant_and_revoke_video(self):
        admin = self.login_as(UserRole.ADMIN)
        url = self._access_url('video', self.video.id)

        response = self.client.post(url, {'user_id': self.learner.id})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['state'], AccessStates.ACTIVE)
        self.assertEqual(response.json()['granted_by_id'], admin.id)

        response = self.client.delete(url, {'user_id': self.learner.id})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.json()['revoked'])
        self.assertEqual(response.json()['grant']['state'], AccessStates.REVOKED)
        self.assertEqual(VideoAccess.objects.get().state, AccessStates.REVOKED)

    def test_revoke_without_grant_is_noop(self):
        self.login_as(UserRole.ADMIN)

        response = self.client.delete(self._access_url('video', self.video.id), {'user_id': self.learner.id})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {'revoked': False, 'grant': None})

    def test_regrant_reuses_row(self):
        self.login_as(UserRole.ADMIN)
        grant = VideoAccessFactory(user=self.learner, asset=self.video, state=AccessStates.REVOKED)

        response = self.client.post(self._access_url('video', self.video.id), {'user_id': self.learner.id})

        self.assertEqual(response.json()['id'], grant.id)
        self.assertEqual(VideoAccess.objects.count(), 1)
        self.assertEqual(VideoAccess.objects.get().state, AccessStates.ACTIVE)

    def test_grant_audio_requires_enrollment(self):
        self.login_as(UserRole.ADMIN)

        response = self.client.post(self._access_url('audio', self.audio.id), {'user_id': self.learner.id})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json(), {'detail': 'User is not enrolled in this course'})
        self.assertFalse(AudioAccess.objects.exists())

    def test_grant_audio_to_enrolled_user(self):
        self.login_as(UserRole.ADMIN)
        CourseEnrollmentFactory(user=self.learner, course=self.audio.course)

        response = self.client.post(self._access_url('audio', self.audio.id), {'user_id': self.learner.id})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(AudioAccess.objects.get(user=self.learner, asset=self.audio).is_active)

    def test_revoke_audio_keeps_enrollment_access(self):
        self.login_as(UserRole.ADMIN)
        CourseEnrollmentFactory(user=self.learner, course=self.audio.course)
        AudioAccessFactory(user=self.learner, asset=self.audio)

        response = self.client.delete(self._access_url('audio', self.audio.id), {'user_id': self.learner.id})

        self.assertTrue(response.json()['revoked'])
        self.client.logout()
        self.client.force_authenticate(user=self.learner)
        response = self.client.get(MY_AUDIOS_ENDPOINT)
        self.assertEqual(
            [(item['id'], item['access_type']) for item in response.json()],
            [(self.audio.id, AccessType.ENROLLMENT)],
        )

    def test_unknown_asset(self):
        self.login_as(UserRole.ADMIN)

        response = self.client.post(self._access_url('video', 987654), {'user_id': self.learner.id})

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    @ddt.data({}, {'user_id': 'abc'}, {'user_id': 987654})
    def test_invalid_user(self, payload):
        self.login_as(UserRole.ADMIN)

        response = self.client.post(self._access_url('video', self.video.id), payload)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('user_id', response.json())
