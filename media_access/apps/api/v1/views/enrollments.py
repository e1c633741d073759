"""
REST API views for enrolling users in courses.
"""
import logging

from drf_spectacular.utils import extend_schema
from edx_rbac.decorators import permission_required
from edx_rest_framework_extensions.auth.jwt.authentication import JwtAuthentication
from rest_framework import permissions, status, viewsets
from rest_framework.authentication import SessionAuthentication
from rest_framework.decorators import action
from rest_framework.response import Response

from media_access.apps.api import serializers
from media_access.apps.api.mixins import DomainExceptionMixin
from media_access.apps.core.constants import ENROLLMENT_WRITE_PERMISSION
from media_access.apps.entitlements import api as entitlements_api

logger = logging.getLogger(__name__)

ENROLLMENT_API_TAG = 'Enrollments'


class CourseEnrollmentViewSet(DomainExceptionMixin, viewsets.ViewSet):
    """
    Viewset for enrolling users in a course.

    POST /api/v1/courses/{id}/enrollments/
    """
    authentication_classes = (JwtAuthentication, SessionAuthentication)
    permission_classes = (permissions.IsAuthenticated,)
    lookup_value_regex = r'\d+'

    @extend_schema(
        tags=[ENROLLMENT_API_TAG],
        summary='Enroll a user in a course and grant them its videos.',
        request=serializers.UserReferenceRequestSerializer,
        responses={status.HTTP_201_CREATED: serializers.EnrollmentResponseSerializer},
    )
    @action(detail=True, methods=['post'])
    @permission_required(ENROLLMENT_WRITE_PERMISSION)
    def enrollments(self, request, pk=None):
        """
        Creates the enrollment, then a direct grant on each playable video of
        the course.  The per-video outcomes are returned under ``video_grants``;
        failed video grants do not undo the enrollment.
        """
        request_serializer = serializers.UserReferenceRequestSerializer(data=request.data)
        request_serializer.is_valid(raise_exception=True)

        enrollment, result = entitlements_api.enroll_user(
            request_serializer.validated_data['user_id'],
            int(pk),
            granted_by_id=request.user.id,
        )
        response_serializer = serializers.EnrollmentResponseSerializer({
            'id': enrollment.id,
            'user_id': enrollment.user_id,
            'course_id': enrollment.course_id,
            'created': enrollment.created,
            'video_grants': result,
        })
        return Response(response_serializer.data, status=status.HTTP_201_CREATED)
