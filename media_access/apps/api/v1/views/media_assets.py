"""
REST API views for listing, streaming and granting access to videos and audios.
"""
import logging

from django.conf import settings
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from edx_rbac.decorators import permission_required
from edx_rest_framework_extensions.auth.jwt.authentication import JwtAuthentication
from rest_framework import permissions, status, viewsets
from rest_framework.authentication import SessionAuthentication
from rest_framework.decorators import action
from rest_framework.response import Response

from media_access.apps.api import serializers
from media_access.apps.api.mixins import DomainExceptionMixin
from media_access.apps.catalog.constants import AssetKind
from media_access.apps.core.constants import MEDIA_GRANT_WRITE_PERMISSION, MEDIA_PLAYBACK_PERMISSION
from media_access.apps.entitlements import api as entitlements_api
from media_access.apps.streaming.ranges import parse_range
from media_access.apps.streaming.responder import media_file_size, respond

logger = logging.getLogger(__name__)

VIDEO_API_TAG = 'Videos'
AUDIO_API_TAG = 'Audios'


class MediaAssetViewSet(DomainExceptionMixin, viewsets.ViewSet):
    """
    Base viewset for one kind of media asset.  Subclasses set ``asset_kind``,
    ``asset_serializer_class`` and ``content_type_setting``, and route their
    own listing action to ``list_accessible``.
    """
    authentication_classes = (JwtAuthentication, SessionAuthentication)
    permission_classes = (permissions.IsAuthenticated,)
    lookup_value_regex = r'\d+'

    asset_kind = None
    asset_serializer_class = None
    content_type_setting = None

    def get_resolver(self):
        return entitlements_api.get_entitlement_resolver()

    def list_accessible(self, request):
        """
        Every playable asset the requesting user can reach, tagged with how they reach it.
        """
        accessible = self.get_resolver().accessible_assets(request.user.id, self.asset_kind)
        serializer = serializers.AccessibleAssetResponseSerializer(
            accessible,
            many=True,
            asset_serializer_class=self.asset_serializer_class,
        )
        return Response(serializer.data)

    @extend_schema(
        summary='Get the URL the requesting user can stream this asset from.',
        responses={status.HTTP_200_OK: serializers.StreamUrlResponseSerializer},
    )
    @action(detail=True, methods=['get'], url_path='stream-url')
    @permission_required(MEDIA_PLAYBACK_PERMISSION)
    def stream_url(self, request, pk=None):
        asset = self.get_resolver().authorize_playback(request.user.id, self.asset_kind, int(pk))
        return Response({
            'stream_url': self.reverse_action('stream', kwargs={'pk': asset.id}),
            self.asset_kind: self.asset_serializer_class(asset).data,
        })

    @extend_schema(
        summary='Stream the media file of this asset.',
        parameters=[
            OpenApiParameter('Range', OpenApiTypes.STR, OpenApiParameter.HEADER, required=False),
        ],
        responses={
            status.HTTP_200_OK: OpenApiTypes.BINARY,
            status.HTTP_206_PARTIAL_CONTENT: OpenApiTypes.BINARY,
        },
    )
    @action(detail=True, methods=['get'])
    @permission_required(MEDIA_PLAYBACK_PERMISSION)
    def stream(self, request, pk=None):
        """
        A request with a ``Range`` header gets a 206 carrying just the requested
        bytes; any other request gets the whole file.
        """
        resolver = self.get_resolver()
        asset = resolver.authorize_playback(request.user.id, self.asset_kind, int(pk))
        asset_path = resolver.asset_catalog.asset_file_path(asset)

        range_header = request.META.get('HTTP_RANGE')
        span = parse_range(range_header, media_file_size(asset_path))
        return respond(
            asset_path,
            span,
            has_range_header=bool(range_header and range_header.strip()),
            mime_type=getattr(settings, self.content_type_setting),
        )

    @extend_schema(
        summary='Grant (POST) or revoke (DELETE) direct access to this asset.',
        request=serializers.UserReferenceRequestSerializer,
        responses={status.HTTP_200_OK: serializers.DirectGrantResponseSerializer},
    )
    @action(detail=True, methods=['post', 'delete'])
    @permission_required(MEDIA_GRANT_WRITE_PERMISSION)
    def access(self, request, pk=None):
        request_serializer = serializers.UserReferenceRequestSerializer(data=request.data)
        request_serializer.is_valid(raise_exception=True)
        user_id = request_serializer.validated_data['user_id']

        if request.method == 'DELETE':
            grant = entitlements_api.revoke_direct_access(user_id, self.asset_kind, int(pk))
            response_serializer = serializers.RevokeDirectGrantResponseSerializer({
                'revoked': grant is not None,
                'grant': grant,
            })
            return Response(response_serializer.data)

        grant, _ = entitlements_api.grant_direct_access(
            user_id, self.asset_kind, int(pk), granted_by_id=request.user.id,
        )
        return Response(serializers.DirectGrantResponseSerializer(grant).data)


@extend_schema(tags=[VIDEO_API_TAG])
class VideoViewSet(MediaAssetViewSet):
    """
    Viewset for videos.

    GET /api/v1/videos/my-videos/
    GET /api/v1/videos/{id}/stream-url/
    GET /api/v1/videos/{id}/stream/
    POST|DELETE /api/v1/videos/{id}/access/
    """
    asset_kind = AssetKind.VIDEO
    asset_serializer_class = serializers.VideoSerializer
    content_type_setting = 'VIDEO_STREAM_CONTENT_TYPE'

    @extend_schema(
        summary='List the videos the requesting user can watch.',
        responses={status.HTTP_200_OK: serializers.AccessibleAssetResponseSerializer(many=True)},
    )
    @action(detail=False, methods=['get'], url_path='my-videos')
    @permission_required(MEDIA_PLAYBACK_PERMISSION)
    def my_videos(self, request):
        return self.list_accessible(request)


@extend_schema(tags=[AUDIO_API_TAG])
class AudioViewSet(MediaAssetViewSet):
    """
    Viewset for audios.  Audio can only be granted to users enrolled in its course.

    GET /api/v1/audios/my-audios/
    GET /api/v1/audios/{id}/stream-url/
    GET /api/v1/audios/{id}/stream/
    POST|DELETE /api/v1/audios/{id}/access/
    """
    asset_kind = AssetKind.AUDIO
    asset_serializer_class = serializers.AudioSerializer
    content_type_setting = 'AUDIO_STREAM_CONTENT_TYPE'

    @extend_schema(
        summary='List the audios the requesting user can listen to.',
        responses={status.HTTP_200_OK: serializers.AccessibleAssetResponseSerializer(many=True)},
    )
    @action(detail=False, methods=['get'], url_path='my-audios')
    @permission_required(MEDIA_PLAYBACK_PERMISSION)
    def my_audios(self, request):
        return self.list_accessible(request)
