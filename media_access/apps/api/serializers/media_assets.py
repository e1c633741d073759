"""
Serializers for videos, audios, direct grants and enrollments.
"""
from django.contrib.auth import get_user_model
from rest_framework import serializers

from media_access.apps.catalog.models import Audio, Video
from media_access.apps.core.constants import AccessStates

from .base import BaseSerializer

User = get_user_model()

ASSET_FIELDS = [
    'id',
    'course',
    'title',
    'description',
    'thumbnail',
    'duration',
    'order',
    'published',
    'created',
    'modified',
]


class VideoSerializer(serializers.ModelSerializer):
    class Meta:
        model = Video
        fields = ASSET_FIELDS
        read_only_fields = fields


class AudioSerializer(serializers.ModelSerializer):
    class Meta:
        model = Audio
        fields = ASSET_FIELDS
        read_only_fields = fields


## All the REQUEST serializers go under here ##


class UserReferenceRequestSerializer(BaseSerializer):
    """
    Request serializer naming the user a grant or enrollment applies to.
    """
    user_id = serializers.IntegerField(
        help_text='The id of the user.',
    )

    def validate_user_id(self, value):
        if not User.objects.filter(pk=value).exists():
            raise serializers.ValidationError(f'User {value} does not exist.')
        return value


## All the RESPONSE serializers go under here ##


class AccessibleAssetResponseSerializer(BaseSerializer):
    """
    An asset the requesting user can play, with the ``access_type`` that reaches it.
    Pass the asset serializer class as ``asset_serializer_class``.
    """
    def __init__(self, *args, asset_serializer_class=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.asset_serializer_class = asset_serializer_class

    def to_representation(self, instance):
        data = self.asset_serializer_class(instance.asset).data
        data['access_type'] = instance.access_type
        return data


class StreamUrlResponseSerializer(BaseSerializer):
    """
    The stream URL of an asset.  The asset itself is returned next to it,
    under its kind (``video`` or ``audio``).
    """
    stream_url = serializers.URLField(
        help_text='Absolute URL that streams the asset, honouring Range headers.',
    )


class DirectGrantResponseSerializer(BaseSerializer):
    """
    A direct video or audio grant.
    """
    id = serializers.IntegerField()
    user_id = serializers.IntegerField()
    asset_id = serializers.IntegerField()
    state = serializers.ChoiceField(choices=AccessStates.CHOICES)
    granted_by_id = serializers.IntegerField(allow_null=True)
    revoked_at = serializers.DateTimeField(allow_null=True)
    created = serializers.DateTimeField()
    modified = serializers.DateTimeField()


class RevokeDirectGrantResponseSerializer(BaseSerializer):
    revoked = serializers.BooleanField(
        help_text='False when there was no active grant to revoke.',
    )
    grant = DirectGrantResponseSerializer(allow_null=True)


class BatchOperationErrorSerializer(BaseSerializer):
    id = serializers.IntegerField()
    error = serializers.CharField()


class BatchOperationResultSerializer(BaseSerializer):
    """
    Per-item outcomes of the video grants created alongside an enrollment.
    """
    created = serializers.ListField(child=serializers.IntegerField())
    existing = serializers.ListField(child=serializers.IntegerField())
    errored = BatchOperationErrorSerializer(many=True)

    def to_representation(self, instance):
        return instance.to_dict()


class EnrollmentResponseSerializer(BaseSerializer):
    id = serializers.IntegerField()
    user_id = serializers.IntegerField()
    course_id = serializers.IntegerField()
    created = serializers.DateTimeField()
    video_grants = BatchOperationResultSerializer()
