"""
Serializers for sales teams and workshop access.
"""
from rest_framework import serializers

from media_access.apps.sales_hierarchy.models import (
    SalesPersonWorkshopAccess,
    SalesTeam,
    SalesTeamMember,
    Workshop
)

from .base import BaseSerializer, UserSummarySerializer


class SalesTeamMemberSerializer(serializers.ModelSerializer):
    sales_person = UserSummarySerializer(read_only=True)

    class Meta:
        model = SalesTeamMember
        fields = ['id', 'team', 'sales_person', 'state', 'revoked_at', 'created']
        read_only_fields = fields


class SalesTeamSerializer(serializers.ModelSerializer):
    """
    A sales team with its manager and its active members.
    """
    manager = UserSummarySerializer(read_only=True)
    members = serializers.SerializerMethodField()

    class Meta:
        model = SalesTeam
        fields = ['id', 'name', 'description', 'manager', 'is_active', 'members', 'created', 'modified']
        read_only_fields = fields

    def get_members(self, obj):
        active_members = [member for member in obj.members.all() if member.is_active]
        return SalesTeamMemberSerializer(active_members, many=True).data


class WorkshopSerializer(serializers.ModelSerializer):
    creator = UserSummarySerializer(read_only=True)

    class Meta:
        model = Workshop
        fields = ['id', 'title', 'description', 'creator', 'scheduled_at', 'is_active', 'created']
        read_only_fields = fields


class SalesPersonWorkshopAccessSerializer(serializers.ModelSerializer):
    sales_person = UserSummarySerializer(read_only=True)
    granted_by = UserSummarySerializer(read_only=True)

    class Meta:
        model = SalesPersonWorkshopAccess
        fields = ['id', 'workshop', 'sales_person', 'state', 'granted_by', 'revoked_at', 'created', 'modified']
        read_only_fields = fields


## All the REQUEST serializers go under here ##


class SalesTeamCreateRequestSerializer(BaseSerializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    manager_id = serializers.IntegerField(
        help_text='The id of the active sales manager leading the team.',
    )
    sales_person_ids = serializers.ListField(
        child=serializers.IntegerField(),
        required=False,
        default=list,
        help_text='Ids of active sales persons to add to the team.',
    )


class SalesPersonReferenceRequestSerializer(BaseSerializer):
    sales_person_id = serializers.IntegerField(
        help_text='The id of the sales person.',
    )


class SalesTeamUpdateRequestSerializer(BaseSerializer):
    """
    Fields of a sales team that can be changed.  Omitted fields are left as they are.
    """
    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    manager_id = serializers.IntegerField(
        required=False,
        help_text='The id of the active sales manager who should lead the team.',
    )
    is_active = serializers.BooleanField(required=False)
