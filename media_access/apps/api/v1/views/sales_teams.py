"""
REST API views for sales teams and their members.
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
from media_access.apps.core.constants import SALES_TEAM_READ_PERMISSION, SALES_TEAM_WRITE_PERMISSION
from media_access.apps.sales_hierarchy.api import get_sales_hierarchy_manager

logger = logging.getLogger(__name__)

SALES_TEAM_API_TAG = 'Sales Teams'


@extend_schema(tags=[SALES_TEAM_API_TAG])
class SalesTeamViewSet(DomainExceptionMixin, viewsets.ViewSet):
    """
    Viewset for sales teams.

    Admins manage teams and their members; sales managers can read them.
    A sales person is an active member of at most one team at a time.
    """
    authentication_classes = (JwtAuthentication, SessionAuthentication)
    permission_classes = (permissions.IsAuthenticated,)
    lookup_value_regex = r'\d+'

    @property
    def manager(self):
        return get_sales_hierarchy_manager()

    @extend_schema(
        summary='List sales teams.',
        responses={status.HTTP_200_OK: serializers.SalesTeamSerializer(many=True)},
    )
    @permission_required(SALES_TEAM_READ_PERMISSION)
    def list(self, request):
        return Response(serializers.SalesTeamSerializer(self.manager.teams(), many=True).data)

    @extend_schema(
        summary='Retrieve a sales team.',
        responses={status.HTTP_200_OK: serializers.SalesTeamSerializer},
    )
    @permission_required(SALES_TEAM_READ_PERMISSION)
    def retrieve(self, request, pk=None):
        return Response(serializers.SalesTeamSerializer(self.manager.get_team(int(pk))).data)

    @extend_schema(
        summary='Create a sales team.',
        request=serializers.SalesTeamCreateRequestSerializer,
        responses={status.HTTP_201_CREATED: serializers.SalesTeamSerializer},
    )
    @permission_required(SALES_TEAM_WRITE_PERMISSION)
    def create(self, request):
        request_serializer = serializers.SalesTeamCreateRequestSerializer(data=request.data)
        request_serializer.is_valid(raise_exception=True)
        validated_data = request_serializer.validated_data

        team = self.manager.create_team(
            validated_data['name'],
            validated_data['manager_id'],
            description=validated_data['description'],
            sales_person_ids=validated_data['sales_person_ids'],
        )
        return Response(serializers.SalesTeamSerializer(team).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary='Update a sales team.',
        request=serializers.SalesTeamUpdateRequestSerializer,
        responses={status.HTTP_200_OK: serializers.SalesTeamSerializer},
    )
    @permission_required(SALES_TEAM_WRITE_PERMISSION)
    def partial_update(self, request, pk=None):
        request_serializer = serializers.SalesTeamUpdateRequestSerializer(data=request.data)
        request_serializer.is_valid(raise_exception=True)

        team = self.manager.update_team(int(pk), **request_serializer.validated_data)
        return Response(serializers.SalesTeamSerializer(team).data)

    @extend_schema(
        summary='Deactivate a sales team.',
        responses={status.HTTP_204_NO_CONTENT: None},
    )
    @permission_required(SALES_TEAM_WRITE_PERMISSION)
    def destroy(self, request, pk=None):
        self.manager.deactivate_team(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        summary='List active sales persons who are not in any team.',
        responses={status.HTTP_200_OK: serializers.UserSummarySerializer(many=True)},
    )
    @action(detail=False, methods=['get'], url_path='available-sales-persons')
    @permission_required(SALES_TEAM_READ_PERMISSION)
    def available_sales_persons(self, request):
        return Response(serializers.UserSummarySerializer(self.manager.available_sales_persons(), many=True).data)

    @extend_schema(
        summary='List active sales managers.',
        responses={status.HTTP_200_OK: serializers.UserSummarySerializer(many=True)},
    )
    @action(detail=False, methods=['get'], url_path='sales-managers')
    @permission_required(SALES_TEAM_READ_PERMISSION)
    def sales_managers(self, request):
        return Response(serializers.UserSummarySerializer(self.manager.sales_managers(), many=True).data)

    @extend_schema(
        summary='Add (POST) or remove (DELETE) a member of a sales team.',
        request=serializers.SalesPersonReferenceRequestSerializer,
        responses={status.HTTP_200_OK: serializers.SalesTeamMemberSerializer},
    )
    @action(detail=True, methods=['post', 'delete'])
    @permission_required(SALES_TEAM_WRITE_PERMISSION)
    def members(self, request, pk=None):
        request_serializer = serializers.SalesPersonReferenceRequestSerializer(data=request.data)
        request_serializer.is_valid(raise_exception=True)
        sales_person_id = request_serializer.validated_data['sales_person_id']

        if request.method == 'DELETE':
            member = self.manager.unassign(int(pk), sales_person_id)
        else:
            member = self.manager.assign(int(pk), sales_person_id)
        return Response(serializers.SalesTeamMemberSerializer(member).data)
