"""
REST API views for sales person access to workshops.
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
from media_access.apps.core.constants import (
    WORKSHOP_ACCESS_READ_PERMISSION,
    WORKSHOP_ACCESS_WRITE_PERMISSION,
    WORKSHOP_ACCESSIBLE_LIST_PERMISSION,
    WORKSHOP_MANAGER_LIST_PERMISSION
)
from media_access.apps.sales_hierarchy.api import get_sales_hierarchy_manager

logger = logging.getLogger(__name__)

WORKSHOP_API_TAG = 'Workshops'


@extend_schema(tags=[WORKSHOP_API_TAG])
class WorkshopViewSet(DomainExceptionMixin, viewsets.ViewSet):
    """
    Viewset for granting sales persons access to workshops.

    GET|POST /api/v1/workshops/{id}/sales-person-access/
    DELETE /api/v1/workshops/{id}/sales-person-access/{sales_person_id}/
    GET /api/v1/workshops/sales-person/accessible/
    GET /api/v1/workshops/sales-manager/my-workshops/
    """
    authentication_classes = (JwtAuthentication, SessionAuthentication)
    permission_classes = (permissions.IsAuthenticated,)
    lookup_value_regex = r'\d+'

    @property
    def manager(self):
        return get_sales_hierarchy_manager()

    @extend_schema(
        summary='List (GET) or grant (POST) sales person access to a workshop.',
        request=serializers.SalesPersonReferenceRequestSerializer,
        responses={
            status.HTTP_200_OK: serializers.SalesPersonWorkshopAccessSerializer(many=True),
            status.HTTP_201_CREATED: serializers.SalesPersonWorkshopAccessSerializer,
        },
    )
    @action(detail=True, methods=['get', 'post'], url_path='sales-person-access')
    def sales_person_access(self, request, pk=None):
        if request.method == 'POST':
            return self._grant_sales_person_access(request, int(pk))
        return self._list_sales_person_access(request, int(pk))

    @permission_required(WORKSHOP_ACCESS_READ_PERMISSION)
    def _list_sales_person_access(self, request, workshop_id):
        """
        Every grant on the workshop, revoked ones included, newest first.
        """
        access_list = self.manager.workshop_access_list(workshop_id)
        return Response(serializers.SalesPersonWorkshopAccessSerializer(access_list, many=True).data)

    @permission_required(WORKSHOP_ACCESS_WRITE_PERMISSION)
    def _grant_sales_person_access(self, request, workshop_id):
        request_serializer = serializers.SalesPersonReferenceRequestSerializer(data=request.data)
        request_serializer.is_valid(raise_exception=True)

        access, _ = self.manager.grant_workshop_access(
            workshop_id,
            request_serializer.validated_data['sales_person_id'],
            granted_by_id=request.user.id,
        )
        return Response(
            serializers.SalesPersonWorkshopAccessSerializer(access).data,
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        summary="Revoke a sales person's access to a workshop.",
        responses={status.HTTP_200_OK: serializers.SalesPersonWorkshopAccessSerializer},
    )
    @action(
        detail=True,
        methods=['delete'],
        url_path=r'sales-person-access/(?P<sales_person_id>\d+)',
        url_name='sales-person-access-detail',
    )
    @permission_required(WORKSHOP_ACCESS_WRITE_PERMISSION)
    def revoke_sales_person_access(self, request, pk=None, sales_person_id=None):
        access = self.manager.revoke_workshop_access(int(pk), int(sales_person_id))
        return Response(serializers.SalesPersonWorkshopAccessSerializer(access).data)

    @extend_schema(
        summary='List the active workshops the requesting sales person can access.',
        responses={status.HTTP_200_OK: serializers.WorkshopSerializer(many=True)},
    )
    @action(detail=False, methods=['get'], url_path='sales-person/accessible', url_name='sales-person-accessible')
    @permission_required(WORKSHOP_ACCESSIBLE_LIST_PERMISSION)
    def sales_person_accessible(self, request):
        workshops = self.manager.accessible_workshops(request.user.id)
        return Response(serializers.WorkshopSerializer(workshops, many=True).data)

    @extend_schema(
        summary='List the workshops created by the requesting sales manager.',
        responses={status.HTTP_200_OK: serializers.WorkshopSerializer(many=True)},
    )
    @action(detail=False, methods=['get'], url_path='sales-manager/my-workshops', url_name='sales-manager-workshops')
    @permission_required(WORKSHOP_MANAGER_LIST_PERMISSION)
    def sales_manager_workshops(self, request):
        workshops = self.manager.manager_workshops(request.user.id)
        return Response(serializers.WorkshopSerializer(workshops, many=True).data)
