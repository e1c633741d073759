"""
API serializers module.
"""
from .base import UserSummarySerializer
from .media_assets import (
    AccessibleAssetResponseSerializer,
    AudioSerializer,
    BatchOperationResultSerializer,
    DirectGrantResponseSerializer,
    EnrollmentResponseSerializer,
    RevokeDirectGrantResponseSerializer,
    StreamUrlResponseSerializer,
    UserReferenceRequestSerializer,
    VideoSerializer
)
from .sales_hierarchy import (
    SalesPersonReferenceRequestSerializer,
    SalesPersonWorkshopAccessSerializer,
    SalesTeamCreateRequestSerializer,
    SalesTeamMemberSerializer,
    SalesTeamSerializer,
    SalesTeamUpdateRequestSerializer,
    WorkshopSerializer
)
