"""
Top-level views module for convenience of maintaining existing imports.
"""
from .enrollments import CourseEnrollmentViewSet
from .media_assets import AudioViewSet, VideoViewSet
from .sales_teams import SalesTeamViewSet
from .workshops import WorkshopViewSet
