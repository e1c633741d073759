""" API v1 URLs. """

from rest_framework.routers import DefaultRouter

from media_access.apps.api.v1 import views

app_name = 'v1'

router = DefaultRouter()

router.register('videos', views.VideoViewSet, 'video')
router.register('audios', views.AudioViewSet, 'audio')
router.register('courses', views.CourseEnrollmentViewSet, 'course')
router.register('sales-teams', views.SalesTeamViewSet, 'sales-team')
router.register('workshops', views.WorkshopViewSet, 'workshop')

urlpatterns = router.urls
