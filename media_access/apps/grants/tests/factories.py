"""
Factoryboy factories for grants models.
"""
import factory

from media_access.apps.catalog.tests.factories import AudioFactory, CourseFactory, VideoFactory
from media_access.apps.core.constants import AccessStates
from media_access.apps.core.tests.factories import UserFactory
from media_access.apps.grants.models import AudioAccess, CourseEnrollment, VideoAccess


class CourseEnrollmentFactory(factory.django.DjangoModelFactory):
    """
    Test factory for the ``CourseEnrollment`` model.
    """
    class Meta:
        model = CourseEnrollment

    user = factory.SubFactory(UserFactory)
    course = factory.SubFactory(CourseFactory)


class VideoAccessFactory(factory.django.DjangoModelFactory):
    """
    Test factory for an active ``VideoAccess`` grant.
    """
    class Meta:
        model = VideoAccess

    user = factory.SubFactory(UserFactory)
    asset = factory.SubFactory(VideoFactory)
    state = AccessStates.ACTIVE


class AudioAccessFactory(factory.django.DjangoModelFactory):
    """
    Test factory for an active ``AudioAccess`` grant.
    """
    class Meta:
        model = AudioAccess

    user = factory.SubFactory(UserFactory)
    asset = factory.SubFactory(AudioFactory)
    state = AccessStates.ACTIVE
