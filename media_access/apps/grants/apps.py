""" App config for grants """

from django.apps import AppConfig


class GrantsConfig(AppConfig):
    """
    App config for course enrollments and direct media access grants.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'media_access.apps.grants'
