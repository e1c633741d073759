""" App config for streaming """

from django.apps import AppConfig


class StreamingConfig(AppConfig):
    """
    App config for byte-range media streaming.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'media_access.apps.streaming'
