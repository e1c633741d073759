""" App config for entitlements """

from django.apps import AppConfig


class EntitlementsConfig(AppConfig):
    """
    App config for entitlement resolution and grant workflows.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'media_access.apps.entitlements'
