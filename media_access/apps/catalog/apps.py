""" App config for catalog """

from django.apps import AppConfig


class CatalogConfig(AppConfig):
    """
    App config for the read-only course and media asset catalog.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'media_access.apps.catalog'
