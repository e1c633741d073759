""" App config for sales_hierarchy """

from django.apps import AppConfig


class SalesHierarchyConfig(AppConfig):
    """
    App config for sales teams and sales person workshop access.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'media_access.apps.sales_hierarchy'
