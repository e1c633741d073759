"""
media_access URL Configuration.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""

import os

from django.conf import settings
from django.contrib import admin
from django.urls import include, path, re_path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

from media_access.apps.api import urls as api_urls
from media_access.apps.core import views as core_views

admin.autodiscover()

spec_swagger_view = SpectacularSwaggerView()

spec_redoc_view = SpectacularRedocView(
    title='Redoc view for the media-access API.',
    url_name='schema',
)

urlpatterns = [
    re_path(r'^admin/', admin.site.urls),
    path('api/', include(api_urls)),
    re_path(r'^api-docs/', spec_swagger_view.as_view(url_name='schema'), name='swagger-ui'),
    path('health/', core_views.health, name='health'),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/schema/redoc/', spec_redoc_view.as_view(url_name='schema'), name='redoc'),
]

if settings.DEBUG and os.environ.get('ENABLE_DJANGO_TOOLBAR', False):  # pragma: no cover
    # Disable pylint import error because we don't install django-debug-toolbar
    # for CI build
    import debug_toolbar
    urlpatterns.append(path('__debug__/', include(debug_toolbar.urls)))
