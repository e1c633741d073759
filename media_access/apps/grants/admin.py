""" Admin configuration for grants models. """

from django.contrib import admin
from djangoql.admin import DjangoQLSearchMixin
from simple_history.admin import SimpleHistoryAdmin

from media_access.apps.grants import models


@admin.register(models.CourseEnrollment)
class CourseEnrollmentAdmin(DjangoQLSearchMixin, SimpleHistoryAdmin):
    list_display = ('id', 'user', 'course', 'created')
    search_fields = ('user__email', 'user__username', 'course__title')
    autocomplete_fields = ('user', 'course')


class DirectAccessGrantAdmin(DjangoQLSearchMixin, SimpleHistoryAdmin):
    """
    Shared admin configuration for direct video and audio grants.
    """
    list_display = ('id', 'user', 'asset', 'state', 'granted_by', 'revoked_at', 'modified')
    list_filter = ('state',)
    search_fields = ('user__email', 'user__username', 'asset__title')
    readonly_fields = ('created', 'modified', 'revoked_at')
    raw_id_fields = ('user', 'asset', 'granted_by')


admin.site.register(models.VideoAccess, DirectAccessGrantAdmin)
admin.site.register(models.AudioAccess, DirectAccessGrantAdmin)
