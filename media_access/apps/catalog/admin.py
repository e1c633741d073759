""" Admin configuration for catalog models. """

from django.contrib import admin
from djangoql.admin import DjangoQLSearchMixin

from media_access.apps.catalog import models


@admin.register(models.Course)
class CourseAdmin(DjangoQLSearchMixin, admin.ModelAdmin):
    list_display = ('id', 'title', 'published', 'modified')
    list_filter = ('published',)
    search_fields = ('title',)


class MediaAssetAdmin(DjangoQLSearchMixin, admin.ModelAdmin):
    """
    Shared admin configuration for videos and audios.
    """
    list_display = ('id', 'title', 'course', 'order', 'published', 'modified')
    list_filter = ('published',)
    search_fields = ('title', 'course__title')
    ordering = ['course', 'order']
    readonly_fields = ('created', 'modified')


admin.site.register(models.Video, MediaAssetAdmin)
admin.site.register(models.Audio, MediaAssetAdmin)
