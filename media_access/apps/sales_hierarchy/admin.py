""" Admin configuration for sales_hierarchy models. """

from django.contrib import admin
from djangoql.admin import DjangoQLSearchMixin
from simple_history.admin import SimpleHistoryAdmin

from media_access.apps.sales_hierarchy import models


class SalesTeamMemberInline(admin.TabularInline):
    model = models.SalesTeamMember
    fields = ('sales_person', 'state', 'revoked_at', 'created')
    readonly_fields = ('sales_person', 'state', 'revoked_at', 'created')
    extra = 0
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(models.SalesTeam)
class SalesTeamAdmin(DjangoQLSearchMixin, SimpleHistoryAdmin):
    """
    Memberships are managed through the API so the one-active-team rule is
    checked; the admin only displays them.
    """
    list_display = ('id', 'name', 'manager', 'is_active', 'created')
    list_filter = ('is_active',)
    search_fields = ('name', 'manager__email', 'manager__username')
    raw_id_fields = ('manager',)
    inlines = [SalesTeamMemberInline]


@admin.register(models.SalesTeamMember)
class SalesTeamMemberAdmin(DjangoQLSearchMixin, SimpleHistoryAdmin):
    list_display = ('id', 'team', 'sales_person', 'state', 'revoked_at', 'modified')
    list_filter = ('state',)
    search_fields = ('team__name', 'sales_person__email', 'sales_person__username')
    readonly_fields = ('team', 'sales_person', 'state', 'revoked_at', 'created', 'modified')

    def has_add_permission(self, request):
        return False


@admin.register(models.Workshop)
class WorkshopAdmin(DjangoQLSearchMixin, admin.ModelAdmin):
    list_display = ('id', 'title', 'creator', 'scheduled_at', 'is_active')
    list_filter = ('is_active',)
    search_fields = ('title', 'creator__email')
    raw_id_fields = ('creator',)


@admin.register(models.SalesPersonWorkshopAccess)
class SalesPersonWorkshopAccessAdmin(DjangoQLSearchMixin, SimpleHistoryAdmin):
    list_display = ('id', 'workshop', 'sales_person', 'state', 'granted_by', 'modified')
    list_filter = ('state',)
    search_fields = ('workshop__title', 'sales_person__email', 'sales_person__username')
    raw_id_fields = ('workshop', 'sales_person', 'granted_by')
    readonly_fields = ('created', 'modified', 'revoked_at')
