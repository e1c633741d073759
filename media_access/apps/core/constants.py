""" Constants for the core app. """
from django.db import models


class UserRole(models.TextChoices):
    """
    The closed set of roles a platform user can hold.

    A user's role is fixed at registration time; nothing in this service changes it.
    """
    ADMIN = 'ADMIN', 'Admin'
    SALES_MANAGER = 'SALES_MANAGER', 'Sales manager'
    SALES_PERSON = 'SALES_PERSON', 'Sales person'
    USER = 'USER', 'User'


class AccessStates:
    """
    States of a grant or membership record.  Records are never deleted,
    a revoked record keeps its history and may later be re-activated.
    """
    ACTIVE = 'active'
    REVOKED = 'revoked'

    CHOICES = (
        (ACTIVE, 'Active'),
        (REVOKED, 'Revoked'),
    )


# Capabilities, granted per role in ``core.rules``.
MEDIA_PLAYBACK_CAPABILITY = 'media_playback'
MEDIA_GRANT_ADMIN_CAPABILITY = 'media_grant_admin'
ENROLLMENT_ADMIN_CAPABILITY = 'enrollment_admin'
SALES_TEAM_ADMIN_CAPABILITY = 'sales_team_admin'
SALES_TEAM_READ_CAPABILITY = 'sales_team_read'
WORKSHOP_ACCESS_ADMIN_CAPABILITY = 'workshop_access_admin'
WORKSHOP_ACCESS_HOLDER_CAPABILITY = 'workshop_access_holder'
WORKSHOP_OWNER_CAPABILITY = 'workshop_owner'

# Permissions, as checked by views.
MEDIA_PLAYBACK_PERMISSION = 'media.has_playback_access'
MEDIA_GRANT_WRITE_PERMISSION = 'media.has_grant_write_access'
ENROLLMENT_WRITE_PERMISSION = 'enrollment.has_write_access'
SALES_TEAM_READ_PERMISSION = 'sales_team.has_read_access'
SALES_TEAM_WRITE_PERMISSION = 'sales_team.has_write_access'
WORKSHOP_ACCESS_READ_PERMISSION = 'workshop_access.has_read_access'
WORKSHOP_ACCESS_WRITE_PERMISSION = 'workshop_access.has_write_access'
WORKSHOP_ACCESSIBLE_LIST_PERMISSION = 'workshop_access.has_accessible_list_access'
WORKSHOP_MANAGER_LIST_PERMISSION = 'workshop.has_manager_list_access'


class Status:
    """Health statuses."""
    OK = "OK"
    UNAVAILABLE = "UNAVAILABLE"
