"""
Rules needed to restrict access to the media access service.

Every ``UserRole`` must appear in ``ROLE_CAPABILITIES``; a role value that is
not part of the enumeration raises ``UnknownRoleError`` instead of being
treated as either allowed or denied.
"""
import rules
from django.core.exceptions import ImproperlyConfigured

from media_access.apps.core import constants
from media_access.apps.core.constants import UserRole

ROLE_CAPABILITIES = {
    UserRole.ADMIN: frozenset({
        constants.MEDIA_PLAYBACK_CAPABILITY,
        constants.MEDIA_GRANT_ADMIN_CAPABILITY,
        constants.ENROLLMENT_ADMIN_CAPABILITY,
        constants.SALES_TEAM_ADMIN_CAPABILITY,
        constants.SALES_TEAM_READ_CAPABILITY,
        constants.WORKSHOP_ACCESS_ADMIN_CAPABILITY,
    }),
    UserRole.SALES_MANAGER: frozenset({
        constants.MEDIA_PLAYBACK_CAPABILITY,
        constants.SALES_TEAM_READ_CAPABILITY,
        constants.WORKSHOP_ACCESS_ADMIN_CAPABILITY,
        constants.WORKSHOP_OWNER_CAPABILITY,
    }),
    UserRole.SALES_PERSON: frozenset({
        constants.MEDIA_PLAYBACK_CAPABILITY,
        constants.WORKSHOP_ACCESS_HOLDER_CAPABILITY,
    }),
    UserRole.USER: frozenset({
        constants.MEDIA_PLAYBACK_CAPABILITY,
    }),
}

_unmapped_roles = set(UserRole) - set(ROLE_CAPABILITIES)
if _unmapped_roles:
    raise ImproperlyConfigured(f'Roles without a capability mapping: {sorted(_unmapped_roles)}')


class UnknownRoleError(Exception):
    """
    Raised when a user record carries a role value outside of ``UserRole``.
    """


def capabilities_for_role(role):
    """
    Returns the frozenset of capabilities held by ``role``.

    Raises:
        UnknownRoleError: if ``role`` is not a member of ``UserRole``.
    """
    try:
        return ROLE_CAPABILITIES[UserRole(role)]
    except ValueError as exc:
        raise UnknownRoleError(f'Unknown role {role!r}') from exc


def _user_has_capability(user, capability):
    """
    Helper to check that ``user`` is an authenticated, active user whose role carries ``capability``.
    """
    if not user or not user.is_authenticated or not user.is_active:
        return False
    return capability in capabilities_for_role(user.role)


########################
# All rule predicates. #
########################

@rules.predicate
def has_media_playback_capability(user):
    return _user_has_capability(user, constants.MEDIA_PLAYBACK_CAPABILITY)


@rules.predicate
def has_media_grant_admin_capability(user):
    return _user_has_capability(user, constants.MEDIA_GRANT_ADMIN_CAPABILITY)


@rules.predicate
def has_enrollment_admin_capability(user):
    return _user_has_capability(user, constants.ENROLLMENT_ADMIN_CAPABILITY)


@rules.predicate
def has_sales_team_admin_capability(user):
    return _user_has_capability(user, constants.SALES_TEAM_ADMIN_CAPABILITY)


@rules.predicate
def has_sales_team_read_capability(user):
    return _user_has_capability(user, constants.SALES_TEAM_READ_CAPABILITY)


@rules.predicate
def has_workshop_access_admin_capability(user):
    return _user_has_capability(user, constants.WORKSHOP_ACCESS_ADMIN_CAPABILITY)


@rules.predicate
def has_workshop_access_holder_capability(user):
    return _user_has_capability(user, constants.WORKSHOP_ACCESS_HOLDER_CAPABILITY)


@rules.predicate
def has_workshop_owner_capability(user):
    return _user_has_capability(user, constants.WORKSHOP_OWNER_CAPABILITY)


###############################################
# Map permissions to consolidated predicates. #
###############################################

rules.add_perm(
    constants.MEDIA_PLAYBACK_PERMISSION,
    has_media_playback_capability,
)

# Direct video/audio grants are managed by admins only.
rules.add_perm(
    constants.MEDIA_GRANT_WRITE_PERMISSION,
    has_media_grant_admin_capability,
)

rules.add_perm(
    constants.ENROLLMENT_WRITE_PERMISSION,
    has_enrollment_admin_capability,
)

rules.add_perm(
    constants.SALES_TEAM_READ_PERMISSION,
    has_sales_team_read_capability | has_sales_team_admin_capability,
)

rules.add_perm(
    constants.SALES_TEAM_WRITE_PERMISSION,
    has_sales_team_admin_capability,
)

rules.add_perm(
    constants.WORKSHOP_ACCESS_READ_PERMISSION,
    has_workshop_access_admin_capability,
)

rules.add_perm(
    constants.WORKSHOP_ACCESS_WRITE_PERMISSION,
    has_workshop_access_admin_capability,
)

rules.add_perm(
    constants.WORKSHOP_ACCESSIBLE_LIST_PERMISSION,
    has_workshop_access_holder_capability,
)

rules.add_perm(
    constants.WORKSHOP_MANAGER_LIST_PERMISSION,
    has_workshop_owner_capability,
)
