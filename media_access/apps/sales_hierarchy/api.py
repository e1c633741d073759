"""
Primary Python API for managing sales teams and sales person workshop access.
"""
import logging

from media_access.apps.core.constants import UserRole

from .exceptions import InvalidPrincipal, MembershipNotFound
from .store import DjangoSalesHierarchyStore

logger = logging.getLogger(__name__)


class SalesHierarchyManager:
    """
    Team membership and workshop access rules for the sales organization.

    A sales person moves from unassigned, to active in one team, to revoked;
    revoked memberships stay on record, and the sales person may then join
    another team.  Workshop access follows the same active/revoked states,
    but a grant re-uses the existing row for the sales person and workshop.
    """

    def __init__(self, store):
        self.store = store

    def _validated_principal(self, user_id, role, description):
        """
        Fetch the user and check that they hold ``role`` and are active.

        Raises:
            PrincipalNotFound: the user does not exist.
            InvalidPrincipal: the user holds another role, or is inactive.
        """
        principal = self.store.get_principal(user_id)
        if not principal.has_role(role):
            raise InvalidPrincipal(f'User {user_id} is not an active {description}')
        return principal

    def create_team(self, name, manager_id, description='', sales_person_ids=()):
        """
        Creates a sales team led by ``manager_id``, with optional initial members.

        Raises:
            InvalidPrincipal: the manager is not an active sales manager, or a
                member is not an active sales person.
            MembershipConflict: a member already belongs to a team.
        """
        manager = self._validated_principal(manager_id, UserRole.SALES_MANAGER, 'sales manager')
        sales_person_ids = list(dict.fromkeys(sales_person_ids))
        for sales_person_id in sales_person_ids:
            self._validated_principal(sales_person_id, UserRole.SALES_PERSON, 'sales person')

        team = self.store.create_team(name, description, manager.id, sales_person_ids)
        logger.info('Created sales team %s led by %s with members %s', team.id, manager.id, sales_person_ids)
        return team

    def deactivate_team(self, team_id):
        team = self.store.get_team(team_id)
        self.store.deactivate_team(team)
        logger.info('Deactivated sales team %s', team.id)
        return team

    def update_team(self, team_id, name=None, description=None, manager_id=None, is_active=None):
        """
        Updates the given fields of a team, deactivated teams included.  Fields left as None are unchanged.

        Raises:
            TeamNotFound: the team does not exist.
            InvalidPrincipal: a new manager is not an active sales manager.
        """
        team = self.store.get_team(team_id, include_inactive=True)
        fields = {
            field_name: value
            for field_name, value in (
                ('name', name),
                ('description', description),
                ('is_active', is_active),
            )
            if value is not None
        }
        if manager_id is not None and manager_id != team.manager_id:
            fields['manager'] = self._validated_principal(manager_id, UserRole.SALES_MANAGER, 'sales manager')

        team = self.store.update_team(team, **fields)
        logger.info('Updated sales team %s fields %s', team.id, sorted(fields))
        return team

    def assign(self, team_id, sales_person_id):
        """
        Adds a sales person to an active team.

        Raises:
            TeamNotFound: the team does not exist or was deactivated.
            InvalidPrincipal: the sales person is not an active sales person,
                or the team's manager is no longer an active sales manager.
            MembershipConflict: the sales person is active in any team, this one included.
        """
        team = self.store.get_team(team_id)
        if not team.manager.has_role(UserRole.SALES_MANAGER):
            raise InvalidPrincipal(f'The manager of sales team {team.id} is not an active sales manager')
        self._validated_principal(sales_person_id, UserRole.SALES_PERSON, 'sales person')

        member = self.store.add_member(team, sales_person_id)
        logger.info('Assigned sales person %s to sales team %s', sales_person_id, team.id)
        return member

    def unassign(self, team_id, sales_person_id):
        """
        Revokes a sales person's active membership in a team.  The row is kept.
        Members of a deactivated team can still be removed.

        Raises:
            TeamNotFound: the team does not exist.
            MembershipNotFound: the sales person is not active in this team.
        """
        team = self.store.get_team(team_id, include_inactive=True)
        member = self.store.deactivate_member(team.id, sales_person_id)
        if member is None:
            raise MembershipNotFound('Sales person is not a member of this team')
        logger.info('Removed sales person %s from sales team %s', sales_person_id, team.id)
        return member

    def grant_workshop_access(self, workshop_id, sales_person_id, granted_by_id=None):
        """
        Grants a sales person access to a workshop, re-activating an earlier grant if one exists.

        Returns:
            A ``(access, created)`` tuple.

        Raises:
            WorkshopNotFound: the workshop does not exist.
            InvalidPrincipal: the grantee is not an active sales person.
        """
        workshop = self.store.get_workshop(workshop_id)
        self._validated_principal(sales_person_id, UserRole.SALES_PERSON, 'sales person')

        access, created = self.store.upsert_workshop_access(workshop.id, sales_person_id, granted_by_id)
        logger.info(
            'User %s granted workshop %s to sales person %s (created=%s)',
            granted_by_id, workshop.id, sales_person_id, created,
        )
        return access, created

    def revoke_workshop_access(self, workshop_id, sales_person_id):
        """
        Raises:
            WorkshopNotFound: the workshop does not exist.
            WorkshopAccessNotFound: the sales person was never granted the workshop.
        """
        workshop = self.store.get_workshop(workshop_id)
        access = self.store.revoke_workshop_access(workshop.id, sales_person_id)
        logger.info('Revoked workshop %s from sales person %s', workshop.id, sales_person_id)
        return access

    def get_team(self, team_id):
        return self.store.get_team(team_id, include_inactive=True)

    def teams(self):
        return self.store.teams()

    def active_members(self, team_id):
        team = self.store.get_team(team_id, include_inactive=True)
        return self.store.active_members(team.id)

    def available_sales_persons(self):
        return self.store.available_sales_persons()

    def sales_managers(self):
        return self.store.sales_managers()

    def accessible_workshops(self, sales_person_id):
        return self.store.accessible_workshops(sales_person_id)

    def workshop_access_list(self, workshop_id):
        workshop = self.store.get_workshop(workshop_id)
        return self.store.workshop_access_list(workshop.id)

    def manager_workshops(self, manager_id):
        return self.store.manager_workshops(manager_id)


def get_sales_hierarchy_manager(store=None):
    """
    Returns a ``SalesHierarchyManager`` over the given, or default relational, store.
    """
    return SalesHierarchyManager(store or DjangoSalesHierarchyStore())
