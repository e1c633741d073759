"""
Relational storage for sales teams, memberships and workshop access.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from media_access.apps.core.constants import AccessStates, UserRole

from .exceptions import (
    MembershipConflict,
    PrincipalNotFound,
    TeamNotFound,
    WorkshopAccessNotFound,
    WorkshopNotFound
)
from .models import SalesPersonWorkshopAccess, SalesTeam, SalesTeamMember, Workshop

logger = logging.getLogger(__name__)

User = get_user_model()


class DjangoSalesHierarchyStore:
    """
    Reads and writes sales hierarchy records.

    Every read is computed from current row states.  Writes that check an
    invariant before inserting run in one transaction, with the sales
    person's row locked.
    """

    def get_principal(self, user_id):
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist as exc:
            raise PrincipalNotFound(f'User {user_id} not found') from exc

    def get_team(self, team_id, include_inactive=False):
        """
        Raises:
            TeamNotFound: no team has this id, or the team was deactivated
                and ``include_inactive`` is False.
        """
        teams = SalesTeam.objects.select_related('manager')
        if not include_inactive:
            teams = teams.filter(is_active=True)
        try:
            return teams.get(pk=team_id)
        except SalesTeam.DoesNotExist as exc:
            raise TeamNotFound(f'Sales team {team_id} not found') from exc

    def get_workshop(self, workshop_id):
        try:
            return Workshop.objects.get(pk=workshop_id)
        except Workshop.DoesNotExist as exc:
            raise WorkshopNotFound(f'Workshop {workshop_id} not found') from exc

    def teams(self):
        return SalesTeam.objects.select_related('manager').prefetch_related(
            'members__sales_person',
        ).order_by('-created')

    def active_members(self, team_id):
        return SalesTeamMember.objects.filter(
            team_id=team_id,
            state=AccessStates.ACTIVE,
        ).select_related('sales_person').order_by('created')

    def _raise_if_actively_assigned(self, sales_person_ids):
        assigned = list(
            SalesTeamMember.objects.filter(
                sales_person_id__in=sales_person_ids,
                state=AccessStates.ACTIVE,
            ).values_list('sales_person_id', flat=True)
        )
        if assigned:
            raise MembershipConflict(f'Sales persons {sorted(assigned)} are already members of a team')

    def _insert_members(self, team, sales_person_ids):
        """
        Locks the sales persons' rows, then inserts active memberships for them.
        Must run inside a transaction.
        """
        list(User.objects.select_for_update().filter(pk__in=sales_person_ids).order_by('pk'))
        self._raise_if_actively_assigned(sales_person_ids)
        try:
            with transaction.atomic():
                return [
                    SalesTeamMember.objects.create(team=team, sales_person_id=sales_person_id)
                    for sales_person_id in sales_person_ids
                ]
        except IntegrityError as exc:
            logger.info('Concurrent team assignment of sales persons %s', sales_person_ids)
            raise MembershipConflict('Sales person is already a member of a team') from exc

    def create_team(self, name, description, manager_id, sales_person_ids=()):
        """
        Creates a team and its initial active memberships, all or nothing.

        Raises:
            MembershipConflict: one of the sales persons is already active in a team.
        """
        with transaction.atomic():
            team = SalesTeam.objects.create(name=name, description=description, manager_id=manager_id)
            self._insert_members(team, list(sales_person_ids))
        return team

    def deactivate_team(self, team):
        team.is_active = False
        team.save()
        return team

    def update_team(self, team, **fields):
        for field_name, value in fields.items():
            setattr(team, field_name, value)
        team.save()
        return team

    def add_member(self, team, sales_person_id):
        """
        Raises:
            MembershipConflict: the sales person is already active in some team.
        """
        with transaction.atomic():
            return self._insert_members(team, [sales_person_id])[0]

    def deactivate_member(self, team_id, sales_person_id):
        """
        Returns:
            The revoked membership, or ``None`` when the sales person is not active in the team.
        """
        with transaction.atomic():
            member = SalesTeamMember.objects.select_for_update().filter(
                team_id=team_id,
                sales_person_id=sales_person_id,
                state=AccessStates.ACTIVE,
            ).first()
            if member is None:
                return None
            member.revoke()
            member.save()
        return member

    def available_sales_persons(self):
        """
        Active sales persons with no active team membership.
        """
        return User.objects.filter(
            role=UserRole.SALES_PERSON,
            is_active=True,
        ).exclude(
            sales_team_memberships__state=AccessStates.ACTIVE,
        ).order_by('first_name', 'last_name', 'id')

    def sales_managers(self):
        return User.objects.filter(
            role=UserRole.SALES_MANAGER,
            is_active=True,
        ).order_by('first_name', 'last_name', 'id')

    def upsert_workshop_access(self, workshop_id, sales_person_id, granted_by_id=None):
        """
        Returns:
            A ``(access, created)`` tuple.
        """
        with transaction.atomic():
            access, created = SalesPersonWorkshopAccess.objects.select_for_update().get_or_create(
                workshop_id=workshop_id,
                sales_person_id=sales_person_id,
                defaults={'granted_by_id': granted_by_id},
            )
            if not created:
                access.activate(granted_by_id=granted_by_id)
                access.save()
        return access, created

    def revoke_workshop_access(self, workshop_id, sales_person_id):
        """
        Raises:
            WorkshopAccessNotFound: the sales person was never granted this workshop.
        """
        with transaction.atomic():
            access = SalesPersonWorkshopAccess.objects.select_for_update().filter(
                workshop_id=workshop_id,
                sales_person_id=sales_person_id,
            ).first()
            if access is None:
                raise WorkshopAccessNotFound('Sales person access to this workshop not found')
            access.revoke()
            access.save()
        return access

    def accessible_workshops(self, sales_person_id):
        """
        Active workshops the sales person holds an active grant on.
        """
        return Workshop.objects.filter(
            is_active=True,
            sales_person_access__sales_person_id=sales_person_id,
            sales_person_access__state=AccessStates.ACTIVE,
        ).select_related('creator').order_by('-created').distinct()

    def workshop_access_list(self, workshop_id):
        return SalesPersonWorkshopAccess.objects.filter(
            workshop_id=workshop_id,
        ).select_related('sales_person', 'granted_by').order_by('-created')

    def manager_workshops(self, manager_id):
        return Workshop.objects.filter(creator_id=manager_id).order_by('-created')
