"""
Models for the sales_hierarchy app.

A sales manager leads sales teams of sales persons, and grants sales persons
access to workshops.  Memberships and workshop grants are soft-revoked by
flipping their ``state``; rows are never deleted.
"""
from django.conf import settings
from django.db import models
from django.utils import timezone
from django_extensions.db.models import TimeStampedModel
from simple_history.models import HistoricalRecords

from media_access.apps.core.constants import AccessStates


class SalesTeam(TimeStampedModel):
    """
    A team of sales persons led by one sales manager.

    .. no_pii: This model has no PII
    """
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    manager = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='managed_sales_teams',
        on_delete=models.PROTECT,
    )
    is_active = models.BooleanField(
        default=True,
        db_index=True,
        help_text='Deactivated teams accept no new members.',
    )

    history = HistoricalRecords()

    def __str__(self):
        return f'<SalesTeam id={self.id}, name={self.name}, manager={self.manager_id}>'


class SalesTeamMember(TimeStampedModel):
    """
    Membership of a sales person in a sales team.

    A sales person holds at most one active membership across all teams;
    the ``unique_active_membership_per_sales_person`` constraint enforces it.

    .. no_pii: This model has no PII
    """
    team = models.ForeignKey(
        SalesTeam,
        related_name='members',
        on_delete=models.CASCADE,
    )
    sales_person = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='sales_team_memberships',
        on_delete=models.CASCADE,
    )
    state = models.CharField(
        max_length=25,
        choices=AccessStates.CHOICES,
        default=AccessStates.ACTIVE,
        db_index=True,
    )
    revoked_at = models.DateTimeField(
        null=True,
        blank=True,
    )

    history = HistoricalRecords()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=['sales_person'],
                name='unique_active_membership_per_sales_person',
                condition=models.Q(state=AccessStates.ACTIVE),
            ),
        ]

    @property
    def is_active(self):
        return self.state == AccessStates.ACTIVE

    def revoke(self):
        self.state = AccessStates.REVOKED
        self.revoked_at = timezone.now()

    def __str__(self):
        return f'<SalesTeamMember team={self.team_id}, sales_person={self.sales_person_id}, state={self.state}>'


class Workshop(TimeStampedModel):
    """
    A workshop created by a sales manager.

    .. no_pii: This model has no PII
    """
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='created_workshops',
        on_delete=models.PROTECT,
    )
    scheduled_at = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)

    def __str__(self):
        return f'<Workshop id={self.id}, title={self.title}>'


class SalesPersonWorkshopAccess(TimeStampedModel):
    """
    Grant of a workshop to a sales person.  Granting again after a
    revocation re-activates the same row.

    .. no_pii: This model has no PII
    """
    sales_person = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='workshop_access',
        on_delete=models.CASCADE,
    )
    workshop = models.ForeignKey(
        Workshop,
        related_name='sales_person_access',
        on_delete=models.CASCADE,
    )
    state = models.CharField(
        max_length=25,
        choices=AccessStates.CHOICES,
        default=AccessStates.ACTIVE,
        db_index=True,
    )
    granted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='granted_workshop_access',
        blank=True,
        null=True,
        on_delete=models.SET_NULL,
    )
    revoked_at = models.DateTimeField(
        null=True,
        blank=True,
    )

    history = HistoricalRecords()

    class Meta:
        unique_together = [
            ('sales_person', 'workshop'),
        ]
        verbose_name_plural = 'sales person workshop access'

    @property
    def is_active(self):
        return self.state == AccessStates.ACTIVE

    def activate(self, granted_by_id=None):
        self.state = AccessStates.ACTIVE
        self.granted_by_id = granted_by_id
        self.revoked_at = None

    def revoke(self):
        self.state = AccessStates.REVOKED
        self.revoked_at = timezone.now()

    def __str__(self):
        return (
            f'<SalesPersonWorkshopAccess sales_person={self.sales_person_id}, '
            f'workshop={self.workshop_id}, state={self.state}>'
        )
