""" Core models. """

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from media_access.apps.core.constants import UserRole


class User(AbstractUser):
    """
    Custom user model for the media platform.

    .. pii: Stores full name, username, phone number and email address for a user.
    .. pii_types: name, username, phone_number, email_address
    .. pii_retirement: local_api

    """
    full_name = models.CharField(_('Full Name'), max_length=255, blank=True, null=True)
    phone = models.CharField(_('Phone'), max_length=32, blank=True, null=True)
    role = models.CharField(
        max_length=32,
        choices=UserRole.choices,
        default=UserRole.USER,
        db_index=True,
        help_text='Platform role of this user. Fixed at registration.',
    )

    class Meta:
        get_latest_by = 'date_joined'
        indexes = [
            models.Index(fields=['username']),
            models.Index(fields=['email']),
        ]

    def get_full_name(self):
        return self.full_name or super().get_full_name()

    def has_role(self, role):
        """
        True if this user holds ``role`` and is active.
        """
        return self.is_active and self.role == role

    @property
    def is_sales_manager(self):
        return self.has_role(UserRole.SALES_MANAGER)

    @property
    def is_sales_person(self):
        return self.has_role(UserRole.SALES_PERSON)

    def __str__(self):
        return f'{self.email}'
