"""
Shared serializer bases.
"""
from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


class BaseSerializer(serializers.Serializer):
    """
    Base implementation for request and response serializers.
    """
    def create(self, *args, **kwargs):
        return None

    def update(self, *args, **kwargs):
        return None


class UserSummarySerializer(serializers.ModelSerializer):
    """
    The public fields of a user, as embedded in other responses.
    """
    class Meta:
        model = User
        fields = ['id', 'username', 'first_name', 'last_name', 'full_name', 'email', 'role']
        read_only_fields = fields
