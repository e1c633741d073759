"""
Constants for the catalog app.
"""
from django.db import models


class AssetKind(models.TextChoices):
    """
    The kinds of playable media asset a course can own.
    """
    VIDEO = 'video', 'Video'
    AUDIO = 'audio', 'Audio'
