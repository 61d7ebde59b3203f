"""
Abstract model shared by every owner-scoped collection.
"""
import uuid

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


def new_id() -> str:
    """Return a fresh identifier for a record that has not been saved yet."""
    return str(uuid.uuid4())


class ScopedModel(models.Model):
    """
    A record that belongs to one account (the scope).

    Ids are UUIDs so snapshots can be created in memory and saved later
    without a round-trip to the database.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="+",
        help_text=_("Account that owns this record."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
