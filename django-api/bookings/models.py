"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class StoredRecord(models.Model):
    """A named JSON record in the booking key-value table."""

    key = models.CharField(max_length=100, primary_key=True)
    payload = models.JSONField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]

    def __str__(self) -> str:
        return self.key
