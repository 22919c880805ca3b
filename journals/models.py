# journals/models.py
import uuid

from django.db import models

TITLE_MAX_LENGTH = 100


class Journal(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey("accounts.AppUser", on_delete=models.CASCADE, related_name="journals")
    title = models.CharField(max_length=TITLE_MAX_LENGTH)
    description = models.TextField(blank=True)
    summary = models.TextField(blank=True)  # bullet 요약 또는 description 그대로 (fallback)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [models.Index(fields=["user", "created_at"], name="journal_user_created_idx")]

    def __str__(self):
        return f"{self.title} (user={self.user_id})"
