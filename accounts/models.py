from django.db import models


class AppUser(models.Model):
    name = models.CharField(max_length=150)
    weekly_report = models.TextField(null=True, blank=True)  # 주간 리포트 생성 시마다 덮어씀
    created_at = models.DateTimeField(auto_now_add=True)

    @property
    def is_authenticated(self):
        # DRF IsAuthenticated 호환
        return True

    def __str__(self):
        return f"{self.name} (id={self.id})"
