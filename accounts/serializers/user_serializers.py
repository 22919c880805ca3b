from rest_framework import serializers
from ..models import AppUser

class AppUserSerializer(serializers.ModelSerializer):
    weeklyReport = serializers.CharField(source="weekly_report", allow_null=True, read_only=True)

    class Meta:
        model = AppUser
        fields = ["id", "name", "weeklyReport"]
