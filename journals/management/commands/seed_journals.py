# journals/management/commands/seed_journals.py
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from accounts.models import AppUser
from accounts.security.app_jwt import issue_app_jwt
from journals.helpers import get_week_bounds
from journals.models import Journal

DEMO_JOURNALS = [
    ("Day One", "Had a great walk. Felt happy."),
    ("Rainy Tuesday", "- Stayed in and read a book - Cooked soup for dinner"),
    ("Gym", "- Ran five kilometers - Felt tired but proud"),
]


class Command(BaseCommand):
    help = "Create a demo user with journals in the current week and print a JWT for it"

    def add_arguments(self, parser):
        parser.add_argument("--name", default="devuser")

    def handle(self, *args, **options):
        user, _ = AppUser.objects.get_or_create(name=options["name"])
        week_start, _ = get_week_bounds()

        for i, (title, description) in enumerate(DEMO_JOURNALS):
            journal, created = Journal.objects.get_or_create(
                user=user,
                title=title,
                defaults={"description": description, "summary": description},  # AI 호출 없음
            )
            if created:
                # auto_now_add 라서 create 후에 날짜를 이번 주 안으로 옮긴다
                created_at = min(week_start + timedelta(days=i, hours=9), timezone.now())
                Journal.objects.filter(pk=journal.pk).update(created_at=created_at)

        self.stdout.write(self.style.SUCCESS(f"Seeded journals for user id={user.id}."))
        self.stdout.write(issue_app_jwt(user.id))
