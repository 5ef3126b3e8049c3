# ==========================================================
# memberapp/management/commands/create_root_member.py
# Seed the sponsor-less ROOT member of the tree
# ==========================================================
from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from memberapp.models import Member


class Command(BaseCommand):
    help = "Create the root member (no sponsor). Fails if a root already exists."

    def add_arguments(self, parser):
        parser.add_argument("--name", required=True)
        parser.add_argument("--email", required=True)
        parser.add_argument("--password", required=True)
        parser.add_argument("--mobile", default=None)

    @transaction.atomic
    def handle(self, *args, **options):
        root = Member.objects.select_for_update().filter(sponsor__isnull=True).first()
        if root is not None:
            raise CommandError(f"Root member already exists: {root}")

        if Member.objects.filter(email__iexact=options["email"]).exists():
            raise CommandError("Email already exists.")

        root = Member.objects.create(
            name=options["name"],
            email=options["email"],
            mobile=options["mobile"] or None,
            password=make_password(options["password"]),
        )
        self.stdout.write(self.style.SUCCESS(f"Root member created: {root.member_code}"))
