# ==========================================================
# memberapp/management/commands/audit_tree_counts.py
# ==========================================================
from django.core.management.base import BaseCommand

from memberapp.mlm.audit import audit_counts, rebuild_counts


class Command(BaseCommand):
    help = "Check every member's left/right counts against the tree (optionally fix them)"

    def add_arguments(self, parser):
        parser.add_argument("--fix", action="store_true", help="Rewrite drifted counts")

    def handle(self, *args, **options):
        mismatches = audit_counts()
        if not mismatches:
            self.stdout.write(self.style.SUCCESS("All member counts match the tree."))
            return

        for m in mismatches:
            self.stdout.write(self.style.WARNING(
                f"{m.member_code}: stored L{m.stored_left}/R{m.stored_right}, "
                f"actual L{m.actual_left}/R{m.actual_right}"
            ))

        if options["fix"]:
            fixed = rebuild_counts()
            self.stdout.write(self.style.SUCCESS(f"Rebuilt counts for {fixed} members."))
        else:
            self.stdout.write(f"{len(mismatches)} mismatches. Re-run with --fix to rebuild.")
