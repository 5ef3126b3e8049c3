from django.core.management.base import BaseCommand, CommandError

from memberapp.mlm.audit import render_tree


class Command(BaseCommand):
    help = "Print a member's subtree with left/right counts"

    def add_arguments(self, parser):
        parser.add_argument("member_code", type=int)
        parser.add_argument("--depth", type=int, default=None, help="Levels below the member to show")

    def handle(self, *args, **options):
        text = render_tree(options["member_code"], max_depth=options["depth"])
        if not text:
            raise CommandError(f"Member {options['member_code']} not found")
        self.stdout.write(text)
