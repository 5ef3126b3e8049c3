# memberapp/apps.py
from django.apps import AppConfig


class MemberappConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "memberapp"

    def ready(self):
        # Only load signals
        from . import signals  # noqa: F401
