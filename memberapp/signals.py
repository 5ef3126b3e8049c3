# memberapp/signals.py
import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# Sent after a join commits.
# kwargs: member_code, parent_code, side, sponsor_code
member_joined = Signal()


@receiver(member_joined)
def log_member_joined(sender, member_code, parent_code, side, sponsor_code, **kwargs):
    if parent_code != sponsor_code:
        logger.info(
            "Member %s joined under %s (%s), spilled over from sponsor %s",
            member_code, parent_code, side, sponsor_code,
        )
    else:
        logger.info("Member %s joined under %s (%s)", member_code, parent_code, side)
