# ==========================================================
# memberapp/mlm/counts.py
# LEFT / RIGHT COUNT UPDATE (walk upward to root)
# ==========================================================
import logging

from django.db import DEFAULT_DB_ALIAS
from django.db.models import F

from memberapp.models import Member

logger = logging.getLogger(__name__)


def propagate_counts(new_code, parent_code, using=DEFAULT_DB_ALIAS):
    """
    Add the new member to the side count of every ancestor, from the
    attaching parent up to the root. Returns how many ancestors were updated.

    Must run inside the join transaction, after the parent's child pointer
    has been set.
    """
    members = Member.objects.using(using)
    child_code = new_code
    ancestor_code = parent_code
    updated = 0

    while ancestor_code is not None:
        ancestor = (
            members.filter(member_code=ancestor_code)
            .values("member_code", "sponsor_id", "left_child_id", "right_child_id")
            .first()
        )
        if ancestor is None:
            # Truncated chain: stop here instead of failing the join
            logger.warning(
                "Count propagation for member %s stopped: ancestor %s is missing "
                "(last updated member %s)",
                new_code, ancestor_code, child_code,
            )
            break

        if ancestor["left_child_id"] == child_code:
            members.filter(member_code=ancestor_code).update(left_count=F("left_count") + 1)
            updated += 1
        if ancestor["right_child_id"] == child_code:
            members.filter(member_code=ancestor_code).update(right_count=F("right_count") + 1)
            updated += 1

        child_code = ancestor["member_code"]
        ancestor_code = ancestor["sponsor_id"]

    return updated
