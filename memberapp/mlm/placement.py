# ==========================================================
# memberapp/mlm/placement.py
# SPILLOVER PLACEMENT (find next free slot on one leg)
# ==========================================================
from collections import namedtuple

from django.db import DEFAULT_DB_ALIAS

from memberapp.models import Member, Side

Slot = namedtuple("Slot", ["parent_code", "side"])


def find_slot(sponsor_code, side, using=DEFAULT_DB_ALIAS):
    """
    Walk down the requested leg starting at the sponsor and return the first
    member whose child pointer on that leg is empty.

    The walk never switches legs: a LEFT request always ends on the
    left-most open slot of the sponsor's left spine.

    Raises Member.DoesNotExist when the sponsor is unknown; the join
    orchestrator checks the sponsor before calling this.
    """
    side = Side.parse(side)
    pointer = f"{side.child_field}_id"
    members = Member.objects.using(using).only("member_code", side.child_field)

    current = members.get(member_code=sponsor_code)
    while True:
        child_code = getattr(current, pointer)
        if child_code is None:
            return Slot(current.member_code, side)
        current = members.get(member_code=child_code)
