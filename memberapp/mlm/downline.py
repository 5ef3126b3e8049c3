# ==========================================================
# memberapp/mlm/downline.py
# LEFT / RIGHT DOWNLINE (BFS)
# ==========================================================
from collections import deque

from django.db import DEFAULT_DB_ALIAS

from memberapp.models import Member, Side


def downline(member_code, side, using=DEFAULT_DB_ALIAS):
    """
    Breadth-first list of every member under one leg, left before right
    within a level. Unknown members and empty legs give an empty list.
    """
    side = Side.parse(side)
    members = Member.objects.using(using)

    member = members.filter(member_code=member_code).first()
    if member is None:
        return []
    start = member.child_code(side)
    if start is None:
        return []

    queue = deque([start])
    result = []

    while queue:
        code = queue.popleft()
        node = members.filter(member_code=code).first()
        if node is None:
            continue

        result.append(node.as_public_dict())

        if node.left_child_id is not None:
            queue.append(node.left_child_id)
        if node.right_child_id is not None:
            queue.append(node.right_child_id)

    return result
