# ==========================================================
# memberapp/mlm/audit.py
# TREE COUNT AUDIT + REBUILD + TEXT VIEW
# ==========================================================
import logging
from collections import namedtuple

from django.db import DEFAULT_DB_ALIAS, transaction

from memberapp.models import Member

logger = logging.getLogger(__name__)

CountMismatch = namedtuple(
    "CountMismatch",
    ["member_code", "stored_left", "stored_right", "actual_left", "actual_right"],
)

TREE_FIELDS = ("member_code", "name", "left_child_id", "right_child_id", "left_count", "right_count")


def _load_rows(using):
    return {
        row["member_code"]: row
        for row in Member.objects.using(using).values(*TREE_FIELDS)
    }


def _subtree_sizes(rows):
    """
    Size of every subtree (member included), computed bottom-up with an
    explicit stack. Pointers to missing rows count as empty.
    """
    sizes = {}
    for top in rows:
        if top in sizes:
            continue
        stack = [(top, False)]
        visiting = set()
        while stack:
            code, expanded = stack.pop()
            if code is None or code not in rows or code in sizes:
                continue
            row = rows[code]
            if expanded:
                sizes[code] = (
                    1
                    + sizes.get(row["left_child_id"], 0)
                    + sizes.get(row["right_child_id"], 0)
                )
                continue
            if code in visiting:
                logger.error("Cycle detected at member %s, subtree skipped", code)
                continue
            visiting.add(code)
            stack.append((code, True))
            stack.append((row["right_child_id"], False))
            stack.append((row["left_child_id"], False))
    return sizes


def audit_counts(using=DEFAULT_DB_ALIAS):
    """
    Recompute left/right counts from the child pointers and return every
    member whose stored counts disagree.
    """
    rows = _load_rows(using)
    sizes = _subtree_sizes(rows)

    mismatches = []
    for code, row in rows.items():
        actual_left = sizes.get(row["left_child_id"], 0)
        actual_right = sizes.get(row["right_child_id"], 0)
        if (row["left_count"], row["right_count"]) != (actual_left, actual_right):
            mismatches.append(CountMismatch(
                member_code=code,
                stored_left=row["left_count"],
                stored_right=row["right_count"],
                actual_left=actual_left,
                actual_right=actual_right,
            ))
    return mismatches


def rebuild_counts(using=DEFAULT_DB_ALIAS):
    """Rewrite drifted side counts in one transaction. Returns members fixed."""
    with transaction.atomic(using=using):
        # Block concurrent joins while counts are rewritten
        list(Member.objects.using(using).select_for_update().values_list("member_code", flat=True))
        mismatches = audit_counts(using=using)
        for m in mismatches:
            Member.objects.using(using).filter(member_code=m.member_code).update(
                left_count=m.actual_left,
                right_count=m.actual_right,
            )
            logger.warning(
                "Rebuilt counts for member %s: L %s -> %s, R %s -> %s",
                m.member_code, m.stored_left, m.actual_left, m.stored_right, m.actual_right,
            )
    return len(mismatches)


def render_tree(member_code, using=DEFAULT_DB_ALIAS, max_depth=None):
    """Text view of a member's subtree, one line per member."""
    rows = _load_rows(using)
    if member_code not in rows:
        return ""

    def label(row):
        return f"{row['member_code']} - {row['name']} [L:{row['left_count']} R:{row['right_count']}]"

    lines = [label(rows[member_code])]
    # (code, prefix, leg, is_last, depth)
    stack = []

    def push_children(row, prefix, depth):
        children = [
            (leg, code)
            for leg, code in (("L", row["left_child_id"]), ("R", row["right_child_id"]))
            if code is not None
        ]
        for index in reversed(range(len(children))):
            leg, code = children[index]
            stack.append((code, prefix, leg, index == len(children) - 1, depth))

    if max_depth is None or max_depth > 0:
        push_children(rows[member_code], "", 1)

    while stack:
        code, prefix, leg, is_last, depth = stack.pop()
        connector = "└── " if is_last else "├── "
        row = rows.get(code)
        if row is None:
            lines.append(f"{prefix}{connector}{leg}: {code} (missing)")
            continue
        lines.append(f"{prefix}{connector}{leg}: {label(row)}")
        if max_depth is None or depth < max_depth:
            push_children(row, prefix + ("    " if is_last else "│   "), depth + 1)

    return "\n".join(lines)
