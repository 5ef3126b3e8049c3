import logging

from celery import shared_task
from django.conf import settings
from django.core.cache import cache

from .mlm.audit import audit_counts

logger = logging.getLogger(__name__)

AUDIT_LOCK_KEY = "memberapp:tree-audit-lock"


@shared_task
def audit_tree_counts_task():
    """
    Daily check that every member's left/right counts match the tree.
    Mismatches are logged, not fixed; run `audit_tree_counts --fix` for that.
    Returns the number of mismatches, or None when another run holds the lock.
    """
    timeout = getattr(settings, "TREE_AUDIT_LOCK_TIMEOUT", 600)
    if not cache.add(AUDIT_LOCK_KEY, "1", timeout):
        logger.info("Tree audit already running, skipped")
        return None

    try:
        mismatches = audit_counts()
        for m in mismatches:
            logger.warning(
                "Count drift on member %s: stored L%s/R%s, actual L%s/R%s",
                m.member_code, m.stored_left, m.stored_right, m.actual_left, m.actual_right,
            )
        logger.info("Tree audit finished: %s mismatches", len(mismatches))
        return len(mismatches)
    finally:
        cache.delete(AUDIT_LOCK_KEY)
