from django.core.cache import cache
from django.test import TestCase

from memberapp.mlm.audit import CountMismatch, audit_counts, rebuild_counts, render_tree
from memberapp.models import Member
from memberapp.tasks import AUDIT_LOCK_KEY, audit_tree_counts_task

from .factories import create_root, fresh, join


class TreeAuditTest(TestCase):
    def setUp(self):
        self.root = create_root()
        self.a = join(self.root, "Left", "A")
        self.b = join(self.root, "Right", "B")
        self.c = join(self.a, "Right", "C")

    def test_clean_tree(self):
        self.assertEqual(audit_counts(), [])

    def test_detects_and_rebuilds_drift(self):
        Member.objects.filter(member_code=self.root.member_code).update(left_count=7)
        Member.objects.filter(member_code=self.c.member_code).update(right_count=3)

        mismatches = audit_counts()
        self.assertCountEqual(mismatches, [
            CountMismatch(self.root.member_code, 7, 1, 2, 1),
            CountMismatch(self.c.member_code, 0, 3, 0, 0),
        ])

        with self.assertLogs("memberapp.mlm.audit", level="WARNING"):
            fixed = rebuild_counts()
        self.assertEqual(fixed, 2)
        self.assertEqual(audit_counts(), [])
        self.assertEqual(fresh(self.root).left_count, 2)

    def test_render_tree(self):
        text = render_tree(self.root.member_code)
        lines = text.splitlines()
        self.assertEqual(lines[0], f"{self.root.member_code} - Root [L:2 R:1]")
        self.assertEqual(lines[1], f"├── L: {self.a.member_code} - A [L:0 R:1]")
        self.assertEqual(lines[2], f"│   └── R: {self.c.member_code} - C [L:0 R:0]")
        self.assertEqual(lines[3], f"└── R: {self.b.member_code} - B [L:0 R:0]")

    def test_render_tree_depth_and_missing(self):
        self.assertEqual(len(render_tree(self.root.member_code, max_depth=1).splitlines()), 3)
        self.assertEqual(render_tree(999999), "")


class AuditTaskTest(TestCase):
    def setUp(self):
        cache.clear()
        self.root = create_root()
        join(self.root, "Left", "A")

    def test_reports_mismatch_count(self):
        self.assertEqual(audit_tree_counts_task.apply().get(), 0)

        Member.objects.filter(member_code=self.root.member_code).update(right_count=5)
        with self.assertLogs("memberapp.tasks", level="WARNING"):
            self.assertEqual(audit_tree_counts_task(), 1)
        self.assertIsNone(cache.get(AUDIT_LOCK_KEY))

    def test_skips_when_locked(self):
        cache.set(AUDIT_LOCK_KEY, "1")
        self.assertIsNone(audit_tree_counts_task())
