from django.test import TestCase

from memberapp.mlm.downline import downline
from memberapp.models import Side

from .factories import create_root, join


class DownlineTest(TestCase):
    def setUp(self):
        self.root = create_root()

    def test_empty_leg(self):
        join(self.root, "Left", "A")
        self.assertEqual(downline(self.root.member_code, Side.RIGHT), [])

    def test_unknown_member(self):
        self.assertEqual(downline(999999, Side.LEFT), [])

    def test_full_subtree_breadth_first(self):
        a = join(self.root, "Left", "A")
        b = join(a, "Left", "B")
        c = join(a, "Right", "C")
        d = join(b, "Left", "D")
        e = join(b, "Right", "E")
        f = join(c, "Left", "F")
        g = join(c, "Right", "G")
        join(self.root, "Right", "Other")

        result = downline(self.root.member_code, "Left")

        # depth 3 perfect subtree -> 2**3 - 1 members
        self.assertEqual(len(result), 7)
        self.assertEqual(
            [row["member_code"] for row in result],
            [m.member_code for m in (a, b, c, d, e, f, g)],
        )
        for row in result:
            self.assertNotIn("password", row)

    def test_right_leg_spine(self):
        r1 = join(self.root, "Right", "R1")
        r2 = join(self.root, "Right", "R2")
        result = downline(self.root.member_code, Side.RIGHT)
        self.assertEqual([row["member_code"] for row in result], [r1.member_code, r2.member_code])
        self.assertEqual(result[0]["right_child"], r2.member_code)
        self.assertEqual(result[0]["right_count"], 1)
