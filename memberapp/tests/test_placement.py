from django.test import TestCase

from memberapp.mlm.placement import Slot, find_slot
from memberapp.models import Member, Side

from .factories import create_root, join


class FindSlotTest(TestCase):
    def setUp(self):
        self.root = create_root()

    def test_empty_leg_returns_sponsor(self):
        self.assertEqual(find_slot(self.root.member_code, Side.LEFT), Slot(self.root.member_code, Side.LEFT))
        self.assertEqual(find_slot(self.root.member_code, "Right"), Slot(self.root.member_code, Side.RIGHT))

    def test_spills_down_the_requested_leg(self):
        a = join(self.root, "Left", "A")
        b = join(a, "Left", "B")

        slot = find_slot(self.root.member_code, Side.LEFT)
        self.assertEqual(slot, Slot(b.member_code, Side.LEFT))

    def test_never_switches_legs(self):
        a = join(self.root, "Left", "A")
        # A's right slot is open, but a LEFT request keeps walking left
        slot = find_slot(self.root.member_code, Side.LEFT)
        self.assertEqual(slot.parent_code, a.member_code)
        self.assertEqual(slot.side, Side.LEFT)
        self.assertIsNone(Member.objects.get(member_code=a.member_code).right_child_id)

    def test_same_state_gives_same_slot(self):
        join(self.root, "Right", "R1")
        first = find_slot(self.root.member_code, Side.RIGHT)
        second = find_slot(self.root.member_code, Side.RIGHT)
        self.assertEqual(first, second)

    def test_unknown_sponsor(self):
        with self.assertRaises(Member.DoesNotExist):
            find_slot(999999, Side.LEFT)


class SideParseTest(TestCase):
    def test_parse(self):
        self.assertIs(Side.parse("Left"), Side.LEFT)
        self.assertIs(Side.parse("left"), Side.LEFT)
        self.assertIs(Side.parse("Right"), Side.RIGHT)
        self.assertIs(Side.parse("anything"), Side.RIGHT)
        self.assertIs(Side.parse(Side.LEFT), Side.LEFT)
        self.assertEqual(Side.LEFT.child_field, "left_child")
        self.assertEqual(Side.RIGHT.count_field, "right_count")
