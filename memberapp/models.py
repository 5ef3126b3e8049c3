from django.db import models
from django.utils import timezone


class Side(models.TextChoices):
    LEFT = "Left", "Left"
    RIGHT = "Right", "Right"

    @classmethod
    def parse(cls, value):
        """
        Map a wire value to a side. Case-insensitive "left" is LEFT;
        anything else lands on the RIGHT leg.
        """
        if isinstance(value, cls):
            return value
        if str(value or "").strip().lower() == "left":
            return cls.LEFT
        return cls.RIGHT

    @property
    def child_field(self):
        return "left_child" if self is Side.LEFT else "right_child"

    @property
    def count_field(self):
        return "left_count" if self is Side.LEFT else "right_count"


# ==========================================================
# MEMBER MODEL (MAIN GENEALOGY TREE)
# ==========================================================
class Member(models.Model):
    member_code = models.BigAutoField(primary_key=True)

    name = models.CharField(max_length=200)
    email = models.EmailField(unique=True)
    mobile = models.CharField(max_length=20, blank=True, null=True)
    password = models.CharField(max_length=256)

    # -------------------------
    # MLM STRUCTURE
    # -------------------------
    # sponsor is also the structural parent once spillover is resolved
    sponsor = models.ForeignKey(
        "self",
        null=True,
        blank=True,
        db_column="sponsor_code",
        related_name="direct_downlines",
        on_delete=models.PROTECT,
    )
    left_child = models.OneToOneField(
        "self",
        null=True,
        blank=True,
        db_column="left_child",
        related_name="placed_on_left_of",
        on_delete=models.PROTECT,
    )
    right_child = models.OneToOneField(
        "self",
        null=True,
        blank=True,
        db_column="right_child",
        related_name="placed_on_right_of",
        on_delete=models.PROTECT,
    )

    # -------------------------
    # SIDE COUNTERS
    # -------------------------
    left_count = models.PositiveIntegerField(default=0)
    right_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ("member_code",)

    def __str__(self):
        return f"{self.member_code} - {self.name}"

    # -------------------------
    # HELPERS
    # -------------------------
    def child_code(self, side):
        return getattr(self, f"{Side.parse(side).child_field}_id")

    def has_left(self):
        return self.left_child_id is not None

    def has_right(self):
        return self.right_child_id is not None

    def as_public_dict(self):
        """Member record as returned to callers (credential stripped)."""
        return {
            "member_code": self.member_code,
            "name": self.name,
            "email": self.email,
            "mobile": self.mobile,
            "sponsor_code": self.sponsor_id,
            "left_child": self.left_child_id,
            "right_child": self.right_child_id,
            "left_count": self.left_count,
            "right_count": self.right_count,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
