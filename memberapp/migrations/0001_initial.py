import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Member",
            fields=[
                ("member_code", models.BigAutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=200)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("mobile", models.CharField(blank=True, max_length=20, null=True)),
                ("password", models.CharField(max_length=256)),
                ("left_count", models.PositiveIntegerField(default=0)),
                ("right_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "sponsor",
                    models.ForeignKey(
                        blank=True,
                        db_column="sponsor_code",
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="direct_downlines",
                        to="memberapp.member",
                    ),
                ),
                (
                    "left_child",
                    models.OneToOneField(
                        blank=True,
                        db_column="left_child",
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="placed_on_left_of",
                        to="memberapp.member",
                    ),
                ),
                (
                    "right_child",
                    models.OneToOneField(
                        blank=True,
                        db_column="right_child",
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="placed_on_right_of",
                        to="memberapp.member",
                    ),
                ),
            ],
            options={
                "ordering": ("member_code",),
            },
        ),
    ]
