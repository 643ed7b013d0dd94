from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Ticket",
            fields=[
                ("id", models.CharField(editable=False, max_length=64, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("email", models.CharField(max_length=254, unique=True)),
                ("phone", models.CharField(blank=True, max_length=50)),
                ("age", models.PositiveSmallIntegerField()),
                ("event_name", models.CharField(max_length=255)),
                ("event_date", models.DateField()),
                ("event_time", models.CharField(blank=True, max_length=50)),
                ("event_location", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField()),
                (
                    "check_state",
                    models.CharField(
                        choices=[("unused", "Unused"), ("used", "Used")],
                        default="unused",
                        max_length=10,
                    ),
                ),
                ("checked_in_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["-created_at"], name="ticket_created_at_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            models.Q(("check_state", "unused"), ("checked_in_at__isnull", True)),
                            models.Q(("check_state", "used"), ("checked_in_at__isnull", False)),
                            _connector="OR",
                        ),
                        name="ticket_checked_in_at_matches_state",
                    ),
                ],
            },
        ),
    ]
