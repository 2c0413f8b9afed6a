import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

ASSIGNEE_TYPES = [("student", "Student"), ("employee", "Employee / Trainer")]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("courses", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="PhysicalAsset",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("serial_number", models.CharField(blank=True, max_length=100, null=True, unique=True)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(blank=True, max_length=100)),
                ("condition_notes", models.TextField(blank=True)),
                ("status", models.CharField(choices=[("available", "Available"), ("rental_in_progress", "Assigned"), ("ready_to_return", "Ready to Return"), ("returned", "Returned"), ("maintenance", "Maintenance"), ("lost", "Lost")], default="available", max_length=30)),
                ("assigned_to_id", models.PositiveBigIntegerField(blank=True, null=True)),
                ("assigned_to_type", models.CharField(blank=True, choices=ASSIGNEE_TYPES, max_length=20, null=True)),
                ("rental_start_date", models.DateField(blank=True, null=True)),
                ("rental_end_date", models.DateField(blank=True, null=True)),
                ("version", models.PositiveIntegerField(default=0)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["status"], name="asset_status_idx")],
            },
        ),
        migrations.CreateModel(
            name="AssetAssignment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("assigned_to_id", models.PositiveBigIntegerField()),
                ("assigned_to_type", models.CharField(choices=ASSIGNEE_TYPES, max_length=20)),
                ("assignment_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("return_date", models.DateTimeField(blank=True, null=True)),
                ("notes", models.TextField(blank=True)),
                ("assigned_by", models.CharField(blank=True, max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("asset", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assignments", to="equipment.physicalasset")),
                ("schedule", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="asset_assignments", to="courses.courseschedule")),
            ],
            options={
                "ordering": ["-assignment_date"],
                "indexes": [models.Index(fields=["asset", "return_date"], name="assignment_asset_open_idx")],
            },
        ),
    ]
