import django.db.models.deletion
import phone_field.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("courses", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Trainer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("first_name", models.CharField(max_length=100)),
                ("last_name", models.CharField(max_length=100)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("mobile_number", phone_field.models.PhoneField(blank=True, help_text="Contact phone number", max_length=31)),
                ("expertise_area", models.CharField(blank=True, max_length=255)),
                ("experience_level", models.CharField(choices=[("junior", "Junior"), ("mid_level", "Mid-Level"), ("senior", "Senior"), ("expert", "Expert")], max_length=20)),
                ("profile_image", models.ImageField(blank=True, null=True, upload_to="trainers/images/")),
                ("expertise_course", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="expert_trainers", to="courses.course")),
            ],
            options={
                "ordering": ["last_name", "first_name"],
            },
        ),
        migrations.CreateModel(
            name="TrainerSkill",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("skill", models.CharField(max_length=100)),
                ("trainer", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="skills", to="trainers.trainer")),
            ],
            options={
                "ordering": ["skill"],
                "unique_together": {("trainer", "skill")},
            },
        ),
        migrations.CreateModel(
            name="TrainerDocument",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("file", models.FileField(upload_to="trainers/documents/")),
                ("file_type", models.CharField(blank=True, max_length=100)),
                ("file_size", models.PositiveBigIntegerField(blank=True, null=True)),
                ("trainer", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="documents", to="trainers.trainer")),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="TrainerAssignment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("schedule", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="trainer_assignments", to="courses.courseschedule")),
                ("trainer", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assignments", to="trainers.trainer")),
            ],
            options={
                "unique_together": {("trainer", "schedule")},
            },
        ),
    ]
