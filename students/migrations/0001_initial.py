import django.db.models.deletion
import django.utils.timezone
import django_countries.fields
import phone_field.models
from django.db import migrations, models

LEVELS = [("A1", "A1"), ("A2", "A2"), ("B1", "B1"), ("B2", "B2"), ("C1", "C1"), ("C2", "C2")]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("courses", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Student",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("first_name", models.CharField(max_length=100)),
                ("last_name", models.CharField(max_length=100)),
                ("gender", models.CharField(blank=True, choices=[("male", "Male"), ("female", "Female"), ("other", "Other")], max_length=10)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("mobile_number", phone_field.models.PhoneField(blank=True, help_text="Contact phone number", max_length=31)),
                ("nationality", django_countries.fields.CountryField(max_length=2)),
            ],
            options={
                "ordering": ["last_name", "first_name"],
            },
        ),
        migrations.CreateModel(
            name="StudentAddress",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("street", models.CharField(max_length=255)),
                ("postal_code", models.CharField(max_length=20)),
                ("city", models.CharField(max_length=100)),
                ("student", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="address", to="students.student")),
            ],
            options={
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="StudentEducation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("education_background", models.CharField(choices=[("school", "School"), ("graduation", "Graduation"), ("masters", "Masters"), ("phd", "PhD"), ("diploma", "Diploma"), ("certification", "Certification")], max_length=20)),
                ("english_proficiency", models.CharField(choices=LEVELS, max_length=2)),
                ("german_proficiency", models.CharField(choices=LEVELS, max_length=2)),
                ("student", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="education", to="students.student")),
            ],
            options={
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="ScheduleEnrollment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("enrollment_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("status", models.CharField(choices=[("enrolled", "Enrolled"), ("completed", "Completed"), ("dropped", "Dropped")], default="enrolled", max_length=20)),
                ("schedule", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="enrollments", to="courses.courseschedule")),
                ("student", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="enrollments", to="students.student")),
            ],
            options={
                "ordering": ["-enrollment_date"],
                "unique_together": {("student", "schedule")},
            },
        ),
    ]
