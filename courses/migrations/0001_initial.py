import ckeditor.fields
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("description", ckeditor.fields.RichTextField(blank=True)),
                ("measure_number", models.CharField(blank=True, max_length=100)),
                ("curriculum_file", models.FileField(blank=True, null=True, upload_to="courses/curriculum/")),
                ("curriculum_file_name", models.CharField(blank=True, max_length=255)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="DeliveryMode",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=100, unique=True)),
                ("delivery_method", models.CharField(choices=[("online", "Online"), ("in_person", "In person")], max_length=20)),
                ("delivery_type", models.CharField(choices=[("full_time", "Full time"), ("part_time", "Part time")], max_length=20)),
                ("default_duration_days", models.PositiveIntegerField(default=20, help_text="Suggested duration in working days")),
                ("default_units", models.PositiveIntegerField(blank=True, null=True)),
                ("base_fee", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="CourseOffering",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("measure_number", models.CharField(blank=True, max_length=100)),
                ("duration_days", models.PositiveIntegerField(help_text="Duration in working days", validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5000)])),
                ("units", models.PositiveIntegerField(blank=True, null=True)),
                ("unit_fee", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("fee", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("is_active", models.BooleanField(default=True)),
                ("course", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="offerings", to="courses.course")),
                ("delivery_mode", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="offerings", to="courses.deliverymode")),
            ],
            options={
                "ordering": ["course", "delivery_mode__name"],
                "unique_together": {("course", "delivery_mode")},
            },
        ),
        migrations.CreateModel(
            name="CourseSchedule",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField()),
                ("status", models.CharField(choices=[("upcoming", "Upcoming"), ("ongoing", "Ongoing"), ("completed", "Completed")], default="upcoming", max_length=20)),
                ("course", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="schedules", to="courses.course")),
                ("course_offering", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="schedules", to="courses.courseoffering")),
            ],
            options={
                "ordering": ["start_date"],
                "indexes": [
                    models.Index(fields=["status"], name="schedule_status_idx"),
                    models.Index(fields=["start_date"], name="schedule_start_date_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="CourseMaterial",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(blank=True, max_length=100)),
                ("file", models.FileField(upload_to="courses/materials/")),
                ("file_type", models.CharField(blank=True, max_length=100)),
                ("file_size", models.PositiveBigIntegerField(blank=True, null=True)),
                ("is_active", models.BooleanField(default=True)),
                ("courses", models.ManyToManyField(blank=True, related_name="materials", to="courses.course")),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
