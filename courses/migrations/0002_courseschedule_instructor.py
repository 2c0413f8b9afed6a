import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("courses", "0001_initial"),
        ("trainers", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="courseschedule",
            name="instructor",
            field=models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="led_schedules", to="trainers.trainer"),
        ),
    ]
