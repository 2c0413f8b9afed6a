from django.db import migrations

DEFAULT_ROLES = (
    ("admin", "Full access to the training console"),
    ("student", "Course participant"),
    ("trainer", "Course instructor"),
)


def create_default_roles(apps, schema_editor):
    Role = apps.get_model("accounts", "Role")
    for name, description in DEFAULT_ROLES:
        Role.objects.get_or_create(name=name, defaults={"description": description})


class Migration(migrations.Migration):

    dependencies = [
        ("accounts", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(create_default_roles, migrations.RunPython.noop),
    ]
