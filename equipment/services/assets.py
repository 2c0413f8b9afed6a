import logging

from django.db import transaction, IntegrityError
from django.db.models import Count, F
from django.utils import timezone

from equipment.exceptions import AssetInUse, AssetNotFound, DuplicateSerialNumber, StaleAsset
from equipment.models import PhysicalAsset, AssetAssignment
from equipment.services.lifecycle import ASSIGNEE_MODELS

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "name",
    "serial_number",
    "description",
    "category",
    "condition_notes",
)


def _normalize_serial(value):
    value = (value or "").strip()
    return value or None


def _save(asset):
    serial = asset.serial_number
    try:
        with transaction.atomic():
            asset.save()
    except IntegrityError:
        raise DuplicateSerialNumber(serial)
    return asset


def create_asset(data):
    fields = {k: v for k, v in data.items() if k in EDITABLE_FIELDS}
    fields["serial_number"] = _normalize_serial(fields.get("serial_number"))

    asset = _save(PhysicalAsset(**fields))
    logger.info("Created asset %s (%s)", asset.pk, asset.name)
    return asset


def update_asset(asset, data, expected_version=None):
    """
    With ``expected_version`` the edit is written only if the asset's
    version still matches, i.e. no edit or lifecycle write happened since
    the caller read it.
    """
    fields = {k: data[k] for k in EDITABLE_FIELDS if k in data}
    if "serial_number" in fields:
        fields["serial_number"] = _normalize_serial(fields["serial_number"])

    qs = PhysicalAsset.objects.filter(pk=asset.pk)
    if expected_version is not None:
        qs = qs.filter(version=expected_version)

    try:
        with transaction.atomic():
            updated = qs.update(
                version=F("version") + 1,
                updated_at=timezone.now(),
                **fields,
            )
    except IntegrityError:
        raise DuplicateSerialNumber(fields.get("serial_number"))

    if not updated:
        if expected_version is not None and PhysicalAsset.objects.filter(pk=asset.pk).exists():
            logger.warning(
                "Refused stale edit of asset %s (expected version %s)",
                asset.pk, expected_version,
            )
            raise StaleAsset(asset, expected_version)
        raise AssetNotFound(asset.pk)

    asset.refresh_from_db()
    return asset


def delete_asset(asset):
    if asset.assignments.filter(return_date__isnull=True).exists():
        raise AssetInUse(asset)

    logger.info("Deleting asset %s (%s)", asset.pk, asset.name)
    asset.delete()


def asset_history(asset):
    return (
        AssetAssignment.objects
        .filter(asset=asset)
        .select_related("schedule__course")
        .order_by("-assignment_date", "-pk")
    )


def assignment_history():
    return (
        AssetAssignment.objects
        .select_related("asset", "schedule__course")
        .order_by("-assignment_date", "-pk")
    )


def open_assignment(asset):
    return (
        asset.assignments
        .filter(return_date__isnull=True)
        .order_by("-assignment_date", "-pk")
        .first()
    )


def status_counts():
    counts = {status: 0 for status, _ in PhysicalAsset.STATUS_CHOICES}
    rows = PhysicalAsset.objects.values("status").annotate(total=Count("id"))
    for row in rows:
        counts[row["status"]] = row["total"]
    return counts


def assignee_name(assignee_type, assignee_id):
    model = ASSIGNEE_MODELS.get(assignee_type)
    if model is None or assignee_id is None:
        return ""
    assignee = model.objects.filter(pk=assignee_id).first()
    return assignee.full_name if assignee else ""
