# equipment/services/lifecycle.py
"""
Rental lifecycle of physical assets.

    available ──assign──▶ rental_in_progress ──▶ ready_to_return ──return──▶ returned
        ▲                                                                      │
        └──────────────────────────── mark_available ◀─────────────────────────┘

maintenance / lost are reachable from any state by admin action.
Making an asset available closes whatever assignment is still open on
it, so an asset never carries more than one open assignment.
Only ``assign`` is guarded; the guard is a conditional UPDATE so two
admins racing for the same asset cannot both win.
"""
import logging

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from courses.models import CourseSchedule
from equipment.exceptions import (
    AssetNotFound,
    AssetUnavailable,
    InvalidAssetStatus,
    UnknownAssignee,
)
from equipment.models import PhysicalAsset, AssetAssignment, AssigneeType
from core.exceptions import InvalidInput
from students.models import Student
from trainers.models import Trainer

logger = logging.getLogger(__name__)

ASSIGNEE_MODELS = {
    AssigneeType.STUDENT: Student,
    AssigneeType.EMPLOYEE: Trainer,
}

CLEARED_RENTAL = {
    "assigned_to_id": None,
    "assigned_to_type": None,
    "rental_start_date": None,
    "rental_end_date": None,
}


def _get_asset(asset_id, for_update=False):
    qs = PhysicalAsset.objects
    if for_update:
        qs = qs.select_for_update()
    try:
        return qs.get(pk=asset_id)
    except PhysicalAsset.DoesNotExist:
        raise AssetNotFound(asset_id)


def resolve_assignee(assignee_type, assignee_id):
    model = ASSIGNEE_MODELS.get(assignee_type)
    if model is None:
        raise InvalidInput(f"Unknown assignee type: {assignee_type}")

    assignee = model.objects.filter(pk=assignee_id).first()
    if assignee is None:
        raise UnknownAssignee(assignee_type, assignee_id)
    return assignee


def _write(asset_id, **fields):
    """Unconditional lifecycle write; bumps the version counter."""
    updated = PhysicalAsset.objects.filter(pk=asset_id).update(
        version=F("version") + 1,
        updated_at=timezone.now(),
        **fields,
    )
    if not updated:
        raise AssetNotFound(asset_id)
    return PhysicalAsset.objects.get(pk=asset_id)


def _close_open_assignments(asset_ids):
    """An available asset has no holder, so nothing stays open on it."""
    closed = AssetAssignment.objects.filter(
        asset_id__in=asset_ids,
        return_date__isnull=True,
    ).update(return_date=timezone.now())
    if closed:
        logger.info("Closed %s open assignment(s) on assets made available", closed)
    return closed


class AssetLifecycle:

    # -------------------------------------------------
    # available → rental_in_progress
    # -------------------------------------------------
    @staticmethod
    @transaction.atomic
    def assign_asset(
        *,
        asset_id,
        assignee_id,
        assignee_type,
        assigned_by="",
        notes="",
        schedule_id=None,
    ):
        asset = _get_asset(asset_id)
        resolve_assignee(assignee_type, assignee_id)

        schedule = None
        if schedule_id is not None:
            schedule = CourseSchedule.objects.filter(pk=schedule_id).first()
            if schedule is None:
                raise InvalidInput(f"Course schedule {schedule_id} not found.")

        # the WHERE status = 'available' clause is the guard
        claimed = PhysicalAsset.objects.filter(
            pk=asset_id,
            status=PhysicalAsset.STATUS_AVAILABLE,
        ).update(
            status=PhysicalAsset.STATUS_RENTAL_IN_PROGRESS,
            assigned_to_id=assignee_id,
            assigned_to_type=assignee_type,
            rental_start_date=timezone.localdate(),
            rental_end_date=None,
            version=F("version") + 1,
            updated_at=timezone.now(),
        )

        if not claimed:
            current = (
                PhysicalAsset.objects
                .filter(pk=asset_id)
                .values_list("status", flat=True)
                .first()
            )
            logger.warning(
                "Refused to assign asset %s: status is %s", asset_id, current
            )
            raise AssetUnavailable(asset, current)

        asset.refresh_from_db()
        assignment = AssetAssignment.objects.create(
            asset=asset,
            assigned_to_id=assignee_id,
            assigned_to_type=assignee_type,
            assignment_date=timezone.now(),
            schedule=schedule,
            notes=notes or "",
            assigned_by=assigned_by or "",
        )

        logger.info(
            "Asset %s assigned to %s %s", asset_id, assignee_type, assignee_id
        )
        return assignment

    # -------------------------------------------------
    # rental_in_progress → ready_to_return
    # -------------------------------------------------
    @staticmethod
    def mark_ready_to_return(asset_id):
        asset = _write(asset_id, status=PhysicalAsset.STATUS_READY_TO_RETURN)
        logger.info("Asset %s ready to return", asset_id)
        return asset

    # -------------------------------------------------
    # ready_to_return → returned
    # -------------------------------------------------
    @staticmethod
    @transaction.atomic
    def return_asset(asset_id):
        """
        Flips the asset to ``returned`` and closes its most recent open
        assignment. Proceeds even when no open assignment exists.
        Returns (asset, closed_assignment_or_None).
        """
        _get_asset(asset_id, for_update=True)

        asset = _write(
            asset_id,
            status=PhysicalAsset.STATUS_RETURNED,
            rental_end_date=timezone.localdate(),
        )

        open_assignment = (
            AssetAssignment.objects
            .select_for_update()
            .filter(asset_id=asset_id, return_date__isnull=True)
            .order_by("-assignment_date", "-pk")
            .first()
        )

        if open_assignment is not None:
            open_assignment.return_date = timezone.now()
            open_assignment.save(update_fields=["return_date"])
        else:
            logger.info("Asset %s returned without an open assignment", asset_id)

        logger.info("Asset %s returned", asset_id)
        return asset, open_assignment

    # -------------------------------------------------
    # returned → available
    # -------------------------------------------------
    @staticmethod
    @transaction.atomic
    def mark_available(asset_id):
        asset = _write(
            asset_id,
            status=PhysicalAsset.STATUS_AVAILABLE,
            **CLEARED_RENTAL,
        )
        _close_open_assignments([asset_id])
        logger.info("Asset %s available again", asset_id)
        return asset

    # -------------------------------------------------
    # any → maintenance / lost
    # -------------------------------------------------
    @staticmethod
    def mark_maintenance(asset_id):
        return _write(asset_id, status=PhysicalAsset.STATUS_MAINTENANCE)

    @staticmethod
    def mark_lost(asset_id):
        return _write(asset_id, status=PhysicalAsset.STATUS_LOST)

    # -------------------------------------------------
    # BULK
    # -------------------------------------------------
    @staticmethod
    @transaction.atomic
    def bulk_update_status(asset_ids, status):
        if status not in dict(PhysicalAsset.STATUS_CHOICES):
            raise InvalidAssetStatus(status)

        asset_ids = list(asset_ids)
        fields = {"status": status}
        if status == PhysicalAsset.STATUS_AVAILABLE:
            fields.update(CLEARED_RENTAL)

        updated = PhysicalAsset.objects.filter(pk__in=asset_ids).update(
            version=F("version") + 1,
            updated_at=timezone.now(),
            **fields,
        )
        if status == PhysicalAsset.STATUS_AVAILABLE:
            _close_open_assignments(asset_ids)
        logger.info("Bulk status %s applied to %s asset(s)", status, updated)
        return updated
