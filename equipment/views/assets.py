from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsConsoleAdmin, get_console_session
from equipment.models import PhysicalAsset
from equipment.serializers import (
    AssetAssignmentSerializer,
    AssignAssetSerializer,
    BulkStatusSerializer,
    PhysicalAssetSerializer,
)
from equipment.services import assets as asset_service
from equipment.services.lifecycle import AssetLifecycle


# =========================
# CRUD
# =========================
class AssetListAPI(APIView):
    permission_classes = [IsConsoleAdmin]

    def get(self, request):
        qs = PhysicalAsset.objects.all()
        status_filter = request.query_params.get("status")
        if status_filter:
            qs = qs.filter(status=status_filter)
        return Response(PhysicalAssetSerializer(qs, many=True).data)

    def post(self, request):
        serializer = PhysicalAssetSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        asset = asset_service.create_asset(serializer.validated_data)
        return Response(PhysicalAssetSerializer(asset).data, status=status.HTTP_201_CREATED)


class AssetDetailAPI(APIView):
    permission_classes = [IsConsoleAdmin]

    def get(self, request, pk):
        return Response(PhysicalAssetSerializer(get_object_or_404(PhysicalAsset, pk=pk)).data)

    def patch(self, request, pk):
        asset = get_object_or_404(PhysicalAsset, pk=pk)
        serializer = PhysicalAssetSerializer(asset, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        expected_version = data.pop("expected_version", None)

        asset = asset_service.update_asset(asset, data, expected_version=expected_version)
        return Response(PhysicalAssetSerializer(asset).data)

    put = patch

    def delete(self, request, pk):
        asset_service.delete_asset(get_object_or_404(PhysicalAsset, pk=pk))
        return Response(status=status.HTTP_204_NO_CONTENT)


# =========================
# LIFECYCLE TRANSITIONS
# =========================
@api_view(["POST"])
@permission_classes([IsConsoleAdmin])
def assign_view(request, pk):
    serializer = AssignAssetSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = dict(serializer.validated_data)

    if not data.get("assigned_by"):
        data["assigned_by"] = get_console_session(request).name

    assignment = AssetLifecycle.assign_asset(asset_id=pk, **data)
    return Response(
        {
            "asset": PhysicalAssetSerializer(assignment.asset).data,
            "assignment": AssetAssignmentSerializer(assignment).data,
        },
        status=status.HTTP_201_CREATED,
    )


@api_view(["POST"])
@permission_classes([IsConsoleAdmin])
def return_view(request, pk):
    asset, closed = AssetLifecycle.return_asset(pk)
    return Response({
        "asset": PhysicalAssetSerializer(asset).data,
        "assignment": AssetAssignmentSerializer(closed).data if closed else None,
    })


def _transition(action):
    @api_view(["POST"])
    @permission_classes([IsConsoleAdmin])
    def view(request, pk):
        asset = action(pk)
        return Response(PhysicalAssetSerializer(asset).data)

    return view


ready_to_return_view = _transition(AssetLifecycle.mark_ready_to_return)
available_view = _transition(AssetLifecycle.mark_available)
maintenance_view = _transition(AssetLifecycle.mark_maintenance)
lost_view = _transition(AssetLifecycle.mark_lost)


@api_view(["POST"])
@permission_classes([IsConsoleAdmin])
def bulk_status_view(request):
    serializer = BulkStatusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    updated = AssetLifecycle.bulk_update_status(
        serializer.validated_data["asset_ids"],
        serializer.validated_data["status"],
    )
    return Response({"updated": updated})


# =========================
# HISTORY / REPORTING
# =========================
@api_view(["GET"])
@permission_classes([IsConsoleAdmin])
def asset_history_view(request, pk):
    asset = get_object_or_404(PhysicalAsset, pk=pk)
    rows = asset_service.asset_history(asset)
    return Response(AssetAssignmentSerializer(rows, many=True).data)


@api_view(["GET"])
@permission_classes([IsConsoleAdmin])
def assignment_history_view(request):
    rows = asset_service.assignment_history()
    return Response(AssetAssignmentSerializer(rows, many=True).data)


@api_view(["GET"])
@permission_classes([IsConsoleAdmin])
def status_counts_view(request):
    return Response(asset_service.status_counts())
