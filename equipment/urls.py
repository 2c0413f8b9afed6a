from django.urls import path

from equipment.views import assets

urlpatterns = [
    path("assets/", assets.AssetListAPI.as_view(), name="api_assets"),
    path("assets/bulk-status/", assets.bulk_status_view, name="api_asset_bulk_status"),
    path("assets/history/", assets.assignment_history_view, name="api_asset_assignment_history"),
    path("assets/status-counts/", assets.status_counts_view, name="api_asset_status_counts"),
    path("assets/<int:pk>/", assets.AssetDetailAPI.as_view(), name="api_asset_detail"),
    path("assets/<int:pk>/history/", assets.asset_history_view, name="api_asset_history"),

    # lifecycle
    path("assets/<int:pk>/assign/", assets.assign_view, name="api_asset_assign"),
    path("assets/<int:pk>/ready-to-return/", assets.ready_to_return_view, name="api_asset_ready_to_return"),
    path("assets/<int:pk>/return/", assets.return_view, name="api_asset_return"),
    path("assets/<int:pk>/available/", assets.available_view, name="api_asset_available"),
    path("assets/<int:pk>/maintenance/", assets.maintenance_view, name="api_asset_maintenance"),
    path("assets/<int:pk>/lost/", assets.lost_view, name="api_asset_lost"),
]
