from .asset import PhysicalAsset, AssigneeType
from .assignment import AssetAssignment

__all__ = [
    "PhysicalAsset",
    "AssigneeType",
    "AssetAssignment",
]
