from core.exceptions import BusinessRuleViolation, DuplicateRecord, InvalidInput, NotFound


class AssetNotFound(NotFound):
    code = "asset_not_found"

    def __init__(self, asset_id):
        self.asset_id = asset_id
        super().__init__(f"Asset {asset_id} not found.")


class AssetUnavailable(BusinessRuleViolation):
    code = "asset_unavailable"

    def __init__(self, asset, status):
        self.asset = asset
        self.status = status
        super().__init__(
            f"Asset '{asset.name}' is currently {(status or 'missing').replace('_', ' ')} "
            "and cannot be assigned."
        )


class AssetInUse(BusinessRuleViolation):
    code = "asset_in_use"

    def __init__(self, asset):
        self.asset = asset
        super().__init__(
            f"Asset '{asset.name}' has an open assignment and cannot be deleted."
        )


class DuplicateSerialNumber(DuplicateRecord):
    code = "duplicate_serial_number"

    def __init__(self, serial_number):
        self.serial_number = serial_number
        super().__init__(f"An asset with serial number {serial_number} already exists.")


class InvalidAssetStatus(InvalidInput):
    code = "invalid_status"

    def __init__(self, status):
        self.status = status
        super().__init__(f"Unknown asset status: {status}")


class UnknownAssignee(InvalidInput):
    code = "unknown_assignee"

    def __init__(self, assignee_type, assignee_id):
        super().__init__(f"No {assignee_type} with id {assignee_id}.")


class StaleAsset(BusinessRuleViolation):
    code = "stale_asset"

    def __init__(self, asset, expected_version):
        self.asset = asset
        self.expected_version = expected_version
        super().__init__(
            f"Asset '{asset.name}' was changed by someone else; reload it and try again."
        )
