from simustruct.exceptions import AssetAlreadyExists, AssetDoesNotExist
from simustruct.models import Asset
from simustruct.repositories.base import NamedRepository


class AssetRepository(NamedRepository[Asset]):
    label = "asset"
    already_exists = AssetAlreadyExists
    does_not_exist = AssetDoesNotExist

    def get_key(self, asset: Asset) -> str:
        return asset.name
