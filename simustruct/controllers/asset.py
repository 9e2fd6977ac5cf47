from typing import List

from simustruct.controllers.base import RepositoriesAwareController
from simustruct.models import Asset


class AssetController(RepositoriesAwareController):
    def create(self, name: str) -> Asset:
        return self.repositories.assets.create(Asset(self.check_name(name)))

    def get(self, name: str) -> Asset:
        return self.repositories.assets.get(name)

    def list(self) -> List[Asset]:
        return self.repositories.assets.list()
