from logging import getLogger
from typing import List

from simustruct.controllers.base import RepositoriesAwareController
from simustruct.models import Account

logger = getLogger("controllers.account")


class AccountController(RepositoriesAwareController):
    def create(self, owner: str) -> Account:
        return self.repositories.accounts.create(Account(self.check_name(owner)))

    def get(self, owner: str) -> Account:
        return self.repositories.accounts.get(owner)

    def list(self) -> List[Account]:
        return self.repositories.accounts.list()

    def credit(self, owner: str, asset_name: str, amount: float) -> Account:
        self.check_amount(amount)

        account = self.get(owner)
        asset = self.repositories.assets.get(asset_name)

        logger.debug(f"credit {owner}: {amount} {asset_name}")
        account.add_asset(asset, amount)

        return account

    def debit(self, owner: str, asset_name: str, amount: float) -> bool:
        self.check_amount(amount)

        account = self.get(owner)
        asset = self.repositories.assets.get(asset_name)

        logger.debug(f"debit {owner}: {amount} {asset_name}")

        if not account.remove_asset(asset, amount):
            logger.info(f"debit refused {owner}: {amount} {asset_name}, balance={account.get_balance(asset)}")

            return False

        return True

    def balance(self, owner: str, asset_name: str) -> float:
        return self.get(owner).get_balance(self.repositories.assets.get(asset_name))
