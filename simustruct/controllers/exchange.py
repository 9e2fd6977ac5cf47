from logging import getLogger
from typing import List

from simustruct.controllers.base import RepositoriesAwareController
from simustruct.models import Exchange, LedgerMode
from simustruct.repositories.factory import Repositories

logger = getLogger("controllers.exchange")


class ExchangeController(RepositoriesAwareController):
    def __init__(self, repositories: Repositories, ledger_mode: LedgerMode = LedgerMode.PARITY):
        super().__init__(repositories)

        self.ledger_mode = ledger_mode

    def create(self, name: str, asset_a: str, asset_b: str) -> Exchange:
        self.check_name(name)

        base = self.repositories.assets.get(asset_a)
        quote = self.repositories.assets.get(asset_b)

        exchange = Exchange(name, ledger_mode=self.ledger_mode)
        exchange.add_pool(base, quote)

        return self.repositories.exchanges.create(exchange)

    def get(self, name: str) -> Exchange:
        return self.repositories.exchanges.get(name)

    def list(self) -> List[Exchange]:
        return self.repositories.exchanges.list()

    def add_pool(self, name: str, asset_a: str, asset_b: str) -> Exchange:
        exchange = self.get(name)
        pair = self.repositories.assets.get(asset_a).to(self.repositories.assets.get(asset_b))

        if pair.symbol in exchange.pools:
            logger.info(f"{name}: resetting pool {pair.symbol}")
        else:
            logger.debug(f"{name}: adding pool {pair.symbol}")

        exchange.add_pool(pair.base, pair.quote)

        return exchange

    def deposit(self, name: str, asset_name: str, amount: float, owner: str) -> bool:
        self.check_amount(amount)

        exchange = self.get(name)
        asset = self.repositories.assets.get(asset_name)
        account = self.repositories.accounts.get(owner)

        logger.debug(f"{name}: deposit {amount} {asset_name} from {owner}")

        if not exchange.deposit(asset, amount, account):
            logger.info(f"{name}: deposit refused {amount} {asset_name} from {owner}")

            return False

        return True

    def trade(self, name: str, from_name: str, to_name: str, amount: float, owner: str) -> bool:
        self.check_amount(amount)

        exchange = self.get(name)
        asset_from = self.repositories.assets.get(from_name)
        asset_to = self.repositories.assets.get(to_name)
        account = self.repositories.accounts.get(owner)

        logger.debug(f"{name}: trade {amount} {from_name} -> {to_name} for {owner}")

        if not exchange.trade(asset_from, asset_to, amount, account):
            logger.info(f"{name}: trade refused {amount} {from_name} -> {to_name} for {owner}")

            return False

        return True
