from __future__ import annotations

import json
from copy import deepcopy
from enum import Enum
from logging import getLogger
from typing import Dict, Optional

from pydantic import Field
from pydantic.dataclasses import dataclass

logger = getLogger(__name__)

Reserves = Dict[str, float]


class LedgerMode(str, Enum):
    PARITY = "parity"
    BALANCED = "balanced"


@dataclass(frozen=True)
class Asset:
    name: str
    total_supply: float = 0.0

    def __str__(self):
        return f"Asset({self.name})"

    def to(self, other: Asset) -> Pair:
        return Pair(base=self, quote=other)


@dataclass(frozen=True)
class Pair:
    base: Asset
    quote: Asset

    @property
    def symbol(self) -> str:
        return f"{self.base.name}-{self.quote.name}"

    def revert(self) -> Pair:
        return Pair(base=self.quote, quote=self.base)


@dataclass
class Account:
    owner: str
    holdings: Dict[str, float] = Field(default_factory=dict)

    def __str__(self):
        return f"Account({self.owner}, Holdings: {json.dumps(self.holdings, separators=(',', ':'))})"

    def add_asset(self, asset: Asset, amount: float) -> None:
        self.holdings.setdefault(asset.name, 0)
        self.holdings[asset.name] += amount

    def remove_asset(self, asset: Asset, amount: float) -> bool:
        balance = self.holdings.get(asset.name)

        if balance and balance >= amount:
            balance -= amount

            if balance == 0:
                del self.holdings[asset.name]
            else:
                self.holdings[asset.name] = balance

            return True

        return False

    def get_balance(self, asset: Asset) -> float:
        return self.holdings.get(asset.name, 0)

    def snapshot(self) -> Dict[str, float]:
        return dict(self.holdings)


@dataclass
class Exchange:
    """
    Named set of two-asset pools.

    Pools are keyed by the ordered pair symbol, so a pool only serves
    trades in the direction it was created for. In ``PARITY`` mode
    deposits and trades keep the simulator's historical arithmetic,
    including its two ledger gaps: a deposit with no receiving pool still
    withdraws from the account, and a trade credits the account without
    debiting it. ``BALANCED`` mode closes both.
    """

    name: str
    pools: Dict[str, Reserves] = Field(default_factory=dict)
    ledger_mode: LedgerMode = LedgerMode.PARITY

    def __str__(self):
        return f"Exchange({self.name}, Pools: {json.dumps(self.pools, separators=(',', ':'))})"

    def add_pool(self, asset_a: Asset, asset_b: Asset) -> None:
        self.pools[asset_a.to(asset_b).symbol] = {asset_a.name: 0, asset_b.name: 0}

    def get_pool(self, asset_a: Asset, asset_b: Asset) -> Optional[Reserves]:
        return self.pools.get(asset_a.to(asset_b).symbol)

    def find_pool_holding(self, asset: Asset) -> Optional[Reserves]:
        for reserves in self.pools.values():
            if asset.name in reserves:
                return reserves

        return None

    def deposit(self, asset: Asset, amount: float, account: Account) -> bool:
        reserves = self.find_pool_holding(asset)

        if reserves is None and self.ledger_mode is LedgerMode.BALANCED:
            logger.debug(f"{self.name}: no pool holds {asset.name}, deposit refused")

            return False

        if not account.remove_asset(asset, amount):
            return False

        if reserves is None:
            logger.warning(
                f"{self.name}: no pool holds {asset.name}, "
                f"{amount} withdrawn from {account.owner} went to no pool"
            )

            return True

        reserves[asset.name] += amount

        return True

    def trade(self, asset_from: Asset, asset_to: Asset, amount: float, account: Account) -> bool:
        pair = asset_from.to(asset_to)
        reserves = self.pools.get(pair.symbol)

        if reserves is None:
            if pair.revert().symbol in self.pools:
                logger.debug(f"{self.name}: only {pair.revert().symbol} is open, no pool for {pair.symbol}")

            return False

        # Hyphenated names can map another pair onto the same symbol
        if asset_from.name not in reserves or asset_to.name not in reserves:
            return False

        if self.ledger_mode is LedgerMode.BALANCED:
            return self._swap(reserves, asset_from, asset_to, amount, account)

        if reserves[asset_from.name] < amount:
            return False

        reserves[asset_from.name] -= amount
        reserves[asset_to.name] += amount

        account.add_asset(Asset(asset_to.name), amount)

        return True

    def _swap(
        self, reserves: Reserves, asset_from: Asset, asset_to: Asset, amount: float, account: Account
    ) -> bool:
        # The pool pays out of the destination side and is refilled on the source side.
        if reserves[asset_to.name] < amount:
            return False

        if not account.remove_asset(asset_from, amount):
            return False

        reserves[asset_from.name] += amount
        reserves[asset_to.name] -= amount

        account.add_asset(Asset(asset_to.name), amount)

        return True

    def snapshot(self) -> Dict[str, Reserves]:
        return deepcopy(self.pools)
