from typing import Iterable

from pandas import DataFrame, Index, MultiIndex

from simustruct.models import Account, Exchange


def holdings_dataframe(accounts: Iterable[Account]) -> DataFrame:
    accounts = list(accounts)

    df = DataFrame(
        [account.snapshot() for account in accounts],
        index=Index([account.owner for account in accounts], name="owner"),
    )

    return df.fillna(0)


def pools_dataframe(exchanges: Iterable[Exchange]) -> DataFrame:
    names, symbols, reserves = [], [], []

    for exchange in exchanges:
        for symbol, pool in exchange.snapshot().items():
            names.append(exchange.name)
            symbols.append(symbol)
            reserves.append(pool)

    # Assets a pool does not hold stay NaN
    return DataFrame(reserves, index=MultiIndex.from_arrays([names, symbols], names=["exchange", "pool"]))
