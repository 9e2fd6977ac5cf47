from pydantic import BaseModel, ConfigDict

from simustruct.repositories.account import AccountRepository
from simustruct.repositories.asset import AssetRepository
from simustruct.repositories.exchange import ExchangeRepository


class Repositories(BaseModel):
    assets: AssetRepository
    accounts: AccountRepository
    exchanges: ExchangeRepository

    model_config = ConfigDict(arbitrary_types_allowed=True)


def get_repositories() -> Repositories:
    return Repositories(
        assets=AssetRepository(),
        accounts=AccountRepository(),
        exchanges=ExchangeRepository(),
    )
