from pydantic import BaseModel, ConfigDict

from simustruct.controllers.account import AccountController
from simustruct.controllers.asset import AssetController
from simustruct.controllers.exchange import ExchangeController
from simustruct.repositories.factory import Repositories
from simustruct.settings import AppSettings


class Controllers(BaseModel):
    assets: AssetController
    accounts: AccountController
    exchanges: ExchangeController

    model_config = ConfigDict(arbitrary_types_allowed=True)


def get_controllers(settings: AppSettings, repositories: Repositories) -> Controllers:
    return Controllers(
        assets=AssetController(repositories=repositories),
        accounts=AccountController(repositories=repositories),
        exchanges=ExchangeController(repositories=repositories, ledger_mode=settings.ledger_mode),
    )
