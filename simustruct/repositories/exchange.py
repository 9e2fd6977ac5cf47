from simustruct.exceptions import ExchangeAlreadyExists, ExchangeDoesNotExist
from simustruct.models import Exchange
from simustruct.repositories.base import NamedRepository


class ExchangeRepository(NamedRepository[Exchange]):
    label = "exchange"
    already_exists = ExchangeAlreadyExists
    does_not_exist = ExchangeDoesNotExist

    def get_key(self, exchange: Exchange) -> str:
        return exchange.name
