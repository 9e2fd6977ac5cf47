from simustruct.exceptions import AccountAlreadyExists, AccountDoesNotExist
from simustruct.models import Account
from simustruct.repositories.base import NamedRepository


class AccountRepository(NamedRepository[Account]):
    label = "account"
    already_exists = AccountAlreadyExists
    does_not_exist = AccountDoesNotExist

    def get_key(self, account: Account) -> str:
        return account.owner
