from simustruct.exceptions import InvalidAmount, InvalidName
from simustruct.repositories.factory import Repositories


class RepositoriesAwareController:
    def __init__(self, repositories: Repositories):
        self.repositories = repositories

    @staticmethod
    def check_name(name: str) -> str:
        if not name:
            raise InvalidName("Name must not be empty")

        return name

    @staticmethod
    def check_amount(amount: float) -> float:
        if not amount > 0:
            raise InvalidAmount(f"Amount must be positive, got {amount}")

        return amount
