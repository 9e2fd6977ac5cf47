from pytest import mark, raises

from simustruct.exceptions import (
    AccountAlreadyExists,
    AccountDoesNotExist,
    AssetDoesNotExist,
    InvalidAmount,
    InvalidName,
)


def test_account_controller_create(controllers):
    alice = controllers.accounts.create("alice")

    assert alice.owner == "alice"
    assert alice.holdings == {}
    assert controllers.accounts.list() == [alice]


def test_account_controller_create_invalid(controllers):
    controllers.accounts.create("alice")

    with raises(InvalidName):
        controllers.accounts.create("")

    with raises(AccountAlreadyExists):
        controllers.accounts.create("alice")


def test_account_controller_credit(economy):
    alice = economy.accounts.credit("alice", "Silver", 4)

    assert alice is economy.accounts.get("alice")
    assert alice.holdings == {"Gold": 10, "Silver": 4}
    assert economy.accounts.balance("alice", "Silver") == 4


@mark.parametrize("amount", [0, -1, float("nan")])
def test_account_controller_credit_invalid_amount(economy, amount):
    with raises(InvalidAmount):
        economy.accounts.credit("alice", "Gold", amount)

    assert economy.accounts.balance("alice", "Gold") == 10


def test_account_controller_credit_unknown(economy):
    with raises(AssetDoesNotExist):
        economy.accounts.credit("alice", "Platinum", 1)

    with raises(AccountDoesNotExist):
        economy.accounts.credit("carol", "Gold", 1)


def test_account_controller_debit(economy):
    assert economy.accounts.debit("alice", "Gold", 4) is True
    assert economy.accounts.balance("alice", "Gold") == 6

    assert economy.accounts.debit("alice", "Gold", 15) is False
    assert economy.accounts.balance("alice", "Gold") == 6

    assert economy.accounts.debit("alice", "Gold", 6) is True
    assert economy.accounts.get("alice").holdings == {}


def test_account_controller_debit_invalid_amount(economy):
    with raises(InvalidAmount):
        economy.accounts.debit("alice", "Gold", 0)


def test_account_controller_balance_of_unheld_asset(economy):
    assert economy.accounts.balance("bob", "Gold") == 0
