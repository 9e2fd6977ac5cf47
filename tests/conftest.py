from pytest import fixture

from simustruct.controllers.factory import get_controllers
from simustruct.models import Account, Asset, Exchange, LedgerMode
from simustruct.repositories.factory import get_repositories
from simustruct.settings import get_settings


@fixture(scope="function")
def settings(monkeypatch):
    monkeypatch.setenv("SIMUSTRUCT_TEST", "true")
    monkeypatch.delenv("SIMUSTRUCT_DEBUG", raising=False)
    monkeypatch.delenv("SIMUSTRUCT_LEDGER_MODE", raising=False)
    monkeypatch.delenv("SIMUSTRUCT_LOG_FILE", raising=False)

    return get_settings()


@fixture(scope="function")
def balanced_settings(settings, monkeypatch):
    monkeypatch.setenv("SIMUSTRUCT_LEDGER_MODE", "balanced")

    return get_settings()


@fixture(scope="function")
def repositories():
    return get_repositories()


@fixture(scope="function")
def controllers(settings, repositories):
    return get_controllers(settings=settings, repositories=repositories)


@fixture(scope="function")
def balanced_controllers(balanced_settings, repositories):
    return get_controllers(settings=balanced_settings, repositories=repositories)


@fixture(scope="function")
def economy(controllers):
    for name in ("Gold", "Silver", "Copper"):
        controllers.assets.create(name)

    controllers.accounts.create("alice")
    controllers.accounts.create("bob")
    controllers.accounts.credit("alice", "Gold", 10)

    controllers.exchanges.create("DEX", "Gold", "Silver")

    return controllers


@fixture(scope="function")
def gold():
    return Asset("Gold")


@fixture(scope="function")
def silver():
    return Asset("Silver")


@fixture(scope="function")
def copper():
    return Asset("Copper")


@fixture(scope="function")
def alice():
    return Account("alice")


@fixture(scope="function")
def dex(gold, silver):
    exchange = Exchange("DEX")
    exchange.add_pool(gold, silver)

    return exchange


@fixture(scope="function")
def balanced_dex(gold, silver):
    exchange = Exchange("DEX", ledger_mode=LedgerMode.BALANCED)
    exchange.add_pool(gold, silver)

    return exchange
