from pprint import pprint as pp

import simustruct.logging  # noqa # pylint: disable=unused-import
from simustruct.controllers.factory import get_controllers
from simustruct.helpers.snapshot import holdings_dataframe, pools_dataframe
from simustruct.repositories.factory import get_repositories
from simustruct.settings import get_settings

s = get_settings()
r = get_repositories()
c = get_controllers(settings=s, repositories=r)

for name in ("Gold", "Silver"):
    c.assets.create(name)

c.accounts.create("alice")
c.accounts.credit("alice", "Gold", 10)

c.exchanges.create("DEX", "Gold", "Silver")
c.exchanges.deposit("DEX", "Gold", 5, "alice")
c.exchanges.trade("DEX", "Gold", "Silver", 3, "alice")

pp([str(account) for account in c.accounts.list()])
pp([str(exchange) for exchange in c.exchanges.list()])

print()
print(holdings_dataframe(c.accounts.list()))
print()
print(pools_dataframe(c.exchanges.list()))
