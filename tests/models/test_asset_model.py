from simustruct.models import Asset, Pair


def test_asset_defaults():
    gold = Asset("Gold")

    assert gold.name == "Gold"
    assert gold.total_supply == 0
    assert str(gold) == "Asset(Gold)"


def test_asset_value_identity():
    assert Asset("Gold") == Asset("Gold")
    assert Asset("Gold") != Asset("Silver")
    assert len({Asset("Gold"), Asset("Gold"), Asset("Silver")}) == 2


def test_asset_to_pair(gold, silver):
    pair = gold.to(silver)

    assert pair == Pair(base=gold, quote=silver)
    assert pair.symbol == "Gold-Silver"
    assert pair.revert().symbol == "Silver-Gold"
    assert pair.revert().revert() == pair
