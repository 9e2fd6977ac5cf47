class InvalidName(Exception):
    pass


class InvalidAmount(Exception):
    pass


class AssetAlreadyExists(Exception):
    pass


class AssetDoesNotExist(Exception):
    pass


class AccountAlreadyExists(Exception):
    pass


class AccountDoesNotExist(Exception):
    pass


class ExchangeAlreadyExists(Exception):
    pass


class ExchangeDoesNotExist(Exception):
    pass
