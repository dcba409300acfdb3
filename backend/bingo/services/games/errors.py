class BingoError(Exception):
    """Base class for recoverable, connection-local game errors.

    ``message`` is safe to send back to the client that caused the error.
    """

    default_message = 'Bingo error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class RoomNotFound(BingoError):
    default_message = 'room does not exist'


class RoomAlreadyExists(BingoError):
    default_message = 'room already exists'


class AdminExists(BingoError):
    default_message = 'room already has an administrator'


class NoPermission(BingoError):
    default_message = 'only the administrator can call numbers'


class InvalidClaim(BingoError):
    default_message = 'bingo claim is not valid'


class InvalidCard(InvalidClaim):
    default_message = 'card must be a 5x5 grid of numbers or FREE'


class NumberNotCalled(BingoError):
    default_message = 'that number has not been called yet'


class AllNumbersDrawn(BingoError):
    default_message = 'all numbers have been drawn'
