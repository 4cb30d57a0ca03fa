"""Recoverable game errors.

Every error here is reported only to the connection that caused it and
never tears down a room.
"""


class GameError(Exception):
    code = 'GameError'
    message = 'Game error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {'code': self.code, 'message': self.message}


class RoomNotFound(GameError):
    code = 'RoomNotFound'
    message = 'Room not found'


class RoomAlreadyStarted(GameError):
    code = 'RoomAlreadyStarted'
    message = 'Game already in progress'


class RoomFull(GameError):
    code = 'RoomFull'
    message = 'Room is full'


class NotHost(GameError):
    code = 'NotHost'
    message = 'Only the host can do that'


class NotYourTurn(GameError):
    code = 'NotYourTurn'
    message = 'It is not your turn'


class DuplicateSubmission(GameError):
    code = 'DuplicateSubmission'
    message = 'You already submitted for this round'


class InvalidTarget(GameError):
    code = 'InvalidTarget'
    message = 'That target is not available'


class InvalidAction(GameError):
    code = 'InvalidAction'
    message = 'Unsupported action'


class NotInRoom(GameError):
    code = 'NotInRoom'
    message = 'You are not in a room'


class StillLoading(GameError):
    code = 'StillLoading'
    message = 'Game is still loading'


class GameFinished(GameError):
    code = 'GameFinished'
    message = 'Game is over'


class RoomCodeExhausted(GameError):
    code = 'RoomCodeExhausted'
    message = 'Could not allocate a room code, try again later'
