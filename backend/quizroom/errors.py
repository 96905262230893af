"""Errors reported back to the originating connection as ``errorMessage``.

Each class carries the fixed, human-readable string clients display. There
are no structured error codes on the wire.
"""


class QuizError(Exception):
    message = 'Something went wrong'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class RoomNotFound(QuizError):
    message = 'Room not found'


class PlayerNotFound(QuizError):
    message = 'Player not found in room'


class AlreadyAnswered(QuizError):
    message = 'You have already answered this question'


class QuizAlreadyEnded(QuizError):
    message = 'Quiz has already ended'


class NotHost(QuizError):
    message = 'Only the host can perform this action'


class InvalidQuestionFormat(QuizError):
    message = 'Invalid question format'
