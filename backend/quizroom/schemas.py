"""Wire shapes for every named Socket.IO message.

Field names follow the JavaScript clients (camelCase). Inbound payloads are
validated here, before any handler touches room state.
"""
from typing import Any, Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator


OPTION_COUNT = 4


# ---- Inbound (client -> server) ----

class RoomMessage(BaseModel):
    roomId: str

    @field_validator('roomId', mode='before')
    @classmethod
    def numeric_room_code(cls, value):
        # Clients may send a numeric room code; rooms are keyed by its string form
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class CreateRoom(RoomMessage):
    pass


class JoinRoom(RoomMessage):
    name: str


class QuestionPayload(BaseModel):
    text: str = Field(min_length=1, validation_alias=AliasChoices('text', 'question'))
    options: List[str] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correctIndex: int = Field(ge=0, le=OPTION_COUNT - 1)


class AddQuestion(RoomMessage):
    question: QuestionPayload


class StartQuiz(RoomMessage):
    pass


class SubmitAnswer(RoomMessage):
    selectedIndex: int


class NextQuestion(RoomMessage):
    pass


class EndQuiz(RoomMessage):
    pass


class SendManualQuestion(RoomMessage):
    # Shape is checked by ManualQuestion once the caller is known to be the host
    question: Any = None
    options: Any = None
    correctIndex: Any = None


class ManualQuestion(BaseModel):
    question: str
    options: List[str] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correctIndex: int = Field(ge=0, le=OPTION_COUNT - 1)

    @field_validator('question')
    @classmethod
    def question_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('question text is required')
        return value


class GetQuizStatus(RoomMessage):
    pass


INBOUND = {
    'createRoom': CreateRoom,
    'joinRoom': JoinRoom,
    'addQuestion': AddQuestion,
    'startQuiz': StartQuiz,
    'submitAnswer': SubmitAnswer,
    'nextQuestion': NextQuestion,
    'endQuiz': EndQuiz,
    'sendManualQuestion': SendManualQuestion,
    'getQuizStatus': GetQuizStatus,
}


# ---- Outbound (server -> client) ----

class RoomCreated(BaseModel):
    roomId: str


class NewQuestion(BaseModel):
    index: int
    questionNumber: int
    question: str
    options: List[str]


class AnswerResult(BaseModel):
    correct: bool
    correctIndex: int
    currentScore: int
    questionNumber: int


class PlayerResult(BaseModel):
    name: str
    score: int
    totalQuestions: int
    percentage: int


class QuizEnded(BaseModel):
    results: List[PlayerResult]
    totalQuestions: int
    endedBy: Literal['host', 'automatic']


class PlayerView(BaseModel):
    name: str
    score: int
    hasAnswered: bool


class QuizStatus(BaseModel):
    isQuizEnded: bool
    questionIndex: int
    isActive: bool
    currentQuestion: Optional[NewQuestion] = None
    players: Dict[str, PlayerView]


class HostDisconnected(BaseModel):
    roomId: str
