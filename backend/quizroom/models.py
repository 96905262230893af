from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


@dataclass
class QuestionRecord:
    text: str
    options: List[str]
    correct_index: int


@dataclass(frozen=True)
class Preloaded:
    """Active question taken from the room's pre-loaded sequence."""
    index: int


@dataclass(frozen=True)
class Manual:
    """Active question sent ad hoc by the host; the answer lives only here."""
    correct_index: int


ActiveQuestion = Union[Preloaded, Manual]


@dataclass
class Player:
    name: str
    score: int = 0
    has_answered: bool = False
    current_answer: Optional[int] = None

    def reset_for_question(self) -> None:
        self.has_answered = False
        self.current_answer = None

    def to_dict(self):
        # Public view; the submitted answer is never broadcast
        return {
            'name': self.name,
            'score': self.score,
            'hasAnswered': self.has_answered,
        }


@dataclass
class Room:
    room_id: str
    host_connection: str
    question_index: int = 0
    questions: List[QuestionRecord] = field(default_factory=list)
    current_question: Optional[dict] = None
    active_question: Optional[ActiveQuestion] = None
    is_active: bool = False
    is_quiz_ended: bool = False
    players: Dict[str, Player] = field(default_factory=dict)

    def is_host(self, sid: str) -> bool:
        return self.host_connection == sid

    def reset_answers(self) -> None:
        for player in self.players.values():
            player.reset_for_question()

    def correct_index(self) -> Optional[int]:
        """Correct option for the open question, or None when nothing is open."""
        active = self.active_question
        if isinstance(active, Manual):
            return active.correct_index
        if isinstance(active, Preloaded) and 0 <= active.index < len(self.questions):
            return self.questions[active.index].correct_index
        return None

    def players_to_dict(self):
        return {sid: p.to_dict() for sid, p in self.players.items()}

    def to_status_dict(self):
        return {
            'isQuizEnded': self.is_quiz_ended,
            'questionIndex': self.question_index,
            'isActive': self.is_active,
            'currentQuestion': self.current_question,
            'players': self.players_to_dict(),
        }
