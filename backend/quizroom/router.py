"""Event router: the single mutator of room state.

Every inbound message is validated against its schema, then handled with the
registry lock held, so one event's transition is complete before any other
event (on this room or any other) can observe the rooms.
"""
import logging

from pydantic import ValidationError

from .errors import (
    AlreadyAnswered,
    InvalidQuestionFormat,
    NotHost,
    PlayerNotFound,
    QuizAlreadyEnded,
    QuizError,
)
from .models import Player, QuestionRecord
from .registry import RoomRegistry
from .schemas import INBOUND, AnswerResult, HostDisconnected, ManualQuestion, QuizStatus, RoomCreated
from .services.quiz.progression import dispatch_question, end_quiz, send_manual_question
from .services.quiz.scoring import question_number, score_answer
from .transport import Transport


logger = logging.getLogger(__name__)


class QuizRouter:
    def __init__(self, registry: RoomRegistry, transport: Transport, notify_host_disconnect: bool = False):
        self.registry = registry
        self.transport = transport
        self.notify_host_disconnect = notify_host_disconnect
        self._handlers = {
            'createRoom': self.on_create_room,
            'joinRoom': self.on_join_room,
            'addQuestion': self.on_add_question,
            'startQuiz': self.on_start_quiz,
            'submitAnswer': self.on_submit_answer,
            'nextQuestion': self.on_next_question,
            'endQuiz': self.on_end_quiz,
            'sendManualQuestion': self.on_send_manual_question,
            'getQuizStatus': self.on_get_quiz_status,
        }

    # ---- entry points ----

    def handle(self, event: str, sid: str, payload) -> None:
        schema = INBOUND.get(event)
        handler = self._handlers.get(event)
        if schema is None or handler is None:
            logger.warning(f"[unknown-event] event={event} sid={sid}")
            return
        try:
            message = schema.model_validate(payload if payload is not None else {})
        except ValidationError as exc:
            logger.warning(f"[rejected] event={event} sid={sid} errors={exc.error_count()}")
            return
        with self.registry.lock:
            try:
                handler(sid, message)
            except QuizError as exc:
                logger.info(f"[{event}] sid={sid} error={exc.message!r}")
                self.transport.send(sid, 'errorMessage', exc.message)

    def connect(self, sid: str) -> None:
        logger.info(f"[connect] sid={sid}")

    def disconnect(self, sid: str) -> None:
        logger.info(f"[disconnect] sid={sid}")
        with self.registry.lock:
            for room in self.registry.rooms_with_player(sid):
                del room.players[sid]
                self._broadcast_players(room)
            if self.notify_host_disconnect:
                # The room stays host-less; clients may show a notice
                for room in self.registry.rooms_hosted_by(sid):
                    self.transport.broadcast(
                        room.room_id, 'hostDisconnected', HostDisconnected(roomId=room.room_id).model_dump()
                    )

    # ---- handlers ----

    def on_create_room(self, sid, message):
        room = self.registry.create(message.roomId, sid)
        self.transport.subscribe(sid, room.room_id)
        self.transport.send(sid, 'roomCreated', RoomCreated(roomId=room.room_id).model_dump())
        logger.info(f"[createRoom] room={room.room_id} host={sid}")

    def on_join_room(self, sid, message):
        room = self.registry.lookup(message.roomId).unwrap()
        room.players[sid] = Player(name=message.name)
        self.transport.subscribe(sid, room.room_id)
        self._broadcast_players(room)
        logger.info(f"[joinRoom] room={room.room_id} sid={sid} name={message.name!r}")

    def on_add_question(self, sid, message):
        lookup = self.registry.lookup(message.roomId)
        if not lookup.found or not lookup.room.is_host(sid):
            return
        q = message.question
        lookup.room.questions.append(QuestionRecord(text=q.text, options=list(q.options), correct_index=q.correctIndex))

    def on_start_quiz(self, sid, message):
        lookup = self.registry.lookup(message.roomId)
        if not lookup.found:
            return
        dispatch_question(lookup.room, self.transport)

    def on_submit_answer(self, sid, message):
        room = self.registry.lookup(message.roomId).unwrap()
        player = room.players.get(sid)
        if player is None:
            raise PlayerNotFound()
        if player.has_answered:
            raise AlreadyAnswered()
        if room.is_quiz_ended:
            return
        correct_index = room.correct_index()
        if correct_index is None:
            logger.info(f"[submitAnswer] room={room.room_id} sid={sid} no open question")
            return
        correct = score_answer(player, message.selectedIndex, correct_index)
        result = AnswerResult(
            correct=correct,
            correctIndex=correct_index,
            currentScore=player.score,
            questionNumber=question_number(room),
        )
        self.transport.send(sid, 'answerResult', result.model_dump())
        self._broadcast_players(room)

    def on_next_question(self, sid, message):
        lookup = self.registry.lookup(message.roomId)
        if not lookup.found or not lookup.room.is_host(sid):
            return
        room = lookup.room
        if room.is_quiz_ended:
            raise QuizAlreadyEnded()
        room.question_index += 1
        room.reset_answers()
        dispatch_question(room, self.transport)

    def on_end_quiz(self, sid, message):
        room = self.registry.lookup(message.roomId).unwrap()
        if not room.is_host(sid):
            raise NotHost('Only the host can end the quiz')
        if room.is_quiz_ended:
            raise QuizAlreadyEnded()
        end_quiz(room, self.transport, ended_by='host')

    def on_send_manual_question(self, sid, message):
        room = self.registry.lookup(message.roomId).unwrap()
        if not room.is_host(sid):
            raise NotHost('Only the host can send questions')
        if room.is_quiz_ended:
            raise QuizAlreadyEnded()
        try:
            question = ManualQuestion.model_validate({
                'question': message.question,
                'options': message.options,
                'correctIndex': message.correctIndex,
            })
        except ValidationError:
            raise InvalidQuestionFormat() from None
        send_manual_question(room, self.transport, question.question, question.options, question.correctIndex)

    def on_get_quiz_status(self, sid, message):
        room = self.registry.lookup(message.roomId).unwrap()
        status = QuizStatus.model_validate(room.to_status_dict())
        self.transport.send(sid, 'quizStatus', status.model_dump())

    # ---- helpers ----

    def _broadcast_players(self, room):
        self.transport.broadcast(room.room_id, 'playersUpdated', room.players_to_dict())
