import logging

from quizroom.models import Manual, Preloaded, Room
from quizroom.schemas import NewQuestion, QuizEnded
from .scoring import final_results, question_number, total_questions


logger = logging.getLogger(__name__)


def _open_question(room: Room, transport, view: NewQuestion, active) -> None:
    room.reset_answers()
    room.active_question = active
    room.current_question = view.model_dump()
    room.is_active = True
    transport.broadcast(room.room_id, 'newQuestion', view.model_dump())


def dispatch_question(room: Room, transport) -> None:
    """Broadcast the pre-loaded question under the cursor.

    - No-ops once the quiz has ended
    - Past the last pre-loaded question, ends the quiz automatically
    - Already open: re-broadcasts it, answers given so far still stand
    """
    if room.is_quiz_ended:
        return
    index = room.question_index
    if index >= len(room.questions):
        logger.info(f"[exhausted] room={room.room_id} index={index} questions={len(room.questions)}")
        end_quiz(room, transport, ended_by='automatic')
        return
    record = room.questions[index]
    view = NewQuestion(
        index=index,
        questionNumber=question_number(room),
        question=record.text,
        options=list(record.options),
    )
    if room.is_active and room.active_question == Preloaded(index):
        transport.broadcast(room.room_id, 'newQuestion', view.model_dump())
        logger.info(f"[newQuestion] room={room.room_id} index={index} re-sent")
        return
    _open_question(room, transport, view, Preloaded(index))
    logger.info(f"[newQuestion] room={room.room_id} index={index}")


def send_manual_question(room: Room, transport, text: str, options, correct_index: int) -> None:
    """Open an ad-hoc question; the correct index stays on the room."""
    if room.is_active:
        room.question_index += 1
    view = NewQuestion(
        index=room.question_index,
        questionNumber=question_number(room),
        question=text.strip(),
        options=[opt.strip() for opt in options],
    )
    _open_question(room, transport, view, Manual(correct_index))
    logger.info(f'[manualQuestion] room={room.room_id} index={room.question_index} "{view.question}"')


def end_quiz(room: Room, transport, ended_by: str) -> None:
    room.is_quiz_ended = True
    room.is_active = False
    total = total_questions(room, ended_by)
    payload = QuizEnded(
        results=final_results(room, total),
        totalQuestions=total,
        endedBy=ended_by,
    )
    transport.broadcast(room.room_id, 'quizEnded', payload.model_dump())
    logger.info(f"[quizEnded] room={room.room_id} by={ended_by} total={total} players={len(room.players)}")
