import math
from typing import List

from quizroom.models import Player, Room
from quizroom.schemas import PlayerResult


def score_answer(player: Player, selected_index: int, correct_index: int) -> bool:
    """Record the player's answer for the open question.

    +1 to the player's score iff ``selected_index`` matches. The caller has
    already checked the player has not answered this question.
    """
    player.has_answered = True
    player.current_answer = selected_index
    correct = selected_index == correct_index
    if correct:
        player.score += 1
    return correct


def percentage(score: int, total_questions: int) -> int:
    if total_questions <= 0:
        return 0
    # Half-up rounding, matching what the browser clients compute
    return int(math.floor(100 * score / total_questions + 0.5))


def final_results(room: Room, total_questions: int) -> List[PlayerResult]:
    """Per-player results, highest score first.

    ``sorted`` is stable, so tied players keep the order they joined in.
    """
    results = [
        PlayerResult(
            name=p.name,
            score=p.score,
            totalQuestions=total_questions,
            percentage=percentage(p.score, total_questions),
        )
        for p in room.players.values()
    ]
    return sorted(results, key=lambda r: r.score, reverse=True)


def question_number(room: Room) -> int:
    return room.question_index + 1


def total_questions(room: Room, ended_by: str) -> int:
    # An explicit host end counts the question still on screen
    if ended_by == 'host':
        return room.question_index + 1
    return room.question_index
