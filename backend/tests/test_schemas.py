import pytest
from pydantic import ValidationError

from quizroom.schemas import INBOUND, AddQuestion, ManualQuestion, NewQuestion, SubmitAnswer


def test_every_inbound_event_has_a_schema():
    assert set(INBOUND) == {
        'createRoom', 'joinRoom', 'addQuestion', 'startQuiz', 'submitAnswer',
        'nextQuestion', 'endQuiz', 'sendManualQuestion', 'getQuizStatus',
    }


def test_add_question_accepts_question_alias_for_text():
    msg = AddQuestion.model_validate({
        'roomId': 'R1',
        'question': {'question': '2+2?', 'options': ['1', '2', '3', '4'], 'correctIndex': 3},
    })
    assert msg.question.text == '2+2?'


@pytest.mark.parametrize('question', [
    {'text': 'Q', 'options': ['a', 'b', 'c'], 'correctIndex': 0},
    {'text': 'Q', 'options': ['a', 'b', 'c', 'd'], 'correctIndex': 4},
    {'text': '', 'options': ['a', 'b', 'c', 'd'], 'correctIndex': 0},
    {'options': ['a', 'b', 'c', 'd'], 'correctIndex': 0},
])
def test_add_question_rejects_bad_shapes(question):
    with pytest.raises(ValidationError):
        AddQuestion.model_validate({'roomId': 'R1', 'question': question})


def test_room_id_is_required():
    with pytest.raises(ValidationError):
        SubmitAnswer.model_validate({'selectedIndex': 1})


def test_manual_question_rejects_blank_text():
    with pytest.raises(ValidationError):
        ManualQuestion.model_validate({'question': '   ', 'options': ['a', 'b', 'c', 'd'], 'correctIndex': 1})


def test_new_question_has_no_correct_index_field():
    assert 'correctIndex' not in NewQuestion.model_fields
