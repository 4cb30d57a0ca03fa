from conftest import make_room
from dugout.content import Question
from dugout.services.games import Applied, AppliedAndAdvanced, GameOver, QuizSession, Rejected


def _quiz(*correct):
    return QuizSession([Question(prompt=f'Q{i}', options=[c, 'other'], correct=c) for i, c in enumerate(correct)])


def _event(outcome, name):
    return next(payload for event, payload in outcome.events if event == name)


def test_single_question_scenario():
    room = make_room('quiz', 'P1', 'P2')
    quiz = _quiz('X')

    first = quiz.apply_action(room, 'P1', {'type': 'answer', 'answer': 'X'})
    assert isinstance(first, Applied)
    assert not quiz.revealed
    assert first.private[0][0] == 'answer_accepted'

    second = quiz.apply_action(room, 'P2', {'type': 'answer', 'answer': 'Y'})
    assert isinstance(second, AppliedAndAdvanced)
    reveal = _event(second, 'answer_revealed')
    assert reveal['correct'] == 'X'
    assert reveal['answers'] == {'P1': 'X', 'P2': 'Y'}
    assert [p.score for p in room.players] == [100, 0]

    over = quiz.apply_action(room, 'P1', {'type': 'nextQuestion'})
    assert isinstance(over, GameOver)
    assert _event(over, 'game_over')['players'] == room.standings()
    assert quiz.finished


def test_answers_are_case_sensitive():
    room = make_room('quiz', 'P1')
    quiz = _quiz('Babe Ruth')
    quiz.apply_action(room, 'P1', {'type': 'answer', 'answer': 'babe ruth'})
    assert quiz.revealed
    assert room.players[0].score == 0


def test_duplicate_answer_rejected():
    room = make_room('quiz', 'P1', 'P2')
    quiz = _quiz('X')
    quiz.apply_action(room, 'P1', {'type': 'answer', 'answer': 'Y'})
    again = quiz.apply_action(room, 'P1', {'type': 'answer', 'answer': 'X'})
    assert isinstance(again, Rejected)
    assert again.error.code == 'DuplicateSubmission'
    assert quiz.answers == {'P1': 'Y'}


def test_answer_after_reveal_never_changes_scores():
    room = make_room('quiz', 'P1', 'P2')
    quiz = _quiz('X')
    quiz.apply_action(room, 'P1', {'type': 'answer', 'answer': 'X'})
    quiz.apply_action(room, 'P2', {'type': 'answer', 'answer': 'Y'})
    before = (dict(quiz.answers), [p.score for p in room.players])

    late = quiz.apply_action(room, 'P2', {'type': 'answer', 'answer': 'X'})
    assert isinstance(late, Rejected)
    assert (quiz.answers, [p.score for p in room.players]) == before


def test_reveal_fires_exactly_once():
    room = make_room('quiz', 'P1', 'P2')
    quiz = _quiz('X')
    quiz.apply_action(room, 'P1', {'type': 'answer', 'answer': 'X'})
    forced = quiz.apply_action(room, 'P1', {'type': 'revealAnswer'})
    assert isinstance(forced, AppliedAndAdvanced)
    assert room.players[0].score == 100

    again = quiz.apply_action(room, 'P1', {'type': 'revealAnswer'})
    assert isinstance(again, Rejected)
    assert room.players[0].score == 100


def test_advance_requires_reveal_and_clears_answers():
    room = make_room('quiz', 'P1', 'P2')
    quiz = _quiz('X', 'Z')
    quiz.apply_action(room, 'P1', {'type': 'answer', 'answer': 'X'})
    early = quiz.apply_action(room, 'P1', {'type': 'nextQuestion'})
    assert isinstance(early, Rejected)

    quiz.apply_action(room, 'P2', {'type': 'answer', 'answer': 'X'})
    nxt = quiz.apply_action(room, 'P1', {'type': 'nextQuestion'})
    assert isinstance(nxt, AppliedAndAdvanced)
    assert quiz.answers == {}
    assert quiz.index == 1
    state = _event(nxt, 'new_question')['state']
    assert state['question'] == {'question': 'Q1', 'options': ['Z', 'other']}
    assert 'correct' not in state['question']


def test_malformed_actions_are_rejected():
    room = make_room('quiz', 'P1')
    quiz = _quiz('X')
    assert quiz.apply_action(room, 'P1', {'type': 'answer', 'answer': 7}).error.code == 'InvalidAction'
    assert quiz.apply_action(room, 'P1', {'type': 'selectCell', 'cell': 0}).error.code == 'InvalidAction'
    assert quiz.apply_action(room, 'P1', 'answer').error.code == 'InvalidAction'
    assert quiz.answers == {}


def test_finished_quiz_is_inert():
    room = make_room('quiz', 'P1')
    quiz = _quiz('X')
    quiz.apply_action(room, 'P1', {'type': 'answer', 'answer': 'X'})
    quiz.apply_action(room, 'P1', {'type': 'nextQuestion'})
    result = quiz.apply_action(room, 'P1', {'type': 'answer', 'answer': 'X'})
    assert result.error.code == 'GameFinished'
    assert room.players[0].score == 100


def test_leaver_unblocks_reveal():
    room = make_room('quiz', 'P1', 'P2')
    quiz = _quiz('X')
    quiz.apply_action(room, 'P1', {'type': 'answer', 'answer': 'X'})
    room.players.pop(1)
    outcome = quiz.player_left(room, 'P2', 1)
    assert isinstance(outcome, AppliedAndAdvanced)
    assert quiz.revealed
    assert room.players[0].score == 100


def test_empty_content_finishes_immediately():
    assert QuizSession([]).finished
