from typing import Dict, List

from dugout.content import Question
from dugout.errors import DuplicateSubmission, InvalidAction
from .base import Applied, AppliedAndAdvanced, GameOver, GameSession, reject
from .scoring import score_exact


class QuizSession(GameSession):
    """Multiple-choice Q&A.

    AwaitingAnswers(i) -> Revealed(i) -> AwaitingAnswers(i + 1) | Finished.
    The reveal fires on its own once every player in the room has answered.
    """
    game_type = 'quiz'
    actions = {
        'answer': 'answer',
        'nextQuestion': 'advance',
        'revealAnswer': 'reveal_now',
    }
    host_actions = frozenset({'nextQuestion', 'revealAnswer'})

    def __init__(self, questions: List[Question], settings=None):
        super().__init__(settings)
        self.questions = list(questions)
        self.index = 0
        self.answers: Dict[str, str] = {}
        self.revealed = False
        self.finished = not self.questions

    @property
    def current(self):
        if 0 <= self.index < len(self.questions):
            return self.questions[self.index]
        return None

    def answer(self, room, connection_id, action):
        value = action.get('answer')
        if not isinstance(value, str):
            return reject(InvalidAction, 'answer must be a string')
        if self.revealed:
            return reject(InvalidAction, 'The answer has already been revealed')
        if connection_id in self.answers:
            return reject(DuplicateSubmission)
        self.answers[connection_id] = value
        player = room.find_player(connection_id)
        events = [('player_answered', {'player_id': connection_id, 'player_name': player.name})]
        private = [('answer_accepted', {'answer': value, 'question_index': self.index})]
        if self._everyone_answered(room):
            events.append(self._reveal(room))
            return AppliedAndAdvanced(events=events, private=private)
        return Applied(events=events, private=private)

    def reveal_now(self, room, connection_id, action):
        if self.revealed:
            return reject(InvalidAction, 'The answer has already been revealed')
        return AppliedAndAdvanced(events=[self._reveal(room)])

    def advance(self, room, connection_id, action):
        if not self.revealed:
            return reject(InvalidAction, 'Reveal the answer before moving on')
        self.answers = {}
        self.revealed = False
        self.index += 1
        if self.index >= len(self.questions):
            self.finished = True
            return GameOver(events=[('game_over', {'players': room.standings()})])
        return AppliedAndAdvanced(events=[('new_question', {'state': self.public_state()})])

    def player_left(self, room, connection_id, former_index):
        if self.finished or self.revealed:
            return None
        self.answers.pop(connection_id, None)
        if self.answers and self._everyone_answered(room):
            return AppliedAndAdvanced(events=[self._reveal(room)])
        return None

    def _everyone_answered(self, room) -> bool:
        return all(p.connection_id in self.answers for p in room.players)

    def _reveal(self, room):
        question = self.current
        self.revealed = True
        gained = score_exact(room.players, self.answers, question.correct, self.settings.correct_points)
        return ('answer_revealed', {
            'question_index': self.index,
            'correct': question.correct,
            'answers': dict(self.answers),
            'round_scores': gained,
            'players': room.standings(),
        })

    def public_state(self):
        question = self.current
        return {
            'type': self.game_type,
            'question_index': self.index,
            'question_count': len(self.questions),
            'question': question.to_public() if question else None,
            'answered': list(self.answers),
            'revealed': self.revealed,
            'finished': self.finished,
        }
