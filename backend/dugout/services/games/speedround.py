from typing import Dict, List

from dugout.content import SpeedRound
from dugout.errors import DuplicateSubmission, InvalidAction
from .base import Applied, AppliedAndAdvanced, GameOver, GameSession, reject
from .scoring import award, score_positional

DEFAULT_SLOT_POINTS = 100


class SpeedRoundSession(GameSession):
    """Name-them-all rounds scored slot by slot.

    Position i of a submission is only ever compared with expected answer i.
    """
    game_type = 'speedround'
    actions = {
        'guess': 'guess',
        'nextRound': 'advance',
        'revealAnswer': 'reveal_now',
    }
    host_actions = frozenset({'nextRound', 'revealAnswer'})

    def __init__(self, rounds: List[SpeedRound], settings=None):
        super().__init__(settings)
        self.rounds = list(rounds)[:self.settings.speedround_max_rounds]
        self.index = 0
        self.guesses: Dict[str, List[str]] = {}
        self.revealed = False
        self.finished = not self.rounds

    @property
    def current(self):
        if 0 <= self.index < len(self.rounds):
            return self.rounds[self.index]
        return None

    def guess(self, room, connection_id, action):
        guesses = action.get('guesses')
        if not isinstance(guesses, list) or not all(isinstance(g, str) for g in guesses):
            return reject(InvalidAction, 'guesses must be a list of strings')
        if self.revealed:
            return reject(InvalidAction, 'This round has already been revealed')
        if connection_id in self.guesses:
            return reject(DuplicateSubmission)
        self.guesses[connection_id] = list(guesses)
        player = room.find_player(connection_id)
        events = [('player_guessed', {'player_id': connection_id, 'player_name': player.name})]
        private = [('answer_accepted', {'guesses': list(guesses), 'round_index': self.index})]
        if self._everyone_guessed(room):
            events.append(self._reveal(room))
            return AppliedAndAdvanced(events=events, private=private)
        return Applied(events=events, private=private)

    def reveal_now(self, room, connection_id, action):
        if self.revealed:
            return reject(InvalidAction, 'This round has already been revealed')
        return AppliedAndAdvanced(events=[self._reveal(room)])

    def advance(self, room, connection_id, action):
        if not self.revealed:
            return reject(InvalidAction, 'Reveal the round before moving on')
        self.guesses = {}
        self.revealed = False
        self.index += 1
        if self.index >= len(self.rounds):
            self.finished = True
            return GameOver(events=[('game_over', {'players': room.standings()})])
        return AppliedAndAdvanced(events=[('new_round', {'state': self.public_state()})])

    def player_left(self, room, connection_id, former_index):
        if self.finished or self.revealed:
            return None
        self.guesses.pop(connection_id, None)
        if self.guesses and self._everyone_guessed(room):
            return AppliedAndAdvanced(events=[self._reveal(room)])
        return None

    def _everyone_guessed(self, room) -> bool:
        return all(p.connection_id in self.guesses for p in room.players)

    def _reveal(self, room):
        speed_round = self.current
        self.revealed = True
        round_scores = {}
        for p in room.players:
            points = score_positional(self.guesses.get(p.connection_id), speed_round, DEFAULT_SLOT_POINTS)
            round_scores[p.connection_id] = award(p, points)
        return ('round_revealed', {
            'round_index': self.index,
            'answers': list(speed_round.answers),
            'points': [speed_round.points_at(i, DEFAULT_SLOT_POINTS) for i in range(len(speed_round.answers))],
            'guesses': {cid: list(g) for cid, g in self.guesses.items()},
            'round_scores': round_scores,
            'players': room.standings(),
        })

    def public_state(self):
        speed_round = self.current
        return {
            'type': self.game_type,
            'round_index': self.index,
            'round_count': len(self.rounds),
            'round': speed_round.to_public() if speed_round else None,
            'submitted': list(self.guesses),
            'revealed': self.revealed,
            'finished': self.finished,
        }
