from dataclasses import dataclass
from typing import List, Optional

from dugout.content import GridContent, Question
from dugout.errors import InvalidAction, InvalidTarget, NotYourTurn
from .base import Applied, AppliedAndAdvanced, GameOver, GameSession, reject
from .scoring import award

BOARD_SIZE = 9
TIE = -1
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def find_winner(board: List[Optional[int]]) -> Optional[int]:
    """Owner of the first completed line, TIE on a full board, else None."""
    for a, b, c in WIN_LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
    if all(cell is not None for cell in board):
        return TIE
    return None


@dataclass
class Challenge:
    cell: int
    category: str
    question: Question


class GridSession(GameSession):
    """Trivia tic-tac-toe for the first two players in join order."""
    game_type = 'grid'
    actions = {
        'selectCell': 'select_cell',
        'answerTicTacToe': 'answer_challenge',
    }

    def __init__(self, content: GridContent, settings=None):
        super().__init__(settings)
        self.content = content
        self.categories = list(content.categories)
        self.board: List[Optional[int]] = [None] * BOARD_SIZE
        self.turn = 0
        self.challenge: Optional[Challenge] = None
        self.winner: Optional[int] = None

    @staticmethod
    def seats(room) -> int:
        return max(1, min(len(room.players), 2))

    def select_cell(self, room, connection_id, action):
        cell = action.get('cell')
        if not isinstance(cell, int) or isinstance(cell, bool):
            return reject(InvalidAction, 'cell must be an integer')
        if room.index_of(connection_id) != self.turn:
            return reject(NotYourTurn)
        if self.challenge is not None:
            return reject(InvalidAction, 'Answer the current question first')
        if not 0 <= cell < BOARD_SIZE or cell >= len(self.categories):
            return reject(InvalidTarget, f'No such cell: {cell}')
        if self.board[cell] is not None:
            return reject(InvalidTarget, 'That cell is already taken')
        category = self.categories[cell]
        question = self.content.challenge_for(category)
        if question is None:
            return reject(InvalidTarget, f'No question available for {category}')
        self.challenge = Challenge(cell=cell, category=category, question=question)
        player = room.find_player(connection_id)
        payload = {'cell': cell, 'category': category, 'player': player.name}
        payload.update(question.to_public())
        return Applied(events=[('question_asked', payload)])

    def answer_challenge(self, room, connection_id, action):
        value = action.get('answer')
        if not isinstance(value, str):
            return reject(InvalidAction, 'answer must be a string')
        if self.challenge is None:
            return reject(InvalidAction, 'No question in play')
        player_index = room.index_of(connection_id)
        if player_index != self.turn:
            return reject(NotYourTurn)
        challenge = self.challenge
        correct = value == challenge.question.correct
        if correct:
            self.board[challenge.cell] = player_index
            award(room.players[player_index], self.settings.correct_points)
        self.turn = (self.turn + 1) % self.seats(room)
        self.challenge = None
        events = [('cell_result', {
            'cell': challenge.cell,
            'correct': correct,
            'correct_answer': challenge.question.correct,
            'board': list(self.board),
            'turn': self.turn,
            'players': room.standings(),
        })]
        winner = find_winner(self.board)
        if winner is None:
            return AppliedAndAdvanced(events=events)
        self.winner = winner
        self.finished = True
        events.append(('game_over', {
            'winner': self._winner_name(room),
            'winner_index': winner,
            'board': list(self.board),
            'players': room.standings(),
        }))
        return GameOver(events=events)

    def player_left(self, room, connection_id, former_index):
        if self.finished:
            return None
        # Board cells belong to seat indices, not players: when seat 0 leaves,
        # the player who moves into seat 0 inherits its cells.
        changed = False
        if former_index == self.turn:
            if self.challenge is not None:
                self.challenge = None
                changed = True
        elif former_index < self.turn:
            # Keep the turn with the same player after the roster shifts down
            self.turn -= 1
            changed = True
        turn = self.turn % self.seats(room)
        if turn != self.turn:
            self.turn = turn
            changed = True
        if changed:
            return Applied(events=[('grid_update', {'state': self.public_state()})])
        return None

    def _winner_name(self, room) -> str:
        if self.winner == TIE:
            return 'tie'
        if self.winner is not None and self.winner < len(room.players):
            return room.players[self.winner].name
        return f'Player {self.winner + 1}'

    def public_state(self):
        challenge = None
        if self.challenge is not None:
            challenge = {'cell': self.challenge.cell, 'category': self.challenge.category}
            challenge.update(self.challenge.question.to_public())
        return {
            'type': self.game_type,
            'board': list(self.board),
            'categories': list(self.categories),
            'turn': self.turn,
            'challenge': challenge,
            'winner': self.winner,
            'finished': self.finished,
        }
