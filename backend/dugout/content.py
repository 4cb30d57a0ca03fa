"""Game content packages and the provider that produces them.

The session state machines only consume these shapes. Where the content
comes from (a live stats API, a cache, a static bank) is the provider's
business.
"""
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from . import trivia_bank


@dataclass
class Question:
    prompt: str
    options: List[str]
    correct: str

    def to_public(self):
        # Never leak the answer before the reveal
        return {'question': self.prompt, 'options': list(self.options)}


@dataclass
class SpeedRound:
    title: str
    clue: str
    answers: List[str]
    points: List[int] = field(default_factory=list)

    def points_at(self, idx: int, default: int = 100) -> int:
        if idx < len(self.points) and self.points[idx]:
            return self.points[idx]
        return default

    def to_public(self):
        return {
            'title': self.title,
            'clue': self.clue,
            'slots': len(self.answers),
            'points': [self.points_at(i) for i in range(len(self.answers))],
        }


@dataclass
class GridContent:
    """Nine category labels plus a prefetched challenge bank per category."""
    categories: List[str]
    challenges: Dict[str, List[Question]]
    _drawn: Dict[str, int] = field(default_factory=dict, repr=False)

    def challenge_for(self, category: str) -> Optional[Question]:
        bank = self.challenges.get(category) or []
        if not bank:
            return None
        idx = self._drawn.get(category, 0)
        self._drawn[category] = idx + 1
        return bank[idx % len(bank)]


class ContentProvider:
    """Produces content packages for each game type."""

    def load(self, game_type: str, **kwargs):
        if game_type == 'quiz':
            return self.load_quiz(kwargs.get('count', 10))
        if game_type == 'grid':
            return self.load_grid()
        if game_type == 'speedround':
            return self.load_speedround()
        raise ValueError(f'Unknown game type: {game_type}')

    def load_quiz(self, count: int) -> List[Question]:
        raise NotImplementedError

    def load_grid(self) -> GridContent:
        raise NotImplementedError

    def load_speedround(self) -> List[SpeedRound]:
        raise NotImplementedError


class StaticContentProvider(ContentProvider):
    """Serves the built-in trivia bank, shuffled per game."""

    def __init__(self, rng=None):
        self._rng = rng or random.Random()

    def _question(self, prompt, correct, wrong) -> Question:
        options = [correct] + list(wrong)
        self._rng.shuffle(options)
        return Question(prompt=prompt, options=options, correct=correct)

    def load_quiz(self, count: int) -> List[Question]:
        picks = list(trivia_bank.QUIZ_QUESTIONS)
        self._rng.shuffle(picks)
        return [self._question(*q) for q in picks[:count]]

    def load_grid(self) -> GridContent:
        categories = list(trivia_bank.GRID_CHALLENGES)
        self._rng.shuffle(categories)
        categories = categories[:9]
        challenges = {}
        for category in categories:
            bank = list(trivia_bank.GRID_CHALLENGES[category])
            self._rng.shuffle(bank)
            challenges[category] = [self._question(*q) for q in bank]
        return GridContent(categories=categories, challenges=challenges)

    def load_speedround(self) -> List[SpeedRound]:
        rounds = [SpeedRound(title=r['title'], clue=r['clue'], answers=list(r['answers']), points=list(r['points']))
                  for r in trivia_bank.SPEED_ROUNDS]
        self._rng.shuffle(rounds)
        return rounds
