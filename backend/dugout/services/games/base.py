from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from dugout.errors import GameError, GameFinished, InvalidAction

Event = Tuple[str, dict]


@dataclass
class GameSettings:
    correct_points: int = 100
    quiz_question_count: int = 10
    speedround_max_rounds: int = 5

    @classmethod
    def from_config(cls, config):
        return cls(
            correct_points=int(config.get('CORRECT_ANSWER_POINTS', 100)),
            quiz_question_count=int(config.get('QUIZ_QUESTION_COUNT', 10)),
            speedround_max_rounds=int(config.get('SPEEDROUND_MAX_ROUNDS', 5)),
        )


@dataclass
class Outcome:
    """Result of applying one action.

    `events` go to every connection in the room, in order; `private`
    events go only to the connection that sent the action.
    """
    events: List[Event] = field(default_factory=list)
    private: List[Event] = field(default_factory=list)


class Applied(Outcome):
    pass


class AppliedAndAdvanced(Outcome):
    pass


class GameOver(Outcome):
    pass


@dataclass
class Rejected(Outcome):
    error: Optional[GameError] = None


def reject(error_cls, message=None) -> Rejected:
    return Rejected(error=error_cls(message))


class GameSession:
    """Common dispatch contract for the per-game state machines.

    Subclasses map action types to method names in `actions` and list
    the ones only the host may send in `host_actions`. The orchestrator
    enforces host privilege before calling `apply_action`.
    """
    game_type: str = ''
    actions: Dict[str, str] = {}
    host_actions = frozenset()

    def __init__(self, settings: Optional[GameSettings] = None):
        self.settings = settings or GameSettings()
        self.finished = False

    def apply_action(self, room, connection_id: str, action) -> Outcome:
        if self.finished:
            return reject(GameFinished)
        if not isinstance(action, dict):
            return reject(InvalidAction, 'Action must be an object')
        method = self.actions.get(action.get('type'))
        if method is None:
            return reject(InvalidAction, f"Unsupported action for {self.game_type}: {action.get('type')}")
        return getattr(self, method)(room, connection_id, action)

    def player_left(self, room, connection_id: str, former_index: int) -> Optional[Outcome]:
        return None

    def public_state(self) -> dict:
        raise NotImplementedError
