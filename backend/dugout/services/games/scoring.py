from typing import Dict, List, Optional


def award(player, points: int) -> int:
    """Add points to a player. Scores never go down."""
    gained = max(0, int(points))
    player.score += gained
    return gained


def score_exact(players, answers: Dict[str, str], correct: str, points: int) -> Dict[str, int]:
    """Award `points` to every player whose answer equals `correct` exactly."""
    gained = {}
    for p in players:
        submitted = answers.get(p.connection_id)
        gained[p.connection_id] = award(p, points) if submitted is not None and submitted == correct else 0
    return gained


def score_positional(guesses: Optional[List[str]], speed_round, default_points: int = 100) -> int:
    """Sum the point value of every slot where guess i matches expected answer i."""
    total = 0
    for idx, guess in enumerate(guesses or []):
        if idx < len(speed_round.answers) and guess == speed_round.answers[idx]:
            total += speed_round.points_at(idx, default_points)
    return total
