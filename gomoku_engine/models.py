"""
Value types shared by the rules engine, the AI and the game manager.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

Position = Tuple[int, int]
Direction = Tuple[int, int]


class PatternType(str, Enum):
    FIVE = 'five'
    OPEN_FOUR = 'open-four'
    FOUR = 'four'
    OPEN_THREE = 'open-three'
    THREE = 'three'
    TWO = 'two'


class Move(NamedTuple):
    position: Position
    player: int


class PieceCount(NamedTuple):
    black_count: int
    white_count: int


@dataclass(frozen=True)
class Pattern:
    """
    Classified run of one player's stones along one axis.

    Attributes:
        type: PatternType category
        direction: axis (dr, dc) the run lies on
        positions: stones of the run, backward end first
        score: heuristic value of the category
    """
    type: PatternType
    direction: Direction
    positions: Tuple[Position, ...]
    score: int


@dataclass(frozen=True)
class GameOverResult:
    is_over: bool
    winner: Optional[int] = None
    is_draw: bool = False
    winning_line: Optional[List[Position]] = None


@dataclass
class ThreatEvaluation:
    """Hard-tier score of one candidate move."""
    position: Position
    total_score: float
    is_winning_move: bool = False
    blocks_winning_move: bool = False
    threats: List[Pattern] = field(default_factory=list)
