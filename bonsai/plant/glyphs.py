import random
from enum import Enum
from typing import Sequence

from bonsai.plant.branch import BranchType
from bonsai.util import ansi


class Color(Enum):
    """Palette entries as ``(ansi color, bright)``."""

    yellow = (ansi.YELLOW, False)
    bright_yellow = (ansi.YELLOW, True)
    green = (ansi.GREEN, False)
    bright_green = (ansi.GREEN, True)
    gray = (ansi.GRAY, True)

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def bright(self) -> bool:
        return self.value[1]


# Fallback if a branch type has no glyph rule.
UNKNOWN_GLYPH = '?'


def effective_type(branch_type: BranchType, life: int) -> BranchType:
    """Branches with less than 4 life left are drawn as dying, whatever they are."""
    if life < 4 and not branch_type.is_leafy:
        return BranchType.dying
    return branch_type


def choose_color(rng: random.Random, branch_type: BranchType) -> tuple[Color, bool]:
    """Returns the color and whether it should be bold. Always rolls exactly once."""
    match branch_type:
        case BranchType.trunk | BranchType.shoot_left | BranchType.shoot_right:
            if rng.randrange(2) == 0:
                return Color.bright_yellow, True
            return Color.yellow, False
        case BranchType.dying:
            return Color.green, rng.randrange(10) == 0
        case BranchType.dead:
            return Color.bright_green, rng.randrange(3) == 0
    raise ValueError('Unknown branch type {0}'.format(branch_type))


def branch_string(branch_type: BranchType, dx: int, dy: int) -> str:
    match branch_type:
        case BranchType.trunk:
            if dy == 0:
                return '/~'
            if dx < 0:
                return '\\|'
            if dx == 0:
                return '/|\\'
            return '|/'
        case BranchType.shoot_left:
            if dy > 0:
                return '\\'
            if dy == 0:
                return '\\_'
            if dx < 0:
                return '\\|'
            if dx == 0:
                return '/|'
            return '/'
        case BranchType.shoot_right:
            if dy > 0:
                return '/'
            if dy == 0:
                return '_/'
            if dx < 0:
                return '\\|'
            if dx == 0:
                return '/|'
            return '/'
    return UNKNOWN_GLYPH


def choose_string(rng: random.Random, branch_type: BranchType, life: int, dx: int, dy: int, leaves: Sequence[str]) -> str:
    if effective_type(branch_type, life).is_leafy:
        return leaves[rng.randrange(len(leaves))]
    return branch_string(branch_type, dx, dy)
