"""
Direction of growth for a single step of a branch.

Every table below is a die: one face per entry, rolled with ``rng.randrange``.
The number of rolls and their order is fixed per branch type, since resuming a
saved tree replays the same seed and has to land on exactly the same cells.
"""
import random

from bonsai.plant.branch import BranchType


def _faces(*weights: tuple[int, int]) -> tuple[int, ...]:
    """Expand ``(count, value)`` pairs into one entry per die face."""
    faces = []
    for count, value in weights:
        faces.extend([value] * count)
    return tuple(faces)


def roll(rng: random.Random, faces: tuple[int, ...]) -> int:
    return faces[rng.randrange(len(faces))]


# Young trunks spread out wide before gaining height.
YOUNG_TRUNK_DX = _faces((1, -2), (3, -1), (2, 0), (3, 1), (1, 2))
# Mature trunks mostly climb.
TRUNK_DY = _faces((3, 0), (7, -1))

SHOOT_DY = _faces((2, -1), (6, 0), (2, 1))
SHOOT_LEFT_DX = _faces((2, -2), (4, -1), (3, 0), (1, 1))
SHOOT_RIGHT_DX = _faces((2, 2), (4, 1), (3, 0), (1, -1))

DYING_DY = _faces((2, -1), (7, 0), (1, 1))
DYING_DX = _faces((1, -3), (2, -2), (3, -1), (3, 0), (3, 1), (2, 2), (1, 3))

DEAD_DY = _faces((3, -1), (4, 0), (3, 1))
WIGGLE_DX = _faces((1, -1), (1, 0), (1, 1))


def raise_interval(multiplier: int) -> int:
    # Only reachable with multiplier >= 2, where this is already >= 1.
    return max(1, int(multiplier * 0.5))


def trunk_deltas(rng: random.Random, life: int, age: int, multiplier: int) -> tuple[int, int]:
    if age <= 2 or life < 4:
        return roll(rng, WIGGLE_DX), 0
    if age < multiplier * 3:
        dy = -1 if age % raise_interval(multiplier) == 0 else 0
        return roll(rng, YOUNG_TRUNK_DX), dy
    dy = roll(rng, TRUNK_DY)
    return roll(rng, WIGGLE_DX), dy


def set_deltas(rng: random.Random, branch_type: BranchType, life: int, age: int, multiplier: int) -> tuple[int, int]:
    """
    Pick ``(dx, dy)`` for the next step of a branch.

    y grows downward, so a negative dy climbs. Vertical movement is always
    rolled before horizontal movement except for the young trunk, whose dy is
    not random.
    """
    match branch_type:
        case BranchType.trunk:
            return trunk_deltas(rng, life, age, multiplier)
        case BranchType.shoot_left:
            dy = roll(rng, SHOOT_DY)
            return roll(rng, SHOOT_LEFT_DX), dy
        case BranchType.shoot_right:
            dy = roll(rng, SHOOT_DY)
            return roll(rng, SHOOT_RIGHT_DX), dy
        case BranchType.dying:
            dy = roll(rng, DYING_DY)
            return roll(rng, DYING_DX), dy
        case BranchType.dead:
            dy = roll(rng, DEAD_DY)
            return roll(rng, WIGGLE_DX), dy
    raise ValueError('Unknown branch type {0}'.format(branch_type))


def clamp_to_ground(dy: int, y: int, max_y: int) -> int:
    """Stop a branch from sinking into the bottom rows of the canvas."""
    if dy > 0 and y > max_y - 2:
        return dy - 1
    return dy
