from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional


class ConfigError(ValueError):
    pass


class BranchType(Enum):

    trunk = 0
    shoot_left = 1
    shoot_right = 2
    dying = 3
    dead = 4

    @property
    def is_shoot(self) -> bool:
        return self in (BranchType.shoot_left, BranchType.shoot_right)

    @property
    def is_leafy(self) -> bool:
        return self in (BranchType.dying, BranchType.dead)

    @classmethod
    def shoot_for(cls, counter: int) -> 'BranchType':
        # Odd counters grow right, even counters grow left.
        return cls(counter % 2 + 1)


@dataclass(frozen=True)
class GrowthConfig:
    life_start: int = 32
    multiplier: int = 5
    leaves: tuple[str, ...] = ('&',)
    time_step: float = 0.03
    live: bool = False
    screensaver: bool = False
    seed: int = 0
    resume_target: Optional[int] = None

    def __post_init__(self):
        # Lists from the command line or toml are accepted but stored as tuples.
        object.__setattr__(self, 'leaves', tuple(self.leaves))

    def validate(self) -> 'GrowthConfig':
        if len(self.leaves) == 0:
            raise ConfigError('at least one leaf string is required')
        if any(len(leaf) == 0 for leaf in self.leaves):
            raise ConfigError('leaf strings cannot be empty')
        if self.life_start < 0:
            raise ConfigError('invalid initial life: {0}'.format(self.life_start))
        if self.multiplier < 1:
            raise ConfigError('invalid multiplier: {0} (must be at least 1)'.format(self.multiplier))
        if self.time_step < 0:
            raise ConfigError('invalid step time: {0}'.format(self.time_step))
        if self.seed < 0:
            raise ConfigError('invalid seed: {0}'.format(self.seed))
        if self.resume_target is not None and self.resume_target < 0:
            raise ConfigError('invalid resume target: {0}'.format(self.resume_target))
        return self


@dataclass
class GrowthState:
    """
    Counters shared by every branch of a single tree.

    A new state is made for each tree and thrown away once the trunk returns.
    """

    branches: int = 0
    shoots: int = 0
    shoot_counter: int = 0
    trunks: int = 1
    last_autosave: float = field(default=0.0)

    def add_branch(self) -> int:
        self.branches += 1
        return self.branches

    def next_shoot(self) -> BranchType:
        self.shoots += 1
        self.shoot_counter += 1
        return BranchType.shoot_for(self.shoot_counter)


class Position(NamedTuple):
    x: int
    y: int

    def moved(self, dx: int, dy: int) -> 'Position':
        return Position(self.x + dx, self.y + dy)
