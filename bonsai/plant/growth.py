"""
Grows a bonsai one cell at a time.

A branch walks upwards (or sideways) until its life runs out, drawing a glyph
for every step. While it walks it can spawn more branches at its current
position: trunks fork into trunks and shoots, and anything close to dying
bursts into leaves. A spawned branch is grown to completion before its parent
takes its next step.

The random source is only ever consumed in a fixed order (deltas, spawning,
color, glyph) so a seed always grows the same tree. Resuming a saved tree
depends on that: the tree is regrown from its seed and only the drawing delay
is skipped until the saved branch count is reached.
"""
import logging
import random
import sys
from typing import Iterator, Optional

from bonsai.plant import deltas, glyphs
from bonsai.plant.branch import BranchType, GrowthConfig, GrowthState, Position
from bonsai.util.human import combine_list_and, counted
from bonsai.util.time_util import Clock

# Seconds between autosaves while growing live.
AUTOSAVE_INTERVAL = 10
# Delay while replaying an already saved part of the tree.
FAST_FORWARD_STEP = 0

# A request from a branch to grow another branch: (position, type, life)
Spawn = tuple[Position, BranchType, int]


class NullInput:

    def poll_quit(self) -> bool:
        return False


class GrowthEngine:

    def __init__(self, config: GrowthConfig, rng: random.Random, canvas, *, input=None, clock=None, save_file=None):
        self.config = config.validate()
        self.rng = rng
        self.canvas = canvas
        self.input = input or NullInput()
        self.clock: Clock = clock or Clock()
        self.save_file = save_file

    def new_state(self) -> GrowthState:
        # The first shoot goes left or right at random.
        return GrowthState(
            shoot_counter=self.rng.getrandbits(31),
            last_autosave=self.clock.now(),
        )

    def grow_tree(self, state: Optional[GrowthState] = None) -> GrowthState:
        if state is None:
            state = self.new_state()
        start = Position(self.canvas.width() // 2, self.canvas.height() - 1)
        self.grow(state, start, BranchType.trunk, self.config.life_start)
        logging.info('Grew a tree with {0}'.format(combine_list_and([
            counted(state.branches, 'branch'), counted(state.shoots, 'shoot'), counted(state.trunks, 'trunk'),
        ])))
        return state

    def grow(self, state: GrowthState, position: Position, branch_type: BranchType, life: int):
        """
        Grow a branch and everything that sprouts from it.

        Branches are run from an explicit stack instead of recursing so large
        trees don't hit the interpreter's recursion limit. The order cells are
        drawn in is the same as the recursive version.
        """
        stack: list[Iterator[Spawn]] = [self.branch(state, position, branch_type, life)]
        while stack:
            try:
                child = next(stack[-1])
            except StopIteration:
                stack.pop()
                continue
            stack.append(self.branch(state, *child))

    def branch(self, state: GrowthState, position: Position, branch_type: BranchType, life: int) -> Iterator[Spawn]:
        """
        Body of a single branch. Yields every branch it spawns, which has to be
        fully grown before this one is resumed.
        """
        state.add_branch()
        multiplier = self.config.multiplier
        shoot_cooldown = multiplier

        while life > 0:
            self.check_quit()
            life -= 1
            age = self.config.life_start - life

            dx, dy = deltas.set_deltas(self.rng, branch_type, life, age, multiplier)
            dy = deltas.clamp_to_ground(dy, position.y, self.canvas.height())

            if life < 3:
                # Branch tips fill out into clusters of leaves
                yield position, BranchType.dead, life
            elif branch_type == BranchType.trunk and life < multiplier + 2:
                yield position, BranchType.dying, life
            elif branch_type.is_shoot and life < multiplier + 2:
                yield position, BranchType.dying, life
            elif branch_type == BranchType.trunk and (self.rng.randrange(3) == 0 or life % multiplier == 0):
                if self.rng.randrange(8) == 0 and life > 7:
                    shoot_cooldown = multiplier * 2
                    state.trunks += 1
                    trunk_life = life + self.rng.randrange(5) - 2
                    logging.debug('Trunk forked at {0} with {1} life ({2} trunks)'.format(position, trunk_life, state.trunks))
                    yield position, BranchType.trunk, trunk_life
                elif shoot_cooldown <= 0:
                    shoot_cooldown = multiplier * 2
                    shoot = state.next_shoot()
                    logging.debug('Shoot {0} grows {1} from {2}'.format(state.shoots, shoot.name, position))
                    yield position, shoot, life + multiplier
            shoot_cooldown -= 1

            position = position.moved(dx, dy)

            color, bold = glyphs.choose_color(self.rng, glyphs.effective_type(branch_type, life))
            glyph = glyphs.choose_string(self.rng, branch_type, life, dx, dy, self.config.leaves)
            self.canvas.put(position.x, position.y, glyph, color, bold)

            if self.config.live:
                self.pace(state)

    def check_quit(self):
        if self.input.poll_quit():
            logging.info('Quit requested, stopping.')
            sys.exit(0)

    def replaying(self, state: GrowthState) -> bool:
        target = self.config.resume_target
        return target is not None and state.branches < target

    def pace(self, state: GrowthState):
        self.canvas.refresh()
        if self.replaying(state):
            self.clock.sleep(FAST_FORWARD_STEP)
            return
        self.clock.sleep(self.config.time_step)
        if self.save_file is None:
            return
        now = self.clock.now()
        if now - state.last_autosave > AUTOSAVE_INTERVAL:
            self.save_file.save(self.config.seed, state.branches)
            state.last_autosave = now
