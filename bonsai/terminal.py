"""
Draws bonsai trees straight onto a terminal.

The screen is split the same way every time: the tree fills everything above
the pot, the pot sits centered on the bottom rows, and an optional message
box floats over the right side of the tree.
"""
import dataclasses
import logging
import os
import random
import select
import sys
import termios
import textwrap
import tty
from dataclasses import dataclass
from typing import Optional

from bonsai.plant.branch import GrowthConfig
from bonsai.plant.glyphs import Color
from bonsai.plant.growth import GrowthEngine
from bonsai.util import ansi, base
from bonsai.util.canvas import Canvas
from bonsai.util.persistence import SaveFile
from bonsai.util.time_util import Clock, seconds_to_human, seed_from_time


@dataclass
class DriverOptions:
    infinite: bool = False
    time_wait: float = 4.0
    print_tree: bool = False
    base_type: int = 1
    message: Optional[str] = None
    load: bool = False
    save: bool = False
    load_path: Optional[str] = None
    save_path: Optional[str] = None


class Terminal:
    """Puts the terminal into cbreak mode with a hidden cursor until exited."""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.old_settings = None

    def __enter__(self):
        if self.stdin.isatty():
            self.old_settings = termios.tcgetattr(self.stdin)
            tty.setcbreak(self.stdin.fileno())
        self.stdout.write(ansi.CLEAR_SCREEN + ansi.HOME + ansi.HIDE_CURSOR)
        self.stdout.flush()
        return self

    def __exit__(self, *args):
        self.stdout.write(ansi.RESET + ansi.CLEAR_SCREEN + ansi.HOME + ansi.SHOW_CURSOR)
        self.stdout.flush()
        if self.old_settings is not None:
            termios.tcsetattr(self.stdin, termios.TCSADRAIN, self.old_settings)

    def size(self) -> tuple[int, int]:
        try:
            size = os.get_terminal_size(self.stdout.fileno())
        except (OSError, ValueError):
            return 80, 24
        return size.columns, size.lines


class KeyboardInput:
    """Non-blocking key checks. ``q`` quits, or any key in screensaver mode."""

    def __init__(self, stream=None, *, screensaver=False):
        self.stream = stream or sys.stdin
        self.screensaver = screensaver

    def read_key(self, timeout: float = 0) -> Optional[str]:
        if not self.stream.isatty():
            return None
        if not select.select([self.stream], [], [], timeout)[0]:
            return None
        return self.stream.read(1) or None

    def is_quit(self, key: Optional[str]) -> bool:
        if key is None:
            return False
        return self.screensaver or key == 'q'

    def poll_quit(self) -> bool:
        return self.is_quit(self.read_key())

    def wait_quit(self, timeout: float) -> bool:
        return self.is_quit(self.read_key(timeout))


class TerminalCanvas(Canvas):
    """
    Canvas that also draws onto the terminal. Writes are buffered until
    ``refresh`` so a step of growth shows up at once.
    """

    def __init__(self, width: int, height: int, stream, *, covered=None):
        super().__init__(width, height)
        self.stream = stream
        self.covered = covered or (lambda x, y: False)
        self.pending: list[str] = []

    def put(self, x: int, y: int, glyph: str, color, bold: bool):
        super().put(x, y, glyph, color, bold)
        style = self._format((color, bold), True)
        for offset, char in enumerate(glyph):
            cx = x + offset
            if not self.in_bounds(cx, y) or self.covered(cx, y):
                continue
            self.pending.append(ansi.move_to(cx, y) + style + char)

    def refresh(self):
        if not self.pending:
            return
        self.stream.write(''.join(self.pending) + ansi.RESET)
        self.stream.flush()
        self.pending.clear()


class MessageBox:
    """Bordered box holding a wrapped message, placed at 70% across and down the screen."""

    BORDER = '┌─┐││└─┘'

    def __init__(self, message: str, columns: int, rows: int):
        limit = int(0.25 * columns)
        if len(message) + 3 <= limit:
            text_width = len(message) + 1
        else:
            text_width = max(limit, 1)
        self.lines = []
        for paragraph in message.split('\n'):
            self.lines.extend(textwrap.wrap(paragraph, text_width) or [''])
        self.x = int(columns * 0.7) - 2
        self.y = int(rows * 0.7) - 1
        self.width = text_width + 4
        self.height = len(self.lines) + 2

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def draw(self, canvas: Canvas):
        top_left, horizontal, top_right, left, right, bottom_left, _, bottom_right = self.BORDER
        inner = self.width - 2
        canvas.clear_area(self.x, self.y, self.width, self.height)
        canvas.put(self.x, self.y, top_left + horizontal * inner + top_right, Color.gray, False)
        for i, line in enumerate(self.lines):
            canvas.put(self.x, self.y + i + 1, left, Color.gray, False)
            canvas.put(self.x + 2, self.y + i + 1, line, None, False)
            canvas.put(self.x + self.width - 1, self.y + i + 1, right, Color.gray, False)
        canvas.put(self.x, self.y + self.height - 1, bottom_left + horizontal * inner + bottom_right, Color.gray, False)


class Screen:
    """One tree's worth of terminal layout."""

    def __init__(self, columns: int, rows: int, stream, options: DriverOptions):
        self.columns = columns
        self.rows = rows
        self.stream = stream
        self.options = options
        self.base_width, self.base_height = base.size(options.base_type)
        self.message = MessageBox(options.message, columns, rows) if options.message else None
        covered = self.message.contains if self.message else None
        self.tree = TerminalCanvas(columns, max(rows - self.base_height, 1), stream, covered=covered)
        self.overlay = TerminalCanvas(columns, rows, stream)

    def draw_frame(self):
        self.stream.write(ansi.CLEAR_SCREEN)
        base.draw(self.overlay, self.options.base_type)
        if self.message is not None:
            self.message.draw(self.overlay)
        self.overlay.refresh()

    def composite(self) -> Canvas:
        screen = Canvas(self.columns, self.rows)
        screen.blit(self.tree, 0, 0)
        if self.message is not None:
            screen.clear_area(self.message.x, self.message.y, self.message.width, self.message.height)
        screen.blit(self.overlay, 0, 0)
        return screen


def resolve_config(config: GrowthConfig, options: DriverOptions, load_file: SaveFile) -> GrowthConfig:
    if options.load:
        saved = load_file.load()
        if saved is not None:
            seed, branches = saved
            logging.info('Resuming seed {0} from {1} branches'.format(seed, branches))
            config = dataclasses.replace(config, seed=seed, resume_target=branches)
    if config.seed == 0:
        config = dataclasses.replace(config, seed=seed_from_time())
    return config.validate()


def run(config: GrowthConfig, options: DriverOptions, *, stdin=None, stdout=None, clock=None) -> Optional[Canvas]:
    """
    Grows trees until done. Returns the last screen so it can be printed once
    the terminal is restored.
    """
    stdout = stdout or sys.stdout
    clock = clock or Clock()
    save_file = SaveFile(options.save_path)
    config = resolve_config(config, options, SaveFile(options.load_path))
    keyboard = KeyboardInput(stdin, screensaver=config.screensaver)
    rng = random.Random(config.seed)

    with Terminal(stdin, stdout) as terminal:
        while True:
            columns, rows = terminal.size()
            screen = Screen(columns, rows, stdout, options)
            screen.draw_frame()

            started = clock.now()
            engine = GrowthEngine(
                config,
                rng,
                screen.tree,
                input=keyboard,
                clock=clock,
                save_file=save_file if options.save else None,
            )
            state = engine.grow_tree()
            screen.tree.refresh()
            logging.info('Tree with seed {0} took {1}'.format(config.seed, seconds_to_human(clock.now() - started)))
            if options.save:
                save_file.save(config.seed, state.branches)

            if not options.infinite:
                break
            if keyboard.wait_quit(options.time_wait):
                sys.exit(0)
            config = dataclasses.replace(config, seed=seed_from_time(), resume_target=None)
            rng.seed(config.seed)

        if not options.print_tree:
            keyboard.read_key(timeout=None)

    return screen.composite()


def print_screen(screen: Canvas, stream=None):
    stream = stream or sys.stdout
    stream.write(screen.render(trim=False) + ansi.RESET + '\n')
    stream.flush()
