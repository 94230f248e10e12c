"""
Tests for the terminal driver, run against in memory streams.
"""
import io

import pytest

from bonsai import terminal
from bonsai.plant.branch import GrowthConfig
from bonsai.plant.glyphs import Color
from bonsai.terminal import DriverOptions, KeyboardInput, MessageBox, TerminalCanvas
from bonsai.util import ansi
from bonsai.util.canvas import Canvas
from bonsai.util.persistence import SaveFile, SaveFileError

from tests.conftest import FakeClock


class TestMessageBox:

    def test_short_message_fits_on_one_line(self) -> None:
        box = MessageBox('hi', 80, 24)
        assert box.lines == ['hi']
        assert (box.x, box.y, box.width, box.height) == (54, 15, 7, 3)

    def test_long_message_wraps_to_a_quarter(self) -> None:
        box = MessageBox('the quick brown fox jumps over the lazy dog', 80, 24)
        assert all(len(line) <= 20 for line in box.lines)
        assert len(box.lines) > 1
        assert box.width == 24

    def test_draw(self) -> None:
        box = MessageBox('hi', 20, 10)
        canvas = Canvas(20, 10)
        box.draw(canvas)
        rows = canvas.rows()
        assert rows[box.y][box.x:] == '┌─────┐'
        assert rows[box.y + 1][box.x:] == '│ hi  │'
        assert rows[box.y + 2][box.x:] == '└─────┘'

    def test_contains(self) -> None:
        box = MessageBox('hi', 80, 24)
        assert box.contains(54, 15)
        assert box.contains(60, 17)
        assert not box.contains(61, 17)
        assert not box.contains(54, 18)


class TestTerminalCanvas:

    def test_writes_on_refresh(self) -> None:
        stream = io.StringIO()
        canvas = TerminalCanvas(10, 5, stream)
        canvas.put(2, 3, '&', Color.green, False)
        assert stream.getvalue() == ''
        canvas.refresh()
        assert stream.getvalue() == ansi.move_to(2, 3) + ansi.format_attributes(ansi.GREEN) + '&' + ansi.RESET

    def test_covered_cells_are_not_drawn(self) -> None:
        stream = io.StringIO()
        canvas = TerminalCanvas(10, 5, stream, covered=lambda x, y: x >= 5)
        canvas.put(4, 0, 'ab', None, False)
        canvas.refresh()
        assert ansi.strip(stream.getvalue()).endswith('a')
        assert canvas[5, 0].glyph == 'b'


class TestKeyboardInput:

    def test_not_a_tty_never_quits(self) -> None:
        keyboard = KeyboardInput(io.StringIO('q'), screensaver=True)
        assert not keyboard.poll_quit()

    def test_quit_keys(self) -> None:
        assert KeyboardInput(io.StringIO()).is_quit('q')
        assert not KeyboardInput(io.StringIO()).is_quit('x')
        assert KeyboardInput(io.StringIO(), screensaver=True).is_quit('x')
        assert not KeyboardInput(io.StringIO(), screensaver=True).is_quit(None)


class TestResolveConfig:

    def test_load_resumes_saved_tree(self, tmp_path) -> None:
        path = tmp_path / 'bonsai'
        path.write_text('99 40')
        config = terminal.resolve_config(GrowthConfig(seed=5), DriverOptions(load=True), SaveFile(path))
        assert config.seed == 99
        assert config.resume_target == 40

    def test_missing_save_starts_fresh(self, tmp_path) -> None:
        config = terminal.resolve_config(GrowthConfig(seed=5), DriverOptions(load=True), SaveFile(tmp_path / 'none'))
        assert config.seed == 5
        assert config.resume_target is None

    def test_malformed_save_is_fatal(self, tmp_path) -> None:
        path = tmp_path / 'bonsai'
        path.write_text('not a save')
        with pytest.raises(SaveFileError):
            terminal.resolve_config(GrowthConfig(seed=5), DriverOptions(load=True), SaveFile(path))

    def test_zero_seed_comes_from_clock(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setattr(terminal, 'seed_from_time', lambda: 1234)
        config = terminal.resolve_config(GrowthConfig(), DriverOptions(), SaveFile(tmp_path / 'none'))
        assert config.seed == 1234


class TestRun:

    def run(self, tmp_path, **kwargs):
        stdout = io.StringIO()
        options = DriverOptions(save_path=str(tmp_path / 'bonsai'), **kwargs)
        screen = terminal.run(GrowthConfig(seed=42), options, stdin=io.StringIO(), stdout=stdout, clock=FakeClock())
        return screen, stdout.getvalue()

    def test_grows_a_tree_in_a_pot(self, tmp_path) -> None:
        screen, output = self.run(tmp_path)
        rows = screen.rows()
        assert len(rows) == 24
        assert rows[-1].strip() == '(_)                     (_)'
        assert any(row.strip() for row in rows[:20])
        assert output.startswith(ansi.CLEAR_SCREEN + ansi.HOME + ansi.HIDE_CURSOR)
        assert output.endswith(ansi.SHOW_CURSOR)

    def test_same_seed_same_screen(self, tmp_path) -> None:
        first, _ = self.run(tmp_path)
        second, _ = self.run(tmp_path)
        assert first.rows() == second.rows()

    def test_message_sits_above_the_tree(self, tmp_path) -> None:
        screen, _ = self.run(tmp_path, message='hello')
        box = MessageBox('hello', 80, 24)
        assert screen.rows()[box.y + 1][box.x:box.x + box.width] == '│ hello  │'

    def test_saves_when_done(self, tmp_path) -> None:
        self.run(tmp_path, save=True)
        seed, branches = SaveFile(tmp_path / 'bonsai').load()
        assert seed == 42
        assert branches > 0

    def test_loads_and_saves_separate_files(self, tmp_path) -> None:
        old, new = tmp_path / 'old', tmp_path / 'new'
        old.write_text('7 3')
        options = DriverOptions(load=True, save=True, load_path=str(old), save_path=str(new))
        terminal.run(GrowthConfig(seed=42), options, stdin=io.StringIO(), stdout=io.StringIO(), clock=FakeClock())
        assert old.read_text() == '7 3'
        seed, _ = SaveFile(new).load()
        assert seed == 7

    def test_print_screen(self) -> None:
        canvas = Canvas(3, 1)
        canvas.put(0, 0, '&', Color.green, False)
        stream = io.StringIO()
        terminal.print_screen(canvas, stream)
        assert ansi.strip(stream.getvalue()) == '&  \n'
