"""
Tests for the grid trees are drawn onto.
"""
from bonsai.plant.glyphs import Color
from bonsai.util import ansi
from bonsai.util.canvas import Canvas, Cell, RecordingCanvas


class TestPut:

    def test_single_cell(self) -> None:
        canvas = Canvas(5, 3)
        canvas.put(1, 2, '&', Color.green, True)
        assert canvas[1, 2] == Cell('&', Color.green, True)
        assert canvas[0, 0].glyph == ' '

    def test_long_glyph_spills_right(self) -> None:
        canvas = Canvas(5, 1)
        canvas.put(1, 0, '/|\\', Color.yellow, False)
        assert canvas.rows() == [' /|\\']

    def test_clipped_at_edges(self) -> None:
        canvas = Canvas(3, 2)
        canvas.put(1, 0, 'abcd', None, False)
        canvas.put(-1, 1, 'xyz', None, False)
        canvas.put(0, 5, 'q', None, False)
        assert canvas.rows() == [' ab', 'yz']

    def test_later_writes_win(self) -> None:
        canvas = Canvas(3, 1)
        canvas.put(0, 0, '/~', Color.yellow, False)
        canvas.put(1, 0, '&', Color.bright_green, True)
        assert canvas.rows() == ['/&']
        assert canvas[1, 0].color == Color.bright_green

    def test_out_of_bounds_lookup(self) -> None:
        assert Canvas(2, 2)[5, 5] is None

    def test_write_multiline(self) -> None:
        canvas = Canvas(4, 3)
        canvas.write(1, 0, 'ab\ncd')
        assert canvas.rows() == [' ab', ' cd', '']


class TestRender:

    def test_trim_to_drawn_area(self) -> None:
        canvas = Canvas(10, 10)
        canvas.put(3, 4, '&&', None, False)
        canvas.put(4, 6, '&', None, False)
        assert canvas.bounding_box() == (3, 4, 4, 6)
        assert canvas.rows(trim=True) == ['&&', '', ' &']

    def test_empty_canvas(self) -> None:
        canvas = Canvas(4, 4)
        assert canvas.bounding_box() is None
        assert canvas.render(trim=True) == ''

    def test_color_changes_emit_codes(self) -> None:
        canvas = Canvas(3, 1)
        canvas.put(0, 0, 'ab', Color.yellow, False)
        canvas.put(2, 0, 'c', Color.bright_yellow, True)
        line = canvas.render()
        assert line.startswith(ansi.format_attributes(ansi.YELLOW) + 'ab')
        assert ansi.format_attributes(ansi.BOLD, ansi.YELLOW + ansi.BRIGHT) + 'c' in line
        assert line.endswith(ansi.RESET)
        assert ansi.strip(line) == 'abc'

    def test_bright_colors_can_be_dropped(self) -> None:
        canvas = Canvas(1, 1)
        canvas.put(0, 0, '&', Color.bright_green, False)
        assert canvas.render(allow_bright=False) == ansi.format_attributes(ansi.GREEN) + '&' + ansi.RESET


class TestLayers:

    def test_blit_copies_drawn_cells(self) -> None:
        screen = Canvas(6, 3)
        screen.put(0, 0, '######', None, False)
        layer = Canvas(3, 2)
        layer.put(1, 0, 'x', Color.gray, True)
        screen.blit(layer, 2, 0)
        assert screen.rows()[0] == '###x##'
        assert screen[3, 0].bold

    def test_clear_area(self) -> None:
        canvas = Canvas(4, 2)
        canvas.write(0, 0, 'abcd\nefgh')
        canvas.clear_area(-1, 0, 3, 1)
        assert canvas.rows() == ['  cd', 'efgh']
        canvas.clear()
        assert canvas.bounding_box() is None


class TestRecordingCanvas:

    def test_records_in_order(self) -> None:
        canvas = RecordingCanvas(4, 4)
        canvas.put(0, 0, 'a', None, False)
        canvas.put(9, 9, 'b', Color.green, True)
        canvas.refresh()
        assert canvas.writes == [(0, 0, 'a', None, False), (9, 9, 'b', Color.green, True)]
        assert canvas.refreshes == 1
