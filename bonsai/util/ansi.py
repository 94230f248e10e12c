# https://gist.github.com/kkrypt0nn/a02506f3712ff2d1c8ca7c9e0aed7c06
import re


ESCAPE = '\u001b'
NORMAL = 0
BOLD = 1
UNDERLINE = 4

FORMAT_STR = '\u001b[{values}m'

# Discord draws 30 as gray, terminals draw it as black; terminals get the bright variant.
GRAY = 30
RED = 31
GREEN = 32
YELLOW = 33
BLUE = 34
PINK = 35
CYAN = 36
WHITE = 37

# Added to a color for the 9x range. Discord code blocks ignore these.
BRIGHT = 60

RESET = ESCAPE + '[0m'

_SGR_REGEX = re.compile(r'\x1b\[[0-9;]*m')

CLEAR_SCREEN = ESCAPE + '[2J'
HOME = ESCAPE + '[H'
HIDE_CURSOR = ESCAPE + '[?25l'
SHOW_CURSOR = ESCAPE + '[?25h'


def move_to(x: int, y: int) -> str:
    # Terminal coordinates are 1 based.
    return '{0}[{1};{2}H'.format(ESCAPE, y + 1, x + 1)


def color_code(color: int, bright: bool, *, allow_bright=True) -> int:
    if bright and allow_bright:
        return color + BRIGHT
    return color


def format_attributes(*attributes: int):
    new_attrs = []
    found_base = False
    for attr in attributes:
        if attr is None:
            continue
        if attr < 5:
            found_base = True
            new_attrs.insert(0, str(attr))
        elif attr <= WHITE:
            new_attrs.insert(1, str(attr))
        else:
            new_attrs.append(str(attr))
    if not found_base:
        new_attrs.insert(0, str(NORMAL))
    return FORMAT_STR.format(values=';'.join(new_attrs))


def strip(text: str) -> str:
    """Remove every SGR sequence produced by this module."""
    return _SGR_REGEX.sub('', text)
