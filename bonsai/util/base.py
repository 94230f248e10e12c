from bonsai.plant.glyphs import Color

# Each pot is a list of rows, each row a list of (text, color, bold) pieces.
BASES = {
    0: [],
    1: [
        [
            (':', Color.gray, True),
            ('___________', Color.green, True),
            ('./~~~\\.', Color.bright_yellow, True),
            ('___________', Color.green, True),
            (':', Color.gray, True),
        ],
        [(' \\                           / ', Color.gray, True)],
        [('  \\_________________________/ ', Color.gray, True)],
        [('  (_)                     (_)', Color.gray, True)],
    ],
    2: [
        [
            ('(', Color.gray, False),
            ('---', Color.green, False),
            ('./~~~\\.', Color.bright_yellow, False),
            ('---', Color.green, False),
            (')', Color.gray, False),
        ],
        [(' (           ) ', Color.gray, False)],
        [('  (_________)  ', Color.gray, False)],
    ],
}


def size(base_type: int) -> tuple[int, int]:
    rows = BASES.get(base_type, [])
    if not rows:
        return 0, 0
    width = max(sum(len(text) for text, _, _ in row) for row in rows)
    return width, len(rows)


def draw(canvas, base_type: int):
    """Draws a pot centered along the bottom of the canvas."""
    rows = BASES.get(base_type, [])
    width, height = size(base_type)
    origin_x = canvas.width() // 2 - width // 2
    origin_y = canvas.height() - height
    for y, row in enumerate(rows):
        x = origin_x
        for text, color, bold in row:
            canvas.put(x, origin_y + y, text, color, bold)
            x += len(text)
