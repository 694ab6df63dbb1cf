from collections.abc import Sequence
from io import BytesIO

from PIL import Image as ImageW
from PIL import ImageDraw, ImageFont

from .common import MAX_ATTEMPTS, WORD_LENGTH, Feedback, FeedbackPattern

BLANK = -1
CELL_COLORS = {
    Feedback.CORRECT: (106, 170, 100),
    Feedback.PRESENT: (201, 180, 88),
    Feedback.ABSENT: (120, 124, 126),
    BLANK: (211, 214, 218),
}
BACKGROUND_COLOR = (255, 255, 255)
TEXT_COLOR = (255, 255, 255)

CELL_SIZE = 60
CELL_MARGIN = 5
GRID_MARGIN = 5


def board_size(max_attempts: int = MAX_ATTEMPTS, length: int = WORD_LENGTH) -> tuple[int, int]:
    cell_stride = CELL_SIZE + CELL_MARGIN
    width = GRID_MARGIN * 2 + cell_stride * length - CELL_MARGIN
    height = GRID_MARGIN * 2 + cell_stride * max_attempts - CELL_MARGIN
    return width, height


def render_board(
    history: Sequence[tuple[str, FeedbackPattern]],
    max_attempts: int = MAX_ATTEMPTS,
    length: int = WORD_LENGTH,
) -> bytes:
    """Draw the guess grid for ``history`` as PNG bytes."""
    font = ImageFont.load_default()
    cell_stride = CELL_SIZE + CELL_MARGIN

    image = ImageW.new("RGB", board_size(max_attempts, length), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)

    for row in range(max_attempts):
        y = GRID_MARGIN + row * cell_stride

        for col in range(length):
            x = GRID_MARGIN + col * cell_stride

            if row < len(history) and col < len(history[row][0]):
                guess, pattern = history[row]
                letter = guess[col].upper()
                cell_color = CELL_COLORS[pattern[col]]
            else:
                letter = ""
                cell_color = CELL_COLORS[BLANK]

            draw.rectangle(
                [x, y, x + CELL_SIZE, y + CELL_SIZE], fill=cell_color, outline=None
            )

            if letter:
                text_bbox = draw.textbbox((0, 0), letter, font=font)
                text_width = text_bbox[2] - text_bbox[0]
                text_height = text_bbox[3] - text_bbox[1]

                letter_x = x + (CELL_SIZE - text_width) // 2
                letter_y = y + (CELL_SIZE - text_height) // 2

                draw.text((letter_x, letter_y), letter, fill=TEXT_COLOR, font=font)

    with BytesIO() as output:
        image.save(output, format="PNG")
        return output.getvalue()
