"""Basic drawing primitives for SKYFLAP frame buffers.

Buffers are numpy arrays of shape (height, width, 3), RGB uint8.
"""

from typing import Tuple, Optional
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]

GLYPH_HEIGHT = 5
SPACE_WIDTH = 4


def new_buffer(width: int, height: int) -> Buffer:
    """Allocate a black frame buffer."""
    return np.zeros((height, width, 3), dtype=np.uint8)


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    filled: bool = True,
    thickness: int = 1,
) -> None:
    """Draw a rectangle on the buffer.

    Parts outside the buffer are clipped; a non-positive width or height
    draws nothing.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        filled: If True, fill rectangle; if False, draw outline only
        thickness: Line thickness for outline (when filled=False)
    """
    h, w = buffer.shape[:2]

    # Clamp to buffer bounds
    x1 = max(0, min(x, w))
    y1 = max(0, min(y, h))
    x2 = max(0, min(x + width, w))
    y2 = max(0, min(y + height, h))

    if x2 <= x1 or y2 <= y1:
        return

    if filled:
        buffer[y1:y2, x1:x2] = color
    else:
        for t in range(thickness):
            buffer[min(y1 + t, h - 1), x1:x2] = color
            buffer[max(y2 - 1 - t, 0), x1:x2] = color
            buffer[y1:y2, min(x1 + t, w - 1)] = color
            buffer[y1:y2, max(x2 - 1 - t, 0)] = color


def measure_text(text: str, scale: int = 1, font: Optional[dict] = None) -> Tuple[int, int]:
    """Width and height in pixels that draw_text would cover."""
    if font is None:
        font = _get_default_font()

    width = 0
    for char in text:
        char_data = font.get(char.upper(), font.get('?', []))
        if char == ' ' or not char_data:
            width += SPACE_WIDTH * scale
            continue
        width += (len(char_data[0]) + 1) * scale
    return width, GLYPH_HEIGHT * scale


def draw_text(
    buffer: Buffer,
    text: str,
    x: int,
    y: int,
    color: Color,
    font: Optional[dict] = None,
    scale: int = 1,
) -> Tuple[int, int]:
    """Draw text using a bitmap font.

    Args:
        buffer: Target numpy array (height, width, 3)
        text: Text string to draw
        x: Starting x coordinate
        y: Starting y coordinate
        color: RGB color tuple
        font: Bitmap font dictionary (char -> 2D array). Uses built-in if None.
        scale: Scale factor for font size

    Returns:
        Tuple of (width, height) of rendered text in pixels
    """
    if font is None:
        font = _get_default_font()

    cursor_x = x
    for char in text:
        char_data = font.get(char.upper(), font.get('?', []))
        if char == ' ' or not char_data:
            cursor_x += SPACE_WIDTH * scale
            continue

        for row_idx, row in enumerate(char_data):
            for col_idx, pixel in enumerate(row):
                if pixel:
                    draw_rect(
                        buffer,
                        cursor_x + col_idx * scale,
                        y + row_idx * scale,
                        scale,
                        scale,
                        color,
                    )

        cursor_x += (len(char_data[0]) + 1) * scale

    return cursor_x - x, GLYPH_HEIGHT * scale


def draw_centered_text(
    buffer: Buffer,
    text: str,
    y: int,
    color: Color,
    scale: int = 1,
    center_x: Optional[int] = None,
) -> Tuple[int, int]:
    """Draw text horizontally centered on center_x (buffer middle by default)."""
    if center_x is None:
        center_x = buffer.shape[1] // 2
    text_w, _ = measure_text(text, scale)
    return draw_text(buffer, text, center_x - text_w // 2, y, color, scale=scale)


def _get_default_font() -> dict:
    """Return a simple 3x5 bitmap font for basic characters."""
    # Each character is a list of rows, each row is a list of 0/1 pixels
    return {
        'A': [[0,1,0], [1,0,1], [1,1,1], [1,0,1], [1,0,1]],
        'B': [[1,1,0], [1,0,1], [1,1,0], [1,0,1], [1,1,0]],
        'C': [[0,1,1], [1,0,0], [1,0,0], [1,0,0], [0,1,1]],
        'D': [[1,1,0], [1,0,1], [1,0,1], [1,0,1], [1,1,0]],
        'E': [[1,1,1], [1,0,0], [1,1,0], [1,0,0], [1,1,1]],
        'F': [[1,1,1], [1,0,0], [1,1,0], [1,0,0], [1,0,0]],
        'G': [[0,1,1], [1,0,0], [1,0,1], [1,0,1], [0,1,1]],
        'H': [[1,0,1], [1,0,1], [1,1,1], [1,0,1], [1,0,1]],
        'I': [[1,1,1], [0,1,0], [0,1,0], [0,1,0], [1,1,1]],
        'J': [[0,0,1], [0,0,1], [0,0,1], [1,0,1], [0,1,0]],
        'K': [[1,0,1], [1,0,1], [1,1,0], [1,0,1], [1,0,1]],
        'L': [[1,0,0], [1,0,0], [1,0,0], [1,0,0], [1,1,1]],
        'M': [[1,0,1], [1,1,1], [1,0,1], [1,0,1], [1,0,1]],
        'N': [[1,0,1], [1,1,1], [1,1,1], [1,0,1], [1,0,1]],
        'O': [[0,1,0], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
        'P': [[1,1,0], [1,0,1], [1,1,0], [1,0,0], [1,0,0]],
        'Q': [[0,1,0], [1,0,1], [1,0,1], [1,1,1], [0,1,1]],
        'R': [[1,1,0], [1,0,1], [1,1,0], [1,0,1], [1,0,1]],
        'S': [[0,1,1], [1,0,0], [0,1,0], [0,0,1], [1,1,0]],
        'T': [[1,1,1], [0,1,0], [0,1,0], [0,1,0], [0,1,0]],
        'U': [[1,0,1], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
        'V': [[1,0,1], [1,0,1], [1,0,1], [0,1,0], [0,1,0]],
        'W': [[1,0,1], [1,0,1], [1,0,1], [1,1,1], [1,0,1]],
        'X': [[1,0,1], [1,0,1], [0,1,0], [1,0,1], [1,0,1]],
        'Y': [[1,0,1], [1,0,1], [0,1,0], [0,1,0], [0,1,0]],
        'Z': [[1,1,1], [0,0,1], [0,1,0], [1,0,0], [1,1,1]],
        '0': [[0,1,0], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
        '1': [[0,1,0], [1,1,0], [0,1,0], [0,1,0], [1,1,1]],
        '2': [[0,1,0], [1,0,1], [0,0,1], [0,1,0], [1,1,1]],
        '3': [[1,1,0], [0,0,1], [0,1,0], [0,0,1], [1,1,0]],
        '4': [[1,0,1], [1,0,1], [1,1,1], [0,0,1], [0,0,1]],
        '5': [[1,1,1], [1,0,0], [1,1,0], [0,0,1], [1,1,0]],
        '6': [[0,1,1], [1,0,0], [1,1,0], [1,0,1], [0,1,0]],
        '7': [[1,1,1], [0,0,1], [0,1,0], [0,1,0], [0,1,0]],
        '8': [[0,1,0], [1,0,1], [0,1,0], [1,0,1], [0,1,0]],
        '9': [[0,1,0], [1,0,1], [0,1,1], [0,0,1], [1,1,0]],
        '?': [[0,1,0], [1,0,1], [0,0,1], [0,0,0], [0,1,0]],
        '!': [[0,1,0], [0,1,0], [0,1,0], [0,0,0], [0,1,0]],
        '.': [[0,0,0], [0,0,0], [0,0,0], [0,0,0], [0,1,0]],
        ',': [[0,0,0], [0,0,0], [0,0,0], [0,1,0], [1,0,0]],
        ':': [[0,0,0], [0,1,0], [0,0,0], [0,1,0], [0,0,0]],
        '-': [[0,0,0], [0,0,0], [1,1,1], [0,0,0], [0,0,0]],
        '+': [[0,0,0], [0,1,0], [1,1,1], [0,1,0], [0,0,0]],
        '*': [[0,0,0], [1,0,1], [0,1,0], [1,0,1], [0,0,0]],
        '#': [[1,0,1], [1,1,1], [1,0,1], [1,1,1], [1,0,1]],
    }
