from dataclasses import replace

import numpy as np

from skyflap.game.entities import PowerUp
from skyflap.graphics import primitives
from skyflap.graphics.renderer import (
    AVATAR,
    BACKGROUND,
    GAME_OVER_TEXT,
    OBSTACLE,
    POWER_UP,
    GameRenderer,
)

from conftest import far_obstacle


def pixel(buffer, x, y):
    return tuple(int(c) for c in buffer[y, x])


def test_draw_rect_clips_and_ignores_empty():
    buf = primitives.new_buffer(10, 10)
    primitives.draw_rect(buf, -5, -5, 8, 8, (1, 2, 3))
    assert pixel(buf, 0, 0) == (1, 2, 3)
    assert pixel(buf, 3, 3) == (0, 0, 0)

    primitives.draw_rect(buf, 5, 5, 3, -4, (9, 9, 9))
    assert not (buf == 9).any()


def test_measure_matches_draw():
    buf = primitives.new_buffer(200, 20)
    drawn = primitives.draw_text(buf, "Score: 12", 0, 0, (255, 255, 255), scale=2)
    assert primitives.measure_text("Score: 12", scale=2) == drawn


def test_playing_frame(fresh):
    renderer = GameRenderer(320, 480)
    state = replace(
        fresh,
        obstacles=(far_obstacle(x=200.0, top=100.0, bottom=30.0),),
        power_ups=(PowerUp(x=210.0, y=200.0, size=20.0),),
    )
    buf = renderer.render(state)

    assert buf.shape == (480, 320, 3)
    assert pixel(buf, 55, 155) == AVATAR
    assert pixel(buf, 220, 50) == OBSTACLE     # top region
    assert pixel(buf, 220, 470) == OBSTACLE    # bottom region
    assert pixel(buf, 220, 300) == BACKGROUND  # gap
    assert pixel(buf, 215, 205) == POWER_UP


def test_hud_text_is_drawn(fresh):
    buf = GameRenderer(320, 480).render(fresh)
    assert (buf[10:25, 10:150] != 0).any()


def test_frame_is_cleared_between_renders(fresh):
    renderer = GameRenderer(320, 480)
    renderer.render(replace(fresh, obstacles=(far_obstacle(x=200.0),)))
    buf = renderer.render(fresh)
    assert pixel(buf, 220, 50) == BACKGROUND


def test_game_over_frame(fresh):
    renderer = GameRenderer(320, 480)
    buf = renderer.render(replace(fresh, game_over=True))

    assert pixel(buf, 55, 155) == BACKGROUND  # avatar not drawn
    assert np.all(buf == GAME_OVER_TEXT, axis=-1).any()

    button = renderer.restart_button()
    assert pixel(buf, int(button.x) + 4, int(button.y) + 4) != BACKGROUND
