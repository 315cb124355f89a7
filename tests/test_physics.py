from dataclasses import replace

import pytest

from skyflap.game import physics
from skyflap.game.entities import GameRules, PowerUp

from conftest import far_obstacle


def test_gravity_integration(fresh, rules):
    state = replace(fresh, avatar=replace(fresh.avatar, velocity=1.5))
    after = physics.advance(state, rules)

    assert after.avatar.velocity == pytest.approx(1.5 + rules.gravity)
    assert after.avatar.y == pytest.approx(state.avatar.y + after.avatar.velocity)
    assert not after.game_over


def test_repeated_ticks_accumulate_velocity(fresh, rules):
    state = fresh
    for _ in range(5):
        prev = state.avatar
        state = physics.advance(state, rules)
        assert state.avatar.velocity == pytest.approx(prev.velocity + rules.gravity)
        assert state.avatar.y == pytest.approx(prev.y + state.avatar.velocity)


@pytest.mark.parametrize("velocity", [-20.0, 0.0, 3.3, 15.0])
def test_jump_overrides_velocity(fresh, rules, velocity):
    state = replace(fresh, avatar=replace(fresh.avatar, velocity=velocity))
    assert physics.jump(state, rules).avatar.velocity == rules.lift


def test_jump_ignored_after_game_over(fresh, rules):
    state = replace(fresh, game_over=True)
    assert physics.jump(state, rules) is state


def test_scrolls_obstacles_and_power_ups(fresh, rules):
    state = replace(
        fresh,
        obstacles=(far_obstacle(x=200.0),),
        power_ups=(PowerUp(x=210.0, y=200.0, size=20.0),),
    )
    after = physics.advance(state, rules)

    assert after.obstacles[0].x == 200.0 - rules.scroll_speed
    assert after.power_ups[0].x == 210.0 - rules.scroll_speed


def test_falling_below_floor_ends_game(fresh, rules):
    avatar = replace(fresh.avatar, y=rules.canvas_height - fresh.avatar.height, velocity=0.0)
    after = physics.advance(replace(fresh, avatar=avatar), rules)
    assert after.game_over


def test_rising_above_ceiling_ends_game(fresh, rules):
    avatar = replace(fresh.avatar, y=1.0, velocity=-5.0)
    after = physics.advance(replace(fresh, avatar=avatar), rules)
    assert after.avatar.y < 0
    assert after.game_over


def test_touching_floor_exactly_is_allowed(fresh):
    # y + height == canvas height is still inside
    rules = GameRules(gravity=0.5)
    avatar = replace(fresh.avatar, y=459.5, velocity=0.0)
    after = physics.advance(replace(fresh, avatar=avatar), rules)
    assert after.avatar.y == 460.0
    assert not after.game_over
