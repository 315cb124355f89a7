from dataclasses import replace

from skyflap.core.events import EventType, flap_event, restart_click_event, tick_event
from skyflap.core.state import Phase
from skyflap.game.entities import PowerUp, new_game

from conftest import far_obstacle


def _force(session, **changes):
    session._state = replace(session.state, **changes)


def test_tick_event_advances_state(session, bus):
    bus.emit(tick_event())
    assert session.state.frame == 1
    assert len(session.state.obstacles) == 1


def test_flap_sets_lift(session, bus, rules):
    session.update()
    bus.emit(flap_event())
    assert session.state.avatar.velocity == rules.lift


def test_restart_matches_fresh_start(session, bus, rules):
    for _ in range(5):
        session.update()
    _force(
        session,
        score=17,
        level=3,
        next_level_score=60,
        power_ups=(PowerUp(x=100.0, y=100.0, size=20.0),),
        power_up_expires_at=500.0,
        game_over=True,
    )

    bus.emit(flap_event())

    assert session.state == new_game(rules)
    assert session.state_machine.phase is Phase.PLAYING


def test_game_over_transition_and_event(session, bus, rules):
    events = []
    bus.subscribe(EventType.GAME_OVER, events.append)
    avatar = replace(session.state.avatar, y=rules.canvas_height - 20.0, velocity=3.0)
    _force(session, avatar=avatar, score=4)

    session.update()
    session.update()  # ignored once over

    assert session.state.game_over
    assert session.state_machine.phase is Phase.GAME_OVER
    assert session.state_machine.context.final_score == 4
    assert len(events) == 1
    assert events[0].data == {"score": 4, "level": 1}


def test_flap_after_game_over_restarts(session, bus):
    _force(session, game_over=True, score=9)
    session.flap()
    assert not session.state.game_over
    assert session.state.score == 0


def test_restart_click_only_when_over(session, bus):
    session.update()
    frame = session.state.frame
    bus.emit(restart_click_event())
    assert session.state.frame == frame

    _force(session, game_over=True)
    bus.emit(restart_click_event())
    assert session.state.frame == 0
    assert not session.state.game_over


def test_score_and_level_events(session, bus):
    seen = []
    bus.subscribe_all(lambda e: seen.append(e.type))
    _force(session, frame=1, score=9, obstacles=(far_obstacle(x=5.0),))

    session.update()

    assert session.state.score == 10
    assert session.state.level == 2
    assert EventType.SCORE_CHANGED in seen
    assert EventType.LEVEL_UP in seen


def test_power_up_event(session, bus, clock, rules):
    seen = []
    bus.subscribe(EventType.POWER_UP_COLLECTED, seen.append)
    _force(session, frame=1, power_ups=(PowerUp(x=52.0, y=150.0, size=20.0),))

    session.update()

    assert session.state.power_up_active
    assert seen[0].data["expires_at"] == clock.now + rules.power_up_duration


def test_restart_emits_and_counts_games(session, bus):
    restarted = []
    bus.subscribe(EventType.RESTARTED, restarted.append)
    _force(session, game_over=True)
    session.state_machine.transition(Phase.GAME_OVER)

    session.flap()

    assert len(restarted) == 1
    assert session.state_machine.context.games_played == 1


def test_detach_stops_ticks(session, bus):
    session.detach()
    bus.emit(tick_event())
    assert session.state.frame == 0
