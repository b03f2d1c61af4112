from touchsnake.board import Board
from touchsnake.config import Config
from touchsnake.game import Outcome
from touchsnake.render import GridRenderer
from touchsnake.simulate import RecordingNavigator, simulate


def test_no_taps_runs_straight_into_the_right_wall():
    cfg = Config(seed=3, screen_size=(400, 400))
    # 40x40 board, head starts at x=20 heading right
    ticks, score, outcome = simulate(cfg, max_ticks=100, touch_every=0)
    assert outcome is Outcome.DEAD
    assert ticks == 20


def test_tick_limit_stops_a_live_session():
    cfg = Config(seed=3, screen_size=(400, 400))
    ticks, _, outcome = simulate(cfg, max_ticks=5, touch_every=0)
    assert ticks == 5
    assert outcome is Outcome.ALIVE


def test_same_seed_same_game():
    cfg = Config(seed=11, screen_size=(400, 400))
    assert simulate(cfg, max_ticks=300) == simulate(cfg, max_ticks=300)


def test_renderer_sees_every_live_tick():
    cfg = Config(seed=5, screen_size=(400, 400))
    renderer = GridRenderer(Board.from_screen(400, 400, 40))
    ticks, score, outcome = simulate(cfg, max_ticks=10, touch_every=0, renderer=renderer)
    assert renderer.frames == ticks
    assert renderer.score == score


def test_recording_navigator():
    nav = RecordingNavigator()
    nav.return_to_menu(Outcome.WON, 42)
    assert (nav.calls, nav.outcome, nav.score) == (1, Outcome.WON, 42)
