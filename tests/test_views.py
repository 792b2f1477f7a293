"""Tests for the view stack."""

import pygame

from beatflap.models import RhythmMode, SessionState
from beatflap.pulse_input import KeyboardPulseSource
from beatflap.scores import InMemoryScoreStore
from beatflap.views.base import ViewAction, ViewContext, ViewManager
from beatflap.views.game_view import GameView
from beatflap.views.menu_view import MenuView


class _Recorder:
    log: list[str] = []

    def __init__(self) -> None:
        self.context = None

    def on_enter(self, context):
        self.context = context
        self.log.append(f"enter {self.name}")

    def on_exit(self):
        self.log.append(f"exit {self.name}")

    def handle_event(self, event):
        return None

    def update(self, dt):
        return ViewAction(kind="quit") if self.name == "b" else None

    def draw(self, surface):
        pass


class _A(_Recorder):
    name = "a"
    display_name = "A"


class _B(_Recorder):
    name = "b"
    display_name = "B"


def _manager() -> ViewManager:
    _Recorder.log = []
    manager = ViewManager(ViewContext(screen_size=(400, 600), scores=InMemoryScoreStore()))
    manager.register(_A)
    manager.register(_B)
    return manager


def test_switch_patches_context():
    manager = _manager()
    manager.push("a")
    manager.switch("b", rhythm_mode=RhythmMode.EXTERNAL, unknown=1)
    assert manager.active_view.name == "b"
    assert manager.active_view.context.rhythm_mode == RhythmMode.EXTERNAL
    assert not hasattr(manager.active_view.context, "unknown")
    assert _Recorder.log == ["enter a", "exit a", "enter b"]


def test_pop_reenters_previous():
    manager = _manager()
    manager.push("a")
    manager.push("b")
    manager.pop()
    assert manager.active_view.name == "a"
    assert manager.active_view.context.rhythm_mode == RhythmMode.PASSAGE


def test_quit_action_stops_loop():
    manager = _manager()
    manager.push("a")
    assert manager.update(0.016)
    manager.push("b")
    assert not manager.update(0.016)


def _keyboard_context() -> ViewContext:
    return ViewContext(
        screen_size=(400, 600),
        scores=InMemoryScoreStore(),
        keyboard_input=KeyboardPulseSource(clock=lambda: 0),
    )


def _press(context: ViewContext, key: int) -> None:
    context.keyboard_input.feed_event(pygame.event.Event(pygame.KEYDOWN, key=key))


def test_start_screen_discards_queued_input():
    context = _keyboard_context()
    _press(context, pygame.K_b)
    _press(context, pygame.K_SPACE)
    menu = MenuView()
    menu._context = context
    menu.update(0.016)
    assert context.keyboard_input.poll() is None


def test_start_key_does_not_jump_on_first_frame():
    pygame.font.init()
    context = _keyboard_context()
    _press(context, pygame.K_SPACE)
    view = GameView()
    view.on_enter(context)
    view.update(0.016)
    assert view._loop.state == SessionState.RUNNING
    assert view._loop.session.actor.velocity > 0
