"""View protocol, ViewContext, ViewAction, and ViewManager."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Literal, Protocol, runtime_checkable

import pygame

from beatflap.models import RhythmMode

if TYPE_CHECKING:
    from beatflap.audio import AudioEngine
    from beatflap.pulse_input import KeyboardPulseSource, MidiPulseSource
    from beatflap.scores import InMemoryScoreStore, ScoreStore


@dataclass
class ViewContext:
    """Shared state passed to views on entry."""

    screen_size: tuple[int, int]
    scores: ScoreStore | InMemoryScoreStore
    audio: AudioEngine | None = None
    midi_input: MidiPulseSource | None = None
    keyboard_input: KeyboardPulseSource | None = None
    rhythm_mode: RhythmMode = RhythmMode.PASSAGE
    tempo_window: int = 1
    seed: int | None = None


@dataclass
class ViewAction:
    """Navigation command returned by views."""

    kind: Literal["push", "pop", "switch", "quit"]
    target: str | None = None
    context_patch: dict[str, Any] | None = None


@runtime_checkable
class View(Protocol):
    """A full-screen game state."""

    name: str
    display_name: str

    def on_enter(self, context: ViewContext) -> None: ...
    def on_exit(self) -> None: ...
    def handle_event(self, event: pygame.event.Event) -> ViewAction | None: ...
    def update(self, dt: float) -> ViewAction | None: ...
    def draw(self, surface: pygame.Surface) -> None: ...


class ViewManager:
    """Owns the view stack and dispatches the game loop to the active view."""

    def __init__(self, context: ViewContext) -> None:
        self._registry: dict[str, type] = {}
        self._stack: list[tuple[View, ViewContext]] = []
        self._context = context

    def register(self, view_cls: type) -> None:
        self._registry[view_cls.name] = view_cls

    def push(self, view_name: str, **context_overrides: Any) -> None:
        if self._stack:
            self._stack[-1][0].on_exit()
        view = self._registry[view_name]()
        ctx = self._patched_context(context_overrides)
        view.on_enter(ctx)
        self._stack.append((view, ctx))

    def pop(self) -> None:
        if self._stack:
            self._stack.pop()[0].on_exit()
        if self._stack:
            view, ctx = self._stack[-1]
            view.on_enter(ctx)

    def switch(self, view_name: str, **context_overrides: Any) -> None:
        if self._stack:
            self._stack.pop()[0].on_exit()
        self.push(view_name, **context_overrides)

    @property
    def active_view(self) -> View | None:
        return self._stack[-1][0] if self._stack else None

    def handle_event(self, event: pygame.event.Event) -> bool:
        if (view := self.active_view) is None:
            return False
        action = view.handle_event(event)
        return self._process_action(action)

    def update(self, dt: float) -> bool:
        if (view := self.active_view) is None:
            return False
        action = view.update(dt)
        return self._process_action(action)

    def draw(self, surface: pygame.Surface) -> None:
        if (view := self.active_view) is not None:
            view.draw(surface)

    def _process_action(self, action: ViewAction | None) -> bool:
        if action is None:
            return True
        if action.kind == "quit":
            return False
        elif action.kind == "push":
            self.push(action.target, **(action.context_patch or {}))
        elif action.kind == "pop":
            self.pop()
        elif action.kind == "switch":
            self.switch(action.target, **(action.context_patch or {}))
        return True

    def _patched_context(self, overrides: dict[str, Any]) -> ViewContext:
        if not overrides:
            return self._context
        known = {k: v for k, v in overrides.items() if hasattr(self._context, k)}
        return replace(self._context, **known)
