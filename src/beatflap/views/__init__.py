"""Views subsystem: start screen and game screen on a shared view stack."""

from beatflap.views.base import View, ViewAction, ViewContext, ViewManager

__all__ = ["View", "ViewAction", "ViewContext", "ViewManager"]
