"""Typed UI events emitted by the controllers.

Controllers never touch the widget toolkit directly. They hand toast and
confirmation requests to an ``EventSink``; the web page renders them, tests
simply collect them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Literal, Union

ToastLevel = Literal["success", "error", "info"]


@dataclass(frozen=True)
class Toast:
    level: ToastLevel
    message: str


@dataclass(frozen=True)
class ConfirmRequest:
    title: str
    message: str
    ok_label: str
    on_confirm: Callable[[], Awaitable[object]]
    danger: bool = False


UIEvent = Union[Toast, ConfirmRequest]
EventSink = Callable[[UIEvent], None]
