"""Transient user-visible notifications."""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class ToastVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"
    SUCCESS = "success"


@dataclass(frozen=True)
class Toast:
    id: int
    title: str
    description: str | None = None
    variant: ToastVariant = ToastVariant.DEFAULT


class Toaster:
    """Keep the visible toasts and dismiss each after ``duration`` seconds."""

    def __init__(self, duration: float = 5.0) -> None:
        self.duration = duration
        self._ids = itertools.count(1)
        self._toasts: dict[int, Toast] = {}
        self._timers: dict[int, asyncio.TimerHandle] = {}

    @property
    def toasts(self) -> list[Toast]:
        return list(self._toasts.values())

    def show(
        self,
        title: str,
        description: str | None = None,
        variant: ToastVariant | str = ToastVariant.DEFAULT,
        *,
        duration: float | None = None,
    ) -> Toast:
        toast = Toast(next(self._ids), title, description, ToastVariant(variant))
        self._toasts[toast.id] = toast
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Without a loop the toast stays until dismissed explicitly.
            logger.debug("No running loop; toast %s will not auto-dismiss", toast.id)
        else:
            delay = self.duration if duration is None else duration
            self._timers[toast.id] = loop.call_later(delay, self.dismiss, toast.id)
        return toast

    def dismiss(self, toast_id: int) -> bool:
        timer = self._timers.pop(toast_id, None)
        if timer is not None:
            timer.cancel()
        return self._toasts.pop(toast_id, None) is not None

    def clear(self) -> None:
        for toast_id in list(self._toasts):
            self.dismiss(toast_id)


__all__ = ["Toast", "ToastVariant", "Toaster"]
