from __future__ import annotations

from typing import Any, Callable, Optional

from PySide6.QtCore import QObject, Signal


class RelayCommand(QObject):
    """
    A user-triggered operation: an effect plus an optional predicate saying
    whether the effect may run right now.

    Buttons bind `execute` to their click and re-check `can_execute` whenever
    `can_execute_changed` fires.
    """
    can_execute_changed = Signal()

    def __init__(
        self,
        execute: Callable[..., Any],
        can_execute: Optional[Callable[..., bool]] = None,
        *,
        accepts_parameter: bool = False,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._execute = execute
        self._can_execute = can_execute
        self._accepts_parameter = accepts_parameter

    def can_execute(self, parameter: Any = None) -> bool:
        if self._can_execute is None:
            return True
        if self._accepts_parameter:
            return bool(self._can_execute(parameter))
        return bool(self._can_execute())

    def execute(self, parameter: Any = None) -> bool:
        """Run the effect if allowed. Returns True if it ran."""
        if not self.can_execute(parameter):
            return False
        if self._accepts_parameter:
            self._execute(parameter)
        else:
            self._execute()
        return True

    def raise_can_execute_changed(self) -> None:
        self.can_execute_changed.emit()
