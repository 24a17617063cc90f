"""Service holding the active board and notifying observers of changes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from jeopardy_app.constants.board_constants import MAX_NOTIFY_PASSES
from jeopardy_app.core.errors import NoBoardError, NotificationLoopError, ObserverError, ValidationError
from jeopardy_app.core.models import Board
from jeopardy_app.core.services.board_store import BoardStore

logger = logging.getLogger(__name__)

BoardObserver = Callable[[Board | None], None]


class GameSession:
    """Owns the currently active board for one editor window.

    Mutating the board does not notify anyone by itself: callers change the
    board through the live reference and then call :meth:`notify`.
    """

    def __init__(self, store: BoardStore | None = None) -> None:
        self._store = store or BoardStore()
        self._current_board: Board | None = None
        self._current_path: Path | None = None
        # Observers are never removed; they live as long as the session.
        self._observers: list[BoardObserver] = []
        self._dispatching: bool = False
        self._notify_pending: bool = False

    # --- Board state ---

    def get_current_board(self) -> Board | None:
        return self._current_board

    def set_current_board(self, board: Board | None) -> None:
        self._current_board = board
        logger.info("Active board is now %s", f"'{board.name}'" if board else "empty")
        self.notify()

    def has_board(self) -> bool:
        return self._current_board is not None

    def new_board(self, name: str) -> Board:
        board = Board(name)
        self._current_path = None
        self.set_current_board(board)
        return board

    def close_board(self) -> None:
        self._current_path = None
        self.set_current_board(None)

    def require_board(self) -> Board:
        if self._current_board is None:
            raise NoBoardError("No board is open.")
        return self._current_board

    @property
    def current_path(self) -> Path | None:
        """File the active board was last loaded from or saved to."""
        return self._current_path

    # --- Files ---

    def load_board(self, path: Path) -> Board:
        """Load a board file and make it the active board."""
        board = self._store.load_from_path(path, Board(""))
        self._current_path = path
        logger.info("Loaded board '%s' from %s", board.name, path)
        self.set_current_board(board)
        return board

    def save_board(self, path: Path | None = None) -> Path:
        """Save the active board, to its current file unless ``path`` is given."""
        board = self.require_board()
        target = path or self._current_path
        if target is None:
            raise ValidationError("No file chosen to save the board to.")
        saved_path = self._store.save_to_path(target, board)
        self._current_path = saved_path
        logger.info("Saved board '%s' to %s", board.name, saved_path)
        return saved_path

    # --- Observers ---

    def register_observer(self, callback: BoardObserver) -> None:
        self._observers.append(callback)

    def notify(self) -> None:
        """Call every observer, in registration order, with the current board.

        Notifications requested by an observer while a pass is running are
        queued and delivered as one extra pass after the current one, so
        observers never re-enter each other. Failing observers are logged and
        skipped; an ObserverError listing them is raised once dispatch ends.
        """
        self._notify_pending = True
        if self._dispatching:
            return

        self._dispatching = True
        failures: list[Exception] = []
        passes = 0
        try:
            while self._notify_pending:
                if passes >= MAX_NOTIFY_PASSES:
                    self._notify_pending = False
                    raise NotificationLoopError(
                        f"Observers kept requesting notifications after {passes} passes.",
                        failures,
                    )
                self._notify_pending = False
                passes += 1
                board = self._current_board
                for observer in list(self._observers):
                    try:
                        observer(board)
                    except Exception as exc:
                        logger.exception("Board observer %r failed", observer)
                        failures.append(exc)
        finally:
            self._dispatching = False

        if failures:
            raise ObserverError(f"{len(failures)} board observer(s) failed.", failures) from failures[0]
