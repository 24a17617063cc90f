"""Service for saving and loading boards to and from byte streams."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from threading import Lock
from typing import BinaryIO

from jeopardy_app.constants.board_constants import BOARD_FILE_EXTENSION
from jeopardy_app.core.board_codec import decode_board_into, encode_board
from jeopardy_app.core.models import Board

logger = logging.getLogger(__name__)


def ensure_board_extension(path: Path) -> Path:
    """Return ``path`` with the board file extension appended if missing."""
    if path.suffix == BOARD_FILE_EXTENSION:
        return path
    return path.with_name(path.name + BOARD_FILE_EXTENSION)


class BoardStore:
    """Persists boards as structured text, one save or load at a time.

    Callers open the stream; the store always closes it when done. Share a
    single instance across the application so that every save and load queues
    behind the same lock.
    """

    def __init__(self) -> None:
        self._lock = Lock()

    def save(self, sink: BinaryIO, board: Board) -> None:
        """Encode ``board`` and write it fully to ``sink``, then close it.

        Raises:
            BoardSerializationError: If the board cannot be encoded.
            OSError: If writing to the sink fails.
        """
        with self._lock:
            self._write(sink, board)

    def load(self, source: BinaryIO, board: Board) -> Board:
        """Read a full document from ``source``, close it, and fill ``board``.

        Raises:
            BoardDeserializationError: If the document is malformed.
            OSError: If reading from the source fails.
        """
        with self._lock:
            try:
                payload = source.read()
            finally:
                source.close()
            decode_board_into(payload, board)
        logger.debug("Loaded board '%s' (%d categories)", board.name, board.width())
        return board

    def save_to_path(self, path: Path, board: Board) -> Path:
        """Save ``board`` next to ``path`` and atomically move it into place.

        The board extension is appended when missing. Returns the final path.
        The temp file is opened, written and renamed under the store lock.
        """
        target = ensure_board_extension(path.expanduser())
        target.parent.mkdir(parents=True, exist_ok=True)
        temp_path = target.with_name(target.name + ".tmp")
        with self._lock:
            try:
                self._write(temp_path.open("wb"), board)
                os.replace(temp_path, target)
            except Exception:
                temp_path.unlink(missing_ok=True)
                raise
        return target

    def load_from_path(self, path: Path, board: Board) -> Board:
        return self.load(path.expanduser().open("rb"), board)

    @staticmethod
    def _write(sink: BinaryIO, board: Board) -> None:
        # Callers hold the store lock.
        try:
            payload = encode_board(board)
            sink.write(payload)
            sink.flush()
        finally:
            sink.close()
        logger.debug("Saved board '%s' (%d bytes)", board.name, len(payload))
