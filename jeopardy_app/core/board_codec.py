"""Encoding and decoding of boards in the ``.jpdy`` document format.

A ``.jpdy`` file is a single indented JSON document:

    {
        "schema_version": 1,
        "name": "Science Night",
        "categories": [
            {
                "name": "Physics",
                "questions": [
                    {"prompt": "...", "answer": "...", "points": 100, "answered": false}
                ]
            }
        ],
        "players": [{"name": "Joey", "score": 500}]
    }

Field names and order form the on-disk schema and must stay stable. Parsing is
strict: unknown keys, wrong JSON types (``"100"`` for points) and unsupported
schema versions are rejected rather than coerced.

Architecture note:
    The pydantic document models are kept separate from the domain dataclasses
    so that the domain stays free of persistence concerns (ids, ordering
    invariants) and the file schema can evolve behind ``schema_version``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from jeopardy_app.constants.board_constants import BOARD_JSON_INDENT, BOARD_SCHEMA_VERSION
from jeopardy_app.core.errors import BoardDeserializationError, BoardSerializationError
from jeopardy_app.core.models import Board, Category, Player, Question

_MAX_REPORTED_ERRORS = 3


class _Document(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)


class QuestionDocument(_Document):
    prompt: str
    answer: str
    points: int
    answered: bool = False


class CategoryDocument(_Document):
    name: str
    questions: list[QuestionDocument] = Field(default_factory=list)


class PlayerDocument(_Document):
    name: str = ""
    score: int = 0


class BoardDocument(_Document):
    """Root of a persisted board."""

    schema_version: int = BOARD_SCHEMA_VERSION
    name: str
    categories: list[CategoryDocument] = Field(default_factory=list)
    players: list[PlayerDocument] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def _check_schema_version(cls, value: int) -> int:
        if value != BOARD_SCHEMA_VERSION:
            raise ValueError(f"unsupported schema version {value}")
        return value


def board_to_document(board: Board) -> BoardDocument:
    """Snapshot a domain board into its document model."""
    return BoardDocument(
        name=board.name,
        categories=[
            CategoryDocument(
                name=category.name,
                questions=[
                    QuestionDocument(
                        prompt=question.prompt,
                        answer=question.answer,
                        points=question.points,
                        answered=question.answered,
                    )
                    for question in category.questions
                ],
            )
            for category in board.categories
        ],
        players=[PlayerDocument(name=player.name, score=player.score) for player in board.players],
    )


def encode_board(board: Board) -> bytes:
    """Serialize a board to UTF-8 encoded, indented JSON."""
    if not isinstance(board, Board):
        raise BoardSerializationError(f"Expected a Board to save, got {type(board).__name__}.")
    try:
        document = board_to_document(board)
        text = document.model_dump_json(indent=BOARD_JSON_INDENT)
    except PydanticValidationError as exc:
        raise BoardSerializationError(
            f"Board '{board.name}' cannot be saved: {_describe(exc)}"
        ) from exc
    except PydanticSerializationError as exc:
        raise BoardSerializationError(f"Board '{board.name}' cannot be saved: {exc}") from exc
    return (text + "\n").encode("utf-8")


def decode_board(payload: bytes | str) -> BoardDocument:
    """Parse and validate a persisted board document."""
    try:
        return BoardDocument.model_validate_json(payload)
    except PydanticValidationError as exc:
        raise BoardDeserializationError(f"Invalid board file: {_describe(exc)}") from exc


def apply_document(document: BoardDocument, board: Board) -> Board:
    """Replace the contents of ``board`` with those of ``document``."""
    categories: list[Category] = []
    for category_document in document.categories:
        category = Category(category_document.name)
        category.add_questions(
            *(
                Question(q.prompt, q.answer, q.points, answered=q.answered)
                for q in category_document.questions
            )
        )
        categories.append(category)

    board.name = document.name
    board.categories = categories
    board.players = [Player(p.name, p.score) for p in document.players]
    return board


def decode_board_into(payload: bytes | str, board: Board) -> Board:
    """Decode ``payload`` and populate ``board`` in place.

    The board is only touched once the whole document has validated.
    """
    return apply_document(decode_board(payload), board)


def _describe(exc: PydanticValidationError) -> str:
    messages = []
    for error in exc.errors()[:_MAX_REPORTED_ERRORS]:
        location = ".".join(str(part) for part in error["loc"]) or "document"
        messages.append(f"{location}: {error['msg']}")
    if exc.error_count() > _MAX_REPORTED_ERRORS:
        messages.append(f"... {exc.error_count() - _MAX_REPORTED_ERRORS} more")
    return "; ".join(messages)
