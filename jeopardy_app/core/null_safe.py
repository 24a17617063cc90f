"""Optional-receiver helpers for callers that may hold no board at all.

Presentation code often works with whatever the session currently holds, which
may be ``None``. These helpers give every query a zero value and turn every
mutation into a no-op when the receiver is absent, and otherwise delegate to
the model methods unchanged.
"""

from __future__ import annotations

from jeopardy_app.constants.board_constants import NULL_PLAYER_LABEL
from jeopardy_app.core.models import Board, Category, Player, Question


# --- Question ---

def question_prompt(question: Question | None) -> str:
    return question.prompt if question is not None else ""


def question_answer(question: Question | None) -> str:
    return question.answer if question is not None else ""


def question_points(question: Question | None) -> int:
    return question.points if question is not None else 0


def mark_answered(question: Question | None) -> None:
    if question is not None:
        question.mark_answered()


# --- Category ---

def add_questions(category: Category | None, *questions: Question) -> None:
    if category is None:
        return
    category.add_questions(*questions)


def remove_question(category: Category | None, question: Question) -> None:
    if category is None:
        return
    category.remove_question(question)


def category_height(category: Category | None) -> int:
    return category.height() if category is not None else 0


def category_max_points(category: Category | None) -> int:
    return category.max_points() if category is not None else 0


# --- Board ---

def add_categories(board: Board | None, *categories: Category) -> None:
    if board is None:
        return
    board.add_categories(*categories)


def add_players(board: Board | None, *players: Player) -> None:
    if board is None:
        return
    board.add_players(*players)


def swap_categories(board: Board | None, first: int, second: int) -> None:
    """Swap two categories; bad indices still raise on a real board."""
    if board is None:
        return
    board.swap_categories(first, second)


def remove_category(board: Board | None, category: Category) -> None:
    if board is None:
        return
    board.remove_category(category)


def board_width(board: Board | None) -> int:
    return board.width() if board is not None else 0


def board_height(board: Board | None) -> int:
    return board.height() if board is not None else 0


def board_max_points(board: Board | None) -> int:
    return board.max_points() if board is not None else 0


# --- Player ---

def player_name(player: Player | None) -> str:
    return player.name if player is not None else ""


def player_score(player: Player | None) -> int:
    return player.score if player is not None else 0


def set_player_name(player: Player | None, name: str) -> None:
    if player is not None:
        player.set_name(name)


def reset_player_score(player: Player | None) -> None:
    if player is not None:
        player.reset_score()


def incr_player_score(player: Player | None, delta: int) -> None:
    if player is not None:
        player.incr_score(delta)


def describe_player(player: Player | None) -> str:
    """Debug label for a player, ``"Null Player"`` when absent."""
    if player is None:
        return NULL_PLAYER_LABEL
    return str(player)
