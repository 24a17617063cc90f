"""Command-line front end for editing and playing ``.jpdy`` boards.

Each command loads a board file into a fresh session, applies one change
through the same services a windowed front end would use, and saves it back.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from jeopardy_app.constants.about import APP_DESCRIPTION, APP_DISCLAIMER, APP_NAME, APP_VERSION
from jeopardy_app.core.errors import JeopardyError, ValidationError
from jeopardy_app.core.models import Board, Category, Player, Question
from jeopardy_app.core.services.board_editor import BoardEditor, parse_points
from jeopardy_app.core.services.board_store import BoardStore, ensure_board_extension
from jeopardy_app.core.services.game_session import GameSession
from jeopardy_app.core.services.scoreboard import Scoreboard
from jeopardy_app.utils.logging_config import configure_logging
from jeopardy_app.utils.settings import Settings, load_settings


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="jeopardy",
        description=f"{APP_NAME}: {APP_DESCRIPTION}",
        epilog=APP_DISCLAIMER,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument(
        "--env",
        type=Path,
        default=None,
        help="Environment file to load user settings from",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    new_p = sub.add_parser("new", help="Create a new, empty board file")
    new_p.add_argument("file", type=Path, help="Board file to create (.jpdy is appended if missing)")
    new_p.add_argument("--name", required=True, help="Board name")

    show_p = sub.add_parser("show", help="Print a summary of a board")
    show_p.add_argument("file", type=Path)

    add_cat_p = sub.add_parser("add-category", help="Append a category to a board")
    add_cat_p.add_argument("file", type=Path)
    add_cat_p.add_argument("name")

    rename_cat_p = sub.add_parser("rename-category", help="Rename a category")
    rename_cat_p.add_argument("file", type=Path)
    rename_cat_p.add_argument("old_name")
    rename_cat_p.add_argument("new_name")

    remove_cat_p = sub.add_parser("remove-category", help="Delete a category and its questions")
    remove_cat_p.add_argument("file", type=Path)
    remove_cat_p.add_argument("name")

    swap_p = sub.add_parser("swap-categories", help="Swap the display positions of two categories")
    swap_p.add_argument("file", type=Path)
    swap_p.add_argument("first", type=int, help="Zero-based index of the first category")
    swap_p.add_argument("second", type=int, help="Zero-based index of the second category")

    add_q_p = sub.add_parser("add-question", help="Add a question to a category")
    add_q_p.add_argument("file", type=Path)
    add_q_p.add_argument("category")
    add_q_p.add_argument("--prompt", required=True)
    add_q_p.add_argument("--answer", required=True)
    add_q_p.add_argument("--points", required=True, help="Integer points value")

    add_player_p = sub.add_parser("add-player", help="Add a player to a board")
    add_player_p.add_argument("file", type=Path)
    add_player_p.add_argument("name")

    award_p = sub.add_parser("award", help="Score a player's response to a question")
    award_p.add_argument("file", type=Path)
    award_p.add_argument("category")
    award_p.add_argument("points", help="Points value of the open question")
    award_p.add_argument("player")
    award_p.add_argument(
        "--wrong",
        action="store_true",
        help="Deduct the points instead; the question stays open",
    )

    sub.add_parser("settings", help="Print the effective configuration")
    return parser


def render_board_summary(board: Board) -> str:
    """Render a plain-text overview of a board."""
    lines = [
        f"Board: {board.name} ({board.width()} x {board.height()}, max {board.max_points()} points)"
    ]
    for index, category in enumerate(board.categories):
        lines.append(f"[{index}] {category.name}")
        for question in category.questions:
            status = " (answered)" if question.answered else ""
            lines.append(f"    {question.points:>5}  {question.prompt} -> {question.answer}{status}")
    lines.append("Players:")
    if not board.players:
        lines.append("    (none)")
    for player in board.players:
        lines.append(f"    {player}")
    return "\n".join(lines)


def render_settings(settings: Settings) -> str:
    return "\n".join(f"{key}={value}" for key, value in sorted(settings.values.items()))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = configure_logging(verbose=args.verbose)

    try:
        settings = load_settings(args.env)
        logger.debug("Border color: %s", settings.border_color)
        if args.command == "settings":
            print(render_settings(settings))
            return 0
        return _run_board_command(args)
    except (JeopardyError, OSError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


def _run_board_command(args: argparse.Namespace) -> int:
    session = GameSession(BoardStore())
    editor = BoardEditor(session)

    if args.command == "new":
        session.new_board(args.name)
        saved_path = session.save_board(args.file)
        print(f"Created board '{args.name}' at {saved_path}")
        return 0

    board = session.load_board(_resolve_board_path(args.file))

    if args.command == "show":
        print(render_board_summary(board))
        return 0

    if args.command == "add-category":
        editor.add_category(args.name)
    elif args.command == "rename-category":
        editor.rename_category(_find_category(board, args.old_name), args.new_name)
    elif args.command == "remove-category":
        editor.delete_category(_find_category(board, args.name))
    elif args.command == "swap-categories":
        editor.move_category(args.first, args.second)
    elif args.command == "add-question":
        editor.add_question(_find_category(board, args.category), args.prompt, args.answer, args.points)
    elif args.command == "add-player":
        editor.add_player(args.name)
    elif args.command == "award":
        question = _find_open_question(_find_category(board, args.category), parse_points(args.points))
        Scoreboard(session).award(question, _find_player(board, args.player), correct=not args.wrong)

    saved_path = session.save_board()
    print(f"Saved {saved_path}")
    return 0


def _resolve_board_path(path: Path) -> Path:
    """Accept a board path with or without its ``.jpdy`` extension, as ``new`` does."""
    if not path.exists():
        extended = ensure_board_extension(path)
        if extended.exists():
            return extended
    return path


def _find_category(board: Board, name: str) -> Category:
    category = board.find_category(name)
    if category is None:
        raise ValidationError(f"No category named '{name}'")
    return category


def _find_open_question(category: Category, points: int) -> Question:
    for question in category.questions:
        if question.points == points and not question.answered:
            return question
    raise ValidationError(f"No open {points}-point question in '{category.name}'")


def _find_player(board: Board, name: str) -> Player:
    for player in board.players:
        if player.name == name:
            return player
    raise ValidationError(f"No player named '{name}'")
