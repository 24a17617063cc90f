"""Service for validated edits to the active board."""

from __future__ import annotations

from jeopardy_app.core.errors import ValidationError
from jeopardy_app.core.models import Board, Category, Player, Question
from jeopardy_app.core.services.game_session import GameSession


def parse_points(text: str) -> int:
    """Parse a points value typed by the user."""
    try:
        return int(text.strip())
    except ValueError as exc:
        raise ValidationError(f"{text} is not a valid number") from exc


class BoardEditor:
    """Applies user edits to the session's board and announces them."""

    def __init__(self, session: GameSession) -> None:
        self._session = session

    # --- Categories ---

    def add_category(self, name: str) -> Category:
        board = self._session.require_board()
        category = Category(self._validate_category_name(board, name))
        board.add_categories(category)
        self._session.notify()
        return category

    def rename_category(self, category: Category, name: str) -> None:
        board = self._session.require_board()
        category.name = self._validate_category_name(board, name, current=category)
        self._session.notify()

    def delete_category(self, category: Category) -> None:
        self._session.require_board().remove_category(category)
        self._session.notify()

    def move_category(self, first: int, second: int) -> None:
        self._session.require_board().swap_categories(first, second)
        self._session.notify()

    # --- Questions ---

    def add_question(self, category: Category, prompt: str, answer: str, points_text: str) -> Question:
        self._session.require_board()
        question = Question(
            self._require_text(prompt, "Prompt"),
            self._require_text(answer, "Answer"),
            parse_points(points_text),
        )
        category.add_questions(question)
        self._session.notify()
        return question

    def edit_question(
        self,
        category: Category,
        question: Question,
        prompt: str,
        answer: str,
        points_text: str,
    ) -> None:
        """Overwrite a question's fields and keep its category sorted."""
        self._session.require_board()
        new_prompt = self._require_text(prompt, "Prompt")
        new_answer = self._require_text(answer, "Answer")
        new_points = parse_points(points_text)

        question.prompt = new_prompt
        question.answer = new_answer
        question.points = new_points
        category.add_questions()
        self._session.notify()

    def delete_question(self, category: Category, question: Question) -> None:
        self._session.require_board()
        category.remove_question(question)
        self._session.notify()

    # --- Players ---

    def add_player(self, name: str) -> Player:
        board = self._session.require_board()
        player = Player(self._require_text(name, "Player name"))
        board.add_players(player)
        self._session.notify()
        return player

    def rename_player(self, player: Player, name: str) -> None:
        self._session.require_board()
        player.set_name(self._require_text(name, "Player name"))
        self._session.notify()

    def delete_player(self, player: Player) -> None:
        self._session.require_board().remove_player(player)
        self._session.notify()

    # --- Validation ---

    @staticmethod
    def _require_text(value: str, label: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValidationError(f"{label} must be non-empty")
        return cleaned

    @staticmethod
    def _validate_category_name(board: Board, name: str, current: Category | None = None) -> str:
        cleaned = name.strip()
        if not cleaned:
            raise ValidationError("Category must have a non-empty name")
        for existing in board.categories:
            if existing.name == cleaned and (current is None or existing.id != current.id):
                raise ValidationError(f"{cleaned} already exists")
        return cleaned
