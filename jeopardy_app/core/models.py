"""Domain models for Jeopardy boards."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from uuid import uuid4

from jeopardy_app.constants.board_constants import CATEGORY_HEADER_ROWS
from jeopardy_app.core.errors import ValidationError


def _new_id() -> str:
    return uuid4().hex


@dataclass(slots=True)
class Question:
    """A single prompt/answer pair worth some number of points."""

    prompt: str
    answer: str
    points: int
    answered: bool = False
    id: str = field(default_factory=_new_id, compare=False, repr=False)

    def mark_answered(self) -> None:
        self.answered = True


@dataclass(slots=True)
class Category:
    """Named column of questions, kept sorted by points."""

    name: str
    questions: list[Question] = field(default_factory=list)
    id: str = field(default_factory=_new_id, compare=False, repr=False)

    def add_questions(self, *questions: Question) -> None:
        """Append questions and re-sort the column by ascending points.

        The sort is stable, so questions worth the same points keep the order
        in which they were added. Calling this with no questions re-sorts the
        existing column, e.g. after a question's points were edited.
        """
        self.questions.extend(questions)
        self.questions.sort(key=attrgetter("points"))

    def remove_question(self, question: Question) -> None:
        self.questions = [q for q in self.questions if q.id != question.id]

    def height(self) -> int:
        """Rows needed to display the category, header included."""
        return CATEGORY_HEADER_ROWS + len(self.questions)

    def max_points(self) -> int:
        return max((q.points for q in self.questions), default=0)


@dataclass(slots=True)
class Player:
    """A contestant and their running score."""

    name: str = ""
    score: int = 0
    id: str = field(default_factory=_new_id, compare=False, repr=False)

    def set_name(self, name: str) -> None:
        self.name = name

    def reset_score(self) -> None:
        self.score = 0

    def incr_score(self, delta: int) -> None:
        """Adjust the score by a signed amount."""
        self.score += delta

    def __str__(self) -> str:
        return f"{self.name}: {self.score}"


@dataclass(slots=True)
class Board:
    """A full game: ordered categories plus the players competing on it."""

    name: str
    categories: list[Category] = field(default_factory=list)
    players: list[Player] = field(default_factory=list)
    id: str = field(default_factory=_new_id, compare=False, repr=False)

    def add_categories(self, *categories: Category) -> None:
        self.categories.extend(categories)

    def add_players(self, *players: Player) -> None:
        self.players.extend(players)

    def swap_categories(self, first: int, second: int) -> None:
        """Exchange the display positions of two categories.

        Raises:
            ValidationError: If either index falls outside ``[0, width())``.
        """
        count = len(self.categories)
        for index in (first, second):
            if not 0 <= index < count:
                raise ValidationError(
                    f"Category index {index} out of range for {count} categories"
                )
        self.categories[first], self.categories[second] = (
            self.categories[second],
            self.categories[first],
        )

    def remove_category(self, category: Category) -> None:
        self.categories = [c for c in self.categories if c.id != category.id]

    def remove_player(self, player: Player) -> None:
        self.players = [p for p in self.players if p.id != player.id]

    def find_category(self, name: str) -> Category | None:
        return next((c for c in self.categories if c.name == name), None)

    def width(self) -> int:
        return len(self.categories)

    def height(self) -> int:
        """Rows of the tallest category, or 0 for a board without categories."""
        return max((c.height() for c in self.categories), default=0)

    def max_points(self) -> int:
        return max((c.max_points() for c in self.categories), default=0)
