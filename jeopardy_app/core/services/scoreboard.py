"""Service for keeping score while a board is being played."""

from __future__ import annotations

from dataclasses import dataclass

from jeopardy_app.core.errors import ValidationError
from jeopardy_app.core.models import Board, Player, Question
from jeopardy_app.core.services.game_session import GameSession


@dataclass(slots=True)
class StandingRow:
    """Immutable snapshot returned to consumers."""

    name: str
    score: int


class Scoreboard:
    """Awards question points to the players of the active board."""

    def __init__(self, session: GameSession) -> None:
        self._session = session

    def award(self, question: Question, player: Player, correct: bool = True) -> None:
        """Score a player's response to an open question.

        A correct response earns the question's points and closes the question.
        A wrong one costs the same amount and leaves it open for other players.
        """
        board = self._session.require_board()
        _require_question_on(board, question)
        _require_player_on(board, player)
        if question.answered:
            raise ValidationError("Question has already been answered.")

        if correct:
            player.incr_score(question.points)
            question.mark_answered()
        else:
            player.incr_score(-question.points)
        self._session.notify()

    def close_question(self, question: Question) -> None:
        """Retire a question nobody answered."""
        _require_question_on(self._session.require_board(), question)
        question.mark_answered()
        self._session.notify()

    def reset_scores(self) -> None:
        for player in self._session.require_board().players:
            player.reset_score()
        self._session.notify()

    def standings(self) -> list[StandingRow]:
        """Players by descending score; ties keep the board's player order."""
        board = self._session.get_current_board()
        if board is None:
            return []
        ranked = sorted(board.players, key=lambda p: -p.score)
        return [StandingRow(name=player.name, score=player.score) for player in ranked]

    def remaining_question_count(self) -> int:
        board = self._session.get_current_board()
        if board is None:
            return 0
        return sum(
            1
            for category in board.categories
            for question in category.questions
            if not question.answered
        )


def _require_question_on(board: Board, question: Question) -> None:
    for category in board.categories:
        if any(candidate.id == question.id for candidate in category.questions):
            return
    raise ValidationError("Question is not on the current board.")


def _require_player_on(board: Board, player: Player) -> None:
    if not any(candidate.id == player.id for candidate in board.players):
        raise ValidationError("Player is not on the current board.")
