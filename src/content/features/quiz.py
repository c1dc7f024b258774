"""Quiz grading for posts that carry a `quiz` in their frontmatter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from src.common.models import QuizQuestion


@dataclass
class QuizResult:
    """Outcome of a submitted quiz."""
    score: int
    total: int
    answered: int
    correct: list[bool] = field(default_factory=list)  # Per question, in order

    @property
    def percentage(self) -> int:
        return round(self.score / self.total * 100) if self.total else 0

    def share_text(self, topic: str = "stock market") -> str:
        return f"I scored {self.score}/{self.total} on the {topic} quiz!"


def grade_quiz(
    quiz: Sequence[QuizQuestion],
    answers: Mapping[int, int],
) -> QuizResult:
    """Grade selected options against the quiz.

    Args:
        quiz: Questions from the post frontmatter.
        answers: Question index → selected option index. Unanswered
                 questions count as wrong.

    Raises:
        ValueError: Nothing answered, or an answer points at a question
                    that does not exist.
    """
    if not answers:
        raise ValueError("Cannot grade a quiz with no answers")

    unknown = [i for i in answers if not 0 <= i < len(quiz)]
    if unknown:
        raise ValueError(f"Answers for unknown questions: {sorted(unknown)}")

    correct = [answers.get(i) == question.answer for i, question in enumerate(quiz)]
    return QuizResult(
        score=sum(correct),
        total=len(quiz),
        answered=len(answers),
        correct=correct,
    )
