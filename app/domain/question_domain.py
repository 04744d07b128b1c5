from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from app.models.quiz import Question


class QuestionType(str, Enum):
    SINGLE_SELECTION = "single_selection"
    TRUE_FALSE = "true_false"


@dataclass(frozen=True)
class SingleSelection:
    """One option out of an ordered list; the answer is the option's text"""

    correct_answer: str
    options: List[str] = field(default_factory=list)

    def is_correct(self, user_answer: str) -> bool:
        return user_answer == self.correct_answer


@dataclass(frozen=True)
class TrueFalse:
    correct_answer: str

    def is_correct(self, user_answer: str) -> bool:
        return user_answer == self.correct_answer


ScorableQuestion = Union[SingleSelection, TrueFalse]


class QuestionDomain:
    """Domain logic for grading answers against Question rows"""

    @staticmethod
    def to_variant(question: Question) -> Optional[ScorableQuestion]:
        """
        Build the scoring variant for a question.

        Returns None for types that cannot be scored.
        """
        try:
            question_type = QuestionType(question.type)
        except ValueError:
            return None

        if question_type is QuestionType.SINGLE_SELECTION:
            return SingleSelection(
                correct_answer=question.correct_answer,
                options=list(question.options or []),
            )
        return TrueFalse(correct_answer=question.correct_answer)

    @staticmethod
    def grade(question: Question, user_answer: str) -> bool:
        """Exact, case-sensitive comparison; unscorable types are always wrong"""
        variant = QuestionDomain.to_variant(question)
        if variant is None:
            return False
        return variant.is_correct(user_answer)
