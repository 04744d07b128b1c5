"""
Pytest tests for question scoring variants
"""

from app.domain.question_domain import (
    QuestionDomain,
    QuestionType,
    SingleSelection,
    TrueFalse,
)
from app.models.quiz import Question


def _question(question_type, correct_answer, options=None):
    return Question(
        id="q1",
        question_set_id="s1",
        type=question_type,
        content="content",
        options=options,
        correct_answer=correct_answer,
    )


class TestQuestionVariants:
    """Test building variants from Question rows"""

    def test_single_selection_variant(self):
        """Test single_selection rows become SingleSelection with their options"""
        variant = QuestionDomain.to_variant(
            _question("single_selection", "5", ["2", "5", "8"])
        )

        assert isinstance(variant, SingleSelection)
        assert variant.options == ["2", "5", "8"]
        assert variant.correct_answer == "5"

    def test_true_false_variant(self):
        """Test true_false rows become TrueFalse"""
        variant = QuestionDomain.to_variant(_question("true_false", "false"))

        assert isinstance(variant, TrueFalse)

    def test_unknown_type_has_no_variant(self):
        """Test unsupported question types cannot be scored"""
        assert QuestionDomain.to_variant(_question("multi_select", "a,b")) is None

    def test_question_type_values(self):
        assert QuestionType("single_selection") is QuestionType.SINGLE_SELECTION
        assert QuestionType("true_false") is QuestionType.TRUE_FALSE


class TestGrading:
    """Test the exact-match grading rule"""

    def test_exact_match_is_correct(self):
        assert QuestionDomain.grade(_question("true_false", "true"), "true") is True
        assert (
            QuestionDomain.grade(_question("single_selection", "5", ["2", "5"]), "5")
            is True
        )

    def test_comparison_is_case_sensitive(self):
        """Test 'True' does not match 'true'"""
        assert QuestionDomain.grade(_question("true_false", "true"), "True") is False

    def test_no_trimming_or_partial_credit(self):
        assert QuestionDomain.grade(_question("single_selection", "Paris"), " Paris") is False
        assert QuestionDomain.grade(_question("single_selection", "Paris"), "Par") is False

    def test_unscorable_type_is_always_wrong(self):
        """Test even a matching answer is wrong for unknown types"""
        assert QuestionDomain.grade(_question("essay", "anything"), "anything") is False
