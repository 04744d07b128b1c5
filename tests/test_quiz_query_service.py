"""
Pytest tests for QuizQueryService read paths and answer redaction
"""

import logging

import pytest

from app.core.exceptions import NotFoundError
from app.schemas.quiz import AnswerRequest
from app.services.quiz import QuizService
from app.services.quiz_query import QuizQueryService


class TestQuestionSets:
    @pytest.fixture(autouse=True)
    def setup(self, db_session, math_set):
        self.question_set, self.true_false, self.single = math_set
        self.service = QuizQueryService(db_session)

    def test_list_question_sets(self, make_question_set):
        make_question_set(name="History", description=None, level=2)

        sets = self.service.list_question_sets()

        assert [s.name for s in sets] == ["Math Basics", "History"]
        assert sets[1].level == 2
        assert sets[1].description is None

    def test_detail_has_questions_without_correct_answer(self):
        """Test the pre-answer view never exposes correctAnswer"""
        detail = self.service.get_question_set_detail(self.question_set.id)

        assert detail.question_set.id == self.question_set.id
        assert len(detail.questions) == 2
        for question in detail.questions:
            dumped = question.model_dump(by_alias=True)
            assert "correctAnswer" not in dumped
            assert "correct_answer" not in dumped

        single = next(q for q in detail.questions if q.type == "single_selection")
        assert single.options == ["2", "5", "8", "10"]
        true_false = next(q for q in detail.questions if q.type == "true_false")
        assert true_false.options is None

    def test_detail_of_unknown_set_is_not_found(self):
        with pytest.raises(NotFoundError, match="Question set not found"):
            self.service.get_question_set_detail("missing")

    def test_unknown_set_is_logged_as_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="app.services.quiz_query"):
            with pytest.raises(NotFoundError):
                self.service.get_question_set_detail("missing")

        assert any(
            record.levelno == logging.WARNING and "missing" in record.getMessage()
            for record in caplog.records
        )


class TestAttempts:
    @pytest.fixture(autouse=True)
    def setup(self, db_session, make_user, current_user, math_set):
        self.user = current_user(make_user())
        self.question_set, self.true_false, self.single = math_set
        self.quiz_service = QuizService(db_session)
        self.service = QuizQueryService(db_session)

    def test_no_attempts_is_empty_list(self):
        assert self.service.list_my_attempts(self.user) == []

    def test_list_my_attempts_in_start_order(self, make_user, current_user):
        """Test listing includes in-progress and completed attempts, oldest first"""
        first = self.quiz_service.start_attempt(self.user, self.question_set.id).attempt_id
        second = self.quiz_service.start_attempt(self.user, self.question_set.id).attempt_id
        self.quiz_service.complete_attempt(self.user, first)
        other = current_user(make_user(username="other"))
        self.quiz_service.start_attempt(other, self.question_set.id)

        attempts = self.service.list_my_attempts(self.user)

        assert [a.attempt_id for a in attempts] == [first, second]
        assert attempts[0].completed_at is not None
        assert attempts[1].completed_at is None
        assert attempts[0].question_set_name == "Math Basics"

    def test_attempt_detail_reveals_correct_answers(self):
        attempt_id = self.quiz_service.start_attempt(self.user, self.question_set.id).attempt_id
        self.quiz_service.submit_answer(
            self.user,
            attempt_id,
            AnswerRequest(question_id=self.true_false.id, user_answer="false"),
        )
        self.quiz_service.submit_answer(
            self.user,
            attempt_id,
            AnswerRequest(question_id=self.single.id, user_answer="5"),
        )

        detail = self.service.get_attempt_detail(self.user, attempt_id)

        assert detail.id == attempt_id
        assert detail.question_set_name == "Math Basics"
        assert detail.score == 1
        assert len(detail.answers) == 2
        first, second = detail.answers
        assert first.question_content == "2 + 2 = 4?"
        assert first.user_answer == "false"
        assert first.is_correct is False
        assert first.correct_answer == "true"
        assert second.question_options == ["2", "5", "8", "10"]
        assert second.correct_answer == "5"
        assert "correctAnswer" in first.model_dump(by_alias=True)

    def test_attempt_detail_of_other_user_is_not_found(self, make_user, current_user):
        attempt_id = self.quiz_service.start_attempt(self.user, self.question_set.id).attempt_id
        intruder = current_user(make_user(username="intruder"))

        with pytest.raises(NotFoundError):
            self.service.get_attempt_detail(intruder, attempt_id)
