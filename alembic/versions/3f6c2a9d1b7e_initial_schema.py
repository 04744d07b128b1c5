"""initial schema: auth, profile, quiz and chat tables

Revision ID: 3f6c2a9d1b7e
Revises:
Create Date: 2026-10-18
"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f6c2a9d1b7e"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
    )
    op.create_index("ix_user_username", "user", ["username"], unique=True)

    op.create_table(
        "session",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("user_id", sa.String(255), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_session_user_id", "session", ["user_id"])

    op.create_table(
        "profile",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column(
            "user_id", sa.String(255), sa.ForeignKey("user.id"), nullable=False, unique=True
        ),
        sa.Column("total_quizzes_taken", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("highest_score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )

    op.create_table(
        "question_set",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )

    op.create_table(
        "question",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column(
            "question_set_id",
            sa.String(255),
            sa.ForeignKey("question_set.id"),
            nullable=False,
        ),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("options", sa.JSON(), nullable=True),
        sa.Column("correct_answer", sa.Text(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index("ix_question_question_set_id", "question", ["question_set_id"])

    op.create_table(
        "quiz_attempt",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("user_id", sa.String(255), sa.ForeignKey("user.id"), nullable=False),
        sa.Column(
            "question_set_id",
            sa.String(255),
            sa.ForeignKey("question_set.id"),
            nullable=False,
        ),
        sa.Column("score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_question", sa.Integer(), nullable=False),
        sa.Column(
            "started_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_quiz_attempt_user_id", "quiz_attempt", ["user_id"])
    op.create_index("ix_quiz_attempt_question_set_id", "quiz_attempt", ["question_set_id"])

    op.create_table(
        "quiz_answer",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column(
            "quiz_attempt_id",
            sa.String(255),
            sa.ForeignKey("quiz_attempt.id"),
            nullable=False,
        ),
        sa.Column(
            "question_id", sa.String(255), sa.ForeignKey("question.id"), nullable=False
        ),
        sa.Column("user_answer", sa.Text(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.Column(
            "answered_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index("ix_quiz_answer_quiz_attempt_id", "quiz_answer", ["quiz_attempt_id"])
    op.create_index("ix_quiz_answer_question_id", "quiz_answer", ["question_id"])

    op.create_table(
        "chat_session",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("user_id", sa.String(255), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_chat_session_user_id", "chat_session", ["user_id"])

    op.create_table(
        "chat_message",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column(
            "chat_session_id",
            sa.String(255),
            sa.ForeignKey("chat_session.id"),
            nullable=False,
        ),
        sa.Column("sender", sa.String(50), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("sent_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_chat_message_chat_session_id", "chat_message", ["chat_session_id"])


def downgrade() -> None:
    op.drop_table("chat_message")
    op.drop_table("chat_session")
    op.drop_table("quiz_answer")
    op.drop_table("quiz_attempt")
    op.drop_table("question")
    op.drop_table("question_set")
    op.drop_table("profile")
    op.drop_table("session")
    op.drop_table("user")
