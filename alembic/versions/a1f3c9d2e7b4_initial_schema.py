"""initial schema: users, posts, emotions, letters, likes, ai_analyses

Revision ID: a1f3c9d2e7b4
Revises:
Create Date: 2026-01-20

Creates the full HeartKemy schema. Letters store the sender/recipient
coordinates together with the distance and flight duration computed at send
time. likes carries a (user_id, post_id) unique constraint so a repeated like
is rejected by the database.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "a1f3c9d2e7b4"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("nickname", sa.String(50), nullable=False),
        sa.Column("character", sa.String(16), nullable=False),
        sa.Column("profile_image", sa.String(), nullable=True),
        sa.Column("google_id", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("google_id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "emotion_keywords",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(30), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("color", sa.String(9), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_emotion_keywords_type", "emotion_keywords", ["type"], unique=False)

    op.create_table(
        "posts",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("preview", sa.String(200), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
    )
    op.create_index("ix_posts_user_id", "posts", ["user_id"], unique=False)
    op.create_index("ix_posts_created_at", "posts", ["created_at"], unique=False)

    op.create_table(
        "post_emotions",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("post_id", sa.String(64), nullable=False),
        sa.Column("emotion_id", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["emotion_id"], ["emotion_keywords.id"]),
        sa.UniqueConstraint("post_id", "emotion_id", name="uq_post_emotions_post_emotion"),
    )
    op.create_index("ix_post_emotions_post_id", "post_emotions", ["post_id"], unique=False)

    op.create_table(
        "likes",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("post_id", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "post_id", name="uq_likes_user_post"),
    )
    op.create_index("ix_likes_user_id", "likes", ["user_id"], unique=False)
    op.create_index("ix_likes_post_id", "likes", ["post_id"], unique=False)

    op.create_table(
        "letters",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("from_user_id", sa.String(64), nullable=False),
        sa.Column("to_user_id", sa.String(64), nullable=False),
        sa.Column("post_id", sa.String(64), nullable=True),
        sa.Column("subject", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("from_latitude", sa.Float(), nullable=False),
        sa.Column("from_longitude", sa.Float(), nullable=False),
        sa.Column("to_latitude", sa.Float(), nullable=False),
        sa.Column("to_longitude", sa.Float(), nullable=False),
        sa.Column("distance_km", sa.Float(), nullable=False),
        sa.Column("flight_duration_sec", sa.Float(), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_replied", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("read_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["from_user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["to_user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_letters_from_user_id", "letters", ["from_user_id"], unique=False)
    op.create_index("ix_letters_to_user_id", "letters", ["to_user_id"], unique=False)
    op.create_index("ix_letters_created_at", "letters", ["created_at"], unique=False)

    op.create_table(
        "letter_emotions",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("letter_id", sa.String(64), nullable=False),
        sa.Column("emotion_id", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["letter_id"], ["letters.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["emotion_id"], ["emotion_keywords.id"]),
        sa.UniqueConstraint("letter_id", "emotion_id", name="uq_letter_emotions_letter_emotion"),
    )
    op.create_index("ix_letter_emotions_letter_id", "letter_emotions", ["letter_id"], unique=False)

    op.create_table(
        "ai_analyses",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("post_id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("core_values", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("emotion_tone", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("keywords", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("pattern_changes", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
    )
    op.create_index("ix_ai_analyses_post_id", "ai_analyses", ["post_id"], unique=False)
    op.create_index("ix_ai_analyses_user_id", "ai_analyses", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_table("ai_analyses")
    op.drop_table("letter_emotions")
    op.drop_table("letters")
    op.drop_table("likes")
    op.drop_table("post_emotions")
    op.drop_table("posts")
    op.drop_table("emotion_keywords")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
