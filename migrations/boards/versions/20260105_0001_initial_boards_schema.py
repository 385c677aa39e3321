"""Initial boards schema.

Revision ID: 0001
Revises: None
Create Date: 2026-01-05

Boards Domain Migration
Schema: boards.*

user_id는 users 스키마를 참조하지 않습니다 (서비스 간 FK 없음).
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.execute("CREATE SCHEMA IF NOT EXISTS boards")

    op.execute("""
        CREATE TABLE IF NOT EXISTS boards.board_categories (
            id INTEGER PRIMARY KEY,
            name VARCHAR(50) NOT NULL,

            CONSTRAINT uq_board_categories_name UNIQUE (name)
        )
    """)

    # 기본 카테고리
    op.execute("""
        INSERT INTO boards.board_categories (id, name) VALUES
            (1, 'free'),
            (2, 'invest'),
            (3, 'review')
        ON CONFLICT (id) DO NOTHING
    """)

    # ============================================
    # boards.boards 테이블
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS boards.boards (
            id BIGSERIAL PRIMARY KEY,
            title VARCHAR(100) NOT NULL,
            content TEXT NOT NULL,
            category_id INTEGER NOT NULL REFERENCES boards.board_categories(id),
            user_id BIGINT NOT NULL,
            nickname VARCHAR(20) NOT NULL,
            profile_image VARCHAR(500),
            job VARCHAR(32),
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_boards_boards_category_id
        ON boards.boards(category_id)
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_boards_boards_user_id
        ON boards.boards(user_id)
    """)

    # ============================================
    # 태그 / 좋아요 / 북마크 (복합 PK, 게시글 삭제 시 CASCADE)
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS boards.board_product_tags (
            board_id BIGINT NOT NULL REFERENCES boards.boards(id) ON DELETE CASCADE,
            product_id BIGINT NOT NULL,
            PRIMARY KEY (board_id, product_id)
        )
    """)
    for table in ("board_likes", "board_bookmarks"):
        op.execute(f"""
            CREATE TABLE IF NOT EXISTS boards.{table} (
                board_id BIGINT NOT NULL REFERENCES boards.boards(id) ON DELETE CASCADE,
                user_id BIGINT NOT NULL,
                created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
                PRIMARY KEY (board_id, user_id)
            )
        """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS boards.board_bookmarks")
    op.execute("DROP TABLE IF EXISTS boards.board_likes")
    op.execute("DROP TABLE IF EXISTS boards.board_product_tags")
    op.execute("DROP TABLE IF EXISTS boards.boards")
    op.execute("DROP TABLE IF EXISTS boards.board_categories")
