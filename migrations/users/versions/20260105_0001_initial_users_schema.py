"""Initial users schema.

Revision ID: 0001
Revises: None
Create Date: 2026-01-05

Users Domain Migration
Schema: users.*

- users.users: 로그인 계정과 프로필
- users.normal_user_details: 자산 연결 정보 (users.id 공유 1:1)
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.execute("CREATE SCHEMA IF NOT EXISTS users")

    # ============================================
    # users.users 테이블
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS users.users (
            id BIGSERIAL PRIMARY KEY,
            tofin_id VARCHAR(30) NOT NULL,
            user_info VARCHAR(255) NOT NULL,
            birth DATE NOT NULL,
            job VARCHAR(32),
            nickname VARCHAR(20) NOT NULL,
            profile_image VARCHAR(500),
            role VARCHAR(16) NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT uq_users_tofin_id UNIQUE (tofin_id)
        )
    """)

    # ============================================
    # users.normal_user_details 테이블
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS users.normal_user_details (
            user_id BIGINT PRIMARY KEY
                REFERENCES users.users(id) ON DELETE CASCADE,
            contact VARCHAR(11),
            back_social_id VARCHAR(64),
            social_name VARCHAR(64),
            public_amount BOOLEAN NOT NULL DEFAULT FALSE,
            public_percent BOOLEAN NOT NULL DEFAULT FALSE,

            CONSTRAINT uq_normal_user_details_contact UNIQUE (contact)
        )
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS users.normal_user_details")
    op.execute("DROP TABLE IF EXISTS users.users")
