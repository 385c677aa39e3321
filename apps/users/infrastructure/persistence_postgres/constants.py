"""Database schema and table constants.

PostgreSQL 스키마 및 테이블 관련 상수들을 정의합니다.
"""

# =============================================================================
# Schema Names
# =============================================================================
USERS_SCHEMA = "users"

# =============================================================================
# Table Names (users schema)
# =============================================================================
USERS_TABLE = "users"
NORMAL_USER_DETAILS_TABLE = "normal_user_details"
