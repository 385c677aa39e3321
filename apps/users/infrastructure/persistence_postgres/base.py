"""Declarative base for users schema."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

from apps.users.infrastructure.persistence_postgres.constants import USERS_SCHEMA


class Base(DeclarativeBase):
    """users 스키마 ORM 모델 기반 클래스."""

    metadata = MetaData(schema=USERS_SCHEMA)
