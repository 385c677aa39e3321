"""Declarative base for boards schema."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

from apps.boards.infrastructure.persistence_postgres.constants import BOARDS_SCHEMA


class Base(DeclarativeBase):
    """boards 스키마 ORM 모델 기반 클래스."""

    metadata = MetaData(schema=BOARDS_SCHEMA)
