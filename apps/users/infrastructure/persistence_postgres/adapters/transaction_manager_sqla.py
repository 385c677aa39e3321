"""SQLAlchemy implementation of transaction manager."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession


class SqlaTransactionManager:
    """트랜잭션 관리자 SQLAlchemy 구현.

    게이트웨이는 flush까지만 수행하고, 커밋 시점은 서비스가 결정합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
