"""TransactionManager Port."""

from typing import Protocol


class TransactionManager(Protocol):
    """트랜잭션 관리 포트."""

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
