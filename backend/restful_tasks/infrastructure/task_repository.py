"""Task Repository — TaskStore implementation on top of the PostgREST store client.

Invariants:
    - Single-id reads return the row list as the store sends it (never collapsed)
    - Writes return nothing; the caller echoes its own input
"""

from restful_tasks.core.domain_types import TaskId
from restful_tasks.core.repository_protocols import Row
from restful_tasks.infrastructure.store_client import StoreClient


class StoreTaskRepository:
    """Implements core.repository_protocols.TaskStore against one table."""

    def __init__(self, client: StoreClient, table: str = "tasks"):
        self._client = client
        self._table = table

    async def select_all(self) -> list[Row]:
        result = await self._client.table(self._table).select("*").execute()
        return result.data or []

    async def select_by_id(self, task_id: TaskId) -> list[Row]:
        result = await (
            self._client.table(self._table).select("*").eq("id", task_id).execute()
        )
        return result.data or []

    async def insert(self, task: Row) -> None:
        await self._client.table(self._table).insert(task).execute()

    async def update(self, task_id: TaskId, task: Row) -> None:
        await self._client.table(self._table).update(task).eq("id", task_id).execute()

    async def delete(self, task_id: TaskId) -> None:
        await self._client.table(self._table).delete().eq("id", task_id).execute()
