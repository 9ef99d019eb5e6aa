"""Task Operations — one handler per store call, plus explicit dispatch.

Invariants:
    - Every handler issues exactly one store call, then shapes the payload
    - get_task returns {"task": <row list>}: the list is not collapsed
    - create_task / update_task echo the input task, never a re-fetched row
    - delete_task returns {} whether or not the id existed
    - Store errors propagate untouched; the router boundary converts them

Design Decisions:
    - Explicit dict over getattr: every operation->handler mapping visible in one place
    - Handlers return payload dicts, not responses: headers and status are router concerns
"""

import logging

from restful_tasks.core.domain_types import Operation, TaskId
from restful_tasks.core.repository_protocols import Row, TaskStore

logger = logging.getLogger(__name__)


class TaskOperations:
    """Routes Operation -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, store: TaskStore):
        self._store = store
        self._handlers = {
            Operation.GET_TASK: self._get_task,
            Operation.GET_ALL_TASKS: self._get_all_tasks,
            Operation.CREATE_TASK: self._create_task,
            Operation.UPDATE_TASK: self._update_task,
            Operation.DELETE_TASK: self._delete_task,
        }

    async def execute(
        self, operation: Operation, task_id: TaskId | None, task: Row | None,
    ) -> dict:
        """Run the handler for operation. Raises KeyError for PREFLIGHT (no store call)."""
        handler = self._handlers[operation]
        logger.debug(
            f"Running {operation.value}",
            extra={"operation": operation.value, "task_id": task_id},
        )
        return await handler(task_id, task)

    async def get_task(self, task_id: TaskId) -> dict:
        task = await self._store.select_by_id(task_id)
        return {"task": task}

    async def get_all_tasks(self) -> dict:
        tasks = await self._store.select_all()
        return {"tasks": tasks}

    async def delete_task(self, task_id: TaskId) -> dict:
        await self._store.delete(task_id)
        return {}

    async def update_task(self, task_id: TaskId, task: Row) -> dict:
        await self._store.update(task_id, task)
        return {"task": task}

    async def create_task(self, task: Row) -> dict:
        await self._store.insert(task)
        return {"task": task}

    # Uniform (task_id, task) adapters for the dispatch table

    async def _get_task(self, task_id, task):
        return await self.get_task(task_id)

    async def _get_all_tasks(self, task_id, task):
        return await self.get_all_tasks()

    async def _create_task(self, task_id, task):
        return await self.create_task(task)

    async def _update_task(self, task_id, task):
        return await self.update_task(task_id, task)

    async def _delete_task(self, task_id, task):
        return await self.delete_task(task_id)
