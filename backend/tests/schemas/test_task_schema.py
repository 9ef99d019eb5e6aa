"""Task Schemas — request envelope validation.

Invariants:
    - name and status required
    - status keeps int vs float
    - extra task fields preserved
"""

import pytest
from pydantic import ValidationError

from restful_tasks.schemas.task import TaskEnvelope


def test_envelope_parses_task():
    env = TaskEnvelope.model_validate_json(b'{"task": {"name": "a", "status": 0}}')
    assert env.task.model_dump() == {"name": "a", "status": 0}
    assert isinstance(env.task.status, int)


def test_float_status_stays_float():
    env = TaskEnvelope.model_validate({"task": {"name": "a", "status": 2.5}})
    assert env.task.status == 2.5
    assert isinstance(env.task.status, float)


def test_extra_fields_preserved():
    env = TaskEnvelope.model_validate({"task": {"name": "a", "status": 1, "owner": "kim"}})
    assert env.task.model_dump() == {"name": "a", "status": 1, "owner": "kim"}


@pytest.mark.parametrize("raw", [
    b"",
    b"not json",
    b"{}",
    b'{"task": null}',
    b'{"task": {"name": "a"}}',
    b'{"task": {"name": 5, "status": 1}}',
    b'{"task": {"name": "a", "status": "open"}}',
    b'{"task": {"name": "a", "status": true}}',
])
def test_invalid_bodies_rejected(raw):
    with pytest.raises(ValidationError):
        TaskEnvelope.model_validate_json(raw)
