"""Task state machine: legal moves, stamps, compare-and-set on status."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from itertools import product
from types import SimpleNamespace

import pytest

from missionops import services
from missionops.errors import ConflictError, InvalidTransitionError, NotFoundError, ValidationError
from missionops.models import TaskStatus
from missionops.services.task_states import TRANSITIONS, plan_transition

T0 = datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)


def _utc(ts):
    return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)


def _task(status, **stamps):
    base = dict(start_stamp=None, pause_stamp=None, unpause_stamp=None, stop_stamp=None)
    base.update(stamps)
    return SimpleNamespace(status_id=int(status), **base)


ILLEGAL = [
    (src, dst)
    for src, dst in product(TaskStatus, TaskStatus)
    if (src, dst) not in TRANSITIONS and not (src == dst and src != TaskStatus.IN_PROGRESS)
]


# ---------------------------------------------------------------------------
# Pure planning
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("src, dst", ILLEGAL)
def test_plan_rejects_illegal_pairs(src, dst):
    with pytest.raises(InvalidTransitionError):
        plan_transition(_task(src), dst, T0)


def test_illegal_set_covers_known_cases():
    assert (TaskStatus.NEW, TaskStatus.COMPLETED) in ILLEGAL
    assert (TaskStatus.NEW, TaskStatus.PAUSED) in ILLEGAL
    assert (TaskStatus.IN_PROGRESS, TaskStatus.IN_PROGRESS) in ILLEGAL
    assert (TaskStatus.COMPLETED, TaskStatus.IN_PROGRESS) in ILLEGAL


@pytest.mark.parametrize("state", [TaskStatus.NEW, TaskStatus.PAUSED, TaskStatus.COMPLETED])
def test_requesting_current_state_is_noop(state):
    assert plan_transition(_task(state), state, T0) == {}


@pytest.mark.parametrize(
    "src, dst, field",
    [
        (TaskStatus.NEW, TaskStatus.IN_PROGRESS, "start_stamp"),
        (TaskStatus.IN_PROGRESS, TaskStatus.PAUSED, "pause_stamp"),
        (TaskStatus.PAUSED, TaskStatus.IN_PROGRESS, "unpause_stamp"),
        (TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED, "stop_stamp"),
        (TaskStatus.PAUSED, TaskStatus.COMPLETED, "stop_stamp"),
    ],
)
def test_plan_writes_one_stamp(src, dst, field):
    assert plan_transition(_task(src), dst, T0) == {"status_id": int(dst), field: T0}


def test_stamps_never_go_backwards():
    task = _task(TaskStatus.IN_PROGRESS, start_stamp=T0)
    values = plan_transition(task, TaskStatus.PAUSED, T0 - timedelta(minutes=5))
    assert values["pause_stamp"] == T0


def test_status_names_accepted():
    values = plan_transition(_task(TaskStatus.NEW), "in_progress", T0)
    assert values["status_id"] == TaskStatus.IN_PROGRESS
    with pytest.raises(ValidationError):
        plan_transition(_task(TaskStatus.NEW), "exploded", T0)


# ---------------------------------------------------------------------------
# Persisted transitions
# ---------------------------------------------------------------------------

def test_full_lifecycle_with_pause_cycles(db, new_mission):
    task_id = new_mission().tasks[0].id

    t = services.transition_task(db, task_id, TaskStatus.IN_PROGRESS, now=T0)
    assert t.status_id == TaskStatus.IN_PROGRESS
    assert _utc(t.start_stamp) == T0

    services.transition_task(db, task_id, TaskStatus.PAUSED, now=T0 + timedelta(minutes=10))
    services.transition_task(db, task_id, TaskStatus.IN_PROGRESS, now=T0 + timedelta(minutes=15))
    t = services.transition_task(db, task_id, TaskStatus.PAUSED, now=T0 + timedelta(minutes=30))
    # only the latest pause is kept; resume does not move the start
    assert _utc(t.pause_stamp) == T0 + timedelta(minutes=30)
    assert _utc(t.unpause_stamp) == T0 + timedelta(minutes=15)
    assert _utc(t.start_stamp) == T0

    t = services.transition_task(db, task_id, TaskStatus.COMPLETED, now=T0 + timedelta(minutes=40))
    assert t.status_id == TaskStatus.COMPLETED
    assert _utc(t.stop_stamp) == T0 + timedelta(minutes=40)


@pytest.mark.parametrize("src, dst", ILLEGAL)
def test_illegal_transition_leaves_row_unchanged(db, new_mission, force_status, src, dst):
    task_id = new_mission().tasks[0].id
    force_status(task_id, src)

    with pytest.raises(InvalidTransitionError):
        services.transition_task(db, task_id, dst)

    db.expire_all()
    task = services.get_task(db, task_id)
    assert task.status_id == src
    assert task.start_stamp is None and task.stop_stamp is None


def test_unknown_task(db):
    with pytest.raises(NotFoundError):
        services.transition_task(db, 404, TaskStatus.IN_PROGRESS)


def test_expected_status_mismatch_is_conflict(db, new_mission):
    task_id = new_mission().tasks[0].id
    with pytest.raises(ConflictError):
        services.transition_task(db, task_id, TaskStatus.PAUSED, expected_status=TaskStatus.IN_PROGRESS)
    assert services.get_task(db, task_id).status_id == TaskStatus.NEW


def test_racing_transitions_only_one_wins(db, session_factory, new_mission):
    task_id = new_mission().tasks[0].id
    services.transition_task(db, task_id, TaskStatus.IN_PROGRESS)

    with session_factory() as first, session_factory() as second:
        # both requests read the task while it is in progress; keep the reads
        # alive so each session transitions from what it saw
        seen_first = services.get_task(first, task_id)
        seen_second = services.get_task(second, task_id)
        assert seen_first.status_id == TaskStatus.IN_PROGRESS
        assert seen_second.status_id == TaskStatus.IN_PROGRESS

        services.transition_task(first, task_id, TaskStatus.COMPLETED)
        with pytest.raises(ConflictError):
            services.transition_task(second, task_id, TaskStatus.PAUSED)

    db.expire_all()
    task = services.get_task(db, task_id)
    assert task.status_id == TaskStatus.COMPLETED
    assert task.pause_stamp is None


def test_racing_transitions_with_pinned_status(db, session_factory, new_mission):
    task_id = new_mission().tasks[0].id
    services.transition_task(db, task_id, TaskStatus.IN_PROGRESS)

    with session_factory() as first, session_factory() as second:
        services.transition_task(
            first, task_id, TaskStatus.COMPLETED, expected_status=TaskStatus.IN_PROGRESS
        )
        with pytest.raises(ConflictError):
            services.transition_task(
                second, task_id, TaskStatus.PAUSED, expected_status=TaskStatus.IN_PROGRESS
            )

    db.expire_all()
    assert services.get_task(db, task_id).status_id == TaskStatus.COMPLETED
