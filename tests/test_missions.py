"""Mission composer: validation order, atomic creation, snapshots."""

from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from missionops import services
from missionops.errors import ConflictError, NotFoundError, PersistenceError, ValidationError
from missionops.models import Mission, MissionEmployee, MissionTask, TaskStatus
from missionops.services import missions as missions_service


def _count(db, model):
    return db.scalar(select(func.count()).select_from(model))


def test_create_mission_composes_everything(db, world, new_mission):
    mission = new_mission(description="  quarterly check ")

    assert mission.estimated_duration == 90
    assert mission.description == "quarterly check"
    assert mission.team_leader_id == world.alice.id
    assert sorted(link.employee_id for link in mission.employee_links) == [world.alice.id, world.bob.id]
    assert [(t.ord, t.description, t.estimated_duration, t.status_id) for t in mission.tasks] == [
        (1, "Check site access", 30, TaskStatus.NEW),
        (2, "Inspect equipment", 45, TaskStatus.NEW),
    ]
    assert services.mission_status(db, mission.id) == services.MissionStatus.RED


def test_empty_employee_set(db, world, new_mission):
    with pytest.raises(ValidationError):
        new_mission(employee_ids=[], team_leader_id=world.alice.id)
    assert _count(db, Mission) == 0


def test_team_leader_must_be_on_the_team(db, world, new_mission):
    with pytest.raises(ValidationError):
        new_mission(employee_ids=[world.alice.id, world.bob.id], team_leader_id=world.carol.id)
    assert _count(db, Mission) == 0

    mission = new_mission(employee_ids=[world.alice.id, world.bob.id], team_leader_id=world.alice.id)
    leaders = [link for link in mission.employee_links if link.is_team_leader]
    assert len(leaders) == 1 and leaders[0].employee_id == world.alice.id


def test_duplicate_employee_ids_collapse(db, world, new_mission):
    mission = new_mission(employee_ids=[world.bob.id, world.bob.id, world.alice.id], team_leader_id=world.bob.id)
    assert len(mission.employee_links) == 2


def test_validation_runs_before_lookups(db, world, new_mission):
    # leader check fails first even though the mission type is unknown
    with pytest.raises(ValidationError):
        new_mission(mission_type_id=9999, team_leader_id=world.carol.id)


def test_unknown_references(db, world, new_mission):
    with pytest.raises(NotFoundError):
        new_mission(mission_type_id=9999)
    with pytest.raises(NotFoundError):
        new_mission(project_id=9999)
    with pytest.raises(NotFoundError):
        new_mission(employee_ids=[world.alice.id, 777], team_leader_id=world.alice.id)
    assert _count(db, Mission) == 0


def test_mission_type_without_templates_yields_no_tasks(db, world, new_mission):
    empty = services.create_mission_type(db, "Walkthrough", 20)
    mission = new_mission(mission_type_id=empty.id)
    assert mission.tasks == []
    assert services.mission_status(db, mission.id) == services.MissionStatus.RED


def test_failed_employee_links_roll_everything_back(db, world, new_mission, monkeypatch):
    def boom(*_args, **_kwargs):
        raise OperationalError("INSERT INTO mission_employees", {}, Exception("disk I/O error"))

    monkeypatch.setattr(missions_service, "_link_employees", boom)

    with pytest.raises(PersistenceError) as exc:
        new_mission()
    assert isinstance(exc.value.__cause__, OperationalError)

    assert _count(db, Mission) == 0
    assert _count(db, MissionEmployee) == 0
    assert _count(db, MissionTask) == 0
    with pytest.raises(NotFoundError):
        services.get_mission(db, 1)


def test_template_edits_do_not_touch_existing_missions(db, world, new_mission):
    mission = new_mission()
    services.update_template(db, world.templates[0].id, description="Badge in", estimated_duration=99)
    services.update_mission_type(db, world.mission_type.id, estimated_duration=300)
    services.delete_template(db, world.templates[1].id)

    reloaded = services.get_mission(db, mission.id)
    assert reloaded.estimated_duration == 90
    assert [(t.ord, t.description, t.estimated_duration) for t in reloaded.tasks] == [
        (1, "Check site access", 30),
        (2, "Inspect equipment", 45),
    ]


def test_list_missions_newest_first_and_by_day(db, world, new_mission):
    older = new_mission(date=date(2026, 10, 1))
    newer = new_mission(date=date(2026, 10, 20))

    assert [m.id for m in services.list_missions(db)] == [newer.id, older.id]
    assert [m.id for m in services.list_missions(db, date(2026, 10, 1))] == [older.id]


def test_delete_mission_cascades(db, world, new_mission):
    mission = new_mission()
    services.delete_mission(db, mission.id)

    assert _count(db, MissionTask) == 0
    assert _count(db, MissionEmployee) == 0
    with pytest.raises(NotFoundError):
        services.delete_mission(db, mission.id)


def test_employee_on_a_mission_cannot_be_deleted(db, world, new_mission):
    new_mission()
    with pytest.raises(ConflictError):
        services.delete_employee(db, world.alice.id)

    services.delete_employee(db, world.carol.id)
    assert [e.first_name for e in services.list_employees(db)] == ["Alice", "Bob"]
