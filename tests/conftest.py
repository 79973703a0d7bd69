from __future__ import annotations

import os
from datetime import date
from types import SimpleNamespace

# must be set before missionops.db builds its module-level engine
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import update

from missionops import services
from missionops.db import get_db, init_db, make_engine, make_sessionmaker
from missionops.main import app
from missionops.models import MissionTask


@pytest.fixture
def engine(tmp_path):
    eng = make_engine(f"sqlite:///{tmp_path / 'missionops.db'}")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return make_sessionmaker(engine)


@pytest.fixture
def db(session_factory):
    with session_factory() as s:
        yield s


@pytest.fixture
def world(db):
    """One mission type with two templates, one project, three employees."""
    inspection = services.create_mission_type(db, "Inspection", 90)
    t1 = services.add_template(db, inspection.id, "Check site access", 30)
    t2 = services.add_template(db, inspection.id, "Inspect equipment", 45)
    project = services.create_project(db, "North Plant")
    alice = services.create_employee(db, "Alice", "Adams")
    bob = services.create_employee(db, "Bob", "Brown")
    carol = services.create_employee(db, "Carol", "Clark")
    return SimpleNamespace(
        mission_type=inspection,
        templates=[t1, t2],
        project=project,
        alice=alice,
        bob=bob,
        carol=carol,
    )


@pytest.fixture
def new_mission(db, world):
    def _make(**overrides):
        kwargs = dict(
            date=date(2026, 10, 19),
            mission_type_id=world.mission_type.id,
            project_id=world.project.id,
            employee_ids=[world.alice.id, world.bob.id],
            team_leader_id=world.alice.id,
        )
        kwargs.update(overrides)
        return services.create_mission(db, **kwargs)
    return _make


@pytest.fixture
def force_status(db):
    """Put a task straight into a state, bypassing the state machine."""
    def _force(task_id: int, status) -> None:
        db.execute(update(MissionTask).where(MissionTask.id == task_id).values(status_id=int(status)))
        db.commit()
        db.expire_all()
    return _force


@pytest.fixture
def client(session_factory):
    def _override():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _override
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
