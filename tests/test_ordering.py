"""Adjacent-swap moves and renumbering of task templates."""

from __future__ import annotations

import pytest
from sqlalchemy import update

from missionops import services
from missionops.errors import ConflictError, NotFoundError, ValidationError
from missionops.models import TaskTemplate
from missionops.services import ordering


def _descriptions(rows):
    return [t.description for t in rows]


@pytest.fixture
def three(db, world):
    third = services.add_template(db, world.mission_type.id, "Write report", 15)
    return world.templates + [third]


def test_move_up_swaps_with_previous(db, world, three):
    rows = services.move(db, three[2].id, "up")
    assert _descriptions(rows) == ["Check site access", "Write report", "Inspect equipment"]
    assert [t.ord for t in rows] == [1, 2, 3]


def test_move_down_swaps_with_next(db, world, three):
    rows = services.move(db, three[0].id, services.Direction.DOWN)
    assert _descriptions(rows) == ["Inspect equipment", "Check site access", "Write report"]


def test_move_at_edges_is_noop(db, world, three):
    before = _descriptions(services.list_templates(db, world.mission_type.id))
    assert _descriptions(services.move(db, three[0].id, "up")) == before
    assert _descriptions(services.move(db, three[2].id, "down")) == before


def test_move_bad_direction(db, world):
    with pytest.raises(ValidationError):
        services.move(db, world.templates[0].id, "sideways")


def test_move_unknown_template(db):
    with pytest.raises(NotFoundError):
        services.move(db, 999, "up")


def test_renumber_closes_gaps_and_is_idempotent(db, world, three):
    mt = world.mission_type.id
    # simulate a gap left by an out-of-band delete: ords 1, 5, 9
    for tpl, new_ord in zip(three, (1, 5, 9)):
        db.execute(update(TaskTemplate).where(TaskTemplate.id == tpl.id).values(ord=new_ord))
    db.commit()

    once = [(t.id, t.ord) for t in services.renumber(db, mt)]
    twice = [(t.id, t.ord) for t in services.renumber(db, mt)]
    assert [o for _, o in once] == [1, 2, 3]
    assert once == twice
    assert [i for i, _ in once] == [t.id for t in three]


def test_move_conflicts_when_order_changes_underneath(db, session_factory, world, monkeypatch):
    t1, t2 = world.templates
    real = ordering.ordered_templates
    raced = {"done": False}

    def racing(db_, mission_type_id):
        rows = real(db_, mission_type_id)
        if not raced["done"]:
            raced["done"] = True
            # another request swaps the pair after we read it
            with session_factory() as other:
                services.move(other, t2.id, "up")
        return rows

    monkeypatch.setattr(ordering, "ordered_templates", racing)

    with pytest.raises(ConflictError):
        services.move(db, t1.id, "down")

    monkeypatch.undo()
    rows = services.list_templates(db, world.mission_type.id)
    assert [(t.id, t.ord) for t in rows] == [(t2.id, 1), (t1.id, 2)]
