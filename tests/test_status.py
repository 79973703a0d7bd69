from __future__ import annotations

import pytest

from missionops.models import TaskStatus
from missionops.services import MissionStatus, derive_status

NEW, RUN, PAUSE, DONE = (
    TaskStatus.NEW,
    TaskStatus.IN_PROGRESS,
    TaskStatus.PAUSED,
    TaskStatus.COMPLETED,
)


@pytest.mark.parametrize(
    "states, expected",
    [
        ([], MissionStatus.RED),
        ([DONE, DONE], MissionStatus.GREEN),
        ([NEW, RUN], MissionStatus.ORANGE),
        ([NEW, NEW], MissionStatus.RED),
        ([NEW, PAUSE], MissionStatus.ORANGE),
        ([DONE, NEW], MissionStatus.ORANGE),
        ([DONE], MissionStatus.GREEN),
    ],
)
def test_derive_status(states, expected):
    assert derive_status(states) == expected


def test_derive_status_from_rows(db, new_mission, force_status):
    mission = new_mission()
    assert derive_status(mission.tasks) == MissionStatus.RED

    force_status(mission.tasks[0].id, DONE)
    assert derive_status(mission.tasks) == MissionStatus.ORANGE

    force_status(mission.tasks[1].id, DONE)
    assert derive_status(mission.tasks) == MissionStatus.GREEN
