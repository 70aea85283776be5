from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def match_payload() -> dict[str, object]:
    return {
        "id": "match-123",
        "status": "scheduled",
        "scheduledFor": "2025-03-01 19:30:00+00",
        "homeTeam": {"id": "t1", "name": "Team A", "logo": None, "nickname": "A"},
        "awayTeam": {"id": "t2", "name": "Team B", "logo": None, "nickname": "B"},
        "homeScore": 0,
        "awayScore": 0,
        "times": {
            "firstHalfStartedAt": None,
            "secondHalfStartedAt": None,
            "firstHalfExtraTimeStartedAt": None,
            "secondHalfExtraTimeStartedAt": None,
        },
        "season": {
            "id": "s1",
            "name": "2025",
            "startDate": "2025-01-01",
            "endDate": "2025-12-31",
        },
    }
