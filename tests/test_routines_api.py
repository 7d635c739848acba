"""
Tests for reset routines and the wellness dashboard.
"""
import pytest
from sqlalchemy.exc import IntegrityError

from app.crud.reset_routine import crud_reset_routine
from app.crud.user_auth import crud_user_auth
from app.data.routine_repository import ROUTINE_REPOSITORY
from app.services.reset_routine import reset_routine_service

RECORD = {
    "situation": "habit",
    "mood": "neutral",
    "usage_time": 60,
    "pattern_repetition": 10,
    "stress_level": 5,
}


def _routine(body: dict, category: str) -> dict:
    return next(r for r in body["routines"] if r["category"] == category)


class TestRoutines:

    def test_first_listing_seeds_catalog_once(self, client, auth_headers):
        first = client.get("/routines", headers=auth_headers).json()
        second = client.get("/routines", headers=auth_headers).json()

        assert len(first["routines"]) == 5
        assert {r["id"] for r in first["routines"]} == {r["id"] for r in second["routines"]}
        assert first["completed_count"] == 0
        assert first["total_effect"] == 0
        assert all(r["description"] for r in first["routines"])

    def test_complete_once(self, client, auth_headers):
        meditation = _routine(client.get("/routines", headers=auth_headers).json(), "meditation")
        url = f"/routines/{meditation['id']}/complete"

        response = client.post(url, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["completed"] is True
        assert response.json()["completed_at"] is not None

        assert client.post(url, headers=auth_headers).status_code == 409

        body = client.get("/routines", headers=auth_headers).json()
        assert body["completed_count"] == 1
        assert body["total_effect"] == meditation["dopamine_reduction"]

    def test_reset_clears_completion(self, client, auth_headers):
        routines = client.get("/routines", headers=auth_headers).json()["routines"]
        for routine in routines[:2]:
            client.post(f"/routines/{routine['id']}/complete", headers=auth_headers)

        body = client.post("/routines/reset", headers=auth_headers).json()
        assert body["completed_count"] == 0
        assert body["total_effect"] == 0
        assert len(body["routines"]) == 5

    def test_other_users_routine(self, client, auth_headers, other_auth_headers):
        routine = client.get("/routines", headers=auth_headers).json()["routines"][0]
        response = client.post(f"/routines/{routine['id']}/complete", headers=other_auth_headers)
        assert response.status_code == 404


class TestRoutineSeeding:
    """Each user holds at most one routine per catalog category."""

    def test_duplicate_category_rejected(self, db_session, auth_headers):
        user = crud_user_auth.get_by_email(db_session, email="user@example.com")
        crud_reset_routine.create_many(db_session, user_id=user.id, entries=ROUTINE_REPOSITORY)

        with pytest.raises(IntegrityError):
            crud_reset_routine.create_many(
                db_session, user_id=user.id, entries=ROUTINE_REPOSITORY[:1]
            )
        db_session.rollback()

    def test_losing_a_seeding_race_returns_the_winner_rows(
        self, client, db_session, auth_headers, monkeypatch
    ):
        seeded = client.get("/routines", headers=auth_headers).json()["routines"]
        user = crud_user_auth.get_by_email(db_session, email="user@example.com")

        real_read = crud_reset_routine.get_multi_by_user
        reads = []

        def read_before_other_commit(db, *, user_id):
            reads.append(user_id)
            # The first read happens before the concurrent seed is visible.
            return [] if len(reads) == 1 else real_read(db, user_id=user_id)

        monkeypatch.setattr(crud_reset_routine, "get_multi_by_user", read_before_other_commit)
        routines = reset_routine_service.get_or_create_routines(db_session, user)

        assert len(routines) == 5
        assert {str(r.id) for r in routines} == {r["id"] for r in seeded}
        assert reset_routine_service.summarize(routines).total_effect == 0


class TestWellnessSummary:

    def test_empty_dashboard(self, client, auth_headers):
        body = client.get("/wellness/summary", headers=auth_headers).json()

        assert body["current_score"] is None
        assert body["score_trend"] is None
        assert body["integrity_score"] == 100
        assert body["total_routines"] == 5
        assert body["active_contracts"] == 0
        assert body["average_contract_integrity"] == 100

    def test_dashboard_numbers(self, client, auth_headers):
        client.post("/records", json=RECORD, headers=auth_headers)
        client.post("/records", json=RECORD, headers=auth_headers)
        client.post("/contracts", json={"title": "Offline Sundays"}, headers=auth_headers)
        routine = client.get("/routines", headers=auth_headers).json()["routines"][0]
        client.post(f"/routines/{routine['id']}/complete", headers=auth_headers)

        body = client.get("/wellness/summary", headers=auth_headers).json()
        assert body["current_score"] == 100
        assert body["previous_score"] == 100
        assert body["score_level"] == "danger"
        assert body["score_trend"] == "maintained"
        assert body["integrity_score"] == 0
        assert body["active_contracts"] == 1
        assert body["average_contract_integrity"] == 100
        assert body["completed_routines"] == 1
        assert body["routine_effect"] == routine["dopamine_reduction"]
