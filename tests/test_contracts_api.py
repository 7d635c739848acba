"""
Tests for word-to-self contracts.
"""
from datetime import datetime, timedelta, timezone

from app.schemas.contract import ContractCreate

CONTRACT = {
    "title": "No phone after 11pm",
    "goal_type": "time_limit",
    "target_value": 2,
}


def _window(days_before: int, days_after: int) -> dict:
    now = datetime.now(timezone.utc)
    return {
        "start_date": (now - timedelta(days=days_before)).isoformat(),
        "end_date": (now + timedelta(days=days_after)).isoformat(),
    }


class TestContracts:

    def test_create_defaults(self, client, auth_headers):
        response = client.post(
            "/contracts", json={**CONTRACT, **_window(1, 9)}, headers=auth_headers
        )
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "active"
        assert body["integrity_score"] == 100
        assert body["unit"] == "시간"
        assert 0 < body["completion"] < 100

    def test_end_before_start_rejected(self, client, auth_headers):
        response = client.post(
            "/contracts", json={**CONTRACT, **_window(-5, -10)}, headers=auth_headers
        )
        assert response.status_code == 422

    def test_complete(self, client, auth_headers):
        created = client.post(
            "/contracts", json={**CONTRACT, **_window(1, 9)}, headers=auth_headers
        ).json()

        response = client.patch(
            f"/contracts/{created['id']}/status", json={"status": "completed"}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["status"] == "completed"
        assert response.json()["completion"] == 100

    def test_closed_contract_cannot_change_again(self, client, auth_headers):
        created = client.post("/contracts", json=CONTRACT, headers=auth_headers).json()
        url = f"/contracts/{created['id']}/status"

        assert client.patch(url, json={"status": "failed"}, headers=auth_headers).status_code == 200
        assert client.patch(url, json={"status": "completed"}, headers=auth_headers).status_code == 409

    def test_cannot_reopen(self, client, auth_headers):
        created = client.post("/contracts", json=CONTRACT, headers=auth_headers).json()
        response = client.patch(
            f"/contracts/{created['id']}/status", json={"status": "active"}, headers=auth_headers
        )
        assert response.status_code == 422

    def test_filter_by_status(self, client, auth_headers):
        first = client.post("/contracts", json=CONTRACT, headers=auth_headers).json()
        client.post("/contracts", json={**CONTRACT, "title": "Read daily"}, headers=auth_headers)
        client.patch(
            f"/contracts/{first['id']}/status", json={"status": "failed"}, headers=auth_headers
        )

        failed = client.get("/contracts?status=failed", headers=auth_headers).json()
        assert [c["id"] for c in failed] == [first["id"]]
        assert failed[0]["completion"] == 0
        assert len(client.get("/contracts", headers=auth_headers).json()) == 2

    def test_private_and_deletable(self, client, auth_headers, other_auth_headers):
        created = client.post("/contracts", json=CONTRACT, headers=auth_headers).json()
        url = f"/contracts/{created['id']}"

        assert client.get(url, headers=other_auth_headers).status_code == 404
        assert client.delete(url, headers=auth_headers).status_code == 200
        assert client.get(url, headers=auth_headers).status_code == 404


class TestContractDates:
    """Dates are stored in UTC whatever offset the client sends."""

    def test_mixed_naive_and_aware_dates(self, client, auth_headers):
        response = client.post(
            "/contracts",
            json={
                **CONTRACT,
                "start_date": "2025-01-01T00:00:00Z",
                "end_date": "2025-01-10T00:00:00",
            },
            headers=auth_headers,
        )
        assert response.status_code == 201
        body = response.json()
        assert body["start_date"].startswith("2025-01-01T00:00:00")
        assert body["end_date"].startswith("2025-01-10T00:00:00")

    def test_offset_is_converted_not_dropped(self, client, auth_headers):
        response = client.post(
            "/contracts",
            json={
                **CONTRACT,
                "start_date": "2025-01-01T09:00:00+09:00",
                "end_date": "2025-01-08T09:00:00+09:00",
            },
            headers=auth_headers,
        )
        assert response.status_code == 201
        created = response.json()
        assert created["start_date"].startswith("2025-01-01T00:00:00")
        assert created["end_date"].startswith("2025-01-08T00:00:00")

        fetched = client.get(f"/contracts/{created['id']}", headers=auth_headers).json()
        assert fetched["start_date"] == created["start_date"]

    def test_end_before_start_after_conversion(self, client, auth_headers):
        # 08:00+09:00 is 23:00 UTC the day before, so the end precedes the start.
        response = client.post(
            "/contracts",
            json={
                **CONTRACT,
                "start_date": "2025-01-01T00:00:00Z",
                "end_date": "2025-01-01T08:00:00+09:00",
            },
            headers=auth_headers,
        )
        assert response.status_code == 422


class TestContractCreateSchema:

    def test_dates_normalised_to_utc(self):
        contract = ContractCreate(
            title="Offline evenings",
            start_date=datetime(2025, 1, 1, 9, 0, tzinfo=timezone(timedelta(hours=9))),
            end_date=datetime(2025, 1, 5),
        )
        assert contract.start_date == datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert contract.start_date.tzinfo == timezone.utc
        assert contract.end_date == datetime(2025, 1, 5, tzinfo=timezone.utc)
