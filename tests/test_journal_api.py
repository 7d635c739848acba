"""
Tests for the one-entry-per-date journal.
"""


class TestJournal:

    def test_upsert_keeps_a_single_entry_per_date(self, client, auth_headers):
        first = client.put(
            "/journal/2025-01-15", json={"reflection": "  calm day  "}, headers=auth_headers
        )
        assert first.status_code == 200
        assert first.json()["reflection"] == "calm day"

        second = client.put(
            "/journal/2025-01-15",
            json={"reflection": "rewrote it", "goals": "sleep early"},
            headers=auth_headers,
        )
        assert second.status_code == 200
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["goals"] == "sleep early"

        entries = client.get("/journal", headers=auth_headers).json()
        assert len(entries) == 1

    def test_blank_entry_rejected(self, client, auth_headers):
        response = client.put(
            "/journal/2025-01-15", json={"reflection": "   ", "goals": ""}, headers=auth_headers
        )
        assert response.status_code == 422

    def test_newest_date_first(self, client, auth_headers):
        for day in ("2025-01-10", "2025-01-12", "2025-01-11"):
            client.put(f"/journal/{day}", json={"goals": "walk"}, headers=auth_headers)

        dates = [e["date"] for e in client.get("/journal", headers=auth_headers).json()]
        assert dates == ["2025-01-12", "2025-01-11", "2025-01-10"]

    def test_missing_entry(self, client, auth_headers):
        assert client.get("/journal/2025-02-01", headers=auth_headers).status_code == 404

    def test_delete(self, client, auth_headers):
        client.put("/journal/2025-01-15", json={"goals": "read"}, headers=auth_headers)

        assert client.delete("/journal/2025-01-15", headers=auth_headers).status_code == 200
        assert client.get("/journal/2025-01-15", headers=auth_headers).status_code == 404

    def test_entries_are_private(self, client, auth_headers, other_auth_headers):
        client.put("/journal/2025-01-15", json={"goals": "read"}, headers=auth_headers)
        assert client.get("/journal/2025-01-15", headers=other_auth_headers).status_code == 404
