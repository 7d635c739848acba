"""
Tests for the dopamine record endpoints and the analysis report.
"""
import uuid

RECORD = {
    "situation": "social",
    "mood": "bad",
    "note": "scrolled before bed",
    "usage_time": 30,
    "pattern_repetition": 5,
    "stress_level": 3,
}


class TestRecords:

    def test_score_is_computed_server_side(self, client, auth_headers):
        response = client.post(
            "/records", json={**RECORD, "dopamine_score": 1}, headers=auth_headers
        )
        assert response.status_code == 201
        body = response.json()
        assert body["dopamine_score"] == 53
        assert body["situation"] == "social"

    def test_out_of_range_inputs_rejected(self, client, auth_headers):
        assert client.post(
            "/records", json={**RECORD, "stress_level": 6}, headers=auth_headers
        ).status_code == 422
        assert client.post(
            "/records", json={**RECORD, "usage_time": -1}, headers=auth_headers
        ).status_code == 422
        assert client.post(
            "/records", json={**RECORD, "situation": "gaming"}, headers=auth_headers
        ).status_code == 422

    def test_list_and_get(self, client, auth_headers):
        created = client.post("/records", json=RECORD, headers=auth_headers).json()

        listed = client.get("/records", headers=auth_headers).json()
        assert [r["id"] for r in listed] == [created["id"]]

        response = client.get(f"/records/{created['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["note"] == "scrolled before bed"

    def test_records_are_private(self, client, auth_headers, other_auth_headers):
        created = client.post("/records", json=RECORD, headers=auth_headers).json()

        assert client.get(f"/records/{created['id']}", headers=other_auth_headers).status_code == 404
        assert client.get("/records", headers=other_auth_headers).json() == []

    def test_delete(self, client, auth_headers):
        created = client.post("/records", json=RECORD, headers=auth_headers).json()

        response = client.delete(f"/records/{created['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["success"] is True
        assert client.get(f"/records/{created['id']}", headers=auth_headers).status_code == 404

    def test_delete_unknown(self, client, auth_headers):
        response = client.delete(f"/records/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 404

    def test_score_preview(self, client, auth_headers):
        response = client.post(
            "/records/score-preview",
            json={"usage_time": 60, "pattern_repetition": 10, "stress_level": 5},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json() == {"dopamine_score": 100, "score_level": "danger", "label": "위험"}


class TestReport:

    def test_empty_report(self, client, auth_headers):
        response = client.get("/report", headers=auth_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["total_records"] == 0
        assert body["most_common_situation"] is None
        assert body["integrity_score"] == 100
        assert len(body["feedback"]) == 1

    def test_report_over_records(self, client, auth_headers):
        client.post("/records", json=RECORD, headers=auth_headers)
        client.post("/records", json={**RECORD, "mood": "good"}, headers=auth_headers)

        body = client.get("/report", headers=auth_headers).json()
        assert body["total_records"] == 2
        assert body["situation_breakdown"]["social"] == 2
        assert body["mood_breakdown"] == {"good": 1, "neutral": 0, "bad": 1}
        assert body["average_mood"] == 2.0
        assert body["average_score"] == 53.0
        assert body["score_level"] == "caution"
        assert body["most_common_situation"] == "social"
        assert body["integrity_score"] == 47
        assert len(body["weekly_trend"]) == 1
        assert body["weekly_trend"][0]["record_count"] == 2

    def test_labels(self, client):
        body = client.get("/report/labels").json()
        assert body["situations"]["boredom"] == "심심함"
        assert set(body) == {
            "situations", "moods", "score_levels", "contract_statuses", "routine_categories"
        }
