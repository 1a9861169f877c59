"""Integration tests for appeal API routes."""

from fastapi import status
from common.enums import AppealStatus, DataSource


class TestAppealRoutes:
    """Test appeal API endpoints on mock data."""

    def test_list_appeals(self, client):
        """Test seeded appeals are joined with their denials."""
        response = client.get("/appeals/")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["source"] == DataSource.MOCK.value
        assert data["summary"]["total"] == 2
        assert data["summary"]["active"] == 2
        assert data["summary"]["approved"] == 0
        assert data["summary"]["overdue"] == 2

        first = data["appeals"][0]
        assert first["id"] == "appeal_001"
        assert first["claim_number"] == "CLM-2024-002"
        assert first["patient_name"] == "Michael Chen"
        assert first["type_label"] == "First Level"
        assert first["is_overdue"] is True

    def test_list_appeals_with_filters(self, client):
        response = client.get("/appeals/?status_filter=under-review")
        assert [a["id"] for a in response.json()["appeals"]] == ["appeal_002"]

        response = client.get("/appeals/?appeal_type=second-level")
        assert response.json()["appeals"] == []

    def test_list_appeals_search_by_claim_number(self, client):
        response = client.get("/appeals/?search=clm-2024-005")
        assert [a["id"] for a in response.json()["appeals"]] == ["appeal_002"]

    def test_dangling_denial_reference(self, client):
        """Test an appeal whose denial was deleted shows placeholders."""
        client.delete("/denials/denial_002")
        data = client.get("/appeals/").json()
        first = data["appeals"][0]
        assert first["denial_id"] == "denial_002"
        assert first["claim_number"] == "N/A"
        assert first["insurance_company"] == "N/A"

    def test_create_appeal(self, client, sample_appeal_data):
        response = client.post("/appeals/", json=sample_appeal_data)
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["status"] == AppealStatus.DRAFT.value
        assert data["denial_id"] == "denial_001"
        assert data["deadline_date"] == sample_appeal_data["deadline_date"]
        assert client.get("/appeals/").json()["summary"]["total"] == 3

    def test_create_appeal_for_unknown_denial(self, client, sample_appeal_data):
        """Test the denial reference is not validated."""
        sample_appeal_data["denial_id"] = "denial_missing"
        response = client.post("/appeals/", json=sample_appeal_data)
        assert response.status_code == status.HTTP_201_CREATED

    def test_create_appeal_without_deadline(self, client, sample_appeal_data):
        del sample_appeal_data["deadline_date"]
        created = client.post("/appeals/", json=sample_appeal_data).json()
        rows = client.get("/appeals/").json()["appeals"]
        row = next(r for r in rows if r["id"] == created["id"])
        assert row["deadline_date"] is None
        assert row["is_overdue"] is False

    def test_create_appeal_invalid_type(self, client, sample_appeal_data):
        sample_appeal_data["appeal_type"] = "third-level"
        response = client.post("/appeals/", json=sample_appeal_data)
        assert response.status_code == 422

    def test_update_appeal(self, client):
        response = client.patch("/appeals/appeal_001", json={"status": "approved"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "approved"
        assert client.get("/appeals/").json()["summary"]["approved"] == 1

    def test_update_appeal_clears_deadline(self, client):
        """Test clearing a deadline stops the appeal counting as overdue."""
        response = client.patch("/appeals/appeal_001", json={"deadline_date": None})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["deadline_date"] is None

        data = client.get("/appeals/").json()
        assert data["summary"]["overdue"] == 1
        assert data["appeals"][0]["is_overdue"] is False

    def test_update_appeal_rejects_invalid_values(self, client):
        for changes in ({"denial_id": ""}, {"denial_id": None}, {"status": None}):
            response = client.patch("/appeals/appeal_001", json=changes)
            assert response.status_code == 422

        first = client.get("/appeals/").json()["appeals"][0]
        assert first["denial_id"] == "denial_002"
        assert first["status"] == "submitted"

    def test_update_appeal_not_found(self, client):
        response = client.patch("/appeals/appeal_999", json={"status": "approved"})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_appeal(self, client):
        assert client.delete("/appeals/appeal_001").status_code == status.HTTP_204_NO_CONTENT
        assert client.delete("/appeals/appeal_001").status_code == status.HTTP_404_NOT_FOUND

    def test_appeal_letter(self, client):
        response = client.post(
            "/appeals/letter",
            json={
                "denial_id": "denial_004",
                "appeal_date": "2024-01-20",
                "appeal_reason": "FDA approval granted in 2023",
                "submitted_by": "Dr. Brown",
            },
        )
        assert response.status_code == status.HTTP_200_OK
        letter = response.json()["letter"]
        assert "To: UnitedHealthcare" in letter
        assert "Claim Amount: $4750.00" in letter
        assert "FDA approval granted in 2023" in letter
        assert letter.rstrip().endswith("specific appeal requirements.")

    def test_appeal_letter_unknown_denial(self, client):
        response = client.post("/appeals/letter", json={"denial_id": "denial_999"})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_upload_appeal_document(self, client):
        response = client.post(
            "/appeals/appeal_001/documents",
            files={"file": ("letter.pdf", b"appeal", "application/pdf")},
        )
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["appeal_id"] == "appeal_001"
        assert data["denial_id"] is None
        assert data["file_url"].endswith("/appeals/appeal_001/letter.pdf")


class TestAppealRoutesRemote:
    """Test appeal API endpoints with a working remote database."""

    def test_remote_create_and_list(self, remote_client, sample_appeal_data):
        created = remote_client.post("/appeals/", json=sample_appeal_data).json()
        data = remote_client.get("/appeals/").json()
        assert data["source"] == DataSource.REMOTE.value
        assert [a["id"] for a in data["appeals"]] == [created["id"]]
        # denial_001 lives only in the mock store
        assert data["appeals"][0]["claim_number"] == "N/A"

    def test_remote_update_clears_deadline(self, remote_client, sample_appeal_data):
        created = remote_client.post("/appeals/", json=sample_appeal_data).json()
        response = remote_client.patch(f"/appeals/{created['id']}", json={"deadline_date": None})
        assert response.json()["deadline_date"] is None
        assert remote_client.get("/appeals/").json()["summary"]["overdue"] == 0

    def test_remote_invalid_update_is_not_stored(self, remote_client, sample_appeal_data):
        created = remote_client.post("/appeals/", json=sample_appeal_data).json()
        response = remote_client.patch(f"/appeals/{created['id']}", json={"denial_id": ""})
        assert response.status_code == 422

        listing = remote_client.get("/appeals/")
        assert listing.status_code == status.HTTP_200_OK
        assert listing.json()["appeals"][0]["denial_id"] == "denial_001"
