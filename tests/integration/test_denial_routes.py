"""Integration tests for denial API routes."""

import inspect
import pytest
from fastapi import status
from common.enums import DenialStatus, DataSource


class TestDenialRoutes:
    """Test denial API endpoints on mock data."""

    def test_list_denials(self, client):
        """Test listing the fallback user's seeded denials."""
        response = client.get("/denials/")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["source"] == DataSource.MOCK.value
        assert data["summary"]["total"] == 6
        assert data["summary"]["pending"] == 2
        assert data["summary"]["resolved"] == 1
        assert data["summary"]["total_amount"] == 14430.00
        assert len(data["denials"]) == 6
        first = data["denials"][0]
        assert first["id"] == "denial_001"
        assert first["formatted_amount"] == "$2,450"
        assert first["days_open"] > 0

    def test_list_denials_with_filters(self, client):
        response = client.get("/denials/?status_filter=pending&priority=urgent")
        data = response.json()
        assert [d["id"] for d in data["denials"]] == ["denial_004"]
        assert data["summary"]["shown"] == 1
        assert data["summary"]["total"] == 6
        assert data["summary"]["total_amount"] == 4750.00

    def test_list_denials_with_search(self, client):
        response = client.get("/denials/?search=aetna")
        assert [d["id"] for d in response.json()["denials"]] == ["denial_002"]

    def test_list_denials_signed_in_user(self, client):
        """Test a signed-in user without records gets an empty list."""
        client.post("/auth/login", json={"user_id": "user_456"})
        data = client.get("/denials/").json()
        assert data["denials"] == []
        assert data["summary"]["total"] == 0

    def test_create_denial(self, client, sample_denial_data):
        """Test creating a denial from form data."""
        response = client.post("/denials/", json=sample_denial_data)
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["status"] == DenialStatus.PENDING.value
        assert data["claim_number"] == sample_denial_data["claim_number"]
        assert data["claim_amount"] == sample_denial_data["claim_amount"]
        assert data["user_id"] == "user_123"
        assert data["id"].startswith("denial_")

        listing = client.get("/denials/").json()
        assert listing["summary"]["total"] == 7

    def test_create_denial_ignores_status(self, client, sample_denial_data):
        """Test a submitted status is ignored; new denials are pending."""
        sample_denial_data["status"] = DenialStatus.RESOLVED.value
        response = client.post("/denials/", json=sample_denial_data)
        assert response.json()["status"] == DenialStatus.PENDING.value

    @pytest.mark.parametrize(
        "field,value",
        [("claim_amount", -10), ("claim_number", ""), ("priority", "critical")],
    )
    def test_create_denial_validation(self, client, sample_denial_data, field, value):
        sample_denial_data[field] = value
        response = client.post("/denials/", json=sample_denial_data)
        assert response.status_code == 422

    def test_get_denial(self, client):
        response = client.get("/denials/denial_003")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status_label"] == "Resolved"

    def test_get_denial_not_found(self, client):
        response = client.get("/denials/denial_999")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_denial(self, client):
        """Test a partial update leaves other fields alone."""
        response = client.patch("/denials/denial_001", json={"status": "resolved"})
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "resolved"
        assert data["priority"] == "high"
        assert data["updated_at"] > data["created_at"]

    def test_update_denial_not_found(self, client):
        response = client.patch("/denials/denial_999", json={"status": "resolved"})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_denial_invalid_status(self, client):
        response = client.patch("/denials/denial_001", json={"status": "closed"})
        assert response.status_code == 422

    @pytest.mark.parametrize(
        "changes",
        [{"patient_name": ""}, {"insurance_company": ""}, {"claim_number": None}, {"priority": None}],
    )
    def test_update_denial_rejects_invalid_values(self, client, changes):
        """Test values a stored denial cannot hold are rejected before any write."""
        response = client.patch("/denials/denial_001", json=changes)
        assert response.status_code == 422

        denial = client.get("/denials/denial_001").json()
        assert denial["patient_name"] == "Sarah Johnson"
        assert denial["insurance_company"] == "Blue Cross Blue Shield"
        assert denial["updated_at"] == denial["created_at"]

    def test_update_denial_clears_dates(self, client):
        response = client.patch("/denials/denial_001", json={"denial_date": None})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["denial_date"] is None
        assert response.json()["service_date"] == "2024-01-10"
        assert client.get("/denials/denial_001").json()["days_open"] is None

    def test_delete_denial(self, client):
        response = client.delete("/denials/denial_002")
        assert response.status_code == status.HTTP_204_NO_CONTENT

        response = client.delete("/denials/denial_002")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert client.get("/denials/").json()["summary"]["total"] == 5

    def test_upload_denial_document(self, client, storage):
        response = client.post(
            "/denials/denial_001/documents",
            files={"file": ("eob.pdf", b"%PDF-1.4", "application/pdf")},
        )
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["denial_id"] == "denial_001"
        assert data["file_type"] == "application/pdf"
        assert data["file_size"] == 8
        assert data["file_url"] == "http://testserver/files/denials/denial_001/eob.pdf"
        # remote database is down in this client
        assert data["stored"] is False

        served = client.get("/files/denials/denial_001/eob.pdf")
        assert served.status_code == status.HTTP_200_OK
        assert served.content == b"%PDF-1.4"


class TestDenialRoutesRemote:
    """Test denial API endpoints with a working remote database."""

    def test_remote_list_starts_empty(self, remote_client):
        data = remote_client.get("/denials/").json()
        assert data["source"] == DataSource.REMOTE.value
        assert data["denials"] == []

    def test_remote_create_update_delete(self, remote_client, sample_denial_data):
        created = remote_client.post("/denials/", json=sample_denial_data).json()

        listing = remote_client.get("/denials/").json()
        assert [d["id"] for d in listing["denials"]] == [created["id"]]

        response = remote_client.patch(f"/denials/{created['id']}", json={"priority": "low"})
        assert response.json()["priority"] == "low"

        assert remote_client.delete(f"/denials/{created['id']}").status_code == status.HTTP_204_NO_CONTENT
        assert remote_client.get("/denials/").json()["denials"] == []

    def test_remote_document_metadata_saved(self, remote_client):
        response = remote_client.post(
            "/denials/denial_001/documents",
            files={"file": ("notes.txt", b"hello", "text/plain")},
        )
        assert response.json()["stored"] is True

    def test_remote_invalid_update_is_not_stored(self, remote_client, sample_denial_data):
        """Test a rejected update leaves later reads working."""
        created = remote_client.post("/denials/", json=sample_denial_data).json()

        response = remote_client.patch(f"/denials/{created['id']}", json={"insurance_company": ""})
        assert response.status_code == 422

        listing = remote_client.get("/denials/")
        assert listing.status_code == status.HTTP_200_OK
        assert listing.json()["denials"][0]["insurance_company"] == sample_denial_data["insurance_company"]
        assert remote_client.get("/dashboard/").status_code == status.HTTP_200_OK

    def test_remote_update_clears_dates(self, remote_client, sample_denial_data):
        created = remote_client.post("/denials/", json=sample_denial_data).json()
        response = remote_client.patch(f"/denials/{created['id']}", json={"service_date": None})
        assert response.json()["service_date"] is None
        assert response.json()["denial_date"] == sample_denial_data["denial_date"]


def test_upload_handlers_run_in_threadpool():
    """Test upload handlers are sync and run in the threadpool."""
    from services.appeals.routes import upload_appeal_document
    from services.denials.routes import upload_denial_document

    assert not inspect.iscoroutinefunction(upload_denial_document)
    assert not inspect.iscoroutinefunction(upload_appeal_document)
