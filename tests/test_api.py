"""API endpoint tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from medbill.main import app


def make_client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_health_check():
    """Test health check endpoint."""
    async with make_client() as client:
        response = await client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data


@pytest.mark.asyncio
async def test_get_document_types():
    """Test document types endpoint."""
    async with make_client() as client:
        response = await client.get("/api/v1/types")
        assert response.status_code == 200
        types = {t["type"]: t for t in response.json()["types"]}
        assert set(types) == {"MEDICAL_BILL", "EOB", "INVALID"}
        assert types["INVALID"]["can_analyze"] is False
        assert types["EOB"]["can_analyze"] is True


@pytest.mark.asyncio
async def test_classify_medical_bill(clean_bill_text):
    """Test classification of a patient statement."""
    async with make_client() as client:
        response = await client.post("/api/v1/classify", json={"extracted_text": clean_bill_text})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert "error" not in body
        data = body["data"]
        assert data["type"] == "MEDICAL_BILL"
        assert data["can_analyze"] is True
        assert data["confidence"] == 77
        assert data["user_message"] == "Medical bill detected. Proceeding with analysis..."
        assert data["_debug"] == {
            "bill_score": 74,
            "eob_score": 0,
            "required_categories": 3,
            "reasoning": "Bill score (74) meets threshold (30)",
        }


@pytest.mark.asyncio
async def test_classify_eob(clean_eob_text):
    """Test classification of an Explanation of Benefits."""
    async with make_client() as client:
        response = await client.post("/api/v1/classify", json={"extracted_text": clean_eob_text})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["type"] == "EOB"
        assert data["confidence"] == 90
        assert data["can_analyze"] is True
        assert "upload the actual medical bill" in data["user_message"]


@pytest.mark.asyncio
async def test_classify_disqualified(disqualified_text):
    """Test classification of a non-medical document."""
    async with make_client() as client:
        response = await client.post(
            "/api/v1/classify", json={"extracted_text": disqualified_text}
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["type"] == "INVALID"
        assert data["can_analyze"] is False
        assert data["user_message"].startswith("This does not appear to be a medical document")


@pytest.mark.asyncio
async def test_classify_insufficient_content():
    """Test classification of a document without medical content."""
    async with make_client() as client:
        response = await client.post("/api/v1/classify", json={"extracted_text": "Total: $50.00"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["type"] == "INVALID"
        assert data["confidence"] == 80
        assert data["can_analyze"] is False
        assert "not contain enough medical billing information" in data["user_message"]


@pytest.mark.asyncio
async def test_classify_with_header_text(clean_bill_text):
    """Header notices are classified together with the body."""
    async with make_client() as client:
        response = await client.post(
            "/api/v1/classify",
            json={
                "extracted_text": clean_bill_text,
                "document_header_text": "Explanation of Benefits - This is not a bill",
            },
        )
        assert response.status_code == 200
        assert response.json()["data"]["type"] == "EOB"


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"extracted_text": ""}, {"extracted_text": "  "}, {}])
async def test_classify_missing_text(payload):
    """Missing text is a bad request, not a classification."""
    async with make_client() as client:
        response = await client.post("/api/v1/classify", json=payload)
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "No extracted text provided"}


@pytest.mark.asyncio
async def test_classify_malformed_body():
    """Wrongly typed fields are a bad request."""
    async with make_client() as client:
        response = await client.post("/api/v1/classify", json={"extracted_text": ["a"]})
        assert response.status_code == 400
        assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_classify_matrix(clean_eob_text):
    """Test the diagnostic matrix endpoint."""
    async with make_client() as client:
        response = await client.post(
            "/api/v1/classify/matrix", json={"extracted_text": clean_eob_text}
        )
        assert response.status_code == 200
        body = response.json()
        matrix = body["matrix"]
        assert matrix["final_type"] == "EOB"
        assert matrix["required_categories_score"] == 4
        assert matrix["eob_score"]["has_not_a_bill_phrase"] is True
        assert matrix["eob_score"]["strong_matches"][0] == {
            "indicator": "explanation of benefits",
            "weight": 10,
            "category": "strong",
        }
        assert "  Type: EOB" in body["trace"]


@pytest.mark.asyncio
async def test_classify_matrix_missing_text():
    async with make_client() as client:
        response = await client.post("/api/v1/classify/matrix", json={})
        assert response.status_code == 400
        assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_unknown_route():
    async with make_client() as client:
        response = await client.get("/api/v1/nope")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Not Found"}


@pytest.mark.asyncio
async def test_root_endpoint():
    """Test root endpoint."""
    async with make_client() as client:
        response = await client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "running"
        assert "version" in data
