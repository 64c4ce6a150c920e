"""API endpoint integration tests.

Tests the FastAPI endpoints for catalog lookup, differential preview and
compensation breakdowns.
"""

import asyncio
from decimal import Decimal

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


PREVIEW_PAYLOAD = {
    "differentials": [
        {"type": "Night", "value": 4, "frequency": 3},
        {"type": "Charge_Nurse", "value": 6, "frequency": 1},
    ],
    "basePay": 38,
    "basePayUnit": "hourly",
    "shiftHours": 12,
}


class TestHealthEndpoints:
    """Test health check endpoints."""

    async def test_health_check(self, client: AsyncClient):
        """Health endpoint should report the loaded catalog."""
        response = await client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["catalog"] == "loaded"
        assert data["differential_types"] == 21
        assert "timestamp" in data

    async def test_readiness_check(self, client: AsyncClient):
        response = await client.get("/ready")
        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    async def test_liveness_check(self, client: AsyncClient):
        response = await client.get("/live")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"


class TestCatalogEndpoints:
    """Test differential catalog endpoints."""

    async def test_types_by_category(self, client: AsyncClient):
        response = await client.get("/api/v1/differentials/types")
        assert response.status_code == 200

        data = response.json()
        assert data["essential"] == ["Night", "Weekend", "Holiday", "Overtime"]
        assert "Sign_On_Bonus" in data["bonus"]

    async def test_full_config(self, client: AsyncClient):
        response = await client.get("/api/v1/differentials/config")
        assert response.status_code == 200

        data = response.json()
        assert len(data) == 21
        assert data["Night"]["valueRange"]["unit"] == "$/hour"
        assert data["Night"]["displayName"] == "Night Shift"

    async def test_single_config(self, client: AsyncClient):
        response = await client.get("/api/v1/differentials/config/Holiday")
        assert response.status_code == 200

        data = response.json()
        assert data["category"] == "essential"
        assert data["valueRange"]["unit"] == "multiplier"
        assert Decimal(data["frequencyRange"]["max"]) == Decimal("12")

    async def test_unknown_config(self, client: AsyncClient):
        response = await client.get("/api/v1/differentials/config/Nonexistent")
        assert response.status_code == 404
        assert "Nonexistent" in response.json()["detail"]


class TestPreviewEndpoint:
    """Test POST /api/v1/differentials/preview."""

    async def test_preview(self, client: AsyncClient):
        response = await client.post("/api/v1/differentials/preview", json=PREVIEW_PAYLOAD)
        assert response.status_code == 200

        data = response.json()
        assert Decimal(data["items"]["Night"]["monthly"]) == Decimal("624")
        assert Decimal(data["items"]["Charge_Nurse"]["monthly"]) == Decimal("936")

        metadata = data["metadata"]
        assert Decimal(metadata["base_monthly"]) == Decimal("5928")
        assert Decimal(metadata["total_monthly"]) == Decimal("7488")
        assert Decimal(metadata["annual_total"]) == Decimal("89856")
        assert Decimal(metadata["effective_hourly"]) == Decimal("48")
        assert metadata["confidence"] == "MEDIUM"
        assert metadata["is_valid"] is True

        assert Decimal(data["breakdown"]["totalHourly"]) == Decimal("48")
        assert data["breakdown"]["annualWorkHours"] == 1872
        assert data["warnings"] == []

    async def test_annual_base_pay(self, client: AsyncClient):
        payload = {**PREVIEW_PAYLOAD, "basePay": 89856, "basePayUnit": "annual"}
        response = await client.post("/api/v1/differentials/preview", json=payload)
        assert response.status_code == 200
        assert Decimal(response.json()["breakdown"]["baseHourly"]) == Decimal("48")

    async def test_out_of_range_reported(self, client: AsyncClient):
        payload = {
            **PREVIEW_PAYLOAD,
            "differentials": [{"type": "Night", "value": 40, "frequency": 3}],
        }
        response = await client.post("/api/v1/differentials/preview", json=payload)
        assert response.status_code == 200

        data = response.json()
        assert len(data["warnings"]) == 1
        assert Decimal(data["items"]["Night"]["monthly"]) == Decimal("6240")

    async def test_unknown_type(self, client: AsyncClient):
        payload = {
            **PREVIEW_PAYLOAD,
            "differentials": [{"type": "Nonexistent", "value": 1, "frequency": 1}],
        }
        response = await client.post("/api/v1/differentials/preview", json=payload)
        assert response.status_code == 422

        data = response.json()
        assert data["code"] == "UNKNOWN_DIFFERENTIAL_TYPE"
        assert "Nonexistent" in data["detail"]

    async def test_duplicate_type(self, client: AsyncClient):
        payload = {
            **PREVIEW_PAYLOAD,
            "differentials": [
                {"type": "Night", "value": 4, "frequency": 3},
                {"type": "Night", "value": 2, "frequency": 1},
            ],
        }
        response = await client.post("/api/v1/differentials/preview", json=payload)
        assert response.status_code == 422

        data = response.json()
        assert data["code"] == "DUPLICATE_DIFFERENTIAL_TYPE"
        assert "Night" in data["detail"]

    @pytest.mark.parametrize("base_pay", [0, -38])
    async def test_non_positive_base_pay(self, client: AsyncClient, base_pay):
        payload = {**PREVIEW_PAYLOAD, "basePay": base_pay}
        response = await client.post("/api/v1/differentials/preview", json=payload)
        assert response.status_code == 422

    async def test_negative_frequency(self, client: AsyncClient):
        payload = {
            **PREVIEW_PAYLOAD,
            "differentials": [{"type": "Night", "value": 4, "frequency": -1}],
        }
        response = await client.post("/api/v1/differentials/preview", json=payload)
        assert response.status_code == 422

    async def test_concurrent_previews_are_independent(self, client: AsyncClient):
        low = {**PREVIEW_PAYLOAD, "basePay": 30}
        high = {**PREVIEW_PAYLOAD, "basePay": 60}
        low_response, high_response = await asyncio.gather(
            client.post("/api/v1/differentials/preview", json=low),
            client.post("/api/v1/differentials/preview", json=high),
        )
        assert Decimal(low_response.json()["breakdown"]["baseHourly"]) == Decimal("30")
        assert Decimal(high_response.json()["breakdown"]["baseHourly"]) == Decimal("60")


class TestCompensationEndpoints:
    """Test breakdown and validation endpoints."""

    async def test_breakdown(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/compensation/breakdown",
            json={
                "basePay": 38,
                "basePayUnit": "hourly",
                "monthlyDifferentials": 1560,
                "shiftHours": 12,
            },
        )
        assert response.status_code == 200

        data = response.json()
        assert Decimal(data["totalHourly"]) == Decimal("48")
        assert Decimal(data["totalAnnual"]) == Decimal("89856")
        assert data["daysPerWeek"] == 3

    async def test_breakdown_degenerate_pay(self, client: AsyncClient):
        response = await client.post("/api/v1/compensation/breakdown", json={"basePay": 0})
        assert response.status_code == 200
        assert Decimal(response.json()["totalMonthly"]) == Decimal("0")

    async def test_validate(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/compensation/validate",
            json={"amount": 95000, "unit": "annual", "shiftHours": 12},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["valid"] is True
        assert Decimal(data["hourlyRate"]) == Decimal("50.75")
        assert Decimal(data["minMonthly"]) == Decimal("2340")
        assert Decimal(data["maxAnnual"]) == Decimal("374400")
        assert data["isOutlier"] is None

    async def test_validate_outlier(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/compensation/validate",
            json={"amount": 140, "unit": "hourly", "median": 100},
        )
        data = response.json()
        assert data["valid"] is True
        assert data["isOutlier"] is True

    async def test_validate_implausible(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/compensation/validate",
            json={"amount": 9, "unit": "hourly"},
        )
        assert response.json()["valid"] is False

    async def test_shift_patterns(self, client: AsyncClient):
        response = await client.get("/api/v1/compensation/shift-patterns")
        assert response.status_code == 200

        data = response.json()
        assert set(data) == {"8", "12", "16"}
        assert Decimal(data["12"]["hoursPerMonth"]) == Decimal("156")
        assert data["16"]["hoursPerYear"] == 1664
