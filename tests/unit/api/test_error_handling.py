"""Tests for API error mapping."""

from simpleswap.math import UINT256_MAX
from tests.helpers import ALICE, TOKEN_A, TOKEN_B


class TestLedgerErrorMapping:
    """Ledger rejections map to 400 with a stable code."""

    def test_error_body_has_detail_and_code(self, client):
        response = client.get("/price", params={"tokenIn": TOKEN_A, "tokenOut": TOKEN_B})
        assert response.status_code == 400
        body = response.json()
        assert set(body) == {"detail", "code"}
        assert body["code"] == "EMPTY_POOL"
        assert body["detail"]

    def test_rejection_leaves_pool_unchanged(self, client):
        before = client.get("/pool").json()
        client.post(
            "/swap",
            json={"sender": ALICE, "amountIn": "1", "path": [TOKEN_A, TOKEN_B], "to": ALICE},
        )
        assert client.get("/pool").json() == before


class TestValidationErrors:
    """Malformed requests are rejected by Pydantic with 422."""

    def test_missing_field(self, client):
        response = client.post("/swap", json={"sender": ALICE, "path": [TOKEN_A, TOKEN_B]})
        assert response.status_code == 422

    def test_invalid_uint256(self, client):
        response = client.post(
            "/faucet", json={"token": TOKEN_A, "to": ALICE, "amount": "-5"}
        )
        assert response.status_code == 422

    def test_invalid_address(self, client):
        response = client.get("/price", params={"tokenIn": "0x12", "tokenOut": TOKEN_B})
        assert response.status_code == 422

    def test_malformed_json(self, client):
        response = client.post(
            "/swap", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 422


class TestArithmeticLimits:
    """Schema-valid requests that would overflow a reserve get a 400."""

    def test_swap_past_max_reserve(self, client):
        for token in (TOKEN_A, TOKEN_B):
            client.post("/faucet", json={"token": token, "to": ALICE, "amount": str(UINT256_MAX)})
        added = client.post(
            "/liquidity/add",
            json={
                "sender": ALICE,
                "tokenX": TOKEN_A,
                "tokenY": TOKEN_B,
                "amountADesired": str(UINT256_MAX - 10),
                "amountBDesired": str(UINT256_MAX - 10),
                "to": ALICE,
            },
        )
        assert added.status_code == 200
        before = client.get("/pool").json()

        response = client.post(
            "/swap",
            json={"sender": ALICE, "amountIn": "100", "path": [TOKEN_A, TOKEN_B], "to": ALICE},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVARIANT_VIOLATION"
        assert client.get("/pool").json() == before
