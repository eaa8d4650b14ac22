"""
Integration tests for the purchase API endpoint.
"""
import pytest

from vending_machine.domain.exceptions import InsufficientStockError, StoreError

pytestmark = pytest.mark.integration


class TestPurchaseAPI:
    """Tests for /buy/product/{product_id}/amount/{amount}"""

    def test_buy_success(self, client, auth_headers, repos):
        repos.purchases.purchase.return_value = 5
        response = client.get("/buy/product/product-1/amount/5", headers=auth_headers("buyer-1"))
        assert response.status_code == 200
        data = response.json()
        assert data["total_spent"] == 25
        assert data["deposit"] == 5
        assert data["change"] == [1, 0, 0, 0, 0]
        assert data["quantity"] == 5
        assert data["product"]["amount_available"] == 5
        repos.purchases.purchase.assert_awaited_once_with(
            buyer_id="buyer-1", product_id="product-1", quantity=5, total_cost=25
        )

    @pytest.mark.parametrize("amount", ["abc", "0", "-2", "1_00", " 5", "٣", "2.0"])
    def test_unusable_amount_returns_400(self, client, auth_headers, repos, amount):
        response = client.get(f"/buy/product/product-1/amount/{amount}", headers=auth_headers("buyer-1"))
        assert response.status_code == 400
        assert response.json()["detail"] == "missing amount"
        repos.purchases.purchase.assert_not_awaited()

    def test_more_than_stock_returns_409(self, client, auth_headers, repos):
        response = client.get("/buy/product/product-1/amount/11", headers=auth_headers("buyer-1"))
        assert response.status_code == 409
        assert response.json()["detail"] == "no availability"
        repos.purchases.purchase.assert_not_awaited()

    def test_not_enough_deposit_returns_409(self, client, auth_headers, repos):
        response = client.get("/buy/product/product-1/amount/7", headers=auth_headers("buyer-1"))
        assert response.status_code == 409
        assert response.json()["detail"] == "not enough deposit"
        repos.purchases.purchase.assert_not_awaited()

    def test_lost_race_returns_409(self, client, auth_headers, repos):
        repos.purchases.purchase.side_effect = InsufficientStockError("no availability")
        response = client.get("/buy/product/product-1/amount/1", headers=auth_headers("buyer-1"))
        assert response.status_code == 409

    def test_store_failure_hides_details(self, client, auth_headers, repos):
        repos.purchases.purchase.side_effect = StoreError("Write conflict on products")
        response = client.get("/buy/product/product-1/amount/1", headers=auth_headers("buyer-1"))
        assert response.status_code == 500
        assert response.json()["detail"] == "internal error"

    def test_unknown_product_returns_404(self, client, auth_headers):
        response = client.get("/buy/product/missing/amount/1", headers=auth_headers("buyer-1"))
        assert response.status_code == 404

    def test_seller_cannot_buy(self, client, auth_headers, repos):
        response = client.get("/buy/product/product-1/amount/1", headers=auth_headers("seller-1"))
        assert response.status_code == 403
        repos.products.find_by_id.assert_not_awaited()

    def test_buy_without_token_returns_401(self, client):
        response = client.get("/buy/product/product-1/amount/1")
        assert response.status_code == 401
