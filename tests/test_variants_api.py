"""
Tests for the product variant endpoints.
"""


def variant_payload(product_id, **overrides):
    payload = {
        "product_id": product_id,
        "title": "Large / Blue",
        "sku": "TEE-L-BLUE",
        "price": 19.99,
        "compare_price": 24.99,
        "inventory_quantity": 8,
        "option1": "L",
        "option2": "Blue",
        "barcode": "0123456789012",
    }
    payload.update(overrides)
    return payload


class TestCreateVariant:
    def test_create_returns_variant_with_product(self, client, url, make_product):
        product = make_product(name="T-Shirt")

        response = client.post(url("/variants"), json=variant_payload(product.id))

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Product variant created successfully"
        data = body["data"]
        assert data["product_id"] == product.id
        assert data["product"]["name"] == "T-Shirt"
        assert data["inventory_policy"] == "deny"
        assert data["fulfillment_service"] == "manual"
        assert data["position"] == 1
        assert data["options"] == ["L", "Blue"]
        assert data["display_title"] == "L / Blue"
        assert data["is_on_sale"] is True

    def test_missing_product(self, client, url):
        response = client.post(url("/variants"), json=variant_payload(99999))
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Product not found"}

    def test_duplicate_sku(self, client, url, make_product, make_variant):
        product = make_product()
        make_variant(product, sku="TEE-L-BLUE")

        response = client.post(url("/variants"), json=variant_payload(product.id))

        assert response.status_code == 422
        assert "sku" in response.json()["errors"]

    def test_invalid_policy(self, client, url, make_product):
        product = make_product()
        response = client.post(
            url("/variants"), json=variant_payload(product.id, inventory_policy="sometimes")
        )
        assert response.status_code == 422
        assert "inventory_policy" in response.json()["errors"]


class TestListVariants:
    def test_default_order_is_position(self, client, url, make_product, make_variant):
        product = make_product()
        make_variant(product, position=2, title="b")
        make_variant(product, position=1, title="a")

        body = client.get(url("/variants")).json()

        assert [item["title"] for item in body["data"]] == ["a", "b"]
        assert body["data"][0]["product"]["id"] == product.id
        assert body["pagination"]["total"] == 2

    def test_filter_by_product_and_option(self, client, url, make_product, make_variant):
        shirt = make_product()
        make_variant(shirt, option1="S")
        make_variant(shirt, option1="M")
        make_variant(option1="S")

        body = client.get(url("/variants"), params={"product_id": shirt.id, "option1": "S"}).json()

        assert body["pagination"]["total"] == 1
        assert body["data"][0]["product_id"] == shirt.id

    def test_in_stock_filters_on_quantity(self, client, url, make_variant):
        make_variant(inventory_quantity=0)
        make_variant(inventory_quantity=0, inventory_policy="continue")
        make_variant(inventory_quantity=3)

        body = client.get(url("/variants"), params={"in_stock": "true"}).json()

        assert body["pagination"]["total"] == 1
        assert body["data"][0]["inventory_quantity"] == 3

    def test_unknown_sort_field(self, client, url):
        response = client.get(url("/variants"), params={"sort_by": "barcode"})
        assert response.status_code == 422


class TestShowUpdateDeleteVariant:
    def test_show(self, client, url, make_variant):
        variant = make_variant(title="Solo")
        response = client.get(url(f"/variants/{variant.id}"))
        assert response.status_code == 200
        assert response.json()["data"]["title"] == "Solo"

    def test_show_missing(self, client, url):
        response = client.get(url("/variants/99999"))
        assert response.status_code == 404
        assert response.json()["message"] == "Product variant not found"

    def test_update(self, client, url, make_variant):
        variant = make_variant(price=10)

        response = client.put(url(f"/variants/{variant.id}"), json={"price": 15, "option3": "Cotton"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Product variant updated successfully"
        assert body["data"]["price"] == 15
        assert body["data"]["option3"] == "Cotton"

    def test_update_rejects_unknown_product(self, client, url, make_variant):
        variant = make_variant()
        response = client.patch(url(f"/variants/{variant.id}"), json={"product_id": 99999})
        assert response.status_code == 422
        assert "product_id" in response.json()["errors"]

    def test_move_to_another_product(self, client, url, make_product, make_variant):
        variant = make_variant()
        other = make_product()
        response = client.patch(url(f"/variants/{variant.id}"), json={"product_id": other.id})
        assert response.status_code == 200
        assert response.json()["data"]["product"]["id"] == other.id

    def test_update_sku_taken(self, client, url, make_variant):
        make_variant(sku="TAKEN")
        variant = make_variant()
        response = client.patch(url(f"/variants/{variant.id}"), json={"sku": "TAKEN"})
        assert response.status_code == 422

    def test_delete(self, client, url, make_variant):
        variant = make_variant()
        product_id = variant.product_id

        response = client.delete(url(f"/variants/{variant.id}"))

        assert response.status_code == 200
        assert response.json()["message"] == "Product variant deleted successfully"
        assert client.get(url(f"/variants/{variant.id}")).status_code == 404
        assert client.get(url(f"/products/{product_id}")).status_code == 200


class TestVariantPositions:
    def test_swap_positions(self, client, url, make_product, make_variant):
        product = make_product()
        first = make_variant(product, position=1)
        second = make_variant(product, position=2)

        response = client.patch(
            url("/variants/positions"),
            json={"variants": [{"id": first.id, "position": 2}, {"id": second.id, "position": 1}]},
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Variant positions updated successfully"}
        ordered = client.get(url(f"/products/{product.id}/variants")).json()["data"]
        assert [item["id"] for item in ordered] == [second.id, first.id]

    def test_unknown_id_rejects_whole_request(self, client, url, make_variant):
        variant = make_variant(position=1)

        response = client.patch(
            url("/variants/positions"),
            json={"variants": [{"id": variant.id, "position": 4}, {"id": 99999, "position": 1}]},
        )

        assert response.status_code == 422
        assert "variants.1.id" in response.json()["errors"]
        assert client.get(url(f"/variants/{variant.id}")).json()["data"]["position"] == 1

    def test_empty_list(self, client, url):
        response = client.patch(url("/variants/positions"), json={"variants": []})
        assert response.status_code == 422
        assert "variants" in response.json()["errors"]

    def test_position_must_be_positive(self, client, url, make_variant):
        variant = make_variant()
        response = client.patch(
            url("/variants/positions"), json={"variants": [{"id": variant.id, "position": 0}]}
        )
        assert response.status_code == 422
        assert "variants.0.position" in response.json()["errors"]
