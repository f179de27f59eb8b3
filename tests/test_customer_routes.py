# =============================================================================
# tests/test_customer_routes.py - Customer Page Tests
# =============================================================================
# Drives the customer pages through TestClient with the Functions API faked.
# =============================================================================

VALID_CUSTOMER = {
    "name": "Thandi",
    "surname": "Mokoena",
    "username": "thandi.m",
    "email": "thandi@example.com",
    "shipping_address": "12 Long Street, Cape Town",
}


class TestCustomerList:
    """Tests for GET /customers."""

    def test_lists_customers(self, client, seeded_api):
        response = client.get("/customers")

        assert response.status_code == 200
        assert "Thandi Mokoena" in response.text
        assert "thandi@example.com" in response.text

    def test_sparse_record_does_not_empty_the_list(self, client, fake_api):
        fake_api.add_customer("c-1")
        fake_api.add_customer("c-2", name="Sipho", shippingAddress=None)

        response = client.get("/customers")

        assert "Thandi Mokoena" in response.text
        assert "Sipho" in response.text
        assert "Unable to load customers." not in response.text

    def test_api_failure_shows_empty_list_and_banner(self, client, fake_api):
        fake_api.fail_status = 500

        response = client.get("/customers")

        assert response.status_code == 200
        assert "Unable to load customers." in response.text
        assert "No customers yet." in response.text


class TestCreateCustomer:
    """Tests for /customers/create."""

    def test_form_renders(self, client):
        response = client.get("/customers/create")

        assert response.status_code == 200
        assert 'name="shipping_address"' in response.text

    def test_create_redirects_with_flash(self, client, fake_api):
        response = client.post("/customers/create", data=VALID_CUSTOMER, follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/customers"
        assert fake_api.customers["c-1"]["shippingAddress"] == "12 Long Street, Cape Town"

        page = client.get("/customers")
        assert "Customer created successfully!" in page.text

    def test_flash_shown_only_once(self, client, fake_api):
        client.post("/customers/create", data=VALID_CUSTOMER)

        again = client.get("/customers")

        assert "Customer created successfully!" not in again.text

    def test_missing_fields_rerender_without_api_call(self, client, fake_api):
        response = client.post("/customers/create", data={"name": "Thandi", "email": ""})

        assert response.status_code == 200
        assert "This field is required." in response.text
        assert 'value="Thandi"' in response.text
        assert fake_api.requests_to("POST", "customers") == []

    def test_api_rejection_shown_inline(self, client, fake_api):
        fake_api.fail_status = 400

        response = client.post("/customers/create", data=VALID_CUSTOMER, follow_redirects=False)

        assert response.status_code == 200
        assert "Error creating customer:" in response.text
        assert "returned 400" in response.text


class TestEditCustomer:
    """Tests for /customers/{id}/edit."""

    def test_edit_form_prefilled(self, client, seeded_api):
        response = client.get("/customers/c-1/edit")

        assert response.status_code == 200
        assert 'value="thandi.m"' in response.text

    def test_unknown_customer_is_404(self, client, fake_api):
        response = client.get("/customers/nope/edit")

        assert response.status_code == 404
        assert "Customer not found: nope" in response.text

    def test_update(self, client, seeded_api):
        data = {**VALID_CUSTOMER, "name": "Lindiwe"}

        response = client.post("/customers/c-1/edit", data=data, follow_redirects=False)

        assert response.status_code == 303
        assert seeded_api.customers["c-1"]["name"] == "Lindiwe"
        assert "Customer updated successfully!" in client.get("/customers").text


class TestDeleteCustomer:
    """Tests for POST /customers/{id}/delete."""

    def test_delete(self, client, seeded_api):
        response = client.post("/customers/c-1/delete", follow_redirects=False)

        assert response.status_code == 303
        assert "c-1" not in seeded_api.customers
        assert "Customer deleted successfully!" in client.get("/customers").text

    def test_delete_missing_shows_error(self, client, fake_api):
        response = client.post("/customers/nope/delete")

        assert response.status_code == 200
        assert "Error deleting customer:" in response.text

    def test_blank_id_rejected(self, client, fake_api):
        response = client.post("/customers/%20/delete")

        assert "Invalid customer ID." in response.text
        assert [r for r in fake_api.requests if r.method == "DELETE"] == []
