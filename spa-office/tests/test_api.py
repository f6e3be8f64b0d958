from decimal import Decimal
from uuid import uuid4

from conftest import auth_headers


async def create_treatment(client, admin, **payload):
    body = {"name": "Baby Massage", "price": 50000}
    body.update(payload)
    resp = await client.post("/api/v1/treatments", json=body, headers=auth_headers(admin))
    assert resp.status_code == 201, resp.text
    return resp.json()


async def create_sale(client, user, treatment_ids, **payload):
    body = {
        "service_date": "2024-01-05",
        "customer_name": "Ibu Sari",
        "payment_method": "cash",
        "treatments": [{"treatment_id": tid} for tid in treatment_ids],
    }
    body.update(payload)
    return await client.post("/api/v1/transactions", json=body, headers=auth_headers(user))


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_requires_identity_headers(client):
    resp = await client.get("/api/v1/reports/dashboard")
    assert resp.status_code == 401


async def test_unknown_role_is_forbidden(client):
    resp = await client.get(
        "/api/v1/reports/dashboard",
        headers={"X-User-Id": str(uuid4()), "X-User-Role": "guest"},
    )
    assert resp.status_code == 403


async def test_only_admin_manages_catalog(client, employee):
    resp = await client.post(
        "/api/v1/treatments",
        json={"name": "Baby Massage", "price": 50000},
        headers=auth_headers(employee),
    )
    assert resp.status_code == 403


async def test_treatment_listing_shows_effective_price(client, admin):
    await create_treatment(client, admin, name="Baby Swim", price=40000, discount_active=True, discount_percentage=25)
    await create_treatment(client, admin, name="Old Package", price=90000, is_active=False)

    resp = await client.get("/api/v1/treatments")
    assert resp.status_code == 200
    treatments = resp.json()
    assert [t["name"] for t in treatments] == ["Baby Swim"]
    assert Decimal(treatments[0]["effective_price"]) == Decimal("30000")


async def test_update_and_delete_treatment(client, admin):
    treatment = await create_treatment(client, admin)

    resp = await client.patch(
        f"/api/v1/treatments/{treatment['id']}",
        json={"discount_active": True, "discount_percentage": 10},
        headers=auth_headers(admin),
    )
    assert resp.status_code == 200
    assert Decimal(resp.json()["effective_price"]) == Decimal("45000")

    resp = await client.delete(f"/api/v1/treatments/{treatment['id']}", headers=auth_headers(admin))
    assert resp.status_code == 204

    resp = await client.delete(f"/api/v1/treatments/{treatment['id']}", headers=auth_headers(admin))
    assert resp.status_code == 404


async def test_fractional_rupiah_price_is_rejected(client, admin):
    resp = await client.post(
        "/api/v1/treatments",
        json={"name": "Baby Massage", "price": "50000.50"},
        headers=auth_headers(admin),
    )
    assert resp.status_code == 422


async def test_out_of_range_discount_is_rejected(client, admin):
    resp = await client.post(
        "/api/v1/treatments",
        json={"name": "Baby Massage", "price": 50000, "discount_active": True, "discount_percentage": 150},
        headers=auth_headers(admin),
    )
    assert resp.status_code == 422


async def test_create_transaction_returns_receipt(client, admin, employee):
    massage = await create_treatment(client, admin, price=60000)
    mom = await create_treatment(client, admin, name="Mom Massage", price=40000)

    resp = await create_sale(
        client, employee, [massage["id"], mom["id"]],
        discount_active=True, discount_percentage=10,
    )
    assert resp.status_code == 201, resp.text
    body = resp.json()

    assert Decimal(body["transaction"]["total_amount"]) == Decimal("90000")
    assert len(body["transaction"]["items"]) == 2
    receipt = body["receipt"]
    assert receipt["subtotal_display"] == "Rp100.000"
    assert receipt["discount_amount_display"] == "Rp10.000"
    assert receipt["total_display"] == "Rp90.000"


async def test_empty_selection_is_rejected(client, employee):
    resp = await create_sale(client, employee, [])
    assert resp.status_code == 422
    assert resp.json() == {"detail": "Pilih minimal 1 treatment"}


async def test_my_transactions_and_delete(client, admin, employee):
    massage = await create_treatment(client, admin)
    resp = await create_sale(client, employee, [massage["id"]])
    tx_id = resp.json()["transaction"]["id"]

    resp = await client.get("/api/v1/transactions/mine", headers=auth_headers(employee))
    assert [t["id"] for t in resp.json()] == [tx_id]

    resp = await client.delete(f"/api/v1/transactions/{tx_id}", headers=auth_headers(employee))
    assert resp.status_code == 204
    resp = await client.delete(f"/api/v1/transactions/{tx_id}", headers=auth_headers(employee))
    assert resp.status_code == 204

    resp = await client.get("/api/v1/transactions/mine", headers=auth_headers(employee))
    assert resp.json() == []


async def test_reports_endpoints(client, admin):
    massage = await create_treatment(client, admin)
    swim = await create_treatment(client, admin, name="Baby Swim", price=30000)
    await create_sale(client, admin, [massage["id"]])
    await create_sale(client, admin, [swim["id"]], payment_method="transfer")

    resp = await client.get(
        "/api/v1/reports/daily", params={"day": "2024-01-05"}, headers=auth_headers(admin)
    )
    assert resp.status_code == 200
    assert resp.json()["count"] == 2
    assert resp.json()["day_total_display"] == "Rp80.000"

    resp = await client.get(
        "/api/v1/reports/range",
        params={"start_date": "2024-01-01", "end_date": "2024-01-31"},
        headers=auth_headers(admin),
    )
    totals = resp.json()["totals"]
    assert Decimal(totals["cash"]) == Decimal("50000")
    assert Decimal(totals["transfer"]) == Decimal("30000")


async def test_print_endpoints_render_html(client, admin):
    massage = await create_treatment(client, admin, name="Baby Massage", price=80000)
    resp = await create_sale(client, admin, [massage["id"]], notes="Pijat lembut")
    tx_id = resp.json()["transaction"]["id"]

    resp = await client.get(f"/api/v1/reports/receipt/{tx_id}/print", headers=auth_headers(admin))
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "Rp80.000" in resp.text
    assert "Baby Massage x1" in resp.text
    assert "Diskon" not in resp.text
    assert "Pijat lembut" in resp.text

    resp = await client.get(
        "/api/v1/reports/daily/print", params={"day": "2024-01-05"}, headers=auth_headers(admin)
    )
    assert "Total Hari Ini" in resp.text
    assert "Jumlah Transaksi: 1" in resp.text

    resp = await client.get(
        "/api/v1/reports/range/print",
        params={"start_date": "2024-01-01", "end_date": "2024-01-31"},
        headers=auth_headers(admin),
    )
    assert "Total Pendapatan" in resp.text
    assert "Senin, 1 Januari 2024 - Rabu, 31 Januari 2024" in resp.text


async def test_receipt_not_found(client, admin):
    resp = await client.get(f"/api/v1/reports/receipt/{uuid4()}", headers=auth_headers(admin))
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Transaction not found"}
