from datetime import timedelta

import pytest
from dateutil.relativedelta import relativedelta
from fastapi.testclient import TestClient

from paytrack.app.core.time import utc_today
from paytrack.app.db.base import Base
from paytrack.app.db.session import SessionLocal, engine
from paytrack.app.main import app
from paytrack.app.models.payment import Payment
from paytrack.app.models.purchase import Purchase


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def register_and_login(client: TestClient, username: str, password: str = "secret1") -> str:
    client.post("/auth/register", json={"username": username, "password": password})
    resp = client.post("/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200
    return resp.json()["access_token"]


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def create_customer(client: TestClient, token: str, name: str = "Jane Roe", **extra) -> dict:
    resp = client.post("/customers/", json={"name": name, **extra}, headers=auth(token))
    assert resp.status_code == 201
    return resp.json()


def create_purchase(client: TestClient, token: str, customer_id: str, **overrides) -> dict:
    payload = {
        "customer_id": customer_id,
        "product": "Water purifier",
        "purchase_date": "2024-01-15",
        "initial_payment": "100",
        "rental_amount": "50",
        "rental_frequency": "monthly",
    }
    payload.update(overrides)
    resp = client.post("/purchases/", json=payload, headers=auth(token))
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_and_get_customer_detail():
    client = TestClient(app)
    token = register_and_login(client, "owner_a")
    customer = create_customer(client, token, email="jane@example.com", phone="555-0101", company="Acme")
    assert customer["email"] == "jane@example.com"
    create_purchase(client, token, customer["id"])

    resp = client.get(f"/customers/{customer['id']}", headers=auth(token))
    assert resp.status_code == 200
    detail = resp.json()
    assert detail["name"] == "Jane Roe"
    assert len(detail["purchases"]) == 1
    payments = detail["purchases"][0]["payments"]
    assert len(payments) == 13
    assert payments[0]["status"] == "paid"
    assert payments[0]["amount"] == "100.00"


def test_customer_summary_totals_and_next_payment():
    client = TestClient(app)
    token = register_and_login(client, "owner_b")
    customer = create_customer(client, token)
    # All twelve installments of a 2024 monthly plan are in the past.
    create_purchase(client, token, customer["id"])
    today = utc_today()
    create_purchase(
        client,
        token,
        customer["id"],
        purchase_date=today.isoformat(),
        initial_payment="0",
        rental_amount="80",
        rental_frequency="quarterly",
    )

    summaries = client.get("/customers/", headers=auth(token)).json()
    assert len(summaries) == 1
    summary = summaries[0]
    assert summary["total_paid"] == "100.00"
    assert summary["total_overdue"] == "600.00"
    assert summary["next_payment_date"] == (today + relativedelta(months=3)).isoformat()
    assert summary["next_payment_amount"] == "80.00"


def test_update_customer():
    client = TestClient(app)
    token = register_and_login(client, "owner_c")
    customer = create_customer(client, token)

    resp = client.patch(f"/customers/{customer['id']}", json={"company": "Globex", "email": ""}, headers=auth(token))
    assert resp.status_code == 200
    assert resp.json()["company"] == "Globex"
    assert resp.json()["email"] is None
    assert resp.json()["name"] == "Jane Roe"


def test_customer_validation_errors():
    client = TestClient(app)
    token = register_and_login(client, "owner_d")
    assert client.post("/customers/", json={"name": ""}, headers=auth(token)).status_code == 422
    assert client.post("/customers/", json={"email": "a@example.com"}, headers=auth(token)).status_code == 422
    assert client.post("/customers/", json={"name": "X", "email": "bad"}, headers=auth(token)).status_code == 422


def test_delete_customer_cascades_to_purchases_and_payments():
    client = TestClient(app)
    token = register_and_login(client, "owner_e")
    customer = create_customer(client, token)
    create_purchase(client, token, customer["id"])

    resp = client.delete(f"/customers/{customer['id']}", headers=auth(token))
    assert resp.status_code == 204
    assert client.get(f"/customers/{customer['id']}", headers=auth(token)).status_code == 404

    db = SessionLocal()
    try:
        assert db.query(Purchase).count() == 0
        assert db.query(Payment).count() == 0
    finally:
        db.close()


def test_cross_tenant_customer_access_is_not_found():
    client = TestClient(app)
    token_a = register_and_login(client, "tenant_a")
    token_b = register_and_login(client, "tenant_b")
    customer = create_customer(client, token_a)

    assert client.get(f"/customers/{customer['id']}", headers=auth(token_b)).status_code == 404
    assert client.patch(f"/customers/{customer['id']}", json={"name": "X"}, headers=auth(token_b)).status_code == 404
    assert client.delete(f"/customers/{customer['id']}", headers=auth(token_b)).status_code == 404
    assert client.get("/customers/", headers=auth(token_b)).json() == []


def test_customers_require_authentication():
    client = TestClient(app)
    assert client.get("/customers/").status_code == 401


def test_due_today_is_not_counted_overdue_in_summary():
    client = TestClient(app)
    token = register_and_login(client, "owner_f")
    customer = create_customer(client, token)
    today = utc_today()
    create_purchase(
        client,
        token,
        customer["id"],
        purchase_date=today.isoformat(),
        initial_payment="0",
        rental_amount="20",
        rental_frequency="one-time",
    )
    create_purchase(
        client,
        token,
        customer["id"],
        purchase_date=(today - timedelta(days=1)).isoformat(),
        initial_payment="0",
        rental_amount="30",
        rental_frequency="one-time",
    )

    summary = client.get("/customers/", headers=auth(token)).json()[0]
    assert summary["total_overdue"] == "30.00"
    assert summary["next_payment_date"] == today.isoformat()
    assert summary["next_payment_amount"] == "20.00"
