from datetime import date

from app.models import AdminUser, BookedDate, Booking
from sqlalchemy import select


def _seed_booking(db_session, *, dates, status="pending", **extra) -> Booking:
    b = Booking(
        name="Alan Turing",
        email="alan@example.com",
        phone="555-0100",
        event_type="Corporate Meeting",
        preferred_dates=dates,
        status=status,
        **extra,
    )
    db_session.add(b)
    db_session.commit()
    return b


def _reserved(db_session) -> list[date]:
    return list(
        db_session.execute(select(BookedDate.date).order_by(BookedDate.date)).scalars()
    )


def test_admin_routes_require_auth(client):
    assert client.get("/v1/admin/bookings").status_code == 401
    assert client.get("/v1/admin/auth/me").status_code == 401
    assert client.post("/v1/admin/gallery", json={}).status_code == 401


def test_demo_admin_created_on_first_login(client, db_session):
    resp = client.post(
        "/v1/admin/auth/login", json={"username": "admin", "password": "admin123"}
    )
    assert resp.status_code == 200
    assert resp.json()["username"] == "admin"
    assert "set-cookie" in resp.headers

    stored = db_session.execute(select(AdminUser)).scalar_one()
    assert stored.password_hash != "admin123"
    assert stored.password_hash.startswith("$2b$")

    me = client.get("/v1/admin/auth/me")
    assert me.status_code == 200
    assert me.json()["username"] == "admin"


def test_login_rejects_bad_password(client):
    client.post("/v1/admin/auth/login", json={"username": "admin", "password": "admin123"})
    client.post("/v1/admin/auth/logout")

    resp = client.post(
        "/v1/admin/auth/login", json={"username": "admin", "password": "wrong"}
    )
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid username or password"


def test_login_rejects_unknown_user(client):
    resp = client.post(
        "/v1/admin/auth/login", json={"username": "mallory", "password": "admin123"}
    )
    assert resp.status_code == 401


def test_logout_clears_session(admin_client):
    admin_client.post("/v1/admin/auth/logout")
    assert admin_client.get("/v1/admin/auth/me").status_code == 401


def test_list_bookings(admin_client, db_session):
    _seed_booking(db_session, dates=["2025-07-01"])
    resp = admin_client.get("/v1/admin/bookings")
    assert resp.status_code == 200
    assert [b["email"] for b in resp.json()] == ["alan@example.com"]


def test_confirm_reserves_dates_and_cancel_releases(admin_client, db_session):
    b = _seed_booking(db_session, dates=["2025-07-01", "2025-07-02"])

    resp = admin_client.post(f"/v1/admin/bookings/{b.id}/status", json={"status": "confirmed"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "confirmed"
    assert _reserved(db_session) == [date(2025, 7, 1), date(2025, 7, 2)]

    # A visitor now sees the conflict.
    check = admin_client.post("/v1/availability/check", json={"dates": ["2025-07-01"]})
    assert check.json()["available"] is False

    resp = admin_client.post(f"/v1/admin/bookings/{b.id}/status", json={"status": "cancelled"})
    assert resp.status_code == 200
    assert _reserved(db_session) == []


def test_status_rejects_unknown_value(admin_client, db_session):
    b = _seed_booking(db_session, dates=["2025-07-01"])
    resp = admin_client.post(f"/v1/admin/bookings/{b.id}/status", json={"status": "done"})
    assert resp.status_code == 422


def test_edit_booking(admin_client, db_session):
    b = _seed_booking(db_session, dates=["2025-07-01"])
    resp = admin_client.patch(
        f"/v1/admin/bookings/{b.id}",
        json={"phone": "555-0199", "preferred_dates": ["2025-08-01"], "venue_cost": 4000},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["phone"] == "555-0199"
    assert body["preferred_dates"] == ["2025-08-01"]
    assert body["venue_cost"] == 4000
    assert body["name"] == "Alan Turing"


def test_edit_confirmed_booking_moves_reserved_dates(admin_client, db_session):
    b = _seed_booking(db_session, dates=["2025-07-01"])
    admin_client.post(f"/v1/admin/bookings/{b.id}/status", json={"status": "confirmed"})

    admin_client.patch(f"/v1/admin/bookings/{b.id}", json={"preferred_dates": ["2025-08-01"]})
    assert _reserved(db_session) == [date(2025, 8, 1)]


def test_edit_confirmed_booking_onto_taken_date_is_409(admin_client, db_session):
    a = _seed_booking(db_session, dates=["2025-09-01"])
    b = _seed_booking(db_session, dates=["2025-09-02"])
    admin_client.post(f"/v1/admin/bookings/{a.id}/status", json={"status": "confirmed"})
    admin_client.post(f"/v1/admin/bookings/{b.id}/status", json={"status": "confirmed"})

    resp = admin_client.patch(
        f"/v1/admin/bookings/{b.id}", json={"preferred_dates": ["2025-09-01"]}
    )
    assert resp.status_code == 409

    rows = db_session.execute(
        select(BookedDate.date, BookedDate.booking_id).order_by(BookedDate.date)
    ).all()
    assert [tuple(r) for r in rows] == [
        (date(2025, 9, 1), a.id),
        (date(2025, 9, 2), b.id),
    ]
    assert admin_client.get(f"/v1/admin/bookings/{b.id}").json()["preferred_dates"] == [
        "2025-09-02"
    ]


def test_edit_confirmed_booking_can_keep_its_own_dates(admin_client, db_session):
    b = _seed_booking(db_session, dates=["2025-09-01"])
    admin_client.post(f"/v1/admin/bookings/{b.id}/status", json={"status": "confirmed"})

    resp = admin_client.patch(
        f"/v1/admin/bookings/{b.id}", json={"preferred_dates": ["2025-09-01", "2025-09-03"]}
    )
    assert resp.status_code == 200
    assert _reserved(db_session) == [date(2025, 9, 1), date(2025, 9, 3)]


def test_delete_booking(admin_client, db_session):
    b = _seed_booking(db_session, dates=["2025-07-01"])
    admin_client.post(f"/v1/admin/bookings/{b.id}/status", json={"status": "confirmed"})

    resp = admin_client.delete(f"/v1/admin/bookings/{b.id}")
    assert resp.status_code == 204
    assert admin_client.get(f"/v1/admin/bookings/{b.id}").status_code == 404
    assert _reserved(db_session) == []


def test_missing_booking_is_404(admin_client):
    assert admin_client.get("/v1/admin/bookings/nope").status_code == 404
    assert admin_client.delete("/v1/admin/bookings/nope").status_code == 404


def test_admin_create_booking_reserves_date(admin_client, db_session):
    payload = {
        "name": "Katherine Johnson",
        "email": "kj@example.com",
        "phone": "555-0142",
        "event_type": "Gala",
        "event_date": "2025-09-01",
        "venue_cost": 7000,
    }
    resp = admin_client.post("/v1/admin/bookings", json=payload)
    assert resp.status_code == 201
    assert resp.json()["status"] == "confirmed"

    row = db_session.execute(select(BookedDate)).scalar_one()
    assert row.date == date(2025, 9, 1)
    assert row.event_name == "Gala - Katherine Johnson"
    assert row.booking_id == resp.json()["id"]

    again = admin_client.post("/v1/admin/bookings", json=payload)
    assert again.status_code == 409


def test_upcoming_only_confirmed_future(admin_client, db_session):
    _seed_booking(db_session, dates=["2025-05-01"], status="confirmed")
    future = _seed_booking(db_session, dates=["2025-05-20", "2025-06-15"], status="confirmed")
    _seed_booking(db_session, dates=["2025-07-01"], status="pending")

    resp = admin_client.get("/v1/admin/bookings/upcoming")
    assert resp.status_code == 200
    assert [b["id"] for b in resp.json()] == [future.id]


def test_quotation_download(admin_client, db_session):
    b = _seed_booking(db_session, dates=["2025-07-01", "2025-07-02"])
    resp = admin_client.get(f"/v1/admin/bookings/{b.id}/quotation")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert f'filename="quotation-{b.id}.txt"' in resp.headers["content-disposition"]
    text = resp.text
    assert "QUOTATION" in text
    assert "Event Dates: 2025-07-01, 2025-07-02" in text
    assert "Venue Rental: $5000" in text
    assert "Total Amount: $6500" in text
    assert "Valid for 30 days from date of issue." in text


def test_invoice_uses_booking_pricing(admin_client, db_session):
    b = _seed_booking(
        db_session, dates=["2025-07-01"], venue_cost=4000, additional_services=500
    )
    resp = admin_client.get(f"/v1/admin/bookings/{b.id}/invoice")

    assert resp.status_code == 200
    number = f"INV-{b.id[:8]}"
    assert f'filename="invoice-{number}.txt"' in resp.headers["content-disposition"]
    assert f"Invoice #: {number}" in resp.text
    assert "Total Amount: $4500" in resp.text
    assert "Payment due within 30 days." in resp.text


def test_bearer_token_and_scope(client):
    from app.core.config import settings
    from app.core.security import create_access_token
    from jose import jwt

    admin_id = client.post(
        "/v1/admin/auth/login", json={"username": "admin", "password": "admin123"}
    ).json()["id"]
    client.post("/v1/admin/auth/logout")

    good = create_access_token(admin_id)
    resp = client.get("/v1/admin/auth/me", headers={"Authorization": f"Bearer {good}"})
    assert resp.status_code == 200

    wrong_scope = jwt.encode(
        {"sub": admin_id, "scope": "visitor"},
        settings.auth_secret_key,
        algorithm=settings.auth_algorithm,
    )
    resp = client.get("/v1/admin/auth/me", headers={"Authorization": f"Bearer {wrong_scope}"})
    assert resp.status_code == 401
