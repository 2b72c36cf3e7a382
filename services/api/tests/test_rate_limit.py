import itertools


class FakeRedis:
    def __init__(self):
        self.counts = {}
        self.expiries = {}

    def incr(self, key):
        self.counts[key] = self.counts.get(key, 0) + 1
        return self.counts[key]

    def expire(self, key, seconds):
        self.expiries[key] = seconds


class BrokenRedis:
    def incr(self, key):
        raise ConnectionError("redis went away")


def test_login_is_rate_limited_per_client(client, monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr("app.api.rate_limit.get_redis", lambda: fake)

    body = {"username": "mallory", "password": "guess"}
    statuses = [client.post("/v1/admin/auth/login", json=body).status_code for _ in range(6)]

    assert statuses[:5] == [401] * 5
    assert statuses[5] == 429
    assert any(k.startswith("rl:admin_login:testclient:") for k in fake.counts)
    assert any(k.startswith("rl:admin_login_user:mallory:") for k in fake.counts)
    assert set(fake.expiries.values()) == {60}


def test_forwarded_for_header_does_not_reset_the_window(client, monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr("app.api.rate_limit.get_redis", lambda: fake)

    statuses = [
        client.post(
            "/v1/admin/auth/login",
            json={"username": f"user{i}", "password": "guess"},
            headers={"X-Forwarded-For": f"10.0.0.{i}"},
        ).status_code
        for i in range(20)
    ]

    assert statuses[:5] == [401] * 5
    assert set(statuses[5:]) == {429}
    assert not any("10.0.0." in k for k in fake.counts)


def test_login_is_rate_limited_per_username_across_addresses(client, monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr("app.api.rate_limit.get_redis", lambda: fake)
    addresses = (f"10.0.1.{i}" for i in itertools.count())
    monkeypatch.setattr("app.api.rate_limit.client_address", lambda request: next(addresses))

    body = {"username": "Admin", "password": "guess"}
    statuses = [client.post("/v1/admin/auth/login", json=body).status_code for _ in range(6)]

    assert statuses[:5] == [401] * 5
    assert statuses[5] == 429
    assert any(k.startswith("rl:admin_login_user:admin:") for k in fake.counts)


def test_limiter_fails_open_on_backend_error(client, monkeypatch):
    monkeypatch.setattr("app.api.rate_limit.get_redis", lambda: BrokenRedis())

    resp = client.post(
        "/v1/admin/auth/login", json={"username": "mallory", "password": "guess"}
    )
    assert resp.status_code == 401
