from app.core.config import Settings


def test_cors_origins_formats(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    assert Settings().cors_origins == ["http://a.test", "http://b.test"]

    monkeypatch.setenv("CORS_ORIGINS", '["http://a.test"]')
    assert Settings().cors_origins == ["http://a.test"]

    monkeypatch.setenv("CORS_ORIGINS", "[http://a.test, http://b.test]")
    assert Settings().cors_origins == ["http://a.test", "http://b.test"]

    monkeypatch.setenv("CORS_ORIGINS", "*")
    assert Settings().cors_origins == ["*"]


def test_alternative_search_settings(monkeypatch):
    monkeypatch.setenv("ALTERNATIVE_SEARCH_HORIZON_DAYS", "30")
    monkeypatch.setenv("ALTERNATIVE_SUGGESTION_LIMIT", "3")
    s = Settings()
    assert s.alternative_search_horizon_days == 30
    assert s.alternative_suggestion_limit == 3
