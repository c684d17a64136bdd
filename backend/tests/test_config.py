from graymap.core.config import Settings, get_settings


def test_allowed_origins_accepts_comma_separated_env(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test,")
    get_settings.cache_clear()
    try:
        settings = get_settings()
    finally:
        get_settings.cache_clear()

    assert settings.allowed_origins == ["http://a.test", "http://b.test"]


def test_allowed_origins_keeps_single_origin_and_lists(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "*")

    assert Settings().allowed_origins == ["*"]
    assert Settings(allowed_origins=["http://c.test"]).allowed_origins == ["http://c.test"]


def test_flags_read_from_env(monkeypatch):
    monkeypatch.setenv("STRICT_TRUNCATION", "true")
    monkeypatch.setenv("READ_BITMAP_MAX_VALUE", "false")

    settings = Settings()

    assert settings.strict_truncation is True
    assert settings.read_bitmap_max_value is False
