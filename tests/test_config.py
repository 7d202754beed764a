import pytest

# NOTE: conftest.py already sets SUPABASE_URL, SUPABASE_ANON_KEY, FETCH_TIMEOUT
# and CORS_ALLOW_ORIGINS in os.environ before any source imports. These tests
# use monkeypatch to override/remove env vars for specific scenarios.


def test_import_config_does_not_crash(monkeypatch):
    """Test that importing config does not raise even when required vars are missing."""
    monkeypatch.delenv("SUPABASE_URL", raising=False)

    import job_listing_extractor.config  # noqa: F401


def test_access_supabase_url_returns_string():
    """Test that accessing SUPABASE_URL returns the env var value."""
    from job_listing_extractor.config import SUPABASE_URL

    assert SUPABASE_URL == "https://project.supabase.test"


def test_supabase_url_trailing_slash_stripped(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.test/")

    from job_listing_extractor.config import _Config

    assert _Config().SUPABASE_URL == "https://project.supabase.test"


def test_missing_supabase_url_raises_on_access(monkeypatch):
    """Test that accessing SUPABASE_URL raises ValueError when it is missing."""
    monkeypatch.delenv("SUPABASE_URL", raising=False)

    from job_listing_extractor.config import _Config

    cfg = _Config()
    with pytest.raises(ValueError, match="SUPABASE_URL"):
        _ = cfg.SUPABASE_URL


def test_missing_anon_key_raises_on_access(monkeypatch):
    """Test that accessing SUPABASE_ANON_KEY raises ValueError when it is blank."""
    monkeypatch.setenv("SUPABASE_ANON_KEY", "   ")

    from job_listing_extractor.config import _Config

    cfg = _Config()
    with pytest.raises(ValueError, match="SUPABASE_ANON_KEY"):
        _ = cfg.SUPABASE_ANON_KEY


def test_missing_supabase_does_not_block_fetch_timeout(monkeypatch):
    """Optional settings stay readable when the auth settings are absent."""
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)

    from job_listing_extractor.config import _Config

    assert _Config().FETCH_TIMEOUT == 15.0


def test_fetch_timeout_default_when_unset(monkeypatch):
    monkeypatch.delenv("FETCH_TIMEOUT", raising=False)

    from job_listing_extractor.config import _Config

    assert _Config().FETCH_TIMEOUT == 15.0


def test_fetch_timeout_accepts_fractional_seconds(monkeypatch):
    monkeypatch.setenv("FETCH_TIMEOUT", "2.5")

    from job_listing_extractor.config import _Config

    assert _Config().FETCH_TIMEOUT == 2.5


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_fetch_timeout_raises(monkeypatch, raw):
    """Test that a non-numeric or non-positive FETCH_TIMEOUT is rejected."""
    monkeypatch.setenv("FETCH_TIMEOUT", raw)

    from job_listing_extractor.config import _Config

    with pytest.raises(ValueError, match="FETCH_TIMEOUT must be a positive number"):
        _ = _Config().FETCH_TIMEOUT


def test_cors_origins_comma_separated(monkeypatch):
    """Test that comma-separated CORS_ALLOW_ORIGINS are split into a list."""
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example,")

    from job_listing_extractor.config import _Config

    assert _Config().CORS_ALLOW_ORIGINS == ["https://a.example", "https://b.example"]


def test_cors_origins_default_when_unset(monkeypatch):
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)

    from job_listing_extractor.config import _Config

    assert _Config().CORS_ALLOW_ORIGINS == ["*"]


def test_config_lazy_loads_only_once():
    """Test that _Config only calls get_config() once (caches result)."""
    from job_listing_extractor.config import _Config

    cfg = _Config()
    assert cfg._config is None  # Not loaded yet

    _ = cfg.SUPABASE_URL  # Triggers load
    assert cfg._config is not None

    first_config = cfg._config

    _ = cfg.FETCH_TIMEOUT  # Should reuse cached config
    assert cfg._config is first_config


def test_module_getattr_unknown_attribute():
    """Test that accessing an unknown attribute on the config module raises AttributeError."""
    import job_listing_extractor.config as config_module

    with pytest.raises(AttributeError, match="NONEXISTENT"):
        _ = config_module.NONEXISTENT
