import importlib


def test_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("SECRET_RECON_LOG_LEVEL", "debug")
    monkeypatch.setenv("SECRET_RECON_FAIL_FAST", "yes")
    monkeypatch.setenv("SECRET_RECON_VERIFY_LIMIT", "8")

    config_module = importlib.import_module("secret_recon.config")
    reloaded = importlib.reload(config_module)

    try:
        settings = reloaded.settings
        assert settings.log_level == "DEBUG"
        assert settings.fail_fast is True
        assert settings.verify_limit == 8
    finally:
        monkeypatch.delenv("SECRET_RECON_LOG_LEVEL", raising=False)
        monkeypatch.delenv("SECRET_RECON_FAIL_FAST", raising=False)
        monkeypatch.delenv("SECRET_RECON_VERIFY_LIMIT", raising=False)
        importlib.reload(config_module)


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("SECRET_RECON_LOG_LEVEL", "chatty")
    monkeypatch.setenv("SECRET_RECON_FAIL_FAST", "maybe")
    monkeypatch.setenv("SECRET_RECON_VERIFY_LIMIT", "lots")

    from secret_recon.config import load_settings

    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.fail_fast is False
    assert settings.verify_limit == 64


def test_verify_limit_is_at_least_one(monkeypatch):
    monkeypatch.setenv("SECRET_RECON_VERIFY_LIMIT", "-3")

    from secret_recon.config import load_settings

    assert load_settings().verify_limit == 1
