from cpms.config import Settings


def test_settings_fields():
    fields = set(Settings.model_fields)
    assert {
        "DATABASE_URL",
        "SECRET_KEY",
        "ACCESS_TOKEN_EXPIRE_MINUTES",
        "LOCAL_TIMEZONE",
        "DEFAULT_CREATOR_ID",
        "WRITE_REQUIRES_AUTH",
        "LOG_LEVEL",
    } <= fields
    assert "DEBUG" not in fields


def test_settings_defaults():
    defaults = Settings.model_fields
    assert defaults["LOCAL_TIMEZONE"].default == "UTC"
    assert defaults["DEFAULT_CREATOR_ID"].default == 1
    assert defaults["WRITE_REQUIRES_AUTH"].default is False
