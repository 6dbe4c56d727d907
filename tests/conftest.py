import pytest


INQUIRY_EMAIL = (
    "Subject: Pricing\n"
    "Hi, I am wondering if your product supports X.\n"
    "Regards,\n"
    "Jane Doe"
)


@pytest.fixture
def inquiry_email():
    return INQUIRY_EMAIL


@pytest.fixture
def clean_env(monkeypatch):
    """Keep .env files and the host environment out of config tests."""
    monkeypatch.setattr("smart_reply_agent.config.load_dotenv", lambda *a, **kw: False)
    for name in ("REPLY_SIGNATURE", "LOG_LEVEL", "REPLY_INPUT_ENCODING"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
