import pytest


@pytest.fixture(autouse=True)
def isolated_composio_env(monkeypatch, tmp_path):
    """
    Keep tests independent of the developer's machine: no API key or base URL
    from the environment, and a user data path that does not exist.

    Each variable is set before it is deleted so monkeypatch also removes
    values that a test loads from a .env file.
    """
    for name in ("COMPOSIO_API_KEY", "COMPOSIO_BASE_URL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("COMPOSIO_USER_DATA_PATH", str(tmp_path / "missing" / "user_data.json"))
