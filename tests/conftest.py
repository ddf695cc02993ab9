import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real user .env and any project .env."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    for name in ("SPANNERLY_DEFAULT_CASE_VARIANT", "SPANNERLY_LOG_LEVEL", "SPANNERLY_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
