import json

import pytest
from typer.testing import CliRunner

from cli.doctor import reference_checks
from cli.main import app


@pytest.fixture
def runner():
    return CliRunner()


def test_case_command(runner):
    result = runner.invoke(app, ["case", "hello world test", "--to", "camel"])
    assert result.exit_code == 0
    assert result.output.strip() == "helloWorldTest"


def test_case_uses_configured_default(runner, monkeypatch):
    monkeypatch.setenv("SPANNERLY_DEFAULT_CASE_VARIANT", "snake")
    result = runner.invoke(app, ["case", "Hello World"])
    assert result.exit_code == 0
    assert result.output.strip() == "hello_world"


def test_case_rejects_unknown_variant(runner):
    result = runner.invoke(app, ["case", "hello", "--to", "sponge"])
    assert result.exit_code != 0


def test_case_json_and_output_file(runner, tmp_path):
    out = tmp_path / "case.json"
    result = runner.invoke(app, ["case", "hello world", "--to", "kebab-case", "--json", "--output", str(out)])
    assert result.exit_code == 0
    assert json.loads(result.output)["output"] == "hello-world"
    assert json.loads(out.read_text(encoding="utf-8"))["variant"] == "kebab"


def test_tokens_command(runner):
    result = runner.invoke(app, ["tokens", "HTTPServer", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output)["output"] == ["http", "server"]


def test_variants_command(runner):
    result = runner.invoke(app, ["variants"])
    assert result.exit_code == 0
    assert "snake_case" in result.output
    assert "hello_world_test" in result.output


def test_base64_commands(runner):
    encoded = runner.invoke(app, ["base64", "encode", "Hello, World!"])
    assert encoded.exit_code == 0
    assert encoded.output.strip() == "SGVsbG8sIFdvcmxkIQ=="

    decoded = runner.invoke(app, ["base64", "decode", "SGVsbG8sIFdvcmxkIQ=="])
    assert decoded.exit_code == 0
    assert decoded.output.strip() == "Hello, World!"


def test_base64_decode_failure(runner):
    result = runner.invoke(app, ["base64", "decode", "invalid-base64!", "--json"])
    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert payload["ok"] is False
    assert payload["message"] == "Invalid Base64 string"


def test_distance_commands(runner):
    result = runner.invoke(app, ["distance", "miles-to-km", "10"])
    assert result.exit_code == 0
    assert float(result.output) == 16.0934

    result = runner.invoke(app, ["distance", "km-to-miles", "16.0934"])
    assert result.exit_code == 0
    assert float(result.output) == pytest.approx(10, abs=1e-4)


def test_distance_negative(runner):
    result = runner.invoke(app, ["distance", "miles-to-km", "--json", "--", "-1"])
    assert result.exit_code == 1
    assert json.loads(result.output)["message"] == "Miles cannot be negative"


def test_reference_checks_all_pass():
    failed = [name for name, ok, _ in reference_checks() if not ok]
    assert failed == []


def test_doctor_run(runner):
    result = runner.invoke(app, ["doctor", "run"])
    assert result.exit_code == 0
    assert "FAIL" not in result.output


def test_doctor_setup_writes_user_env(runner, isolated_config, monkeypatch):
    monkeypatch.setattr("sys.platform", "linux")
    result = runner.invoke(app, ["doctor", "setup", "--variant", "PascalCase"])
    assert result.exit_code == 0
    env_file = isolated_config / "config" / "spannerly" / ".env"
    assert "SPANNERLY_DEFAULT_CASE_VARIANT=pascal" in env_file.read_text(encoding="utf-8")


def test_base64_decode_rejects_encoded_surrogate(runner):
    result = runner.invoke(app, ["base64", "decode", "7aCA"])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Invalid Base64 string" in result.output
