import pytest
from typer.testing import CliRunner

from knob.cli import app

runner = CliRunner()


def test_options_prints_loaded_values() -> None:
    result = runner.invoke(app, ["options", "--port", "4000", "-e", "staging"])
    assert result.exit_code == 0
    assert "port = 4000" in result.stdout
    assert "environment = staging" in result.stdout


def test_options_without_arguments_prints_nothing() -> None:
    result = runner.invoke(app, ["options"])
    assert result.exit_code == 0
    assert result.stdout.strip() == ""


def test_options_error_prints_usage() -> None:
    result = runner.invoke(app, ["options", "--bogus"])
    assert result.exit_code == 1
    assert "Try one of these:" in result.stdout
    assert "--environment" in result.stdout


@pytest.mark.parametrize(
    "args, expected",
    [
        ([], "127.0.0.1:8080"),
        (["--port", "9000"], "127.0.0.1:9000"),
        (["-i", "::1", "-p", "80"], "[::1]:80"),
        (["--addr=0.0.0.0:4567", "--port", "1"], "0.0.0.0:4567"),
    ],
)
def test_socket(args: list[str], expected: str) -> None:
    result = runner.invoke(app, ["socket", *args])
    assert result.exit_code == 0
    assert result.stdout.strip() == expected


def test_socket_with_bad_port() -> None:
    result = runner.invoke(app, ["socket", "--port", "http"])
    assert result.exit_code == 1
    assert "127.0.0.1" not in result.stdout
