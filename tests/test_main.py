import json
from pathlib import Path

import pytest
from rand_ext.main import main_cli

CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yml"


def test_cli_draws_ad_hoc_values(capsys: pytest.CaptureFixture[str]) -> None:
    main_cli(["--type", "zipfian", "--min", "10", "--max", "20", "--parameter", "1.5", "--count", "25"])
    lines = capsys.readouterr().out.split()

    assert len(lines) == 25
    assert all(10 <= int(line) <= 20 for line in lines)


def test_cli_default_parameter(capsys: pytest.CaptureFixture[str]) -> None:
    main_cli(["-t", "gaussian", "--seed-policy", "per_session", "-n", "3"])
    assert len(capsys.readouterr().out.split()) == 3


def test_cli_config_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "report.json"
    main_cli(["-c", str(CONFIG_PATH), "-o", str(output)])

    stdout_payload = json.loads(capsys.readouterr().out)
    file_payload = json.loads(output.read_text())

    assert stdout_payload["seed_policy"] == "per_session"
    assert [w["name"] for w in file_payload["workloads"]] == ["hot_keys", "recent_rows", "mid_range"]
    assert all(len(w["top_values"]) == 5 for w in file_payload["workloads"])


@pytest.mark.parametrize(
    "argv,message",
    [
        ([], "one of the arguments -c/--config_file -t/--type is required"),
        (["-c", "config.yml", "-t", "zipfian"], "not allowed with"),
        (["-t", "zipfian", "-p", "0.5"], "zipfian parameter must be in range"),
        (["-t", "gaussian", "--min", "5", "--max", "1"], "cannot be greater"),
        (["-t", "exponential", "-n", "0"], "must be a positive integer"),
        (["-t", "exponential", "-o", "out.json"], "requires -c/--config_file"),
    ],
)
def test_cli_argument_errors(argv: list[str], message: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main_cli(argv)
    assert excinfo.value.code == 2
    assert message in capsys.readouterr().err


def test_cli_sampling_failure_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "tight.yml"
    config_path.write_text(
        "session:\n"
        "  max_iterations: 1\n"
        "workloads:\n"
        "  - type: zipfian\n"
        "    min: 1\n"
        "    max: 2\n"
        "    parameter: 1.001\n"
        "    total_count: 1000\n"
    )

    with pytest.raises(SystemExit) as excinfo:
        main_cli(["-c", str(config_path)])
    assert excinfo.value.code == 1
    assert "did not accept a candidate" in capsys.readouterr().err
