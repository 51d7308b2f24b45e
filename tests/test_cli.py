from __future__ import annotations

import json
from pathlib import Path

import pytest

from treeviz import cli


@pytest.fixture(autouse=True)
def _no_sleep(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    sleeps: list[float] = []
    monkeypatch.setattr("treeviz.replay.time.sleep", sleeps.append)
    return sleeps


def test_cli_prints_metrics_and_tree(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["1,2,3,4,5,6,7"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[:6] == [
        "Maximum depth: 3",
        "Is balanced: Yes",
        "Node count: 7",
        "1",
        "2 3",
        "4 5 6 7",
    ]


def test_cli_animates_each_traversal_step(
    capsys: pytest.CaptureFixture[str], _no_sleep: list[float]
) -> None:
    assert cli.main(["2,1,3", "--traversal", "in-order", "--interval", "0.1"]) == 0

    out = capsys.readouterr().out
    assert "In-order traversal" in out
    assert "Step 3/3" in out
    assert "*1*" in out
    assert out.rstrip().endswith("[1] [2] [3]")
    assert _no_sleep == [0.1, 0.1, 0.1]


def test_cli_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert (
        cli.main(
            [
                "2,1,3",
                "-t",
                "Post-order",
                "-t",
                "Level-order",
                "--output-format",
                "json",
            ]
        )
        == 0
    )

    report = json.loads(capsys.readouterr().out)
    assert report["tree"]["metrics"] == {
        "max_depth": 2,
        "is_balanced": True,
        "node_count": 3,
    }
    assert [entry["traversal"] for entry in report["traversals"]] == [
        "Post-order",
        "Level-order",
    ]
    assert report["traversals"][0]["sequence"] == [1, 3, 2]
    assert report["traversals"][0]["highlighted"] == 2
    assert report["traversals"][1]["status"] == "idle"


def test_cli_compact_flag_drops_nulls(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["1,null,2", "--compact", "--output-format", "json"]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["tree"]["values"] == [1, 2]


def test_cli_empty_tree_skips_traversal(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["", "-t", "Pre-order"]) == 0

    out = capsys.readouterr().out
    assert "<empty>" in out
    assert "Pre-order: nothing to traverse" in out


def test_cli_rejects_unknown_traversal() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["1", "--traversal", "zigzag"])
    assert excinfo.value.code == 2


def test_cli_reports_missing_config(tmp_path: Path) -> None:
    assert cli.main(["1", "--config", str(tmp_path / "missing.yaml")]) == 2


def test_cli_uses_configured_interval(
    tmp_path: Path, _no_sleep: list[float], capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "viz.yaml"
    config_path.write_text("tick_interval: 0.3\n", encoding="utf-8")

    assert cli.main(["5", "-t", "Level-order", "--config", str(config_path)]) == 0
    assert _no_sleep == [0.3]


def test_cli_demo_prints_sample_trees(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--demo"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[:12] == [
        "Balanced tree: 1,2,3,4,5,6,7",
        "Maximum depth: 3",
        "Is balanced: Yes",
        "Node count: 7",
        "1",
        "2 3",
        "4 5 6 7",
        "In-order: 4 2 5 1 6 3 7",
        "Pre-order: 1 2 4 5 3 6 7",
        "Post-order: 4 5 2 6 7 3 1",
        "Level-order: 1 2 3 4 5 6 7",
        "",
    ]
    assert lines[12:24] == [
        "Skewed tree: 1,2,null,3,null,4",
        "Maximum depth: 4",
        "Is balanced: No",
        "Node count: 4",
        "1",
        "2 ·",
        "3 ·",
        "4 ·",
        "In-order: 4 3 2 1",
        "Pre-order: 1 2 3 4",
        "Post-order: 4 3 2 1",
        "Level-order: 1 2 3 4",
    ]


def test_cli_requires_values_without_demo() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


def test_cli_text_mode_handles_skewed_input(capsys: pytest.CaptureFixture[str]) -> None:
    text = ",".join(["0"] + [f"{value},null" for value in range(1, 30)])

    assert cli.main([text, "-t", "Pre-order"]) == 0

    out = capsys.readouterr().out
    assert "Step 30/30" in out
    assert len(out) < 200_000
