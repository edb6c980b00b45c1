"""Mini README: Tests for the command line entry point."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from main_render_proxy import cli


def test_classify_command_prints_states(tmp_path) -> None:
    payload = tmp_path / "payload.json"
    payload.write_text(
        json.dumps(
            {
                "statusData": [{"id": "S", "TSC_PRODUCTO": "SECTORIZACION", "TSC_NIVEL": "Nivel 4"}],
                "selectedProduct": None,
                "objectIds": ["S", "T"],
            }
        ),
        encoding="utf-8",
    )

    result = CliRunner().invoke(cli, ["classify", str(payload)])

    assert result.exit_code == 0, result.stdout
    states = json.loads(result.stdout)
    assert states["S"]["visible"] is True
    assert states["T"]["visible"] is False


def test_classify_command_skips_non_object_entries(tmp_path) -> None:
    payload = tmp_path / "payload.json"
    payload.write_text(
        json.dumps(
            {
                "statusData": ["junk", 3, {"id": "S", "TSC_PRODUCTO": "NIVELES", "TSC_NIVEL": "Nivel 1"}],
                "objectIds": ["S"],
            }
        ),
        encoding="utf-8",
    )

    result = CliRunner().invoke(cli, ["classify", str(payload)])

    assert result.exit_code == 0, result.stdout
    assert json.loads(result.stdout)["S"]["visible"] is True


def test_classify_command_rejects_top_level_list(tmp_path) -> None:
    payload = tmp_path / "payload.json"
    payload.write_text(json.dumps([{"id": "S"}]), encoding="utf-8")

    result = CliRunner().invoke(cli, ["classify", str(payload)])

    assert result.exit_code == 2
    assert not isinstance(result.exception, AttributeError)
