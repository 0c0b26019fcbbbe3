# tests/app/test_main_cli.py
import json

import pytest

from main import run


def test_route_between_landmarks(capsys):
    assert run(["--quiet", "--from", "Balme Library", "--to", "Commonwealth Hall"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == (
        "700: Balme Library -> Jones Quartey Building (JQB) -> Commonwealth Hall"
    )


def test_unreachable_and_unknown(capsys):
    assert run(["--quiet", "--from", "Balme Library", "--to", "Night Market"]) == 1
    assert "no route" in capsys.readouterr().out
    assert run(["--quiet", "--from", "Balme Library", "--to", "Atlantis"]) == 2
    assert "Atlantis" in capsys.readouterr().out


def test_within_uses_all_pairs(capsys):
    assert run(["--quiet", "--from", "Balme Library", "--within", "300"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["  Jones Quartey Building (JQB): 300"]
    assert run(["--quiet", "--from", "Atlantis", "--within", "300"]) == 2


def test_via_and_config_file(tmp_path, capsys):
    cfg = {
        "source": {
            "kind": "inline",
            "nodes": [{"id": i} for i in "abcd"],
            "edges": [
                {"source": "a", "target": "b", "weight": 1},
                {"source": "b", "target": "c", "weight": 1},
                {"source": "a", "target": "d", "weight": 1},
            ],
        },
        "routers": [{"kind": "dijkstra"}],
    }
    path = tmp_path / "nav.json"
    path.write_text(json.dumps(cfg), encoding="utf-8")
    assert run(["--quiet", "--config", str(path), "--from", "a", "--to", "c", "--via", "d"]) == 0
    assert capsys.readouterr().out.strip() == "4: a -> d -> a -> b -> c"


def test_from_is_required():
    with pytest.raises(SystemExit):
        run(["--quiet", "--to", "Balme Library"])


@pytest.mark.parametrize(
    "argv",
    [
        ["--from", "Balme Library", "--via", "Great Hall"],
        ["--via", "Great Hall"],
        ["--from", "Balme Library"],
    ],
)
def test_incomplete_queries_are_usage_errors(argv, capsys):
    with pytest.raises(SystemExit) as ei:
        run(["--quiet", *argv])
    assert ei.value.code == 2
    assert capsys.readouterr().out == ""
