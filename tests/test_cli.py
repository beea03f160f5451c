import json

import pytest
from PIL import Image

from blockies.main import format_ascii, main
from blockies.icon.generator import IconSpec, generate


def test_json_output(capsys):
    assert main(["test", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["seed"] == "test"
    assert data["color"] == "hsl(0,40.00097936950624%,10.601410700473934%)"
    assert len(data["cells"]) == 64


def test_json_output_several_seeds(capsys):
    main(["a", "b", "--json", "--size", "4"])
    data = json.loads(capsys.readouterr().out)
    assert [d["seed"] for d in data] == ["a", "b"]
    assert all(len(d["cells"]) == 16 for d in data)


def test_ascii_output(capsys):
    main(["test", "--ascii"])
    out = capsys.readouterr().out
    assert format_ascii(generate(IconSpec(seed="test"))) in out
    assert "@@@##@@@" in out


def test_verbose_reports_draws(capsys):
    main(["test", "-v", "--color", "red"])
    out = capsys.readouterr().out
    assert "color=red" in out
    assert "draws=44" in out


def test_single_png(tmp_path, capsys):
    path = tmp_path / "out" / "icon.png"
    assert main(["test", "--scale", "5", "-o", str(path)]) == 0
    with Image.open(path) as img:
        assert img.size == (40, 40)
    assert "Saved" in capsys.readouterr().out


def test_sheet_png(tmp_path):
    path = tmp_path / "sheet.png"
    main(["a", "b", "c", "--cols", "2", "-o", str(path)])
    with Image.open(path) as img:
        assert img.size == (2 * 36 + 4, 2 * 36 + 4)


def test_random_seed_when_none_given(capsys):
    main(["--json"])
    out = capsys.readouterr().out
    seed_line, body = out.split("\n", 1)
    assert seed_line.startswith("Seed: ")
    assert json.loads(body)["seed"] == seed_line[len("Seed: "):]


def test_bad_color_fails_render(tmp_path, capsys):
    assert main(["test", "--color", "nope", "-o", str(tmp_path / "x.png")]) == 1
    assert "Error" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["x", "--size", "0"], ["x", "--scale", "-1"], ["x", "--size", "big"]])
def test_invalid_arguments(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
