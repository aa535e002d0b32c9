import json

import pytest

from timelineplot.cli import main


def write_doc(tmp_path, payload) -> str:
    path = tmp_path / "data.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_cli_writes_svg(tmp_path, two_items) -> None:
    data = write_doc(tmp_path, two_items)
    out = tmp_path / "out"
    code = main([data, "-o", str(out), "--no-png", "--measure", "estimate"])
    assert code == 0
    svg = (out / "timeline.svg").read_text()
    assert "2021" in svg
    assert not (out / "timeline.png").exists()


def test_cli_zigzag_preset_and_name(tmp_path, two_items) -> None:
    data = write_doc(tmp_path, two_items)
    code = main(
        [data, "-o", str(tmp_path), "--preset", "zigzag", "--name", "zz",
         "--no-png", "--measure", "estimate"]
    )
    assert code == 0
    assert (tmp_path / "zz.svg").exists()


def test_cli_reports_bad_json(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    assert main([str(path), "-o", str(tmp_path), "--no-png"]) == 1


def test_cli_reports_missing_file(tmp_path) -> None:
    assert main([str(tmp_path / "missing.json"), "--no-png"]) == 1


def test_cli_rejects_non_object_document(tmp_path) -> None:
    data = write_doc(tmp_path, [1, 2, 3])
    assert main([data, "-o", str(tmp_path), "--no-png"]) == 1


def test_cli_rejects_unknown_preset(tmp_path, two_items) -> None:
    data = write_doc(tmp_path, two_items)
    with pytest.raises(SystemExit) as exc:
        main([data, "--preset", "spiral"])
    assert exc.value.code == 2


def test_cli_keeps_dotted_name_intact(tmp_path, two_items, caplog) -> None:
    data = write_doc(tmp_path, two_items)
    out = tmp_path / "out"
    with caplog.at_level("INFO"):
        code = main(
            [data, "-o", str(out), "--name", "timeline.v2", "--no-png", "--measure", "estimate"]
        )
    assert code == 0
    assert sorted(p.name for p in out.iterdir()) == ["timeline.v2.svg"]
    assert "timeline.v2.svg" in caplog.text
    assert "timeline.svg" not in caplog.text


def test_cli_tolerates_non_object_items(tmp_path) -> None:
    data = write_doc(tmp_path, {"items": ["oops", {"year": 2020}]})
    out = tmp_path / "out"
    assert main([data, "-o", str(out), "--no-png", "--measure", "estimate"]) == 0
    assert "2020" in (out / "timeline.svg").read_text()
