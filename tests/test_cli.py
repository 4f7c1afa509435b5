# tests/test_cli.py
import pytest
from docsearch.cli import main, parse_address
from docsearch.codec import load_index


@pytest.fixture
def docs_dir(tmp_path):
    root = tmp_path / "docs"
    root.mkdir()
    (root / "one.txt").write_text("the cat sat", encoding="utf-8")
    (root / "two.txt").write_text("the dog ran", encoding="utf-8")
    (root / "three.txt").write_text("a bird flew", encoding="utf-8")
    return root


def test_index_then_check_then_search(tmp_path, docs_dir, capsys):
    out = tmp_path / "index.json"
    assert main(["index", str(docs_dir), "--output", str(out)]) == 0
    assert len(load_index(str(out))) == 3

    assert main(["check", str(out)]) == 0
    assert "contains 3 files" in capsys.readouterr().out

    assert main(["search", str(out), "cat", "--top", "1"]) == 0
    lines = [l for l in capsys.readouterr().out.splitlines() if "=>" in l]
    assert len(lines) == 1
    assert "one.txt" in lines[0]


def test_no_subcommand(capsys):
    assert main([]) == 1
    assert "no subcommand" in capsys.readouterr().err


def test_unknown_subcommand():
    with pytest.raises(SystemExit):
        main(["frobnicate"])


def test_check_bad_index_reports_error(tmp_path, capsys):
    bad = tmp_path / "index.json"
    bad.write_text("not json", encoding="utf-8")
    assert main(["check", str(bad)]) == 1
    assert "ERROR:" in capsys.readouterr().err


def test_index_missing_folder(tmp_path, capsys):
    assert main(["index", str(tmp_path / "missing"), "--output", str(tmp_path / "i.json")]) == 1
    assert "ERROR:" in capsys.readouterr().err
    assert not (tmp_path / "i.json").exists()


@pytest.mark.parametrize("address,expected", [
    ("127.0.0.1:6969", ("127.0.0.1", 6969)),
    ("localhost:80", ("localhost", 80)),
])
def test_parse_address(address, expected):
    assert parse_address(address) == expected


@pytest.mark.parametrize("address", ["6969", ":6969", "host:port"])
def test_parse_address_rejects(address):
    with pytest.raises(ValueError):
        parse_address(address)


@pytest.mark.parametrize("top", ["0", "-1", "two"])
def test_search_rejects_non_positive_top(tmp_path, docs_dir, capsys, top):
    out = tmp_path / "index.json"
    assert main(["index", str(docs_dir), "--output", str(out)]) == 0
    capsys.readouterr()

    with pytest.raises(SystemExit) as excinfo:
        main(["search", str(out), "cat", "--top", top])
    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert "=>" not in captured.out
    assert "--top" in captured.err
