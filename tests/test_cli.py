import pytest

from case_converter.converter import main


def test_converts_positional_text(capsys):
    main(["hello-world", "hello-123-world"])
    out = capsys.readouterr().out
    assert out.splitlines() == ["helloWorld", "helloOnetwothreeWorld"]


def test_dot_style(capsys):
    main(["--style", "dot", "Hello_World"])
    assert capsys.readouterr().out.strip() == "Hello.World"


def test_reads_lines_from_file(tmp_path, capsys):
    source = tmp_path / "keys.txt"
    source.write_text("user-id\n\napi key v2\n", encoding="utf-8")
    main(["--style", "dot", "--file", str(source)])
    assert capsys.readouterr().out.splitlines() == ["user.id", "api.key.v2"]


def test_missing_file_exits_with_error(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["--file", str(tmp_path / "missing.txt")])
    assert exc_info.value.code == 1


def test_invalid_input_exits_with_error(caplog):
    with pytest.raises(SystemExit) as exc_info:
        main(["!!!"])
    assert exc_info.value.code == 1
    assert "Input must contain at least one letter or number" in caplog.text


def test_requires_input():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


def test_rejects_unknown_style():
    with pytest.raises(SystemExit) as exc_info:
        main(["--style", "snake", "foo"])
    assert exc_info.value.code == 2


def test_non_utf8_file_exits_with_error(tmp_path, caplog):
    source = tmp_path / "latin1.txt"
    source.write_bytes(b"caf\xe9-key\n")
    with pytest.raises(SystemExit) as exc_info:
        main(["--file", str(source)])
    assert exc_info.value.code == 1
    assert "Failed to read file" in caplog.text


def test_stops_at_first_invalid_value(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["first-key", "???", "never-printed"])
    assert exc_info.value.code == 1
    assert capsys.readouterr().out.splitlines() == ["firstKey"]
