import io

from basic_lang import cli


def test_file_mode(tmp_path, capsys):
    source = tmp_path / "exprs.txt"
    source.write_text("2*3+4\n1+$\n\n5/0\n")
    assert cli.main([str(source)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:3] == ["((INT:2,MUL,INT:3),PLUS,INT:4)", "INT:2 MUL INT:3 PLUS INT:4", "10"]
    assert out[3].startswith("Error: Unexpected character '$'")
    assert out[4:] == ["(INT:5,DIV,INT:0)", "INT:5 DIV INT:0", "inf"]
    assert not (tmp_path / "exprs.csv").exists()


def test_file_mode_debug_saves_csv(tmp_path, capsys):
    source = tmp_path / "exprs.txt"
    source.write_text("1+1\n")
    assert cli.main([str(source), "--debug"]) == 0
    assert (tmp_path / "exprs.csv").exists()
    assert "Results saved to:" in capsys.readouterr().out


def test_strict_flag(tmp_path, capsys):
    source = tmp_path / "exprs.txt"
    source.write_text("1+2+3\n")
    cli.main([str(source), "--strict"])
    assert capsys.readouterr().out.startswith("Error: Unexpected token")


def test_missing_file(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.txt")]) == 1
    assert "not found" in capsys.readouterr().out


def test_repl_until_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7/2\n1+x\n"))
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "3.5" in out
    assert "Error: Unexpected character 'x'" in out
    assert cli.PROMPT in out


def test_undecodable_line_does_not_stop_the_file(tmp_path, capsys):
    source = tmp_path / "exprs.txt"
    source.write_bytes(b"1+1\n\xff\n2*2\n")
    assert cli.main([str(source)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:3] == ["(INT:1,PLUS,INT:1)", "INT:1 PLUS INT:1", "2"]
    assert out[3].startswith("Error: Unexpected character")
    assert out[4:] == ["(INT:2,MUL,INT:2)", "INT:2 MUL INT:2", "4"]


def test_unreadable_path_is_reported(tmp_path, capsys):
    assert cli.main([str(tmp_path)]) == 1
    assert capsys.readouterr().out.startswith("Error: ")
