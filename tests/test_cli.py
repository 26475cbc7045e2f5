import io

import yaml

from watchsat.io import cli


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_text_output(tmp_path, capsys):
    code = cli.main([write(tmp_path, "f.cnf", "A ~B\nB C\n")])
    out = capsys.readouterr().out
    assert code == cli.EXIT_SAT
    assert out.startswith("Read instance!\nA ~B\nB C\n")
    assert "4 satisfying assignment(s)" in out
    assert "{A==False, B==False, C==True}" in out


def test_unsatisfiable_exit_code(tmp_path, capsys):
    code = cli.main([write(tmp_path, "f.cnf", "A\n~A\n"), "--quiet"])
    out = capsys.readouterr().out
    assert code == cli.EXIT_UNSAT
    assert "Read instance!" not in out
    assert "0 satisfying assignment(s)" in out


def test_yaml_output_with_options_file(tmp_path, capsys):
    path = write(tmp_path, "f.yaml", "clauses: ['A B']\noptions:\n  output_format: yaml\n  verify: true\n")
    code = cli.main([path])
    data = yaml.safe_load(capsys.readouterr().out)
    assert code == cli.EXIT_SAT
    assert data["count"] == 3
    assert {"A": False, "B": True} in data["solutions"]


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    assert cli.main(["-", "--format", "yaml"]) == cli.EXIT_SAT
    assert yaml.safe_load(capsys.readouterr().out)["solutions"] == [{"x": True}]


def test_bad_input_reports_error(tmp_path, capsys):
    code = cli.main([write(tmp_path, "f.cnf", "A ~\n")])
    assert code == cli.EXIT_ERROR
    assert "line 1" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.cnf")]) == cli.EXIT_ERROR


def test_unknown_option_in_yaml(tmp_path, capsys):
    path = write(tmp_path, "f.yaml", "clauses: ['A']\noptions:\n  colour: red\n")
    assert cli.main([path]) == cli.EXIT_ERROR
    assert "colour" in capsys.readouterr().err


def test_wide_instance_solves(tmp_path, capsys):
    path = write(tmp_path, "wide.cnf", "\n".join(f"v{i}" for i in range(1200)) + "\n")
    assert cli.main([path, "--quiet"]) == cli.EXIT_SAT
    assert "1 satisfying assignment(s)" in capsys.readouterr().out
