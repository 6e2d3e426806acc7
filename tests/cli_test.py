import pytest

from customarray import cli


def test_demo_prints_each_step(capsys):
    cli.main(["demo"])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "[0, 1, 2, 3]",
        "3",
        "0",
        "True",
        "1",
        "2",
        "Before sorting: 1, 2, 4, 5, 6",
        "After sorting: 1, 2, 4, 5, 6",
    ]


def test_sort_numeric(capsys):
    cli.main(["sort", "10", "2", "3.5", "--numeric"])
    assert capsys.readouterr().out.strip() == "2, 3.5, 10"


def test_sort_desc_as_strings(capsys):
    cli.main(["sort", "b", "c", "a", "--desc"])
    assert capsys.readouterr().out.strip() == "c, b, a"


def test_sort_rejects_non_numeric_values():
    with pytest.raises(SystemExit) as exc:
        cli.main(["sort", "1", "x", "--numeric"])
    assert exc.value.code == 2


def test_bench_rejects_non_positive_sizes():
    with pytest.raises(SystemExit) as exc:
        cli.main(["bench", "--base-input", "0"])
    assert exc.value.code == 2


def test_bench_writes_csv(tmp_path, capsys):
    path = tmp_path / "out.csv"
    cli.main(["bench", "--path", str(path), "--base-input", "4", "--doublings", "1", "--iterations", "1"])
    assert path.exists()
    assert "Benchmark completed. 7 rows" in capsys.readouterr().out


def test_parse_number():
    assert cli.parse_number("3") == 3
    assert cli.parse_number("-2.5") == -2.5
