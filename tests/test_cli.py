import io

import pytest

from sortsearch.cli import main
from sortsearch.counting import count_distinct_subsequences, max_subarray_sum
from sortsearch.greedy import count_apartment_assignments, min_gondolas
from sortsearch.multisets import (
    assign_tickets,
    count_towers,
    find_pair_with_sum,
    josephus_order,
    longest_passages,
)


def _run(monkeypatch, capsys, args, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(args)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_towers_from_stdin(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["towers"], "5\n3 8 2 1 5\n")
    assert code == 0
    assert out == f"{count_towers([3, 8, 2, 1, 5])}\n"


def test_sum_of_two_values_found(monkeypatch, capsys):
    values = [2, 7, 5, 1]
    code, out, _ = _run(monkeypatch, capsys, ["sum-of-two-values"], "4 8\n2 7 5 1\n")
    i, j = find_pair_with_sum(values, 8)
    assert code == 0
    assert out == f"{i + 1} {j + 1}\n"


def test_sum_of_two_values_impossible(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["sum-of-two-values"], "3 100\n1 2 3\n")
    assert code == 0
    assert out == "IMPOSSIBLE\n"


def test_concert_tickets_prints_minus_one_when_nothing_fits(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["concert-tickets"], "5 3\n5 3 7 8 5\n4 8 3\n")
    expected = ["-1" if p is None else str(p) for p in assign_tickets([5, 3, 7, 8, 5], [4, 8, 3])]
    assert code == 0
    assert out.splitlines() == expected
    assert out.splitlines()[-1] == "-1"


def test_traffic_lights_from_file(tmp_path, capsys):
    path = tmp_path / "lights.txt"
    path.write_text("8 3\n3 6 2\n")
    code = main(["traffic-lights", "--input", str(path)])
    out = capsys.readouterr().out
    assert code == 0
    assert out.splitlines() == [str(v) for v in longest_passages(8, [3, 6, 2])]


def test_josephus(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["josephus"], "7\n")
    assert code == 0
    assert out.split() == [str(v) for v in josephus_order(7)]


def test_apartments(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["apartments"], "4 3 5\n60 45 80 60\n30 60 75\n")
    assert code == 0
    assert out == f"{count_apartment_assignments([60, 45, 80, 60], [30, 60, 75], 5)}\n"


def test_ferris_wheel(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["ferris-wheel"], "4 10\n7 2 3 9\n")
    assert code == 0
    assert out == f"{min_gondolas([7, 2, 3, 9], 10)}\n"


def test_max_subarray_sum(monkeypatch, capsys):
    values = [-1, 3, -2, 5, 3, -5, 2, 2]
    text = f"{len(values)}\n{' '.join(map(str, values))}\n"
    code, out, _ = _run(monkeypatch, capsys, ["max-subarray-sum"], text)
    assert code == 0
    assert out == f"{max_subarray_sum(values)}\n"


def test_distinct_subsequences(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["distinct-subsequences"], "5\n1 2 1 3 2\n")
    assert code == 0
    assert out == f"{count_distinct_subsequences([1, 2, 1, 3, 2])}\n"


def test_truncated_input_is_an_error(monkeypatch, capsys):
    code, out, err = _run(monkeypatch, capsys, ["towers"], "5\n1 2\n")
    assert code == 1
    assert out == ""
    assert "end of input" in err


def test_non_integer_input_is_an_error(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, ["josephus"], "seven\n")
    assert code == 1
    assert "not an integer" in err


def test_invalid_light_position_is_an_error(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, ["traffic-lights"], "8 1\n8\n")
    assert code == 1
    assert "outside" in err


def test_unknown_problem_exits():
    with pytest.raises(SystemExit) as info:
        main(["no-such-problem"])
    assert info.value.code == 2