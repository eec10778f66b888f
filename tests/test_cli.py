import math

import pytest

from dsakit.cli import main
from dsakit.sequences import fibonacci_iterative, fibonacci_series


@pytest.mark.parametrize("algorithm", ["bubble", "insertion", "selection"])
def test_sort(algorithm, capsys):
    assert main(["sort", "--algorithm", algorithm, "3", "-1", "2"]) == 0
    assert capsys.readouterr().out == "Sorted array: -1 2 3 \n"


def test_sort_default_is_bubble(capsys):
    assert main(["sort", "2", "1"]) == 0
    assert capsys.readouterr().out.startswith("Sorted array: 1 2 ")


def test_binary_search_found(capsys):
    values = [1, 3, 5, 7, 9]
    assert main(["binary-search", "--key", "9", *map(str, values)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == str(values.index(9))
    assert 1 <= int(lines[1]) <= 3


def test_binary_search_not_found(capsys):
    assert main(["binary-search", "--key", "4", "1", "3", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Not found"
    assert int(lines[1]) >= 1


def test_linear_search_found(capsys):
    values = [8, 6, 4]
    assert main(["linear-search", "--key", "4", *map(str, values)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(values.index(4)), str(len(values))]


def test_linear_search_not_found(capsys):
    assert main(["linear-search", "--key", "5", "1", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Element 5 is not present in the array", "2"]


def test_maximum(capsys):
    assert main(["maximum", "4", "11", "-2"]) == 0
    assert capsys.readouterr().out == "The maximum value in the array is: 11\n"


@pytest.mark.parametrize("count", [0, 101])
def test_maximum_invalid_size(count, capsys):
    assert main(["maximum", *["1"] * count]) == 1
    captured = capsys.readouterr()
    assert "Invalid array size" in captured.err
    assert captured.out == ""


def test_factorial(capsys):
    assert main(["factorial", "6"]) == 0
    assert capsys.readouterr().out == f"The factorial of 6 is {math.factorial(6)}\n"


def test_factorial_negative(capsys):
    assert main(["factorial", "-2"]) == 1
    assert capsys.readouterr().err != ""


def test_fibonacci_series(capsys):
    assert main(["fibonacci", "7"]) == 0
    terms = "".join(f"{v} " for v in fibonacci_series(7))
    assert capsys.readouterr().out == f"Fibonacci series up to 7 terms: {terms}\n"


def test_fibonacci_at(capsys):
    assert main(["fibonacci-at", "12"]) == 0
    expected = f"The 12th Fibonacci number is {fibonacci_iterative(12)}\n"
    assert capsys.readouterr().out == expected


def test_missing_command_exits():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2