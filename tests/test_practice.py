import pytest

from labstructs.practice import below, lookup, main, prepend_all


def test_prepend_all_reverses_order():
    values = [1, 2, 3, 4]
    assert prepend_all(values) == list(reversed(values))


def test_prepend_all_empty():
    assert prepend_all([]) == []


def test_prepend_all_keeps_length():
    values = [5, 5, 7]
    result = prepend_all(values)
    assert len(result) == len(values)
    assert sorted(result) == sorted(values)


def test_lookup_finds_definitions_and_reports_missing():
    definitions = [("cat", "animal"), ("oak", "tree")]
    answers = list(lookup(definitions, ["oak", "dog", "cat"]))
    assert answers == ["tree", "Not found", "animal"]


def test_lookup_first_definition_wins():
    definitions = [("cat", "animal"), ("cat", "pet")]
    assert list(lookup(definitions, ["cat"])) == ["animal"]


def test_lookup_no_queries():
    assert list(lookup([("a", "b")], [])) == []


def test_below_keeps_smaller_values_in_order():
    assert below([5, 1, 9, 3, 7], 6) == [5, 1, 3]


def test_below_is_strict():
    assert below([4, 4, 3], 4) == [3]


def test_below_result_is_subset():
    values = [10, -2, 8, 0]
    result = below(values, 5)
    assert all(value < 5 for value in result)
    assert all(value in values for value in result)


def test_main_prepend(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("3\n1 2 3\n")
    assert main(["prepend", str(path)]) == 0
    assert capsys.readouterr().out == "3 2 1 \n"


def test_main_lookup(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("2\ncat animal\noak tree\noak dog\n")
    assert main(["lookup", str(path)]) == 0
    assert capsys.readouterr().out == "tree\nNot found\n"


def test_main_below(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("4\n5 1 9 3\n6\n")
    assert main(["below", str(path)]) == 0
    assert capsys.readouterr().out == "5 1 3 "


@pytest.mark.parametrize(
    "command, text",
    [
        ("prepend", "3\n1 2\n"),
        ("below", "2\n1 x\n3\n"),
        ("lookup", "2\ncat animal\n"),
        ("prepend", "-1\n"),
    ],
)
def test_main_rejects_bad_input(tmp_path, capsys, command, text):
    path = tmp_path / "in.txt"
    path.write_text(text)
    assert main([command, str(path)]) == 1
    assert "error" in capsys.readouterr().err