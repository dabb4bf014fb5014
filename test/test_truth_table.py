import itertools

import pytest

from boolsolve.evaluation.evaluate import evaluate
from boolsolve.evaluation.truth_table import DEFAULT_MAX_VARIABLES, truth_table
from boolsolve.logic.boolean_parser import parse
from boolsolve.logic.errors import LimitExceeded


def test_row_ordering():
    table = truth_table(parse("A · B"))
    assert table.variables == ("A", "B")
    assert [row.values() for row in table] == [
        (False, False),
        (False, True),
        (True, False),
        (True, True),
    ]
    assert table.results() == [False, False, False, True]


def test_size_and_distinct_assignments():
    table = truth_table(parse("A + B · C + !D"))
    assert len(table) == 16
    assert len({row.assignment for row in table}) == 16
    for row in table:
        assert len(row.assignment) == 4


def test_columns_follow_first_occurrence():
    table = truth_table(parse("B + A · B"))
    assert table.variables == ("B", "A")
    assert table[1].assignment.as_dict() == {"A": True, "B": False}
    assert table.results() == [False, False, True, True]


def test_results_match_direct_evaluation():
    expr = parse("(A + !B) · (C + A)")
    table = truth_table(expr)
    for row, (a, b, c) in zip(table, itertools.product([False, True], repeat=3)):
        assert row.result == ((a or not b) and (c or a))


def test_no_free_variables():
    table = truth_table(parse("1 · 0"))
    assert len(table) == 1
    assert table.variables == ()
    assert len(table[0].assignment) == 0
    assert table[0].result is False
    assert truth_table(parse("!(0 + 0)")).results() == [True]


def test_minterms():
    assert truth_table(parse("A + B")).minterms() == [1, 2, 3]
    assert truth_table(parse("A · !A")).minterms() == []


def test_to_dataframe():
    df = truth_table(parse("A · B")).to_dataframe()
    assert list(df.columns) == ["A", "B", "Result"]
    assert df["A"].tolist() == [0, 0, 1, 1]
    assert df["B"].tolist() == [0, 1, 0, 1]
    assert df["Result"].tolist() == [0, 0, 0, 1]

    df = truth_table(parse("1")).to_dataframe()
    assert list(df.columns) == ["Result"]
    assert df["Result"].tolist() == [1]


def test_variable_limit():
    letters = "ABCDEFGHIJKLMNOPQRSTU"
    assert len(letters) == DEFAULT_MAX_VARIABLES + 1
    with pytest.raises(LimitExceeded) as info:
        truth_table(parse(" + ".join(letters)))
    assert info.value.count == 21
    assert info.value.limit == DEFAULT_MAX_VARIABLES

    with pytest.raises(LimitExceeded):
        truth_table(parse("A · B · C · D"), max_variables=3)
    assert len(truth_table(parse("A · B · C · D"), max_variables=None)) == 16


def test_rows_agree_with_evaluate():
    expr = parse("!(A · B) + C · !D + 0")
    table = truth_table(expr)
    for row in table:
        assert row.result == evaluate(expr, row.assignment)


def test_long_chains():
    or_table = truth_table(parse(" + ".join(["A", "B"] * 2500)))
    assert or_table.variables == ("A", "B")
    assert or_table.results() == [False, True, True, True]

    and_table = truth_table(parse(" · ".join(["A", "!B", "C"] * 2000)))
    assert and_table.variables == ("A", "B", "C")
    assert and_table.minterms() == [5]


def test_table_at_variable_limit():
    letters = "ABCDEFGHIJKLMNOPQRST"
    assert len(letters) == DEFAULT_MAX_VARIABLES
    table = truth_table(parse(" · ".join(letters)))
    assert len(table) == 2**20
    # One byte per cell and one per result
    assert table.matrix.nbytes == 20 * 2**20
    assert table.result_column.nbytes == 2**20
    assert table.minterms() == [2**20 - 1]
    assert table[2**20 - 1].assignment.as_dict() == dict.fromkeys(letters, True)
    assert table[0].values() == (False,) * 20
