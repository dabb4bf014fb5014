from urllib.parse import urlencode

from boolsolve.frontends.query import get_query_param, handle_query


def test_get_query_param_decodes_values():
    query = urlencode({"expr": "A + B · C", "mode": "tt"})
    assert get_query_param(query, "expr") == "A + B · C"
    assert get_query_param(query, "mode") == "tt"
    assert get_query_param(query, "missing") is None
    # '+' in the raw query string is a space
    assert get_query_param("expr=A+%C2%B7+B", "expr") == "A · B"


def test_missing_query_or_expression():
    status, page = handle_query(None)
    assert status == 1
    assert "No query string provided." in page

    status, page = handle_query("mode=tt")
    assert status == 1
    assert "No expression provided." in page


def test_evaluation_assumes_all_variables_true():
    status, page = handle_query(urlencode({"expr": "A · !B"}))
    assert status == 0
    assert "Evaluation Result for Expression:" in page
    assert "Result: 0" in page

    status, page = handle_query(urlencode({"expr": "A + B"}))
    assert status == 0
    assert "Result: 1" in page


def test_complement_notation_is_normalized():
    status, page = handle_query(urlencode({"expr": "A'"}))
    assert status == 0
    assert "Result: 0" in page


def test_truth_table_mode():
    status, page = handle_query(urlencode({"expr": "A + !A", "mode": "tt"}))
    assert status == 0
    assert "Truth Table for Expression:" in page
    assert page.count("<tr") == 3


def test_errors_are_rendered():
    status, page = handle_query(urlencode({"expr": "(A · B"}))
    assert status == 1
    assert "Expected" in page

    status, page = handle_query(urlencode({"expr": "A $ B"}))
    assert status == 1
    assert "Unrecognized character" in page

    status, page = handle_query(
        urlencode({"expr": "A · B · C", "mode": "tt"}), max_variables=2
    )
    assert status == 1
    assert "limit is 2" in page


def test_long_chains():
    status, page = handle_query(urlencode({"expr": " · ".join(["A"] * 5000)}))
    assert status == 0
    assert "Result: 1" in page

    status, page = handle_query(
        urlencode({"expr": " + ".join(["!A", "!B"] * 2500), "mode": "tt"})
    )
    assert status == 0
    assert page.count("<tr") == 5
