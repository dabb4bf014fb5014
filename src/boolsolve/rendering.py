"""Renders evaluation results and truth tables as console text, HTML, JSON or CSV."""

import html
import json

from boolsolve.evaluation.truth_table import TruthTable

PAGE_TITLE = "Boolean Expression Solver Result"
PAGE_HEADING = "Boolean Expression Solver"


def render_result_text(result: bool) -> str:
    return f"Evaluation Result: {int(result)}"


def render_table_text(table: TruthTable) -> str:
    lines = ["Truth Table:", "\t".join([*table.variables, "Result"])]
    for row in table:
        cells = [str(int(v)) for v in row.values()]
        lines.append("\t".join([*cells, str(int(row.result))]))
    return "\n".join(lines)


def render_table_csv(table: TruthTable) -> str:
    return table.to_dataframe().to_csv(index=False)


def render_json(expression: str, result: bool | TruthTable) -> str:
    if isinstance(result, TruthTable):
        payload = {
            "expression": expression,
            "variables": list(result.variables),
            "rows": [
                {
                    "values": {
                        v: int(value)
                        for v, value in zip(result.variables, row.values())
                    },
                    "result": int(row.result),
                }
                for row in result
            ],
        }
    else:
        payload = {"expression": expression, "result": int(result)}
    return json.dumps(payload, ensure_ascii=False)


def render_table_html(table: TruthTable) -> str:
    return table.to_dataframe().to_html(index=False, border=1)


def render_page_html(body: str) -> str:
    return (
        f"<html><head><title>{PAGE_TITLE}</title></head><body>"
        f"<h1>{PAGE_HEADING}</h1>{body}</body></html>"
    )


def render_result_html(expression: str, result: bool) -> str:
    return render_page_html(
        "<h2>Evaluation Result for Expression:</h2>"
        f"<p>{html.escape(expression)}</p>"
        f"<p>Result: {int(result)}</p>"
    )


def render_truth_table_html(expression: str, table: TruthTable) -> str:
    return render_page_html(
        "<h2>Truth Table for Expression:</h2>"
        f"<p>{html.escape(expression)}</p>"
        f"{render_table_html(table)}"
    )


def render_error_html(message: str) -> str:
    return render_page_html(f"<h2>Error: {html.escape(message)}</h2>")
