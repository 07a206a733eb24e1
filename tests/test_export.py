import pyarrow as pa
import pyarrow.csv as pa_csv

from basic_lang.export import RESULT_SCHEMA, export_csv, results_table
from basic_lang.main import run_lines


def test_results_table():
    table = results_table(run_lines(["2*3+4", "1+$", ""]))
    assert table.schema == RESULT_SCHEMA
    assert table.num_rows == 3
    rows = table.to_pylist()
    assert rows[0]["value"] == 10.0
    assert rows[0]["tree"] == "((INT:2,MUL,INT:3),PLUS,INT:4)"
    assert rows[1]["value"] is None
    assert rows[1]["tokens"] is None
    assert rows[1]["error"].startswith("Unexpected character")
    assert rows[2]["tokens"] == ""
    assert rows[2]["tree"] is None


def test_empty_results():
    table = results_table([])
    assert table.num_rows == 0
    assert table.schema == RESULT_SCHEMA


def test_export_csv(tmp_path):
    path = tmp_path / "results.csv"
    export_csv(run_lines(["7/2", "1+1"]), str(path))
    table = pa_csv.read_csv(str(path))
    assert table.num_rows == 2
    assert table.column("value").to_pylist()[0] == 3.5
    assert table.column("line").type == pa.int64()
