import pyarrow as pa
import pyarrow.csv as pa_csv

RESULT_SCHEMA = pa.schema([
    ('line', pa.int64()),
    ('source', pa.string()),
    ('tokens', pa.string()),
    ('tree', pa.string()),
    ('value', pa.float64()),
    ('error', pa.string()),
])


def results_table(results):
    """Builds a pyarrow Table with one row per LineResult.

    Columns missing for a line (tokens, tree and value on error) are null.
    """
    columns = {name: [] for name in RESULT_SCHEMA.names}
    for result in results:
        columns['line'].append(result.line)
        columns['source'].append(result.source)
        columns['tokens'].append(str(result.tokens) if result.tokens is not None else None)
        columns['tree'].append(str(result.tree) if result.tree is not None else None)
        columns['value'].append(result.value)
        columns['error'].append(result.error)
    return pa.Table.from_pydict(columns, schema=RESULT_SCHEMA)


def export_csv(results, filename):
    table = results_table(results)
    pa_csv.write_csv(table, filename)
    return table
