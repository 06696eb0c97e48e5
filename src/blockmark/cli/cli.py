"""CLI entrypoint: Typer app definition and command registration"""

import typer

from blockmark.cli.commands import emit_cmd, fmt_cmd, import_table_cmd, parse_cmd, sample_cmd, validate_cmd


app = typer.Typer(name="blockmark", no_args_is_help=True, help="Block markup parser, formatter and table importer")

app.command(name="parse")(parse_cmd)
app.command(name="fmt")(fmt_cmd)
app.command(name="validate")(validate_cmd)
app.command(name="emit")(emit_cmd)
app.command(name="import-table")(import_table_cmd)
app.command(name="sample")(sample_cmd)
