import json
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.table import Table
from dotenv import load_dotenv

from .settings import Settings
from .logging_config import setup_logging
from .errors import DmnexError
from .decode import check_filename, decode_xml
from .document import read_document
from .engine.catalog import TypeCatalog
from .engine.resolve import resolve
from .engine.types import Composite, Primitive
from .service import ExampleService

app = typer.Typer(add_completion=False)


def _settings() -> Settings:
    load_dotenv()
    st = Settings()
    setup_logging(st)
    return st


def _fail(err: DmnexError) -> None:
    print(f"[red]{err.message}:[/red] {err.details}")
    raise typer.Exit(code=1)


def _read(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise DmnexError("Cannot read file", f"{path}: {e.strerror or e}") from e


@app.command()
def generate(path: Path, output: Optional[Path] = None, indent: Optional[int] = None):
    """Generate example input values for every inputData of a DMN file."""
    st = _settings()
    try:
        examples = ExampleService(st).generate_from_file(path.name, _read(path))
    except DmnexError as e:
        _fail(e)

    text = json.dumps(examples, indent=st.json_indent if indent is None else indent)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        print(f"[green]OK[/green] wrote {len(examples)} examples to {output}")
        return
    typer.echo(text)


@app.command()
def inspect(path: Path):
    """Show how each item definition resolves (kind, fields, literal)."""
    st = _settings()
    try:
        check_filename(path.name, st.file_extension)
        document = read_document(decode_xml(_read(path), st), st)
    except DmnexError as e:
        _fail(e)

    catalog = TypeCatalog.build(document.definitions)
    table = Table(title=f"{path.name}: {len(catalog)} item definitions")
    table.add_column("Type")
    table.add_column("Kind")
    table.add_column("Detail")
    for name in catalog.names():
        shape = resolve(name, catalog)
        if isinstance(shape, Composite):
            table.add_row(name, "composite", ", ".join(f for f, _ in shape.fields))
        elif isinstance(shape, Primitive) and shape.literal is not None:
            table.add_row(name, "enumeration", repr(shape.literal))
        elif isinstance(shape, Primitive):
            table.add_row(name, "primitive", shape.base_type or "string")
        else:
            table.add_row(name, "unresolved", shape.type_name or "string")
    print(table)

    print("\n[bold]Inputs:[/bold]")
    for var in document.inputs:
        print(f"- {var.name} ({var.type_ref or 'untyped'})")


@app.command()
def serve(host: str = "127.0.0.1", port: int = 8099):
    """Run the HTTP server. Requires: pip install -e .[server]"""
    load_dotenv()
    import uvicorn
    uvicorn.run("dmnex.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    app()
