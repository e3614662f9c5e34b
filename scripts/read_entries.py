"""Pair a list of ids with an optional list of values, one per line."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Final

import typer
from rich.console import Console
from rich.table import Table

import itertranspose as it

DEFAULT_VALUE: Final = 0
CONSOLE: Final = Console()

app = typer.Typer(help="Load entries from an ids file and an optional values file.")


@dataclass(slots=True, frozen=True)
class Entry:
    """An id with its value, `DEFAULT_VALUE` when none was loaded."""

    id: str
    value: int

    @staticmethod
    def new(id_: str, value: it.Option[int]) -> Entry:
        return Entry(id_, value.unwrap_or(DEFAULT_VALUE))


def parse_values(lines: Iterable[str]) -> Iterator[int]:
    """Lazily parse one unsigned integer per line."""
    for line in lines:
        if not (line.isascii() and line.isdigit()):
            msg = f"cannot parse {line!r} as an unsigned integer"
            raise ValueError(msg)
        yield int(line)


def _next_value(values: it.Option[Iterator[int]]) -> it.Option[int]:
    match values:
        case it.Some(cursor):
            return it.Option.from_(next(cursor, None))
        case _:
            return it.NONE


def load_entries(ids: Iterable[str], values: it.Option[Iterable[str]]) -> list[Entry]:
    """Build entries by advancing the optional values by hand."""
    cursor = values.map(parse_values)
    return [Entry.new(id_, _next_value(cursor)) for id_ in ids]


def load_entries_with_transpose(
    ids: Iterable[str], values: it.Option[Iterable[str]]
) -> list[Entry]:
    """Build entries by zipping the ids with the transposed values."""
    return (
        it.Iter(ids)
        .zip(values.map(parse_values).transpose_iter())
        .map(lambda pair: Entry.new(*pair))
        .collect()
    )


def read_lines(path: Path) -> it.Result[list[str], Exception]:
    return it.Result.from_call(path.read_text, encoding="utf-8").map(str.splitlines)


def _to_table(entries: Iterable[Entry]) -> Table:
    table = Table(title="Entries")
    table.add_column("id", style="cyan")
    table.add_column("value", justify="right")
    for entry in entries:
        table.add_row(entry.id, str(entry.value))
    return table


@app.command()
def main(
    ids: Annotated[Path, typer.Argument(help="File with one id per line.")],
    values: Annotated[
        Path | None,
        typer.Option("--values", help="File with one unsigned integer per line."),
    ] = None,
) -> None:
    """Print the entries loaded from IDS and the optional values file."""
    loaded: it.Option[list[str]] = it.NONE
    if values is not None:
        match read_lines(values):
            case it.Ok(lines):
                loaded = it.Some(lines)
            case it.Err(error):
                CONSOLE.print(
                    f"⚠️  Cannot read values, using {DEFAULT_VALUE}: {error}",
                    style="yellow",
                )
    entries = load_entries_with_transpose(
        ids.read_text(encoding="utf-8").splitlines(), loaded
    )
    CONSOLE.print(_to_table(entries))
    CONSOLE.print(f"✓ Loaded {len(entries)} entries", style="bold green")


if __name__ == "__main__":
    app()
