"""Diary CLI."""

import asyncio
import json
import logging
import sys
from datetime import date

import click

from .config import load_config
from .core.entry import DiaryEntry
from .core.theme import generate_theme, hex_to_rgb
from .core.validation import InvalidEntryError, date_input_to_key, date_to_key, key_to_date
from .workflows import get_store, read_entry, remove_entry, require_valid_key, save_entry


def parse_key(value: str) -> str:
    """Accept YYYYMMDD, YYYY-MM-DD or 'today'."""
    if value == "today":
        return date_to_key(date.today())
    if "-" in value:
        try:
            value = date_input_to_key(value)
        except ValueError:
            raise InvalidEntryError(f"Invalid date {value!r}. Expected YYYY-MM-DD.")
    return require_valid_key(value)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _heading(entry: DiaryEntry, color: bool) -> str:
    day = key_to_date(entry.key).strftime("%A, %B %d, %Y")
    text = f" {day} - {entry.title} "
    if not color:
        return text.strip()
    theme = generate_theme(entry.key)
    return click.style(
        text, fg=hex_to_rgb(theme.text_color), bg=hex_to_rgb(theme.background_color), bold=True
    )


@click.group()
@click.version_option(package_name="diary")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Diary - one entry per day, stored in a TSV file."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_entries(as_json: bool):
    """List all entries, newest first."""
    store = get_store(load_config())
    try:
        entries = asyncio.run(store.list())
    except OSError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps([e.to_dict() for e in entries], indent=2))
        return

    if not entries:
        click.echo("No diary entries yet.")
        return

    for entry in entries:
        click.echo(f"{key_to_date(entry.key).isoformat()}  {entry.title}")


@main.command()
@click.argument("day")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--color/--no-color", default=True, help="Color the heading with the day's theme")
def show(day: str, as_json: bool, color: bool):
    """Show the entry for DAY (YYYYMMDD, YYYY-MM-DD or 'today')."""
    store = get_store(load_config())
    try:
        entry = asyncio.run(read_entry(store, parse_key(day)))
    except (InvalidEntryError, OSError) as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps(entry.to_dict() if entry else None, indent=2))
        return

    if entry is None:
        click.echo(f"No entry for {day}.")
        return

    click.echo(_heading(entry, color))
    click.echo()
    click.echo(entry.body)


@main.command()
@click.argument("day")
@click.option("--title", "-t", required=True, help="Entry title")
@click.option("--body", "-b", default=None, help="Entry text; read from stdin if omitted")
def write(day: str, title: str, body: str | None):
    """Create or replace the entry for DAY."""
    config = load_config()
    store = get_store(config)
    if body is None:
        body = click.get_text_stream("stdin").read()

    async def _write(key: str) -> tuple[DiaryEntry, bool]:
        existed = await read_entry(store, key) is not None
        return await save_entry(store, config, key, title, body), existed

    try:
        entry, existed = asyncio.run(_write(parse_key(day)))
    except (InvalidEntryError, OSError) as e:
        _fail(str(e))

    verb = "Updated" if existed else "Created"
    click.echo(f"{verb} entry for {key_to_date(entry.key).isoformat()}.")


@main.command()
@click.argument("day")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
def delete(day: str, yes: bool):
    """Delete the entry for DAY."""
    store = get_store(load_config())
    try:
        key = parse_key(day)
    except InvalidEntryError as e:
        _fail(str(e))

    if not yes and not click.confirm(f"Delete the entry for {key}?"):
        click.echo("Aborted.")
        return

    try:
        deleted = asyncio.run(remove_entry(store, key))
    except OSError as e:
        _fail(str(e))

    click.echo("Deleted." if deleted else f"No entry for {key}.")


@main.command()
@click.argument("day")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def theme(day: str, as_json: bool):
    """Show the color theme for DAY."""
    try:
        key = parse_key(day)
    except InvalidEntryError as e:
        _fail(str(e))

    result = generate_theme(key)
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    swatch = click.style(
        f" {key} ", fg=hex_to_rgb(result.text_color), bg=hex_to_rgb(result.background_color)
    )
    click.echo(f"{swatch}  background {result.background_color}  text {result.text_color}")
