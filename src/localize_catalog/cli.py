"""Command-line interface for localize-catalog."""

import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .analysis import DuplicateFinder, WordCounter, analyze_coverage
from .config import config
from .errors import LocalizeError, ParseError
from .extraction import (
    FileFormat,
    StringsWriter,
    XCStringsParser,
    XCStringsWriter,
    parse_source,
    render_catalog,
)
from .logging_config import setup_logging
from .merge import MergeEngine, combine_sources, merge_into_catalog, rename_keys
from .models import Source, StringEntry, StringValue

console = Console()

FORMAT_CHOICES = {
    "xcstrings": FileFormat.XCSTRINGS,
    "strings": FileFormat.STRINGS,
    "stringsdict": FileFormat.STRINGSDICT,
    "android": FileFormat.ANDROID,
    "json": FileFormat.JSON,
    "properties": FileFormat.PROPERTIES,
}


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    default=None,
    help="Log level (DEBUG, INFO, WARNING, ERROR); defaults to LOCALIZE_LOG_LEVEL"
)
def cli(log_level: Optional[str]):
    """Merge, convert and analyze localization catalogs."""
    errors = config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()

    setup_logging(log_level or config.log_level)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--to", "-t",
    "target",
    required=True,
    type=click.Choice(sorted(FORMAT_CHOICES)),
    help="Output format"
)
@click.option(
    "--output", "-o",
    "output_dir",
    default=".",
    type=click.Path(file_okay=False),
    help="Directory to write the converted files into"
)
@click.option(
    "--language", "-l",
    default=None,
    help="Language of a single-language input (inferred from the path when omitted)"
)
@click.option(
    "--nested",
    is_flag=True,
    help="Write nested JSON objects instead of dotted keys (also enabled by LOCALIZE_JSON_NESTED)"
)
def convert(input_path: str, target: str, output_dir: str, language: Optional[str], nested: bool):
    """Convert a localization file to another format (one file per language)."""
    try:
        source = Source.from_path(input_path, language)
        catalog = parse_source(source, default_language=config.source_language)
        outputs = render_catalog(
            catalog,
            FORMAT_CHOICES[target],
            nested_json=nested or config.json_nested,
        )
    except LocalizeError as e:
        _abort(e)

    if not outputs:
        console.print(f"[yellow]Nothing to write for format '{target}'[/yellow]")
        return

    for relative_path in _write_outputs(outputs, output_dir):
        console.print(f"[green]Wrote:[/green] {escape(relative_path)}")


@cli.command()
@click.argument("input_paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output", "-o",
    "output_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="Path to the output .xcstrings file"
)
@click.option(
    "--source-language", "-s",
    default=None,
    help="Source language of the catalog (defaults to the first file's language)"
)
@click.option(
    "--into",
    "base_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Existing .xcstrings file to import the files into"
)
def combine(input_paths: Tuple[str, ...], output_path: str, source_language: Optional[str], base_path: Optional[str]):
    """Combine per-language files into one .xcstrings catalog."""
    sources, unreadable = _read_sources(input_paths)
    try:
        if base_path:
            result = merge_into_catalog(XCStringsParser().parse(base_path), sources)
        else:
            result = combine_sources(sources, source_language=source_language)
    except (LocalizeError, ValueError) as e:
        _abort(e)

    result.report.skipped_sources[:0] = unreadable
    _print_logs(result.report.logs)
    XCStringsWriter().write(result.catalog, output_path)
    console.print(
        f"[green]Wrote:[/green] {escape(output_path)} "
        f"({result.report.total_keys} keys, {len(result.catalog.languages)} languages)"
    )


@cli.command()
@click.option(
    "--input", "-i",
    "input_paths",
    required=True,
    multiple=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Catalog to merge (repeat; earlier files take precedence)"
)
@click.option(
    "--output", "-o",
    "output_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="Path to the merged .xcstrings file"
)
@click.option(
    "--resolutions", "-r",
    "resolutions_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON object of key -> .xcstrings entry used for conflicting keys"
)
@click.option(
    "--prefer",
    default=None,
    help="Resolve every conflict with the entry from this file name"
)
@click.option(
    "--report",
    "report_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Write the merge report as JSON"
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on conflicts that have no resolution"
)
def merge(
    input_paths: Tuple[str, ...],
    output_path: str,
    resolutions_path: Optional[str],
    prefer: Optional[str],
    report_path: Optional[str],
    strict: bool,
):
    """Smart-merge several catalogs into one .xcstrings file."""
    engine = MergeEngine(default_language=config.source_language)

    sources, unreadable = _read_sources(input_paths)
    try:
        resolutions: Dict[str, StringEntry] = {}
        if prefer:
            if prefer not in [s.name for s in sources]:
                raise click.BadParameter(f"'{prefer}' is not one of the input files", param_hint="--prefer")
            analysis = engine.analyze_conflicts(sources)
            resolutions.update(engine.resolutions_from_source(prefer, analysis.conflicts))
        if resolutions_path:
            resolutions.update(_load_resolutions(resolutions_path, config.source_language))

        result = engine.merge_sources(sources, resolutions=resolutions, strict=strict)
    except (LocalizeError, ValueError) as e:
        _abort(e)

    result.report.skipped_sources[:0] = unreadable
    _print_logs(result.report.logs)
    XCStringsWriter().write(result.catalog, output_path)

    report = result.report
    panel_content = (
        f"[bold]Total keys:[/bold] {report.total_keys}\n"
        f"[cyan]Shared keys:[/cyan] {report.merged_keys_count}\n"
        f"[green]Conflicts resolved:[/green] {report.conflicts_resolved}\n"
        f"[yellow]Conflicts defaulted:[/yellow] {len(report.missing_keys)}\n"
        f"[red]Skipped files:[/red] {len(report.skipped_sources)}"
    )
    console.print(Panel(panel_content, title="Merge Summary"))

    if report_path:
        Path(report_path).write_text(json.dumps(report.to_dict(), indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        console.print(f"[blue]Report:[/blue] {escape(report_path)}")

    console.print(f"[green]Wrote:[/green] {escape(output_path)}")


@cli.command()
@click.option(
    "--input", "-i",
    "input_paths",
    required=True,
    multiple=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Catalog to compare (repeat)"
)
def conflicts(input_paths: Tuple[str, ...]):
    """Show keys whose translated values differ between catalogs."""
    engine = MergeEngine(default_language=config.source_language)
    try:
        analysis = engine.analyze_conflicts(_read_sources(input_paths)[0])
    except LocalizeError as e:
        _abort(e)

    for warning in analysis.source_language_warnings:
        console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")
    for name in analysis.skipped_sources:
        console.print(f"[yellow]Skipped:[/yellow] {escape(name)}")

    if not analysis.has_conflicts:
        console.print("[green]No conflicts found[/green]")
        return

    table = Table(title=f"{len(analysis.conflicts)} conflicting keys")
    table.add_column("Key", style="cyan", max_width=30)
    table.add_column("Language")
    table.add_column("File", style="dim")
    table.add_column("Value", max_width=50)

    for conflict in analysis.conflicts:
        for language in conflict.languages:
            for variant in conflict.variants:
                localization = variant.entry.localizations.get(language)
                if localization is None:
                    continue
                value = " | ".join(text for _, text in localization.value.texts())
                table.add_row(escape(conflict.key), language, escape(variant.source_name), escape(value))

    console.print(table)


@cli.command()
@click.argument("input_paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--loose",
    is_flag=True,
    help="Ignore case and whitespace differences"
)
@click.option(
    "--limit",
    type=int,
    default=20,
    help="Limit number of groups to show"
)
def duplicates(input_paths: Tuple[str, ...], loose: bool, limit: int):
    """Find identical values across keys, languages and files."""
    finder = DuplicateFinder(default_language=config.source_language)
    try:
        report = finder.find_in_sources(_read_sources(input_paths)[0])
    except LocalizeError as e:
        _abort(e)

    for name in report.skipped_sources:
        console.print(f"[yellow]Skipped:[/yellow] {escape(name)}")

    groups = report.loose if loose else report.exact
    console.print(f"[cyan]Duplicate groups:[/cyan] {len(groups)}")
    if not groups:
        console.print("[green]No duplicates found[/green]")
        return

    table = Table(show_header=True)
    table.add_column("Value", max_width=40)
    table.add_column("Count", justify="right")
    table.add_column("Locations", max_width=60)

    for group in groups[:limit]:
        locations = "\n".join(
            f"{loc.file_name}: {loc.key} [{loc.language}]" for loc in group.locations
        )
        table.add_row(escape(group.value), str(group.count), escape(locations))

    console.print(table)

    if len(groups) > limit:
        console.print(f"\n[dim]... and {len(groups) - limit} more[/dim]")


@cli.command()
@click.argument("input_paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def wordcount(input_paths: Tuple[str, ...]):
    """Count translated and pending words per file and language."""
    counter = WordCounter(default_language=config.source_language)
    try:
        result = counter.count_sources(_read_sources(input_paths)[0])
    except LocalizeError as e:
        _abort(e)

    for name in result.skipped_sources:
        console.print(f"[yellow]Skipped:[/yellow] {escape(name)}")

    table = Table(title="Word Count")
    table.add_column("File", style="cyan")
    table.add_column("Language")
    table.add_column("Translated", justify="right")
    table.add_column("Pending", justify="right")
    table.add_column("Total", justify="right")

    for file_name, file_count in result.file_counts.items():
        table.add_row(
            escape(file_name), "[bold]all[/bold]",
            str(file_count.translated), str(file_count.pending), str(file_count.total),
        )
        for language, lang_count in file_count.by_language.items():
            table.add_row(
                "", language,
                str(lang_count.translated), str(lang_count.pending), str(lang_count.total),
            )

    console.print(table)
    console.print(
        f"[bold]Total:[/bold] {result.total_words} words "
        f"({result.translated} translated, {result.pending} pending)"
    )


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a localization file"
)
@click.option(
    "--language", "-l",
    default=None,
    help="Language of a single-language input"
)
def stats(input_path: str, language: Optional[str]):
    """Show key count and translation coverage per language."""
    try:
        catalog = parse_source(
            Source.from_path(input_path, language), default_language=config.source_language
        )
    except LocalizeError as e:
        _abort(e)

    table = Table(title=f"Statistics for {escape(Path(input_path).name)}")
    table.add_column("Language", style="cyan")
    table.add_column("Translated", justify="right")
    table.add_column("Pending", justify="right")
    table.add_column("Missing", justify="right")
    table.add_column("Coverage", justify="right")

    for coverage in analyze_coverage(catalog):
        table.add_row(
            coverage.language,
            str(coverage.translated),
            str(coverage.pending),
            str(coverage.missing),
            f"{coverage.percent_complete:.1f}%",
        )

    console.print(f"[blue]Source language:[/blue] {catalog.source_language}")
    console.print(f"[blue]Total strings:[/blue] {len(catalog.strings)}")
    console.print(table)


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a localization file"
)
@click.option(
    "--language", "-l",
    required=True,
    help="Language code to show untranslated strings for"
)
@click.option(
    "--limit",
    type=int,
    default=20,
    help="Limit number of strings to show"
)
def untranslated(input_path: str, language: str, limit: int):
    """Show untranslated strings for a specific language."""
    try:
        catalog = parse_source(Source.from_path(input_path), default_language=config.source_language)
    except LocalizeError as e:
        _abort(e)

    untranslated_keys = catalog.get_untranslated_keys(language)

    console.print(f"[cyan]Untranslated strings for {escape(language)}:[/cyan] {len(untranslated_keys)} total")

    if not untranslated_keys:
        console.print("[green]All strings are translated![/green]")
        return

    table = Table(show_header=True)
    table.add_column("Key", style="dim", max_width=40)
    table.add_column("Source Value", max_width=60)

    for key in untranslated_keys[:limit]:
        source = catalog.strings[key].get_source_value(catalog.source_language)
        table.add_row(escape(key[:40]), escape(source[:60]))

    console.print(table)

    if len(untranslated_keys) > limit:
        console.print(f"\n[dim]... and {len(untranslated_keys) - limit} more[/dim]")


@cli.command("rename-keys")
@click.argument("source_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--keys", "-k",
    "key_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="File with the same keys as the source (e.g. its English file)"
)
@click.option(
    "--values",
    "value_paths",
    required=True,
    multiple=True,
    type=click.Path(exists=True, dir_okay=False),
    help="File using the wanted keys (repeat; searched in order)"
)
@click.option(
    "--output", "-o",
    "output_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="Path to the renamed .strings file"
)
def rename_keys_command(source_path: str, key_path: str, value_paths: Tuple[str, ...], output_path: str):
    """Rename keys to the ones another project uses for the same text."""
    try:
        source = _language_values(source_path)
        key_reference = _language_values(key_path)
        value_references = [_language_values(path) for path in value_paths]
    except LocalizeError as e:
        _abort(e)

    result = rename_keys(source, key_reference, value_references)
    _print_logs(result.logs)
    if not result.renamed:
        console.print("[yellow]No keys were renamed based on the provided files.[/yellow]")

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(StringsWriter().to_string(result.values) + "\n", encoding="utf-8")
    console.print(
        f"[green]Wrote:[/green] {escape(output_path)} "
        f"({len(result.renamed)} of {len(result.values)} keys renamed)"
    )


def _language_values(path: str) -> Dict[str, StringValue]:
    """key -> value of a file's source language."""
    catalog = parse_source(Source.from_path(path), default_language=config.source_language)
    return catalog.language_slice(catalog.source_language)


def _load_resolutions(path: str, source_language: str) -> Dict[str, StringEntry]:
    """Read a JSON object of key -> .xcstrings entry."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON: {e}", param_hint="--resolutions") from e
    if not isinstance(data, dict):
        raise click.BadParameter("Expected a JSON object of key -> entry", param_hint="--resolutions")

    document = json.dumps({"sourceLanguage": source_language, "strings": data})
    return XCStringsParser().parse_string(document, source_name=Path(path).name).strings


def _read_sources(input_paths: Sequence[str]) -> Tuple[List[Source], List[str]]:
    """Read every input file; undecodable ones are reported and left out."""
    sources: List[Source] = []
    unreadable: List[str] = []
    for path in input_paths:
        try:
            sources.append(Source.from_path(path))
        except ParseError as e:
            console.print(f"[yellow]Skipped:[/yellow] {escape(str(e))}")
            unreadable.append(e.source_name)
    return sources, unreadable


def _write_outputs(outputs: Dict[str, str], output_dir: str) -> List[str]:
    written = []
    for relative_path, content in outputs.items():
        target = Path(output_dir) / relative_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        written.append(str(target))
    return written


def _print_logs(lines: List[str]):
    for line in lines:
        style = "yellow" if line.startswith("WARNING") else "dim"
        console.print(f"[{style}]{escape(line)}[/{style}]")


def _abort(error: Exception):
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise click.Abort()


if __name__ == "__main__":
    cli()
