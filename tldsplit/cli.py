import click
import asyncio
import json
from typing import Optional, Tuple
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
import logging
from pathlib import Path

from tldsplit import __version__
from tldsplit.config import OUTPUT_FORMATS, Config, load_config
from tldsplit.core.extract import TLDExtract
from tldsplit.core.utils import parse_comma_separated
from tldsplit.exceptions import ConfigError, InvalidSourceError
from tldsplit.sources import source_for

console = Console()
logger = logging.getLogger("tldsplit")

FIELDS = ('root_domain', 'top_level_domain', 'second_level_domain', 'sub_domain')


def setup_logging(verbose: bool) -> None:
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(message)s'))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def get_config(path: Optional[str]) -> Config:
    try:
        return load_config(path)
    except ConfigError as e:
        console.print(f"[red]Config error: {e}[/red]")
        raise click.Abort()


def build_extractor(config: Config, psl: Optional[str], frozen: bool) -> TLDExtract:
    """Fetch the suffix list named by CLI options or config and compile it"""
    location = psl or config.get('source.location')
    frozen = frozen or config.get('source.frozen', False)

    source = source_for(location, timeout=config.get('source.timeout', 30), logger=logger)
    result = asyncio.run(source.run())
    if not result.ok:
        console.print(f"[red]✗ Cannot load {source.name}: {result.error}[/red]")
        raise click.Abort()

    try:
        return TLDExtract.from_text(result.data, frozen=frozen, logger=logger)
    except InvalidSourceError as e:
        console.print(f"[red]✗ {source.name}: {e}[/red]")
        raise click.Abort()


psl_option = click.option(
    '--psl', '-p',
    help='Public suffix list file or http(s) URL (default: from config)'
)
config_option = click.option(
    '--config', '-c', 'config_path',
    type=click.Path(exists=True, dir_okay=False),
    help='YAML config file'
)
verbose_option = click.option('--verbose', '-v', is_flag=True, help='Debug logging')


@click.command()
@click.argument('hosts', nargs=-1, required=True)
@psl_option
@click.option('--frozen', is_flag=True, help='Treat the list as a frozen export')
@config_option
@click.option(
    '--format', '-f', 'output_format',
    type=click.Choice(OUTPUT_FORMATS),
    help='Output format (default: from config)'
)
@click.option(
    '--output', '-o',
    type=click.Path(dir_okay=False),
    help='Output file to save JSON results'
)
@verbose_option
def parse(
    hosts: Tuple[str, ...],
    psl: Optional[str],
    frozen: bool,
    config_path: Optional[str],
    output_format: Optional[str],
    output: Optional[str],
    verbose: bool
):
    """
    Split hostnames or URLs into root domain, TLD, second level and subdomain

    Examples:

      tldsplit parse www.example.co.uk
      tldsplit parse -p public_suffix_list.dat https://a.b.example.com/x
      tldsplit parse -f json example.com,foo.ck
    """
    setup_logging(verbose)
    config = get_config(config_path)
    extractor = build_extractor(config, psl, frozen)

    targets = [t for host in hosts for t in parse_comma_separated(host)]
    results = {}
    for target in targets:
        parts = extractor.parse(target)
        results[target] = parts.as_dict() if parts else None

    output_format = output_format or config.get('output.format')

    if output_format == 'json':
        click.echo(json.dumps(results, indent=2, ensure_ascii=False))
    else:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Host", style="cyan")
        table.add_column("Root domain", style="green")
        table.add_column("TLD", style="yellow")
        table.add_column("Second level")
        table.add_column("Subdomain")

        for target, parts in results.items():
            if parts is None:
                table.add_row(target, "[red]unresolved[/red]", "", "", "")
                continue
            table.add_row(target, *[parts[field] or "-" for field in FIELDS])

        console.print(table)

    if output:
        try:
            with open(Path(output), 'w', encoding='utf-8') as f:
                json.dump(results, f, indent=2, ensure_ascii=False)
            console.print(f"[green]✓ Saved to {output}[/green]")
        except OSError as e:
            console.print(f"[red]Error saving: {e}[/red]")
            raise click.Abort()


@click.command()
@psl_option
@config_option
@click.option(
    '--output', '-o',
    required=True,
    type=click.Path(dir_okay=False),
    help='File to write the frozen list to'
)
@verbose_option
def freeze(psl: Optional[str], config_path: Optional[str], output: str, verbose: bool):
    """Compile a raw suffix list and write its frozen (pre-expanded) form"""
    setup_logging(verbose)
    config = get_config(config_path)
    extractor = build_extractor(config, psl, frozen=False)

    try:
        with open(Path(output), 'w', encoding='utf-8') as f:
            f.write(extractor.freeze())
    except OSError as e:
        console.print(f"[red]Error saving: {e}[/red]")
        raise click.Abort()

    stats = extractor.ruleset.stats()
    console.print(Panel.fit(
        f"[bold cyan]Frozen suffix list[/bold cyan]\n"
        f"[yellow]Output:[/yellow] {output}\n"
        f"[yellow]Exceptions:[/yellow] {stats['exception']}\n"
        f"[yellow]Wildcards:[/yellow] {stats['wildcard']}\n"
        f"[yellow]Normal:[/yellow] {stats['normal']}",
        border_style="cyan"
    ))


# Group commands
@click.group()
@click.version_option(version=__version__, prog_name='tldsplit')
def main():
    """tldsplit - split hostnames using the Public Suffix List"""
    pass


main.add_command(parse)
main.add_command(freeze)


if __name__ == '__main__':
    main()
