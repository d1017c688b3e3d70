"""Command-line interface for htmlscrub using click."""

import logging
import sys
import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .core.parser import PolicyParser
from .core.sanitizer import FullSanitizer, LinkSanitizer, SafeListSanitizer


console = Console(stderr=True)


def _split_names(value):
    """Turn 'a,b, c' into {'a', 'b', 'c'}; None stays None."""
    if value is None:
        return None
    return {name.strip() for name in value.split(',') if name.strip()}


def _fail(error):
    console.print(f"[bold red]Error:[/bold red] {str(error)}")
    if logging.getLogger().isEnabledFor(logging.DEBUG):
        console.print_exception()
    sys.exit(1)


def _setup_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Log what gets removed')
def main(ctx, verbose):
    """htmlscrub - remove unsafe markup from HTML fragments and CSS."""
    _setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--tags', '-t', help='Comma-separated allowed tags (default: built-in safelist)')
@click.option('--attributes', '-a', help='Comma-separated allowed attributes (default: built-in safelist)')
@click.option('--prune', is_flag=True, help='Remove disallowed elements together with their content')
@click.option(
    '--policy', '-p',
    type=click.Path(exists=True, dir_okay=False),
    help='TOML policy file (overrides --tags/--attributes/--prune)'
)
def sanitize(input_file, tags, attributes, prune, policy):
    """
    Sanitize HTML against a safelist.

    Examples:
        htmlscrub sanitize page.html
        htmlscrub sanitize page.html --tags p,a,em --attributes href
        cat page.html | htmlscrub sanitize --policy policy.toml
    """
    try:
        html_content = input_file.read()
        if policy:
            scrubber = PolicyParser(policy).build_scrubber()
            result = SafeListSanitizer().sanitize(html_content, scrubber=scrubber)
        else:
            result = SafeListSanitizer().sanitize(
                html_content,
                tags=_split_names(tags),
                attributes=_split_names(attributes),
                prune=prune,
            )
    except Exception as e:
        _fail(e)

    click.echo(result)


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--preserve-whitespace', '-w', is_flag=True, help='Keep block elements on separate lines')
@click.option('--raw', is_flag=True, help="Don't escape &, < and > in the output")
def strip(input_file, preserve_whitespace, raw):
    """Remove all markup and print the text."""
    try:
        result = FullSanitizer().sanitize(
            input_file.read(),
            preserve_whitespace=preserve_whitespace,
            encode_special_chars=not raw,
        )
    except Exception as e:
        _fail(e)

    click.echo(result)


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
def links(input_file):
    """Remove links, keeping their text."""
    try:
        result = LinkSanitizer().sanitize(input_file.read())
    except Exception as e:
        _fail(e)

    click.echo(result)


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
def css(input_file):
    """Remove unsafe declarations from a CSS declaration list."""
    try:
        result = SafeListSanitizer().sanitize_css(input_file.read().strip())
    except Exception as e:
        _fail(e)

    click.echo(result)


@main.command()
def version():
    """Show version information."""
    click.echo(f"htmlscrub version {__version__}")


if __name__ == '__main__':
    main()
