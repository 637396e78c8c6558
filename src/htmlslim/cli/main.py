"""The htmlslim command."""

from pathlib import Path
from typing import Any, TextIO

import click
from click.core import ParameterSource

from htmlslim.cli._common import configure_logging, echo_stats, fail


@click.command("htmlslim", help="Strip scripts, styles, comments and other noise from HTML.")
@click.argument(
    "input_file",
    metavar="[INPUT]",
    type=click.File("r", encoding="utf-8"),
    default="-",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Output file. If omitted, writes to stdout.",
)
@click.option(
    "--script/--keep-script",
    default=False,
    show_default=True,
    help="Remove <script> (except JSON-LD), on* event handler attributes and script preloads.",
)
@click.option(
    "--ld-json/--keep-ld-json",
    "--ldjson/--keep-ldjson",
    "ld_json",
    default=False,
    show_default=True,
    help='Remove <script type="application/ld+json"> structured data.',
)
@click.option(
    "--style/--keep-style",
    default=False,
    show_default=True,
    help="Remove <style>, style attributes, stylesheet links and style preloads.",
)
@click.option(
    "--comment/--keep-comment",
    default=True,
    show_default=True,
    help="Remove HTML comments.",
)
@click.option(
    "--template/--keep-template",
    default=False,
    show_default=True,
    help="Remove <template> elements.",
)
@click.option(
    "--space/--keep-space",
    default=True,
    show_default=True,
    help="Collapse insignificant whitespace.",
)
@click.option(
    "--tag",
    type=str,
    default=None,
    help="Regex (case-insensitive). Elements whose tag name matches are removed.",
)
@click.option(
    "--attr",
    type=str,
    default=None,
    help="Regex (case-insensitive). Attributes whose name matches are removed.",
)
@click.option(
    "--selector",
    "--select",
    "selector",
    type=str,
    default=None,
    help="CSS selector. Matching elements are removed.",
)
@click.option(
    "--stats",
    is_flag=True,
    default=False,
    help="Print removal statistics to stderr.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.pass_context
def app(
    ctx: click.Context,
    input_file: TextIO,
    output: Path | None,
    stats: bool,
    verbose: bool,
    **flags: Any,
) -> None:
    """Slim an HTML document.

    Every flag can also be set through an HTMLSLIM_* environment variable
    (e.g. HTMLSLIM_SCRIPT=1, HTMLSLIM_ATTR='^data-v-'), either exported or in
    a .env file. Flags given on the command line take precedence.

    Examples:
        htmlslim page.html --script --style
        curl -s https://example.com | htmlslim --selector 'nav, footer'
        htmlslim page.html --keep-comment --attr '^data-' -o slim.html
    """
    configure_logging(verbose=verbose)

    from htmlslim.config import build_options, options_from_env, resolve_options
    from htmlslim.core import slim_document
    from htmlslim.exceptions import ConfigurationError, InputError

    try:
        values = options_from_env()
        for name, value in flags.items():
            if name not in values or ctx.get_parameter_source(name) is ParameterSource.COMMANDLINE:
                values[name] = value
        config = resolve_options(build_options(values))
    except ConfigurationError as e:
        fail(e)

    try:
        html = input_file.read()
    except UnicodeDecodeError as e:
        fail(
            InputError(
                f"Cannot decode {input_file.name} as UTF-8: {e.reason} at byte {e.start}",
                source=input_file.name,
            )
        )

    result = slim_document(html, config)

    if output:
        output.write_text(result.html, encoding="utf-8")
        click.echo(f"Wrote {result.output_length} characters to {output}", err=True)
    else:
        click.echo(result.html, nl=False)

    if stats:
        echo_stats(result)
