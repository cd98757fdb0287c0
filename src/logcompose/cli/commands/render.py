# topmark:header:start
#
#   project      : LogCompose
#   file         : render.py
#   file_relpath : src/logcompose/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogCompose `render` command.

Decodes JSON documents (positional arguments, or one document on STDIN) and prints
their single-line log rendering, one line per document. With ``--join`` all documents
are rendered together as the values part of a log line (``{v1, v2}``).

Examples:
    ```bash
    logcompose render '{"user": "ann", "roles": ["admin"]}'
    # {"user": "ann", "roles": ["admin"]}

    echo '[1, [2, [3]]]' | logcompose render --stdin --max-depth 2
    # [1, [2, [...]]]
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from logcompose.cli.config_resolver import resolve_config_from_click
from logcompose.cli.errors import LogcomposeUsageError
from logcompose.cli.io import decode_json_document, read_stdin_text
from logcompose.cli.options import common_format_options, format_overrides
from logcompose.compose.composer import format_values
from logcompose.config.logging import get_logger
from logcompose.core.kinds import classify
from logcompose.stringify.value import stringify

if TYPE_CHECKING:
    from logcompose.cli.console import ConsoleLike
    from logcompose.config.logging import LogcomposeLogger
    from logcompose.config.model import FormatConfig
    from logcompose.core.kinds import ValueCategory
    from logcompose.core.special import PlaceholderStyle

logger: LogcomposeLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render JSON documents as single-line log text.",
)
@click.argument("documents", nargs=-1)
@click.option(
    "--stdin",
    "use_stdin",
    is_flag=True,
    help="Read a single JSON document from STDIN instead of arguments.",
)
@click.option(
    "--join",
    "join_values",
    is_flag=True,
    help="Render all documents together as log-line values ({v1, v2, ...}).",
)
@common_format_options
def render_command(
    *,
    documents: tuple[str, ...],
    use_stdin: bool,
    join_values: bool,
    max_depth: int | None,
    max_elements: int | None,
    max_display_elements: int | None,
    placeholder_style: PlaceholderStyle | None,
) -> None:
    """Render JSON documents.

    Raises:
        LogcomposeUsageError: If no input is given, or both arguments and ``--stdin``.
        LogcomposeInputError: If a document is not valid JSON.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    if use_stdin and documents:
        raise LogcomposeUsageError("Pass documents as arguments or with --stdin, not both.")
    if not use_stdin and not documents:
        raise LogcomposeUsageError("No documents given (pass JSON arguments or use --stdin).")

    config: FormatConfig = resolve_config_from_click(
        ctx,
        format_overrides(
            max_depth=max_depth,
            max_elements=max_elements,
            max_display_elements=max_display_elements,
            placeholder_style=placeholder_style,
        ),
    )

    values: list[object]
    if use_stdin:
        values = [decode_json_document(read_stdin_text(), source="STDIN")]
    else:
        values = [
            decode_json_document(doc, source=f"argument {n}")
            for n, doc in enumerate(documents, start=1)
        ]
    logger.debug("Rendering %d document(s)", len(values))

    if join_values:
        console.print(format_values(values, config))
        return

    for value in values:
        text: str = stringify(value, config)
        if vlevel > 0:
            category: ValueCategory | None = classify(value)
            label: str = category.value if category is not None else "Unclassified"
            console.print(f"{console.styled(label, fg='cyan')}: {text}")
        else:
            console.print(text)
