from typing import Annotated

import typer

from chronicler.core.tengwar import detransliterate, transliterate as _transliterate


def transliterate(
    text: Annotated[str, typer.Argument(help="Text to convert.")],
    reverse: Annotated[bool, typer.Option(help="Convert Tengwar back to Latin letters.")] = False,
) -> None:
    """Transliterate Latin text to Tengwar (or back with --reverse)."""
    typer.echo(detransliterate(text) if reverse else _transliterate(text))
