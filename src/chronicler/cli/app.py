import typer

from chronicler.cli.calculate import calculate, validate
from chronicler.cli.remote import remote_app
from chronicler.cli.serve import serve_app
from chronicler.cli.transliterate import transliterate

app = typer.Typer(
    name="chronicler",
    help="Chronicler CLI: total distance between two sorted columns of integers.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("calculate")(calculate)
app.command("validate")(validate)
app.command("transliterate")(transliterate)
app.add_typer(remote_app, name="remote")
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
