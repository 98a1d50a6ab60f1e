"""
Resume Generator CLI

Collects resume details interactively and writes them to resume.pdf, or opens
an existing resume.pdf in the default viewer.

Examples:\n

    vitae             # Answer the prompts and generate resume.pdf

    vitae --view      # Open resume.pdf in the default viewer
"""

from typing import Optional

import typer
from typing_extensions import Annotated

from vitae import __version__
from vitae.contexts.intake import StreamClosedError, create_resume
from vitae.contexts.intake.logger import _log_debug
from vitae.contexts.rendering import RESUME_PDF, ViewerLaunchError, render_resume, view_resume
from vitae.utils.logger import setup_logger

app = typer.Typer(
    help="Generates and previews resumes",
    add_completion=False,
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"Resume Generator {__version__}")
        raise typer.Exit()


@app.command()
def main(
    view: Annotated[
        bool,
        typer.Option("--view", help="View the generated resume"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = None,
):
    """
    Generate resume.pdf from prompted answers, or open it with --view.

    Failures to save or view the resume are reported but do not change the
    exit code. Closing standard input mid-session aborts with exit code 1.
    """
    setup_logger("vitae", extra_provenance={"Mode": "view" if view else "generate"})

    if view:
        try:
            view_resume(RESUME_PDF)
        except ViewerLaunchError as e:
            typer.secho(f"Error viewing resume: {e}", fg=typer.colors.RED, err=True)
        return

    try:
        resume = create_resume()
    except StreamClosedError as e:
        _log_debug(f"Input ended before the resume was complete: {e}")
        typer.secho(f"Error reading input: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    result = render_resume(resume, RESUME_PDF)
    if result.success:
        typer.secho(f"Resume saved successfully as {RESUME_PDF}.", fg=typer.colors.GREEN)
    else:
        typer.secho(
            f"Error saving resume: {'; '.join(result.errors)}", fg=typer.colors.RED, err=True
        )


if __name__ == "__main__":
    app()
