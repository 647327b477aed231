#!/usr/bin/env python3
"""
CV Build CLI

Builds CV/resume Markdown from the spreadsheet tables named in a CV config.

Commands:
    build    - Build the full document
    section  - Print one section's blocks
    sections - List section ids found in the positions table

Examples:\n

    build_cv.py build cv_config.yaml                      # Writes cv_config.md

    build_cv.py build cv_config.yaml -o out/cv.md --pdf-export

    build_cv.py build cv_config.yaml --resume             # Resume variant

    build_cv.py section cv_config.yaml education          # Print one section
"""

from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vitae.contexts.templating import CVPrinter, build_cv, load_cv_config
from vitae.contexts.templating.document_builder import load_data_from_config
from vitae.utils.logger import default_log_dir

load_dotenv()

app = typer.Typer(
    help="Build CV and resume Markdown from spreadsheet tables",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_printer(config_path: Path, overrides: List[str]) -> CVPrinter:
    """Load config and tables, exiting with a message on expected failures."""
    try:
        config = load_cv_config(config_path, overrides)
        data = load_data_from_config(config)
    except (OSError, ValueError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return CVPrinter(
        data,
        pdf_export=config.document.pdf_export,
        resume_only=config.document.resume_only,
    )


@app.command("build")
def build_command(
    config_path: Annotated[Path, typer.Argument(help="CV config YAML")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output Markdown path (default: config path with .md)"),
    ] = None,
    pdf_export: Annotated[
        Optional[bool],
        typer.Option(
            "--pdf-export/--no-pdf-export",
            help="Defer links to a numbered list (overrides config and PDF_EXPORT)",
        ),
    ] = None,
    resume: Annotated[
        bool,
        typer.Option("--resume", "-r", help="Only include positions flagged in_resume"),
    ] = False,
    overrides: Annotated[
        Optional[List[str]],
        typer.Option("--set", "-s", help="Dotted config override, e.g. document.name='Ada'"),
    ] = None,
    log: Annotated[
        bool,
        typer.Option("--log/--no-log", help="Write a session log under VITAE_LOGS_PATH"),
    ] = True,
):
    """
    Build the full CV document.

    Examples:\n

        $ build_cv.py build cv_config.yaml

        $ build_cv.py build cv_config.yaml --pdf-export -o cv_pdf.md

        $ build_cv.py build cv_config.yaml --set document.template=resume --resume
    """
    all_overrides = list(overrides or [])
    if pdf_export is not None:
        all_overrides.append(f"document.pdf_export={str(pdf_export).lower()}")
    if resume:
        all_overrides.append("document.resume_only=true")

    result = build_cv(
        config_path,
        output_path=output,
        overrides=all_overrides,
        log_dir=default_log_dir("build") if log else None,
    )

    if not result.success:
        typer.secho(f"Build failed: {result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"Wrote {result.output_path}", fg=typer.colors.GREEN)
    for section_id, count in result.section_counts.items():
        typer.echo(f"  {section_id}: {count}")


@app.command("section")
def section_command(
    config_path: Annotated[Path, typer.Argument(help="CV config YAML")],
    section_id: Annotated[str, typer.Argument(help="Section to print (e.g. 'education')")],
    pdf_export: Annotated[
        bool,
        typer.Option("--pdf-export", help="Number links and list them after the section"),
    ] = False,
):
    """
    Print one section's Markdown blocks to stdout.

    Examples:\n

        $ build_cv.py section cv_config.yaml education
    """
    printer = _load_printer(config_path, [f"document.pdf_export={str(pdf_export).lower()}"])
    text = printer.print_section(section_id)
    if not text:
        typer.secho(f"No entries for section '{section_id}'", fg=typer.colors.YELLOW, err=True)
        return
    typer.echo(text, nl=False)
    links = printer.print_links()
    if links:
        typer.echo(links)


@app.command("sections")
def sections_command(
    config_path: Annotated[Path, typer.Argument(help="CV config YAML")],
):
    """List section ids in the positions table with their entry counts."""
    printer = _load_printer(config_path, [])
    positions = printer.positions()
    for section_id in printer.data.section_ids():
        count = sum(1 for record in positions if record.section == section_id)
        typer.echo(f"{section_id}: {count}")


if __name__ == "__main__":
    app()
