#!/usr/bin/env python3
"""
Keyword analysis for an exported resume.

Reads a resume exported by the editor (JSON or YAML) and reports keyword
frequency, role coverage, job-description match, and keyword density.

Usage:
    python scripts/analyze_keywords.py analyze resume.json
    python scripts/analyze_keywords.py compare resume.json job.txt
    python scripts/analyze_keywords.py density resume.json React "Node.js"
    python scripts/analyze_keywords.py density resume.json --role frontend
    python scripts/analyze_keywords.py roles
    python scripts/analyze_keywords.py suggest Kubernetes
"""

import json
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from loguru import logger
from typing_extensions import Annotated

from atsift.contexts.document import InvalidResumeStructureError, Resume, extract_resume_text
from atsift.contexts.intake import compare_with_job_description
from atsift.contexts.targeting import (
    InvalidRoleError,
    analyze_keyword_density,
    analyze_resume_keywords,
    get_default_dictionary,
    get_integration_suggestions,
    match_experience_levels,
    role_keyword_density,
)
from atsift.utils.logger import setup_logger
from atsift.utils.report_formatter import (
    format_analysis_report,
    format_comparison_report,
    format_density_report,
)

load_dotenv()

app = typer.Typer(
    add_completion=False,
    help="Analyze resume keywords for applicant tracking systems",
    invoke_without_command=True,
)

JsonOption = Annotated[bool, typer.Option("--json", help="Print machine-readable JSON")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Echo debug logs")]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_resume(path: Path) -> Resume:
    """Load a resume file, exiting with an error message on failure."""
    if not path.exists():
        typer.echo(f"ERROR: Resume file not found: {path}", err=True)
        raise typer.Exit(1)
    try:
        return Resume.from_file(path)
    except InvalidResumeStructureError as e:
        typer.echo(f"ERROR: Invalid resume structure in {path}: {e}", err=True)
        raise typer.Exit(1)


def _start_session(command: str, verbose: bool, **provenance) -> None:
    log_file = setup_logger(
        context_name=command,
        extra_provenance=provenance,
        console_level="DEBUG" if verbose else "WARNING",
    )
    logger.debug(f"Log file: {log_file}")


def _echo_json(data) -> None:
    typer.echo(json.dumps(data, indent=2))


@app.command("analyze")
def analyze_command(
    resume_path: Path = typer.Argument(..., help="Exported resume (JSON or YAML)"),
    top: int = typer.Option(20, "--top", "-n", help="Number of top keywords to show"),
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
):
    """Show keyword frequency, role coverage and suggestions."""
    _start_session("analyze", verbose, Resume=resume_path)
    resume = _load_resume(resume_path)
    analysis = analyze_resume_keywords(resume, top_n=top)

    if as_json:
        _echo_json(analysis.to_dict())
        return

    typer.echo(format_analysis_report(analysis))

    levels = match_experience_levels(extract_resume_text(resume))
    if levels and levels[0].score > 0:
        typer.echo(f"\nStrongest experience level signal: {levels[0].role} ({levels[0].score}%)")


@app.command("compare")
def compare_command(
    resume_path: Path = typer.Argument(..., help="Exported resume (JSON or YAML)"),
    job_path: Path = typer.Argument(..., help="Job description text file"),
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
):
    """Compare the resume against a job description."""
    _start_session("compare", verbose, Resume=resume_path, Job=job_path)
    resume = _load_resume(resume_path)

    if not job_path.exists():
        typer.echo(f"ERROR: Job description not found: {job_path}", err=True)
        raise typer.Exit(1)
    job_description = job_path.read_text(encoding="utf-8")

    comparison = compare_with_job_description(extract_resume_text(resume), job_description)

    if as_json:
        _echo_json(comparison.to_dict())
    else:
        typer.echo(format_comparison_report(comparison))


@app.command("density")
def density_command(
    resume_path: Path = typer.Argument(..., help="Exported resume (JSON or YAML)"),
    keywords: Optional[List[str]] = typer.Argument(None, help="Keywords to measure"),
    role: Optional[str] = typer.Option(
        None, "--role", "-r", help="Measure every keyword of this role instead"
    ),
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
):
    """Measure keyword density (low / good / high)."""
    _start_session("density", verbose, Resume=resume_path, Role=role)
    corpus = extract_resume_text(_load_resume(resume_path))

    if role:
        try:
            densities = role_keyword_density(corpus, role)
        except InvalidRoleError as e:
            typer.echo(f"ERROR: {e}", err=True)
            raise typer.Exit(1)
        title = f"KEYWORD DENSITY: {role}"
    elif keywords:
        densities = [analyze_keyword_density(corpus, keyword) for keyword in keywords]
        title = "KEYWORD DENSITY"
    else:
        typer.echo("ERROR: Provide keywords or --role", err=True)
        raise typer.Exit(1)

    if as_json:
        _echo_json([d.to_dict() for d in densities])
    else:
        typer.echo(format_density_report(densities, title=title))


@app.command("roles")
def roles_command():
    """List the roles and categories in the keyword dictionary."""
    dictionary = get_default_dictionary()
    for role in dictionary.role_names:
        typer.secho(role, bold=True)
        for category, words in dictionary.categories(role).items():
            typer.echo(f"  {category}: {', '.join(words)}")


@app.command("suggest")
def suggest_command(
    keyword: str = typer.Argument(..., help="Keyword to integrate into the resume"),
):
    """Show where a keyword could be worked into the resume."""
    for suggestion in get_integration_suggestions(keyword):
        typer.echo(f"- {suggestion}")


if __name__ == "__main__":
    app()
