"""Command line interface for fastaf.

``fastaf``, ``fastaf all`` and ``fastaf a`` all stage every change, commit
it with an AI-generated message and push it.

Exit codes:
- 0: Changes pushed, or nothing to commit
- 1: A stage failed (not a repository, rejected key, git or API error) or
  the configuration is invalid
"""

import sys

import click
from git import Repo

from fastaf import __version__
from fastaf.config import FastafConfig
from fastaf.console import Reporter
from fastaf.exceptions import NotARepository
from fastaf.logging_config import get_logger, setup_logging
from fastaf.pipeline import CommitPipeline
from fastaf.repository import ensure_repository

logger = get_logger(__name__)


def guard_repository(reporter: Reporter) -> Repo:
    """Open the current repository or terminate the process.

    This is the first gate of a run: without a repository nothing else can
    run, so the failure is reported and the process exits here instead of
    propagating.
    """
    try:
        return ensure_repository(".")
    except NotARepository as e:
        logger.warning("Not a git repository", extra={"error": str(e)})
        reporter.failure(str(e))
        sys.exit(1)


def run_workflow(reporter: Reporter) -> int:
    """Load settings, check the repository and run the pipeline.

    Returns:
        Process exit code
    """
    reporter.info("🚀 Starting fastaf...")

    try:
        config = FastafConfig.from_env()
    except ValueError as e:
        reporter.failure(f"Configuration error: {e}")
        return 1

    setup_logging(
        log_level=config.log_level,
        use_json=config.log_format == "json",
        log_file=config.log_file,
    )
    logger.info("Starting fastaf", extra={"version": __version__})

    repo = guard_repository(reporter)
    outcome = CommitPipeline(config, reporter=reporter).run(repo)
    return outcome.exit_code


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="fastaf")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Fast git operations: add, commit with AI message, and push."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(all_command)


@cli.command("all")
def all_command() -> None:
    """Execute git add, commit (with AI-generated message), and push."""
    sys.exit(run_workflow(Reporter()))


cli.add_command(all_command, name="a")


def main() -> None:
    """Console script entry point."""
    cli(prog_name="fastaf")
