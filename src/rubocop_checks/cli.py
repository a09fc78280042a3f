"""Command-line interface for rubocop-checks."""
import sys
from pathlib import Path

import click

from rubocop_checks.__version__ import __version__
from rubocop_checks.config import DEFAULT_CONFIG_FILENAME, load_config
from rubocop_checks.logging_config import get_logger, setup_logging
from rubocop_checks.orchestrator import run_lint_check
from rubocop_checks.reporter import format_detailed_report, format_json_report


@click.command()
@click.version_option(version=__version__, prog_name="rubocop-checks")
@click.option(
    "--changes-only/--all-files",
    default=None,
    help="Lint only files changed between --base and --head (default: CHANGES_ONLY env)",
)
@click.option("--base", "base_ref", type=str, help="Base revision for changes-only mode")
@click.option("--head", "head_ref", type=str, help="Head revision for changes-only mode")
@click.option(
    "--project-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    envvar="GITHUB_WORKSPACE",
    default=".",
    help="Repository root (default: GITHUB_WORKSPACE or current directory)",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", is_flag=True, help="Suppress warnings (errors only)")
@click.option("--config", type=click.Path(exists=True), help="Path to config file")
def main(
    changes_only: bool | None,
    base_ref: str | None,
    head_ref: str | None,
    project_root: Path,
    output_json: bool,
    verbose: bool,
    quiet: bool,
    config: str | None,
) -> None:
    """Run RuboCop and publish its offenses as a GitHub check run."""
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        project_root = project_root.resolve()
        config_path = Path(config) if config else project_root / DEFAULT_CONFIG_FILENAME
        cfg = load_config(config_path)

        overrides: dict[str, object] = {}
        if changes_only is not None:
            overrides["changes_only"] = changes_only
        if base_ref:
            overrides["base_ref"] = base_ref
        if head_ref:
            overrides["head_ref"] = head_ref
        if overrides:
            cfg = cfg.model_copy(update=overrides)

        outcome = run_lint_check(project_root, cfg)

        if output_json:
            output = format_json_report(outcome)
        else:
            output = format_detailed_report(outcome)

        click.echo(output)

        assert outcome.exit_code is not None
        sys.exit(outcome.exit_code)

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)  # Standard SIGINT exit code
    except (ValueError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger = get_logger(__name__)
        logger.exception("Unexpected error during execution")
        click.echo(
            f"An unexpected error occurred: {e}\n" "Run with --verbose for details.", err=True
        )
        sys.exit(2)


if __name__ == "__main__":
    main()
