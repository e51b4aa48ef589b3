#!/usr/bin/env python3
"""
Script to audit the history of a git repository with AI-generated commit messages:
- Repository path (optional, defaults to the current directory)
- Commit ID: the oldest commit to audit, HEAD is always the newest
- Output file (optional, defaults to ./gitaudit.txt)

Every commit from HEAD back to the given commit is summarized through the
Ollama endpoint configured in ~/.gitaudit. Failed commits are retried until
they succeed or the run is interrupted with Ctrl+C, in which case the commits
summarized so far are still written to the report.
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from git_audit.audit.domain.value_objects import AuditResult
from git_audit.audit.services.audit_service import AuditPipeline
from git_audit.audit.services.cancellation import CancellationToken, SignalWatcher
from git_audit.config.services.config_service import ConfigError, load_config
from git_audit.git.domain.errors import GitError
from git_audit.git.repositories.implementations import GitRepositoryImpl
from git_audit.git.services.git_service import GitService
from git_audit.report.services.report_writer import (
    DEFAULT_REPORT_FILE,
    ReportWriter,
    WriteError,
)
from git_audit.summarization.repositories.factory import create_llm_agent
from git_audit.summarization.services.summarization_service import (
    SummarizationService,
)


class CLIUsageError(ValueError):
    """The command line is missing a required argument."""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the audit command."""
    parser = argparse.ArgumentParser(
        description=(
            "Generate detailed commit messages for every commit from HEAD back to "
            "a given commit using a local Ollama model"
        )
    )
    parser.add_argument(
        "-repo",
        "--repo",
        type=Path,
        default=Path("."),
        help="Path to the Git repository (default: .)",
    )
    parser.add_argument(
        "-commit",
        "--commit",
        type=str,
        default="",
        help="The oldest commit ID to audit to",
    )
    parser.add_argument(
        "-output",
        "--output",
        type=Path,
        default=Path(DEFAULT_REPORT_FILE),
        help=f"Report file path (default: ./{DEFAULT_REPORT_FILE})",
    )
    return parser


def parse_arguments(
    parser: argparse.ArgumentParser, argv: Sequence[str] | None = None
) -> argparse.Namespace:
    """
    Parse the command line.

    Raises:
        CLIUsageError: If no commit ID was given
    """
    args = parser.parse_args(argv)
    if not args.commit:
        raise CLIUsageError("commit ID is required.")
    return args


def write_report(result: AuditResult, output_file: Path) -> bool:
    """Write the audited entries, returning False if the report could not be written."""
    if not result.entries:
        print("\nNo audited commit data was successfully generated to write to file.")
        return True

    try:
        ReportWriter().write(output_file, result.entries)
    except WriteError as e:
        print(
            f"\n✗ Error writing audited commit data to file {output_file}: {e}",
            file=sys.stderr,
        )
        return False

    print(
        f"\n✓ Successfully wrote {len(result.entries)} audited commit entries "
        f"to {output_file}"
    )
    return True


def print_run_summary(result: AuditResult) -> None:
    """Report interruption and pending commits, or overall success."""
    if not result.interrupted:
        print("\nAll commits processed successfully.")
        return

    print("\nProcess was interrupted.")
    pending = result.unique_pending()
    if not pending:
        print("No commits were pending retry.")
        return

    print(f"The following {len(pending)} commits were pending processing or retry:")
    for commit_hash in pending:
        print(commit_hash)


def main(argv: Sequence[str] | None = None) -> None:
    """Main function to parse arguments, enumerate commits, and audit them."""
    parser = build_parser()
    try:
        args = parse_arguments(parser, argv)
    except CLIUsageError as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        sys.exit(1)

    print(f"Repository Path: {args.repo}")
    print(f"Commit ID: {args.commit}")

    try:
        config = load_config()
    except ConfigError as e:
        print(f"✗ Error loading configuration: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Ollama Endpoint: {config.ollama_endpoint}")
    print(f"Ollama Model: {config.ollama_model}")

    token = CancellationToken()
    git_service = GitService(GitRepositoryImpl())

    with SignalWatcher(token):
        try:
            commit_hashes = git_service.enumerate_revisions(args.repo, args.commit)
        except GitError as e:
            print(f"✗ Error getting commit hashes: {e}", file=sys.stderr)
            sys.exit(1)

        print("Commit hashes to process:")
        for commit_hash in commit_hashes:
            print(commit_hash)

        llm_agent = create_llm_agent(config)
        try:
            pipeline = AuditPipeline(
                git_service, SummarizationService(llm_agent), token
            )
            result = pipeline.run(args.repo, commit_hashes)
        except Exception as e:
            print(f"✗ Failed to audit commits: {e}", file=sys.stderr)
            sys.exit(1)
        finally:
            llm_agent.close()

    report_written = write_report(result, args.output)
    print_run_summary(result)
    sys.exit(0 if report_written else 1)


if __name__ == "__main__":
    main()
