"""
Command-line interface for the GitHub issue migration tool.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING, Any

from github import GithubException

from . import __version__
from . import github_utils as ghu
from .config import (
    DEFAULT_ISSUE_DELAY,
    DEFAULT_LABEL_DELAY,
    TOKEN_ENV_VAR,
    MigratorConfig,
    Mode,
    resolve_token,
    split_positionals,
    validate_repo_path,
    validate_state,
)
from .exceptions import ConfigurationError, MigrationError, RemoteServiceError, TokenValidationError
from .migrator import IssueMigrator
from .models import IssueSelector
from .reports import show_rate_limit, show_repo_access
from .utils import mask_token, parse_issue_list, setup_logging

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

logger: logging.Logger = logging.getLogger(__name__)

EPILOG = f"""
The <oauth2_token> can be omitted if it is defined in the '{TOKEN_ENV_VAR}' environment variable.

usage forms:
  %(prog)s -c [<oauth2_token>] <source_repo> <target_repo>
  %(prog)s [-d] -n <ilist> [<oauth2_token>] <source_repo> <target_repo>
  %(prog)s [-d] -t <itype> [<oauth2_token>] <source_repo> <target_repo>
  %(prog)s [-d] -l <itype> [<oauth2_token>] <repo>
  %(prog)s [-d] -r [<oauth2_token>]
  %(prog)s -a [<oauth2_token>]

examples:
  %(prog)s -r
  %(prog)s -l open E3V3A/gh-missue
  %(prog)s -t closed E3V3A/TESTO USERNAME/REPO
  %(prog)s -n 1,4-5 E3V3A/TESTO USERNAME/REPO
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gh-issue-migrator",
        description=(
            "Bulk migrate issues (with labels, comments and closed state) from one GitHub repository to another. "
            "Migrated issues credit the original author and link to the original issue."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    _ = parser.add_argument(
        "positionals",
        nargs="*",
        metavar="[<oauth2_token>] <repo>",
        help="Optional 40-character token, followed by the repositories (owner/name) the mode needs",
    )

    mode = parser.add_mutually_exclusive_group()
    _ = mode.add_argument(
        "-l",
        dest="list_state",
        metavar="ITYPE",
        help="List all issues of type ITYPE (all, open, closed) and all labels in <repo>",
    )
    _ = mode.add_argument(
        "-c",
        dest="copy_labels",
        action="store_true",
        help="Copy (only) the issue labels from <source_repo> to <target_repo>, including name, color and description",
    )
    _ = mode.add_argument(
        "-r", dest="rate_limit", action="store_true", help="Show current rate limit for your token or IP"
    )
    _ = mode.add_argument(
        "-a", dest="repo_access", action="store_true", help="Show your read/write access on all your repositories"
    )

    selection = parser.add_mutually_exclusive_group()
    _ = selection.add_argument(
        "-n",
        dest="ilist",
        metavar="ILIST",
        help="Only migrate specific issues given by a comma separated list of numbers, including ranges (e.g. 1,4-5)",
    )
    _ = selection.add_argument(
        "-t", dest="itype", metavar="ITYPE", help="Type of issues to migrate: open, closed or all (default: open)"
    )

    _ = parser.add_argument(
        "--issue-delay",
        type=float,
        default=DEFAULT_ISSUE_DELAY,
        metavar="SECONDS",
        help=f"Pause between migrated issues (default: {DEFAULT_ISSUE_DELAY:g})",
    )
    _ = parser.add_argument(
        "--label-delay",
        type=float,
        default=DEFAULT_LABEL_DELAY,
        metavar="SECONDS",
        help=f"Pause between copied labels (default: {DEFAULT_LABEL_DELAY:g})",
    )
    _ = parser.add_argument(
        "-d", dest="debug", action="store_true", help="Show debug info with parsed options, raw requests and responses"
    )
    _ = parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def _select_mode(args: argparse.Namespace) -> Mode:
    if args.list_state is not None:
        return Mode.LIST
    if args.copy_labels:
        return Mode.COPY_LABELS
    if args.rate_limit:
        return Mode.RATE_LIMIT
    if args.repo_access:
        return Mode.REPO_ACCESS
    return Mode.MIGRATE


def build_config(args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> MigratorConfig:
    """Resolve parsed arguments and environment into one immutable configuration.

    Raises:
        ConfigurationError: On an invalid flag combination or argument
        TokenValidationError: If the token is not 40 characters long
    """
    mode = _select_mode(args)
    if mode is not Mode.MIGRATE and (args.ilist is not None or args.itype is not None):
        msg = "-n and -t can only be used when migrating issues"
        raise ConfigurationError(msg)
    if args.issue_delay < 0 or args.label_delay < 0:
        msg = "Delays must not be negative"
        raise ConfigurationError(msg)

    positional_token, repos = split_positionals(mode, args.positionals)
    repos = [validate_repo_path(repo) for repo in repos]

    selector: IssueSelector | None = None
    if mode is Mode.MIGRATE:
        if args.ilist is not None:
            try:
                numbers = parse_issue_list(args.ilist)
            except ValueError as e:
                msg = f"Invalid issue list: '{args.ilist}'"
                raise ConfigurationError(msg) from e
            if not numbers:
                msg = f"Issue list '{args.ilist}' selects no issues"
                raise ConfigurationError(msg)
            print(f"The sorted issue list  : {numbers}")
            selector = IssueSelector.from_numbers(numbers)
        else:
            selector = IssueSelector.from_state(validate_state(args.itype or "open"))

    token = resolve_token(mode, positional_token, environ)

    return MigratorConfig(
        mode=mode,
        token=token,
        source_repo=repos[0] if repos else None,
        target_repo=repos[1] if len(repos) > 1 else None,
        selector=selector,
        list_state=validate_state(args.list_state) if mode is Mode.LIST else "open",
        issue_delay=args.issue_delay,
        label_delay=args.label_delay,
        debug=args.debug,
    )


def run(config: MigratorConfig) -> None:
    """Perform the single operation selected by the configuration."""
    if config.mode is Mode.RATE_LIMIT:
        _ = show_rate_limit(config.token)
        return
    if config.mode is Mode.REPO_ACCESS:
        _ = show_repo_access(ghu.get_client(config.token))
        return

    migrator = IssueMigrator(config)
    _ = migrator.validate_api_access()

    if config.mode is Mode.LIST:
        _ = migrator.list_issues(config.list_state)
        _ = migrator.list_labels()
    elif config.mode is Mode.COPY_LABELS:
        _ = migrator.copy_labels()
    else:
        assert config.selector is not None  # always set in migrate mode
        _ = migrator.migrate(config.selector)


def _redact(value: Any, token: str | None) -> Any:
    """Replace every occurrence of the token in parsed options or argv with its masked form."""
    if not token:
        return value
    if isinstance(value, dict):
        return {key: _redact(item, token) for key, item in value.items()}
    if isinstance(value, list):
        return [_redact(item, token) for item in value]
    if isinstance(value, str):
        return value.replace(token, mask_token(token))
    return value


def _print_remote_error(status: int, body: object) -> None:
    print(f"ERROR: Bad response code: {status}")
    print(body if isinstance(body, str) else json.dumps(body, indent=2))


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug)

    try:
        config = build_config(args)
    except TokenValidationError as e:
        print("Error: The github access token has to be 40 characters long!")
        print(f"       (Yours was: {e.length} characters.)")
        sys.exit(1)
    except ConfigurationError as e:
        parser.error(str(e))

    if config.debug:
        supplied = sys.argv[1:] if argv is None else list(argv)
        logger.debug(f"Parsed options: {_redact(vars(args), config.token)}")
        logger.debug(f"Supplied CLI arguments: {_redact(supplied, config.token)}")
        logger.debug(f"Using access_token: {mask_token(config.token)}")

    try:
        run(config)
    except GithubException as e:
        _print_remote_error(e.status, e.data)
        sys.exit(1)
    except RemoteServiceError as e:
        _print_remote_error(e.status, e.body)
        sys.exit(1)
    except MigrationError:
        logger.exception("Migration failed")
        sys.exit(1)

    print("\nDone!")
    sys.exit(0)
