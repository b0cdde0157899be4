"""loginform CLI — validate credentials from flags or an interactive prompt.

Entry point registered as ``loginform`` in ``pyproject.toml``::

    [project.scripts]
    loginform = "loginform.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``loginform`` command."""
    parser = argparse.ArgumentParser(
        prog="loginform",
        description="loginform: validate a login form's email and password.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- loginform check --------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate one email/password pair")
    check_parser.add_argument("--email", default="", help="E-mail address to validate")
    check_parser.add_argument("--password", default="", help="Password to validate")
    _add_config_arguments(check_parser)

    # -- loginform prompt -------------------------------------------------
    prompt_parser = subparsers.add_parser("prompt", help="Ask for credentials until valid")
    _add_config_arguments(prompt_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    level = args.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("loginform").setLevel(level)

    if args.command == "check":
        from loginform.cli._check import run_check

        run_check(args)
    elif args.command == "prompt":
        from loginform.cli._prompt import run_prompt

        run_prompt(args)


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--min-password-length",
        type=int,
        default=None,
        help="Minimum password length (default: 6)",
    )
