"""``loginform check`` — validate credentials given as flags.

Prints the rendered result to stdout. Exits with code 1 if the
credentials are invalid.
"""

import argparse
import logging

from loginform.cli._config import config_from_args
from loginform.credentials import Credentials
from loginform.rendering import render_result
from loginform.validation import validate

logger = logging.getLogger("loginform.cli")


def run_check(args: argparse.Namespace) -> None:
    """Validate ``args.email`` / ``args.password`` and print the outcome."""
    config = config_from_args(args)
    snapshot = Credentials(email_address=args.email, password=args.password)
    result = validate(snapshot, config)
    logger.debug("check %r -> %s", snapshot, "valid" if result else "invalid")

    print(render_result(result))
    if not result:
        raise SystemExit(1)
