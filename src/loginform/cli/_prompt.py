"""``loginform prompt``: interactive form loop.

Wires a ``FormState`` to a ``LoginBinding`` the same way a screen would:
each answer updates the state, each round submits, and the binding's
error or echo labels are printed. Repeats until the input is valid.
"""

import argparse
import getpass
import logging
import sys

from loginform.binding import LoginBinding
from loginform.cli._config import config_from_args
from loginform.rendering import create_environment, render_result
from loginform.state import FormState
from loginform.validation import Field

logger = logging.getLogger("loginform.cli")


def run_prompt(args: argparse.Namespace) -> None:
    """Prompt for credentials until they validate.

    Only the field that failed is asked for again, mirroring focus moving
    to the field in error. Exits with code 1 on end of input.
    """
    config = config_from_args(args)
    env = create_environment()
    state = FormState()

    with LoginBinding.attach(state, config) as binding:
        ask = {Field.EMAIL_ADDRESS, Field.PASSWORD}
        while True:
            try:
                if Field.EMAIL_ADDRESS in ask:
                    state.set_email_address(input("E-Mail: "))
                if Field.PASSWORD in ask:
                    state.set_password(getpass.getpass("Password: "))
            except EOFError:
                print(file=sys.stderr)
                logger.info("prompt aborted at end of input")
                raise SystemExit(1) from None

            state.submit()
            result = binding.last_result
            print(render_result(result, env))
            if result:
                return
            ask = {binding.focus}
