"""Build a ``FormConfig`` from parsed CLI arguments."""

import argparse
import sys

from loginform.config import DEFAULT_CONFIG, FormConfig
from loginform.errors import ConfigurationError


def config_from_args(args: argparse.Namespace) -> FormConfig:
    """Return the config implied by *args*, or exit 2 if it is invalid."""
    if args.min_password_length is None:
        return DEFAULT_CONFIG
    try:
        return FormConfig(min_password_length=args.min_password_length)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
