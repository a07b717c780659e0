"""``fernetex`` command-line entry point."""

import argparse
import logging
import sys
from collections.abc import Sequence

from fernetex.codec import decode, encode
from fernetex.constants import SECRET_ENV_VAR
from fernetex.keys import generate_key
from fernetex.logging import configure_logging
from fernetex.settings import FernetSettings, get_settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _build_parser(settings: FernetSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fernetex", description="Generate and verify Fernet tokens")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("keygen", help="Generate a new Fernet key")

    sign_parser = subparsers.add_parser("sign", help="Sign STDIN using the given key")
    sign_parser.add_argument("key", nargs="?", help=f"Fernet key (defaults to ${SECRET_ENV_VAR})")

    verify_parser = subparsers.add_parser("verify", help="Verify a token read from STDIN")
    verify_parser.add_argument("key", nargs="?", help=f"Fernet key (defaults to ${SECRET_ENV_VAR})")
    verify_parser.add_argument(
        "--ttl",
        type=int,
        default=settings.FERNET_TTL_SECONDS,
        help="Maximum token age in seconds",
    )
    verify_parser.add_argument(
        "--no-ttl",
        dest="enforce_ttl",
        action="store_false",
        default=settings.FERNET_ENFORCE_TTL,
        help="Skip the expiry and clock-skew checks",
    )
    return parser


def _resolve_key(parser: argparse.ArgumentParser, explicit: str | None, settings: FernetSettings) -> str:
    key = (explicit or settings.FERNET_SECRET).strip()
    if not key:
        parser.error(f"a key argument or ${SECRET_ENV_VAR} is required")
    return key


def _fail(message: str) -> int:
    print(f"error: {message}", file=sys.stderr)
    return EXIT_FAILURE


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)
    parser = _build_parser(settings)
    args = parser.parse_args(argv)

    if args.command == "keygen":
        print(generate_key())
        return EXIT_OK

    key = _resolve_key(parser, args.key, settings)

    if args.command == "sign":
        message = sys.stdin.buffer.read()
        result = encode(message, key)
        if result.error is not None:
            return _fail(result.error.message)
        logger.info("Signed %d-byte message", len(message))
        print(result.unwrap().token)
        return EXIT_OK

    token = sys.stdin.read().strip()
    decoded = decode(token, key, ttl=args.ttl, enforce_ttl=args.enforce_ttl)
    if decoded.error is not None:
        return _fail(decoded.error.message)
    sys.stdout.buffer.write(decoded.unwrap())
    sys.stdout.flush()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
