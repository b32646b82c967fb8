"""twitchoauth command-line entry point.

Examples:
  twitchoauth token                          Issue an app access token
  twitchoauth token --scope chat:read        Issue a token with scopes
  twitchoauth validate <token>               Show what a token belongs to
  twitchoauth revoke <token>                 Revoke a token

Credentials default to TWITCHOAUTH_CLIENT_ID / TWITCHOAUTH_CLIENT_SECRET.
"""

import argparse
import asyncio
import logging
from importlib.metadata import version as get_version

from pydantic import ValidationError

from twitchoauth.client import TokenServiceClient
from twitchoauth.config import get_settings
from twitchoauth.errors import RemoteError, TokenServiceError
from twitchoauth.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="twitchoauth",
        description="Issue, validate and revoke Twitch OAuth2 tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("\n\n", 1)[1],
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Give up after this many seconds (default: wait indefinitely)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {get_version('twitchoauth')}",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    token = sub.add_parser("token", help="Issue an app access token (client credentials)")
    token.add_argument("--client-id", help="Client ID (default: TWITCHOAUTH_CLIENT_ID)")
    token.add_argument(
        "--client-secret", help="Client secret (default: TWITCHOAUTH_CLIENT_SECRET)"
    )
    token.add_argument(
        "--scope",
        action="append",
        metavar="SCOPE",
        help="Scope to request; repeat for several",
    )

    validate = sub.add_parser("validate", help="Validate an access token")
    validate.add_argument("access_token")

    revoke = sub.add_parser("revoke", help="Revoke an access token")
    revoke.add_argument("access_token")
    revoke.add_argument("--client-id", help="Client ID (default: TWITCHOAUTH_CLIENT_ID)")

    return parser


def _credential(
    parser: argparse.ArgumentParser, value: str | None, fallback: str | None, flag: str
) -> str:
    resolved = value or fallback
    if not resolved:
        env = "TWITCHOAUTH_" + flag.removeprefix("--").replace("-", "_").upper()
        parser.error(f"missing {flag}; pass it or set {env}")
    return resolved


async def run_command(args: argparse.Namespace) -> int:
    """Run one subcommand and return the process exit code."""
    client = TokenServiceClient()

    if args.command == "token":
        if args.scope:
            token = await client.get_app_access_token_with_scopes(
                args.client_id, args.client_secret, args.scope
            )
        else:
            token = await client.get_app_access_token(args.client_id, args.client_secret)
        print(token.model_dump_json(indent=2))
        return 0

    if args.command == "validate":
        validated = await client.validate_token(args.access_token)
        print(validated.model_dump_json(indent=2))
        return 0

    status = await client.revoke_token(args.access_token, args.client_id)
    print(status)
    return 0 if 200 <= status < 300 else 1


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        parser.error(f"invalid TWITCHOAUTH_* setting: {e}")
    setup_logging(level="DEBUG" if args.verbose else settings.log_level)

    if args.command in ("token", "revoke"):
        args.client_id = _credential(parser, args.client_id, settings.client_id, "--client-id")
    if args.command == "token":
        args.client_secret = _credential(
            parser, args.client_secret, settings.client_secret, "--client-secret"
        )

    try:
        exit_code = asyncio.run(
            asyncio.wait_for(run_command(args), timeout=args.timeout)
        )
    except RemoteError as e:
        logger.error("Rejected by Twitch: %s", e)
        exit_code = 1
    except TokenServiceError as e:
        logger.error("%s", e)
        exit_code = 1
    except TimeoutError:
        logger.error("No response within %ss", args.timeout)
        exit_code = 1

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
