"""Print a bearer token for local testing, e.g.

    python -m app.scripts.create_token --subject alice --role Admin
"""

from __future__ import annotations

import argparse

from app.core.security import ROLE_ADMIN, ROLE_USER, build_access_token


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Mint a development access token.")
    parser.add_argument("--subject", default="dev")
    parser.add_argument(
        "--role",
        action="append",
        choices=[ROLE_ADMIN, ROLE_USER],
        help="Role to grant; repeat for several. Defaults to User.",
    )
    parser.add_argument("--minutes", type=int, default=None)
    args = parser.parse_args(argv)

    token = build_access_token(
        subject=args.subject,
        roles=args.role or [ROLE_USER],
        expires_in_minutes=args.minutes,
    )
    print(token)


if __name__ == "__main__":
    main()
