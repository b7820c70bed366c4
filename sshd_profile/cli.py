import argparse
import json
import sys
from typing import Any

from pydantic import ValidationError

from sshd_profile._config import load_profile_config
from sshd_profile.appliers.json_output import JSONApplier
from sshd_profile.options.defaults import default_server_options
from sshd_profile.profile.runner import configure_sshd


def _parse_option_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def parse_option_flags(flags: list[str] | None) -> dict[str, Any] | None:
    """Turn repeated KEY=VALUE flags into an options mapping."""
    if not flags:
        return None

    options: dict[str, Any] = {}
    for flag in flags:
        key, sep, raw_value = flag.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Invalid option '{flag}'. Use KEY=VALUE.")
        options[key.strip()] = _parse_option_value(raw_value)
    return options


def cmd_render(args):
    """Handle render subcommand."""
    try:
        cli_options = parse_option_flags(args.option)
        config = load_profile_config(
            file_path=args.config,
            overrides={
                "port": args.port,
                "password_authentication": args.password_authentication,
            },
        )
    except (OSError, ValueError, ValidationError) as e:
        print(f"Error loading profile parameters: {e}", file=sys.stderr)
        sys.exit(1)

    if cli_options:
        config = config.model_copy(update={"options": {**config.options, **cli_options}})

    try:
        configure_sshd(JSONApplier(sys.stdout), config)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(0)


def cmd_defaults(args):
    """Handle defaults subcommand."""
    print(json.dumps(default_server_options(), indent=2))
    sys.exit(0)


def main():
    parser = argparse.ArgumentParser(description="SSH daemon profile CLI")
    subparsers = parser.add_subparsers(dest="command", help="Subcommand to run")

    # Render command
    render_parser = subparsers.add_parser("render", help="Merge parameters and print the sshd options")
    render_parser.add_argument("--config", help="Path to a JSON/YAML parameter file")
    render_parser.add_argument("--port", type=int, help="Port sshd listens on (default: 22)")
    render_parser.add_argument("--password-authentication", help="PasswordAuthentication value (default: no)")
    render_parser.add_argument(
        "--option",
        action="append",
        metavar="KEY=VALUE",
        help="Raw sshd server option, may be repeated",
    )

    # Defaults command
    subparsers.add_parser("defaults", help="Print the default server options")

    args = parser.parse_args()

    if args.command == "render":
        cmd_render(args)
    elif args.command == "defaults":
        cmd_defaults(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
