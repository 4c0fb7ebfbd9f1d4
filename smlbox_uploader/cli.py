import argparse
import sys

from art import text2art
from colorama import init
from dotenv import find_dotenv
from termcolor import colored

from .config import ENV_EXAMPLE_URL, Config
from .errors import ConfigurationError
from .sync import print_required_flags, run


def print_missing_env_help():
    print(colored("[!] Error: no `.env` file found", "red"), file=sys.stderr)
    print(colored("    Create `.env` file in current directory", "yellow"), file=sys.stderr)
    print(colored(f"    Put example configuration from {ENV_EXAMPLE_URL}", "yellow"), file=sys.stderr)
    print(colored("    Make changes in your `.env` file according to instructions from `.env.example`", "yellow"),
          file=sys.stderr)


def build_parser():
    parser = argparse.ArgumentParser(
        description="SmlBox Uploader - Sync an IPTV playlist into the smlbox channel panel",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--upload',
        action='store_true',
        help='Add every channel of the source playlist to the panel'
    )

    parser.add_argument(
        '--delete',
        action='store_true',
        help='Delete every channel currently added to the panel'
    )

    return parser


def main(argv=None):
    init()
    args = build_parser().parse_args(argv)

    if not (args.upload or args.delete):
        print_required_flags()
        return 0

    env_file = find_dotenv(usecwd=True)
    if not env_file:
        print_missing_env_help()
        return 0

    try:
        config = Config.from_env(env_file)
    except ConfigurationError as e:
        print(colored(f"[!] {type(e).__name__} {e}", "red"), file=sys.stderr)
        return 0

    from smlbox_uploader import __version__
    print(colored(text2art("SMLBOX", font="block"), "cyan"))
    print(colored("═" * 70, "yellow"))
    print(colored(f"        Playlist uploader v{__version__} -> {config.base_url}", "green"))
    print(colored("═" * 70, "yellow"))
    print()

    try:
        run(config, upload=args.upload, delete=args.delete)
    except KeyboardInterrupt:
        print(colored("\n\n[!] Operation canceled by user.", "red"))
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
