#!/usr/bin/env python3

import argparse
import logging
import os
import sys
from typing import List, NoReturn, Optional

from dotenv import load_dotenv

from clippub.clipboard import get_clipboard_backend
from clippub.config import get_config_path, load_config, prompt_for_config, save_config
from clippub.errors import ClipPubError, ConfigMissing
from clippub.services import PublishService, UploadService

logger = logging.getLogger(__name__)

HELP_TEXT = """
Clip Pub - Quickly publish clipboard content to a public URL.

USAGE:
  clippub <COMMAND> [OPTIONS]

COMMANDS:
  configure    Configure Cloudflare R2 settings.
  publish      Publish content from clipboard.
  help         Show this help message.

OPTIONS:
  -h, --help     Show this help message.
  -v, --verbose  Enable verbose logging.
  --name <NAME>  Use a custom name for the uploaded object.
"""

COMMANDS = ("configure", "publish", "help")


class UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = _ArgumentParser(prog="clippub", add_help=False)
    parser.add_argument("command", nargs="?")
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--name", type=str, default=None)
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    level = getattr(logging, os.getenv("CLIPPUB_LOG_LEVEL", "WARNING").upper(), logging.WARNING)
    if verbose:
        level = logging.INFO
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')


def configure() -> None:
    print("Starting Clip Pub configuration...")
    config = prompt_for_config()
    path = save_config(config)
    print(f"Configuration saved to {path}")


def publish(custom_name: Optional[str] = None) -> str:
    config = load_config()
    if config is None:
        raise ConfigMissing(
            f"Configuration not found at {get_config_path()}. "
            "Please run 'clippub configure' first.")

    backend = get_clipboard_backend()
    service = PublishService(UploadService(config), backend)
    public_url = service.publish(custom_name)

    print("Success! Content published!")
    print(f"Public URL: {public_url}")
    if backend.copy_text(public_url):
        print("(Public URL has been copied to your clipboard)")
    else:
        print("(Could not copy URL to clipboard automatically)")
    return public_url


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    try:
        args = parse_args(argv)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(HELP_TEXT)
        return 1

    configure_logging(args.verbose)

    if args.help or args.command in (None, "help"):
        print(HELP_TEXT)
        return 0

    if args.command not in COMMANDS:
        print(f"Error: Unknown command: {args.command}", file=sys.stderr)
        print(HELP_TEXT)
        return 1

    try:
        if args.command == "configure":
            configure()
        else:
            publish(args.name)
    except ClipPubError as e:
        logger.error(e.message)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nAborted.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
