"""Command-line entry point for rolling dice and ranges."""
import argparse
import logging
import sys
from collections.abc import Sequence

from aws_lambda_powertools import Logger

from dicecore.config import OUTPUT_FORMATS, get_config
from dicecore.exceptions import ConfigurationError, RollError
from roller import __version__
from roller.formatting import format_results
from roller.service import RollService

# stdout carries roll output only
logger = Logger(logger_handler=logging.StreamHandler(sys.stderr))

EXIT_OK = 0
EXIT_ROLL_ERROR = 1
EXIT_USAGE = 2

# Roll tokens such as "-10", "-3--5" or "-d6" start with a dash, so only the
# exact option strings below (or "--long=value") are options.
FLAG_OPTIONS = {"-h", "--help", "--version"}
VALUE_OPTIONS = {"-f", "--format", "-s", "--seed"}
LONG_VALUE_OPTIONS = {"--format", "--seed"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roll",
        allow_abbrev=False,
        description="Roll dice (NdM, dM) or integer ranges (N, -N, A-B, A--B, -A-B, -A--B).",
        epilog="Rolls 1-100 when no tokens are given. Upper bounds are exclusive.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (defaults to ROLL_OUTPUT_FORMAT or debug).",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        default=None,
        help="Seed the random generator (defaults to ROLL_SEED).",
    )
    return parser


def split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Separate options from roll tokens, keeping token order.

    Only the parser's own option strings are options; any other argument,
    including unknown dash-led ones, is a roll token. Everything after "--"
    is a roll token.

    Args:
        argv: Arguments without the program name

    Returns:
        Tuple of (option_args, tokens)
    """
    options: list[str] = []
    tokens: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            tokens.extend(args)
            break
        if not _is_option(arg):
            tokens.append(arg)
            continue
        options.append(arg)
        if arg in VALUE_OPTIONS:
            value = next(args, None)
            if value is not None:
                options.append(value)
    return options, tokens


def _is_option(arg: str) -> bool:
    if arg in FLAG_OPTIONS or arg in VALUE_OPTIONS:
        return True
    name, sep, _ = arg.partition("=")
    return bool(sep) and name in LONG_VALUE_OPTIONS


def parse_args(argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    options, tokens = split_argv(argv)
    return _build_parser().parse_args(options), tokens


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def _print_error(e: BaseException) -> None:
    msg = (str(e) or repr(e)).strip()
    _eprint(f"error: {msg}")


def main(argv: list[str] | None = None) -> int:
    try:
        args, tokens = parse_args(list(sys.argv[1:] if argv is None else argv))
    except SystemExit as e:
        # argparse uses SystemExit for --help/--version and usage errors.
        code = e.code
        return int(code) if isinstance(code, int) else EXIT_USAGE

    try:
        config = get_config()
    except ConfigurationError as e:
        _print_error(e)
        return EXIT_USAGE

    logger.setLevel(config.log_level)
    output_format = args.format or config.output_format
    seed = args.seed if args.seed is not None else config.seed

    try:
        results = RollService(seed=seed).roll(tokens)
    except RollError as e:
        logger.debug("Roll aborted", extra={"error": str(e), "tokens": tokens})
        _print_error(e)
        return EXIT_ROLL_ERROR

    print(format_results(results, output_format))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
