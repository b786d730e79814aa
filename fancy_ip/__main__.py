"""
Check address literals from the command line

    python -m fancy_ip 192.168.1.5 2001:db8::1
    python -m fancy_ip --socket v6 "[::1]:8080" --json

Decoded values go to stdout, rendered diagnostics to stderr. Exit status is 1 if any literal was rejected.
"""
import argparse
import sys

from fancy_ip.core import LOGGING
from fancy_ip.core.logging import LEVELS, get_logger, set_level
from fancy_ip.literal import Family, Diagnostic
from fancy_ip.socket_address import validate_socketv4, validate_socketv6
from fancy_ip.validation import validate

logger = get_logger("fancy_ip.cli")


def check(text: str, family: Family, socket: str | None):
    if socket == "v4":
        return validate_socketv4(text)
    if socket == "v6":
        return validate_socketv6(text)
    return validate(text, family)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="fancy_ip", description="Validate IPv4/IPv6 address literals")
    parser.add_argument("literals", nargs="+", metavar="LITERAL")
    parser.add_argument("--family", choices=[f.value for f in Family], default=Family.INFER.value)
    parser.add_argument("--socket", choices=["v4", "v6"], default=None,
                        help="treat literals as socket addresses of the given family")
    parser.add_argument("--json", action="store_true", help="print decoded values as JSON")
    parser.add_argument("--log-level", type=str.upper, choices=LEVELS, default=LOGGING.LEVEL)
    args = parser.parse_args(argv)

    set_level(args.log_level, logger.name)
    family = Family.coerce(args.family)

    failures = 0
    for text in args.literals:
        result = check(text, family, args.socket)
        if isinstance(result, Diagnostic):
            failures += 1
            logger.debug(f"{text!r} rejected: {result.kind.value}")
            print(result.render(text), file=sys.stderr)
            continue

        logger.debug(f"{text!r} accepted")
        print(result.to_json() if args.json else str(result))

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
