import argparse
import json
import logging
import sys

from memodate import DateExtractor, parse_wall_clock
from memodate.conf import settings as default_settings


def build_settings(args):
    mod_settings = {}
    if args.now:
        mod_settings["RELATIVE_BASE"] = parse_wall_clock(args.now)
    if args.no_english:
        mod_settings["ENABLE_ENGLISH"] = False
    if args.no_numeric:
        mod_settings["NUMERIC_DATES"] = False
    if not mod_settings:
        return default_settings
    return default_settings.replace(mod_settings=mod_settings)


def entrance(argv=None):
    memodate_argparse = argparse.ArgumentParser(
        description="memodate: find dates in English/Korean text."
    )
    memodate_argparse.add_argument(
        "text",
        nargs="?",
        help="Text to scan. Read from stdin when omitted",
    )
    memodate_argparse.add_argument(
        "--now",
        type=str,
        help='Reference instant as "YYYY-MM-DDTHH:MM:SS" (default: local time)',
    )
    memodate_argparse.add_argument(
        "--json",
        help="Print matches as JSON records",
        action="store_true",
    )
    memodate_argparse.add_argument(
        "--check",
        help="Only report whether the text references a date",
        action="store_true",
    )
    memodate_argparse.add_argument(
        "--no-english",
        help="Disable the English recognizer",
        action="store_true",
    )
    memodate_argparse.add_argument(
        "--no-numeric",
        help='Disable numeric dates such as "11.5" or "11/5"',
        action="store_true",
    )
    memodate_argparse.add_argument(
        "-v",
        "--verbose",
        help="Log recognizer decisions",
        action="store_true",
    )

    args = memodate_argparse.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    text = args.text if args.text is not None else sys.stdin.read()

    try:
        settings = build_settings(args)
    except ValueError as e:
        memodate_argparse.error("memodate: %s" % e)

    extractor = DateExtractor(settings=settings)

    if args.check:
        found = extractor.has_references(text)
        print("true" if found else "false")
        return 0 if found else 1

    matches = extractor.extract(text)
    if args.json:
        print(json.dumps([m.to_dict() for m in matches], ensure_ascii=False, indent=2))
    else:
        for m in matches:
            record = m.to_dict()
            line = "%d\t%s" % (m.index, record["startDate"])
            if "endDate" in record:
                line += "/" + record["endDate"]
            print(line + "\t" + m.text)
    return 0
