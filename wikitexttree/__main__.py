# Command line tool: parse a WikiText file and print its parse tree
#
# Copyright (c) 2020-2022 Tatu Ylonen.  See file LICENSE and https://ylonen.org

import argparse
import logging
import sys
from typing import Optional

from .core import parse
from .logging_utils import logger
from .node_print import print_tree, to_wikitext


def main(argv: Optional[list[str]] = None) -> int:
    argparser = argparse.ArgumentParser(
        prog="wikitexttree",
        description="Parse a WikiText file and print its parse tree",
    )
    argparser.add_argument("path", help="WikiText file to parse")
    argparser.add_argument(
        "--encoding", default="utf-8", help="Encoding of the input file"
    )
    argparser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Spaces of indentation per tree level",
    )
    argparser.add_argument(
        "--wikitext",
        action="store_true",
        help="Print the tree converted back to WikiText",
    )
    argparser.add_argument(
        "--quiet", action="store_true", help="Do not print warnings"
    )
    argparser.add_argument(
        "--debug", action="store_true", help="Print debug messages"
    )
    args = argparser.parse_args(argv)

    if args.debug:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(format="%(levelname)s: %(message)s", level=level)

    try:
        with open(args.path, encoding=args.encoding) as f:
            result = parse(f, title=args.path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cannot read {}: {}".format(args.path, e))
        return 1

    if args.wikitext:
        print(to_wikitext(result.tree))
    else:
        print_tree(result.tree, indent=args.indent)
    return 0


if __name__ == "__main__":
    sys.exit(main())
