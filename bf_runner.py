#!/usr/bin/env python3
import argparse
import logging
import sys

from errors import BFError
from interpreter import Interpreter, Source
from log import setup_logging
from memdump import DUMP_FORMATS, dump
from tape import DEFAULT_CAPACITY

logger = logging.getLogger("bf.runner")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="bf",
        usage="%(prog)s filename [OPTIONS]...",
        description="toy brainfuck interpreter written in python.",
    )
    parser.add_argument("filename", help="program to run")
    parser.add_argument("-m", "--memory", type=int, default=DEFAULT_CAPACITY,
                        help=f"set the tape size in cells (default: {DEFAULT_CAPACITY})")
    parser.add_argument("-d", "--dump", nargs="?", const="hex", default="none", choices=DUMP_FORMATS,
                        help="set the memory dump format [none, hex, ascii] (default: none)")
    parser.add_argument("-s", "--stack-limit", type=int, default=None,
                        help="fail when loops nest deeper than this (default: unbounded)")
    parser.add_argument("-v", "--verbose", action="store_true", help="increase verbosity")
    return parser.parse_args(argv)


def print_config(args):
    logger.info(
        "parsed config:\nmemory size: %d cells\ndump_mem: %s\nstack limit: %s\nverbose: %s",
        args.memory, args.dump,
        args.stack_limit if args.stack_limit is not None else "unbounded",
        "true" if args.verbose else "false",
    )


def run_bf(path, memory_size=DEFAULT_CAPACITY, output=None, stack_limit=None):
    source = Source.from_path(path)
    logger.info("interpreting file %s", path)
    return Interpreter(source, memory_size=memory_size, output=output, stack_limit=stack_limit).run()


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)
    print_config(args)

    try:
        interp = run_bf(args.filename, args.memory, sys.stdout.buffer, args.stack_limit)
    except BFError as e:
        sys.stdout.flush()
        logger.error("%s", e)
        return 1

    if args.dump != "none":
        dump(interp.snapshot(), args.dump)
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
