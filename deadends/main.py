import sys
import argparse
import logging

from deadends.gfa_operations.gfa_ops import load_gfa
from deadends.analysis.dead_ends import count_dead_ends, dead_end_table
from deadends.errors import DeadEndError
from deadends.params import DeadEndArgs, init_global_args_storage
from deadends.logging import set_logging
from deadends.__version__ import __version__


logger = logging.getLogger()


def _version():
    return f"v{__version__}"


def quit_with_error(text):
    print(f"Error: {text}", file=sys.stderr)
    return 1


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="deadends",
                                     description="Count the dead ends (unconnected segment "
                                                 "extremities) in a GFA assembly graph",
                                     formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument("gfa", help="input gfa file, plain or gzipped")
    parser.add_argument("--strict", required=False, action="store_true", default=False,
                        help="Fail on duplicated segment names")
    parser.add_argument("--debug", required=False, action="store_true", default=False,
                        help="Log the loaded graph and every dead end to stderr")
    parser.add_argument("--log", required=False, default=None,
                        help="Also write a debug log to this file")
    parser.add_argument("-v", "--version", action="version", version=_version())
    return parser.parse_args(argv)


def run():
    """
    Loads the graph named in the argument storage and returns its dead-end count
    """
    segments, links = load_gfa(DeadEndArgs().gfa, strict=DeadEndArgs().strict)
    count = count_dead_ends(segments, links)

    if DeadEndArgs().debug:
        for name, extremities in dead_end_table(segments, links):
            logger.debug(f"{name}: dead {' and '.join(extremities)}")
    logger.info(f"{DeadEndArgs().gfa_name}: {count} dead ends")
    return count


def main(argv=None):
    args = parse_args(argv)
    init_global_args_storage(args)
    try:
        set_logging(DeadEndArgs().log, DeadEndArgs().debug)
    except OSError as e:
        return quit_with_error(f"unable to open log file {DeadEndArgs().log} ({e.strerror})")
    logger.debug("CMD: " + " ".join(sys.argv[1:] if argv is None else argv))

    try:
        count = run()
    except DeadEndError as e:
        logger.debug("Stopping on error", exc_info=True)
        return quit_with_error(str(e))

    print(count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
