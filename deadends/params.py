import os


# run-wide values set once from the command line in main()
class GlobalArgumentStorage(object):
    pass

_glob_args = None

def init_global_args_storage(args):
    global _glob_args
    _glob_args = GlobalArgumentStorage()
    _glob_args.gfa = args.gfa
    _glob_args.gfa_name = os.path.basename(args.gfa)
    _glob_args.strict = args.strict
    _glob_args.debug = args.debug
    _glob_args.log = args.log


def DeadEndArgs():
    global _glob_args
    return _glob_args
##########


# First two bytes of every gzip stream
GZIP_MAGIC = b"\x1f\x8b"

# GFA record tags that are interpreted, everything else is skipped
SEGMENT_TAG = "S"
LINK_TAG = "L"

# name_a, strand_a, name_b, strand_b
LINK_FIELDS = 4

STRANDS = {"+": 1, "-": -1}

# segment extremities
START = "start"
END = "end"
