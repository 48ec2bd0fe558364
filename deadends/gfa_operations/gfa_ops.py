import os
import gzip
import zlib
import logging
from collections import namedtuple

import gfapy

from deadends.params import GZIP_MAGIC, SEGMENT_TAG, LINK_TAG, LINK_FIELDS, STRANDS
from deadends.errors import (MissingInputError, InputReadError, FormatError,
                             MissingSegmentNameError, MissingLinkFieldError,
                             InvalidStrandError, DuplicateSegmentError)

"""
This contains functions for reading the structure of a gfa file:
1. check_if_file_exists: Fails if the input path does not exist
2. is_file_gzipped: Sniffs the gzip magic number at the start of a file
3. open_gfa: Opens a plain or gzipped gfa file as a text stream
4. parse_gfa_lines: Extracts segment names and links from gfa lines
5. check_segment_names: Optional strict check for duplicated segment names
6. load_gfa: All of the above for a path
"""
logger = logging.getLogger()


Link = namedtuple("Link", ["name_a", "strand_a", "name_b", "strand_b"])




def check_if_file_exists(filename):
    if not os.path.exists(filename):
        raise MissingInputError(filename)




def is_file_gzipped(filename):
    """
    Returns True if the file starts with the two gzip magic bytes. A file shorter
    than that is too small to be a gfa file.
    """
    try:
        with open(filename, "rb") as f:
            magic = f.read(len(GZIP_MAGIC))
    except OSError as e:
        raise InputReadError(filename, e.strerror) from e
    if len(magic) < len(GZIP_MAGIC):
        raise InputReadError(filename, "too small")
    return magic == GZIP_MAGIC




def open_gfa(filename):
    """
    Opens a gfa file for reading, decompressing it on the fly if needed.
    Only "\\n" ends a line, a trailing "\\r" is dropped by the parser.
    """
    try:
        if is_file_gzipped(filename):
            logger.debug(f"{filename} is gzipped")
            return gzip.open(filename, "rt", encoding="utf-8", newline="\n")
        return open(filename, "rt", encoding="utf-8", newline="\n")
    except OSError as e:
        raise InputReadError(filename, e.strerror) from e




def parse_strand(strand, source="input", line_number=None):
    """
    Converts a strand in string form ("+" or "-") to integer form (1 or -1)
    """
    try:
        return STRANDS[strand]
    except KeyError:
        raise InvalidStrandError(source, line_number, repr(strand)) from None




def parse_gfa_lines(lines, source="input"):
    """
    Extracts segments and links from gfa lines. Only S and L records are
    interpreted, every other line is skipped.
    Parameters:
        lines (iterable of string): gfa lines, with or without line endings
        source (string): name used in error messages
    Returns:
        segments (list of string): segment names in file order
        links (list of Link): links in file order
    """
    segments = []
    links = []
    for line_number, line in enumerate(lines, 1):
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        parts = line.split("\t")
        line_type = parts[0]

        if line_type == SEGMENT_TAG:
            if len(parts) < 2:
                raise MissingSegmentNameError(source, line_number)
            segments.append(parts[1])

        elif line_type == LINK_TAG:
            # overlap and optional tags after the four fields are never used
            if len(parts) < LINK_FIELDS + 1:
                raise MissingLinkFieldError(source, line_number,
                                            f"found {len(parts) - 1}")
            name_a, strand_a, name_b, strand_b = parts[1:LINK_FIELDS + 1]
            links.append(Link(name_a, parse_strand(strand_a, source, line_number),
                              name_b, parse_strand(strand_b, source, line_number)))

    return segments, links




def check_segment_names(segments, source="input"):
    """
    Fails on the first segment name seen twice. Names are registered in an
    empty gfapy graph, which refuses a second segment with the same name.
    """
    graph = gfapy.Gfa(version="gfa1", vlevel=0)
    for name in segments:
        try:
            graph.add_line(f"S\t{name}\t*")
        except gfapy.NotUniqueError:
            raise DuplicateSegmentError(source, detail=repr(name)) from None
        except gfapy.Error as e:
            raise FormatError(source, detail=f"segment {name!r}: {e}") from e




def load_gfa(filename, strict=False):
    """
    Loads a plain or gzipped gfa file.
    Parameters:
        filename (string): path to the gfa file
        strict (bool): also fail on duplicated segment names
    Returns:
        segments (list of string), links (list of Link)
    """
    check_if_file_exists(filename)
    logger.info(f"Loading {filename}")
    with open_gfa(filename) as f:
        try:
            segments, links = parse_gfa_lines(f, filename)
        except (OSError, EOFError, zlib.error) as e:
            raise InputReadError(filename, str(e)) from e
        except UnicodeDecodeError as e:
            raise InputReadError(filename, "not valid UTF-8 text") from e
    logger.debug(f"{len(segments)} segments and {len(links)} links loaded from {filename}")

    if strict:
        check_segment_names(segments, filename)
    return segments, links
