import logging

from deadends.params import START, END

logger = logging.getLogger()


def link_extremity(is_first_endpoint, strand):
    """
    Which extremity of a segment a link endpoint attaches to.
    A link leaves its first segment from the end when the strand is +, and
    enters its second segment at the start when the strand is +. A - strand
    swaps the extremity in both cases.
    Parameters:
        is_first_endpoint (bool): True for (name_a, strand_a), False for (name_b, strand_b)
        strand (int): 1 or -1
    Returns:
        START or END
    """
    if strand not in (1, -1):
        raise ValueError(f"strand must be 1 or -1, not {strand!r}")
    if is_first_endpoint:
        return END if strand == 1 else START
    return START if strand == 1 else END


def find_dead_ends(segments, links):
    """
    Returns the sets of segment names whose start and whose end have no link.
    Links to segments missing from the segment list are ignored.
    """
    dead = {START: set(segments), END: set(segments)}
    for link in links:
        dead[link_extremity(True, link.strand_a)].discard(link.name_a)
        dead[link_extremity(False, link.strand_b)].discard(link.name_b)
    return dead[START], dead[END]


def count_dead_ends(segments, links):
    """
    Number of segment extremities that are not connected to any link
    """
    dead_starts, dead_ends = find_dead_ends(segments, links)
    total = len(dead_starts) + len(dead_ends)
    logger.debug(f"{len(dead_starts)} dead starts, {len(dead_ends)} dead ends")
    return total


def dead_end_table(segments, links):
    """
    Unconnected extremities per segment, in segment order: [(name, [START, END]), ...].
    Segments with both extremities connected are left out.
    """
    dead_starts, dead_ends = find_dead_ends(segments, links)
    table = []
    seen = set()
    for name in segments:
        if name in seen:
            continue
        seen.add(name)
        extremities = []
        if name in dead_starts:
            extremities.append(START)
        if name in dead_ends:
            extremities.append(END)
        if extremities:
            table.append((name, extremities))
    return table
