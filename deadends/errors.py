import gfapy

"""
Errors raised while loading and analysing a GFA file:
1. MissingInputError: the input path does not exist
2. InputReadError: the input cannot be opened, read or decoded
3. FormatError and its variants: a malformed S or L record
Only deadends.main turns them into an exit status.
"""


class DeadEndError(Exception):
    pass


class MissingInputError(DeadEndError):
    def __init__(self, filename):
        super().__init__(f"{filename} file does not exist")
        self.filename = filename


class InputReadError(DeadEndError):
    def __init__(self, filename, reason=None):
        message = f"unable to load {filename}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.filename = filename


class FormatError(DeadEndError, gfapy.FormatError):
    """
    A record that cannot be interpreted. Also a gfapy.FormatError, so callers
    mixing this loader with gfapy can catch both with one clause.
    """
    description = "is not properly formatted"

    def __init__(self, source, line_number=None, detail=None):
        message = f"{source} {self.description}"
        if line_number is not None:
            message += f" (line {line_number}"
            message += f": {detail})" if detail else ")"
        elif detail:
            message += f" ({detail})"
        super().__init__(message)
        self.source = source
        self.line_number = line_number
        self.detail = detail


class MissingSegmentNameError(FormatError):
    description = "has an S line without a segment name"


class MissingLinkFieldError(FormatError):
    description = "has an L line with fewer than four fields"


class InvalidStrandError(FormatError):
    description = "has a strand that is neither + nor -"


class DuplicateSegmentError(FormatError):
    description = "has a duplicated segment name"
