import sys
import logging

logger = logging.getLogger()


def set_logging(log_file=None, debug=False):
    """
    Turns on logging, sets debug levels and optionally assigns a log file.
    The console handler writes to stderr, stdout is kept for the count.
    """
    #close and clear all handlers if main() is called more than once in a process
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    log_formatter = logging.Formatter("[%(asctime)s] %(name)s: %(levelname)s: "
                                      "%(message)s", "%Y-%m-%d %H:%M:%S")
    console_formatter = logging.Formatter("[%(asctime)s] %(levelname)s: "
                                          " %(message)s", "%Y-%m-%d %H:%M:%S")
    console_log = logging.StreamHandler(sys.stderr)
    console_log.setFormatter(console_formatter)
    console_log.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.addHandler(console_log)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG)
