import logging
import sys


class Colors:
    RED = '\033[41m\033[30m'
    YELLOW = '\033[43m\033[30m'
    BLUE = '\033[48;5;12m\033[30m'
    GRAY = '\033[48;5;8m\033[37m'
    GREEN = '\033[92m'
    CYAN = '\033[96m'
    FAIL = '\033[91m'
    BOLD = '\033[1m'
    REVERSE = '\033[7m'
    ENDC = '\033[0m'


class ColorFormatter(logging.Formatter):
    """Prefix each record with a coloured level badge."""

    BADGES = {
        logging.ERROR: f"{Colors.RED} ERROR {Colors.ENDC}",
        logging.WARNING: f"{Colors.YELLOW} WARN {Colors.ENDC}",
        logging.INFO: f"{Colors.BLUE} INFO {Colors.ENDC}",
        logging.DEBUG: f"{Colors.GRAY} DBUG {Colors.ENDC}",
    }

    def format(self, record):
        badge = self.BADGES.get(record.levelno, self.BADGES[logging.ERROR])
        return f"{badge} {super().format(record)}"


def setup_logging(verbose=False, stream=None):
    logger = logging.getLogger("bf")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(ColorFormatter("%(message)s"))
    logger.addHandler(handler)
    # errors are always shown, everything else only with -v
    logger.setLevel(logging.DEBUG if verbose else logging.ERROR)
    logger.propagate = False
    return logger
