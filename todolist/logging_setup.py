import logging
import sys

HANDLER_NAME = 'todolist'


def setup_logging(level='INFO'):
    """Send every log record at ``level`` or above to stderr.

    Safe to call more than once; only the handler added here is replaced,
    handlers installed by the host server or test runner are left alone.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    ))
    root.addHandler(handler)

    # werkzeug already prints one access line per request
    logging.getLogger('werkzeug').setLevel(max(root.level, logging.INFO))
