# tests/test_logging_setup.py

from __future__ import annotations

import logging

from todolist.logging_setup import HANDLER_NAME, setup_logging


def test_setup_keeps_host_handlers_and_replaces_its_own() -> None:
    root = logging.getLogger()
    level = root.level
    host = logging.NullHandler()
    root.addHandler(host)
    try:
        setup_logging('INFO')
        setup_logging('DEBUG')

        assert host in root.handlers
        ours = [h for h in root.handlers if h.get_name() == HANDLER_NAME]
        assert len(ours) == 1
        assert root.level == logging.DEBUG
    finally:
        root.removeHandler(host)
        for handler in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
            root.removeHandler(handler)
        root.setLevel(level)
