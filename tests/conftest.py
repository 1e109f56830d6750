import logging

import pytest

import fuzzy_suggest.logger as logger_mod


@pytest.fixture(autouse=True)
def _detach_cli_log_handler():
    # cli.run() binds a handler to the stderr that capsys installed for that test.
    yield
    handler = logger_mod._stream_handler
    if handler is not None:
        logging.getLogger("fuzzy_suggest").removeHandler(handler)
        logger_mod._stream_handler = None
    logging.getLogger("fuzzy_suggest").setLevel(logging.NOTSET)
