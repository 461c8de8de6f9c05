import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    # the CLI reconfigures the root logger against CliRunner's temporary streams
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
