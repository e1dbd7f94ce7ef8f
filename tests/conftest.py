import logging

import pytest

from core.log_utils import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_spg_logger():
    # handlers bound to a captured stream must not outlive the test
    yield
    log = logging.getLogger(LOGGER_NAME)
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()
    log.setLevel(logging.NOTSET)
