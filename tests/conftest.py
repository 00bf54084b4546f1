import logging

import pytest

from genoquery.io import parse_catalog_string

CATALOG_TEXT = (
    "P1\tOrg1\t2A1B\n"
    "P2\tOrg2\t2A1C\n"
    "P3\tOrg3\t2A2B\n"
    "P1\tOrgDup\tZZZ\n"
    "P4\tOrg4\tABAB\n"
    "EMPTY\tOrg5\t0A\n"
)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by the CLI so they never outlive a test."""
    yield
    logger = logging.getLogger("genoquery")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def catalog():
    return parse_catalog_string(CATALOG_TEXT)


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "sequences.txt"
    path.write_text(CATALOG_TEXT, encoding="utf-8")
    return path
