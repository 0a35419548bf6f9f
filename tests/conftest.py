"""Shared test fixtures."""

import logging
from unittest.mock import MagicMock

import pytest

from sumo.config.store import ConfigStore
from sumo.providers import InstanceClient, _get_ec2_client
from sumo.util import logger


@pytest.fixture(autouse=True)
def clear_client_cache():
    _get_ec2_client.cache_clear()
    yield
    _get_ec2_client.cache_clear()


@pytest.fixture(autouse=True)
def reset_logger():
    """Undo setup_logging() so caplog sees sumo records."""
    yield
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def write_config(tmp_path):
    """Write a config.yml into a temp directory and return its path."""

    def _write(content: str):
        path = tmp_path / "config.yml"
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def config_path(write_config):
    return write_config(
        "ami: ami-12345678\n"
        "access_id: AKIDTEST\n"
        "access_secret: secret\n"
    )


@pytest.fixture
def ec2():
    return MagicMock()


@pytest.fixture
def client(config_path, ec2):
    return InstanceClient(ConfigStore(config_path), ec2_client=ec2)
