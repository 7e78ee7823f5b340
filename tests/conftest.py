import os
import pytest
from unittest.mock import patch

from solid_examples.config.manager import ConfigurationManager
from solid_examples.principles.ocp import sample_products

ENV_VARS = ("LOG_LEVEL", "LOG_DESTINATION", "SOLID_EXAMPLES_LOGDIR", "SOLID_EXAMPLES_OUTPUT_DIR")


@pytest.fixture(autouse=True)
def clean_environment():
    """Keep configuration environment variables out of the tests."""
    env = {key: value for key, value in os.environ.items() if key not in ENV_VARS}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def products():
    return sample_products()


@pytest.fixture
def config_manager():
    return ConfigurationManager()


@pytest.fixture
def write_config(tmp_path):
    """Write a JSON configuration file and return its path."""
    import json

    def _write(data, name="config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2))
        return str(path)

    return _write


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging replaces root handlers; put them back after each test."""
    import logging

    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            handler.close()
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
