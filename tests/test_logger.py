"""Unit tests for the logger setup."""

import logging

import pytest

from utils.logger import LOGGER_NAME, setup_logger


@pytest.fixture
def fresh_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = logger.handlers[:]
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved


class TestSetupLogger:

    def test_file_and_console_handlers(self, tmp_path, fresh_logger):
        setup_logger(str(tmp_path / "logs"))
        assert (tmp_path / "logs" / "storefront.log").exists()
        console = [h for h in fresh_logger.handlers if type(h) is logging.StreamHandler]
        assert len(console) == 1
        assert console[0].level == logging.WARNING

    def test_first_call_wins(self, tmp_path, fresh_logger):
        """A later call neither adds handlers nor creates its directory."""
        setup_logger(str(tmp_path / "first"))
        count = len(fresh_logger.handlers)
        assert setup_logger(str(tmp_path / "second")) is fresh_logger
        assert len(fresh_logger.handlers) == count
        assert not (tmp_path / "second").exists()

    def test_rejections_stay_off_the_console(self, tmp_path, fresh_logger, capsys):
        from models.cart import Cart
        from models.errors import InsufficientStock
        from models.item import Item

        setup_logger(str(tmp_path / "logs"))
        with pytest.raises(InsufficientStock):
            Cart().add(Item("TV", 200.0, 1, False, 700.0, True), 5)
        assert "Rejected TV" not in capsys.readouterr().err
