import logging

import structlog

from storefront.utils.logging import get_logger


class TestGetLogger:
    def test_configures_structlog(self):
        get_logger("storefront.tests.logging")

        assert structlog.is_configured()

    def test_messages_reach_stdlib_handlers(self, caplog):
        logger = get_logger("storefront.tests.logging")

        with caplog.at_level(logging.WARNING, logger="storefront.tests.logging"):
            logger.warning("Relay URL not configured")

        records = [r for r in caplog.records if r.name == "storefront.tests.logging"]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert "Relay URL not configured" in caplog.text

    def test_level_filters_lower_messages(self, caplog):
        logger = get_logger("storefront.tests.logging")

        with caplog.at_level(logging.WARNING, logger="storefront.tests.logging"):
            logger.info("cart created")

        assert "cart created" not in caplog.text
