"""Tests for the error taxonomy and correlation logging."""

import logging

import pytest

from markup_tree_compare.shared.errors import (
    ComparisonError,
    NodeNotFoundError,
    ParsingError,
    TextsDifferError,
)
from markup_tree_compare.shared.logging import CorrelationLogger, get_logger


class TestErrorMessages:
    """The message shapes are part of the public contract."""

    def test_parsing_error(self):
        error = ParsingError("unexpected end of stream")
        assert str(error) == "parsing: unexpected end of stream"
        assert error.detail == "unexpected end of stream"

    def test_tag_not_found(self):
        error = NodeNotFoundError("caption")
        assert str(error) == "findtag: tag caption not found"
        assert error.name == "caption"
        assert error.by_template is False

    def test_node_not_found(self):
        error = NodeNotFoundError("caption", by_template=True)
        assert str(error) == "findnode: node caption not found."

    def test_texts_differ(self):
        error = TextsDifferError("abc", "abd", node_name="p")
        assert str(error) == "texts differ: got abc, want abd"
        assert (error.got, error.want, error.node_name) == ("abc", "abd", "p")

    @pytest.mark.parametrize(
        "error",
        [ParsingError("x"), NodeNotFoundError("x"), TextsDifferError("x", "y")],
    )
    def test_common_base(self, error):
        assert isinstance(error, ComparisonError)


class TestCorrelationLogger:
    """Test correlation-aware logging."""

    def test_component_defaults_to_module_name(self):
        logger = get_logger("markup_tree_compare.compare.inclusion")
        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "inclusion"
        assert logger.correlation_id is None

    def test_extra_carries_correlation(self, caplog):
        logger = get_logger("markup_tree_compare.tests", "req-42", "tests")

        with caplog.at_level(logging.INFO, logger="markup_tree_compare.tests"):
            logger.info("checked", extra={"tag": "caption"})

        record = caplog.records[-1]
        assert record.getMessage() == "checked"
        assert record.component == "tests"
        assert record.correlation_id == "req-42"
        assert record.tag == "caption"

    def test_is_debug_enabled(self, caplog):
        logger = get_logger("markup_tree_compare.debug_check")
        with caplog.at_level(logging.DEBUG, logger="markup_tree_compare.debug_check"):
            assert logger.is_debug_enabled() is True
        with caplog.at_level(logging.ERROR, logger="markup_tree_compare.debug_check"):
            assert logger.is_debug_enabled() is False
