"""
Unit tests for OutputClassifier.
"""

import logging

import pytest

from idlbridge.build.output_classifier import OutputClassifier


class TestOutputClassifier:
    """Test suite for OutputClassifier."""

    @pytest.fixture
    def classifier(self):
        return OutputClassifier(logging.getLogger("test.classifier"))

    def test_clean_run_succeeds(self, classifier):
        result = classifier.classify("", "", 0, fail_on_error=True)

        assert result.success is True

    def test_nonzero_exit_fails_with_policy(self, classifier):
        result = classifier.classify("", "", 1, fail_on_error=True)

        assert result.success is False

    def test_invalid_argument_fails_with_zero_exit(self, classifier):
        """Test the invalid-argument text fails a run that exited 0."""
        result = classifier.classify("", "Invalid argument: -x", 0, fail_on_error=True)

        assert result.success is False

    def test_invalid_argument_without_policy_succeeds(self, classifier, caplog):
        """Test nothing fails without the policy, but stderr is still logged."""
        with caplog.at_level(logging.INFO, logger="test.classifier"):
            result = classifier.classify("", "Invalid argument: -x", 0, fail_on_error=False)

        assert result.success is True
        assert any(
            record.levelno == logging.ERROR and "Invalid argument: -x" in record.getMessage()
            for record in caplog.records
        )

    def test_nonzero_exit_without_policy_succeeds(self, classifier):
        result = classifier.classify("", "", 4, fail_on_error=False)

        assert result.success is True
        assert result.returncode == 4

    def test_other_stderr_text_does_not_fail(self, classifier):
        result = classifier.classify("", "warning: deprecated", 0, fail_on_error=True)

        assert result.success is True

    def test_stdout_logged_at_info(self, classifier, caplog):
        with caplog.at_level(logging.INFO, logger="test.classifier"):
            classifier.classify("generated Foo.java", "", 0, fail_on_error=False)

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.INFO, "generated Foo.java")
        ]

    def test_empty_output_not_logged(self, classifier, caplog):
        with caplog.at_level(logging.DEBUG, logger="test.classifier"):
            classifier.classify("", "", 0, fail_on_error=True)

        assert caplog.records == []
