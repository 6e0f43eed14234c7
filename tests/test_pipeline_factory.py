"""
Tests for building the validation pipeline from settings.
"""
import unittest

from content_validator.core.config import settings
from content_validator.core.error_handling import ClientConfigurationError
from content_validator.services.pipeline_factory import build_validation_pipeline
from content_validator.services.search_client import SerperSearchClient


class TestBuildValidationPipeline(unittest.TestCase):

    def setUp(self):
        self._prev = (settings.APPROVE_ABOVE_PERCENT, settings.REJECT_BELOW_PERCENT)

    def tearDown(self):
        settings.APPROVE_ABOVE_PERCENT, settings.REJECT_BELOW_PERCENT = self._prev

    def test_defaults_from_settings(self):
        pipeline = build_validation_pipeline(concurrency=2)

        self.assertIsInstance(pipeline.validator.search_client, SerperSearchClient)
        self.assertEqual(pipeline.concurrency, 2)
        self.assertEqual(pipeline.validator.policy.approve_above, settings.APPROVE_ABOVE_PERCENT)

    def test_overlapping_thresholds_are_a_configuration_error(self):
        settings.APPROVE_ABOVE_PERCENT = 40
        settings.REJECT_BELOW_PERCENT = 70

        with self.assertRaises(ClientConfigurationError):
            build_validation_pipeline()


if __name__ == '__main__':
    unittest.main()
