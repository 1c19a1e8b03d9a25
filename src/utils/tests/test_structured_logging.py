"""Unit tests for structured JSON logging."""

import json
import logging
import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from utils.logging import JSONFormatter, setup_structured_logging


def _record(msg: str, level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord('services.user_service', level, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter(unittest.TestCase):

    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(_record("User created")))

        self.assertEqual(data['level'], 'INFO')
        self.assertEqual(data['logger'], 'services.user_service')
        self.assertEqual(data['message'], 'User created')
        self.assertTrue(data['timestamp'].endswith('Z'))
        self.assertNotIn('service', data)

    def test_extra_fields_included(self):
        data = json.loads(JSONFormatter().format(_record("User created", userId=7)))

        self.assertEqual(data['userId'], 7)
        self.assertNotIn('lineno', data)

    def test_service_name(self):
        data = json.loads(JSONFormatter(service="User Directory API").format(_record("x")))

        self.assertEqual(data['service'], 'User Directory API')

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record("failed", level=logging.ERROR)
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        self.assertIn('ValueError: boom', data['exception'])


class TestSetupStructuredLogging(unittest.TestCase):

    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, list(root.handlers))

    def tearDown(self):
        root = logging.getLogger()
        root.setLevel(self._saved[0])
        root.handlers = self._saved[1]

    def test_installs_single_json_handler(self):
        handler = setup_structured_logging("debug")

        root = logging.getLogger()
        self.assertEqual(root.handlers, [handler])
        self.assertEqual(root.level, logging.DEBUG)
        self.assertIsInstance(handler.formatter, JSONFormatter)

    def test_unknown_level_falls_back_to_info(self):
        with self.assertLogs('utils.logging', level='WARNING') as logs:
            setup_structured_logging("verbose")

        self.assertEqual(logging.getLogger().level, logging.INFO)
        self.assertEqual(logs.records[0].requestedLevel, "verbose")

    def test_numeric_level(self):
        setup_structured_logging(logging.ERROR)

        self.assertEqual(logging.getLogger().level, logging.ERROR)

    def test_quiets_uvicorn_access_log(self):
        setup_structured_logging()

        self.assertEqual(logging.getLogger("uvicorn.access").level, logging.WARNING)


if __name__ == '__main__':
    unittest.main()
