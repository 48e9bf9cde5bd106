import io
import json
import unittest
from contextlib import redirect_stderr

from arrayfns import ConsoleLogger, configure_logging, get_logger, init, InitRange, NonFiniteRangeError


class TestConsoleLogger(unittest.TestCase):
    def tearDown(self):
        configure_logging()

    def test_level_filtering_and_bind(self):
        log = ConsoleLogger(name="t", level="INFO").bind(run=1)
        buf = io.StringIO()
        with redirect_stderr(buf):
            log.debug("hidden")
            log.info("shown", k="v")
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertIn("t INFO: shown", lines[0])
        self.assertIn(" k=v", lines[0])
        self.assertIn(" run=1", lines[0])

    def test_default_is_quiet(self):
        buf = io.StringIO()
        with redirect_stderr(buf):
            init(3)
        self.assertEqual(buf.getvalue(), "")

    def test_init_debug_json(self):
        configure_logging("DEBUG", json_output=True)
        self.assertEqual(get_logger().level_name, "DEBUG")
        buf = io.StringIO()
        with redirect_stderr(buf):
            init(InitRange(0, 2))
            with self.assertRaises(NonFiniteRangeError):
                init(InitRange(0, 2, -1))
        recs = [json.loads(s) for s in buf.getvalue().strip().splitlines()]
        self.assertEqual(recs[0]["msg"], "init normalized")
        self.assertEqual(recs[0]["fields"], {"start": 0, "count": 3, "increment": 1})
        self.assertEqual(recs[-1]["msg"], "init rejected unbounded range")
        self.assertEqual(recs[-1]["level"], "DEBUG")
