import os
import stat
import tempfile
import unittest
from pathlib import Path

from evservice.errors import STATUS_MESSAGES, auth_error_message, translate_error
from evservice.notify import ErrorThrottle, Notifier, RecordingSink
from evservice.storage import FileTokenStore, MemoryTokenStore

from helpers import FakeClock


class TestErrorThrottle(unittest.TestCase):

    def test_window(self):
        clock = FakeClock(0)
        throttle = ErrorThrottle(5, clock)
        self.assertTrue(throttle.should_show("500-generic"))
        throttle.mark("500-generic")
        clock.advance(4.9)
        self.assertFalse(throttle.should_show("500-generic"))
        self.assertTrue(throttle.should_show("401-generic"))
        clock.advance(0.1)
        self.assertTrue(throttle.should_show("500-generic"))

    def test_reset(self):
        throttle = ErrorThrottle(5, FakeClock())
        throttle.mark("k")
        throttle.reset()
        self.assertTrue(throttle.should_show("k"))


class TestNotifier(unittest.TestCase):

    def test_levels_reach_sink(self):
        sink = RecordingSink()
        notifier = Notifier(sink=sink)
        notifier.error("e")
        notifier.warning("w")
        notifier.success("s")
        self.assertEqual(sink.messages, [("error", "e"), ("warning", "w"), ("success", "s")])
        self.assertEqual(sink.of_level("success"), ["s"])

    def test_default_sink_logs(self):
        with self.assertLogs("evservice.notify", level="ERROR") as logs:
            Notifier().error("Có lỗi")
        self.assertIn("Có lỗi", logs.output[0])


class TestErrorMessages(unittest.TestCase):

    def test_missing_status_treated_as_server_error(self):
        self.assertEqual(translate_error(None), STATUS_MESSAGES[500])

    def test_unmapped_status_falls_back(self):
        self.assertEqual(translate_error(422, "Unprocessable"), STATUS_MESSAGES[500])

    def test_vietnamese_passthrough(self):
        self.assertEqual(translate_error(400, "Ngày không hợp lệ"), "Ngày không hợp lệ")

    def test_auth_codes(self):
        self.assertEqual(
            auth_error_message("ACCOUNT_DISABLED"),
            "Tài khoản đã bị vô hiệu hóa. Vui lòng liên hệ hỗ trợ.",
        )
        self.assertEqual(auth_error_message(None), auth_error_message("TOKEN_EXPIRED"))


class TestTokenStores(unittest.TestCase):

    def test_memory_store(self):
        store = MemoryTokenStore("")
        self.assertIsNone(store.get())
        store.set("t")
        self.assertEqual(store.get(), "t")
        store.remove()
        self.assertIsNone(store.get())

    def test_file_store_roundtrip(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "token"
            store = FileTokenStore(path)
            self.assertIsNone(store.get())

            store.set("secret")
            self.assertEqual(FileTokenStore(path).get(), "secret")
            if os.name == "posix":
                self.assertEqual(stat.S_IMODE(path.stat().st_mode), 0o600)

            store.remove()
            self.assertFalse(path.exists())
            store.remove()

    def test_blank_file_means_no_token(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "token"
            path.write_text("  \n")
            self.assertIsNone(FileTokenStore(path).get())


if __name__ == "__main__":
    unittest.main()
