import unittest

import requests

from evservice.client import clean_params, is_critical_operation
from evservice.errors import ApiError, GENERIC_SERVER_ERROR, SESSION_EXPIRED, STATUS_MESSAGES

from helpers import FakeClock, make_api


class TestRequestInterceptor(unittest.TestCase):

    def test_bearer_header_attached_when_token_stored(self):
        """Stored token is sent as a bearer header"""
        api, backend, _ = make_api(token="abc123")
        backend.add("GET", "/api/vehicles", body={"success": True, "data": []})
        api.vehicles.list()
        self.assertEqual(backend.last.headers["Authorization"], "Bearer abc123")

    def test_no_header_without_token(self):
        api, backend, _ = make_api()
        backend.add("GET", "/api/services", body={"success": True, "data": []})
        api.services.list()
        self.assertNotIn("Authorization", backend.last.headers)

    def test_token_read_on_every_request(self):
        """A token stored after construction is picked up"""
        api, backend, _ = make_api()
        backend.add("GET", "/api/auth/me", body={"success": True, "data": {}})
        api.token_store.set("late-token")
        api.auth.get_profile()
        self.assertEqual(backend.last.headers["Authorization"], "Bearer late-token")

    def test_unset_params_are_dropped(self):
        api, backend, _ = make_api(token="t")
        backend.add("GET", "/api/appointments/availability", body={"success": True})
        api.appointments.check_availability("2025-03-10")
        self.assertEqual(backend.last_params(), {"date": ["2025-03-10"]})

    def test_clean_params(self):
        self.assertIsNone(clean_params({"a": None}))
        self.assertEqual(clean_params({"a": True, "b": 0, "c": None}), {"a": "true", "b": 0})


class TestResponseInterceptor(unittest.TestCase):

    def setUp(self):
        self.clock = FakeClock()
        self.redirects = []
        self.api, self.backend, self.sink = make_api(
            token="stale", clock=self.clock, on_unauthorized=self.redirects.append
        )

    def test_envelope_parsed(self):
        self.backend.add("GET", "/api/vehicles/v1", body={
            "success": True, "message": "ok", "data": {"_id": "v1"},
            "meta": {"total": 1, "totalPages": 1},
        })
        response = self.api.vehicles.get("v1")
        self.assertTrue(response.success)
        self.assertEqual(response.data["_id"], "v1")
        self.assertEqual(response.meta.total_pages, 1)

    def test_401_clears_token_and_redirects_to_login(self):
        """401 ends the session and shows the message for its error code"""
        self.backend.add("GET", "/api/auth/me", status=401,
                         body={"success": False, "error": "TOKEN_INVALID"})
        with self.assertRaises(ApiError) as ctx:
            self.api.auth.get_profile()
        self.assertEqual(ctx.exception.status, 401)
        self.assertEqual(ctx.exception.error_code, "TOKEN_INVALID")
        self.assertIsNone(self.api.token_store.get())
        self.assertEqual(self.redirects, ["/login"])
        self.assertEqual(
            self.sink.of_level("error"),
            ["Mã xác thực không hợp lệ. Vui lòng đăng nhập lại."],
        )

    def test_401_unknown_code_uses_session_expired(self):
        self.backend.add("GET", "/api/auth/me", status=401, body={"message": "nope"})
        with self.assertRaises(ApiError):
            self.api.auth.get_profile()
        self.assertEqual(self.sink.of_level("error"), [SESSION_EXPIRED])

    def test_repeated_401_is_throttled(self):
        """Same status and code within five seconds is not shown again"""
        self.backend.add("GET", "/api/auth/me", status=401, body={"error": "TOKEN_EXPIRED"})
        for _ in range(3):
            with self.assertRaises(ApiError):
                self.api.auth.get_profile()
        self.assertEqual(len(self.sink.of_level("error")), 1)
        self.assertEqual(len(self.redirects), 1)

        self.clock.advance(5)
        with self.assertRaises(ApiError):
            self.api.auth.get_profile()
        self.assertEqual(len(self.sink.of_level("error")), 2)
        self.assertEqual(len(self.redirects), 2)

    def test_different_codes_are_throttled_separately(self):
        self.backend.add("GET", "/api/auth/me", status=401, body={"error": "TOKEN_EXPIRED"})
        self.backend.add("GET", "/api/auth/me", status=401, body={"error": "ACCOUNT_DISABLED"})
        for _ in range(2):
            with self.assertRaises(ApiError):
                self.api.auth.get_profile()
        self.assertEqual(len(self.sink.of_level("error")), 2)

    def test_403_only_logged(self):
        self.backend.add("GET", "/api/reports/kpi", status=403, body={"message": "Forbidden"})
        with self.assertRaises(ApiError) as ctx:
            self.api.reports.kpi()
        self.assertEqual(ctx.exception.status, 403)
        self.assertEqual(self.sink.messages, [])
        self.assertEqual(self.api.token_store.get(), "stale")

    def test_server_error_on_background_get_is_silent(self):
        self.backend.add("GET", "/api/appointments", status=500, body={"message": "boom"})
        with self.assertRaises(ApiError) as ctx:
            self.api.appointments.list()
        self.assertEqual(ctx.exception.message, STATUS_MESSAGES[500])
        self.assertEqual(self.sink.messages, [])

    def test_server_error_on_booking_is_shown(self):
        self.backend.add("POST", "/api/appointments", status=503, body={})
        with self.assertRaises(ApiError):
            self.api.appointments.create({"vehicleId": "v1"})
        self.assertEqual(self.sink.of_level("error"), [GENERIC_SERVER_ERROR])

    def test_server_error_on_login_is_shown(self):
        self.backend.add("POST", "/api/auth/login", status=500, body={})
        with self.assertRaises(ApiError):
            self.api.auth.login("a@b.vn", "pw")
        self.assertEqual(self.sink.of_level("error"), [GENERIC_SERVER_ERROR])

    def test_conflict_carries_server_details(self):
        self.backend.add("POST", "/api/appointments", status=409, body={
            "success": False,
            "message": "Slot taken",
            "reasonCode": "SLOT_FULL",
            "conflicts": [{"time": "08:00"}],
        })
        with self.assertRaises(ApiError) as ctx:
            self.api.appointments.create({"vehicleId": "v1"})
        err = ctx.exception
        self.assertTrue(err.is_conflict)
        self.assertEqual(err.message, STATUS_MESSAGES[409])
        self.assertEqual(err.reason_code, "SLOT_FULL")
        self.assertEqual(err.conflicts, [{"time": "08:00"}])
        self.assertEqual(err.server_message, "Slot taken")

    def test_vietnamese_server_message_kept(self):
        self.backend.add("GET", "/api/vehicles/x", status=404,
                         body={"message": "Xe không tồn tại"})
        with self.assertRaises(ApiError) as ctx:
            self.api.vehicles.get("x")
        self.assertEqual(ctx.exception.message, "Xe không tồn tại")

    def test_transport_failure_becomes_api_error(self):
        self.backend.fail_with = requests.ConnectionError("refused")
        with self.assertRaises(ApiError) as ctx:
            self.api.services.list()
        self.assertEqual(ctx.exception.status, 500)

    def test_non_json_body(self):
        self.backend.add("GET", "/api/services", raw=b"plain text", content_type="text/plain")
        response = self.api.services.list()
        self.assertEqual(response.data, "plain text")


class TestCriticalOperations(unittest.TestCase):

    def test_classification(self):
        self.assertTrue(is_critical_operation("POST", "/api/auth/login"))
        self.assertTrue(is_critical_operation("POST", "/api/auth/register"))
        self.assertTrue(is_critical_operation("PUT", "/api/appointments/1/staff-confirm"))
        self.assertFalse(is_critical_operation("GET", "/api/appointments"))
        self.assertFalse(is_critical_operation("POST", "/api/transactions/cash"))


if __name__ == "__main__":
    unittest.main()
