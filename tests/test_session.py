import unittest

from evservice.errors import AuthError
from evservice.schemas.user import User, UserRole
from evservice.session import Action, AuthSession, AuthState, reduce

from helpers import make_api, user_payload


class TestAuthReducer(unittest.TestCase):

    def setUp(self):
        self.user = User.model_validate(user_payload())

    def test_login_success(self):
        state = reduce(AuthState(), Action.LOGIN_SUCCESS, {"user": self.user, "token": "t"})
        self.assertTrue(state.is_authenticated)
        self.assertTrue(state.ready)
        self.assertFalse(state.is_loading)
        self.assertEqual(state.token, "t")

    def test_failure_is_resolved(self):
        """A failed login still marks auth as resolved"""
        state = reduce(AuthState(token="t"), Action.LOGIN_FAILURE)
        self.assertIsNone(state.token)
        self.assertFalse(state.is_authenticated)
        self.assertTrue(state.ready)

    def test_logout_resets_ready(self):
        state = reduce(AuthState(), Action.LOGIN_SUCCESS, {"user": self.user, "token": "t"})
        state = reduce(state, Action.LOGOUT)
        self.assertFalse(state.ready)
        self.assertIsNone(state.user)

    def test_flags(self):
        state = reduce(AuthState(), Action.SET_LOADING, False)
        state = reduce(state, Action.SET_READY, True)
        self.assertFalse(state.is_loading)
        self.assertTrue(state.ready)
        self.assertTrue(reduce(state, Action.LOGIN_START).is_loading)


class TestAuthSession(unittest.TestCase):

    def test_initial_state_reads_stored_token(self):
        api, _, _ = make_api(token="stored")
        session = AuthSession(api)
        self.assertEqual(session.state.token, "stored")
        self.assertTrue(session.state.is_loading)
        self.assertFalse(session.ready)

    def test_bootstrap_without_token(self):
        api, backend, _ = make_api()
        state = AuthSession(api).bootstrap()
        self.assertTrue(state.ready)
        self.assertFalse(state.is_loading)
        self.assertFalse(state.is_authenticated)
        self.assertEqual(backend.calls, [])

    def test_bootstrap_validates_token(self):
        api, backend, _ = make_api(token="good")
        backend.add("GET", "/api/auth/me", body={"success": True, "data": {"user": user_payload()}})
        session = AuthSession(api)
        state = session.bootstrap()
        self.assertTrue(state.is_authenticated)
        self.assertEqual(session.user.id, "u1")
        self.assertEqual(session.user.full_name, "Lan Nguyen")
        self.assertEqual(api.token_store.get(), "good")

    def test_bootstrap_accepts_top_level_user(self):
        api, backend, _ = make_api(token="good")
        backend.add("GET", "/api/auth/me", body={"user": user_payload(role="technician")})
        session = AuthSession(api)
        session.bootstrap()
        self.assertEqual(session.user.role, UserRole.TECHNICIAN)

    def test_bootstrap_with_rejected_token(self):
        api, backend, _ = make_api(token="expired")
        backend.add("GET", "/api/auth/me", status=401, body={"error": "TOKEN_EXPIRED"})
        session = AuthSession(api)
        state = session.bootstrap()
        self.assertFalse(state.is_authenticated)
        self.assertTrue(state.ready)
        self.assertIsNone(api.token_store.get())

    def test_login_persists_token(self):
        api, backend, _ = make_api()
        backend.add("POST", "/api/auth/login", body={
            "success": True, "data": {"token": "fresh", "user": user_payload()},
        })
        session = AuthSession(api)
        session.login("u1@evcenter.vn", "pw")
        self.assertTrue(session.is_authenticated)
        self.assertEqual(api.token_store.get(), "fresh")
        self.assertEqual(backend.last_json(), {"email": "u1@evcenter.vn", "password": "pw"})

    def test_login_with_incomplete_response(self):
        api, backend, _ = make_api()
        backend.add("POST", "/api/auth/login", body={"success": True, "data": {"user": user_payload()}})
        session = AuthSession(api)
        with self.assertRaises(AuthError) as ctx:
            session.login("u1@evcenter.vn", "pw")
        self.assertEqual(str(ctx.exception), "Invalid response from server")
        self.assertTrue(session.ready)
        self.assertIsNone(api.token_store.get())

    def test_login_rejected_uses_server_message(self):
        api, backend, _ = make_api()
        backend.add("POST", "/api/auth/login", status=400,
                    body={"success": False, "message": "Email hoặc mật khẩu không đúng"})
        with self.assertRaises(AuthError) as ctx:
            AuthSession(api).login("x@evcenter.vn", "bad")
        self.assertEqual(str(ctx.exception), "Email hoặc mật khẩu không đúng")

    def test_login_failure_default_message(self):
        api, backend, _ = make_api()
        backend.add("POST", "/api/auth/login", status=500, body={})
        with self.assertRaises(AuthError) as ctx:
            AuthSession(api).login("x@evcenter.vn", "pw")
        self.assertEqual(str(ctx.exception), "Login failed")

    def test_register(self):
        api, backend, _ = make_api()
        backend.add("POST", "/api/auth/register", body={
            "success": True, "data": {"token": "new", "user": user_payload(role="customer")},
        })
        session = AuthSession(api)
        session.register({
            "email": "new@evcenter.vn", "password": "pw", "firstName": "Minh",
            "lastName": "Tran", "phone": "0912345678",
        })
        self.assertEqual(session.user.role, UserRole.CUSTOMER)
        self.assertEqual(api.token_store.get(), "new")

    def test_register_failure(self):
        api, backend, _ = make_api()
        backend.add("POST", "/api/auth/register", status=500, body={})
        with self.assertRaises(AuthError) as ctx:
            AuthSession(api).register({"email": "a@b.vn"})
        self.assertEqual(str(ctx.exception), "Registration failed")

    def test_logout(self):
        api, _, _ = make_api(token="t")
        session = AuthSession(api)
        session.logout()
        self.assertIsNone(api.token_store.get())
        self.assertFalse(session.ready)

    def test_update_profile(self):
        api, backend, _ = make_api(token="t")
        backend.add("PUT", "/api/auth/profile",
                    body={"success": True, "data": {"user": user_payload(firstName="Hoa")}})
        session = AuthSession(api)
        session.update_profile({"firstName": "Hoa"})
        self.assertEqual(session.user.first_name, "Hoa")

    def test_change_password_failure(self):
        api, backend, _ = make_api(token="t")
        backend.add("PUT", "/api/auth/change-password", status=400, body={})
        with self.assertRaises(AuthError) as ctx:
            AuthSession(api).change_password("old", "new")
        self.assertEqual(str(ctx.exception), "Password change failed")


if __name__ == "__main__":
    unittest.main()
