import unittest

from drivemirror.errors.exceptions import (
    ApiError,
    AuthError,
    DriveMirrorError,
    HttpErrorInfo,
    InvalidArgumentError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = DriveMirrorError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_map_http_error_basic(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=404, message="not found"))
        self.assertIsInstance(err, NotFoundError)

        err = map_http_error(HttpErrorInfo(status_code=400, message="bad req"))
        self.assertIsInstance(err, InvalidArgumentError)

        err = map_http_error(HttpErrorInfo(status_code=429, message="rate"))
        self.assertIsInstance(err, RateLimitError)

        err = map_http_error(HttpErrorInfo(status_code=401, message="auth"))
        self.assertIsInstance(err, AuthError)

    def test_map_http_error_403_quota_vs_permission(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="quotaExceeded", message="quota")
        )
        self.assertIsInstance(err, QuotaExceededError)

        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="insufficientPermissions", message="x")
        )
        self.assertIsInstance(err, PermissionError)

    def test_map_http_error_details(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=404, reason="notFound", details={"domain": "global"})
        )
        self.assertEqual(str(err), "HTTP error 404")
        self.assertEqual(err.details["status_code"], 404)
        self.assertEqual(err.details["domain"], "global")

    def test_map_http_error_other_is_api_error(self) -> None:
        for status in (409, 418, 500, 503):
            with self.subTest(status=status):
                err = map_http_error(HttpErrorInfo(status_code=status))
                self.assertIsInstance(err, ApiError)


if __name__ == "__main__":
    unittest.main()
