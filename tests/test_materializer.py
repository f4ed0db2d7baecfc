import unittest
from pathlib import Path

from _fakes import FakeFileSystem, FakeRemote

from drivemirror.config import MirrorConfig
from drivemirror.errors import HttpErrorInfo, map_http_error
from drivemirror.materializer import FileMaterializer
from drivemirror.util.mime import FOLDER_MIME

ROOT = Path("/work/ArchivosDrive")


class TestFileMaterializer(unittest.TestCase):
    def setUp(self) -> None:
        self.config = MirrorConfig.from_cwd("/work")
        self.remote = FakeRemote()
        self.fs = FakeFileSystem(dirs=[ROOT])
        self.materializer = FileMaterializer(self.remote, self.config, fs=self.fs)

    def test_folder_family_creates_dir_and_never_writes_file(self) -> None:
        self.remote.add("P", "D1", "Reports", FOLDER_MIME)

        result = self.materializer.materialize("D1", "Reports")

        self.assertEqual(result.status, "created")
        self.assertEqual(result.kind, "folder")
        self.assertIn(ROOT / "Reports", self.fs.dirs)
        self.assertEqual(self.fs.files, {})
        self.assertFalse(any(c[0] == "write_stream" for c in self.fs.calls))
        # Children are never listed.
        self.assertFalse(any(c[0] == "list_children" for c in self.remote.calls))

    def test_folder_uses_metadata_name(self) -> None:
        self.remote.add("P", "D1", "Reports", FOLDER_MIME)

        result = self.materializer.materialize("D1", "listed-name")

        self.assertEqual(result.target, ROOT / "Reports")

    def test_native_document_target_always_ends_in_pdf(self) -> None:
        for mime in (
            "application/vnd.google-apps.document",
            "application/vnd.google-apps.spreadsheet",
            "application/vnd.google-apps.presentation",
        ):
            for name in ("Q1", "notes.docx", "report.pdf", "a.b.c"):
                with self.subTest(mime=mime, name=name):
                    target = self.materializer.target_path("export", name)
                    self.assertTrue(target.name.endswith(".pdf"))
                    self.assertEqual(target, ROOT / (name + ".pdf"))

    def test_export_writes_converted_content(self) -> None:
        self.remote.add("P", "S1", "Q1", "application/vnd.google-apps.spreadsheet",
                        b"%PDF-exported")

        result = self.materializer.materialize("S1", "Q1")

        self.assertEqual(result.status, "created")
        self.assertEqual(result.kind, "export")
        self.assertEqual(self.fs.files[ROOT / "Q1.pdf"], b"%PDF-exported")
        self.assertIn(("export_to", "S1", "application/pdf"), self.remote.calls)

    def test_binary_target_is_root_joined_with_unmodified_name(self) -> None:
        self.remote.add("P", "B1", "scan.pdf", "application/pdf", b"\x00\x01raw")

        result = self.materializer.materialize("B1", "scan.pdf")

        self.assertEqual(result.status, "created")
        self.assertEqual(result.kind, "download")
        self.assertEqual(result.target, ROOT / "scan.pdf")
        self.assertEqual(self.fs.files[ROOT / "scan.pdf"], b"\x00\x01raw")

    def test_second_invocation_only_skips(self) -> None:
        self.remote.add("P", "B1", "scan.pdf", "application/pdf", b"v1")
        self.materializer.materialize("B1", "scan.pdf")

        self.remote.content["B1"] = b"v2"
        writes_before = len(self.fs.writes())
        with self.assertLogs("drivemirror.materializer", level="INFO") as logs:
            result = self.materializer.materialize("B1", "scan.pdf")

        self.assertEqual(result.status, "skipped")
        self.assertEqual(len(self.fs.writes()), writes_before)
        self.assertEqual(self.fs.files[ROOT / "scan.pdf"], b"v1")
        self.assertTrue(any("already exists" in line for line in logs.output))

    def test_existing_folder_is_skipped(self) -> None:
        self.remote.add("P", "D1", "Reports", FOLDER_MIME)
        self.fs.dirs.add(ROOT / "Reports")

        result = self.materializer.materialize("D1", "Reports")

        self.assertEqual(result.status, "skipped")
        self.assertEqual(self.fs.writes(), [])

    def test_stream_failure_is_recorded_not_raised(self) -> None:
        self.remote.add("P", "B1", "big.bin", "application/octet-stream", b"abcdef")
        self.remote.fail_stream.add("B1")

        with self.assertLogs("drivemirror.materializer", level="ERROR"):
            result = self.materializer.materialize("B1", "big.bin")

        self.assertEqual(result.status, "failed")
        self.assertEqual(result.error_type, "NetworkError")

    def test_export_failure_is_recorded_not_raised(self) -> None:
        self.remote.add("P", "S1", "Q1", "application/vnd.google-apps.spreadsheet",
                        b"%PDF-exported")
        self.remote.fail_stream.add("S1")

        with self.assertLogs("drivemirror.materializer", level="ERROR") as logs:
            result = self.materializer.materialize("S1", "Q1")

        self.assertEqual(result.status, "failed")
        self.assertEqual(result.kind, "export")
        self.assertEqual(result.target, ROOT / "Q1.pdf")
        self.assertEqual(result.error_type, "NetworkError")
        self.assertIn("Error exporting file Q1", logs.output[0])
        self.assertFalse(self.fs.exists(ROOT / "Q1.pdf"))

    def test_error_type_names_the_mapped_drive_error(self) -> None:
        self.remote.add("P", "B1", "a.bin", "application/octet-stream", b"x")
        self.remote.add("P", "B2", "b.bin", "application/octet-stream", b"x")
        errors = {
            "B1": map_http_error(HttpErrorInfo(status_code=403, reason="dailyLimitExceeded")),
            "B2": map_http_error(HttpErrorInfo(status_code=403, reason="insufficientFilePermissions")),
        }

        def download_to(file_id, fh):
            raise errors[file_id]

        self.remote.download_to = download_to  # type: ignore[assignment]

        with self.assertLogs("drivemirror.materializer", level="ERROR"):
            quota = self.materializer.materialize("B1", "a.bin")
            denied = self.materializer.materialize("B2", "b.bin")

        self.assertEqual(quota.error_type, "QuotaExceededError")
        self.assertEqual(denied.error_type, "PermissionError")

    def test_metadata_failure_is_recorded_not_raised(self) -> None:
        with self.assertLogs("drivemirror.materializer", level="ERROR"):
            result = self.materializer.materialize("MISSING", "ghost.txt")

        self.assertEqual(result.status, "failed")
        self.assertIsNone(result.kind)
        self.assertEqual(result.error_type, "NotFoundError")

    def test_missing_download_root_fails_every_write(self) -> None:
        fs = FakeFileSystem()
        materializer = FileMaterializer(self.remote, self.config, fs=fs)
        self.remote.add("P", "B1", "scan.pdf", "application/pdf", b"x")
        self.remote.add("P", "D1", "Reports", FOLDER_MIME)

        with self.assertLogs("drivemirror.materializer", level="ERROR"):
            r1 = materializer.materialize("B1", "scan.pdf")
            r2 = materializer.materialize("D1", "Reports")

        self.assertEqual((r1.status, r2.status), ("failed", "failed"))
        self.assertEqual(fs.files, {})


if __name__ == "__main__":
    unittest.main()
