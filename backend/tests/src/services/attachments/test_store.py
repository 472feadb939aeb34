"""Unit tests for the AttachmentStore and CleanupManager."""

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import Mock, patch

from werkzeug.datastructures import FileStorage

from backend.src.services.attachments import AttachmentStore, CleanupManager


def make_upload(content: bytes, filename: str, content_type: str) -> FileStorage:
    return FileStorage(stream=io.BytesIO(content), filename=filename, content_type=content_type)


class TestAttachmentStore(unittest.TestCase):
    """Test cases for transient upload storage."""

    def setUp(self) -> None:
        """Set up test fixtures before each test method."""
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.upload_dir = Path(self.tmp_dir.name) / "uploads"
        self.store = AttachmentStore(upload_dir=self.upload_dir)

    def tearDown(self) -> None:
        """Clean up after each test method."""
        self.tmp_dir.cleanup()

    def test_save_creates_unique_file(self) -> None:
        """Test that uploads are stored under unique names with metadata."""
        first = self.store.save(make_upload(b"hello", "notes.txt", "text/plain"))
        second = self.store.save(make_upload(b"hello", "notes.txt", "text/plain"))

        self.assertNotEqual(first.path, second.path)
        self.assertTrue(first.path.exists())
        self.assertEqual(first.path.parent, self.upload_dir)
        self.assertTrue(first.path.name.startswith("files-"))
        self.assertEqual(first.path.suffix, ".txt")
        self.assertEqual(first.original_name, "notes.txt")
        self.assertEqual(first.media_type, "text/plain")
        self.assertEqual(first.size, 5)

    def test_save_all_keeps_order(self) -> None:
        """Test that stored attachments follow upload order."""
        attachments = self.store.save_all(
            [
                make_upload(b"a", "a.txt", "text/plain"),
                make_upload(b"b", "b.png", "image/png"),
            ]
        )
        self.assertEqual([a.original_name for a in attachments], ["a.txt", "b.png"])

    def test_save_all_removes_partial_uploads_on_failure(self) -> None:
        """Test that a failing upload leaves nothing behind."""
        broken = Mock(spec=FileStorage)
        broken.filename = "broken.txt"
        broken.mimetype = "text/plain"
        broken.save.side_effect = OSError("disk full")

        with self.assertRaises(OSError):
            self.store.save_all([make_upload(b"a", "a.txt", "text/plain"), broken])

        self.assertEqual(os.listdir(self.upload_dir), [])

    def test_remove_is_idempotent(self) -> None:
        """Test that removing a missing file is tolerated silently."""
        attachment = self.store.save(make_upload(b"x", "x.txt", "text/plain"))

        self.assertTrue(self.store.remove(attachment))
        self.assertFalse(attachment.path.exists())
        self.assertFalse(self.store.remove(attachment))

    def test_remove_swallows_os_errors(self) -> None:
        """Test that removal failures are logged, not raised."""
        attachment = self.store.save(make_upload(b"x", "x.txt", "text/plain"))
        with patch.object(Path, "unlink", side_effect=PermissionError("denied")):
            with self.assertLogs("backend.src.services.attachments.store", level="WARNING"):
                self.assertFalse(self.store.remove(attachment))


class TestCleanupManager(unittest.TestCase):
    """Test cases for request-scoped cleanup."""

    def setUp(self) -> None:
        """Set up test fixtures before each test method."""
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.store = AttachmentStore(upload_dir=self.tmp_dir.name)
        self.attachments = self.store.save_all(
            [
                make_upload(b"a", "a.txt", "text/plain"),
                make_upload(b"b", "b.txt", "text/plain"),
            ]
        )

    def tearDown(self) -> None:
        """Clean up after each test method."""
        self.tmp_dir.cleanup()

    def test_removes_files_on_normal_exit(self) -> None:
        """Test cleanup when the block completes."""
        with CleanupManager(self.store, self.attachments) as cleanup:
            self.assertTrue(all(a.path.exists() for a in self.attachments))

        self.assertTrue(cleanup.released)
        self.assertFalse(any(a.path.exists() for a in self.attachments))

    def test_removes_files_on_exception(self) -> None:
        """Test cleanup when the block raises."""
        with self.assertRaises(RuntimeError):
            with CleanupManager(self.store, self.attachments):
                raise RuntimeError("model failed")

        self.assertFalse(any(a.path.exists() for a in self.attachments))

    def test_release_runs_once(self) -> None:
        """Test that a second release is a no-op."""
        cleanup = CleanupManager(self.store, self.attachments)

        self.assertEqual(cleanup.release(), 2)
        self.assertEqual(cleanup.release(), 0)

    def test_release_inside_scope_then_exit(self) -> None:
        """Test that an early release is not repeated on exit."""
        store = Mock(wraps=self.store)
        with CleanupManager(store, self.attachments) as cleanup:
            cleanup.release()
        self.assertEqual(store.remove.call_count, 2)

    def test_release_continues_after_store_error(self) -> None:
        """Test that one failing removal does not stop the others."""
        store = Mock(spec=AttachmentStore)
        store.remove.side_effect = [RuntimeError("boom"), True]

        cleanup = CleanupManager(store, self.attachments)

        self.assertEqual(cleanup.release(), 1)
        self.assertEqual(store.remove.call_count, 2)


if __name__ == "__main__":
    unittest.main()
