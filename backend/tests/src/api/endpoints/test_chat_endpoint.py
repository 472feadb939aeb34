"""Tests for the /chat endpoint using the Flask test client."""

import io
import os
import tempfile
import unittest
from types import SimpleNamespace
from typing import Any, Dict, List, Tuple
from unittest.mock import Mock, patch

from backend.app import create_app
from backend.conf.config import Config
from backend.src.data_classes import ModelRequest, TextPart
from backend.src.services import AttachmentReader, AttachmentStore
from backend.src.services.llm import BaseModelService, ModelError

FileTuple = Tuple[io.BytesIO, str, str]


def upload(content: bytes, filename: str, media_type: str) -> FileTuple:
    return (io.BytesIO(content), filename, media_type)


class TestChatEndpoint(unittest.TestCase):
    """Test cases for POST /chat with a mocked model service."""

    def setUp(self) -> None:
        """Set up test fixtures before each test method."""
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.store = AttachmentStore(upload_dir=self.tmp_dir.name)

        self.mock_model_service = Mock(spec=BaseModelService)
        self.mock_model_service.is_configured = True
        self.mock_model_service.model_name = "gemini-test"
        self.mock_model_service.generate_content.return_value = SimpleNamespace(
            text="Model answer"
        )

        self.app = create_app(
            self.mock_model_service, store=self.store, development_mode=False
        )
        self.client = self.app.test_client()

    def tearDown(self) -> None:
        """Clean up after each test method."""
        self.tmp_dir.cleanup()

    def _post(self, prompt: Any = None, files: List[FileTuple] = ()) -> Any:
        data: Dict[str, Any] = {}
        if prompt is not None:
            data["prompt"] = prompt
        if files:
            data["files"] = list(files)
        return self.client.post("/chat", data=data, content_type="multipart/form-data")

    def _stored_files(self) -> List[str]:
        return os.listdir(self.tmp_dir.name)

    def _sent_request(self) -> ModelRequest:
        self.mock_model_service.generate_content.assert_called_once()
        return self.mock_model_service.generate_content.call_args[0][0]

    def test_prompt_only(self) -> None:
        """Test a prompt without attachments."""
        response = self._post(prompt="Hello")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"output": "Model answer", "filesProcessed": 0})

    def test_prompt_and_two_text_files(self) -> None:
        """Test part order and cleanup for a prompt with two text files."""
        response = self._post(
            prompt="hi",
            files=[
                upload(b"first file", "A.txt", "text/plain"),
                upload(b"second file", "B.md", "text/markdown"),
            ],
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["filesProcessed"], 2)
        self.assertEqual(
            list(self._sent_request().parts),
            [
                TextPart("hi"),
                TextPart('Content of file "A.txt":\nfirst file'),
                TextPart('Content of file "B.md":\nsecond file'),
            ],
        )
        self.assertEqual(self._stored_files(), [])

    def test_image_without_prompt(self) -> None:
        """Test that an image alone is embedded with the default instruction."""
        response = self._post(files=[upload(b"\x89PNG", "cat.png", "image/png")])

        self.assertEqual(response.status_code, 200)
        parts = self._sent_request().parts
        self.assertEqual(parts[0].media_type, "image/png")
        self.assertEqual(parts[0].data, b"\x89PNG")
        self.assertEqual(len(parts), 2)

    def test_missing_content(self) -> None:
        """Test that an empty request is rejected before the model is touched."""
        response = self._post(prompt="")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.get_json(), {"error": "Please provide a prompt or upload files"}
        )
        self.mock_model_service.generate_content.assert_not_called()

    def test_too_many_files(self) -> None:
        """Test that eleven files are rejected before anything is stored or read."""
        files = [upload(b"x", f"{i}.txt", "text/plain") for i in range(11)]

        with patch.object(AttachmentReader, "read_bytes") as mock_read:
            response = self._post(prompt="hi", files=files)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Too many files. Maximum is 10 files.")
        mock_read.assert_not_called()
        self.mock_model_service.generate_content.assert_not_called()
        self.assertEqual(self._stored_files(), [])

    def test_ten_files_accepted(self) -> None:
        """Test the upper boundary of the file count."""
        files = [upload(b"x", f"{i}.txt", "text/plain") for i in range(10)]

        response = self._post(prompt="hi", files=files)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["filesProcessed"], 10)

    def test_unsupported_media_type_rejects_request(self) -> None:
        """Test that one unsupported file rejects the whole request atomically."""
        response = self._post(
            prompt="hi",
            files=[
                upload(b"fine", "ok.txt", "text/plain"),
                upload(b"MZ", "tool.exe", "application/x-msdownload"),
            ],
        )

        self.assertEqual(response.status_code, 400)
        body = response.get_json()
        self.assertEqual(body["error"], "File type application/x-msdownload is not supported")
        self.assertIn("tool.exe", body["details"])
        # The valid file is not processed either
        self.mock_model_service.generate_content.assert_not_called()
        self.assertEqual(self._stored_files(), [])

    def test_file_too_large(self) -> None:
        """Test the per-file size limit."""
        big = b"x" * (Config.MAX_FILE_SIZE + 1)

        response = self._post(prompt="hi", files=[upload(big, "big.txt", "text/plain")])

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "File too large. Maximum size is 10MB.")
        self.mock_model_service.generate_content.assert_not_called()
        self.assertEqual(self._stored_files(), [])

    def test_body_over_transport_limit(self) -> None:
        """Test that a body over the request size cap is reported as a too large file."""
        self.app.config["MAX_CONTENT_LENGTH"] = 1000

        response = self._post(prompt="hi", files=[upload(b"x" * 5000, "big.txt", "text/plain")])

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.get_json(), {"error": "File too large. Maximum size is 10MB."}
        )
        self.mock_model_service.generate_content.assert_not_called()
        self.assertEqual(self._stored_files(), [])

    def test_whitespace_prompt_only(self) -> None:
        """Test that a whitespace-only prompt is answered like any other prompt."""
        response = self._post(prompt="   ")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"output": "Model answer", "filesProcessed": 0})
        self.assertEqual(list(self._sent_request().parts), [TextPart("   ")])

    def test_pdf_placeholder(self) -> None:
        """Test that a PDF is replaced by a conversion request."""
        response = self._post(files=[upload(b"%PDF-1.7", "report.pdf", "application/pdf")])

        self.assertEqual(response.status_code, 200)
        parts = self._sent_request().parts
        self.assertEqual(len(parts), 1)
        self.assertIn('PDF document named "report.pdf"', parts[0].text)

    def test_safety_block(self) -> None:
        """Test that a safety block returns the fixed message, not the raw error."""
        self.mock_model_service.generate_content.side_effect = ModelError(
            "[FinishReason.SAFETY] raw remote details"
        )

        response = self._post(prompt="hi", files=[upload(b"a", "a.txt", "text/plain")])

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json(), {"error": "Content was blocked by safety filters"})
        self.assertEqual(self._stored_files(), [])

    def test_quota_exceeded(self) -> None:
        """Test the rate-limited response."""
        self.mock_model_service.generate_content.side_effect = ModelError(
            "429 RESOURCE_EXHAUSTED"
        )

        response = self._post(prompt="hi")

        self.assertEqual(response.status_code, 429)
        self.assertEqual(
            response.get_json(), {"error": "API quota exceeded. Please try again later."}
        )

    def test_invalid_api_key(self) -> None:
        """Test a credential rejected by the model."""
        self.mock_model_service.generate_content.side_effect = ModelError("API key not valid")

        response = self._post(prompt="hi")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json(), {"error": "Invalid API key configuration"})

    def test_missing_api_key(self) -> None:
        """Test the configuration error without an API key."""
        self.mock_model_service.is_configured = False

        response = self._post(prompt="hi", files=[upload(b"a", "a.txt", "text/plain")])

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json(), {"error": "Gemini API key not configured"})
        self.assertEqual(self._stored_files(), [])

    def test_unknown_error_hides_details(self) -> None:
        """Test a generic failure outside development mode."""
        self.mock_model_service.generate_content.side_effect = ModelError("connection reset")

        response = self._post(prompt="hi")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json(), {"error": "connection reset"})

    def test_unknown_error_details_in_development(self) -> None:
        """Test that development mode adds diagnostic details."""
        app = create_app(self.mock_model_service, store=self.store, development_mode=True)
        self.mock_model_service.generate_content.side_effect = ModelError("connection reset")

        response = app.test_client().post(
            "/chat", data={"prompt": "hi"}, content_type="multipart/form-data"
        )

        self.assertEqual(response.status_code, 500)
        self.assertIn("ModelError", response.get_json()["details"])

    def test_storage_removed_on_every_path(self) -> None:
        """Test that stored files are gone after success and after failure."""
        files = [upload(b"a", "a.txt", "text/plain")]
        self.assertEqual(self._post(prompt="hi", files=files).status_code, 200)
        self.assertEqual(self._stored_files(), [])

        self.mock_model_service.generate_content.side_effect = ModelError("boom")
        files = [upload(b"a", "a.txt", "text/plain")]
        self.assertEqual(self._post(prompt="hi", files=files).status_code, 500)
        self.assertEqual(self._stored_files(), [])

    def test_empty_file_field_is_ignored(self) -> None:
        """Test that a blank file input does not count as an attachment."""
        response = self._post(prompt="hi", files=[upload(b"", "", "application/octet-stream")])

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["filesProcessed"], 0)


if __name__ == "__main__":
    unittest.main()
