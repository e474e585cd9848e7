import io
import re

import pytest
from PIL import Image

from clippub.clipboard import ClipboardBackend
from clippub.errors import FileReadError, ImageDecodeError, NoContent, SizeLimitExceeded, UploadError
from clippub.models.content import (
    ClipboardFileContent,
    ClipboardFileReference,
    ClipboardImage,
    ClipboardText,
)
from clippub.services import publish_service
from clippub.services.publish_service import PublishService


class FakeBackend(ClipboardBackend):

    def __init__(self, content):
        self.content = content

    def _read(self):
        return self.content

    def _copy_text(self, text):
        pass


class FakeUploader:

    def __init__(self, error=None):
        self.error = error
        self.uploads = []

    def upload(self, key, data, content_type):
        if self.error is not None:
            raise self.error
        self.uploads.append((key, data, content_type))
        return f"https://cdn.example.com/{key}"


def _publish(content, custom_name=None, uploader=None):
    uploader = uploader or FakeUploader()
    url = PublishService(uploader, FakeBackend(content)).publish(custom_name)
    return url, uploader.uploads


def test_text_uses_sniffed_extension():
    url, uploads = _publish(ClipboardText('{"a": 1}'))

    key, body, content_type = uploads[0]
    assert re.fullmatch(r"clip-[a-z0-9]{6}\.json", key)
    assert body == b'{"a": 1}'
    assert content_type == "application/json"
    assert url == f"https://cdn.example.com/{key}"


def test_plain_text_is_txt():
    _, uploads = _publish(ClipboardText("hello world"))

    key, _, content_type = uploads[0]
    assert key.endswith(".txt")
    assert content_type == "text/plain"


def test_custom_name_is_used_verbatim():
    _, uploads = _publish(ClipboardText("# Title\nbody"), custom_name="notes/today")

    key, _, content_type = uploads[0]
    assert key == "notes/today"
    assert content_type == "application/octet-stream"


def test_custom_name_extension_drives_text_content_type():
    _, uploads = _publish(ClipboardText("hello"), custom_name="page.html")

    assert uploads[0][0] == "page.html"
    assert uploads[0][2] == "text/html"


def test_image_is_normalized_to_jpeg(png_bytes):
    _, uploads = _publish(ClipboardImage(png_bytes, "png"))

    key, body, content_type = uploads[0]
    assert key.endswith(".jpg")
    assert content_type == "image/jpeg"
    assert Image.open(io.BytesIO(body)).format == "JPEG"


def test_image_recorded_as_jpg_is_still_normalized(png_bytes):
    _, uploads = _publish(ClipboardImage(png_bytes, "jpg"))

    assert Image.open(io.BytesIO(uploads[0][1])).format == "JPEG"


def test_image_with_custom_name(jpeg_bytes):
    _, uploads = _publish(ClipboardImage(jpeg_bytes, "jpg"), custom_name="shot.jpeg")

    assert uploads[0] == ("shot.jpeg", jpeg_bytes, "image/jpeg")


def test_undecodable_image_fails_before_upload():
    uploader = FakeUploader()
    with pytest.raises(ImageDecodeError):
        _publish(ClipboardImage(b"garbage", "png"), uploader=uploader)
    assert uploader.uploads == []


def test_file_content_keeps_original_extension():
    _, uploads = _publish(ClipboardFileContent("/Users/me/Report.PDF", b"%PDF"))

    key, body, content_type = uploads[0]
    assert re.fullmatch(r"clip-[a-z0-9]{6}\.PDF", key)
    assert body == b"%PDF"
    assert content_type == "application/pdf"


def test_file_reference_is_read_from_disk(tmp_path):
    archive = tmp_path / "bundle.zip"
    archive.write_bytes(b"PK\x03\x04")

    _, uploads = _publish(ClipboardFileReference(str(archive)))

    key, body, content_type = uploads[0]
    assert key.endswith(".zip")
    assert body == b"PK\x03\x04"
    assert content_type == "application/zip"


def test_unreadable_file_reference_fails(tmp_path):
    uploader = FakeUploader()
    with pytest.raises(FileReadError):
        _publish(ClipboardFileReference(str(tmp_path / "missing.txt")), uploader=uploader)
    assert uploader.uploads == []


def test_oversized_file_content_is_not_uploaded(monkeypatch):
    monkeypatch.setattr(publish_service, "MAX_INLINE_FILE_SIZE", 3)
    uploader = FakeUploader()

    with pytest.raises(SizeLimitExceeded):
        _publish(ClipboardFileContent("/tmp/big.bin", b"0123"), uploader=uploader)
    assert uploader.uploads == []


def test_oversized_file_reference_is_not_read(monkeypatch, tmp_path):
    monkeypatch.setattr(publish_service, "MAX_INLINE_FILE_SIZE", 3)
    big = tmp_path / "big.bin"
    big.write_bytes(b"0123")
    uploader = FakeUploader()

    with pytest.raises(SizeLimitExceeded):
        _publish(ClipboardFileReference(str(big)), uploader=uploader)
    assert uploader.uploads == []


@pytest.mark.parametrize("content", [None, ClipboardText("")])
def test_empty_clipboard_raises_no_content(content):
    with pytest.raises(NoContent):
        _publish(content)


def test_upload_error_propagates():
    with pytest.raises(UploadError):
        _publish(ClipboardText("hello"), uploader=FakeUploader(UploadError("denied")))
