"""Tests for the upload boundary checks."""

from __future__ import annotations

import pytest

from chronicler.core.errors import ChroniclerError, ErrorKind
from chronicler.core.upload import (
    UploadOptions,
    decode_upload,
    file_extension,
    is_text_content,
    process_upload,
    sanitize_filename,
    validate_upload,
)


class TestValidateUpload:
    def test_accepts_plain_text(self) -> None:
        validate_upload("input.txt", "text/plain", 100)
        validate_upload("INPUT.TXT", "text/plain; charset=utf-8", 100)
        validate_upload("input.txt", None, 100)

    def test_too_large(self) -> None:
        with pytest.raises(ChroniclerError) as exc_info:
            validate_upload("input.txt", "text/plain", 11, UploadOptions(max_bytes=10))
        assert exc_info.value.kind is ErrorKind.FILE_TOO_LARGE
        assert exc_info.value.kind.http_status == 413

    def test_size_at_limit_accepted(self) -> None:
        validate_upload("input.txt", "text/plain", 10, UploadOptions(max_bytes=10))

    @pytest.mark.parametrize("filename", ["data.csv", "data", "data.txt.exe", "data.pdf"])
    def test_wrong_extension(self, filename: str) -> None:
        with pytest.raises(ChroniclerError) as exc_info:
            validate_upload(filename, "text/plain", 10)
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_TYPE

    def test_wrong_mime(self) -> None:
        with pytest.raises(ChroniclerError) as exc_info:
            validate_upload("input.txt", "application/pdf", 10)
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_TYPE
        assert exc_info.value.details == {"content_type": "application/pdf"}

    @pytest.mark.parametrize("filename", ["", "...", "bad\x00.txt"])
    def test_invalid_filename(self, filename: str) -> None:
        with pytest.raises(ChroniclerError) as exc_info:
            validate_upload(filename, "text/plain", 10)
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_TYPE


class TestHelpers:
    def test_sanitize_filename(self) -> None:
        assert sanitize_filename("../../etc/passwd.txt") == "etcpasswd.txt"
        assert sanitize_filename('in<>:"|?*put.txt') == "input.txt"

    def test_file_extension(self) -> None:
        assert file_extension("a/b/Data.TXT") == ".txt"
        assert file_extension("noext") == ""

    def test_is_text_content(self) -> None:
        assert is_text_content(b"1 2\r\n3\t4\n")
        assert not is_text_content(b"\x00\x01\x02")
        assert is_text_content(b"\xff\xfe1\x00")

    def test_decode_upload_honours_boms(self) -> None:
        assert decode_upload(b"\xef\xbb\xbf1 2") == "1 2"
        assert decode_upload("1 2".encode("utf-16")) == "1 2"

    def test_decode_upload_rejects_invalid_utf8(self) -> None:
        with pytest.raises(ChroniclerError) as exc_info:
            decode_upload(b"1 2 \xff\xfa")
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_TYPE


class TestProcessUpload:
    def test_success(self, sample_content: str) -> None:
        result = process_upload("input.txt", "text/plain", sample_content.encode())
        assert result.filename == "input.txt"
        assert result.size == len(sample_content.encode())
        assert result.parsed.row_count == 6
        assert len(result.file_id) == 32

    def test_file_ids_are_unique(self, sample_content: str) -> None:
        first = process_upload("input.txt", "text/plain", sample_content.encode())
        second = process_upload("input.txt", "text/plain", sample_content.encode())
        assert first.file_id != second.file_id

    def test_binary_rejected(self) -> None:
        with pytest.raises(ChroniclerError) as exc_info:
            process_upload("input.txt", "text/plain", b"\x89PNG\r\n\x1a\n\x00\x00")
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_TYPE

    def test_parse_errors_propagate(self) -> None:
        with pytest.raises(ChroniclerError) as exc_info:
            process_upload("input.txt", "text/plain", b"1 2\nthree 4\n")
        assert exc_info.value.kind is ErrorKind.MALFORMED_LINE
