import base64

import pytest

from internmatch.core.config import get_settings
from internmatch.utils.cv_files import (
    content_disposition, cv_content_type, decode_cv, normalize_cv_base64, read_cv
)
from conftest import PDF_BASE64, PDF_BYTES


def test_content_type_follows_extension():
    assert cv_content_type("cv.PDF") == "application/pdf"
    assert cv_content_type("cv.doc") == "application/msword"
    assert cv_content_type("resume") == "application/pdf"


def test_data_url_prefix_is_dropped():
    assert normalize_cv_base64("data:application/pdf;base64," + PDF_BASE64) == PDF_BASE64


def test_line_wrapped_base64_is_accepted():
    wrapped = base64.encodebytes(PDF_BYTES * 10).decode()
    assert "\n" in wrapped.strip()
    assert decode_cv(wrapped) == PDF_BYTES * 10
    stored = normalize_cv_base64(wrapped)
    assert "\n" not in stored
    assert read_cv(stored) == PDF_BYTES * 10


@pytest.mark.parametrize("encoded", ["not base64!", ""])
def test_garbage_is_rejected(encoded):
    with pytest.raises(ValueError):
        decode_cv(encoded)


def test_size_limit(monkeypatch):
    monkeypatch.setattr(get_settings(), "max_cv_size_mb", 1)
    limit = 1024 * 1024
    assert len(decode_cv(base64.b64encode(b"x" * limit).decode())) == limit
    with pytest.raises(ValueError, match="too large"):
        decode_cv(base64.b64encode(b"x" * (limit + 1)).decode())


@pytest.mark.parametrize("filename,expected", [
    ("amara.pdf", 'inline; filename="amara.pdf"'),
    ("my cv.docx", 'inline; filename="my cv.docx"'),
    ("简历.pdf", "inline; filename=\"cv.pdf\"; filename*=UTF-8''%E7%AE%80%E5%8E%86.pdf"),
    ('say "hi".doc', "inline; filename=\"cv.doc\"; filename*=UTF-8''say%20%22hi%22.doc"),
])
def test_content_disposition(filename, expected):
    value = content_disposition(filename)
    assert value == expected
    value.encode("latin-1")
