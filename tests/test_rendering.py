"""Tests for server-rendered HTML pages."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from share_api.exceptions import ClipboardError
from share_api.password_gate import fingerprint
from share_api.qr_artifacts import copy_link
from share_api.rendering import (
    escape_html,
    render_file_view,
    render_share_result,
    render_text_artifact,
    render_text_view
)
from share_api.repositories.file_share_repository import FileShare
from share_api.repositories.text_share_repository import TextShare
from share_api.services.access_resolver import ViewSession
from share_api.types import ShareResult

CREATED = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


def _session(record):
    session = ViewSession(record.id if record else "abc", MagicMock(return_value=record))
    session.load()
    return session


class TestEscapeHtml:
    def test_escapes_markup_characters(self):
        assert escape_html("<b>\"Tom\" & 'Jerry'</b>") == (
            "&lt;b&gt;&quot;Tom&quot; &amp; &#039;Jerry&#039;&lt;/b&gt;"
        )

    def test_newlines_become_line_breaks(self):
        assert escape_html("one\ntwo") == "one<br>two"

    def test_ampersand_escaped_first(self):
        assert escape_html("&lt;") == "&amp;lt;"


class TestTextArtifact:
    def test_contains_escaped_content_and_timestamp(self):
        share = TextShare(id="1", content="<script>alert(1)</script>\nbye", created_at=CREATED)

        html = render_text_artifact(share)

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;<br>bye" in html
        assert "Created: " in html
        assert html.startswith("<!DOCTYPE html>")


class TestTextView:
    def test_gated_page_shows_form_not_content(self):
        share = TextShare(id="1", content="hidden", created_at=CREATED, password_hash=fingerprint("pw"))
        html = render_text_view(_session(share))
        assert 'type="password"' in html
        assert "hidden" not in html

    def test_wrong_password_notice(self):
        share = TextShare(id="1", content="hidden", created_at=CREATED, password_hash=fingerprint("pw"))
        session = _session(share)
        session.submit_password("nope")
        assert "Incorrect password" in render_text_view(session)

    def test_unlocked_page_shows_preformatted_content(self):
        share = TextShare(id="1", content="line <1>\nline 2", created_at=CREATED)
        html = render_text_view(_session(share))
        assert '<pre class="message">line &lt;1&gt;\nline 2</pre>' in html

    def test_not_found(self):
        html = render_text_view(_session(None))
        assert "Not found" in html


class TestFileView:
    def test_unlocked_page_links_download(self):
        share = FileShare(
            id="1",
            file_name="report.pdf",
            file_path="k/report.pdf",
            file_size=2048,
            file_type="application/pdf",
            public_url="http://testserver/blobs/k/report.pdf",
            created_at=CREATED,
        )
        html = render_file_view(_session(share))
        assert 'href="http://testserver/blobs/k/report.pdf"' in html
        assert "2.0 KB" in html


class TestShareResult:
    def test_copy_button_reports_same_notice_as_copy_link(self):
        result = ShareResult(
            view_url="http://testserver/view?id=abc", display_name="Hello", share_id="abc"
        )
        page = render_share_result(result)

        with pytest.raises(ClipboardError) as exc_info:
            copy_link(result.view_url, MagicMock(side_effect=OSError("denied")))

        assert 'data-url="http://testserver/view?id=abc"' in page
        assert str(exc_info.value) in page
