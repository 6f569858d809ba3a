"""Tests for view-time access resolution."""

from unittest.mock import MagicMock

import pytest

from share_api.exceptions import EmptyPasswordError, InvalidViewStateError
from share_api.repositories.file_share_repository import FileShareRepository, NewFileShare
from share_api.services.access_resolver import AccessResolver, ViewNotice, ViewSession, ViewState
from share_api.services.share_service import ShareService

ORIGIN = "http://testserver"


@pytest.fixture
def gated_text_id(test_db):
    return ShareService().create_text_share("top secret", ORIGIN, password="secret").share_id


@pytest.fixture
def public_text_id(test_db):
    return ShareService().create_text_share("hello", ORIGIN).share_id


class TestLoad:
    def test_missing_id_is_error(self, test_db):
        session = AccessResolver().open_text(None)
        assert session.state is ViewState.ERROR
        assert session.error == "Missing id"

    def test_blank_id_is_error(self, test_db):
        session = AccessResolver().open_text("   ")
        assert session.state is ViewState.ERROR
        assert session.error == "Missing id"

    def test_unknown_id_is_not_found(self, test_db):
        session = AccessResolver().open_text("does-not-exist")
        assert session.state is ViewState.NOT_FOUND
        assert session.record is None

    def test_fetch_failure_is_error(self):
        fetch = MagicMock(side_effect=RuntimeError("connection refused"))
        session = ViewSession("abc", fetch)
        assert session.load() is ViewState.ERROR
        assert session.error == "Failed to load share"

    def test_public_share_unlocked_immediately(self, public_text_id):
        session = AccessResolver().open_text(public_text_id)
        assert session.state is ViewState.UNLOCKED
        assert session.unlocked_record.content == "hello"

    def test_protected_share_is_gated(self, gated_text_id):
        session = AccessResolver().open_text(gated_text_id)
        assert session.state is ViewState.GATED
        assert session.unlocked_record is None

    def test_load_twice_rejected(self, public_text_id):
        session = AccessResolver().open_text(public_text_id)
        with pytest.raises(InvalidViewStateError):
            session.load()


class TestPasswordAttempts:
    def test_correct_password_unlocks(self, gated_text_id):
        session = AccessResolver().open_text(gated_text_id)
        assert session.submit_password("secret") is ViewState.UNLOCKED
        assert session.unlocked_record.content == "top secret"
        assert session.notice is None

    def test_wrong_password_stays_gated(self, gated_text_id):
        session = AccessResolver().open_text(gated_text_id)
        assert session.submit_password("wrong") is ViewState.GATED
        assert session.notice is ViewNotice.WRONG_PASSWORD
        assert session.unlocked_record is None

    def test_retries_are_unlimited(self, gated_text_id):
        session = AccessResolver().open_text(gated_text_id)
        for attempt in range(20):
            session.submit_password(f"guess-{attempt}")
        assert session.state is ViewState.GATED
        assert session.submit_password("secret") is ViewState.UNLOCKED
        assert session.notice is None

    def test_attempt_is_trimmed(self, gated_text_id):
        session = AccessResolver().open_text(gated_text_id)
        assert session.submit_password("  secret\n") is ViewState.UNLOCKED

    @pytest.mark.parametrize("attempt", [None, "", "   "])
    def test_blank_attempt_rejected_before_compare(self, gated_text_id, attempt, monkeypatch):
        compare = MagicMock()
        monkeypatch.setattr("share_api.services.access_resolver.matches", compare)
        session = AccessResolver().open_text(gated_text_id)

        with pytest.raises(EmptyPasswordError):
            session.submit_password(attempt)

        compare.assert_not_called()
        assert session.state is ViewState.GATED

    def test_attempt_on_public_share_rejected(self, public_text_id):
        session = AccessResolver().open_text(public_text_id)
        with pytest.raises(InvalidViewStateError):
            session.submit_password("anything")

    def test_attempt_on_missing_share_rejected(self, test_db):
        session = AccessResolver().open_text("nope")
        with pytest.raises(InvalidViewStateError):
            session.submit_password("anything")


class TestFileShares:
    def test_gated_file_unlocks_to_download_address(self, test_db):
        from share_api.password_gate import fingerprint

        share = FileShareRepository.insert(NewFileShare(
            file_name="a.pdf",
            file_path="k/a.pdf",
            file_size=1,
            public_url="http://testserver/blobs/k/a.pdf",
            file_type="application/pdf",
            password_hash=fingerprint("pw"),
        ))

        session = AccessResolver().open_file(share.id)
        assert session.state is ViewState.GATED
        session.submit_password("pw")
        assert session.unlocked_record.public_url == "http://testserver/blobs/k/a.pdf"

    def test_text_id_not_found_as_file(self, public_text_id):
        session = AccessResolver().open_file(public_text_id)
        assert session.state is ViewState.NOT_FOUND
