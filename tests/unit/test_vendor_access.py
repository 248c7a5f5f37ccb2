"""
Unit tests for vendor temporary access.

Tests credential generation, hashing, and issue/verify against both the
SQLite-backed persistence client and the in-memory recording fake.
"""

import re
from datetime import datetime, timedelta

import pytest

from altare.models import VendorAccess
from altare.services.errors import AccessDeniedError, PersistenceError, ValidationError
from altare.services.persistence import PersistenceClient
from altare.services.vendor_access import (
    ACCESS_ALPHABET,
    ACCESS_CODE_LENGTH,
    STATUS_ACTIVE,
    STATUS_EXPIRED,
    IssuedAccess,
    VendorAccessService,
    credential_status,
    generate_access_code,
    hash_access_password,
    verify_access_password,
)
from tests.mocks import RecordingPersistence

ISSUE_TIME = datetime(2026, 6, 1, 12, 0, 0)


class FakeClock:
    """Settable clock returning naive UTC datetimes."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(ISSUE_TIME)


@pytest.fixture
def service(test_db, clock) -> VendorAccessService:
    return VendorAccessService(PersistenceClient(test_db), now=clock)


class TestGenerateAccessCode:
    """Test access token/password generation."""

    def test_default_length(self):
        assert len(generate_access_code()) == ACCESS_CODE_LENGTH == 12

    def test_uses_unambiguous_alphabet(self):
        for _ in range(50):
            code = generate_access_code()
            assert set(code) <= set(ACCESS_ALPHABET)

    def test_alphabet_excludes_look_alikes(self):
        for char in "01OIl":
            assert char not in ACCESS_ALPHABET
        assert len(ACCESS_ALPHABET) == 32

    def test_custom_length(self):
        assert len(generate_access_code(20)) == 20

    def test_codes_differ(self):
        codes = {generate_access_code() for _ in range(100)}
        assert len(codes) == 100


class TestAccessPasswordHash:
    """Test SHA-256 password digests."""

    def test_known_digest(self):
        assert hash_access_password("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_digest_is_64_lowercase_hex(self):
        digest = hash_access_password(generate_access_code())
        assert re.fullmatch(r"[0-9a-f]{64}", digest)

    def test_deterministic(self):
        assert hash_access_password("7KQ2M9XRTD4H") == hash_access_password("7KQ2M9XRTD4H")

    def test_verify_matches(self):
        digest = hash_access_password("7KQ2M9XRTD4H")
        assert verify_access_password("7KQ2M9XRTD4H", digest) is True
        assert verify_access_password("7KQ2M9XRTD4J", digest) is False


class TestCredentialStatus:
    """Test the active/expired state."""

    def test_active_before_expiry(self):
        assert credential_status(ISSUE_TIME + timedelta(seconds=1), ISSUE_TIME) == STATUS_ACTIVE

    def test_expired_at_expiry(self):
        assert credential_status(ISSUE_TIME, ISSUE_TIME) == STATUS_EXPIRED

    def test_expired_after_expiry(self):
        assert credential_status(ISSUE_TIME - timedelta(days=1), ISSUE_TIME) == STATUS_EXPIRED


class TestIssuedAccess:
    """Test the issue result container."""

    def test_repr_hides_password(self):
        issued = IssuedAccess("vendor-1", "ABCDEFGH2345", "SECRETPASS99", ISSUE_TIME)
        assert "SECRETPASS99" not in repr(issued)
        assert "ABCDEFGH2345" in repr(issued)

    def test_login_link_appends_token(self):
        issued = IssuedAccess("vendor-1", "ABCDEFGH2345", "SECRETPASS99", ISSUE_TIME)
        assert issued.login_link("https://altare.example/vendor/login/") == (
            "https://altare.example/vendor/login/ABCDEFGH2345"
        )


class TestIssueAccess:
    """Test VendorAccessService.issue_access."""

    @pytest.mark.asyncio
    async def test_returns_token_password_and_expiry(self, service, test_vendor):
        issued = await service.issue_access(test_vendor.id)

        assert issued.vendor_id == test_vendor.id
        assert len(issued.access_token) == 12
        assert len(issued.password) == 12
        assert issued.expires_at == ISSUE_TIME + timedelta(days=7)

    @pytest.mark.asyncio
    async def test_stores_only_password_hash(self, service, test_db, test_vendor):
        issued = await service.issue_access(test_vendor.id)

        stored = test_db.query(VendorAccess).filter(VendorAccess.access_token == issued.access_token).one()
        assert stored.password_hash == hash_access_password(issued.password)
        assert stored.password_hash != issued.password
        assert stored.expires_at == issued.expires_at

    @pytest.mark.asyncio
    async def test_each_issue_creates_new_credential(self, service, test_db, test_vendor):
        first = await service.issue_access(test_vendor.id)
        second = await service.issue_access(test_vendor.id)

        assert first.access_token != second.access_token
        assert test_db.query(VendorAccess).filter(VendorAccess.vendor_id == test_vendor.id).count() == 2

    @pytest.mark.asyncio
    async def test_custom_ttl(self, test_db, test_vendor, clock):
        service = VendorAccessService(PersistenceClient(test_db), now=clock, ttl=timedelta(days=2))
        issued = await service.issue_access(test_vendor.id)
        assert issued.expires_at == ISSUE_TIME + timedelta(days=2)

    @pytest.mark.asyncio
    async def test_empty_vendor_id_rejected_without_writes(self, clock):
        persistence = RecordingPersistence()
        service = VendorAccessService(persistence, now=clock)

        with pytest.raises(ValidationError):
            await service.issue_access("")

        assert persistence.calls == []

    @pytest.mark.asyncio
    async def test_insert_failure_raises_persistence_error(self, clock):
        persistence = RecordingPersistence()
        persistence.fail_on("insert", "vendor_access", "disk I/O error")
        service = VendorAccessService(persistence, now=clock)

        with pytest.raises(PersistenceError, match="disk I/O error"):
            await service.issue_access("vendor-1")

    @pytest.mark.asyncio
    async def test_unknown_vendor_fails_on_foreign_key(self, service):
        """The service does not look the vendor up; the database rejects the row."""
        with pytest.raises(PersistenceError):
            await service.issue_access("no-such-vendor")


class TestVerifyAccess:
    """Test VendorAccessService.verify_access."""

    @pytest.mark.asyncio
    async def test_issued_credential_verifies(self, service, test_vendor):
        issued = await service.issue_access(test_vendor.id)

        vendor_id = await service.verify_access(issued.access_token, issued.password)
        assert vendor_id == test_vendor.id

    @pytest.mark.asyncio
    async def test_credential_can_be_reused(self, service, test_vendor):
        issued = await service.issue_access(test_vendor.id)

        for _ in range(3):
            assert await service.verify_access(issued.access_token, issued.password) == test_vendor.id

    @pytest.mark.asyncio
    async def test_valid_until_just_before_expiry(self, service, clock, test_vendor):
        issued = await service.issue_access(test_vendor.id)
        clock.advance(days=7, seconds=-1)

        assert await service.verify_access(issued.access_token, issued.password) == test_vendor.id

    @pytest.mark.asyncio
    async def test_denied_at_expiry(self, service, clock, test_vendor):
        issued = await service.issue_access(test_vendor.id)
        clock.advance(days=7)

        with pytest.raises(AccessDeniedError):
            await service.verify_access(issued.access_token, issued.password)

    @pytest.mark.asyncio
    async def test_wrong_password_denied(self, service, test_vendor):
        issued = await service.issue_access(test_vendor.id)

        with pytest.raises(AccessDeniedError):
            await service.verify_access(issued.access_token, "WRONGPASS234")

    @pytest.mark.asyncio
    async def test_unknown_token_denied(self, service, test_vendor):
        issued = await service.issue_access(test_vendor.id)

        with pytest.raises(AccessDeniedError):
            await service.verify_access("ZZZZZZZZZZZZ", issued.password)

    @pytest.mark.asyncio
    async def test_password_of_other_credential_denied(self, service, test_vendor):
        first = await service.issue_access(test_vendor.id)
        second = await service.issue_access(test_vendor.id)

        with pytest.raises(AccessDeniedError):
            await service.verify_access(first.access_token, second.password)

    @pytest.mark.asyncio
    async def test_denial_message_is_identical(self, service, clock, test_vendor):
        issued = await service.issue_access(test_vendor.id)

        messages = []
        for token, password in [
            ("ZZZZZZZZZZZZ", issued.password),
            (issued.access_token, "WRONGPASS234"),
            ("", issued.password),
        ]:
            with pytest.raises(AccessDeniedError) as exc_info:
                await service.verify_access(token, password)
            messages.append(exc_info.value.message)

        clock.advance(days=8)
        with pytest.raises(AccessDeniedError) as exc_info:
            await service.verify_access(issued.access_token, issued.password)
        messages.append(exc_info.value.message)

        assert len(set(messages)) == 1

    @pytest.mark.asyncio
    async def test_empty_input_denied_without_lookup(self, clock):
        persistence = RecordingPersistence()
        service = VendorAccessService(persistence, now=clock)

        with pytest.raises(AccessDeniedError):
            await service.verify_access("", "")
        with pytest.raises(AccessDeniedError):
            await service.verify_access("ABCDEFGH2345", "")

        assert persistence.calls == []

    @pytest.mark.asyncio
    async def test_duplicate_rows_denied(self, clock):
        """A lookup must match exactly one credential."""
        row = {
            "vendor_id": "vendor-1",
            "access_token": "ABCDEFGH2345",
            "password_hash": hash_access_password("SECRETPASS99"),
            "expires_at": ISSUE_TIME + timedelta(days=7),
        }
        persistence = RecordingPersistence(rows={"vendor_access": [{"id": 1, **row}, {"id": 2, **row}]})
        service = VendorAccessService(persistence, now=clock)

        with pytest.raises(AccessDeniedError):
            await service.verify_access("ABCDEFGH2345", "SECRETPASS99")

    @pytest.mark.asyncio
    async def test_verify_has_no_side_effects(self, clock):
        row = {
            "id": 1,
            "vendor_id": "vendor-1",
            "access_token": "ABCDEFGH2345",
            "password_hash": hash_access_password("SECRETPASS99"),
            "expires_at": ISSUE_TIME + timedelta(days=7),
        }
        persistence = RecordingPersistence(rows={"vendor_access": [row]})
        service = VendorAccessService(persistence, now=clock)

        assert await service.verify_access("ABCDEFGH2345", "SECRETPASS99") == "vendor-1"
        with pytest.raises(AccessDeniedError):
            await service.verify_access("ABCDEFGH2345", "WRONGPASS234")

        assert persistence.writes() == []

    @pytest.mark.asyncio
    async def test_lookup_failure_propagates(self, clock):
        persistence = RecordingPersistence()
        persistence.fail_on("select", "vendor_access", "database is locked")
        service = VendorAccessService(persistence, now=clock)

        with pytest.raises(PersistenceError, match="database is locked"):
            await service.verify_access("ABCDEFGH2345", "SECRETPASS99")


class TestListAccess:
    """Test VendorAccessService.list_access."""

    @pytest.mark.asyncio
    async def test_lists_with_status_and_without_hash(self, service, clock, test_vendor):
        await service.issue_access(test_vendor.id)
        clock.advance(days=6)
        await service.issue_access(test_vendor.id)
        clock.advance(days=2)

        rows = await service.list_access(test_vendor.id)

        assert len(rows) == 2
        assert all("password_hash" not in row for row in rows)
        assert sorted(row["status"] for row in rows) == [STATUS_ACTIVE, STATUS_EXPIRED]

    @pytest.mark.asyncio
    async def test_other_vendors_not_listed(self, service, test_db, test_vendor):
        from tests.fixtures.factories import create_vendor

        other = create_vendor(test_db, name="Juniper Florals", category="Florist")
        await service.issue_access(other.id)

        assert await service.list_access(test_vendor.id) == []
