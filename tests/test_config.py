from vangogh.config import (
    ADMIN_ROLE,
    SHARED_ROLE,
    Credentials,
    DownloadFilters,
)
from vangogh.properties import OperatingSystem

PASSWORD = "password"


def _credentials():
    creds = Credentials()
    creds.set_username(ADMIN_ROLE, "admin")
    creds.set_password(ADMIN_ROLE, PASSWORD)
    return creds


def test_download_filters_defaults_are_independent():
    first = DownloadFilters()
    second = DownloadFilters()
    first.language_codes.append("en")
    assert second.language_codes == []
    assert first.no_patches is False


def test_download_filters_values():
    filters = DownloadFilters([OperatingSystem.LINUX], ["en"], True)
    assert filters.operating_systems == [OperatingSystem.LINUX]
    assert filters.no_patches is True


def test_check_accepts_matching_credentials():
    assert _credentials().check(ADMIN_ROLE, "admin", PASSWORD) is True


def test_check_rejects_wrong_password():
    assert _credentials().check(ADMIN_ROLE, "admin", "secret") is False


def test_check_rejects_wrong_username():
    assert _credentials().check(ADMIN_ROLE, "someone", PASSWORD) is False


def test_check_rejects_unconfigured_role():
    assert _credentials().check(SHARED_ROLE, "admin", PASSWORD) is False