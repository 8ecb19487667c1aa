import json
import xml.etree.ElementTree as ET

import pytest

from vangogh.downloads import Download, DownloadType, ValidationResult
from vangogh.downloads_metadata import (
    LOCAL_MANUAL_URL,
    MANUAL_URL_STATUS_UNKNOWN,
    SLUG,
    DownloadMetadata,
    download_metadata,
    md5_checksum,
)
from vangogh.properties import (
    MANUAL_URL_STATUS,
    MANUAL_URL_VALIDATION_RESULT,
    TITLE,
    OperatingSystem,
)
from vangogh.redux import Redux

MD5 = "d41d8cd98f00b204e9800998ecf8427e"


def _installer():
    return Download(
        manual_url="/downloads/game/en1installer0",
        name="Game Setup",
        product_title="Game",
        os=OperatingSystem.WINDOWS,
        type=DownloadType.INSTALLER,
        language_code="en",
        version="1.0",
        estimated_bytes=1234,
    )


def _dlc():
    return Download(
        manual_url="/downloads/game_dlc/en1installer0",
        name="setup_dlc",
        product_title="Game: Expansion",
        os=OperatingSystem.WINDOWS,
        type=DownloadType.DLC,
    )


def test_md5_checksum_reads_attribute(tmp_path):
    path = tmp_path / "setup.exe.xml"
    path.write_text(f'<file name="setup.exe" md5="{MD5}"></file>')
    assert md5_checksum(path) == MD5


def test_md5_checksum_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        md5_checksum(tmp_path / "absent.xml")


def test_md5_checksum_not_xml(tmp_path):
    path = tmp_path / "bad.xml"
    path.write_text("not xml <")
    with pytest.raises(ET.ParseError):
        md5_checksum(path)


def test_metadata_title_slug_and_defaults(tmp_path):
    rdx = Redux({TITLE: {"1": ["Game"]}, SLUG: {"1": ["game"]}})
    metadata = download_metadata("1", [_installer()], rdx, tmp_path)
    assert (metadata.id, metadata.title, metadata.slug) == ("1", "Game", "game")
    link = metadata.download_links[0]
    assert link.name == "Game Setup"
    assert link.status == MANUAL_URL_STATUS_UNKNOWN
    assert link.validation_result == ValidationResult.UNKNOWN.value
    assert link.local_filename == ""


def test_dlc_uses_product_title(tmp_path):
    metadata = download_metadata("1", [_dlc()], Redux({}), tmp_path)
    assert metadata.download_links[0].name == "Game: Expansion"
    assert metadata.download_links[0].type == str(DownloadType.DLC)


def test_local_file_and_checksum(tmp_path):
    dl = _installer()
    rel = "game/setup.exe"
    (tmp_path / "game").mkdir()
    (tmp_path / "game" / "setup.exe.xml").write_text(f'<file md5="{MD5}"/>')
    rdx = Redux(
        {
            LOCAL_MANUAL_URL: {dl.manual_url: [rel]},
            MANUAL_URL_STATUS: {dl.manual_url: ["validated"]},
            MANUAL_URL_VALIDATION_RESULT: {
                dl.manual_url: [ValidationResult.SUCCESSFULLY.value]
            },
        }
    )
    link = download_metadata("1", [dl], rdx, tmp_path).download_links[0]
    assert link.local_filename == "setup.exe"
    assert link.md5 == MD5
    assert link.status == "validated"
    assert link.validation_result == ValidationResult.SUCCESSFULLY.value


def test_missing_checksum_leaves_md5_empty(tmp_path):
    dl = _installer()
    rdx = Redux({LOCAL_MANUAL_URL: {dl.manual_url: ["game/setup.exe"]}})
    link = download_metadata("1", [dl], rdx, tmp_path).download_links[0]
    assert link.local_filename == "setup.exe"
    assert link.md5 == ""


def test_to_json_round_trip(tmp_path):
    metadata = download_metadata("1", [_installer(), _dlc()], Redux({}), tmp_path)
    decoded = json.loads(metadata.to_json())
    assert decoded["id"] == "1"
    assert [link["manual-url"] for link in decoded["download-links"]] == [
        _installer().manual_url,
        _dlc().manual_url,
    ]
    assert decoded["download-links"][0]["estimated-bytes"] == 1234


def test_empty_metadata_json():
    decoded = json.loads(DownloadMetadata(id="7").to_json())
    assert decoded == {"id": "7", "title": "", "slug": "", "download-links": []}