"""Downloads metadata for a product, as served to clients in JSON."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from vangogh.downloads import Download, DownloadType, ValidationResult
from vangogh.properties import MANUAL_URL_STATUS, MANUAL_URL_VALIDATION_RESULT, TITLE
from vangogh.redux import Redux

SLUG = "slug"
LOCAL_MANUAL_URL = "local-manual-url"
MANUAL_URL_STATUS_UNKNOWN = "unknown"
APPLICATION_JSON_CONTENT_TYPE = "application/json"


@dataclass
class DownloadLink:
    """One download of a product with its local state."""

    manual_url: str
    name: str
    os: str
    type: str
    language_code: str = ""
    version: str = ""
    estimated_bytes: int = 0
    local_filename: str = ""
    md5: str = ""
    status: str = MANUAL_URL_STATUS_UNKNOWN
    validation_result: str = ValidationResult.UNKNOWN.value

    def to_dict(self) -> dict[str, object]:
        return {
            "manual-url": self.manual_url,
            "name": self.name,
            "local-filename": self.local_filename,
            "md5": self.md5,
            "os": self.os,
            "type": self.type,
            "language-code": self.language_code,
            "version": self.version,
            "estimated-bytes": self.estimated_bytes,
            "status": self.status,
            "validation-result": self.validation_result,
        }


@dataclass
class DownloadMetadata:
    """A product's title, slug and download links."""

    id: str
    title: str = ""
    slug: str = ""
    download_links: list[DownloadLink] = field(default_factory=list)

    def to_json(self) -> str:
        return json.dumps(
            {
                "id": self.id,
                "title": self.title,
                "slug": self.slug,
                "download-links": [link.to_dict() for link in self.download_links],
            },
            ensure_ascii=False,
        )


def md5_checksum(path: str | Path) -> str:
    """Return the md5 attribute of a validation file, empty if it has none.

    Raises OSError when the file cannot be read and ET.ParseError when it is
    not XML.
    """
    root = ET.parse(path).getroot()
    return root.get("md5", "")


def download_metadata(
    id: str,
    dls: Iterable[Download],
    rdx: Redux,
    checksums_dir: str | Path,
) -> DownloadMetadata:
    """Return the downloads metadata of a product.

    Checksums are read from checksums_dir, at the local file's relative path
    with ".xml" appended.
    """
    metadata = DownloadMetadata(
        id=id,
        title=rdx.get_last_val(TITLE, id) or "",
        slug=rdx.get_last_val(SLUG, id) or "",
    )

    for dl in dls:
        link = DownloadLink(
            manual_url=dl.manual_url,
            name=dl.product_title if dl.type == DownloadType.DLC else dl.name,
            os=str(dl.os),
            type=str(dl.type),
            language_code=dl.language_code,
            version=dl.version,
            estimated_bytes=dl.estimated_bytes,
        )

        rel_path = rdx.get_last_val(LOCAL_MANUAL_URL, dl.manual_url)
        if rel_path is not None:
            link.local_filename = PurePosixPath(rel_path).name
            try:
                link.md5 = md5_checksum(Path(checksums_dir) / (rel_path + ".xml"))
            except (OSError, ET.ParseError):
                pass

        status = rdx.get_last_val(MANUAL_URL_STATUS, dl.manual_url)
        if status:
            link.status = status
        result = rdx.get_last_val(MANUAL_URL_VALIDATION_RESULT, dl.manual_url)
        if result:
            link.validation_result = result

        metadata.download_links.append(link)

    return metadata