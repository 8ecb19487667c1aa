"""Product downloads: gathering, grouping and the downloads section."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from html import escape

from vangogh.config import DownloadFilters
from vangogh.languages import LANGUAGE_FLAGS
from vangogh.properties import (
    FALSE_VALUE,
    INCLUDES_GAMES,
    MANUAL_URL_STATUS,
    MANUAL_URL_VALIDATION_RESULT,
    OWNED,
    PRODUCT_TYPE,
    PRODUCT_VALIDATION_RESULT,
    REQUIRES_GAMES,
    OperatingSystem,
)
from vangogh.redux import Redux

MANUAL_URL_VALIDATED = "validated"

_SECTION = "downloads"
_SECTION_TITLE = "Manual Downloads"
_SECTION_STYLE = "downloads.css"

_OS_ORDER = (
    OperatingSystem.WINDOWS,
    OperatingSystem.MACOS,
    OperatingSystem.LINUX,
    OperatingSystem.ANY,
)
_OS_SYMBOLS = {
    OperatingSystem.WINDOWS: "windows",
    OperatingSystem.MACOS: "macos",
    OperatingSystem.LINUX: "linux",
}


class DownloadType(str, enum.Enum):
    """Kinds of downloadable files."""

    INSTALLER = "installer"
    DLC = "dlc"
    EXTRA = "extra"
    MOVIE = "movie"
    ANY = "any"

    def __str__(self) -> str:
        return self.value

    @property
    def title(self) -> str:
        return _DOWNLOAD_TYPE_TITLES.get(self, "")

    @property
    def color(self) -> str:
        return _DOWNLOAD_TYPE_COLORS.get(self, "gray")


_DOWNLOAD_TYPE_TITLES = {
    DownloadType.INSTALLER: "Installer",
    DownloadType.DLC: "DLC",
    DownloadType.EXTRA: "Extra",
    DownloadType.MOVIE: "Movie",
}

_DOWNLOAD_TYPE_COLORS = {
    DownloadType.INSTALLER: "purple",
    DownloadType.DLC: "indigo",
    DownloadType.EXTRA: "orange",
    DownloadType.MOVIE: "red",
}


class ValidationResult(str, enum.Enum):
    """Outcome of validating a downloaded file; declared in display order."""

    UNKNOWN = "unknown"
    SUCCESSFULLY = "validated-successfully"
    WITH_GENERATED_CHECKSUM = "validated-with-generated-checksum"
    UNRESOLVED_MANUAL_URL = "validated-unresolved-manual-url"
    MISSING_LOCAL_FILE = "validated-missing-local-file"
    MISSING_CHECKSUM = "validated-missing-checksum"
    ERROR = "validation-error"
    CHECKSUM_MISMATCH = "validated-checksum-mismatch"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> ValidationResult:
        """Return the result named by value, UNKNOWN if none is."""
        for member in cls:
            if member.value == value:
                return member
        return cls.UNKNOWN

    @property
    def human_readable(self) -> str:
        return _VALIDATION_TITLES[self]

    @property
    def color(self) -> str:
        return _VALIDATION_COLORS[self]

    @property
    def font_weight(self) -> str:
        return _VALIDATION_WEIGHTS[self]


_VALIDATION_TITLES = {
    ValidationResult.UNKNOWN: "Unknown",
    ValidationResult.SUCCESSFULLY: "Validated successfully",
    ValidationResult.WITH_GENERATED_CHECKSUM: "Validated with generated checksum",
    ValidationResult.UNRESOLVED_MANUAL_URL: "Unresolved manual-url",
    ValidationResult.MISSING_LOCAL_FILE: "Missing local file",
    ValidationResult.MISSING_CHECKSUM: "Missing checksum",
    ValidationResult.ERROR: "Validation error",
    ValidationResult.CHECKSUM_MISMATCH: "Checksum mismatch",
}

_VALIDATION_COLORS = {
    ValidationResult.UNKNOWN: "gray",
    ValidationResult.SUCCESSFULLY: "green",
    ValidationResult.WITH_GENERATED_CHECKSUM: "green",
    ValidationResult.UNRESOLVED_MANUAL_URL: "teal",
    ValidationResult.MISSING_LOCAL_FILE: "teal",
    ValidationResult.MISSING_CHECKSUM: "teal",
    ValidationResult.ERROR: "orange",
    ValidationResult.CHECKSUM_MISMATCH: "red",
}

_VALIDATION_WEIGHTS = {
    ValidationResult.UNKNOWN: "normal",
    ValidationResult.SUCCESSFULLY: "bolder",
    ValidationResult.WITH_GENERATED_CHECKSUM: "normal",
    ValidationResult.UNRESOLVED_MANUAL_URL: "normal",
    ValidationResult.MISSING_LOCAL_FILE: "normal",
    ValidationResult.MISSING_CHECKSUM: "normal",
    ValidationResult.ERROR: "bolder",
    ValidationResult.CHECKSUM_MISMATCH: "bolder",
}


@dataclass(frozen=True)
class Download:
    """One downloadable file of a product."""

    manual_url: str
    name: str
    product_title: str
    os: OperatingSystem
    type: DownloadType
    language_code: str = ""
    version: str = ""
    estimated_bytes: int = 0
    is_patch: bool = False


@dataclass(frozen=True)
class DownloadVariant:
    """Downloads sharing a type, version and language."""

    dl_type: DownloadType
    version: str
    lang_code: str


def fmt_bytes(size: int) -> str:
    """Format a byte count with decimal (1000-based) units."""
    unit = 1000
    if size < unit:
        return f"{size} B"
    div, exp = unit, 0
    n = size // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{size / div:.1f} {'kMGTPE'[exp]}B"


def downloads_operating_systems(dls: Iterable[Download]) -> list[OperatingSystem]:
    """Return the operating systems present in dls, in display order."""
    present = {dl.os for dl in dls}
    return [os for os in _OS_ORDER if os in present]


def product_titles(os: OperatingSystem, dls: Iterable[Download]) -> list[str]:
    """Return unique product titles of downloads for os, first seen first."""
    titles: list[str] = []
    for dl in dls:
        if dl.os == os and dl.product_title not in titles:
            titles.append(dl.product_title)
    return titles


def download_variants(
    os: OperatingSystem, title: str, dls: Iterable[Download]
) -> list[DownloadVariant]:
    """Return unique variants of a product's downloads for os, first seen first."""
    variants: list[DownloadVariant] = []
    for dl in dls:
        if dl.os != os or dl.product_title != title:
            continue
        variant = DownloadVariant(dl.type, dl.version, dl.language_code)
        if variant not in variants:
            variants.append(variant)
    return variants


def filter_downloads(
    os: OperatingSystem,
    dls: Iterable[Download],
    product_title: str,
    variant: DownloadVariant,
) -> list[Download]:
    """Return the downloads for os and product_title that belong to variant."""
    return [
        dl
        for dl in dls
        if dl.os == os
        and dl.type == variant.dl_type
        and dl.version == variant.version
        and dl.language_code == variant.lang_code
        and dl.product_title == product_title
    ]


def _link_validation_result(dl: Download, rdx: Redux) -> ValidationResult:
    status = rdx.get_last_val(MANUAL_URL_STATUS, dl.manual_url)
    if status == MANUAL_URL_VALIDATED:
        result = rdx.get_last_val(MANUAL_URL_VALIDATION_RESULT, dl.manual_url)
        if result is not None:
            return ValidationResult.parse(result)
    return ValidationResult.UNKNOWN


def _frow(parts: Iterable[str]) -> str:
    return f'<div class="frow small">{"".join(parts)}</div>'


def _icon_color(symbol: str, color: str) -> str:
    return (
        f'<span class="svg fg-{escape(color)}"><svg class="icon">'
        f'<use href="#{escape(symbol)}"></use></svg></span>'
    )


def _heading(title: str) -> str:
    return f'<span class="heading">{escape(title)}</span>'


def _prop_val(prop: str, value: str) -> str:
    return (
        f'<span class="prop">{escape(prop)}</span>'
        f'<span class="val">{escape(value)}</span>'
    )


def _center(inner: str) -> str:
    return f'<div class="flex-items center">{inner}</div>'


def validation_summary(id: str, dls: Sequence[Download], rdx: Redux) -> str | None:
    """Return the summary of installer and DLC validation, None without any."""
    if all(dl.type == DownloadType.EXTRA for dl in dls):
        return None

    color = "gray"
    pvr = rdx.get_last_val(PRODUCT_VALIDATION_RESULT, id)
    if pvr is not None:
        color = ValidationResult.parse(pvr).color

    counts: dict[ValidationResult, int] = {}
    for dl in dls:
        if dl.type not in (DownloadType.INSTALLER, DownloadType.DLC):
            continue
        result = _link_validation_result(dl, rdx)
        counts[result] = counts.get(result, 0) + 1

    parts = [_icon_color("circle", color), _heading("Installers, DLC")]
    parts.extend(
        _prop_val(result.human_readable, str(counts[result]))
        for result in ValidationResult
        if counts.get(result, 0) > 0
    )
    return _center(_frow(parts))


def _operating_system_heading(os: OperatingSystem) -> str:
    symbol = _OS_SYMBOLS.get(os, "sparkle")
    title = "Goodies" if os == OperatingSystem.ANY else str(os)
    return (
        '<div class="flex-items row align-center">'
        f'<svg class="icon operating-system"><use href="#{escape(symbol)}"></use></svg>'
        f"<h3><span>{escape(title)}</span></h3></div>"
    )


def _download_variant(variant: DownloadVariant) -> str:
    parts = [_icon_color("circle", variant.dl_type.color), _heading(variant.dl_type.title)]
    if variant.lang_code:
        parts.append(_prop_val("Lang", LANGUAGE_FLAGS.get(variant.lang_code, "")))
    if variant.version:
        parts.append(_prop_val("Version", variant.version))
    return _frow(parts)


def _download_link(product_title: str, dl: Download, rdx: Redux) -> str:
    name = dl.product_title if dl.type == DownloadType.DLC else dl.name
    prefix = product_title if product_title in name else ""
    suffix = name[len(product_title):] if name.startswith(product_title) else name

    title_parts = []
    if prefix:
        title_parts.append(f'<span class="fg-gray">{escape(prefix)}</span>')
    if suffix:
        title_parts.append(f'<span class="fg-foreground">{escape(suffix)}</span>')

    result = _link_validation_result(dl, rdx)
    href = "/files?manual-url=" + dl.manual_url
    return (
        f'<a href="{escape(href)}" class="download {escape(str(dl.type))}">'
        '<div class="flex-items column">'
        f'<div class="flex-items row">{"".join(title_parts)}</div>'
        f'<span class="small fg-{result.color} {result.font_weight}">'
        f"{escape(result.human_readable)}</span>"
        f"{_frow([_prop_val('Size', fmt_bytes(dl.estimated_bytes))])}"
        "</div></a>"
    )


def _download_links(
    os: OperatingSystem,
    product_title: str,
    variant: DownloadVariant,
    dls: Sequence[Download],
    rdx: Redux,
) -> str:
    downloads = filter_downloads(os, dls, product_title, variant)
    summary = "Download link" if len(downloads) <= 1 else f"{len(downloads)} download links"
    links = "<hr>".join(_download_link(product_title, dl, rdx) for dl in downloads)
    return (
        f'<details><summary><span class="small">{escape(summary)}</span></summary>'
        f'<div class="flex-items column">{links}</div></details>'
    )


def downloads_section(id: str, dls: Sequence[Download], rdx: Redux) -> str:
    """Return the downloads section document of a product.

    Downloads are grouped by operating system, then product title, then variant.
    """
    parts: list[str] = []
    if rdx.get_last_val(OWNED, id) == FALSE_VALUE:
        parts.append(
            '<span class="fg-gray">Downloads are available for owned products only</span>'
        )
    else:
        summary = validation_summary(id, dls, rdx)
        if summary is not None:
            parts.append(summary)

        oses = downloads_operating_systems(dls)
        for os_index, os in enumerate(oses):
            parts.append(_operating_system_heading(os))
            titles = product_titles(os, dls)
            for title_index, title in enumerate(titles):
                parts.append(f"<h4>{escape(title)}</h4>")
                for variant in download_variants(os, title, dls):
                    parts.append(_download_variant(variant))
                    parts.append(_download_links(os, title, variant, dls, rdx))
                if title_index != len(titles) - 1:
                    parts.append("<hr>")
            if os_index != len(oses) - 1:
                parts.append('<hr class="thick">')

    return (
        '<!DOCTYPE html><html lang="en"><head><meta charset="utf-8">'
        f"<title>{escape(_SECTION_TITLE)}</title>"
        f'<link rel="stylesheet" href="/styles/{_SECTION_STYLE}"></head>'
        f'<body id="{_SECTION}" class="iframe-expand-content">'
        f'<div class="flex-items column">{"".join(parts)}</div></body></html>'
    )


def _only(dls: Iterable[Download], filters: DownloadFilters) -> list[Download]:
    def keep(dl: Download) -> bool:
        if (
            filters.operating_systems
            and dl.os != OperatingSystem.ANY
            and dl.os not in filters.operating_systems
        ):
            return False
        if (
            filters.language_codes
            and dl.language_code
            and dl.language_code not in filters.language_codes
        ):
            return False
        if filters.no_patches and dl.is_patch:
            return False
        return True

    return [dl for dl in dls if keep(dl)]


def get_downloads(
    id: str,
    filters: DownloadFilters,
    rdx: Redux,
    details: Mapping[str, Sequence[Download]],
) -> list[Download]:
    """Return the filtered downloads of a product.

    details maps product ids to their downloads. A pack without details of its
    own combines the downloads of the games it includes, a DLC those of the
    games it requires.
    """
    if id not in details:
        product_type = rdx.get_last_val(PRODUCT_TYPE, id)
        if product_type == "PACK":
            return _related_games_downloads(id, INCLUDES_GAMES, filters, rdx, details)
        if product_type == "DLC":
            return _related_games_downloads(id, REQUIRES_GAMES, filters, rdx, details)
    return _only(details.get(id, ()), filters)


def _related_games_downloads(
    id: str,
    property: str,
    filters: DownloadFilters,
    rdx: Redux,
    details: Mapping[str, Sequence[Download]],
) -> list[Download]:
    rdx.must_have(property)
    related: list[Download] = []
    for related_id in rdx.get_all_values(property, id) or []:
        related.extend(get_downloads(related_id, filters, rdx, details))
    return related