"""Product videos: origin links and the videos section."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from html import escape
from urllib.parse import urlencode, urlunsplit

from vangogh.properties import VIDEO_DURATION, VIDEO_ID, VIDEO_TITLE
from vangogh.redux import Redux

VIDEO_HOST = "www.youtube.com"


def _video_url(video_id: str) -> str:
    return urlunsplit(("https", VIDEO_HOST, "/watch", urlencode({"v": video_id}), ""))


def format_seconds(ts: int) -> str:
    """Format a duration in seconds as m:ss, or hh:mm:ss from an hour up."""
    if ts == 0:
        return "unknown"
    moment = datetime.fromtimestamp(ts, timezone.utc)
    if moment.hour > 0:
        return f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    return f"{moment.minute}:{moment.second:02d}"


def _parse_int(value: str) -> int | None:
    try:
        number = int(value.strip() if value != value.strip() else value, 10)
    except ValueError:
        return None
    if value != value.strip() or "_" in value:
        return None
    return number


def video_origin_link(video_id: str, title: str, duration: str) -> str:
    """Return a link to the video at its origin, with its duration if known."""
    title = title or "Watch at origin"
    parts = [f'<span class="text-center bolder fg-cyan">{escape(title)}</span>']
    seconds = _parse_int(duration)
    if seconds is not None:
        parts.append(
            '<div class="flex-items center"><div class="frow small">'
            '<span class="prop">Duration</span>'
            f'<span class="val">{escape(format_seconds(seconds))}</span></div></div>'
        )
    return (
        f'<a href="{escape(_video_url(video_id))}" target="_top">'
        f'<div class="flex-items column">{"".join(parts)}</div></a>'
    )


def videos_section(
    video_ids: Sequence[str],
    titles: Mapping[str, str],
    durations: Mapping[str, str],
) -> str:
    """Return the videos section document."""
    parts: list[str] = []
    if not video_ids:
        parts.append(
            '<div class="flex-items center"><span class="fg-gray text-center">'
            "Videos are not available for this product</span></div>"
        )
    parts.append("<hr>".join(
        video_origin_link(vid, titles.get(vid, ""), durations.get(vid, ""))
        for vid in video_ids
    ))
    return (
        '<!DOCTYPE html><html lang="en"><head><meta charset="utf-8">'
        "<title>Videos</title></head>"
        '<body id="videos" class="iframe-expand-content">'
        f'<div class="flex-items column">{"".join(parts)}</div></body></html>'
    )


def video_details(id: str, rdx: Redux) -> tuple[list[str], dict[str, str], dict[str, str]]:
    """Return a product's sorted video ids with their known titles and durations."""
    video_ids = sorted(rdx.get_all_values(VIDEO_ID, id) or [])
    titles: dict[str, str] = {}
    durations: dict[str, str] = {}
    for vid in video_ids:
        title = rdx.get_last_val(VIDEO_TITLE, vid)
        if title is not None:
            titles[vid] = title
        duration = rdx.get_last_val(VIDEO_DURATION, vid)
        if duration is not None:
            durations[vid] = duration
    return video_ids, titles, durations