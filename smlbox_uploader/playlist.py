"""
playlist.py
Download a source playlist (M3U or XSPF) and turn it into Channel records
"""

import re
import xml.etree.ElementTree as ET
from collections import namedtuple

import requests

from .errors import ConfigurationError, UpstreamFetchError

BOM = '\ufeff'

Channel = namedtuple('Channel', ['location', 'title'])

# duration, then optional key="value" or key=value attributes, then the display name
EXTINF_RE = re.compile(r'^#EXTINF:\s*-?[\d.]+((?:\s+[\w-]+=(?:"[^"]*"|[^\s",]+))*)\s*,(.*)$')


def _extinf_name(line):
    match = EXTINF_RE.match(line)
    if match:
        return match.group(2).strip()
    in_quotes = False
    for index, char in enumerate(line):
        if char == '"':
            in_quotes = not in_quotes
        elif char == ',' and not in_quotes:
            return line[index + 1:].strip()
    return ""


def parse_m3u(text):
    """Parse extended M3U text into a list of Channel, in playlist order"""
    channels = []
    current_name = None

    # split on \n only; a trailing \r goes with strip()
    for line in text.split('\n'):
        line = line.strip().lstrip(BOM)

        if not line:
            continue

        if line.startswith('#EXTINF'):
            # a pending entry without a URL is dropped here
            current_name = _extinf_name(line)
        elif line.startswith('#'):
            continue
        elif current_name is not None:
            if current_name:
                channels.append(Channel(location=line, title=current_name))
            current_name = None

    return channels


def _local_name(tag):
    return tag.rsplit('}', 1)[-1] if isinstance(tag, str) else ''


def _first_text(element, name):
    for child in element.iter():
        if child is not element and _local_name(child.tag) == name:
            return (child.text or '').strip()
    return ''


def parse_xspf(text):
    """
    Parse XSPF XML into a list of Channel, skipping incomplete tracks.

    Pass raw bytes so the XML declaration picks the encoding.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise UpstreamFetchError(f"Invalid XSPF playlist: {exc}") from exc

    channels = []
    for track in root.iter():
        if _local_name(track.tag) != 'track':
            continue

        location = _first_text(track, 'location')
        title = _first_text(track, 'title')

        if location and title:
            channels.append(Channel(location=location, title=title))

    return channels


def _download(url, session):
    try:
        response = session.get(url)
    except requests.exceptions.RequestException as exc:
        raise UpstreamFetchError(f"Playlist download failed: {exc}") from exc

    if response.status_code >= 400:
        raise UpstreamFetchError(f"{response.status_code}, {response.reason}")

    return response.content


def download_m3u_playlist(config, session):
    if not config.m3u_url:
        raise ConfigurationError("Specify `sml_source_playlist_m3u` URL in your `.env` file")

    # playlists are UTF-8 whatever charset the server announces
    return parse_m3u(_download(config.m3u_url, session).decode('utf-8-sig', errors='replace'))


def download_xspf_playlist(config, session):
    if not config.xspf_url:
        raise ConfigurationError("Specify `sml_source_playlist_xspf` URL in your `.env` file")

    return parse_xspf(_download(config.xspf_url, session))


def fetch_playlist(config, session):
    """Download the configured source playlist; M3U wins over XSPF"""
    if config.m3u_url:
        return download_m3u_playlist(config, session)
    elif config.xspf_url:
        return download_xspf_playlist(config, session)

    raise ConfigurationError(
        "Specify one of playlist source via `sml_source_playlist_m3u`, "
        "`sml_source_playlist_xspf` vars in your `.env` file"
    )
