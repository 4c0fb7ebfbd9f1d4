"""
sync.py
Delete the panel's channels and/or upload the playlist, one request at a time
"""

import sys
from collections import namedtuple

from termcolor import colored

from .panel import SmlBoxPanel
from .playlist import fetch_playlist
from .replacements import build_replacements, resolve

AVAILABLE_FLAGS = ('upload', 'delete')

ChannelResult = namedtuple('ChannelResult', ['number', 'ok', 'status', 'reason', 'title'])


class SyncSummary:
    """What a run did, per phase"""

    def __init__(self):
        self.deleted = 0
        self.delete_failed = 0
        self.uploaded = 0
        self.upload_failed = 0
        self.errors = []


def _result(number, response, title=None):
    return ChannelResult(
        number=number,
        ok=response.status_code < 400,
        status=response.status_code,
        reason=response.reason,
        title=title,
    )


def iter_deletes(panel):
    """Delete every added channel in listed order, yielding one result each"""
    for index, delete_url in enumerate(panel.list_delete_urls()):
        yield _result(index + 1, panel.delete_by_url(delete_url))


def iter_uploads(panel, channels, replacements=None):
    """Add channels in playlist order; the channel number is the 1-based position"""
    for index, channel in enumerate(channels):
        channel_number = index + 1
        channel_name = resolve(channel.title, replacements)
        response = panel.add_channel(channel_number, channel, channel_name)
        yield _result(channel_number, response, channel.title)


def report_result(result, action):
    label = f"Channel {result.number}"
    if result.title:
        label += f" with name {result.title}"

    if result.ok:
        print(colored(f"[✓] {label} has been {action}", "green"))
    else:
        print(colored(f"[✗] {label} was not {action}", "red"), file=sys.stderr)
        print(colored(f"    {result.status} {result.reason}", "red"), file=sys.stderr)


def print_exception_error(error):
    print(colored(f"[!] {type(error).__name__} {error}", "red"), file=sys.stderr)


def print_required_flags():
    print(colored("[!] Specify at least one of these arguments:", "red"), file=sys.stderr)
    for flag in AVAILABLE_FLAGS:
        print(colored(f"    --{flag}", "white"), file=sys.stderr)


def delete_added_channels(panel, summary):
    print(colored("[*] Deleting channels added to the panel...", "cyan"))
    try:
        for result in iter_deletes(panel):
            report_result(result, "deleted")
            if result.ok:
                summary.deleted += 1
            else:
                summary.delete_failed += 1
    except Exception as e:
        summary.errors.append(e)
        print_exception_error(e)


def upload_playlist_channels(config, panel, summary):
    print(colored("[*] Uploading playlist channels...", "cyan"))
    try:
        channels = fetch_playlist(config, panel.session)
        replacements = build_replacements(config.replacements)
        print(colored(f"[*] Loaded {len(channels)} channels from the playlist", "cyan"))
        for result in iter_uploads(panel, channels, replacements):
            report_result(result, "added")
            if result.ok:
                summary.uploaded += 1
            else:
                summary.upload_failed += 1
    except Exception as e:
        summary.errors.append(e)
        print_exception_error(e)


def run(config, upload=False, delete=False, panel=None):
    """Run the delete phase, then the upload phase; each phase fails on its own"""
    summary = SyncSummary()

    if not (upload or delete):
        print_required_flags()
        return summary

    panel = panel or SmlBoxPanel(config)

    if delete:
        delete_added_channels(panel, summary)

    if upload:
        upload_playlist_channels(config, panel, summary)

    return summary
