from unittest import mock

from conftest import FakeResponse, FakeSession
from smlbox_uploader.errors import UpstreamFetchError
from smlbox_uploader.panel import SmlBoxPanel
from smlbox_uploader.playlist import Channel
from smlbox_uploader.sync import iter_uploads, run

ADDED_CHANNELS_PAGE = """
<table id="chTable">
  <tr><td><a href="/channel/delete?id=1">delete</a></td></tr>
  <tr><td><a href="/channel/delete?id=2">delete</a></td></tr>
</table>
"""

M3U = """#EXTM3U
#EXTINF:-1,Sport HD
http://streams.example.com/sport
#EXTINF:-1,News
http://streams.example.com/news
#EXTINF:-1,Movies
http://streams.example.com/movies
"""


def _fake_panel(added=None):
    panel = mock.Mock(spec=SmlBoxPanel)
    panel.add_channel.side_effect = added or (lambda number, channel, name=None: FakeResponse())
    return panel


def test_no_flags_does_nothing(config, capsys):
    panel = _fake_panel()

    summary = run(config, panel=panel)

    assert panel.mock_calls == []
    assert summary.errors == []
    err = capsys.readouterr().err
    assert "--upload" in err
    assert "--delete" in err


def test_delete_phase_continues_after_failure(config, capsys):
    session = FakeSession({
        "https://smlbox.net/channel/list": FakeResponse(text=ADDED_CHANNELS_PAGE),
        "https://smlbox.net/channel/delete?id=1": FakeResponse(status_code=200),
        "https://smlbox.net/channel/delete?id=2": FakeResponse(status_code=500, reason="Internal Server Error"),
    })

    summary = run(config, delete=True, panel=SmlBoxPanel(config, session))

    assert summary.deleted == 1
    assert summary.delete_failed == 1
    assert summary.errors == []
    assert session.urls == [
        "https://smlbox.net/channel/list",
        "https://smlbox.net/channel/delete?id=1",
        "https://smlbox.net/channel/delete?id=2",
    ]
    captured = capsys.readouterr()
    assert "Channel 1 has been deleted" in captured.out
    assert "Channel 2 was not deleted" in captured.err
    assert "500 Internal Server Error" in captured.err


def test_upload_numbers_channels_in_playlist_order(config):
    config.replacements = "Sport HD=Sport;News=News HD;Sport HD=Ignored"
    panel = _fake_panel()
    panel.session = FakeSession({config.m3u_url: FakeResponse(text=M3U)})

    summary = run(config, upload=True, panel=panel)

    assert summary.uploaded == 3
    assert [c.args for c in panel.add_channel.call_args_list] == [
        (1, Channel("http://streams.example.com/sport", "Sport HD"), "Sport"),
        (2, Channel("http://streams.example.com/news", "News"), "News HD"),
        (3, Channel("http://streams.example.com/movies", "Movies"), "Movies"),
    ]


def test_upload_reports_failed_channel_and_continues(config, capsys):
    responses = iter([FakeResponse(), FakeResponse(status_code=400, reason="Bad Request"), FakeResponse()])
    panel = _fake_panel(lambda number, channel, name=None: next(responses))
    channels = [Channel("http://a", "A"), Channel("http://b", "B"), Channel("http://c", "C")]

    results = list(iter_uploads(panel, channels))

    assert [r.number for r in results] == [1, 2, 3]
    assert [r.ok for r in results] == [True, False, True]
    assert results[1].status == 400


def test_uploaded_channel_name_uses_replacement(config):
    config.replacements = "Sport HD=Sport;News=News HD"
    session = FakeSession({config.m3u_url: FakeResponse(text="#EXTM3U\n#EXTINF:-1,Sport HD\nhttp://sport\n")})
    panel = SmlBoxPanel(config, session)
    session.responses[
        "https://smlbox.net/channel/add?channelNumber=1&channelName=Sport&epgOffset=0&channelUrl=http%3A%2F%2Fsport"
    ] = FakeResponse()

    summary = run(config, upload=True, panel=panel)

    assert summary.uploaded == 1
    assert summary.errors == []


def test_phase_errors_are_isolated(config, capsys):
    panel = _fake_panel()
    panel.list_delete_urls.side_effect = UpstreamFetchError("panel unreachable")
    panel.session = FakeSession({config.m3u_url: FakeResponse(status_code=503, reason="Service Unavailable")})

    summary = run(config, upload=True, delete=True, panel=panel)

    assert [type(e) for e in summary.errors] == [UpstreamFetchError, UpstreamFetchError]
    assert str(summary.errors[1]) == "503, Service Unavailable"
    panel.add_channel.assert_not_called()
    err = capsys.readouterr().err
    assert "UpstreamFetchError panel unreachable" in err


def test_upload_without_source_reports_configuration_error(config, capsys):
    config.m3u_url = None
    panel = _fake_panel()
    panel.session = FakeSession()

    summary = run(config, upload=True, panel=panel)

    assert summary.uploaded == 0
    assert "ConfigurationError" in capsys.readouterr().err
