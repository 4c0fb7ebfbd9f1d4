"""
panel.py
Cookie-authenticated client for the smlbox channel panel
"""

from urllib.parse import urlencode

import requests
from bs4 import BeautifulSoup

from .errors import ConfigurationError, UpstreamFetchError

COOKIE_EXPIRES = "Wed, 01 May 2040 00:00:00 GMT"


class HtmlDocument:
    """Parsed HTML page queried with CSS selectors"""

    def __init__(self, html):
        self.soup = BeautifulSoup(html or '', 'html.parser')

    def select(self, selector):
        return self.soup.select(selector)

    @staticmethod
    def attribute(element, name):
        return element.get(name)

    @staticmethod
    def text(element):
        return element.get_text(strip=True)


def create_session():
    """Plain session without retries; the run is one request at a time"""
    session = requests.Session()
    adapter = requests.adapters.HTTPAdapter(max_retries=0)
    session.mount('http://', adapter)
    session.mount('https://', adapter)
    return session


class SmlBoxPanel:
    def __init__(self, config, session=None):
        self.config = config
        self.base_url = config.base_url
        self.session = session or create_session()
        self.urls = {
            'add': f"{self.base_url}/channel/add",
            'new': f"{self.base_url}/channel/new",
            'list': f"{self.base_url}/channel/list",
        }

    def cookie_header(self):
        username = self.config.cookie_username
        password = self.config.cookie_password

        if not username or not password:
            raise ConfigurationError(
                "Specify `sml_cookie_username`, `sml_cookie_password` in your `.env` file"
            )

        return (
            f"username={username}; password={password}; Path=/; "
            f"Domain=.{self.config.cookie_domain}; Expires={COOKIE_EXPIRES};"
        )

    def fetch(self, url):
        """GET a panel URL; HTTP error statuses are returned, not raised"""
        headers = {'cookie': self.cookie_header()}
        try:
            return self.session.get(url, headers=headers)
        except requests.exceptions.RequestException as exc:
            raise UpstreamFetchError(f"Request to {url} failed: {exc}") from exc

    def fetch_document(self, url):
        # bytes, so the page's own meta charset decides the encoding
        return HtmlDocument(self.fetch(url).content)

    def list_assignable_channel_names(self):
        """Channel names offered by the panel's "new channel" form"""
        document = self.fetch_document(self.urls['new'])
        names = []
        for option in document.select('#channel option'):
            value = document.attribute(option, 'value')
            # an option without a value submits its text
            names.append(value if value is not None else document.text(option))
        return names

    def add_channel(self, channel_number, channel, channel_name=None):
        query = urlencode([
            ('channelNumber', channel_number),
            ('channelName', channel_name or channel.title),
            ('epgOffset', 0),
            ('channelUrl', channel.location),
        ])
        return self.fetch(f"{self.urls['add']}?{query}")

    def list_delete_urls(self):
        """Absolute delete links of every channel currently added"""
        document = self.fetch_document(self.urls['list'])
        delete_urls = []

        for link in document.select('#chTable a[href*="/channel/delete"]'):
            href = document.attribute(link, 'href')
            # the panel mixes absolute and relative links
            if self.base_url not in href:
                href = f"{self.base_url}{href}"
            delete_urls.append(href)

        return delete_urls

    def delete_by_url(self, url):
        return self.fetch(url)
