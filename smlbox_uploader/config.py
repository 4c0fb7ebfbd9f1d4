"""
config.py
Settings read from the `.env` file in the working directory
"""

import os

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

DEFAULT_COOKIE_DOMAIN = "smlbox.net"
ENV_EXAMPLE_URL = "https://raw.githubusercontent.com/radist2s/smlbox-playlist-uploader/master/.env.example"


class Config:
    """Settings for one run, passed to every component"""

    def __init__(self, base_url, cookie_username=None, cookie_password=None,
                 m3u_url=None, xspf_url=None, replacements=None,
                 cookie_domain=DEFAULT_COOKIE_DOMAIN, env_file=None):
        if not base_url:
            raise ConfigurationError("Specify `sml_baseurl` in your `.env` file")

        self.base_url = base_url.rstrip('/')
        self.cookie_username = cookie_username
        self.cookie_password = cookie_password
        self.m3u_url = m3u_url
        self.xspf_url = xspf_url
        self.replacements = replacements
        self.cookie_domain = (cookie_domain or DEFAULT_COOKIE_DOMAIN).lstrip('.')
        self.env_file = env_file

    @classmethod
    def from_env(cls, env_file=None):
        """Load `.env` (if any) and build a Config from the environment."""
        if env_file is None:
            env_file = find_dotenv(usecwd=True)
        if env_file:
            load_dotenv(env_file)

        return cls(
            base_url=os.getenv('sml_baseurl', ''),
            cookie_username=os.getenv('sml_cookie_username') or None,
            cookie_password=os.getenv('sml_cookie_password') or None,
            m3u_url=os.getenv('sml_source_playlist_m3u') or None,
            xspf_url=os.getenv('sml_source_playlist_xspf') or None,
            replacements=os.getenv('sml_replacements') or None,
            cookie_domain=os.getenv('sml_cookie_domain') or DEFAULT_COOKIE_DOMAIN,
            env_file=env_file or None,
        )

    def __repr__(self):
        return f"Config(base_url={self.base_url!r}, m3u_url={self.m3u_url!r}, xspf_url={self.xspf_url!r})"
