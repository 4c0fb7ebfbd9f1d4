"""
SmlBox Uploader - Sync an IPTV playlist into the smlbox channel panel.

Features:
- M3U and XSPF playlist sources
- Channel title rewrite rules
- Bulk delete of every channel already added to the panel
- Ordered upload with per-channel success reporting

Usage:
    smlbox-uploader --delete --upload
    smlu --upload
"""

__version__ = "1.0.0"
__author__ = "radist2s"
__license__ = "MIT"
