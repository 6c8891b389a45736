import logging

import requests
from bs4 import BeautifulSoup

from seo_inspector.config import REQUEST_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


class FetchResult:
    def __init__(self, url: str, response: requests.Response, soup: BeautifulSoup):
        self.url = url
        self.response = response
        self.soup = soup


def normalize_url(url: str) -> str:
    url = url.strip()
    if not url.startswith(("http://", "https://")):
        url = f"https://{url}"
    return url


def parse_html(html) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def fetch_page(url: str) -> FetchResult:
    headers = {"User-Agent": USER_AGENT}
    resp = requests.get(url, headers=headers, timeout=REQUEST_TIMEOUT, allow_redirects=True)
    resp.raise_for_status()
    logger.debug("Fetched %s (HTTP %s, %d bytes)", url, resp.status_code, len(resp.content))
    return FetchResult(url=url, response=resp, soup=parse_html(resp.content))
