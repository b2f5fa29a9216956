"""Profile page fetching.

``ProfileScraper`` is the capability the LinkedIn evaluator depends on. The
default ``HttpProfileScraper`` walks a short, fixed list of request-header
strategies and stops at the first successful response; a headless browser
or an official API client can be dropped in by implementing ``fetch``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

import requests
from loguru import logger


@dataclass
class FetchResult:
    """Outcome of a fetch; ``html`` is empty when nothing was retrieved."""
    html: str = ""
    fetched: bool = False
    status: Optional[int] = None
    attempts: List[str] = field(default_factory=list)


class ProfileScraper(Protocol):
    def fetch(self, url: str) -> FetchResult:
        ...


@dataclass(frozen=True)
class HeaderStrategy:
    name: str
    headers: Dict[str, str]


DEFAULT_STRATEGIES: tuple[HeaderStrategy, ...] = (
    HeaderStrategy("browser", {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
        ),
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,image/apng,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate",
        "DNT": "1",
        "Connection": "keep-alive",
        "Upgrade-Insecure-Requests": "1",
        "Sec-Fetch-Dest": "document",
        "Sec-Fetch-Mode": "navigate",
        "Sec-Fetch-Site": "none",
        "Cache-Control": "max-age=0",
    }),
    HeaderStrategy("alternate-agent", {
        "User-Agent": (
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
            "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
        ),
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.8",
        "Connection": "keep-alive",
    }),
    HeaderStrategy("minimal", {
        "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    }),
)


class HttpProfileScraper:
    """Sequential fallback over header strategies; never raises on network errors."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        strategies: tuple[HeaderStrategy, ...] = DEFAULT_STRATEGIES,
        timeout: float = 15.0,
    ):
        self.session = session or requests.Session()
        self.strategies = strategies
        self.timeout = timeout

    def fetch(self, url: str) -> FetchResult:
        result = FetchResult()
        for strategy in self.strategies:
            try:
                res = self.session.get(url, headers=strategy.headers, timeout=self.timeout)
            except requests.RequestException as e:
                logger.warning("[scraper] {} strategy network error for {}: {}", strategy.name, url, e)
                result.attempts.append(f"{strategy.name}: error {type(e).__name__}")
                continue

            result.status = res.status_code
            result.attempts.append(f"{strategy.name}: {res.status_code}")
            if res.ok:
                result.html = res.text
                result.fetched = True
                logger.info("[scraper] {} strategy ok for {} ({} chars)", strategy.name, url, len(result.html))
                return result
            logger.info("[scraper] {} strategy failed for {} with status {}", strategy.name, url, res.status_code)

        logger.warning("[scraper] all strategies failed for {}: {}", url, " | ".join(result.attempts))
        return result
