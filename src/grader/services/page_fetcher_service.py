# src/grader/services/page_fetcher_service.py
import asyncio
import logging
import time
from typing import Dict, Optional

import aiohttp

logger = logging.getLogger(__name__)


class PageFetcher:
    """
    Fetches a single remote page for grading.
    Manages the aiohttp session and turns transport failures into a
    result dict instead of raising.
    """

    def __init__(self, config: Dict, user_agent: str):
        self.config = config
        self.user_agent = user_agent

        session_config = config.get('session', {})
        self.timeout = float(session_config.get('time_out', 30))
        self.max_redirects = int(session_config.get('max_redirects', 10))

        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def initialize(self):
        if not self.session or self.session.closed:
            timeout_obj = aiohttp.ClientTimeout(total=self.timeout)
            default_headers = {
                'Accept-Encoding': 'gzip, deflate',
                'User-Agent': self.user_agent
            }
            self.session = aiohttp.ClientSession(
                timeout=timeout_obj, headers=default_headers
            )
            logger.debug("PageFetcher: Session initialized (timeout=%ss).", self.timeout)

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()
            logger.debug("PageFetcher: Session closed.")

    async def fetch_page(self, url: str) -> dict:
        """
        GETs the page and reads its body.

        Returns:
            dict: 'status' is the HTTP status on success, -1 for transport
                  errors and timeouts, -2 for anything unexpected. Failed
                  fetches carry an 'error' message.
        """
        start_time = time.perf_counter()

        if not self.session or self.session.closed:
            await self.initialize()

        response_data = None
        timers = {}

        try:
            async with self.session.get(
                    url,
                    allow_redirects=True,
                    max_redirects=self.max_redirects
            ) as response:
                status = response.status
                timers["initial_request"] = round((time.perf_counter() - start_time) * 1000, 2)

                if status >= 400:
                    # The body is still graded, as a browser would still render it
                    logger.warning("HTTP %s for %s", status, url)

                content = await self._read_content(response, timers)
                response_data = {
                    "status": status,
                    "headers": dict(response.headers),
                    "content": content,
                    "timers": timers,
                    "final_url": str(response.url)
                }

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            response_data = {"status": -1, "error": f"{type(e).__name__}: {e}" if str(e) else type(e).__name__}
        except Exception as e:
            logger.error("Internal fetch error for %s: %s", url, e, exc_info=True)
            response_data = {"status": -2, "error": str(e)}
        finally:
            if response_data:
                total_elapsed = round((time.perf_counter() - start_time), 4)
                response_data["elapsed_time"] = total_elapsed
                response_data.setdefault("timers", {})["total_elapsed"] = round(total_elapsed * 1000, 2)

        return response_data

    async def _read_content(self, response, timers) -> str:
        """Helper to read response body text safely."""
        read_start = time.perf_counter()
        try:
            return await response.text()
        except UnicodeDecodeError:
            content_bytes = await response.read()
            return content_bytes.decode('utf-8', errors='replace')
        finally:
            timers["read_content"] = round((time.perf_counter() - read_start) * 1000, 2)
