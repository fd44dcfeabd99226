"""Headless-browser fetching of public Upwork profile pages."""

import asyncio
import logging
from typing import Optional
from urllib.parse import urlparse

from playwright.async_api import Browser, Page, Playwright, Route, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from profile_analyzer.config import FetcherConfig
from profile_analyzer.errors import (
    ContentNotFound,
    FetchTimeout,
    InvalidInput,
    MalformedResponse,
    UpstreamUnavailable,
)

logger = logging.getLogger("profile_analyzer.profile.fetcher")

BROWSER_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--disable-gpu",
]

# Everything else (images, fonts, stylesheets, media) is aborted.
ALLOWED_RESOURCE_TYPES = {"document", "script", "xhr", "fetch"}

# Any one of these means the profile body has rendered.
CONTENT_MARKERS = [
    ".air3-card-section",
    ".cfe-ui-profile-summary-stats",
    ".text-pre-line.break",
]

AUTO_SCROLL_SCRIPT = """() => new Promise((resolve) => {
    let totalHeight = 0;
    const distance = 100;
    const timer = setInterval(() => {
        const scrollHeight = document.body.scrollHeight;
        window.scrollBy(0, distance);
        totalHeight += distance;
        if (totalHeight >= scrollHeight) {
            clearInterval(timer);
            resolve(true);
        }
    }, 100);
})
"""


def validate_profile_url(url, allowed_domain: str = "upwork.com") -> str:
    """Return a normalized profile URL or raise InvalidInput.

    The host must be the marketplace domain or one of its subdomains. A URL
    given without a scheme is treated as https.
    """
    if not url or not isinstance(url, str) or not url.strip():
        raise InvalidInput("Profile URL is required")

    url = url.strip()
    if "://" not in url:
        url = f"https://{url}"

    parsed = urlparse(url)
    host = (parsed.hostname or "").lower()
    domain = allowed_domain.lower()
    if parsed.scheme not in ("http", "https") or not domain or not (
        host == domain or host.endswith(f".{domain}")
    ):
        raise InvalidInput(f"Invalid Upwork profile URL: {url}")

    return url


async def fetch_profile_html(url: str, config: Optional[FetcherConfig] = None) -> str:
    """Load a profile page in headless Chromium and return the rendered HTML.

    The URL is validated before the browser is started. The browser is closed
    on every exit path.
    """
    config = config or FetcherConfig()
    url = validate_profile_url(url, config.allowed_domain)

    async with async_playwright() as playwright:
        browser = await launch_browser(playwright, config)
        try:
            return await fetch_with_browser(browser, url, config)
        finally:
            try:
                await browser.close()
            except PlaywrightError as e:
                logger.warning("Error closing browser: %s", e)


async def launch_browser(playwright: Playwright, config: FetcherConfig) -> Browser:
    """Launch Chromium, retrying since session startup is the flakiest step."""
    last_error = None
    for attempt in range(1, config.launch_attempts + 1):
        try:
            return await playwright.chromium.launch(headless=True, args=BROWSER_ARGS)
        except PlaywrightError as e:
            last_error = e
            logger.warning(
                "Browser launch failed (attempt %d/%d): %s",
                attempt, config.launch_attempts, e,
            )
            if attempt < config.launch_attempts:
                await asyncio.sleep(config.launch_retry_delay)

    raise UpstreamUnavailable(f"Failed to initialize browser: {last_error}") from last_error


async def fetch_with_browser(browser: Browser, url: str, config: FetcherConfig) -> str:
    page = await browser.new_page(
        viewport={"width": config.viewport_width, "height": config.viewport_height},
        user_agent=config.user_agent,
    )
    try:
        await page.route("**/*", _block_heavy_resources)
        await _navigate(page, url, config)
        await _wait_for_content(page, config)
        await page.evaluate(AUTO_SCROLL_SCRIPT)
        html = await page.content()
    finally:
        try:
            await page.close()
        except PlaywrightError as e:
            logger.warning("Error closing page: %s", e)

    if not html or len(html) < config.min_html_length:
        raise MalformedResponse(
            f"Retrieved HTML content is too short ({len(html or '')} chars)"
        )

    logger.info("Fetched %s (%d chars)", url, len(html))
    return html


async def _block_heavy_resources(route: Route):
    if route.request.resource_type in ALLOWED_RESOURCE_TYPES:
        await route.continue_()
    else:
        await route.abort()


async def _navigate(page: Page, url: str, config: FetcherConfig):
    try:
        try:
            response = await page.goto(
                url, wait_until="networkidle", timeout=config.navigation_timeout_ms,
            )
        except PlaywrightTimeoutError:
            logger.warning("Navigation to %s timed out waiting for network idle, retrying", url)
            response = await page.goto(
                url, wait_until="domcontentloaded", timeout=config.fallback_timeout_ms,
            )
    except PlaywrightTimeoutError as e:
        raise FetchTimeout(f"Navigation timeout for {url}: {e}") from e
    except PlaywrightError as e:
        raise UpstreamUnavailable(f"Navigation failed for {url}: {e}") from e

    if response is None:
        raise UpstreamUnavailable(f"Failed to get response from page: {url}")

    if response.status >= 400:
        raise UpstreamUnavailable(f"Page responded with status: {response.status}")


async def _wait_for_content(page: Page, config: FetcherConfig):
    # A selector list matches as soon as any one marker is attached.
    selector = ", ".join(CONTENT_MARKERS)
    for attempt in range(1, config.selector_attempts + 1):
        try:
            await page.wait_for_selector(
                selector, state="attached", timeout=config.selector_timeout_ms,
            )
            return
        except PlaywrightTimeoutError as e:
            logger.warning(
                "Profile content not found (attempt %d/%d): %s",
                attempt, config.selector_attempts, e,
            )
            if attempt < config.selector_attempts:
                await asyncio.sleep(config.selector_retry_delay)

    raise ContentNotFound("Failed to load profile content")
