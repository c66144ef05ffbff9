"""URL shortening with an ordered list of fallback services.

Each provider is tried in turn; the first one that hands back a non-empty
short URL wins. Exceptions, `None` and empty strings all count as failure and
move on to the next provider. When every provider fails the long URL is
returned unchanged, so callers never have to handle a shortening error.
"""

from concurrent.futures import ThreadPoolExecutor

import pyshorteners
import supybot.log as log


class Shortener:
    def __init__(self, providers, workers=5):
        # providers: ordered list of (name, callable(url) -> short url)
        self.providers = list(providers)
        self.workers = max(1, workers)

    @classmethod
    def from_services(cls, names, timeout=10, api_key=None, workers=5):
        """Build a Shortener from pyshorteners service names, e.g. ['tinyurl', 'isgd']."""
        kwargs = {}
        if api_key:
            kwargs['api_key'] = api_key
        try:
            # Some pyshorteners versions accept timeout; others don't.
            backend = pyshorteners.Shortener(timeout=timeout, **kwargs)
        except TypeError:
            backend = pyshorteners.Shortener(**kwargs)

        providers = [(name, cls._service(backend, name)) for name in names]
        return cls(providers, workers=workers)

    @staticmethod
    def _service(backend, name):
        def shorten(url):
            return getattr(backend, name).short(url)
        return shorten

    def short(self, url):
        for name, provider in self.providers:
            try:
                short_url = provider(url)
            except Exception as e:
                log.debug('GitHubRelay: %s failed to shorten %s -> %r', name, url, e)
                continue
            if short_url and short_url.strip():
                log.debug('GitHubRelay: URL shortened via %s -> %s', name, short_url)
                return short_url.strip()
            log.debug('GitHubRelay: %s returned an empty short URL for %s', name, url)

        if self.providers:
            log.warning('GitHubRelay: URL shortening unavailable; using full URL %s', url)
        return url

    def short_many(self, urls):
        """Shorten every URL in parallel; results keep the input order."""
        urls = list(urls)
        if not urls:
            return []
        if not self.providers:
            return urls
        with ThreadPoolExecutor(max_workers=min(self.workers, len(urls))) as pool:
            return list(pool.map(self.short, urls))
