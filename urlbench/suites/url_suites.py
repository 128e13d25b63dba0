"""URL parsing and query-string workloads.

Each suite registers the same workload twice: once against the standard
library (``urllib.parse``) and once against ``httpx`` (``httpx.URL`` and
``httpx.QueryParams``).
"""

from urllib.parse import parse_qsl, urlencode, urlsplit

import httpx

from urlbench.bench.suite import Suite

SUITE_TITLE = "urllib.parse vs. httpx"

SAMPLE_URL = "https://www.google.com/path/to/something"
SAMPLE_QUERY = "hello=world"
DEFAULT_ITERATIONS = 100
DEFAULT_MIN_SAMPLES = 1000

URLLIB = "urllib.parse"
HTTPX = "httpx"


def _urllib_set(pairs: list[tuple[str, str]], name: str, value: str) -> None:
    """Replace the first pair named ``name`` and drop the rest, or append."""
    for i, (key, _) in enumerate(pairs):
        if key == name:
            pairs[i] = (name, value)
            pairs[i + 1 :] = [pair for pair in pairs[i + 1 :] if pair[0] != name]
            return
    pairs.append((name, value))


def urllib_set_params(iterations: int = DEFAULT_ITERATIONS) -> str:
    pairs = parse_qsl(SAMPLE_QUERY, keep_blank_values=True)
    for i in range(iterations):
        _urllib_set(pairs, f"key-{i}", f"value-{i}")
    return urlencode(pairs)


def urllib_append_params(iterations: int = DEFAULT_ITERATIONS) -> str:
    pairs = parse_qsl(SAMPLE_QUERY, keep_blank_values=True)
    for i in range(iterations):
        pairs.append((f"key-{i}", f"value-{i}"))
    return urlencode(pairs)


def httpx_set_params(iterations: int = DEFAULT_ITERATIONS) -> str:
    params = httpx.QueryParams(SAMPLE_QUERY)
    for i in range(iterations):
        params = params.set(f"key-{i}", f"value-{i}")
    return str(params)


def httpx_append_params(iterations: int = DEFAULT_ITERATIONS) -> str:
    params = httpx.QueryParams(SAMPLE_QUERY)
    for i in range(iterations):
        params = params.add(f"key-{i}", f"value-{i}")
    return str(params)


def build_suites(iterations: int = DEFAULT_ITERATIONS) -> list[Suite]:
    """Register the URL suites.

    Args:
        iterations: Keys written per query-string workload.

    Returns:
        Suites in report order: URL, URLSearchParams.set, URLSearchParams.append.
    """
    url = Suite.create("URL")
    url.add(URLLIB, lambda: urlsplit(SAMPLE_URL))
    url.add(HTTPX, lambda: httpx.URL(SAMPLE_URL))

    search_params_set = Suite.create("URLSearchParams.set")
    search_params_set.add(URLLIB, lambda: urllib_set_params(iterations))
    search_params_set.add(HTTPX, lambda: httpx_set_params(iterations))

    search_params_append = Suite.create("URLSearchParams.append")
    search_params_append.add(URLLIB, lambda: urllib_append_params(iterations))
    search_params_append.add(HTTPX, lambda: httpx_append_params(iterations))

    return [url, search_params_set, search_params_append]
