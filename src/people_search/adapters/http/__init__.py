"""HTTP adapter – async httpx client with error mapping and retries."""
from people_search.adapters.http.client import HttpxHttpClient, is_transient
from people_search.adapters.http.retry_client import RetryingHttpClient

__all__ = ["HttpxHttpClient", "RetryingHttpClient", "is_transient"]
