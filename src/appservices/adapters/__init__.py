"""I/O adapters: the httpx transport, the API client, auth and resource services."""
