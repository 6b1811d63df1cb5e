"""Wire settings, session, HTTP client and store together."""

import httpx

from client.actions import ThunkContext, restore_session
from client.api import ApiClient
from client.config import ClientSettings, get_client_settings
from client.session import FileTokenStorage, Session
from client.reducers import create_store
from client.store import Store


async def connect(
    settings: ClientSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Store:
    """Build a store bound to the configured API and pick up any saved session.

    The caller owns the returned store's API client and should close it with
    ``store.extra.api.aclose()`` on shutdown.
    """
    settings = settings or get_client_settings()
    session = Session(FileTokenStorage(settings.token_file))
    api = ApiClient(session, settings.base_url, timeout=settings.timeout, transport=transport)
    store = create_store(ThunkContext(api=api, session=session))
    store.dispatch(restore_session())
    await store.drain()
    return store
