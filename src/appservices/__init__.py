"""Async client for the MongoDB Atlas App Services admin API.

Example:
    >>> from appservices import AuthConfig, BasicTokenSource, Client, new_client
    >>> token = await AuthConfig().new_token_from_credentials(public_key, private_key)
    >>> async with Client(new_client(BasicTokenSource(token))) as client:
    ...     apps, _ = await client.apps.list(group_id)
"""

from appservices.adapters.auth import (
    AuthConfig,
    BasicTokenSource,
    TokenAuth,
    new_client,
)
from appservices.adapters.client import Client, check_response, decode_body
from appservices.adapters.query import set_query_params
from appservices.core.config import DEFAULT_AUTH_URL, DEFAULT_BASE_URL, AppSettings
from appservices.core.domain.models import (
    Application,
    ApplicationListOptions,
    EventTrigger,
    EventTriggerConfig,
    EventTriggerRequest,
    Response,
    Token,
    TriggerType,
)
from appservices.core.errors import (
    AppServicesError,
    ArgError,
    AuthError,
    DecodeError,
    ErrorResponse,
    RetrieveError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_AUTH_URL",
    "DEFAULT_BASE_URL",
    "AppServicesError",
    "AppSettings",
    "Application",
    "ApplicationListOptions",
    "ArgError",
    "AuthConfig",
    "AuthError",
    "BasicTokenSource",
    "Client",
    "DecodeError",
    "ErrorResponse",
    "EventTrigger",
    "EventTriggerConfig",
    "EventTriggerRequest",
    "Response",
    "RetrieveError",
    "Token",
    "TokenAuth",
    "TriggerType",
    "check_response",
    "decode_body",
    "new_client",
    "set_query_params",
]
