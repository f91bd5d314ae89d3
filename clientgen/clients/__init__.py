# noqa: D104
"""Client generators.

Each client style is exposed as a ClientGeneratorsBuilder bundling the
per-operation generator with its group header, footer, dependencies and title.
"""

from clientgen.clients.axios import axios_client_builder, axios_functions_client_builder
from clientgen.clients.base import ClientGeneratorsBuilder, ClientOutput, Transport
from clientgen.clients.swr import swr_client_builder

CLIENT_BUILDERS: dict[str, ClientGeneratorsBuilder] = {
    "axios": axios_client_builder,
    "axios-functions": axios_functions_client_builder,
    "swr": swr_client_builder,
}


def get_client_builder(client: str) -> ClientGeneratorsBuilder:
    """Return the builder bundle of a client style."""
    try:
        return CLIENT_BUILDERS[client]
    except KeyError:
        msg = f"Unknown client '{client}'. Expected one of: {', '.join(CLIENT_BUILDERS)}"
        raise ValueError(msg) from None


__all__ = [
    "CLIENT_BUILDERS",
    "ClientGeneratorsBuilder",
    "ClientOutput",
    "Transport",
    "get_client_builder",
]
