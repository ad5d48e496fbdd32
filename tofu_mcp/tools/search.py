"""
Registry search tool implementation for Tofu MCP.

Searches the OpenTofu Registry and renders each hit with instructions for the
follow-up tool call that retrieves more detail about it.
"""

from ..clients.registry_client import RegistryClient
from ..config import Config
from ..logging import get_logger
from ..types import SearchRequest, SearchResultItem

logger = get_logger(__name__)

# Search "type" values that differ from the registry's own type tags.
_TYPE_ALIASES = {
    "resource": "provider/resource",
    "data-source": "provider/data-source",
}


def _provider_details_hint(namespace: str, name: str) -> str:
    return (
        f"\n  Provider Details: Use 'get-provider-details' with "
        f'namespace="{namespace}" and name="{name}"'
    )


def format_search_result(item: SearchResultItem) -> str:
    """
    Format a single search result as a text block.

    The block layout depends on the result's ``type`` tag; tags this function
    does not know are reported rather than rejected.

    Args:
        item: Search result from the registry

    Returns:
        Multi-line text describing the result and how to explore it further
    """
    description = (item.description or "").strip()
    result = f"- {item.title or item.id or 'Untitled'} {description} ({item.type})"
    result += f" (latest version: {item.version or 'Unknown'})"

    link = item.link_variables
    namespace = link.get("namespace", "")
    name = link.get("name", "")

    match item.type:
        case "provider":
            result += f"\n  Provider: {namespace}/{name}"
            result += _provider_details_hint(namespace, name)
        case "module":
            target = link.get("target", "")
            result += f"\n  Module: {namespace}/{name} ({target})"
            result += (
                f"\n  Module Details: Use 'get-module-details' with "
                f'namespace="{namespace}", name="{name}", target="{target}"'
            )
        case "provider/resource":
            doc_id = link.get("id", "")
            version_param = f', version="{item.version}"' if item.version else ""
            result += f"\n  Resource: {namespace}/{name} ({doc_id})"
            result += f"\n  Full identifier: {name}_{doc_id}"
            result += (
                f"\n  Resource Docs: Use 'get-resource-docs' with "
                f'namespace="{namespace}", name="{name}", resource="{doc_id}"{version_param}'
            )
            result += _provider_details_hint(namespace, name)
        case "provider/data-source":
            doc_id = link.get("id", "")
            version_param = f', version="{item.version}"' if item.version else ""
            result += f"\n  Data Source: {namespace}/{name} ({doc_id})"
            result += f"\n  Full identifier: {name}_{doc_id}"
            result += (
                f"\n  Data Source Docs: Use 'get-datasource-docs' with "
                f'namespace="{namespace}", name="{name}", data_source="{doc_id}"{version_param}'
            )
            result += _provider_details_hint(namespace, name)
        case _:
            result += f"\n  Unknown type: {item.type}"

    return result


def format_search_results(query: str, results: list[SearchResultItem]) -> str:
    """Format a full result list, or a not-found sentence when it is empty."""
    if not results:
        return f'No results found for "{query}" in the OpenTofu Registry.'

    blocks = "\n\n".join(format_search_result(item) for item in results)
    return f'Found {len(results)} results for "{query}" in the OpenTofu Registry:\n\n{blocks}'


async def search_registry_impl(request: SearchRequest, config: Config) -> str:
    """
    Implementation function for the search-opentofu-registry tool.

    Args:
        request: Validated search request
        config: Configuration instance

    Returns:
        Formatted search results

    Raises:
        RequestError: If the registry request fails
    """
    type_filter = _TYPE_ALIASES.get(request.type, request.type)

    async with RegistryClient(config) as client:
        results = await client.search(request.query, type_filter)

    logger.info(
        "Registry search completed",
        query=request.query,
        type=request.type,
        results_found=len(results),
    )
    return format_search_results(request.query, results)
