"""
Provider details tool implementation for Tofu MCP.

This tool retrieves a provider and its latest version from the OpenTofu
Registry and formats them as markdown, including the resources and data
sources the latest version documents.
"""

from ..clients.registry_client import RegistryClient
from ..config import Config
from ..types import DocItem, Provider, ProviderDetailsRequest
from ..utils.text import truncate


def _format_doc_items(items: list[DocItem]) -> str:
    return "\n".join(
        f"- {item.name}: {truncate(item.description) or 'No description'}"
        for item in items
    )


def format_resources_section(
    resources: list[DocItem] | None, provider_name: str, namespace: str
) -> str:
    """
    Format the resources documented by a provider version.

    Args:
        resources: Resource doc items, possibly empty or missing
        provider_name: Provider name, used as the resource type prefix
        namespace: Provider namespace

    Returns:
        Markdown section, or an empty string when there are no resources
    """
    if not resources:
        return ""

    first = resources[0].name
    return f"""### Resources ({len(resources)})
**Note**: When used in opentofu/terraform, the resource names are prefixed with the provider name (e.g., `{provider_name}_{first}`).

**Example**: Use `get-resource-docs` with namespace="{namespace}", name="{provider_name}", resource="{first}" to get documentation for the first resource.

{_format_doc_items(resources)}"""


def format_datasources_section(
    datasources: list[DocItem] | None, provider_name: str, namespace: str
) -> str:
    """
    Format the data sources documented by a provider version.

    Args:
        datasources: Data source doc items, possibly empty or missing
        provider_name: Provider name, used as the data source type prefix
        namespace: Provider namespace

    Returns:
        Markdown section, or an empty string when there are no data sources
    """
    if not datasources:
        return ""

    first = datasources[0].name
    return f"""### Data Sources ({len(datasources)})
**Note**: When used in opentofu/terraform, the data source names are prefixed with the provider name (e.g., `{provider_name}_{first}`).

**Example**: Use `get-datasource-docs` with namespace="{namespace}", name="{provider_name}", data_source="{first}" to get documentation for the first data source.

{_format_doc_items(datasources)}"""


def format_provider_details(name: str, namespace: str, provider: Provider) -> str:
    """
    Format provider details as markdown.

    Args:
        name: Provider name as requested
        namespace: Provider namespace as requested
        provider: Provider data, optionally with its latest version attached

    Returns:
        Formatted markdown string
    """
    display = (provider.addr and provider.addr.display) or f"{namespace}/{name}"
    version_ids = [v.id for v in provider.versions or []]
    latest = version_ids[0] if version_ids else "Unknown"
    popularity = provider.popularity if provider.popularity is not None else 0

    markdown = f"""## Provider: {display}

{provider.description or "No description"}

**Latest Version**: {latest}
**All Versions**: {", ".join(version_ids)}

**Popularity Score**: {popularity}
"""
    if provider.link:
        markdown += f"\n**Documentation**: {provider.link}\n"

    if provider.latest_version:
        version = provider.latest_version
        markdown += f"\n## Latest Version Details ({version.id})\n"

        docs = version.docs
        if docs and docs.resources:
            markdown += f"\n{format_resources_section(docs.resources, name, namespace)}\n"
        if docs and docs.datasources:
            markdown += f"\n{format_datasources_section(docs.datasources, name, namespace)}\n"

    return markdown


async def get_provider_details_impl(
    request: ProviderDetailsRequest, config: Config
) -> str:
    """
    Implementation function for the get-provider-details tool.

    Args:
        request: Provider details request
        config: Configuration instance with API settings

    Returns:
        Formatted provider details as markdown string

    Raises:
        RequestError: If the provider does not exist or the API request fails
    """
    async with RegistryClient(config) as client:
        provider = await client.get_provider_details(request.namespace, request.name)

    return format_provider_details(request.name, request.namespace, provider)
