"""
Resource and data source documentation tools for Tofu MCP.

Both tools return the registry's markdown document as-is; when no version is
requested the provider's latest version is resolved first.
"""

from ..clients.registry_client import RegistryClient
from ..config import Config
from ..types import DataSourceDocsRequest, ResourceDocsRequest


async def get_resource_docs_impl(request: ResourceDocsRequest, config: Config) -> str:
    """
    Implementation function for the get-resource-docs tool.

    Args:
        request: Resource documentation request
        config: Configuration instance

    Returns:
        Markdown documentation for the resource

    Raises:
        ResolutionError: If no version was given and the provider has none
        RequestError: If the API request fails
    """
    async with RegistryClient(config) as client:
        return await client.get_resource_docs(
            request.namespace, request.name, request.resource, request.version
        )


async def get_datasource_docs_impl(
    request: DataSourceDocsRequest, config: Config
) -> str:
    """
    Implementation function for the get-datasource-docs tool.

    Args:
        request: Data source documentation request
        config: Configuration instance

    Returns:
        Markdown documentation for the data source

    Raises:
        ResolutionError: If no version was given and the provider has none
        RequestError: If the API request fails
    """
    async with RegistryClient(config) as client:
        return await client.get_datasource_docs(
            request.namespace, request.name, request.data_source, request.version
        )
