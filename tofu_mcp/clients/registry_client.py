"""
Async OpenTofu Registry client for Tofu MCP.

This module provides a read-only async client for the OpenTofu Registry
documentation API. Responses are parsed into the models in ``tofu_mcp.types``.
"""

from typing import Literal

import httpx

from ..config import Config, get_registry_headers
from ..exceptions import ResolutionError
from ..types import (
    Module,
    ModuleList,
    Provider,
    ProviderList,
    ProviderVersion,
    SearchResultItem,
)
from ..utils.version import resolve_latest_version
from .base import BaseAPIClient

DocKind = Literal["resource", "datasource"]


class RegistryClient(BaseAPIClient):
    """Async client for interacting with the OpenTofu Registry API."""

    def __init__(self, config: Config, client: httpx.AsyncClient | None = None):
        """
        Initialize the registry client.

        Args:
            config: Configuration instance
            client: httpx client to use, or None to create one from config
        """
        self.config = config

        if client is None:
            client = httpx.AsyncClient(
                base_url=str(config.registry_api_url),
                timeout=config.request_timeout,
                headers=get_registry_headers(config),
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            )

        super().__init__(
            client,
            api_name="OpenTofu Registry",
            max_retries=config.max_retries,
        )

    async def search(self, query: str, type: str | None = None) -> list[SearchResultItem]:
        """
        Search the registry.

        Args:
            query: Search query
            type: Optional type tag to keep (case-insensitive); "all" keeps everything

        Returns:
            Matching search results in registry order

        Raises:
            RequestError: If the API request fails
        """
        data = await self._fetch("/registry/docs/search", {"q": query}, query=query)
        results = [SearchResultItem.model_validate(item) for item in data]

        if type and type.lower() != "all":
            wanted = type.lower()
            results = [item for item in results if item.type.lower() == wanted]

        self.logger.debug(
            "Search completed", query=query, type=type, result_count=len(results)
        )
        return results

    async def get_provider_list(self) -> ProviderList:
        """Fetch the index of all providers."""
        data = await self._fetch("/registry/docs/providers/index.json")
        return ProviderList.model_validate(data)

    async def get_module_list(self) -> ModuleList:
        """Fetch the index of all modules."""
        data = await self._fetch("/registry/docs/modules/index.json")
        return ModuleList.model_validate(data)

    async def get_provider_details(self, namespace: str, name: str) -> Provider:
        """
        Get a provider, enriched with its latest version's detail document.

        Args:
            namespace: Provider namespace
            name: Provider name

        Returns:
            Provider with ``latest_version`` set when it has any versions

        Raises:
            RequestError: If the provider or its version document cannot be fetched
        """
        provider = await self._get_provider(namespace, name)

        if provider.versions:
            latest = resolve_latest_version([v.id for v in provider.versions])
            data = await self._fetch(
                f"/registry/docs/providers/{namespace}/{name}/{latest}/index.json",
                provider_id=f"{namespace}/{name}",
                version=latest,
            )
            provider.latest_version = ProviderVersion.model_validate(data)

        return provider

    async def get_module_details(self, namespace: str, name: str, target: str) -> Module:
        """
        Get a module's detail document.

        Args:
            namespace: Module namespace
            name: Module name
            target: Module target platform

        Returns:
            Module details

        Raises:
            RequestError: If the API request fails
        """
        data = await self._fetch(
            f"/registry/docs/modules/{namespace}/{name}/{target}/index.json",
            module_id=f"{namespace}/{name}/{target}",
        )
        return Module.model_validate(data)

    async def get_latest_provider_version(self, namespace: str, name: str) -> str | None:
        """Resolve the latest version id of a provider, or None if it has none."""
        provider = await self._get_provider(namespace, name)
        return resolve_latest_version([v.id for v in provider.versions or []])

    async def get_resource_docs(
        self, namespace: str, name: str, resource: str, version: str | None = None
    ) -> str:
        """Get the markdown documentation of a provider resource."""
        return await self._fetch_markdown_doc("resource", namespace, name, resource, version)

    async def get_datasource_docs(
        self, namespace: str, name: str, data_source: str, version: str | None = None
    ) -> str:
        """Get the markdown documentation of a provider data source."""
        return await self._fetch_markdown_doc(
            "datasource", namespace, name, data_source, version
        )

    async def _get_provider(self, namespace: str, name: str) -> Provider:
        data = await self._fetch(
            f"/registry/docs/providers/{namespace}/{name}/index.json",
            provider_id=f"{namespace}/{name}",
        )
        return Provider.model_validate(data)

    async def _fetch_markdown_doc(
        self,
        kind: DocKind,
        namespace: str,
        name: str,
        doc_name: str,
        version: str | None,
    ) -> str:
        """
        Fetch a resource or data source document for a provider version.

        Args:
            kind: Document kind
            namespace: Provider namespace
            name: Provider name
            doc_name: Resource or data source name without the provider prefix
            version: Provider version, or None for the latest

        Returns:
            Markdown document text

        Raises:
            ResolutionError: If no version is given and the provider has none
            RequestError: If the API request fails
        """
        target_version = version
        if not target_version:
            target_version = await self.get_latest_provider_version(namespace, name)
            if not target_version:
                raise ResolutionError(namespace, name)

        path = (
            f"/registry/docs/providers/{namespace}/{name}/{target_version}"
            f"/{kind}s/{doc_name}.md"
        )
        self.logger.info("Fetching provider documentation", path=path)
        return await self._fetch(path, response_type="text", doc_kind=kind)
