"""
Shared type definitions for Tofu MCP.

This module contains Pydantic models for tool requests and for the payloads
returned by the OpenTofu Registry API. Payload fields are optional and
unknown fields are preserved; defaults are filled in when rendering.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

SearchType = Literal["provider", "module", "resource", "data-source", "all"]


class SearchRequest(BaseModel):
    """Request model for registry search."""

    query: str = Field(..., min_length=2, description="Search term")
    type: SearchType = Field("all", description="Type of registry items to search for")


class ProviderDetailsRequest(BaseModel):
    """Request model for provider details."""

    namespace: str = Field(..., min_length=1, description="Provider namespace")
    name: str = Field(..., min_length=1, description="Provider name")


class ModuleDetailsRequest(BaseModel):
    """Request model for module details."""

    namespace: str = Field(..., min_length=1, description="Module namespace")
    name: str = Field(..., min_length=1, description="Module name")
    target: str = Field(..., min_length=1, description="Module target platform")


class ResourceDocsRequest(BaseModel):
    """Request model for resource documentation."""

    namespace: str = Field(..., min_length=1, description="Provider namespace")
    name: str = Field(..., min_length=1, description="Provider name")
    resource: str = Field(..., min_length=1, description="Resource name")
    version: str | None = Field(None, description="Provider version")


class DataSourceDocsRequest(BaseModel):
    """Request model for data source documentation."""

    namespace: str = Field(..., min_length=1, description="Provider namespace")
    name: str = Field(..., min_length=1, description="Provider name")
    data_source: str = Field(..., min_length=1, description="Data source name")
    version: str | None = Field(None, description="Provider version")


class RegistryModel(BaseModel):
    """Base for registry payloads; keeps fields the models do not declare."""

    model_config = ConfigDict(extra="allow")


class Address(RegistryModel):
    """Registry address of a provider or module."""

    display: str | None = None
    namespace: str | None = None
    name: str | None = None
    target: str | None = None


class VersionDescriptor(RegistryModel):
    """Version entry in a provider or module index."""

    id: str
    published: str | None = None


class DocItem(RegistryModel):
    """A documentation page listed for a provider version."""

    name: str
    title: str | None = None
    subcategory: str | None = None
    description: str | None = None
    edit_link: str | None = None


class ProviderDocs(RegistryModel):
    """Documentation index for a provider version."""

    index: DocItem | None = None
    resources: list[DocItem] | None = None
    datasources: list[DocItem] | None = None
    functions: list[DocItem] | None = None
    guides: list[DocItem] | None = None


class ProviderVersion(RegistryModel):
    """Detail document for a single provider version."""

    id: str
    published: str | None = None
    docs: ProviderDocs | None = None
    license: Any | None = None
    link: str | None = None


class Provider(RegistryModel):
    """Provider index document, optionally enriched with its latest version."""

    addr: Address | None = None
    description: str | None = None
    popularity: int | float | None = None
    fork_count: int | None = None
    fork_of: Address | None = None
    link: str | None = None
    versions: list[VersionDescriptor] | None = None
    latest_version: ProviderVersion | None = None


class Module(RegistryModel):
    """Module detail document."""

    addr: Address | None = None
    description: str | None = None
    popularity: int | float | None = None
    fork_count: int | None = None
    fork_of: Address | None = None
    versions: list[VersionDescriptor] | None = None


class ProviderList(RegistryModel):
    """Index of all providers."""

    providers: list[Provider] = Field(default_factory=list)


class ModuleList(RegistryModel):
    """Index of all modules."""

    modules: list[Module] = Field(default_factory=list)


class SearchResultItem(RegistryModel):
    """Single registry search hit, discriminated by its ``type`` tag."""

    id: str | None = None
    type: str
    title: str | None = None
    description: str | None = None
    version: str | None = None
    link_variables: dict[str, Any] = Field(default_factory=dict)
