"""
Tests for the registry search tool and its result formatting.
"""

from unittest.mock import AsyncMock, patch

import pytest

from tofu_mcp.config import Config
from tofu_mcp.tools.search import (
    format_search_result,
    format_search_results,
    search_registry_impl,
)
from tofu_mcp.types import SearchRequest, SearchResultItem


def _item(**kwargs):
    data = {
        "type": "provider",
        "title": "aws",
        "description": "  The AWS provider  ",
        "version": "v5.1.0",
        "link_variables": {"namespace": "hashicorp", "name": "aws"},
    }
    data.update(kwargs)
    return SearchResultItem.model_validate(data)


class TestFormatSearchResult:
    """Test rendering of individual search results."""

    def test_provider_result(self):
        """Test provider results point at get-provider-details."""
        result = format_search_result(_item())

        assert result.startswith("- aws The AWS provider (provider) (latest version: v5.1.0)")
        assert "Provider: hashicorp/aws" in result
        assert (
            "Use 'get-provider-details' with namespace=\"hashicorp\" and name=\"aws\""
            in result
        )

    def test_module_result(self):
        """Test module results include the target."""
        item = _item(
            type="module",
            title="vpc",
            link_variables={
                "namespace": "terraform-aws-modules",
                "name": "vpc",
                "target": "aws",
            },
        )

        result = format_search_result(item)

        assert "Module: terraform-aws-modules/vpc (aws)" in result
        assert (
            "Use 'get-module-details' with namespace=\"terraform-aws-modules\", "
            'name="vpc", target="aws"' in result
        )

    def test_resource_result(self):
        """Test resource results show the full identifier and version."""
        item = _item(
            type="provider/resource",
            title="aws_s3_bucket",
            link_variables={"namespace": "hashicorp", "name": "aws", "id": "s3_bucket"},
        )

        result = format_search_result(item)

        assert "Resource: hashicorp/aws (s3_bucket)" in result
        assert "Full identifier: aws_s3_bucket" in result
        assert (
            "Use 'get-resource-docs' with namespace=\"hashicorp\", name=\"aws\", "
            'resource="s3_bucket", version="v5.1.0"' in result
        )
        assert "get-provider-details" in result

    def test_resource_result_without_version(self):
        """Test the version parameter is left out when unknown."""
        item = _item(
            type="provider/resource",
            version=None,
            link_variables={"namespace": "hashicorp", "name": "aws", "id": "s3_bucket"},
        )

        result = format_search_result(item)

        assert 'resource="s3_bucket"\n' in result
        assert "version=" not in result
        assert "(latest version: Unknown)" in result

    def test_data_source_result(self):
        """Test data source results point at get-datasource-docs."""
        item = _item(
            type="provider/data-source",
            title="aws_ami",
            link_variables={"namespace": "hashicorp", "name": "aws", "id": "ami"},
        )

        result = format_search_result(item)

        assert "Data Source: hashicorp/aws (ami)" in result
        assert "Full identifier: aws_ami" in result
        assert (
            "Use 'get-datasource-docs' with namespace=\"hashicorp\", name=\"aws\", "
            'data_source="ami", version="v5.1.0"' in result
        )

    def test_unknown_type_falls_back(self):
        """Test that an unrecognized tag renders a fallback line."""
        result = format_search_result(_item(type="provider/function"))

        assert "Unknown type: provider/function" in result

    def test_missing_description(self):
        """Test that a missing description does not fail rendering."""
        result = format_search_result(_item(description=None))

        assert result.startswith("- aws  (provider)")


class TestFormatSearchResults:
    """Test rendering of result lists."""

    def test_no_results(self):
        """Test the not-found sentence."""
        assert (
            format_search_results("zzz", [])
            == 'No results found for "zzz" in the OpenTofu Registry.'
        )

    def test_results_are_joined(self):
        """Test the heading and blank-line separation."""
        text = format_search_results("aws", [_item(), _item(title="other")])

        assert text.startswith('Found 2 results for "aws" in the OpenTofu Registry:\n\n')
        assert "\n\n- other" in text


class TestSearchRegistryImpl:
    """Test the search tool implementation."""

    @pytest.fixture
    def config(self):
        """Create a test configuration."""
        return Config()

    @pytest.fixture
    def mock_registry_client(self):
        """Create a mock registry client."""
        return AsyncMock()

    @pytest.mark.asyncio
    async def test_search_all(self, config, mock_registry_client):
        """Test that "all" is passed through to the client."""
        mock_registry_client.search.return_value = [_item()]
        request = SearchRequest(query="aws")

        with patch("tofu_mcp.tools.search.RegistryClient") as mock_client_class:
            mock_client_class.return_value.__aenter__.return_value = mock_registry_client

            result = await search_registry_impl(request, config)

        assert result.startswith('Found 1 results for "aws"')
        mock_registry_client.search.assert_called_once_with("aws", "all")

    @pytest.mark.asyncio
    async def test_resource_type_maps_to_registry_tag(self, config, mock_registry_client):
        """Test that the resource filter uses the registry's type tag."""
        mock_registry_client.search.return_value = []
        request = SearchRequest(query="s3", type="resource")

        with patch("tofu_mcp.tools.search.RegistryClient") as mock_client_class:
            mock_client_class.return_value.__aenter__.return_value = mock_registry_client

            result = await search_registry_impl(request, config)

        assert result == 'No results found for "s3" in the OpenTofu Registry.'
        mock_registry_client.search.assert_called_once_with("s3", "provider/resource")

    @pytest.mark.asyncio
    async def test_data_source_type_maps_to_registry_tag(
        self, config, mock_registry_client
    ):
        """Test that the data-source filter uses the registry's type tag."""
        mock_registry_client.search.return_value = []
        request = SearchRequest(query="ami", type="data-source")

        with patch("tofu_mcp.tools.search.RegistryClient") as mock_client_class:
            mock_client_class.return_value.__aenter__.return_value = mock_registry_client

            await search_registry_impl(request, config)

        mock_registry_client.search.assert_called_once_with("ami", "provider/data-source")


class TestSearchRequest:
    """Test search request validation."""

    def test_short_query_rejected(self):
        """Test that queries shorter than two characters are rejected."""
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            SearchRequest(query="a")

    def test_unknown_type_rejected(self):
        """Test that types outside the enum are rejected."""
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            SearchRequest(query="aws", type="function")
