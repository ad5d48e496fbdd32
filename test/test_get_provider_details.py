"""
Tests for the get_provider_details tool implementation.
"""

from unittest.mock import AsyncMock, patch

import pytest

from tofu_mcp.config import Config
from tofu_mcp.exceptions import RequestError
from tofu_mcp.tools.get_provider_details import (
    format_datasources_section,
    format_provider_details,
    format_resources_section,
    get_provider_details_impl,
)
from tofu_mcp.types import DocItem, Provider, ProviderDetailsRequest


@pytest.fixture
def sample_provider():
    """Provider with its latest version attached."""
    return Provider.model_validate(
        {
            "addr": {"display": "hashicorp/aws", "namespace": "hashicorp", "name": "aws"},
            "description": "The AWS provider",
            "popularity": 1234,
            "link": "https://search.opentofu.org/provider/hashicorp/aws",
            "versions": [{"id": "v5.1.0"}, {"id": "v5.0.9"}],
            "latest_version": {
                "id": "v5.1.0",
                "docs": {
                    "resources": [
                        {"name": "s3_bucket", "description": "Provides a S3 bucket resource."},
                        {"name": "instance", "description": None},
                    ],
                    "datasources": [
                        {"name": "ami", "description": "Get information on an AMI."},
                    ],
                },
            },
        }
    )


class TestDocSections:
    """Test the resource and data source sections."""

    def test_resources_section(self):
        """Test the heading, note, example and bullets."""
        section = format_resources_section(
            [DocItem(name="s3_bucket", description="Bucket")], "aws", "hashicorp"
        )

        assert section.startswith("### Resources (1)")
        assert "(e.g., `aws_s3_bucket`)" in section
        assert (
            'Use `get-resource-docs` with namespace="hashicorp", name="aws", '
            'resource="s3_bucket"' in section
        )
        assert section.endswith("- s3_bucket: Bucket")

    def test_datasources_section(self):
        """Test the data source section uses get-datasource-docs."""
        section = format_datasources_section(
            [DocItem(name="ami", description="AMI")], "aws", "hashicorp"
        )

        assert section.startswith("### Data Sources (1)")
        assert 'data_source="ami"' in section
        assert "- ami: AMI" in section

    def test_empty_sections(self):
        """Test that empty or missing lists render nothing."""
        assert format_resources_section([], "aws", "hashicorp") == ""
        assert format_datasources_section(None, "aws", "hashicorp") == ""

    def test_long_description_is_truncated(self):
        """Test that descriptions over 50 characters are cut to 47 plus an ellipsis."""
        description = "x" * 60
        section = format_resources_section(
            [DocItem(name="thing", description=description)], "aws", "hashicorp"
        )

        assert f"- thing: {'x' * 47}..." in section
        assert "x" * 48 not in section

    def test_description_of_exactly_fifty_characters(self):
        """Test that a 50 character description is kept whole."""
        description = "y" * 50
        section = format_resources_section(
            [DocItem(name="thing", description=description)], "aws", "hashicorp"
        )

        assert section.endswith(f"- thing: {description}")

    def test_missing_description(self):
        """Test the placeholder for a missing description."""
        section = format_resources_section([DocItem(name="thing")], "aws", "hashicorp")

        assert section.endswith("- thing: No description")


class TestFormatProviderDetails:
    """Test provider details formatting."""

    def test_format_provider_details_success(self, sample_provider):
        """Test that all sections are present."""
        result = format_provider_details("aws", "hashicorp", sample_provider)

        assert result.startswith("## Provider: hashicorp/aws\n\nThe AWS provider")
        assert "**Latest Version**: v5.1.0" in result
        assert "**All Versions**: v5.1.0, v5.0.9" in result
        assert "**Popularity Score**: 1234" in result
        assert "**Documentation**: https://search.opentofu.org/provider/hashicorp/aws" in result
        assert "## Latest Version Details (v5.1.0)" in result
        assert "### Resources (2)" in result
        assert "- instance: No description" in result
        assert "### Data Sources (1)" in result

    def test_format_provider_details_with_defaults(self):
        """Test that missing fields fall back to defaults."""
        result = format_provider_details("thing", "acme", Provider())

        assert result.startswith("## Provider: acme/thing")
        assert "No description" in result
        assert "**Latest Version**: Unknown" in result
        assert "**All Versions**: \n" in result
        assert "Documentation" not in result
        assert "Latest Version Details" not in result

    def test_latest_version_without_docs(self, sample_provider):
        """Test a latest version with no docs block."""
        sample_provider.latest_version.docs = None

        result = format_provider_details("aws", "hashicorp", sample_provider)

        assert "## Latest Version Details (v5.1.0)" in result
        assert "### Resources" not in result


class TestGetProviderDetailsImpl:
    """Test the get_provider_details_impl function."""

    @pytest.fixture
    def config(self):
        """Create a test configuration."""
        return Config()

    @pytest.fixture
    def mock_registry_client(self):
        """Create a mock registry client."""
        return AsyncMock()

    @pytest.mark.asyncio
    async def test_get_provider_details(
        self, config, mock_registry_client, sample_provider
    ):
        """Test getting and formatting provider details."""
        mock_registry_client.get_provider_details.return_value = sample_provider
        request = ProviderDetailsRequest(namespace="hashicorp", name="aws")

        with patch(
            "tofu_mcp.tools.get_provider_details.RegistryClient"
        ) as mock_client_class:
            mock_client_class.return_value.__aenter__.return_value = mock_registry_client

            result = await get_provider_details_impl(request, config)

        assert "## Provider: hashicorp/aws" in result
        mock_registry_client.get_provider_details.assert_called_once_with(
            "hashicorp", "aws"
        )

    @pytest.mark.asyncio
    async def test_get_provider_details_not_found(self, config, mock_registry_client):
        """Test that registry errors propagate to the caller."""
        mock_registry_client.get_provider_details.side_effect = RequestError(
            404, "Not Found"
        )
        request = ProviderDetailsRequest(namespace="nope", name="missing")

        with patch(
            "tofu_mcp.tools.get_provider_details.RegistryClient"
        ) as mock_client_class:
            mock_client_class.return_value.__aenter__.return_value = mock_registry_client

            with pytest.raises(RequestError) as exc_info:
                await get_provider_details_impl(request, config)

        assert exc_info.value.status_code == 404
