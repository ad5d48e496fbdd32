"""
Tofu MCP Server.

This module implements the MCP server using FastMCP with tools for
searching the OpenTofu Registry and reading provider, module, resource and
data source documentation.
"""

import time
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Annotated, Any

from fastmcp import FastMCP
from pydantic import BaseModel, Field, ValidationError

from .config import Config, load_config
from .exceptions import TofuMCPError
from .exceptions import ValidationError as TofuValidationError
from .logging import configure_logging, get_logger, log_tool_execution
from .types import (
    DataSourceDocsRequest,
    ModuleDetailsRequest,
    ProviderDetailsRequest,
    ResourceDocsRequest,
    SearchRequest,
    SearchType,
)

# Global configuration and logger
config: Config = load_config()
configure_logging(config)
logger = get_logger(__name__)

REGISTRY_INFO = """The OpenTofu Registry is a public index of providers, modules, resources, and data sources for OpenTofu and Terraform.

You can:
- **Search** for providers, modules, resources, and data sources using the `search-opentofu-registry` tool.
- **Get detailed information** about a provider or module using `get-provider-details` or `get-module-details`.
- **Retrieve documentation** for a specific resource or data source using `get-resource-docs` or `get-datasource-docs`.

**Tips:**
- Do **not** include prefixes like `terraform-provider-` or `terraform-aws-` in names.
- Use simple search terms (e.g., `aws`, `kubernetes`, `s3`, `database`).
- For resources and data sources, use the short name (e.g., `s3_bucket`, `instance`, `ami`).

This MCP server is designed to work with OpenTofu (A fork of HashiCorp Terraform) and provides access to the OpenTofu Registry.
For more details, use the search and info tools above to explore the registry."""


def _load_instructions() -> str:
    """Load server instructions from the packaged static file."""
    instructions_path = Path(__file__).parent / "static" / "instructions.md"
    try:
        return instructions_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Instructions file could not be read", path=str(instructions_path))
        raise FileNotFoundError(
            f"Required instructions file not found at {instructions_path}"
        ) from e


mcp = FastMCP(
    "OpenTofu Registry",
    instructions=_load_instructions(),
)


async def _run_tool(
    tool_name: str,
    request_model: type[BaseModel],
    parameters: dict[str, Any],
    impl: Callable[[Any, Config], Awaitable[str]],
    failure_message: str,
) -> str:
    """
    Validate parameters, run a tool implementation and log the outcome.

    Registry and resolution failures are returned as a sentence starting with
    ``failure_message`` instead of being raised, so the calling agent always
    gets a readable result.

    Args:
        tool_name: Registered tool name, for logging
        request_model: Pydantic model validating the parameters
        parameters: Raw tool parameters
        impl: Tool implementation taking the request and configuration
        failure_message: Prefix of the text returned when the call fails

    Returns:
        Tool output text

    Raises:
        ValidationError: If the parameters do not satisfy the request model
    """
    start_time = time.time()

    try:
        request = request_model(**parameters)
    except ValidationError as e:
        duration_ms = (time.time() - start_time) * 1000
        log_tool_execution(
            logger,
            tool_name,
            parameters,
            duration_ms,
            success=False,
            error="validation_error",
        )
        raise TofuValidationError(f"Invalid parameters: {e}") from e

    try:
        response = await impl(request, config)

    except TofuMCPError as e:
        duration_ms = (time.time() - start_time) * 1000
        log_tool_execution(
            logger, tool_name, parameters, duration_ms, success=False, error=e.code
        )
        return f"{failure_message}: {e.message}"

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        log_tool_execution(
            logger, tool_name, parameters, duration_ms, success=False, error=str(e)
        )
        logger.exception(f"Unexpected error in {tool_name}")
        return f"{failure_message}: {str(e) or type(e).__name__}"

    duration_ms = (time.time() - start_time) * 1000
    log_tool_execution(logger, tool_name, parameters, duration_ms, success=True)
    return response


@mcp.resource(
    "opentofu:registry-info",
    name="opentofu-registry-info",
    description="What the OpenTofu Registry is and how to use the registry tools",
    mime_type="text/markdown",
)
def registry_info() -> str:
    """Describe the OpenTofu Registry and the tools that query it."""
    return REGISTRY_INFO


@mcp.tool(name="search-opentofu-registry")
async def search_registry(
    query: Annotated[
        str,
        Field(
            min_length=2,
            description="Search query for finding OpenTofu components (e.g., 'aws', 'kubernetes', 'database', 's3')",
        ),
    ],
    type: Annotated[
        SearchType, Field(description="Type of registry items to search for")
    ] = "all",
) -> str:
    """
    Search the OpenTofu Registry to find providers, modules, resources, and data sources.

    Use simple terms without prefixes like 'terraform-provider-' or 'terraform-module-'.
    Each result names the follow-up tool and parameters for more detail.
    """
    from .tools.search import search_registry_impl

    return await _run_tool(
        "search-opentofu-registry",
        SearchRequest,
        {"query": query, "type": type},
        search_registry_impl,
        "Error searching the OpenTofu Registry",
    )


@mcp.tool(name="get-provider-details")
async def get_provider_details(
    namespace: Annotated[
        str,
        Field(min_length=1, description="Provider namespace (e.g., 'hashicorp', 'opentofu')"),
    ],
    name: Annotated[
        str,
        Field(
            min_length=1,
            description="Provider name WITHOUT 'terraform-provider-' prefix (e.g., 'aws', 'kubernetes', 'azurerm')",
        ),
    ],
) -> str:
    """
    Get detailed information about a specific OpenTofu provider by namespace and name.

    Do NOT include 'terraform-provider-' prefix in the name. The result lists
    versions and the resources and data sources of the latest version.
    """
    from .tools.get_provider_details import get_provider_details_impl

    return await _run_tool(
        "get-provider-details",
        ProviderDetailsRequest,
        {"namespace": namespace, "name": name},
        get_provider_details_impl,
        f"Failed to get details for provider {namespace}/{name}",
    )


@mcp.tool(name="get-module-details")
async def get_module_details(
    namespace: Annotated[
        str,
        Field(
            min_length=1,
            description="Module namespace without prefix (e.g., 'terraform-aws-modules')",
        ),
    ],
    name: Annotated[
        str,
        Field(
            min_length=1,
            description="Simple module name WITHOUT 'terraform-aws-' or similar prefix (e.g., 'vpc', 's3-bucket')",
        ),
    ],
    target: Annotated[
        str,
        Field(
            min_length=1,
            description="Module target platform (e.g., 'aws', 'kubernetes', 'azurerm')",
        ),
    ],
) -> str:
    """
    Get detailed information about a specific OpenTofu module by namespace, name, and target.

    Use the simple module name, NOT the full repository name.
    """
    from .tools.get_module_details import get_module_details_impl

    return await _run_tool(
        "get-module-details",
        ModuleDetailsRequest,
        {"namespace": namespace, "name": name, "target": target},
        get_module_details_impl,
        f"Failed to get details for module {namespace}/{name} ({target})",
    )


@mcp.tool(name="get-resource-docs")
async def get_resource_docs(
    namespace: Annotated[
        str,
        Field(min_length=1, description="Provider namespace (e.g., 'hashicorp', 'opentofu')"),
    ],
    name: Annotated[
        str,
        Field(
            min_length=1,
            description="Provider name WITHOUT 'terraform-provider-' prefix (e.g., 'aws', 'kubernetes')",
        ),
    ],
    resource: Annotated[
        str,
        Field(
            min_length=1,
            description="Resource name WITHOUT provider prefix (e.g., 's3_bucket', 'instance')",
        ),
    ],
    version: Annotated[
        str | None,
        Field(
            description="Provider version (e.g., 'v4.0.0'). If not specified, latest version will be used"
        ),
    ] = None,
) -> str:
    """
    Get detailed documentation for a specific OpenTofu resource by provider namespace, provider name, and resource name.
    """
    from .tools.get_docs import get_resource_docs_impl

    return await _run_tool(
        "get-resource-docs",
        ResourceDocsRequest,
        {"namespace": namespace, "name": name, "resource": resource, "version": version},
        get_resource_docs_impl,
        f"Failed to get documentation for resource {name}_{resource}",
    )


@mcp.tool(name="get-datasource-docs")
async def get_datasource_docs(
    namespace: Annotated[
        str,
        Field(min_length=1, description="Provider namespace (e.g., 'hashicorp', 'opentofu')"),
    ],
    name: Annotated[
        str,
        Field(
            min_length=1,
            description="Provider name WITHOUT 'terraform-provider-' prefix (e.g., 'aws', 'kubernetes')",
        ),
    ],
    data_source: Annotated[
        str,
        Field(
            min_length=1,
            description="Data source name WITHOUT provider prefix (e.g., 'ami', 'vpc')",
        ),
    ],
    version: Annotated[
        str | None,
        Field(
            description="Provider version (e.g., 'v4.0.0'). If not specified, latest version will be used"
        ),
    ] = None,
) -> str:
    """
    Get detailed documentation for a specific OpenTofu data source by provider namespace, provider name, and data source name.
    """
    from .tools.get_docs import get_datasource_docs_impl

    return await _run_tool(
        "get-datasource-docs",
        DataSourceDocsRequest,
        {
            "namespace": namespace,
            "name": name,
            "data_source": data_source,
            "version": version,
        },
        get_datasource_docs_impl,
        f"Failed to get documentation for data source {name}_{data_source}",
    )


def main(transport_config=None):
    """
    Run the MCP server with specified transport configuration.

    Args:
        transport_config: Transport configuration (None = default STDIO)
    """
    logger.info("Starting Tofu MCP server", config=config.model_dump(mode="json"))

    if transport_config is None or transport_config.mode == "stdio":
        mcp.run()
    elif transport_config.mode == "http":
        logger.info(
            f"Starting stateless HTTP server on {transport_config.host}:{transport_config.port}"
        )
        mcp.run(
            transport="http",
            host=transport_config.host,
            port=transport_config.port,
            stateless_http=True,
        )
    else:
        raise ValueError(f"Unsupported transport mode: {transport_config.mode}")


if __name__ == "__main__":
    main()
