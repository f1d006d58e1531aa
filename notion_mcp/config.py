"""
Notion MCP Server - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional, Literal


class NotionSettings(BaseSettings):
    """Notion v3 API configuration."""
    api_base_url: str = Field(
        "https://www.notion.so/api/v3", alias="NOTION_API_BASE_URL"
    )
    token: Optional[str] = Field(None, alias="NOTION_TOKEN")
    timeout_seconds: float = Field(30.0, alias="NOTION_TIMEOUT_SECONDS")
    user_time_zone: str = Field("Europe/Vienna", alias="NOTION_USER_TIME_ZONE")
    table_row_limit: int = Field(999, alias="NOTION_TABLE_ROW_LIMIT")

    model_config = {"env_prefix": "", "extra": "ignore"}


class AssemblySettings(BaseSettings):
    """Page assembly limits."""
    # Hosting runtimes cap subrequests at 50; stay below it.
    max_api_calls: int = Field(45, alias="MAX_API_CALLS")
    max_rounds: int = Field(2, alias="MAX_EXPANSION_ROUNDS")
    max_blocks_per_round: int = Field(20, alias="MAX_BLOCKS_PER_ROUND")
    max_view_types: int = Field(1, alias="MAX_COLLECTION_VIEW_TYPES")

    model_config = {"env_prefix": "", "extra": "ignore"}


class MCPSettings(BaseSettings):
    """MCP server configuration."""
    transport: Literal["sse", "stdio"] = Field("sse", alias="MCP_TRANSPORT")
    port: int = Field(8080, alias="MCP_PORT")
    host: str = Field("0.0.0.0", alias="MCP_HOST")

    model_config = {"env_prefix": "", "extra": "ignore"}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    notion: NotionSettings = Field(default_factory=NotionSettings)
    assembly: AssemblySettings = Field(default_factory=AssemblySettings)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
