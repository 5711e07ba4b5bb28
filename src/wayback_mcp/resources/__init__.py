"""MCP resources: archived pages addressed as ``wayback://{url}/{timestamp}``."""
