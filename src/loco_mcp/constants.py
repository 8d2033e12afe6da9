"""Constants used throughout the Loco MCP server."""

# Fallback GraphQL endpoint when LOCO_API_BASE is not configured
DEFAULT_API_BASE = "https://loco-app.expando.dev/api/graphql"

API_TOKEN_ENV = "LOCO_API_TOKEN"
API_BASE_ENV = "LOCO_API_BASE"
SERVICE_TIMEOUT_ENV = "LOCO_SERVICE_TIMEOUT"

# Returned whenever the remote answered but the expected payload is missing or rejected
RETRIEVAL_FAILURE_MESSAGE = "Failed to retrieve data from loco"

NO_PRODUCTS_MESSAGE = "No products found"

# Page size bounds accepted by the product_list tool
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

