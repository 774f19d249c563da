from prometheus_client import Counter

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "path", "status_code"],
)

STORE_OPERATIONS = Counter(
    "catalog_store_operations_total",
    "Total number of product store operations",
    ["operation", "outcome"],
)

PAYLOAD_REJECTIONS = Counter(
    "catalog_payload_rejections_total",
    "Total number of rejected request bodies",
    ["reason"],
)
