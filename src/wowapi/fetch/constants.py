"""HTTP constants for the fetch pipeline."""

# HTTP Status Code Ranges
HTTP_STATUS_OK_MIN = 200
HTTP_STATUS_OK_MAX = 300
HTTP_STATUS_NOT_MODIFIED = 304
HTTP_STATUS_NOT_FOUND = 404

# Cached envelopes younger than this are returned without contacting the origin
FRESHNESS_WINDOW_SECONDS = 5 * 60

# Query parameter carrying the comma-joined field selector
FIELDS_QUERY_PARAM = "fields"
