# src/identity_kit/observability/names.py

"""Standard metric names for identity-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Archive Metrics
# ============================================================================

# Duration
ARCHIVE_READ_DURATION = "archive_read_duration"

# Counters
ARCHIVE_RECORDS_TOTAL = "archive_records_total"
ARCHIVE_SKIPPED_BLOCKS_TOTAL = "archive_skipped_blocks_total"
ARCHIVE_DIAGNOSTICS_TOTAL = "archive_diagnostics_total"
ARCHIVE_REFERENCES_TOTAL = "archive_references_total"
ARCHIVE_ERRORS_TOTAL = "archive_errors_total"

# Counters (raw input lines consumed, monotonic over reads)
ARCHIVE_LINES_READ = "archive_lines_read"
