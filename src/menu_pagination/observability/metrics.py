"""Custom metrics for menu pagination."""

from opentelemetry import metrics

# Get meter for pagination
meter = metrics.get_meter("menu-pagination")

# Pagination runs counter
pagination_runs_counter = meter.create_counter(
    name="menu_pagination_runs_total",
    description="Total number of pagination runs by surface",
    unit="1",
)

# Pages per run histogram
pages_per_run_histogram = meter.create_histogram(
    name="menu_pagination_pages",
    description="Number of pages produced per pagination run by surface",
    unit="1",
)

category_overflow_counter = meter.create_counter(
    name="menu_pagination_category_overflow_total",
    description="Categories taller than the page budget they were placed on",
    unit="1",
)

consistency_failure_counter = meter.create_counter(
    name="menu_consistency_check_failure_total",
    description="Consistency checks that found differences between surfaces",
    unit="1",
)

consistency_differences_histogram = meter.create_histogram(
    name="menu_consistency_check_differences",
    description="Number of differences found by a failing consistency check",
    unit="1",
)


def record_pagination_run(surface: str, page_count: int) -> None:
    """Record a completed pagination run.

    Args:
        surface: The surface profile name (e.g., "export", "screen")
        page_count: Number of pages produced
    """
    pagination_runs_counter.add(1, {"surface": surface})
    pages_per_run_histogram.record(page_count, {"surface": surface})


def record_category_overflow(surface: str) -> None:
    """Record a category that does not fit its page budget.

    Args:
        surface: The surface profile name
    """
    category_overflow_counter.add(1, {"surface": surface})


def record_consistency_failure(difference_count: int) -> None:
    """Record a consistency check with findings.

    Args:
        difference_count: Number of structural differences found
    """
    consistency_failure_counter.add(1)
    consistency_differences_histogram.record(difference_count)
