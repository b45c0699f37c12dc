"""User-facing strings for the deprecations audit.

Provides:
- UIStrings: Titles, description and table column headers
- format_display_value: Count-aware summary line for failing runs
"""


class UIStrings:
    """Static English strings shown in the report."""

    title = "Avoids deprecated APIs"
    failure_title = "Uses deprecated APIs"
    description = (
        "Deprecated APIs will eventually be removed from the browser. "
        "[Learn more](https://web.dev/deprecations/)."
    )
    display_value_one = "1 warning found"
    display_value_other = "{count} warnings found"
    column_deprecate = "Deprecation / Warning"
    column_source = "Source"


def format_display_value(count: int) -> str:
    """Format the warning count with plural selection.

    Exactly 1 maps to the singular form, every other count (0 included)
    to the plural form showing the literal number.

    Args:
        count: Number of findings (non-negative)

    Returns:
        Summary string, e.g. "1 warning found" or "3 warnings found"
    """
    if count == 1:
        return UIStrings.display_value_one
    return UIStrings.display_value_other.format(count=count)
