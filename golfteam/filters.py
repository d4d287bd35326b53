def format_date(value, placeholder=""):
    """Format a date for dashboards, e.g. ``Jun 02, 2025``."""
    if value is None:
        return placeholder
    return value.strftime("%b %d, %Y")
