"""Fire Gear Tracker service package."""

__all__: list[str] = []
