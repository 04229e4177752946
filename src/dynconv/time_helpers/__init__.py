"""Layout and pattern tables used by time and duration conversion."""
