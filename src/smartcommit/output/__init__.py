"""Output reporters — rich terminal and JSON."""
