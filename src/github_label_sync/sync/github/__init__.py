"""GitHub REST access for label sync."""
