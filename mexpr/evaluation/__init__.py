"""Tree evaluation."""
