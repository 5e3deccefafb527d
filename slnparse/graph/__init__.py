"""Graph views over a parsed solution."""
