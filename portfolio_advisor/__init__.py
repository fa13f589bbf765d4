"""Rule-based portfolio allocation and advice engine."""
