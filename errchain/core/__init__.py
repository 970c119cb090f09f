"""Error chain model and call-site resolution.

Nothing here raises on its own behalf except for caller mistakes at the API
boundary (negative skip, non-exception parents, cycles, bad config files).
"""
