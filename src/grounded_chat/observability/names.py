# src/grounded_chat/observability/names.py

"""Standard metric names for grounded-chat observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# LLM Metrics
# ============================================================================

# Duration
LLM_COMPLETION_DURATION = "llm_completion_duration"

# Counters
LLM_REQUESTS_TOTAL = "llm_requests_total"

# Counters (token usage - monotonic over time for cost/rate tracking)
LLM_TOKENS_PROMPT = "llm_tokens_prompt"
LLM_TOKENS_COMPLETION = "llm_tokens_completion"
LLM_TOKENS_TOTAL = "llm_tokens_total"


# ============================================================================
# Parsing Metrics
# ============================================================================

# Duration
PARSING_DURATION = "parsing_duration"

# Counters
PARSING_PAGES_TOTAL = "parsing_pages_total"


# ============================================================================
# Chunking Metrics
# ============================================================================

# Duration
CHUNKING_DURATION = "chunking_duration"

# Counters (chunks accumulate over time)
CHUNKING_CHUNKS_CREATED = "chunking_chunks_created"


# ============================================================================
# Ranking Metrics
# ============================================================================

# Duration
RANKING_DURATION = "ranking_duration"

# Counters
RANKING_CANDIDATES_TOTAL = "ranking_candidates_total"
RANKING_MATCHES_TOTAL = "ranking_matches_total"


# ============================================================================
# Generation Metrics
# ============================================================================

# Duration
GENERATION_DURATION = "generation_duration"

# Counters
GENERATION_REQUESTS_TOTAL = "generation_requests_total"
GENERATION_ERRORS_TOTAL = "generation_errors_total"
