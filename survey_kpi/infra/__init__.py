"""Infrastructure layer - configuration and external LLM adapters."""
