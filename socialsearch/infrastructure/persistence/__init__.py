"""SQL persistence: models, query executor, repositories, and matchers."""
