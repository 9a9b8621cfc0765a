"""Infrastructure: SQL persistence, query executor, matchers, and i18n."""
