"""socialsearch: multi-entity search query engine for a social-content platform."""
