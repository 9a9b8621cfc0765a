"""Wire a SearchService for one request (session + viewer)."""

from sqlalchemy.orm import Session

from socialsearch.application.dtos.search import SearchConfig
from socialsearch.application.interfaces import Translator
from socialsearch.application.use_cases.search import (
    SearchService,
    SearchTypeRegistry,
    register_tags_search_type,
)
from socialsearch.core.config import get_settings
from socialsearch.infrastructure.i18n import DictTranslator
from socialsearch.infrastructure.persistence.repositories import (
    AccessContext,
    EntityValueRepository,
    SqlEntityQueryExecutor,
)
from socialsearch.infrastructure.persistence.search.matchers import (
    GroupMatcher,
    ObjectMatcher,
    TagMatcher,
    UserMatcher,
)
from socialsearch.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_search_service(
    db: Session,
    access: AccessContext | None = None,
    config: SearchConfig | None = None,
    translator: Translator | None = None,
) -> SearchService:
    """Build a SearchService with SQL executor, value reader, and tag registration.

    config defaults to SearchConfig.from_settings(get_settings()). Package
    logging is configured on first use.
    """
    setup_logging()
    access = access or AccessContext()
    config = config or SearchConfig.from_settings(get_settings())
    translator = translator or DictTranslator()
    executor = SqlEntityQueryExecutor(db, access)
    values = EntityValueRepository(db, access)

    def build(matcher_cls):
        return matcher_cls(executor, values, config, translator)

    registry = SearchTypeRegistry()
    registry.register(register_tags_search_type)
    logger.debug(
        "Search service for viewer=%s admin=%s: %d profile fields, tag names %s",
        access.viewer_guid,
        access.is_admin,
        len(config.profile_fields),
        list(config.tag_names),
    )
    return SearchService(
        entity_matchers={
            ObjectMatcher.search_type: build(ObjectMatcher),
            GroupMatcher.search_type: build(GroupMatcher),
            UserMatcher.search_type: build(UserMatcher),
        },
        custom_matchers={TagMatcher.search_type: build(TagMatcher)},
        registry=registry,
    )
