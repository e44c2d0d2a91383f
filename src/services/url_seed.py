"""Read initial query dimensions from the page address (startup only)."""
import logging

logger = logging.getLogger(__name__)

SEARCH_PARAM = "search"
COMPANY_PARAM = "company"


def seed_from_params(params) -> dict:
    """Return ``search_text``/``company_filter`` overrides from a query mapping.

    Absent or empty parameters are left out so the defaults stand.
    """
    seed = {}
    search = params.get(SEARCH_PARAM)
    if search:
        seed["search_text"] = search
    company = params.get(COMPANY_PARAM)
    if company:
        seed["company_filter"] = company
    logger.debug("URL seed: %r", seed)
    return seed

