"""Schema markup dimension."""

from readiness.scoring.dimensions.base import DimensionResult, ScoreState, deduct
from readiness.scoring.issues import IssueCode
from readiness.scoring.models import PageData

# Required properties for common schema types
SCHEMA_REQUIRED_PROPS: dict[str, list[str]] = {
    "Article": ["headline", "author", "datePublished"],
    "WebPage": ["name", "description"],
    "Organization": ["name", "url"],
    "Product": ["name", "description"],
    "FAQPage": ["mainEntity"],
    "LocalBusiness": ["name", "address"],
}

ENTITY_TYPES = frozenset({"Person", "Organization", "Product", "Place", "Event"})


def score_schema_markup(page: PageData) -> DimensionResult:
    state = ScoreState()
    structured_data = page.extracted.structured_data or []

    if not structured_data:
        deduct(state, IssueCode.NO_STRUCTURED_DATA)
        return state.result()

    # Deduct once, for the first incomplete item
    for item in structured_data:
        schema_type = item.get("@type")
        required = SCHEMA_REQUIRED_PROPS.get(schema_type) if isinstance(schema_type, str) else None
        if not required:
            continue
        missing_props = [prop for prop in required if prop not in item]
        if missing_props:
            deduct(
                state,
                IssueCode.INCOMPLETE_SCHEMA,
                data={"schema_type": schema_type, "missing_props": missing_props},
            )
            break

    if any(not item.get("@type") for item in structured_data):
        deduct(state, IssueCode.INVALID_SCHEMA)

    if not ENTITY_TYPES.intersection(page.extracted.schema_types):
        deduct(state, IssueCode.MISSING_ENTITY_MARKUP)

    return state.result()
