"""Dimension weights for the overall score.

Only the ratios between weights matter: they are normalized by their sum
before aggregation, so ``{all: 10}`` and ``{all: 1}`` score identically.
"""

from collections.abc import Mapping

import structlog
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from readiness.config import get_settings
from readiness.exceptions import InvalidWeightsError
from readiness.scoring.models import DIMENSION_IDS, DimensionId

logger = structlog.get_logger(__name__)


class DimensionWeights(BaseModel):
    """Relative weight of each dimension in the overall score."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    llms_txt: float = Field(ge=0.0, allow_inf_nan=False)
    robots_crawlability: float = Field(ge=0.0, allow_inf_nan=False)
    sitemap: float = Field(ge=0.0, allow_inf_nan=False)
    schema_markup: float = Field(ge=0.0, allow_inf_nan=False)
    meta_tags: float = Field(ge=0.0, allow_inf_nan=False)
    bot_access: float = Field(ge=0.0, allow_inf_nan=False)
    content_citeability: float = Field(ge=0.0, allow_inf_nan=False)

    @model_validator(mode="after")
    def reject_all_zero(self) -> "DimensionWeights":
        if self.total() <= 0:
            raise ValueError("at least one dimension weight must be positive")
        return self

    def total(self) -> float:
        return sum(getattr(self, dim.value) for dim in DIMENSION_IDS)

    def normalized(self) -> dict[DimensionId, float]:
        """Weights scaled to sum to 1.0."""
        total = self.total()
        return {dim: getattr(self, dim.value) / total for dim in DIMENSION_IDS}


DEFAULT_DIMENSION_WEIGHTS = DimensionWeights(
    llms_txt=0.10,
    robots_crawlability=0.15,
    sitemap=0.10,
    schema_markup=0.15,
    meta_tags=0.15,
    bot_access=0.10,
    content_citeability=0.25,
)


def parse_weights(weights: DimensionWeights | Mapping[str, float]) -> DimensionWeights:
    """Validate a caller-supplied weight mapping."""
    if isinstance(weights, DimensionWeights):
        return weights

    try:
        return DimensionWeights.model_validate(dict(weights))
    except PydanticValidationError as e:
        raise InvalidWeightsError(
            "Invalid dimension weights: every dimension needs a non-negative "
            "weight and at least one must be positive",
            errors=[
                {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
                for err in e.errors()
            ],
        ) from e


def get_dimension_weights(
    override: DimensionWeights | Mapping[str, float] | None = None,
) -> DimensionWeights:
    """
    Resolve the weights to aggregate with.

    Args:
        override: Explicit caller weights. Takes precedence over settings.

    Returns:
        Caller override, else the SCORING_WEIGHTS setting, else defaults.
    """
    if override is not None:
        return parse_weights(override)

    configured = get_settings().scoring_weights
    if configured is not None:
        weights = parse_weights(configured)
        logger.debug("weights_resolved", source="settings", weights=weights.model_dump())
        return weights

    return DEFAULT_DIMENSION_WEIGHTS
