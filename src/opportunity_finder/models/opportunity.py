"""Opportunity records as returned by the generative model."""

from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


NonEmptyStr = Annotated[str, AfterValidator(_not_blank)]
ScaleScore = Annotated[float, Field(ge=1, le=10)]


class Rating(str, Enum):
    """Acceptance probability rating. Values are the literals the model returns."""

    HIGH = "Alta"
    MEDIUM = "Media"
    LOW = "Baja"


class CamelModel(BaseModel):
    """Base for models whose wire names are camelCase."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ProposalEmail(CamelModel):
    """Sales proposal addressed to the business manager."""

    subject: NonEmptyStr
    body: NonEmptyStr


class AcceptanceProbability(CamelModel):
    """Model-estimated likelihood that the proposal is accepted."""

    rating: Rating
    justification: NonEmptyStr
    score: ScaleScore


class OpportunityRecord(CamelModel):
    """One generated business need plus proposed AI solution."""

    sector: NonEmptyStr = Field(..., description="Broad industry category")
    business_type: NonEmptyStr = Field(..., alias="businessType")
    manager_email: NonEmptyStr = Field(
        ...,
        alias="managerEmail",
        description="Named individual, not a role alias (not enforced)",
    )
    urgent_need: NonEmptyStr = Field(..., alias="urgentNeed")
    ai_solution_name: NonEmptyStr = Field(..., alias="aiSolutionName")
    ai_solution_description: NonEmptyStr = Field(..., alias="aiSolutionDescription")
    app_creation_prompt: NonEmptyStr = Field(..., alias="appCreationPrompt")
    proposal_email: ProposalEmail = Field(..., alias="proposalEmail")
    acceptance_probability: AcceptanceProbability = Field(..., alias="acceptanceProbability")
    ease_of_creation: ScaleScore = Field(..., alias="easeOfCreation")
    opportunity_for_gain: ScaleScore = Field(..., alias="opportunityForGain")
