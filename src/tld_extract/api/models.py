"""
API response models.
"""

from pydantic import BaseModel, Field

from tld_extract.psl import RuleSet, TLDResult


class TLDResponse(BaseModel):
    """Response for GET /v1/parse."""

    input: str = Field(..., description="Input as received")
    root_domain: str | None = Field(None, description="Registrable domain")
    top_level_domain: str | None = Field(None, description="Public suffix")
    second_level_domain: str | None = Field(
        None, description="Registrable label before the public suffix"
    )
    sub_domain: str | None = Field(None, description="Labels before the root domain")

    @classmethod
    def from_result(cls, value: str, result: TLDResult) -> "TLDResponse":
        return cls(input=value, **result.to_dict())


class RuleSetStats(BaseModel):
    """Response for GET /v1/psl."""

    normals: int = Field(..., description="Number of normal rules")
    wildcards: int = Field(..., description="Number of wildcard rules")
    exceptions: int = Field(..., description="Number of exception rules")
    total: int = Field(..., description="Total number of rules")

    @classmethod
    def from_rule_set(cls, rule_set: RuleSet) -> "RuleSetStats":
        return cls(**rule_set.stats())


class RefreshResponse(BaseModel):
    """Response for POST /v1/psl/refresh."""

    source_url: str = Field(..., description="URL the PSL was fetched from")
    rules: RuleSetStats = Field(..., description="Rule counts after the refresh")
