"""Pydantic schemas for cross-provider identity resolution."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ResolvedIdentity(BaseModel):
    """Provider ids after cross-link resolution."""

    ifpa_id: Optional[int] = Field(None, ge=0, description="IFPA player id")
    matchplay_id: Optional[int] = Field(None, ge=0, description="Match Play user id")
    mismatch_warning: Optional[str] = Field(
        None, description="Set when the IFPA cross-link contradicts the Match Play id"
    )

    model_config = ConfigDict(frozen=True)
