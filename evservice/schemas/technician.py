"""
Pydantic schemas for technician candidates.

The recommendation flags are computed by the server; they are carried as-is.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class TechnicianCandidate(BaseModel):
    """A technician offered for an appointment slot."""
    id: str = Field(alias="_id")
    name: str = ""
    specializations: List[str] = []
    availability: Optional[dict] = None
    performance: Optional[dict] = None
    is_recommended: bool = Field(default=False, alias="isRecommended")
    matching_skills: List[str] = Field(default_factory=list, alias="matchingSkills")
    years_experience: Optional[int] = Field(default=None, alias="yearsExperience")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def workload(self) -> Optional[float]:
        if self.availability:
            return self.availability.get("workloadPercentage")
        return None
