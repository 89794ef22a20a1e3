from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class AuditIn(BaseModel):
    url: str
    timeout_ms: Optional[int] = Field(default=None, gt=0)

    model_config = ConfigDict(from_attributes=True)


class CompareIn(AuditIn):
    competitors: List[str] = Field(default_factory=list)


class HealthOut(BaseModel):
    status: str
    app: str
    version: str
