from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from mind_it.models.activity import ActivityKind

class SessionRecord(BaseModel):
    """Summary of one completed rest session"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Creation-time derived identifier")
    activity: ActivityKind = Field(description="Activity performed during the session")
    duration_seconds: int = Field(
        ge=0,
        description="Elapsed seconds at the moment the session was stopped"
    )
    timestamp: datetime = Field(description="When the session was completed")

@dataclass
class ActiveSessionState:
    selected_activity: Optional[ActivityKind] = None
    elapsed_seconds: int = 0
    is_running: bool = False
