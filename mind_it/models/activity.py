from dataclasses import dataclass
from enum import Enum
from typing import Dict

class ActivityKind(str, Enum):
    """Selectable relaxation activities"""
    READING = "Reading"
    GAMING = "Gaming"
    MEDITATING = "Meditating"
    WALKING = "Walking"
    LISTENING = "Music"
    BREATHING = "Breathing"

@dataclass(frozen=True)
class ActivityStyle:
    color: str  # hex color used for chart bars and history badges
    icon: str  # icon name understood by the page

ACTIVITY_CATALOG: Dict[ActivityKind, ActivityStyle] = {
    ActivityKind.READING: ActivityStyle(color="#6366f1", icon="book-open"),
    ActivityKind.GAMING: ActivityStyle(color="#8b5cf6", icon="gamepad-2"),
    ActivityKind.MEDITATING: ActivityStyle(color="#ec4899", icon="flower"),
    ActivityKind.WALKING: ActivityStyle(color="#10b981", icon="footprints"),
    ActivityKind.LISTENING: ActivityStyle(color="#f59e0b", icon="music"),
    ActivityKind.BREATHING: ActivityStyle(color="#3b82f6", icon="wind"),
}

def activity_color(activity: ActivityKind) -> str:
    return ACTIVITY_CATALOG[activity].color

def activity_icon(activity: ActivityKind) -> str:
    return ACTIVITY_CATALOG[activity].icon

def list_activities() -> list:
    """Catalog entries in display order"""
    return [
        {"name": kind.value, "color": style.color, "icon": style.icon}
        for kind, style in ACTIVITY_CATALOG.items()
    ]
