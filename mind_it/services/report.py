"""Summary views derived from the session history"""
import logging
from typing import Dict, List, Sequence

from mind_it.models.activity import ActivityKind, activity_color, activity_icon
from mind_it.models.session_record import SessionRecord
from mind_it.services.session_recorder import format_time

logger = logging.getLogger(__name__)

class ReportAggregator:
    """Stateless transformations over a session history, recomputed on every call"""

    def total_seconds(self, history: Sequence[SessionRecord]) -> int:
        return sum(record.duration_seconds for record in history)

    def total_time(self, history: Sequence[SessionRecord]) -> str:
        """Total time as "{hours}h {minutes}m"; leftover seconds are dropped"""
        total = self.total_seconds(history)
        hours = total // 3600
        mins = (total % 3600) // 60
        return f"{hours}h {mins}m"

    def activity_breakdown(self, history: Sequence[SessionRecord]) -> Dict[ActivityKind, int]:
        """Seconds per activity, keyed in order of first appearance"""
        totals: Dict[ActivityKind, int] = {}
        for record in history:
            totals[record.activity] = totals.get(record.activity, 0) + record.duration_seconds
        return totals

    def chart_data(self, history: Sequence[SessionRecord]) -> List[Dict]:
        """Bar chart rows for the report screen"""
        return [
            {
                "name": activity.value,
                "seconds": seconds,
                "color": activity_color(activity)
            }
            for activity, seconds in self.activity_breakdown(history).items()
        ]

    def build_report(self, history: Sequence[SessionRecord]) -> Dict:
        """Everything the report screen renders"""
        logger.debug(f"Building report over {len(history)} sessions")
        return {
            "total_time": self.total_time(history),
            "total_seconds": self.total_seconds(history),
            "session_count": len(history),
            "chart": self.chart_data(history),
            "sessions": [
                {
                    "id": record.id,
                    "activity": record.activity.value,
                    "duration_seconds": record.duration_seconds,
                    "duration": format_time(record.duration_seconds),
                    "date": record.timestamp.strftime("%Y-%m-%d"),
                    "timestamp": record.timestamp.isoformat(),
                    "color": activity_color(record.activity),
                    "icon": activity_icon(record.activity)
                }
                for record in history
            ]
        }
