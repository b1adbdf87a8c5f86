"""Lifecycle of the current rest session"""
import logging
from datetime import datetime
from typing import List, Optional

from mind_it.models.activity import ActivityKind
from mind_it.models.session_record import ActiveSessionState, SessionRecord

logger = logging.getLogger(__name__)

def format_time(seconds: int) -> str:
    """Format elapsed seconds as MM:SS; minutes are not rolled into hours"""
    mins, secs = divmod(seconds, 60)
    return f"{mins:02d}:{secs:02d}"

class SessionRecorder:
    """Owns the in-flight session and the history of completed ones"""

    def __init__(self):
        self.state = ActiveSessionState()
        self._history: List[SessionRecord] = []
        self._last_id_ms = 0

    @property
    def history(self) -> List[SessionRecord]:
        """Completed sessions, most recent first"""
        return list(self._history)

    @property
    def formatted_elapsed(self) -> str:
        return format_time(self.state.elapsed_seconds)

    def start(self, activity: ActivityKind) -> None:
        """Select an activity and restart the clock from zero"""
        self.state.selected_activity = ActivityKind(activity)
        self.state.elapsed_seconds = 0
        self.state.is_running = True
        logger.info(f"Started {self.state.selected_activity.value} session")

    def tick(self) -> None:
        """Advance the clock by one second while running"""
        if not self.state.is_running:
            return
        self.state.elapsed_seconds += 1

    def halt(self) -> None:
        """Stop the clock without recording anything"""
        if self.state.is_running:
            logger.debug("Halting running session without recording")
        self.state.is_running = False

    def complete(self) -> Optional[SessionRecord]:
        """Freeze the clock and record the session at the front of history"""
        self.state.is_running = False
        if self.state.selected_activity is None:
            logger.warning("Complete requested before any activity was selected")
            return None

        record = SessionRecord(
            id=self._next_id(),
            activity=self.state.selected_activity,
            duration_seconds=self.state.elapsed_seconds,
            timestamp=datetime.now()
        )
        self._history.insert(0, record)
        logger.info(
            f"Recorded {record.activity.value} session of {format_time(record.duration_seconds)}"
        )
        return record

    def _next_id(self) -> str:
        now_ms = int(datetime.now().timestamp() * 1000)
        # Two completions within the same millisecond still get distinct ids
        self._last_id_ms = max(now_ms, self._last_id_ms + 1)
        return str(self._last_id_ms)
