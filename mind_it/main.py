import logging
from typing import Mapping, Optional

from mind_it.models.activity import ActivityKind
from mind_it.models.session_record import SessionRecord
from mind_it.services.chat import GeminiChatProxy
from mind_it.services.chat_overlay import ChatOverlay
from mind_it.services.database import LocalStore
from mind_it.services.errors import SessionError
from mind_it.services.navigation import NavigationController, ScreenName
from mind_it.services.report import ReportAggregator
from mind_it.services.session_recorder import SessionRecorder
from mind_it.services.ticker import SessionTicker

logger = logging.getLogger(__name__)

class MindItApp:
    """Application state for one running instance"""

    def __init__(
        self,
        store: Optional[LocalStore] = None,
        proxy: Optional[GeminiChatProxy] = None,
        ticker: Optional[SessionTicker] = None
    ):
        logger.info("Initializing MindItApp...")
        self.navigation = NavigationController()
        self.recorder = SessionRecorder()
        self.ticker = ticker or SessionTicker()
        self.reports = ReportAggregator()
        self.store = store or LocalStore()
        self.chat = ChatOverlay(proxy or GeminiChatProxy(), self.store)

    @property
    def screen(self) -> ScreenName:
        return self.navigation.current

    def navigate(self, action: str, form: Optional[Mapping[str, str]] = None) -> ScreenName:
        """Apply a plain navigation action; session start/stop have their own entry points"""
        if action in ("start", "stop"):
            raise SessionError(f"Use the session endpoints to {action} a session")
        screen = self.navigation.dispatch(action, form)
        if not self.navigation.chat_available:
            self.chat.close()
        return screen

    def start_session(self, activity: ActivityKind) -> None:
        if self.screen != ScreenName.SELECTION:
            raise SessionError("Sessions can only be started from the selection screen")
        activity = ActivityKind(activity)
        self.navigation.dispatch("start")
        self.recorder.start(activity)
        self.ticker.start(self.recorder.tick)

    def stop_session(self) -> Optional[SessionRecord]:
        if self.screen != ScreenName.SESSION:
            raise SessionError("No session is running")
        # Release the tick source before the clock is frozen
        self.ticker.cancel()
        record = self.recorder.complete()
        self.navigation.dispatch("stop")
        return record

    def report(self) -> dict:
        return self.reports.build_report(self.recorder.history)

    def snapshot(self) -> dict:
        """JSON-ready view of everything the page renders"""
        state = self.recorder.state
        return {
            "screen": self.screen.value,
            "actions": self.navigation.available_actions(),
            "chat_available": self.navigation.chat_available,
            "assessment": {
                "answers": {str(k): v for k, v in self.navigation.answers.items()},
                "complete": self.navigation.assessment_complete
            },
            "session": {
                "activity": state.selected_activity.value if state.selected_activity else None,
                "elapsed_seconds": state.elapsed_seconds,
                "elapsed": self.recorder.formatted_elapsed,
                "is_running": state.is_running
            },
            "report": self.report()
        }

    def shutdown(self) -> None:
        """Release the tick source and stop the clock"""
        logger.info("Shutting down MindItApp...")
        self.ticker.cancel()
        self.recorder.halt()
        self.store.close()
