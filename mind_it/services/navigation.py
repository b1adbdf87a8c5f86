"""Screen routing for the application"""
import logging
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

from mind_it.services.errors import IncompleteFormError, NavigationError

logger = logging.getLogger(__name__)

class ScreenName(str, Enum):
    LANDING = "LANDING"
    LOGIN = "LOGIN"
    STRESS_ASSESSMENT = "STRESS_ASSESSMENT"
    JOURNALIST_INTRO = "JOURNALIST_INTRO"
    REGISTRATION = "REGISTRATION"
    SELECTION = "SELECTION"
    SESSION = "SESSION"
    REPORT = "REPORT"

ASSESSMENT_QUESTIONS = [
    {"id": 1, "text": "Do you often feel overwhelmed by your daily workload?"},
    {"id": 2, "text": "Do you have trouble sleeping due to racing thoughts?"},
    {"id": 3, "text": "Do you find it difficult to relax even when off duty?"},
]
ASSESSMENT_OPTIONS = ["Yes", "Maybe", "No"]

LOGIN_FIELDS = ("email", "password")
REGISTRATION_FIELDS = ("full_name", "gender", "date_of_birth", "mobile", "email")

# (screen, action) -> next screen
TRANSITIONS: Dict[Tuple[ScreenName, str], ScreenName] = {
    (ScreenName.LANDING, "get_started"): ScreenName.STRESS_ASSESSMENT,
    (ScreenName.LANDING, "login"): ScreenName.LOGIN,
    (ScreenName.LOGIN, "submit"): ScreenName.SELECTION,
    (ScreenName.LOGIN, "register"): ScreenName.REGISTRATION,
    (ScreenName.LOGIN, "back"): ScreenName.LANDING,
    (ScreenName.STRESS_ASSESSMENT, "continue"): ScreenName.JOURNALIST_INTRO,
    (ScreenName.STRESS_ASSESSMENT, "back"): ScreenName.LANDING,
    (ScreenName.JOURNALIST_INTRO, "register"): ScreenName.REGISTRATION,
    (ScreenName.JOURNALIST_INTRO, "back"): ScreenName.LANDING,
    (ScreenName.REGISTRATION, "submit"): ScreenName.SELECTION,
    (ScreenName.REGISTRATION, "login"): ScreenName.LOGIN,
    (ScreenName.REGISTRATION, "back"): ScreenName.LANDING,
    (ScreenName.SELECTION, "start"): ScreenName.SESSION,
    (ScreenName.SELECTION, "back"): ScreenName.LANDING,
    (ScreenName.SESSION, "stop"): ScreenName.REPORT,
    (ScreenName.REPORT, "back"): ScreenName.SELECTION,
}

CHAT_SCREENS = {ScreenName.SELECTION, ScreenName.SESSION, ScreenName.REPORT}

def _missing_fields(form: Mapping[str, str], required) -> list:
    return [name for name in required if not str(form.get(name) or "").strip()]

class NavigationController:
    """Finite-state router over the named screens"""

    def __init__(self, initial: ScreenName = ScreenName.LANDING):
        self.current = initial
        self.answers: Dict[int, str] = {}

    @property
    def chat_available(self) -> bool:
        return self.current in CHAT_SCREENS

    @property
    def assessment_complete(self) -> bool:
        return all(q["id"] in self.answers for q in ASSESSMENT_QUESTIONS)

    def available_actions(self) -> list:
        return [action for (screen, action) in TRANSITIONS if screen == self.current]

    def answer(self, question_id: int, option: str) -> None:
        """Record a stress assessment answer"""
        if self.current != ScreenName.STRESS_ASSESSMENT:
            raise NavigationError("Answers are only accepted on the stress assessment screen")
        if question_id not in {q["id"] for q in ASSESSMENT_QUESTIONS}:
            raise NavigationError(f"Unknown question: {question_id}")
        if option not in ASSESSMENT_OPTIONS:
            raise NavigationError(f"Unknown option: {option}")
        self.answers[question_id] = option

    def dispatch(self, action: str, form: Optional[Mapping[str, str]] = None) -> ScreenName:
        """Apply a user action and return the new screen"""
        target = TRANSITIONS.get((self.current, action))
        if target is None:
            raise NavigationError(f"Action '{action}' is not available on {self.current.value}")

        self._check_guard(action, form or {})

        logger.debug(f"Navigating {self.current.value} -> {target.value} via {action}")
        if self.current == ScreenName.STRESS_ASSESSMENT:
            self.answers = {}
        self.current = target
        return target

    def _check_guard(self, action: str, form: Mapping[str, str]) -> None:
        if self.current == ScreenName.STRESS_ASSESSMENT and action == "continue":
            if not self.assessment_complete:
                raise IncompleteFormError("Answer every question before continuing")
        elif action == "submit":
            required = LOGIN_FIELDS if self.current == ScreenName.LOGIN else REGISTRATION_FIELDS
            missing = _missing_fields(form, required)
            if missing:
                raise IncompleteFormError(f"Missing required fields: {', '.join(missing)}")
