"""
Mind It - Rest, Reset, Report
"""

__version__ = "0.1.0"

from .models.activity import ActivityKind
from .models.session_record import SessionRecord
from .services.session_recorder import SessionRecorder, format_time
from .services.report import ReportAggregator
from .services.chat import GeminiChatProxy
from .main import MindItApp

__all__ = [
    'ActivityKind',
    'SessionRecord',
    'SessionRecorder',
    'format_time',
    'ReportAggregator',
    'GeminiChatProxy',
    'MindItApp',
]
