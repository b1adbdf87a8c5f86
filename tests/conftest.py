import pytest
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, Mock
from mind_it.main import MindItApp
from mind_it.models.activity import ActivityKind
from mind_it.models.session_record import SessionRecord
from mind_it.services.chat import GeminiChatProxy
from mind_it.services.database import LocalStore
from mind_it.services.session_recorder import SessionRecorder
from mind_it.services.report import ReportAggregator
from mind_it.services.ticker import SessionTicker

@pytest.fixture
def store():
    """Provide an in-memory local store"""
    store = LocalStore(":memory:")
    yield store
    store.close()

@pytest.fixture
def recorder():
    return SessionRecorder()

@pytest.fixture
def aggregator():
    return ReportAggregator()

@pytest.fixture
def mock_proxy():
    """Chat proxy that answers without touching the network"""
    proxy = Mock(spec=GeminiChatProxy)
    proxy.send_message = AsyncMock(return_value="Take a slow, deep breath.")
    return proxy

@pytest.fixture
def mind_app(store, mock_proxy):
    """Application state with a tick source too slow to fire during a test"""
    return MindItApp(store=store, proxy=mock_proxy, ticker=SessionTicker(interval_seconds=3600))

@pytest.fixture
def sample_history():
    """Completed sessions, newest first"""
    base = datetime(2025, 3, 1, 9, 0)
    return [
        SessionRecord(id="3", activity=ActivityKind.READING, duration_seconds=20, timestamp=base + timedelta(hours=2)),
        SessionRecord(id="2", activity=ActivityKind.GAMING, duration_seconds=5, timestamp=base + timedelta(hours=1)),
        SessionRecord(id="1", activity=ActivityKind.READING, duration_seconds=10, timestamp=base),
    ]
