from unittest.mock import AsyncMock, patch
from click.testing import CliRunner

from mind_it.cli.service import cli
from mind_it.models.chat import ChatMode

def test_activities_command():
    result = CliRunner().invoke(cli, ["activities"])
    assert result.exit_code == 0
    assert "Breathing" in result.output

def test_chat_command():
    """Test a one-shot question in fast mode"""
    with patch('mind_it.services.chat.GeminiChatProxy.send_message', new_callable=AsyncMock) as send:
        send.return_value = "Go for a short walk."
        result = CliRunner().invoke(cli, ["chat", "I feel stuck", "--mode", "fast"])

    assert result.exit_code == 0
    assert "Go for a short walk." in result.output
    assert send.call_args.args == ("I feel stuck", ChatMode.FAST)

def test_chat_rejects_unknown_mode():
    result = CliRunner().invoke(cli, ["chat", "hello", "--mode", "slow"])
    assert result.exit_code != 0

def test_serve_uses_uvicorn():
    with patch('mind_it.cli.service.uvicorn.run') as run:
        result = CliRunner().invoke(cli, ["serve", "--port", "9001"])

    assert result.exit_code == 0
    assert run.call_args.kwargs["port"] == 9001
