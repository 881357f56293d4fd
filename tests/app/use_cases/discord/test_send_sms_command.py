"""Testes do handler do comando de SMS."""

from unittest.mock import AsyncMock

import pytest

from api.validators.sms import SmsMessageValidator
from app.constants.discord import FailureReason
from app.protocols.models import CommandInvocation, SmsMessage
from app.use_cases.discord import SendSmsCommandHandler, sms_message_from_command
from utils.errors import SmsGatewayError


def _command(name: str = "sms", **options: str) -> CommandInvocation:
    return CommandInvocation(interaction_id="1", command_name=name, options=options, user_id="u1")


def _handler(sender: AsyncMock) -> SendSmsCommandHandler:
    return SendSmsCommandHandler(
        validator=SmsMessageValidator(),
        sender=sender,
        command_name="sms",
    )


def test_sms_message_from_command_strips_numbers_only() -> None:
    command = _command(**{"from": " +15550001111 ", "to": "+15550002222\n", "message": " Oi "})

    assert sms_message_from_command(command) == SmsMessage(
        from_number="+15550001111", to_number="+15550002222", content=" Oi "
    )


@pytest.mark.asyncio
async def test_valid_command_sends_sms() -> None:
    sender = AsyncMock()
    command = _command(**{"from": "+15550001111", "to": "+15550002222", "message": "Hello"})

    outcome = await _handler(sender).handle(command)

    assert outcome.success
    assert outcome.reasons == ()
    sender.send.assert_awaited_once_with(
        SmsMessage(from_number="+15550001111", to_number="+15550002222", content="Hello")
    )


@pytest.mark.asyncio
async def test_invalid_numbers_never_reach_sender() -> None:
    sender = AsyncMock()
    command = _command(**{"from": "123", "to": "abc", "message": "Hello"})

    outcome = await _handler(sender).handle(command)

    assert not outcome.success
    assert outcome.reasons == (FailureReason.INVALID_TO, FailureReason.INVALID_FROM)
    assert outcome.message.to_number == "abc"
    sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_non_ascii_digits_never_reach_sender() -> None:
    sender = AsyncMock()
    arabic_indic = "+1\u0665\u0665\u0665\u0660\u0660\u0660\u0661\u0661\u0661\u0661"
    command = _command(**{"from": arabic_indic, "to": "+15550002222", "message": "Hello"})

    outcome = await _handler(sender).handle(command)

    assert not outcome.success
    assert outcome.reasons == (FailureReason.INVALID_FROM,)
    sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_options_are_all_reported() -> None:
    sender = AsyncMock()

    outcome = await _handler(sender).handle(_command())

    assert outcome.reasons == (
        FailureReason.INVALID_TO,
        FailureReason.INVALID_FROM,
        FailureReason.INVALID_CONTENT,
    )
    sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_command_is_rejected() -> None:
    sender = AsyncMock()
    command = _command("ping", **{"from": "+15550001111", "to": "+15550002222", "message": "Hi"})

    outcome = await _handler(sender).handle(command)

    assert outcome.reasons == (FailureReason.UNKNOWN_COMMAND,)
    sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_gateway_error_becomes_send_failed() -> None:
    sender = AsyncMock()
    sender.send.side_effect = SmsGatewayError("sms_gateway_rejected", status_code=502)
    command = _command(**{"from": "+15550001111", "to": "+15550002222", "message": "Hello"})

    outcome = await _handler(sender).handle(command)

    assert not outcome.success
    assert outcome.reasons == (FailureReason.SEND_FAILED,)


@pytest.mark.asyncio
async def test_unexpected_sender_error_propagates() -> None:
    sender = AsyncMock()
    sender.send.side_effect = RuntimeError("boom")
    command = _command(**{"from": "+15550001111", "to": "+15550002222", "message": "Hello"})

    with pytest.raises(RuntimeError):
        await _handler(sender).handle(command)


def test_failure_outcome_reads_fields_from_command() -> None:
    command = _command(**{"from": " +15550001111 ", "to": "bad", "message": "Hello"})

    outcome = _handler(AsyncMock()).failure_outcome(command, FailureReason.INTERNAL_ERROR)

    assert not outcome.success
    assert outcome.reasons == (FailureReason.INTERNAL_ERROR,)
    assert outcome.message == SmsMessage(
        from_number="+15550001111", to_number="bad", content="Hello"
    )
