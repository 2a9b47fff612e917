import pytest

from src.app.use_cases.invites.send_invite_use_case import SendInviteUseCase
from src.domain.exceptions import TransportError


@pytest.mark.asyncio
async def test_successful_send(mock_api):
    use_case = SendInviteUseCase(mock_api)

    result = await use_case.execute("Block A Squad", " roomie@uni.edu ")

    assert result.is_ok()
    assert result.value.status == "sent"
    assert result.value.message == 'Invite sent to roomie@uni.edu for group "Block A Squad"!'
    mock_api.send_invite.assert_called_once_with("Block A Squad", "roomie@uni.edu")


@pytest.mark.asyncio
@pytest.mark.parametrize("group,email", [("", "a@b.co"), ("Squad", ""), ("  ", None)])
async def test_missing_fields(mock_api, group, email):
    use_case = SendInviteUseCase(mock_api)

    result = await use_case.execute(group, email)

    assert result.is_err()
    assert result.error.code == "MISSING_FIELDS"
    mock_api.send_invite.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_email(mock_api):
    use_case = SendInviteUseCase(mock_api)

    result = await use_case.execute("Squad", "not-an-email")

    assert result.is_err()
    assert result.error.code == "INVALID_EMAIL"


@pytest.mark.asyncio
async def test_transport_failure(mock_api):
    mock_api.send_invite.side_effect = TransportError("send_invite", "HTTP 503")
    use_case = SendInviteUseCase(mock_api)

    result = await use_case.execute("Squad", "a@b.co")

    assert result.is_err()
    assert result.error.code == "TRANSPORT_ERROR"
