import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_audit():
    """AuditService stand-in; assert on the recorded calls"""
    audit = MagicMock()
    audit.record_activity = AsyncMock()
    audit.record_security_event = AsyncMock()
    return audit
