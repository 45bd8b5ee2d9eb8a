from datetime import datetime, timedelta

from src.domain.entities import Admin, AdminRole

NOW = datetime(2024, 6, 1, 12, 0, 0)
THRESHOLD = 5
DURATION = timedelta(hours=2)


def make_admin(**overrides) -> Admin:
    fields = dict(
        email="mod@jamwathq.com",
        password_hash="x",
        first_name="Keisha",
        last_name="Brown",
        role=AdminRole.moderator,
    )
    fields.update(overrides)
    return Admin(**fields)


def test_failures_below_threshold_do_not_lock():
    admin = make_admin()

    for _ in range(THRESHOLD - 1):
        assert admin.register_failed_login(NOW, THRESHOLD, DURATION) is False

    assert admin.login_attempts == 4
    assert admin.locked_until is None
    assert not admin.is_locked(NOW)


def test_threshold_failure_locks_for_duration():
    admin = make_admin(login_attempts=4)

    assert admin.register_failed_login(NOW, THRESHOLD, DURATION) is True

    assert admin.login_attempts == 5
    assert admin.locked_until == NOW + DURATION
    assert admin.is_locked(NOW + timedelta(hours=1, minutes=59))
    assert not admin.is_locked(NOW + DURATION)


def test_failure_after_expired_lock_restarts_counter():
    admin = make_admin(login_attempts=5, locked_until=NOW - timedelta(minutes=1))

    assert admin.register_failed_login(NOW, THRESHOLD, DURATION) is False

    assert admin.login_attempts == 1
    assert admin.locked_until is None


def test_reset_clears_lock():
    admin = make_admin(login_attempts=5, locked_until=NOW + DURATION)

    admin.reset_login_attempts()

    assert admin.login_attempts == 0
    assert not admin.is_locked(NOW)
