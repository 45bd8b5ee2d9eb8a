"""
Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class AdminRole(str, Enum):
    """Admin role, ordered from most to least privileged"""

    super_admin = "super_admin"
    moderator = "moderator"
    viewer = "viewer"


class ActivityAction(str, Enum):
    """Mutations recorded in the activity log"""

    # User actions
    user_view = "user_view"
    user_update = "user_update"
    user_delete = "user_delete"
    user_ban = "user_ban"
    user_unban = "user_unban"
    # Review actions
    review_view = "review_view"
    review_approve = "review_approve"
    review_reject = "review_reject"
    review_update = "review_update"
    review_delete = "review_delete"
    # Agency actions
    agency_create = "agency_create"
    agency_update = "agency_update"
    agency_delete = "agency_delete"
    agency_verify = "agency_verify"
    # Content actions
    content_update = "content_update"
    news_create = "news_create"
    news_update = "news_update"
    news_delete = "news_delete"
    # System actions
    settings_update = "settings_update"
    backup_create = "backup_create"
    backup_restore = "backup_restore"
    cache_clear = "cache_clear"
    # Auth actions
    admin_login = "admin_login"
    admin_logout = "admin_logout"
    admin_create = "admin_create"
    admin_update = "admin_update"
    admin_delete = "admin_delete"
    unauthorized_access = "unauthorized_access"


class TargetType(str, Enum):
    """Kind of object an activity log entry refers to"""

    user = "user"
    review = "review"
    agency = "agency"
    content = "content"
    news = "news"
    admin = "admin"
    settings = "settings"
    system = "system"


class SecurityEventType(str, Enum):
    """Anomalous or failed access recorded in the security log"""

    failed_login = "failed_login"
    suspicious_activity = "suspicious_activity"
    rate_limit_violation = "rate_limit_violation"
    cors_rejection = "cors_rejection"
    invalid_token = "invalid_token"
    unauthorized_access = "unauthorized_access"
    account_lockout = "account_lockout"
    sql_injection_attempt = "sql_injection_attempt"
    xss_attempt = "xss_attempt"
    brute_force_detected = "brute_force_detected"
    unusual_ip = "unusual_ip"
    session_hijack_attempt = "session_hijack_attempt"


class Severity(str, Enum):
    """Security event severity"""

    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"
    unknown = "unknown"
