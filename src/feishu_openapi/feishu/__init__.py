"""
Feishu API Client Package

This package provides a modular interface to the Feishu (Lark) open API.

Package Structure:
    - base.py: Application context (credentials, token cache, request building)
    - message.py: Bot messaging (send/batch_send/images/files/notify)
    - calendar.py: Calendar v3 (calendars/events/acl/free-busy)
    - documents.py: Cloud documents (raw content/meta/comments/search)
    - contact.py: Contact directory (custom attrs, async batch import)
    - user_group.py: User groups (list/members/search)

Usage:
    from feishu_openapi.feishu import FeishuClient

    # Or import specific mixins for custom clients
    from feishu_openapi.feishu.base import FeishuClientBase
    from feishu_openapi.feishu.message import MessageOperationsMixin
"""

# Export base class and mixins (no circular import)
from feishu_openapi.feishu.base import FeishuClientBase
from feishu_openapi.feishu.message import MessageOperationsMixin
from feishu_openapi.feishu.calendar import CalendarOperationsMixin
from feishu_openapi.feishu.documents import DocumentOperationsMixin
from feishu_openapi.feishu.contact import ContactOperationsMixin
from feishu_openapi.feishu.user_group import UserGroupOperationsMixin


def __getattr__(name):
    """Lazy import FeishuClient to avoid circular import."""
    if name == 'FeishuClient':
        from feishu_openapi.feishu_client import FeishuClient
        return FeishuClient
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'FeishuClient',
    'FeishuClientBase',
    'MessageOperationsMixin',
    'CalendarOperationsMixin',
    'DocumentOperationsMixin',
    'ContactOperationsMixin',
    'UserGroupOperationsMixin',
]
