"""
Constants Module

Defines constants used across the feishu-openapi project.
"""

# =============================================================================
# API Constants
# =============================================================================

FEISHU_SERVER_URL = "https://open.feishu.cn"
LARK_SERVER_URL = "https://open.larksuite.com"

# Refresh a token this many seconds before it literally expires
DEFAULT_TOKEN_SAFETY_MARGIN = 30.0

DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_UPLOAD_TIMEOUT = 60.0

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


# =============================================================================
# Auth Endpoints
# =============================================================================

class AuthAPI:
    """Identity endpoints for self-built (internal) apps."""
    TENANT_ACCESS_TOKEN = "/open-apis/auth/v3/tenant_access_token/internal"
    APP_ACCESS_TOKEN = "/open-apis/auth/v3/app_access_token/internal"


# =============================================================================
# Message Endpoints
# =============================================================================

class MessageAPI:
    BATCH_SEND = "/open-apis/message/v4/batch_send/"
    SEND = "/open-apis/message/v4/send/"
    READ_INFO = "/open-apis/message/v4/read_info/"
    IMAGE_PUT = "/open-apis/image/v4/put/"
    IMAGE_GET = "/open-apis/image/v4/get"
    FILE_GET = "/open-apis/open-file/v1/get"
    APP_NOTIFY = "/open-apis/notify/v4/appnotify"


# =============================================================================
# Calendar Endpoints (v3)
# =============================================================================

class CalendarAPI:
    CALENDAR_LIST = "/open-apis/calendar/v3/calendar_list"
    CALENDAR_GET = "/open-apis/calendar/v3/calendar_list/{calendar_id}"
    CALENDARS = "/open-apis/calendar/v3/calendars"
    CALENDAR = "/open-apis/calendar/v3/calendars/{calendar_id}"
    EVENTS = "/open-apis/calendar/v3/calendars/{calendar_id}/events"
    EVENT = "/open-apis/calendar/v3/calendars/{calendar_id}/events/{event_id}"
    ATTENDEES = "/open-apis/calendar/v3/calendars/{calendar_id}/events/{event_id}/attendees"
    ACL = "/open-apis/calendar/v3/calendars/{calendar_id}/acl"
    ACL_RULE = "/open-apis/calendar/v3/calendars/{calendar_id}/acl/{rule_id}"
    FREEBUSY_QUERY = "/open-apis/calendar/v3/freebusy/query"
    SHARED_CALENDAR_QUERY = "/open-apis/calendar/v3/shared_calendars/query"
    SHARED_CALENDAR_EVENTS = "/open-apis/calendar/v3/shared/calendars/{calendar_id}/events"


# =============================================================================
# Document Endpoints
# =============================================================================

class DocumentAPI:
    RAW_CONTENT = "/open-apis/doc/v2/{doc_token}/raw_content"
    DOC_META = "/open-apis/doc/v2/meta/{doc_token}"
    SHEET_META = "/open-apis/sheet/v2/spreadsheets/{spreadsheet_token}/metainfo"
    COMMENT_ADD_WHOLE = "/open-apis/comment/add_whole"
    DOCS_META = "/open-apis/suite/docs-api/meta"
    SEARCH_OBJECT = "/open-apis/suite/docs-api/search/object"


# =============================================================================
# Contact Endpoints
# =============================================================================

class ContactAPI:
    TENANT_CUSTOM_ATTR_GET = "/open-apis/contact/v1/tenant/custom_attr/get"
    DEPARTMENT_BATCH_ADD = "/open-apis/contact/v2/department/batch_add"
    USER_BATCH_ADD = "/open-apis/contact/v2/user/batch_add"
    TASK_GET = "/open-apis/contact/v2/task/get"


# =============================================================================
# User Group Endpoints
# =============================================================================

class UserGroupAPI:
    GROUP_LIST = "/open-apis/user_group/v1/group/list"
    MEMBERS = "/open-apis/user_group/v1/group/members"
    SEARCH = "/open-apis/user_group/v1/group/search"
