"""
Feishu Calendar Operations Module

Contains methods for calendar v3 endpoints:
- calendars: get/list/create/update/delete
- events: get/list/create/update/delete, attendees
- acl: list/create/delete
- free/busy and shared calendar queries
"""

from typing import Any, Dict

from feishu_openapi.constants import CalendarAPI


class CalendarOperationsMixin:
    """Mixin class providing calendar operation methods for FeishuClient."""

    # ==========================================
    # Calendars
    # ==========================================

    def get_calendar(self, calendar_id: str) -> bytes:
        return self._request("GET", CalendarAPI.CALENDAR_GET, calendar_id=calendar_id)

    def list_calendars(self, params: Dict[str, Any] = None) -> bytes:
        """List calendars visible to the app.

        Args:
            params: Query parameters, e.g. ``max_results``, ``page_token``, ``sync_token``
        """
        return self._request("GET", CalendarAPI.CALENDAR_LIST, params=params)

    def create_calendar(self, payload: Any) -> bytes:
        return self._request("POST", CalendarAPI.CALENDARS, payload=payload)

    def delete_calendar(self, calendar_id: str) -> bytes:
        return self._request("DELETE", CalendarAPI.CALENDAR, calendar_id=calendar_id)

    def update_calendar(self, calendar_id: str, payload: Any) -> bytes:
        return self._request("PATCH", CalendarAPI.CALENDAR, payload=payload,
                             calendar_id=calendar_id)

    # ==========================================
    # Events
    # ==========================================

    def get_event(self, calendar_id: str, event_id: str) -> bytes:
        return self._request("GET", CalendarAPI.EVENT,
                             calendar_id=calendar_id, event_id=event_id)

    def create_event(self, calendar_id: str, payload: Any) -> bytes:
        return self._request("POST", CalendarAPI.EVENTS, payload=payload,
                             calendar_id=calendar_id)

    def list_events(self, calendar_id: str, params: Dict[str, Any] = None) -> bytes:
        return self._request("GET", CalendarAPI.EVENTS, params=params,
                             calendar_id=calendar_id)

    def delete_event(self, calendar_id: str, event_id: str) -> bytes:
        return self._request("DELETE", CalendarAPI.EVENT,
                             calendar_id=calendar_id, event_id=event_id)

    def update_event(self, calendar_id: str, event_id: str, payload: Any) -> bytes:
        return self._request("PATCH", CalendarAPI.EVENT, payload=payload,
                             calendar_id=calendar_id, event_id=event_id)

    def invite_attendees(self, calendar_id: str, event_id: str, payload: Any) -> bytes:
        """邀请/移除日程参与者."""
        return self._request("POST", CalendarAPI.ATTENDEES, payload=payload,
                             calendar_id=calendar_id, event_id=event_id)

    # ==========================================
    # Access control
    # ==========================================

    def list_acl(self, calendar_id: str) -> bytes:
        return self._request("GET", CalendarAPI.ACL, calendar_id=calendar_id)

    def create_acl(self, calendar_id: str, payload: Any) -> bytes:
        return self._request("POST", CalendarAPI.ACL, payload=payload,
                             calendar_id=calendar_id)

    def delete_acl(self, calendar_id: str, rule_id: str) -> bytes:
        return self._request("DELETE", CalendarAPI.ACL_RULE,
                             calendar_id=calendar_id, rule_id=rule_id)

    # ==========================================
    # Queries
    # ==========================================

    def query_freebusy(self, payload: Any) -> bytes:
        """查询忙闲: payload carries time_min, time_max and calendar/room ids."""
        return self._request("POST", CalendarAPI.FREEBUSY_QUERY, payload=payload)

    def query_shared_calendars(self, query: str) -> bytes:
        """Search public calendars by keyword."""
        return self._request("GET", CalendarAPI.SHARED_CALENDAR_QUERY, params={"query": query})

    def list_shared_calendar_events(self, calendar_id: str, params: Dict[str, Any] = None) -> bytes:
        """List events of a shared calendar.

        Args:
            calendar_id: Shared calendar ID
            params: ``start_time`` / ``end_time`` (unix seconds)
        """
        return self._request("GET", CalendarAPI.SHARED_CALENDAR_EVENTS, params=params,
                             calendar_id=calendar_id)
