from typing import Any, Dict

from feishu_openapi.constants import UserGroupAPI


class UserGroupOperationsMixin:
    """Mixin class providing user group methods for FeishuClient."""

    def list_user_groups(self, params: Dict[str, Any] = None) -> bytes:
        """查询用户组列表 (``page_size``, ``page_token``)."""
        return self._request("GET", UserGroupAPI.GROUP_LIST, params=params)

    def list_user_group_members(self, group_id: str, params: Dict[str, Any] = None) -> bytes:
        query = dict(params or {})
        query["group_id"] = group_id
        return self._request("GET", UserGroupAPI.MEMBERS, params=query)

    def search_user_groups(self, query: str, params: Dict[str, Any] = None) -> bytes:
        search = dict(params or {})
        search["query"] = query
        return self._request("GET", UserGroupAPI.SEARCH, params=search)
