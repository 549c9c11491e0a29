"""
Feishu Contact Operations Module

Contains methods for the contact directory:
- get_tenant_custom_attrs
- batch_add_departments, batch_add_users, get_batch_task (async batch import)
"""

from typing import Any

from feishu_openapi.constants import ContactAPI


class ContactOperationsMixin:
    """Mixin class providing contact operation methods for FeishuClient."""

    def get_tenant_custom_attrs(self) -> bytes:
        """获取企业自定义用户属性配置."""
        return self._request("GET", ContactAPI.TENANT_CUSTOM_ATTR_GET)

    def batch_add_departments(self, payload: Any) -> bytes:
        """批量新增部门. Returns a task_id, poll it with get_batch_task."""
        return self._request("POST", ContactAPI.DEPARTMENT_BATCH_ADD, payload=payload)

    def batch_add_users(self, payload: Any) -> bytes:
        """批量新增用户. Returns a task_id, poll it with get_batch_task."""
        return self._request("POST", ContactAPI.USER_BATCH_ADD, payload=payload)

    def get_batch_task(self, task_id: str) -> bytes:
        return self._request("GET", ContactAPI.TASK_GET, params={"task_id": task_id})
