"""
Feishu Document Operations Module

Contains methods for cloud documents. These endpoints act on behalf of a
user, so every method takes the caller's user_access_token instead of the
cached tenant token:
- get_raw_content, get_doc_meta, get_sheet_meta
- add_whole_comment
- batch_get_docs_meta, search_docs
"""

from typing import Any

from feishu_openapi.constants import DocumentAPI


def _require_user_token(user_access_token: str):
    if not user_access_token:
        raise ValueError("user_access_token 不能为空")


class DocumentOperationsMixin:
    """Mixin class providing document operation methods for FeishuClient."""

    def get_raw_content(self, doc_token: str, user_access_token: str) -> bytes:
        """获取文档纯文本内容."""
        _require_user_token(user_access_token)
        return self._request("GET", DocumentAPI.RAW_CONTENT,
                             access_token=user_access_token, doc_token=doc_token)

    def get_doc_meta(self, doc_token: str, user_access_token: str) -> bytes:
        _require_user_token(user_access_token)
        return self._request("GET", DocumentAPI.DOC_META,
                             access_token=user_access_token, doc_token=doc_token)

    def get_sheet_meta(self, spreadsheet_token: str, user_access_token: str) -> bytes:
        """获取表格元数据 (sheets, properties, protected ranges)."""
        _require_user_token(user_access_token)
        return self._request("GET", DocumentAPI.SHEET_META,
                             access_token=user_access_token,
                             spreadsheet_token=spreadsheet_token)

    def add_whole_comment(self, payload: Any, user_access_token: str) -> bytes:
        """添加全文评论.

        Args:
            payload: ``{"type": "doc", "token": ..., "content": {...}}``
            user_access_token: Token of the commenting user
        """
        _require_user_token(user_access_token)
        return self._request("POST", DocumentAPI.COMMENT_ADD_WHOLE, payload=payload,
                             access_token=user_access_token)

    def batch_get_docs_meta(self, payload: Any, user_access_token: str) -> bytes:
        """获取多个文档的元信息 (``{"request_docs": [{"docs_token", "docs_type"}]}``)."""
        _require_user_token(user_access_token)
        return self._request("POST", DocumentAPI.DOCS_META, payload=payload,
                             access_token=user_access_token)

    def search_docs(self, payload: Any, user_access_token: str) -> bytes:
        """搜索云文档 by keyword, owner, chat or type."""
        _require_user_token(user_access_token)
        return self._request("POST", DocumentAPI.SEARCH_OBJECT, payload=payload,
                             access_token=user_access_token)
