import json
import os

from dotenv import load_dotenv

from feishu_openapi.constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_TOKEN_SAFETY_MARGIN,
    DEFAULT_UPLOAD_TIMEOUT,
    FEISHU_SERVER_URL,
)

CONFIG_FILE = "feishu_config.json"

load_dotenv()


def _to_float(value, default: float, source: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        print(f"{source} 不是合法数字: {value!r}，使用 {default}")
        return default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name, "")
    if not value:
        return default
    return _to_float(value, default, f"环境变量 {name}")


# ============================================================
# Global Configuration Variables
# ============================================================
FEISHU_APP_ID: str = os.getenv("FEISHU_APP_ID", "")
FEISHU_APP_SECRET: str = os.getenv("FEISHU_APP_SECRET", "")
# Use https://open.larksuite.com for Lark (international)
FEISHU_BASE_URL: str = os.getenv("FEISHU_BASE_URL", FEISHU_SERVER_URL)

# ============================================================
# Application Constants
# ============================================================
# Seconds subtracted from a token's expiry before it is considered stale
TOKEN_SAFETY_MARGIN: float = _env_float("FEISHU_TOKEN_SAFETY_MARGIN", DEFAULT_TOKEN_SAFETY_MARGIN)

# HTTP timeouts (seconds)
HTTP_TIMEOUT: float = _env_float("FEISHU_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)
UPLOAD_TIMEOUT: float = _env_float("FEISHU_UPLOAD_TIMEOUT", DEFAULT_UPLOAD_TIMEOUT)


# ============================================================
# Configuration Loading
# ============================================================
def load_config_from_json(config_file: str = CONFIG_FILE) -> bool:
    """Override settings from a JSON config file.

    Keys: feishu_app_id, feishu_app_secret, feishu_base_url,
    token_safety_margin, http_timeout, upload_timeout. Missing keys keep
    their current value.

    Returns:
        True if the file existed and was applied
    """
    global FEISHU_APP_ID, FEISHU_APP_SECRET, FEISHU_BASE_URL
    global TOKEN_SAFETY_MARGIN, HTTP_TIMEOUT, UPLOAD_TIMEOUT

    if not os.path.exists(config_file):
        return False

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        print(f"配置文件 JSON 格式错误: {e}")
        return False
    except IOError as e:
        print(f"读取配置文件失败: {e}")
        return False

    if not isinstance(data, dict):
        print(f"配置文件格式错误: {config_file} 应为 JSON 对象")
        return False

    FEISHU_APP_ID = data.get("feishu_app_id", FEISHU_APP_ID)
    FEISHU_APP_SECRET = data.get("feishu_app_secret", FEISHU_APP_SECRET)
    FEISHU_BASE_URL = data.get("feishu_base_url", FEISHU_BASE_URL)
    TOKEN_SAFETY_MARGIN = _to_float(data.get("token_safety_margin", TOKEN_SAFETY_MARGIN),
                                    TOKEN_SAFETY_MARGIN, "token_safety_margin")
    HTTP_TIMEOUT = _to_float(data.get("http_timeout", HTTP_TIMEOUT), HTTP_TIMEOUT, "http_timeout")
    UPLOAD_TIMEOUT = _to_float(data.get("upload_timeout", UPLOAD_TIMEOUT), UPLOAD_TIMEOUT, "upload_timeout")
    return True


# Load configuration on module import
load_config_from_json()
