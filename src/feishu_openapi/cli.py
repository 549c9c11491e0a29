import argparse
import json
import sys
from datetime import datetime

from feishu_openapi import config
from feishu_openapi.errors import FeishuError, parse_response
from feishu_openapi.feishu_client import FeishuClient
from feishu_openapi.logger import LogLevel, logger, mask


def _ensure_client(args) -> FeishuClient:
    """Create a FeishuClient from config, honoring --config/--base-url overrides."""
    if args.config:
        if not config.load_config_from_json(args.config):
            logger.warning(f"未能加载配置文件: {args.config}")
    return FeishuClient.from_config(base_url=args.base_url)


def cmd_token(args) -> int:
    with _ensure_client(args) as client:
        provider = client.app_token if args.app else client.tenant_token
        try:
            value = provider.get()
        except FeishuError as e:
            logger.error(f"获取 {provider.name} 失败: {e}")
            return 1

        expires_at = datetime.fromtimestamp(provider.cached.expires_at)
    shown = value if args.show else mask(value)
    print(f"{provider.name}: {shown}")
    print(f"expires_at: {expires_at:%Y-%m-%d %H:%M:%S}")
    return 0


def cmd_send(args) -> int:
    payload = {
        args.receive_id_type: args.receive_id,
        "msg_type": "text",
        "content": {"text": args.text},
    }
    with _ensure_client(args) as client:
        try:
            body = client.send_message(payload)
            data = parse_response(body)
        except FeishuError as e:
            logger.error(f"发送消息失败: {e}")
            return 1

    logger.success("消息已发送")
    print(json.dumps(data.get("data", {}), ensure_ascii=False))
    return 0


def cmd_check(args) -> int:
    """检查配置与凭证是否可用"""
    logger.header("Feishu OpenAPI 健康检查", icon="🩺")
    ok = True

    with _ensure_client(args) as client:
        if client.app_id and client.app_secret:
            logger.success(f"App ID 已配置: {mask(client.app_id, 5)}")
        else:
            logger.error("FEISHU_APP_ID 或 FEISHU_APP_SECRET 未配置")
            return 1

        logger.info(f"API 地址: {client.base_url}")
        for provider in (client.tenant_token, client.app_token):
            try:
                provider.get()
                logger.success(f"{provider.name} 获取成功")
            except FeishuError as e:
                logger.error(f"{provider.name} 获取失败: {e}")
                ok = False
    return 0 if ok else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="feishu-openapi",
        description="Feishu/Lark 开放平台 API 命令行工具",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="""
示例:
  1. 获取 tenant_access_token:
     feishu-openapi token

  2. 给群发送文本消息:
     feishu-openapi send --receive-id-type chat_id --receive-id oc_xxx --text "hello"

  3. 检查配置与凭证:
     feishu-openapi check
"""
    )
    parser.add_argument("--config", help="JSON 配置文件路径 (默认读取 feishu_config.json)")
    parser.add_argument("--base-url", help="API 地址, 例如 https://open.larksuite.com")
    parser.add_argument("--debug", action="store_true", help="输出调试日志")
    subparsers = parser.add_subparsers(dest="command")

    token_parser = subparsers.add_parser("token", help="获取访问凭证")
    token_parser.add_argument("--app", action="store_true", help="获取 app_access_token 而非 tenant_access_token")
    token_parser.add_argument("--show", action="store_true", help="显示完整 token")
    token_parser.set_defaults(func=cmd_token)

    send_parser = subparsers.add_parser("send", help="发送文本消息")
    send_parser.add_argument("--receive-id-type", default="chat_id",
                             choices=["open_id", "user_id", "email", "chat_id"])
    send_parser.add_argument("--receive-id", required=True)
    send_parser.add_argument("--text", required=True)
    send_parser.set_defaults(func=cmd_send)

    check_parser = subparsers.add_parser("check", help="健康检查")
    check_parser.set_defaults(func=cmd_check)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logger.set_level(LogLevel.DEBUG)

    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
