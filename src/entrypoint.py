"""CLIエントリーポイント"""
import argparse
import asyncio
import json
import sys
from typing import Optional

from .features.app.container import AppContainer
from .features.location.domain.models import LocationInput
from .features.location.domain.results import LoadStatus
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import ValidationError
from .shared.logging.config import get_logger, setup_logging
from .shared.utils.datetime_utils import format_duration, ms_to_datetime, to_ist

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを生成"""
    parser = argparse.ArgumentParser(
        description="HelpKey クライアントキャッシュ管理ツール"
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("show", help="保存済みロケーションを表示")

    set_parser = subparsers.add_parser("set", help="ロケーションを保存")
    set_parser.add_argument("--description", required=True, help="表示用の地名")
    set_parser.add_argument("--place-id", required=True, help="Place ID")
    set_parser.add_argument("--lat", type=float, help="緯度")
    set_parser.add_argument("--lng", type=float, help="経度")

    subparsers.add_parser("clear", help="保存済みロケーションを削除")
    subparsers.add_parser("hotels-status", help="ホテル一覧キャッシュの状態を表示")
    subparsers.add_parser("hotels-clear", help="ホテル一覧キャッシュを削除")

    return parser


async def run_command(args: argparse.Namespace, container: AppContainer) -> int:
    """
    サブコマンドを実行

    Returns:
        int: 終了コード（0: 成功, 1: 失敗）
    """
    location_cache = container.location_cache
    hotel_cache = container.hotel_cache

    if args.command == "show":
        result = await location_cache.load_result()

        if result.status is LoadStatus.ABSENT:
            print("No location stored")
            return 0
        if not result.found:
            print(f"Stored location unavailable ({result.status.value}): {result.error}")
            return 1

        location = result.location
        age = format_duration(location_cache.age_ms(location) / 1000)
        saved_at = to_ist(ms_to_datetime(location.timestamp)).strftime("%Y-%m-%d %H:%M:%S %Z")
        print(json.dumps(location.to_storage_dict(), ensure_ascii=False, indent=2))
        print(f"Saved at: {saved_at} ({age} ago)")
        print(f"Recent: {'yes' if location_cache.is_recent(location) else 'no'}")
        return 0

    if args.command == "set":
        try:
            location = LocationInput(
                description=args.description,
                place_id=args.place_id,
                latitude=args.lat,
                longitude=args.lng,
            )
        except ValidationError as e:
            print(f"Invalid location: {e}")
            return 1

        save_result = await location_cache.save_result(location)
        if not save_result.ok:
            print(f"Failed to save location: {save_result.error}")
            return 1
        print(f"Location saved: {location.description}")
        return 0

    if args.command == "clear":
        clear_result = await location_cache.clear_result()
        if not clear_result.ok:
            print(f"Failed to clear location: {clear_result.error}")
            return 1
        print("Location cleared")
        return 0

    if args.command == "hotels-status":
        if await hotel_cache.is_valid():
            hotels = await hotel_cache.get_hotels() or []
            print(f"Hotel cache valid: {len(hotels)} hotels")
        else:
            print("Hotel cache empty or expired")
        return 0

    if args.command == "hotels-clear":
        await hotel_cache.clear()
        print("Hotel cache cleared")
        return 0

    logger.error(f"Unknown command: {args.command}")
    return 1


def main(argv: Optional[list[str]] = None) -> int:
    """
    メインエントリーポイント

    Returns:
        int: 終了コード（0: 成功, 1: 失敗, 130: 中断）
    """
    args = build_parser().parse_args(argv)

    try:
        # 設定を読み込み
        settings = Settings(_env_file=args.env_file)

        # ログレベルを上書き
        if args.log_level:
            settings.log_level = args.log_level

        setup_logging(
            level=settings.log_level,
            enable_cloud_logging=settings.gcp_logging_enabled,
            project_id=settings.gcp_project_id,
            force=True,
        )

        logger.debug(f"Environment: {settings.environment}")
        logger.debug(f"Storage backend: {settings.storage_backend}")

        container = AppContainer(settings)
        return asyncio.run(run_command(args, container))

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # SIGINT
    except Exception as e:
        logger.error(f"Command failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
