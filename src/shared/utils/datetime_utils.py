"""日時関連ユーティリティ"""

import time
from datetime import datetime, timezone

import pytz

# インド標準時のタイムゾーン
IST = pytz.timezone("Asia/Kolkata")


def now_ms() -> int:
    """現在時刻をエポックミリ秒で取得"""
    return int(time.time() * 1000)


def now_utc() -> datetime:
    """現在のUTC時間を取得"""
    return datetime.now(timezone.utc)


def ms_to_datetime(ms: int) -> datetime:
    """
    エポックミリ秒をUTCのdatetimeに変換

    Args:
        ms: エポックミリ秒

    Returns:
        UTCのdatetime
    """
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)


def to_ist(dt: datetime) -> datetime:
    """
    datetimeをインド標準時に変換

    Args:
        dt: 変換対象のdatetime

    Returns:
        インド標準時のdatetime
    """
    if dt.tzinfo is None:
        # タイムゾーン情報がない場合はUTCとして扱う
        dt = dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(IST)


def format_duration(seconds: float) -> str:
    """
    秒数を読みやすい形式に変換

    Args:
        seconds: 秒数（負の値は符号付きで表示）

    Returns:
        "1h 23m 45s" のような文字列
    """
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")

    return sign + " ".join(parts)
