"""
序号状态判定

纯函数，不访问数据库。记录参数可以是 ORM 的 Serial，也可以是 SerialRecord，
只要带有相同的属性名即可。
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Union
from app.core.exceptions import ValidationError
from app.schemas.serial import NewSerial, SerialRecord

# 与 serials 表的列定义一致
CODE_MAX_LENGTH = 64
DURATION_MAX_MINUTES = 2 ** 31 - 1


def _as_utc(value: datetime) -> datetime:
    """无时区的时间按 UTC 处理"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _usage_deadline(record: Any) -> Optional[datetime]:
    if record.activated_at is None or record.duration_minutes is None:
        return None
    try:
        return _as_utc(record.activated_at) + timedelta(minutes=record.duration_minutes)
    except OverflowError:
        # 超出可表示范围，视为永不到期
        return None


def compute_effective_active(record: Any, now: Optional[datetime] = None) -> bool:
    """判断序号当前是否可用

    停用标记优先于一切时间规则；固定到期时间和使用时长各自都可以使序号失效。
    恰好等于到期时刻时仍视为有效。
    """
    if not record.is_active:
        return False

    now = _as_utc(now) if now is not None else datetime.now(timezone.utc)

    if record.expires_at is not None and now > _as_utc(record.expires_at):
        return False

    deadline = _usage_deadline(record)
    if deadline is not None and now > deadline:
        return False

    return True


def compute_effective_expiry(record: Any) -> Optional[datetime]:
    """固定到期时间与使用到期时间中较早的一个"""
    candidates = [_usage_deadline(record)]
    if record.expires_at is not None:
        candidates.append(_as_utc(record.expires_at))
    candidates = [c for c in candidates if c is not None]
    return min(candidates) if candidates else None


def normalize_code(code: Any) -> str:
    """校验并去除序号首尾空白"""
    if not isinstance(code, str) or not code.strip():
        raise ValidationError("缺少或无效的序号 (code)")
    code = code.strip()
    if len(code) > CODE_MAX_LENGTH:
        raise ValidationError(f"序号长度不能超过 {CODE_MAX_LENGTH} 个字符")
    return code


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_duration(duration: Any) -> Optional[int]:
    if _is_blank(duration):
        return None

    error = ValidationError("无效的有效分钟数 (duration)，必须是正整数")
    if isinstance(duration, bool):
        raise error
    if isinstance(duration, int):
        minutes = duration
    elif isinstance(duration, str) and duration.strip().isdecimal():
        minutes = int(duration.strip())
    else:
        raise error

    if minutes <= 0 or minutes > DURATION_MAX_MINUTES:
        raise error
    return minutes


def _parse_expires(expires: Union[datetime, str, None]) -> Optional[datetime]:
    if _is_blank(expires):
        return None

    error = ValidationError("无效的固定到期时间 (expires)，格式应为 YYYY-MM-DDTHH:mm")
    if isinstance(expires, datetime):
        try:
            return _as_utc(expires)
        except OverflowError:
            raise error
    if not isinstance(expires, str):
        raise error

    text = expires.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return _as_utc(datetime.fromisoformat(text))
    except (ValueError, OverflowError):
        raise error


def validate_new_serial(code: Any, duration: Any = None, expires: Any = None) -> NewSerial:
    """校验新增序号的输入并返回规范化结果"""
    return NewSerial(
        code=normalize_code(code),
        duration_minutes=_parse_duration(duration),
        expires_at=_parse_expires(expires),
    )


def apply_status_change(record: SerialRecord, new_is_active: bool) -> SerialRecord:
    """返回只修改了 is_active 的新记录"""
    return record.model_copy(update={"is_active": new_is_active})
