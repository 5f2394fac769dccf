import json
import logging
import os
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Set up logging
logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())

TIMEZONE_NAME = "Asia/Singapore"
TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M:%S"


class GreetingError(Exception):
    """Base class for failures that abort an invocation."""


class ClockUnavailable(GreetingError):
    pass


class TimezoneDataMissing(GreetingError):
    pass


def get_greeting(hour):
    """Map a 24-hour clock hour to its greeting. Out of range hours get the evening greeting."""
    if hour < 12:
        return "Good morning"
    elif 12 <= hour < 18:
        return "Good afternoon"
    else:
        return "Good evening"


def utc_now():
    return datetime.now(timezone.utc)


def singapore_now():
    """Current time in Singapore as an aware datetime"""
    try:
        tz = ZoneInfo(TIMEZONE_NAME)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise TimezoneDataMissing(f"No timezone data for {TIMEZONE_NAME}") from e

    try:
        now = utc_now()
    except (OSError, OverflowError) as e:
        raise ClockUnavailable(f"Could not read system clock: {e}") from e
    if now.tzinfo is None or now.utcoffset() is None:
        raise ClockUnavailable("System clock returned a naive datetime")

    return now.astimezone(tz)


def format_timestamp(dt):
    """
    Render `dt` as dd-MM-yyyy HH:mm:ss followed by the UTC offset.

    • The offset is written as ±HH:MM, e.g. 25-12-2024 14:05:09+08:00.
    • A zero offset is written as Z, e.g. 25-12-2024 06:05:09Z.
    """
    offset = dt.utcoffset()
    if not offset:
        suffix = "Z"
    else:
        minutes = int(offset.total_seconds()) // 60
        sign = "+" if minutes >= 0 else "-"
        hours, minutes = divmod(abs(minutes), 60)
        suffix = f"{sign}{hours:02d}:{minutes:02d}"
    return dt.strftime(TIMESTAMP_FORMAT) + suffix


def build_message(now):
    return f"{get_greeting(now.hour)}! The time now is {format_timestamp(now)}"


def handler(event, context):
    """Greet according to the time of day in Singapore and echo the event back"""
    request_id = getattr(context, "aws_request_id", None)

    try:
        message = build_message(singapore_now())
    except GreetingError as e:
        logger.error(f"Error: {type(e).__name__}: {str(e)}")
        raise
    logger.info(f"request_id: {request_id}, message: {message}")

    return {
        "statusCode": 200,
        "body": json.dumps(
            {
                "message": message,
                "input": event,
            },
            indent=2,
            ensure_ascii=False,
        ),
    }
