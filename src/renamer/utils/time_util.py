from datetime import datetime

from renamer.utils.constants import DATE_FORMAT, DATETIME_FORMAT, LOG_TIMESTAMP_FORMAT


def date_stamp(now: datetime) -> str:
    return now.strftime(DATE_FORMAT)


def datetime_stamp(now: datetime) -> str:
    return now.strftime(DATETIME_FORMAT)


def log_timestamp(now: datetime | None = None) -> str:
    return (now or datetime.now()).strftime(LOG_TIMESTAMP_FORMAT)


def get_runtime_string(time_in_seconds):
    runtime_hours = int(time_in_seconds // 3600)
    runtime_mins = int((time_in_seconds % 3600) // 60)
    runtime_secs = int(time_in_seconds % 60)
    if runtime_hours > 0:
        return f"{runtime_hours}h{runtime_mins}m{runtime_secs}s"
    if runtime_mins > 0:
        return f"{runtime_mins}m{runtime_secs}s"
    return f"{runtime_secs}s"
