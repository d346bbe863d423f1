"""Announcement analytics aggregation.

Pure functions over validated rows; no I/O. The caller supplies the
in-window announcements (newest first), every read-fact, and every user.

Read-facts whose announcement is outside the window are ignored, so
total_reads + total_unreads always equals the number of facts for the
reported announcements. Unread counts for individual announcements and
users are population-derived (users minus reads), not fact-derived.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence

from portal.application.dtos.analytics import (
    AnnouncementAnalytics,
    AnnouncementMonth,
    AnnouncementOverview,
    AnnouncementStat,
    UserReadStatus,
)
from portal.application.dtos.records import (
    AnnouncementReadRecord,
    AnnouncementRecord,
    UserRecord,
)
from portal.shared.utils import month_key, percentage, round_half_up, round_int

UNKNOWN_USER = "Unknown User"
UNKNOWN_ROLE = "Unknown Role"
UNKNOWN_DEPARTMENT = "Unknown Department"


def _facts_in_window(
    announcements: Sequence[AnnouncementRecord],
    reads: Sequence[AnnouncementReadRecord],
) -> list[AnnouncementReadRecord]:
    ids = {a.id for a in announcements}
    return [r for r in reads if r.announcement_id in ids]


def build_overview(
    announcements: Sequence[AnnouncementRecord],
    reads: Sequence[AnnouncementReadRecord],
    total_users: int,
) -> AnnouncementOverview:
    """Totals, average reads per announcement, and overall read percentage.

    reads must already be restricted to the given announcements.
    """
    total_announcements = len(announcements)
    total_reads = sum(1 for r in reads if r.is_read is True)
    total_unreads = len(reads) - total_reads
    average_reads = total_reads / total_announcements if total_announcements else 0.0
    return AnnouncementOverview(
        total_announcements=total_announcements,
        total_users=total_users,
        total_reads=total_reads,
        total_unreads=total_unreads,
        average_reads=round_half_up(average_reads, 2),
        overall_read_percentage=round_half_up(
            percentage(total_reads, total_users * total_announcements), 2
        ),
    )


def build_recent_stats(
    announcements: Sequence[AnnouncementRecord],
    read_counts: Counter[str],
    total_users: int,
    limit: int,
) -> list[AnnouncementStat]:
    """Per-announcement read statistics for the first `limit` announcements."""
    stats: list[AnnouncementStat] = []
    for announcement in announcements[:limit]:
        read_count = read_counts[announcement.id]
        stats.append(
            AnnouncementStat(
                id=announcement.id,
                title=announcement.title,
                read_count=read_count,
                unread_count=max(0, total_users - read_count),
                read_percentage=round_int(percentage(read_count, total_users)),
                created_at=announcement.created_at,
            )
        )
    return stats


def build_monthly_trend(
    announcements: Sequence[AnnouncementRecord],
    reads: Sequence[AnnouncementReadRecord],
) -> list[AnnouncementMonth]:
    """Bucket announcements by creation month and sum their read-facts.

    Every announcement lands in exactly one bucket, including those with no
    facts. Buckets are sorted by month ascending.
    """
    read_counts: Counter[str] = Counter()
    unread_counts: Counter[str] = Counter()
    for r in reads:
        if r.is_read is True:
            read_counts[r.announcement_id] += 1
        else:
            unread_counts[r.announcement_id] += 1

    buckets: dict[str, list[int]] = defaultdict(lambda: [0, 0])
    for announcement in announcements:
        bucket = buckets[month_key(announcement.created_at)]
        bucket[0] += read_counts[announcement.id]
        bucket[1] += unread_counts[announcement.id]

    return [
        AnnouncementMonth(
            month=month,
            total_reads=total_reads,
            total_unread=total_unread,
            average_read_rate=round_int(
                percentage(total_reads, total_reads + total_unread)
            ),
        )
        for month, (total_reads, total_unread) in sorted(buckets.items())
    ]


def build_user_read_status(
    users: Sequence[UserRecord],
    reads: Sequence[AnnouncementReadRecord],
    total_announcements: int,
) -> list[UserReadStatus]:
    """Read/unread announcement counts per user, in user order."""
    read_by_user: Counter[str] = Counter(r.user_id for r in reads if r.is_read is True)
    statuses: list[UserReadStatus] = []
    for user in users:
        read_announcements = read_by_user[user.id]
        statuses.append(
            UserReadStatus(
                user_id=user.id,
                user_name=user.name or UNKNOWN_USER,
                user_role=(user.role.name if user.role else None) or UNKNOWN_ROLE,
                user_department=user.department or UNKNOWN_DEPARTMENT,
                read_announcements=read_announcements,
                unread_announcements=max(0, total_announcements - read_announcements),
            )
        )
    return statuses


def aggregate_announcement_analytics(
    announcements: Sequence[AnnouncementRecord],
    reads: Sequence[AnnouncementReadRecord],
    users: Sequence[UserRecord],
    recent_limit: int = 10,
) -> AnnouncementAnalytics:
    """Build the full announcement report.

    Args:
        announcements: In-window announcements, newest first.
        reads: All read-facts (facts for other announcements are ignored).
        users: All users with role embedded.
        recent_limit: How many of the newest announcements get per-item stats.

    Returns:
        AnnouncementAnalytics with overview, recent stats, trend, and per-user status.
    """
    window_reads = _facts_in_window(announcements, reads)
    total_users = len(users)
    read_counts: Counter[str] = Counter(
        r.announcement_id for r in window_reads if r.is_read is True
    )
    return AnnouncementAnalytics(
        overview=build_overview(announcements, window_reads, total_users),
        recent_announcements=build_recent_stats(
            announcements, read_counts, total_users, recent_limit
        ),
        monthly_trend=build_monthly_trend(announcements, window_reads),
        user_read_status=build_user_read_status(
            users, window_reads, len(announcements)
        ),
    )
