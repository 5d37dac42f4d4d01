"""
Build Data Validation

Checks raw build data emitted by the CI server against the input contract and
converts it into a BuildEvent. Invalid data yields None instead of raising, so
callers can drop events that are not theirs to act on.
"""

import logging
from typing import Any, Optional

from .settings import parse_slack_settings
from .types import BuildEvent, BuildStatus, CommitInfo

logger = logging.getLogger(__name__)

BUILD_DATA_KEYS = frozenset({
    "settings",
    "status",
    "pipeline",
    "jobName",
    "build",
    "event",
    "buildLink",
})


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _parse_status(value: Any) -> Optional[BuildStatus]:
    if isinstance(value, str) and value in BuildStatus.__members__:
        return BuildStatus[value]
    return None


def _parse_build_id(build: Any) -> Optional[int]:
    if not isinstance(build, dict):
        return None
    build_id = build.get("id")
    # bool is an int subclass but never a valid build id
    if isinstance(build_id, bool) or not isinstance(build_id, int):
        return None
    return build_id


def _parse_repo_name(pipeline: Any) -> Optional[str]:
    if not isinstance(pipeline, dict):
        return None
    scm_repo = pipeline.get("scmRepo")
    if not isinstance(scm_repo, dict):
        return None
    name = scm_repo.get("name")
    return name if _non_empty_str(name) else None


def parse_commit(event: Any) -> Optional[CommitInfo]:
    """
    Extract commit details from the `event` block of build data.

    Args:
        event: Raw `event` value

    Returns:
        CommitInfo if sha, commit message, commit url and cause message are
        all strings, None otherwise
    """
    if not isinstance(event, dict):
        return None

    commit = event.get("commit")
    if not isinstance(commit, dict):
        return None

    fields = (
        event.get("sha"),
        commit.get("message"),
        commit.get("url"),
        event.get("causeMessage"),
    )
    if not all(isinstance(f, str) for f in fields):
        return None

    sha, message, url, cause_message = fields
    return CommitInfo(sha=sha, message=message, url=url, cause_message=cause_message)


def _reject(reason: str) -> None:
    logger.debug("Ignoring build data: %s", reason)
    return None


def parse_build_event(data: Any) -> Optional[BuildEvent]:
    """
    Validate raw build data and convert it into a BuildEvent.

    Args:
        data: Build data mapping emitted with a build status event

    Returns:
        BuildEvent, or None if the data does not satisfy the input contract
    """
    if not isinstance(data, dict):
        return _reject("build data is not a mapping")

    unknown = set(data) - BUILD_DATA_KEYS
    if unknown:
        return _reject(f"unknown keys {sorted(map(repr, unknown))}")

    settings = data.get("settings")
    if not isinstance(settings, dict):
        return _reject("settings missing")

    status = _parse_status(data.get("status"))
    if status is None:
        return _reject(f"invalid status {data.get('status')!r}")

    repo_name = _parse_repo_name(data.get("pipeline"))
    if repo_name is None:
        return _reject("pipeline.scmRepo.name missing")

    job_name = data.get("jobName")
    if job_name is not None and not _non_empty_str(job_name):
        return _reject("jobName is not a string")

    build_id = _parse_build_id(data.get("build"))
    if build_id is None:
        return _reject("build.id missing or not an integer")

    build_link = data.get("buildLink")
    if not _non_empty_str(build_link):
        return _reject("buildLink missing")

    event = data.get("event")
    if event is not None and not isinstance(event, dict):
        return _reject("event is not a mapping")

    slack = None
    if settings:
        slack = parse_slack_settings(settings.get("slack"))
        if slack is None:
            return _reject("settings.slack is not a channel, channel list or settings object")

    # Commit details are only required for full messages; the notifier checks
    # them once the status gate has passed
    return BuildEvent(
        status=status,
        repo_name=repo_name,
        build_id=build_id,
        build_link=build_link,
        job_name=job_name,
        commit=parse_commit(event),
        slack=slack,
    )
