"""
JSON wire codec for OCO jobs.

The payload shape is the one the execution engine reads: camelCase keys,
`jobType` tags and prices as strings.
"""

from __future__ import annotations

import json
from typing import Any

from oco_core.domain.codec import MalformedJobError, job_from_dict
from oco_core.domain.jobs import OcoJob


def dumps_job(job: OcoJob, **kwargs: Any) -> str:
    return json.dumps(job.to_dict(), **kwargs)


def loads_job(text: str) -> OcoJob:
    """
    Raises:
        MalformedJobError: If the text is not JSON or lacks required keys
        UnknownJobTypeError: If a jobType tag is unknown
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedJobError(f"Job payload is not valid JSON: {e}") from e
    return job_from_dict(data)
