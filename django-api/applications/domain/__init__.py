from applications.domain.forms import ApplicationForm, prefill
from applications.domain.models import (
    Application,
    ApplicationId,
    ApplicationStatus,
    FormSnapshot,
    ParticipationType,
    partition_by_tab,
)

__all__ = [
    "Application",
    "ApplicationId",
    "ApplicationStatus",
    "FormSnapshot",
    "ParticipationType",
    "ApplicationForm",
    "prefill",
    "partition_by_tab",
]
