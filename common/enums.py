"""Enumerations for denial and appeal tracking."""

from enum import Enum

# denial lifecycle, any status may move to any other
class DenialStatus(str, Enum):
    """Denial work states."""

    PENDING = "pending"
    APPEALING = "appealing"
    RESOLVED = "resolved"
    REJECTED = "rejected"


class DenialPriority(str, Enum):
    """Denial work priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class AppealType(str, Enum):
    """Appeal levels offered by payers."""

    FIRST_LEVEL = "first-level"
    SECOND_LEVEL = "second-level"
    EXTERNAL_REVIEW = "external-review"
    PEER_TO_PEER = "peer-to-peer"


class AppealStatus(str, Enum):
    """Appeal lifecycle states."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under-review"
    APPROVED = "approved"
    DENIED = "denied"
    PENDING_RESPONSE = "pending-response"


class EntityKind(str, Enum):
    """Collections exposed by the remote document database."""

    DENIALS = "denials"
    APPEALS = "appeals"
    DOCUMENTS = "documents"


class DataSource(str, Enum):
    """Where a façade result came from."""

    REMOTE = "remote"
    MOCK = "mock"
