"""The authenticated user: profile edits and abuse reports."""

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from kloudflare.client import Kloudflare

# =============================================================================
# Constants
# =============================================================================

MAX_REPORTED_IPS = 30
MAX_PORTS_PROTOCOLS = 30

# =============================================================================
# Abuse Reports
# =============================================================================


class ReportType(str, Enum):
    ABUSE_DMCA = "abuse_dmca"
    ABUSE_TRADEMARK = "abuse_trademark"
    ABUSE_GENERAL = "abuse_general"
    ABUSE_PHISHING = "abuse_phishing"
    ABUSE_CHILDREN = "abuse_children"
    ABUSE_THREAT = "abuse_threat"
    ABUSE_REGISTRAR_WHOIS = "abuse_registrar_whois"
    ABUSE_NCSEI = "abuse_ncsei"


class ReportNotificationType(str, Enum):
    """Who gets notified about a report. DMCA and trademark reports cannot be anonymous."""

    SEND = "send"
    SEND_ANONYMOUS = "send_anon"
    NONE = "none"


class AbuseReport(BaseModel):
    """An abuse report to submit.

    Only ``type``, ``email`` and at least one URL are required. List fields are
    joined into the delimited strings the API expects by ``to_wire``.
    """

    type: ReportType
    email: str
    urls: tuple[str, ...] = Field(min_length=1)
    agree: bool = True
    host_notification: ReportNotificationType = ReportNotificationType.SEND
    ncmec_notification: ReportNotificationType = ReportNotificationType.SEND
    owner_notification: ReportNotificationType = ReportNotificationType.SEND
    address: str | None = None
    agent: str | None = None
    city: str | None = None
    comments: str | None = None
    company: str | None = None
    country: str | None = None
    destination_ips: tuple[str, ...] | None = Field(default=None, max_length=MAX_REPORTED_IPS)
    justification: str | None = None
    name: str | None = None
    ncsei_subject_representation: bool | None = None
    original_work: bool | None = None
    ports_protocols: tuple[str, ...] | None = Field(default=None, max_length=MAX_PORTS_PROTOCOLS)
    source_ips: tuple[str, ...] | None = Field(default=None, max_length=MAX_REPORTED_IPS)
    state: str | None = None
    telephone: str | None = None
    title: str | None = None
    trademark_number: str | None = None
    trademark_office: str | None = None
    trademark_symbol: str | None = None

    model_config = {"frozen": True}

    def to_wire(self) -> dict[str, Any]:
        """Render the report in the API's form (omits unset optional fields)."""
        wire: dict[str, Any] = {
            "act": self.type.value,
            "agree": 1 if self.agree else 0,
            "email": self.email,
            "email2": self.email,
            "urls": "\n".join(self.urls),
            "host_notification": self.host_notification.value,
            "ncmec_notification": self.ncmec_notification.value,
            "owner_notification": self.owner_notification.value,
            "address1": self.address,
            "agent_name": self.agent,
            "city": self.city,
            "comments": self.comments,
            "company": self.company,
            "country": self.country,
            "destination_ips": _join(self.destination_ips, "\n"),
            "justification": self.justification,
            "name": self.name,
            "ncsei_subject_representation": self.ncsei_subject_representation,
            "original_work": self.original_work,
            "ports_protocols": _join(self.ports_protocols, ","),
            "signature": self.name,
            "source_ips": _join(self.source_ips, "\n"),
            "state": self.state,
            "tele": self.telephone,
            "title": self.title,
            "trademark_number": self.trademark_number,
            "trademark_office": self.trademark_office,
            "trademark_symbol": self.trademark_symbol,
        }
        return {key: value for key, value in wire.items() if value is not None}


def _join(values: tuple[str, ...] | None, separator: str) -> str | None:
    return separator.join(values) if values is not None else None


class AbuseRequest(BaseModel):
    act: ReportType


class AbuseReportResponse(BaseModel):
    """``abuse_rand`` is the report's tracking id."""

    abuse_rand: str
    request: AbuseRequest
    result: str


# =============================================================================
# User
# =============================================================================


class EditUser(BaseModel):
    """Profile fields to change. Unset fields are left as they are."""

    country: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    telephone: str | None = None
    zipcode: str | None = None

    model_config = {"frozen": True}


class UserResource:
    def __init__(self, client: "Kloudflare") -> None:
        self._client = client

    async def edit(self, changes: EditUser) -> dict[str, Any]:
        """Edit the authenticated user's profile and return the updated user."""
        return await self._client.patch("/user", dict[str, Any], changes)

    async def submit_abuse_report(self, account_id: str, report: AbuseReport) -> AbuseReportResponse:
        return await self._client.post(
            f"/accounts/{account_id}/abuse_reports/{report.type.value}",
            AbuseReportResponse,
            report.to_wire(),
        )
