"""DNS analytics reports for a zone."""

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from kloudflare.query import append_parameters

if TYPE_CHECKING:
    from kloudflare.client import Kloudflare


class DNSReportData(BaseModel):
    """One row: dimension values and the metric values they aggregate to."""

    dimensions: list[str] = Field(default_factory=list)
    metrics: list[float] = Field(default_factory=list)


class DNSReport(BaseModel):
    data: list[DNSReportData] = Field(default_factory=list)
    data_lag: float = 0
    rows: int = 0


class DNSAnalyticsResource:
    def __init__(self, client: "Kloudflare") -> None:
        self._client = client

    async def get_report(
        self,
        zone_id: str,
        *,
        dimensions: str | None = None,
        filters: str | None = None,
        limit: int | None = None,
        metrics: str | None = None,
        since: str | None = None,
        sort: str | None = None,
        until: str | None = None,
    ) -> DNSReport:
        """Get a DNS report for a zone.

        Args:
            zone_id: Zone identifier.
            dimensions: Comma-separated dimensions to group results by.
            filters: Segmentation filter in ``attribute operator value`` format.
            limit: Maximum number of rows.
            metrics: Comma-separated metrics to return.
            since: Start of the report window (ISO 8601).
            sort: Comma-separated dimensions to sort by, each optionally
                prefixed with ``-`` (descending) or ``+`` (ascending).
            until: End of the report window (ISO 8601).

        Values are placed in the query string verbatim; encode reserved
        characters (e.g. in ``filters``) before passing them.
        """
        path = append_parameters(
            f"/zones/{zone_id}/dns_analytics/report",
            {
                "dimensions": dimensions,
                "filters": filters,
                "limit": limit,
                "metrics": metrics,
                "since": since,
                "sort": sort,
                "until": until,
            },
        )
        return await self._client.get(path, DNSReport)
