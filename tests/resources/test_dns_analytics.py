"""Tests for the DNS analytics resource."""

import pytest

from kloudflare import ROOT_URL
from kloudflare.resources.dns_analytics import DNSReport

REPORT = {
    "data": [{"dimensions": ["NOERROR"], "metrics": [42, 1.5]}],
    "data_lag": 60,
    "rows": 1,
}


class TestDNSAnalyticsResource:
    @pytest.mark.asyncio
    async def test_get_report_skips_unset_parameters(self, make_client, envelope):
        client, transport = make_client(json_body=envelope(REPORT))
        report = await client.dns_analytics.get_report("zone-1", dimensions="responseCode", limit=5)
        assert isinstance(report, DNSReport)
        assert report.data[0].metrics == [42, 1.5]
        assert transport.last["url"] == (
            f"{ROOT_URL}/zones/zone-1/dns_analytics/report?dimensions=responseCode&limit=5"
        )

    @pytest.mark.asyncio
    async def test_get_report_parameter_order(self, make_client, envelope):
        client, transport = make_client(json_body=envelope(REPORT))
        await client.dns_analytics.get_report(
            "zone-1",
            until="2024-01-02",
            since="2024-01-01",
            metrics="queryCount",
            sort="-queryCount",
        )
        assert transport.last["url"].endswith(
            "report?metrics=queryCount&since=2024-01-01&sort=-queryCount&until=2024-01-02"
        )

    @pytest.mark.asyncio
    async def test_get_report_without_parameters(self, make_client, envelope):
        client, transport = make_client(json_body=envelope(REPORT))
        await client.dns_analytics.get_report("zone-1")
        assert transport.last["url"] == f"{ROOT_URL}/zones/zone-1/dns_analytics/report"
