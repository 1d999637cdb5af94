"""
Tests for structured response body decoding.
"""

import pytest

from selectpdf.core.parsing import parse_text_positions, parse_usage_xml
from selectpdf.exceptions import DecodeError

USAGE_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<UsageResponse xmlns="http://schemas.datacontract.org/2004/07/SelectPdf"
               xmlns:i="http://www.w3.org/2001/XMLSchema-instance">
  <available>4950</available>
  <history>
    <UsageHistory>
      <conversions>40</conversions>
      <credits>45</credits>
      <month>9</month>
      <year>2026</year>
    </UsageHistory>
    <UsageHistory>
      <conversions>10</conversions>
      <credits>10</credits>
      <month>10</month>
      <year>2026</year>
    </UsageHistory>
  </history>
  <limit>5000</limit>
  <status>Active</status>
  <subscriptionType>Pro</subscriptionType>
  <used>50</used>
</UsageResponse>
"""


class TestTextPositions:
    def test_decodes_matches(self):
        data = b'[{"PageNumber": 2, "X": 10.5, "Y": 20, "Width": 30, "Height": 12}]'

        positions = parse_text_positions(data)

        assert len(positions) == 1
        assert positions[0].page_number == 2
        assert positions[0].x == 10.5
        assert str(positions[0]) == "Page: 2 - [X: 10.5, Y: 20, Width: 30, Height: 12]"

    def test_no_matches(self):
        assert parse_text_positions(b"[]") == []

    @pytest.mark.parametrize("data", [None, b"", b"<html>", b'{"a": 1}'])
    def test_invalid_body(self, data):
        with pytest.raises(DecodeError, match="Could not get search results."):
            parse_text_positions(data)


class TestUsageXml:
    def test_decodes_namespaced_document(self):
        usage = parse_usage_xml(USAGE_XML)

        assert usage.status == "Active"
        assert usage.subscription_type == "Pro"
        assert usage.limit == 5000
        assert usage.used == 50
        assert usage.available == 4950
        assert [(item.year, item.month) for item in usage.history] == [(2026, 9), (2026, 10)]
        assert usage.history[0].credits == 45

    def test_without_namespace_or_history(self):
        usage = parse_usage_xml(b"<UsageResponse><limit>10</limit><used></used></UsageResponse>")

        assert usage.limit == 10
        assert usage.used == 0
        assert usage.history == []

    @pytest.mark.parametrize(
        "data", [None, b"", b"<UsageResponse>", b"<Other/>", b"<UsageResponse><limit>x</limit></UsageResponse>"]
    )
    def test_invalid_document(self, data):
        with pytest.raises(DecodeError, match="Could not get API usage."):
            parse_usage_xml(data)
