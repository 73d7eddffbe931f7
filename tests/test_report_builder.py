import unittest
from decimal import Decimal

from stockbot.report_builder import (
    build_report, compute_summary, round4, signed, POSITIVE_COLOR, NEGATIVE_COLOR,
)
from stockbot.contracts import OHLCVRecord, SeriesMatch


def _record(open_, high, low, close, volume=1000):
    return OHLCVRecord(open=open_, high=high, low=low, close=close, volume=volume)


class TestSummary(unittest.TestCase):

    def test_difference_sign_follows_input_order(self):
        up = compute_summary(_record("10", "12", "10", "12"))
        down = compute_summary(_record("12", "12", "10", "10"))
        self.assertEqual(up.difference, Decimal("2"))
        self.assertEqual(down.difference, Decimal("-2"))
        self.assertEqual(signed(up.difference), "+2.0000")
        self.assertEqual(signed(down.difference), "-2.0000")

    def test_range_is_high_minus_low(self):
        summary = compute_summary(_record("100", "105.5", "99.25", "104"))
        self.assertEqual(summary.range, Decimal("6.2500"))

    def test_change_unavailable_without_previous_close(self):
        summary = compute_summary(_record("100", "105", "99", "104"))
        self.assertFalse(summary.change_available)
        self.assertIsNone(summary.change_amount)
        self.assertIsNone(summary.percent_change)
        self.assertFalse(summary.is_positive)

    def test_percent_change_rounded_to_four_places(self):
        summary = compute_summary(_record("100", "105", "99", "104"), previous_close=Decimal("99"))
        self.assertEqual(summary.change_amount, Decimal("5.0000"))
        # 104 / 99 * 100 - 100 = 5.050505...
        self.assertEqual(summary.percent_change, Decimal("5.0505"))
        self.assertTrue(summary.is_positive)

    def test_negative_change(self):
        summary = compute_summary(_record("100", "101", "95", "96"), previous_close=Decimal("100"))
        self.assertEqual(summary.change_amount, Decimal("-4.0000"))
        self.assertEqual(summary.percent_change, Decimal("-4.0000"))
        self.assertFalse(summary.is_positive)

    def test_zero_previous_close_leaves_change_unavailable(self):
        summary = compute_summary(_record("1", "1", "1", "1"), previous_close=Decimal("0"))
        self.assertFalse(summary.change_available)


class TestFormatting(unittest.TestCase):

    def test_zero_is_not_signed(self):
        self.assertEqual(signed(round4(Decimal("0"))), "0.0000")

    def test_rounded_zero_is_never_negative(self):
        self.assertEqual(signed(round4(Decimal("-0.00001"))), "0.0000")

    def test_tiny_positive_rounding_to_zero_is_not_signed(self):
        self.assertEqual(signed(round4(Decimal("0.00004"))), "0.0000")

    def test_half_up_rounding(self):
        self.assertEqual(round4(Decimal("1.00005")), Decimal("1.0001"))
        self.assertEqual(round4(Decimal("-1.00005")), Decimal("-1.0001"))


class TestBuildReport(unittest.TestCase):

    def setUp(self):
        self.match = SeriesMatch(
            key="2024-01-02",
            record=_record("100", "105", "99", "104", 1000),
            previous_key="2024-01-01",
            previous_record=_record("98", "101", "97", "99", 900),
        )

    def test_report_layout(self):
        report = build_report("TSLA", "Time Series (Daily)", self.match)
        self.assertEqual(report.title, "**TSLA** Stock Data")
        self.assertEqual(report.subtitle, "*From Time Series (Daily), at 2024-01-02*")
        self.assertEqual(
            [f.name for f in report.fields],
            ["Open", "Close", "Difference", "High", "Low", "Range", "Volume", "Change (*from 2024-01-01*)"],
        )
        self.assertTrue(all(f.inline for f in report.fields[:6]))
        self.assertFalse(report.get_field("Volume").inline)

    def test_report_values(self):
        report = build_report("TSLA", "Time Series (Daily)", self.match)
        values = {f.name: f.value for f in report.fields}
        self.assertEqual(values["Open"], "100 USD")
        self.assertEqual(values["Close"], "104 USD")
        self.assertEqual(values["Difference"], "+4.0000 USD")
        self.assertEqual(values["High"], "105 USD")
        self.assertEqual(values["Low"], "99 USD")
        self.assertEqual(values["Range"], "6.0000 USD")
        self.assertEqual(values["Volume"], "1000")
        self.assertEqual(values["Change (*from 2024-01-01*)"], "+5.0000 USD (+5.0505%)")
        self.assertEqual(report.color, POSITIVE_COLOR)

    def test_provider_formatting_of_prices_is_kept(self):
        match = SeriesMatch(key="2024-01-02", record=_record("100.1000", "105", "99", "104"))
        report = build_report("TSLA", "Time Series (Daily)", match)
        self.assertEqual(report.get_field("Open").value, "100.1000 USD")

    def test_negative_change_is_red(self):
        match = self.match.model_copy(update={"previous_record": _record("110", "111", "109", "110", 1)})
        report = build_report("TSLA", "Time Series (Daily)", match)
        self.assertEqual(report.color, NEGATIVE_COLOR)
        self.assertEqual(report.get_field("Change").value, "-6.0000 USD (-5.4545%)")

    def test_no_predecessor_reports_change_unavailable(self):
        match = SeriesMatch(key="2024-01-02", record=_record("100", "105", "99", "104"))
        report = build_report("TSLA", "Time Series (Daily)", match)
        change = report.fields[-1]
        self.assertEqual(change.name, "Change")
        self.assertEqual(change.value, "*Unavailable*")
        self.assertIsNone(report.color)


if __name__ == '__main__':
    unittest.main()
