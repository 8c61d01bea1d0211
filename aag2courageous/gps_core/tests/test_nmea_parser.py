"""Unit tests for the NMEA sentence decoder."""

import datetime as dt
import pytest

from aag2courageous.gps_core.parsers.nmea_parser import (
    NMEAParser,
    calculate_checksum,
    decode_sentence,
    is_vendor_comment,
    parse_date,
    parse_float,
    parse_hms,
    parse_latlon,
    split_sentence,
    validate_checksum,
)
from aag2courageous.gps_core.parsers.nmea_types import (
    IgnoredSentence,
    NMEADecodeError,
    PrimaryFix,
    SecondaryFix,
)

GGA = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
RMC = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"


def _frame(body: str) -> str:
    return f"${body}*{calculate_checksum(body):02X}"


class TestHelperFunctions:
    """Test helper parsing functions."""

    def test_parse_float_valid(self):
        assert parse_float("123.456") == pytest.approx(123.456)
        assert parse_float("0") == pytest.approx(0.0)
        assert parse_float("-45.5") == pytest.approx(-45.5)

    def test_parse_float_empty(self):
        assert parse_float(None) is None
        assert parse_float("") is None

    def test_parse_float_invalid(self):
        with pytest.raises(NMEADecodeError, match="altitude"):
            parse_float("abc", "altitude")
        with pytest.raises(NMEADecodeError):
            parse_float("nan")

    def test_parse_latlon_north_east(self):
        # 48 degrees, 7.038 minutes = 48.1173 degrees
        result = parse_latlon("4807.038", "N", is_lat=True)
        assert result == pytest.approx(48.1173, rel=1e-4)

        # 11 degrees, 31.000 minutes = 11.5166 degrees
        result = parse_latlon("01131.000", "E", is_lat=False)
        assert result == pytest.approx(11.5166, rel=1e-4)

    def test_parse_latlon_south_west(self):
        assert parse_latlon("3348.456", "S", is_lat=True) < 0
        assert parse_latlon("15101.123", "W", is_lat=False) < 0

    def test_parse_latlon_empty(self):
        assert parse_latlon("", "", is_lat=True) is None
        assert parse_latlon(None, None, is_lat=False) is None

    def test_parse_latlon_invalid(self):
        with pytest.raises(NMEADecodeError):
            parse_latlon("4807.038", "", is_lat=True)
        with pytest.raises(NMEADecodeError):
            parse_latlon("", "N", is_lat=True)
        with pytest.raises(NMEADecodeError):
            parse_latlon("4807.038", "E", is_lat=True)
        with pytest.raises(NMEADecodeError):
            parse_latlon("48x7.038", "N", is_lat=True)

    def test_parse_hms_valid(self):
        assert parse_hms("123519") == dt.time(12, 35, 19)

    def test_parse_hms_with_fractional_seconds(self):
        result = parse_hms("123519.500")
        assert result == dt.time(12, 35, 19, 500000)

    def test_parse_hms_empty(self):
        assert parse_hms(None) is None
        assert parse_hms("") is None

    def test_parse_hms_invalid(self):
        for value in ("abc", "1235", "256000", "123519.x"):
            with pytest.raises(NMEADecodeError):
                parse_hms(value)

    def test_parse_date_valid(self):
        assert parse_date("230394") == dt.date(2094, 3, 23)
        assert parse_date("010124") == dt.date(2024, 1, 1)

    def test_parse_date_invalid(self):
        assert parse_date(None) is None
        assert parse_date("") is None
        for value in ("12345", "1234567", "abcdef", "320124"):
            with pytest.raises(NMEADecodeError):
                parse_date(value)


class TestChecksum:
    """Test NMEA checksum handling."""

    def test_valid_checksum(self):
        assert validate_checksum(GGA) is True
        assert validate_checksum(RMC) is True

    def test_reference_sentences_match_computed_checksum(self):
        assert _frame(GGA[1:-3]) == GGA
        assert _frame(RMC[1:-3]) == RMC

    def test_invalid_checksum(self):
        assert validate_checksum(GGA[:-2] + "00") is False

    def test_missing_checksum(self):
        assert validate_checksum(GGA.split("*")[0]) is False

    def test_split_rejects_mismatch(self):
        with pytest.raises(NMEADecodeError, match="Checksum mismatch"):
            split_sentence(GGA[:-2] + "00")

    def test_split_mismatch_allowed_when_disabled(self):
        talker, sentence_type, fields = split_sentence(GGA[:-2] + "00", validate_checksums=False)
        assert (talker, sentence_type) == ("GP", "GGA")
        assert fields[0] == "123519"

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "GPGGA,123519*47",
            "$GPGGA,123519",
            "$GPGGA,123519*4",
            "$GPGGA,123519*ZZ",
        ],
    )
    def test_split_rejects_framing_errors(self, line):
        with pytest.raises(NMEADecodeError):
            split_sentence(line)

    def test_split_rejects_bad_address(self):
        with pytest.raises(NMEADecodeError, match="address"):
            split_sentence(_frame("GP,1,2"))


class TestNMEAParser:
    """Test classification and field decoding."""

    def test_decode_rmc(self):
        fix = NMEAParser().decode(RMC)

        assert isinstance(fix, PrimaryFix)
        assert fix.fix_time == dt.time(12, 35, 19)
        assert fix.fix_date == dt.date(2094, 3, 23)
        assert fix.speed_over_ground == pytest.approx(22.4)
        assert fix.true_course == pytest.approx(84.4)
        assert fix.talker_id == "GP"

    def test_decode_gga(self):
        fix = NMEAParser().decode(GGA)

        assert isinstance(fix, SecondaryFix)
        assert fix.fix_time == dt.time(12, 35, 19)
        assert fix.latitude == pytest.approx(48.1173, rel=1e-4)
        assert fix.longitude == pytest.approx(11.5166, rel=1e-4)
        assert fix.altitude == pytest.approx(545.4)
        assert fix.has_position()

    def test_decode_strips_line_ending(self):
        assert isinstance(decode_sentence(GGA + "\r\n"), SecondaryFix)

    def test_gnss_talker(self):
        fix = decode_sentence(_frame("GNRMC,120000,A,,,,,,,010124,,,N"))
        assert isinstance(fix, PrimaryFix)
        assert fix.talker_id == "GN"

    def test_other_sentence_is_ignored(self):
        result = decode_sentence(_frame("GPVTG,054.7,T,034.4,M,005.5,N,010.2,K"))
        assert result == IgnoredSentence(sentence_type="VTG", talker_id="GP")

    def test_empty_fields_decode_to_none(self):
        primary = decode_sentence(_frame("GPRMC,,V,,,,,,,,,,N"))
        assert primary == PrimaryFix(talker_id="GP")

        secondary = decode_sentence(_frame("GPGGA,120000,,,,,0,00,,,M,,M,,"))
        assert secondary.fix_time == dt.time(12, 0, 0)
        assert secondary.latitude is None
        assert not secondary.has_position()

    def test_short_sentence(self):
        with pytest.raises(NMEADecodeError, match="RMC sentence has 2 fields"):
            decode_sentence(_frame("GPRMC,123519,A"))

    def test_malformed_field(self):
        with pytest.raises(NMEADecodeError, match="Invalid time"):
            decode_sentence(_frame("GPGGA,12xx19,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,"))

    def test_fixes_are_immutable(self):
        fix = decode_sentence(GGA)
        with pytest.raises(AttributeError):
            fix.latitude = 0.0


class TestVendorComment:

    def test_paag_prefix(self):
        assert is_vendor_comment("$PAAG,DATA,garbage")
        assert not is_vendor_comment(GGA)

    def test_custom_prefix(self):
        assert is_vendor_comment("#note", "#")
        assert not is_vendor_comment("$PAAG,DATA", "")
