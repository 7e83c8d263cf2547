"""
Unit tests for orientation log parsers.

Tests the CCNS4 parser with synthetic logs and edge cases.
"""

import unittest
import tempfile
import os

from eo_converter.parsers.ccns_parser import (
    CCNSParser, parse_signed_coordinate, parse_time_of_day, split_fields
)
from eo_converter.utils.error_handling import FormatError

HEADER = """IGI CCNS4 exterior orientation export
Project: test block
Datum: WGS84

#Parameter  Frame  Date  Time  Event  Mark  Line  Track  Mode  Lat  Lon  Alt  Speed  Heading
"""


def data_line(frame=1, time='120000', line=2, track=3, lat='N40.0', lon='E003.5',
              alt='100.0', heading='90.0'):
    """Build a data line with the CCNS4 field positions."""
    return f"EO {frame} 20240501 {time} 17 M {line} {track} A {lat} {lon} {alt} 65.2 {heading}"


class TestHelpers(unittest.TestCase):
    """Test field parsing helpers."""

    def test_split_fields_collapses_spaces(self):
        """Test that runs of spaces produce no empty tokens."""
        self.assertEqual(split_fields("  a   b c  "), ['a', 'b', 'c'])
        self.assertEqual(split_fields("   "), [])

    def test_hemisphere_signs(self):
        """Test latitude and longitude hemisphere prefixes."""
        self.assertAlmostEqual(parse_signed_coordinate('N12.3', 'N'), 12.3)
        self.assertAlmostEqual(parse_signed_coordinate('S12.3', 'N'), -12.3)
        self.assertAlmostEqual(parse_signed_coordinate('E45.6', 'E'), 45.6)
        self.assertAlmostEqual(parse_signed_coordinate('W45.6', 'E'), -45.6)
        self.assertAlmostEqual(parse_signed_coordinate('S1234.5', 'N'), -1234.5)

    def test_unknown_prefix_is_negative(self):
        """Test that any prefix other than the positive one flips the sign."""
        self.assertAlmostEqual(parse_signed_coordinate('X1.5', 'N'), -1.5)

    def test_invalid_coordinate(self):
        """Test malformed coordinate tokens."""
        with self.assertRaises(ValueError):
            parse_signed_coordinate('', 'N')
        with self.assertRaises(ValueError):
            parse_signed_coordinate('Nabc', 'N')

    def test_non_finite_coordinate(self):
        """Test that nan and infinite magnitudes are rejected."""
        for token in ('Nnan', 'Ninf', 'S-inf', 'Einfinity'):
            with self.assertRaises(ValueError):
                parse_signed_coordinate(token, 'N')

    def test_time_of_day(self):
        """Test HHMMSS conversion to seconds since midnight."""
        self.assertEqual(parse_time_of_day('013045'), 5445)
        self.assertEqual(parse_time_of_day('120000'), 43200)
        self.assertEqual(parse_time_of_day('000000'), 0)
        self.assertEqual(parse_time_of_day('235959'), 86399)

    def test_time_of_day_ignores_fraction(self):
        """Test that characters after HHMMSS are ignored."""
        self.assertEqual(parse_time_of_day('013045.75'), 5445)

    def test_invalid_time_of_day(self):
        """Test malformed time tokens."""
        for token in ('1230', '250000', '126000', '12ab00'):
            with self.assertRaises(ValueError):
                parse_time_of_day(token)


class TestCCNSParser(unittest.TestCase):
    """Test CCNS4 parser functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.parser = CCNSParser()

    def test_supported_extensions(self):
        """Test that parser supports correct extensions."""
        self.assertIn('.eo', self.parser.supported_extensions)

    def test_validate_file_nonexistent(self):
        """Test validation of non-existent file."""
        self.assertFalse(self.parser.validate_file('nonexistent.eo'))

    def test_parse_single_record(self):
        """Test parsing every positional field."""
        records = self.parser.parse(HEADER + data_line() + "\n")

        self.assertEqual(len(records), 1)
        record = records[0]
        self.assertEqual(record.frame_number, 1)
        self.assertEqual(record.pass_number, 2)
        self.assertEqual(record.track_number, 3)
        self.assertAlmostEqual(record.latitude_deg, 40.0)
        self.assertAlmostEqual(record.longitude_deg, 3.5)
        self.assertAlmostEqual(record.altitude, 100.0)
        self.assertAlmostEqual(record.heading_deg, 90.0)
        self.assertEqual(record.elapsed_seconds, 43200)

    def test_parse_preserves_order(self):
        """Test that records come back in file order."""
        lines = [data_line(frame=frame, time=f"1200{frame:02d}") for frame in (5, 3, 9, 1)]
        records = self.parser.parse(HEADER + "\n".join(lines))

        self.assertEqual([r.frame_number for r in records], [5, 3, 9, 1])
        self.assertEqual([r.elapsed_seconds for r in records], [43205, 43203, 43209, 43201])

    def test_blank_lines_skipped(self):
        """Test that blank and space-only lines are not records."""
        text = HEADER + "\n" + data_line(frame=1) + "\n   \n\n" + data_line(frame=2) + "\n\n"
        records = self.parser.parse(text)
        self.assertEqual([r.frame_number for r in records], [1, 2])

    def test_extra_spaces_between_fields(self):
        """Test that repeated spaces do not shift field positions."""
        line = data_line().replace(' ', '   ')
        records = self.parser.parse(HEADER + line)
        self.assertEqual(records[0].track_number, 3)
        self.assertAlmostEqual(records[0].longitude_deg, 3.5)

    def test_southern_western_hemisphere(self):
        """Test sign handling in a full line."""
        records = self.parser.parse(HEADER + data_line(lat='S33.45', lon='W070.66'))
        self.assertAlmostEqual(records[0].latitude_deg, -33.45)
        self.assertAlmostEqual(records[0].longitude_deg, -70.66)

    def test_sentinel_only_header(self):
        """Test a log with nothing before the sentinel."""
        records = self.parser.parse("#Parameter\n" + data_line())
        self.assertEqual(len(records), 1)

    def test_sentinel_with_leading_spaces(self):
        """Test that leading spaces do not hide the sentinel."""
        records = self.parser.parse("header\n   #Parameter x y\n" + data_line())
        self.assertEqual(len(records), 1)

    def test_no_records_after_sentinel(self):
        """Test a log that ends at the sentinel."""
        self.assertEqual(self.parser.parse(HEADER), [])

    def test_missing_sentinel(self):
        """Test that logs without the sentinel are rejected."""
        with self.assertRaises(FormatError):
            self.parser.parse("some other file\n" + data_line())

    def test_empty_text(self):
        """Test parsing empty text."""
        with self.assertRaises(FormatError):
            self.parser.parse("")

    def test_sentinel_must_be_first_token(self):
        """Test that the sentinel elsewhere on a line is not accepted."""
        with self.assertRaises(FormatError):
            self.parser.parse("Header #Parameter\n" + data_line())

    def test_short_line(self):
        """Test that missing fields abort the parse."""
        with self.assertRaises(FormatError) as context:
            self.parser.parse(HEADER + data_line() + "\nEO 2 20240501 120001 17 M 2 3")
        self.assertIn('Line 7', str(context.exception))

    def test_non_numeric_field(self):
        """Test that non-numeric values abort the parse."""
        with self.assertRaises(FormatError):
            self.parser.parse(HEADER + data_line(alt='high'))
        with self.assertRaises(FormatError):
            self.parser.parse(HEADER + data_line(frame='one'))
        with self.assertRaises(FormatError):
            self.parser.parse(HEADER + data_line(heading='90,5'))

    def test_non_finite_values(self):
        """Test that nan and infinite altitudes, headings and coordinates abort the parse."""
        for heading in ('nan', 'inf', '-inf', 'NaN'):
            with self.assertRaises(FormatError):
                self.parser.parse(HEADER + data_line(heading=heading))
        with self.assertRaises(FormatError):
            self.parser.parse(HEADER + data_line(alt='nan'))
        for lat in ('Nnan', 'Ninf'):
            with self.assertRaises(FormatError):
                self.parser.parse(HEADER + data_line(lat=lat))
        with self.assertRaises(FormatError):
            self.parser.parse(HEADER + data_line(lon='Winf'))

    def test_out_of_range_coordinate(self):
        """Test that impossible coordinates abort the parse."""
        with self.assertRaises(FormatError):
            self.parser.parse(HEADER + data_line(lat='N95.0'))

    def test_custom_sentinel(self):
        """Test a configured sentinel token."""
        parser = CCNSParser({'sentinel': '#Data'})
        records = parser.parse("#Data\n" + data_line())
        self.assertEqual(len(records), 1)

    def test_parse_file(self):
        """Test parsing from disk."""
        with tempfile.NamedTemporaryFile('w', suffix='.eo', delete=False) as f:
            f.write(HEADER + data_line(frame=7) + "\n")
            temp_path = f.name

        try:
            self.assertTrue(self.parser.validate_file(temp_path))
            records = self.parser.parse_file(temp_path)
            self.assertEqual(records[0].frame_number, 7)
        finally:
            os.unlink(temp_path)

    def _write_bytes(self, content):
        with tempfile.NamedTemporaryFile('wb', suffix='.eo', delete=False) as f:
            f.write(content)
            self.addCleanup(os.unlink, f.name)
            return f.name

    def test_undecodable_byte_in_field(self):
        """Test that a stray byte inside a number is not dropped silently."""
        line = data_line(lat='N4_0.0').encode('ascii').replace(b'_', b'\xff')
        temp_path = self._write_bytes(HEADER.encode('ascii') + line + b"\n")

        with self.assertRaises(FormatError):
            self.parser.parse_file(temp_path)

    def test_undecodable_byte_in_header(self):
        """Test that undecodable header bytes do not prevent parsing."""
        header = b"Operator: Mu\xf1oz\n" + HEADER.encode('ascii')
        temp_path = self._write_bytes(header + data_line(frame=4).encode('ascii') + b"\n")

        records = self.parser.parse_file(temp_path)
        self.assertEqual(records[0].frame_number, 4)

    def test_parse_file_missing(self):
        """Test parsing a file that doesn't exist."""
        with self.assertRaises(FileNotFoundError):
            self.parser.parse_file('nonexistent.eo')


if __name__ == '__main__':
    unittest.main()
