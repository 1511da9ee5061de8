"""
Test cases for the flat object scanner.

Tests focus on the single-cursor scan and its fail-soft stopping rules.
"""

import unittest

from vjson.core.scanner import Scanner, scan, trim


class TestScannerBasics(unittest.TestCase):
    """Test scanning of well-formed flat objects."""

    def test_mixed_scalar_object(self):
        result = scan('{"a":1,"b":true,"s":"hi"}')

        self.assertTrue(result.valid)
        self.assertEqual(result.issues, [])
        self.assertEqual(result.container.keys(), ["a", "b", "s"])
        self.assertEqual(result.container.values(), ["1", "true", "hi"])

    def test_empty_object(self):
        result = scan("  {}  ")
        self.assertTrue(result.valid)
        self.assertEqual(result.container.keys(), [])

    def test_whitespace_and_newlines(self):
        text = '{\n\t"name" : "vjson",\r\n  "port" :  8080  ,\n  "debug": false\n}'
        obj = scan(text).container

        self.assertEqual(obj.keys(), ["name", "port", "debug"])
        self.assertEqual(obj.values(), ["vjson", "8080", "false"])

    def test_bare_values_are_trimmed_quoted_values_are_not(self):
        obj = scan('{"bare":  42  , "quoted": " x "}').container
        self.assertEqual(obj.get("bare"), "42")
        self.assertEqual(obj.get("quoted"), " x ")

    def test_null_is_kept_as_text(self):
        obj = scan('{"n": null}').container
        self.assertEqual(obj.get("n"), "null")
        self.assertEqual(obj.values(), ["null"])

    def test_commas_are_optional_and_repeatable(self):
        obj = scan('{"a":"x" "b":"y",,, "c":3,}').container
        self.assertEqual(obj.keys(), ["a", "b", "c"])
        self.assertEqual(obj.values(), ["x", "y", "3"])

    def test_bare_value_runs_to_next_separator(self):
        """Test that a bare value swallows text up to ',' or '}'."""
        obj = scan('{"a":1 "b":2}').container
        self.assertEqual(obj.keys(), ["a"])
        self.assertEqual(obj.get("a"), '1 "b":2')

    def test_duplicate_keys_last_value_first_position(self):
        obj = scan('{"a":1,"b":2,"a":3}').container
        self.assertEqual(obj.keys(), ["a", "b"])
        self.assertEqual(obj.values(), ["3", "2"])


class TestScannerTrimming(unittest.TestCase):
    """Test that byte order marks are trimmed like whitespace."""

    def test_leading_byte_order_mark(self):
        result = scan('\ufeff{"a":1}')

        self.assertTrue(result.valid)
        self.assertEqual(result.container.keys(), ["a"])

    def test_byte_order_marks_mixed_with_whitespace(self):
        obj = scan(' \ufeff\n{"a":"x"}\ufeff \n').container
        self.assertEqual(obj.get("a"), "x")

    def test_bare_value_trimmed_of_byte_order_mark(self):
        obj = scan('{"a": 1\ufeff}').container
        self.assertEqual(obj.get("a"), "1")

    def test_issue_position_counts_byte_order_mark(self):
        issue = scan('\ufeff {"a":1, b:2}').issues[0]
        self.assertEqual(issue.position, 10)

    def test_trim_keeps_interior_text(self):
        self.assertEqual(trim("\ufeff a \ufeff b \t"), "a \ufeff b")


class TestScannerNotAnObject(unittest.TestCase):
    """Test inputs rejected by the brace check."""

    def test_empty_and_blank(self):
        for text in ["", "   ", "{", "}"]:
            with self.subTest(text=text):
                result = scan(text)
                self.assertEqual(result.container.keys(), [])
                self.assertFalse(result.valid)

    def test_plain_text(self):
        result = scan("not an object")
        self.assertEqual(len(result.container), 0)
        self.assertFalse(result.valid)
        self.assertEqual(result.issues[0].message, "Input is not a JSON object")

    def test_array_input(self):
        self.assertEqual(len(scan("[1, 2]").container), 0)

    def test_empty_input_issue(self):
        result = scan("")
        self.assertEqual(result.issues[0].message, "Empty input")


class TestScannerFailSoft(unittest.TestCase):
    """Test that structural problems stop the scan and keep earlier pairs."""

    def test_unquoted_key_stops_scan(self):
        result = scan('{"a":1, b:2, "c":3}')

        self.assertEqual(result.container.keys(), ["a"])
        self.assertFalse(result.valid)
        self.assertEqual(result.issues[0].message, "Expected '\"' to start key")

    def test_missing_colon_drops_current_pair(self):
        result = scan('{"a":1,"b" 2,"c":3}')

        self.assertEqual(result.container.keys(), ["a"])
        self.assertEqual(result.issues[0].message, "Expected ':' after key")

    def test_missing_value(self):
        result = scan('{"a":1,"b":}')

        self.assertEqual(result.container.keys(), ["a"])
        self.assertEqual(result.issues[0].message, "Expected value after ':'")

    def test_nested_object_is_truncated(self):
        """Test that nested objects are not understood, only cut short."""
        obj = scan('{"a":{"b":1},"c":2}').container
        self.assertEqual(obj.keys(), ["a"])
        self.assertEqual(obj.get("a"), '{"b":1')

    def test_array_value_is_truncated(self):
        obj = scan('{"a":[1,2],"b":3}').container
        self.assertEqual(obj.keys(), ["a"])
        self.assertEqual(obj.get("a"), "[1")

    def test_escaped_quote_ends_string(self):
        """Test that backslash-quote is not treated as an escape."""
        result = scan('{"k":"a\\"b"}')

        self.assertEqual(result.container.get("k"), "a\\")
        self.assertFalse(result.valid)

    def test_unterminated_string_keeps_remainder(self):
        result = scan('{"a":"abc}')

        self.assertEqual(result.container.get("a"), "abc}")
        self.assertFalse(result.valid)
        self.assertEqual(result.issues[0].message, "Unterminated string")

    def test_unterminated_key(self):
        result = scan('{"abc}')
        self.assertEqual(result.container.keys(), [])
        self.assertFalse(result.valid)


class TestScannerIssuePositions(unittest.TestCase):
    """Test line/column reporting for scan issues."""

    def test_position_on_single_line(self):
        issue = scan('{"a":1, b:2}').issues[0]
        self.assertEqual(issue.position, 8)
        self.assertEqual(issue.line, 1)
        self.assertEqual(issue.column, 9)

    def test_position_accounts_for_leading_whitespace(self):
        issue = scan('  {"a":1, b:2}').issues[0]
        self.assertEqual(issue.position, 10)

    def test_position_on_later_line(self):
        issue = scan('{\n"a":1,\nb:2\n}').issues[0]
        self.assertEqual(issue.line, 3)
        self.assertEqual(issue.column, 1)
        self.assertIn("b:2", issue.context)


class TestScannerLogging(unittest.TestCase):
    """Test that stopped scans are logged, not raised."""

    def test_abort_logged_at_debug(self):
        with self.assertLogs("vjson.core.scanner", level="DEBUG") as logs:
            Scanner('{"a":1, b:2}').scan()
        self.assertIn("Expected '\"' to start key", logs.output[0])


if __name__ == "__main__":
    unittest.main()
