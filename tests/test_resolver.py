"""Tests for path -> service identifier resolution."""

import sys
import unittest
from pathlib import Path

# Allow importing config_monitor when running from project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config_monitor.monitor.resolver import parse_application_name, resolve_service_names


class TestResolveServiceNames(unittest.TestCase):
    """Filename-based guesses of name/profile pairs."""

    def test_empty_path(self):
        self.assertEqual(resolve_service_names(""), [])

    def test_application_is_wildcard(self):
        """application.yml applies to every service."""
        self.assertEqual(resolve_service_names("/a/application.yml"), ["*"])

    def test_application_profile_is_wildcard_profile(self):
        """application-prod.yml -> *:prod; the whole stem starts with 'application' so adds nothing."""
        self.assertEqual(resolve_service_names("/a/application-prod.yml"), ["*:prod"])

    def test_every_hyphen_is_tried(self):
        self.assertEqual(
            resolve_service_names("/member/nbbang-auth-prod.yml"),
            ["nbbang:auth-prod", "nbbang-auth:prod", "nbbang-auth-prod"],
        )

    def test_no_hyphen_only_whole_stem(self):
        self.assertEqual(resolve_service_names("/config/billing.properties"), ["billing"])

    def test_no_extension(self):
        self.assertEqual(resolve_service_names("/config/billing-dev"), ["billing:dev", "billing-dev"])

    def test_no_directory(self):
        self.assertEqual(resolve_service_names("billing-dev.yml"), ["billing:dev", "billing-dev"])

    def test_application_prefix_other_than_application_is_skipped(self):
        """applicationX is neither a wildcard nor a service name."""
        self.assertEqual(resolve_service_names("/a/applicationX-dev.yml"), [])
        self.assertEqual(resolve_service_names("/a/applications.yml"), [])

    def test_backslash_separators(self):
        self.assertEqual(
            resolve_service_names("C:\\repo\\config\\billing-dev.yml"),
            ["billing:dev", "billing-dev"],
        )

    def test_query_suffix_is_cut_with_extension(self):
        self.assertEqual(resolve_service_names("/a/billing.yml?ref=main"), ["billing"])

    def test_dot_in_directory_only(self):
        self.assertEqual(resolve_service_names("/repo/v1.2/billing-dev"), ["billing:dev", "billing-dev"])

    def test_missing_filename(self):
        """Directory paths and bare extensions resolve to nothing."""
        self.assertEqual(resolve_service_names("/a/b/"), [])
        self.assertEqual(resolve_service_names("/a/.yml"), [])

    def test_dot_segments_collapsed(self):
        """'.' and '..' segments are resolved before taking the filename."""
        self.assertEqual(resolve_service_names("/a/b/.."), ["a"])
        self.assertEqual(resolve_service_names("/a/./billing-dev.yml"), ["billing:dev", "billing-dev"])
        self.assertEqual(resolve_service_names("/a/orders/../billing.yml"), ["billing"])
        self.assertEqual(resolve_service_names("a/../.."), [])
        self.assertEqual(resolve_service_names("/a/b/."), ["b"])

    def test_never_raises_on_odd_input(self):
        for path in ("-", "--", "/", ".", "a-", "-a", "\\", "é-ü.yml", "a" * 1000):
            with self.subTest(path=path):
                self.assertIsInstance(resolve_service_names(path), list)

    def test_no_duplicates(self):
        result = resolve_service_names("/a/x-y-z-w.yml")
        self.assertEqual(len(result), len(set(result)))
        self.assertEqual(result, ["x:y-z-w", "x-y:z-w", "x-y-z:w", "x-y-z-w"])


class TestParseApplicationName(unittest.TestCase):
    """Service name taken from '<dir>/<service>-prod.<ext>'."""

    def test_prod_file(self):
        self.assertEqual(parse_application_name("/member/nbbang-auth-prod.yml"), "nbbang-auth")

    def test_missing_slash(self):
        self.assertIsNone(parse_application_name("nbbang-auth-prod.yml"))

    def test_missing_prod(self):
        self.assertIsNone(parse_application_name("/member/nbbang-auth-dev.yml"))

    def test_prod_before_last_slash(self):
        """'-prod' in a directory name does not count."""
        self.assertIsNone(parse_application_name("/member-prod/auth.yml"))

    def test_empty_name(self):
        self.assertIsNone(parse_application_name("/-prod.yml"))
        self.assertIsNone(parse_application_name(""))

    def test_application_prod(self):
        self.assertEqual(parse_application_name("/a/application-prod.yml"), "application")


if __name__ == "__main__":
    unittest.main()
