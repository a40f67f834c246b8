"""
Unit Tests for domain name detection
"""

import dataclasses

import pytest

from domain_name import DomainNameDetector, DomainNameError, detect, is_valid
from domain_name.registry import TLDRegistry
from domain_name.util.types import DomainName, ErrorKind


def _kind(name, registry=None):
    with pytest.raises(DomainNameError) as exc_info:
        detect(name, registry)
    return exc_info.value.kind


class TestDetect:
    """Test suite for successful detection against the bundled TLD list"""

    def test_domain_and_tld(self):
        dn = detect("foobar.com")

        assert dn.name == "foobar.com"
        assert dn.hosts == ()
        assert dn.domain_label == "foobar"
        assert dn.top_level_domains == (".com",)

    def test_compound_tld_with_host(self):
        dn = detect("www.foobar.com.cn")

        assert dn.name == "www.foobar.com.cn"
        assert dn.hosts == ("www",)
        assert dn.domain_label == "foobar"
        assert dn.top_level_domains == (".com", ".cn")

    def test_multiple_hosts(self):
        dn = detect("download.file.foobar.com")

        assert dn.name == "download.file.foobar.com"
        assert dn.hosts == ("download", "file")
        assert dn.domain_label == "foobar"
        assert dn.top_level_domains == (".com",)

    def test_native_script_name(self):
        dn = detect("时尚.中国")

        assert dn.name == "时尚.中国"
        assert dn.hosts == ()
        assert dn.domain_label == "时尚"
        assert dn.top_level_domains == (".中国",)

    def test_punycode_name(self):
        dn = detect("xn--9et52u.xn--fiqs8s")

        assert dn.name == "xn--9et52u.xn--fiqs8s"
        assert dn.hosts == ()
        assert dn.domain_label == "xn--9et52u"
        assert dn.top_level_domains == (".xn--fiqs8s",)

    def test_hosts_keep_left_to_right_order(self):
        dn = detect("a.b.c.foobar.com.cn")

        assert dn.hosts == ("a", "b", "c")
        assert dn.domain_label == "foobar"
        assert dn.top_level_domains == (".com", ".cn")

    def test_two_letter_domain_label(self):
        assert detect("ab.com").domain_label == "ab"

    def test_hyphenated_host(self):
        assert detect("a-b.foobar.com").hosts == ("a-b",)

    def test_single_character_host(self):
        assert detect("a.foobar.com").hosts == ("a",)

    def test_max_length_name(self):
        name = ".".join(["a" * 63, "b" * 63, "c" * 63, "d" * 57, "com"])
        assert len(name) == 253

        dn = detect(name)
        assert dn.domain_label == "d" * 57
        assert len(dn.hosts) == 3

    def test_compound_tld_as_whole_name(self):
        """Test three labels that are all registered: first one is the domain"""
        dn = detect("com.com.cn")

        assert dn.hosts == ()
        assert dn.domain_label == "com"
        assert dn.top_level_domains == (".com", ".cn")


class TestDetectFailures:
    """Test suite for rejected names"""

    def test_single_label(self):
        assert _kind("com") is ErrorKind.TOO_FEW_LABELS

    def test_unknown_tld_two_labels(self):
        assert _kind("foobar.foobar") is ErrorKind.UNKNOWN_TLD
        assert _kind("foobar.baz") is ErrorKind.UNKNOWN_TLD
        assert _kind("www.foobar") is ErrorKind.UNKNOWN_TLD

    def test_empty(self):
        assert _kind("") is ErrorKind.EMPTY

    def test_leading_dot(self):
        assert _kind(".foobar.com") is ErrorKind.LEADING_DOT

    def test_too_long(self):
        name = ".".join(["a" * 63, "b" * 63, "c" * 63, "d" * 58, "com"])
        assert len(name) == 254
        assert _kind(name) is ErrorKind.TOO_LONG

    def test_too_long_counts_octets(self):
        name = "时" * 90 + ".foobar.com"  # 101 chars, 281 octets
        assert len(name) < 253
        assert _kind(name) is ErrorKind.TOO_LONG

    def test_lone_hyphen_host(self):
        with pytest.raises(DomainNameError) as exc_info:
            detect("-.foobar.com")

        err = exc_info.value
        assert err.kind is ErrorKind.HOST_HYPHEN
        assert err.label == "-"
        assert err.position == 0

    @pytest.mark.parametrize("name", ["baz-.foobar.com", "-baz.foobar.com"])
    def test_hyphen_edged_host(self, name):
        assert _kind(name) is ErrorKind.HOST_HYPHEN

    def test_bad_host_character(self):
        assert _kind("%.foobar.com") is ErrorKind.HOST_CHARSET

    @pytest.mark.parametrize("name", ["baz-.foobar.foobar", "-baz.foobar.foobar", "%.foobar.foobar"])
    def test_unknown_tld_checked_before_hosts(self, name):
        """Test a bad trailing label fails before host labels are looked at"""
        with pytest.raises(DomainNameError) as exc_info:
            detect(name)

        assert exc_info.value.kind is ErrorKind.UNKNOWN_TLD
        assert exc_info.value.label == "foobar"
        assert exc_info.value.position == 2

    def test_single_character_domain_label(self):
        assert _kind("f.com") is ErrorKind.DOMAIN_LABEL_LENGTH
        assert _kind("www.f.com") is ErrorKind.DOMAIN_LABEL_LENGTH

    @pytest.mark.parametrize("name", ["-foobar.com", "foobar-.com"])
    def test_hyphen_edged_domain_label(self, name):
        assert _kind(name) is ErrorKind.DOMAIN_LABEL_HYPHEN

    def test_bad_domain_label_character(self):
        assert _kind("foobar%.com") is ErrorKind.DOMAIN_LABEL_CHARSET

    def test_trailing_dot(self):
        assert _kind("foobar.com.") is ErrorKind.UNKNOWN_TLD

    def test_empty_domain_label(self):
        with pytest.raises(DomainNameError) as exc_info:
            detect("foobar..com")

        assert exc_info.value.kind is ErrorKind.DOMAIN_LABEL_LENGTH
        assert exc_info.value.position == 1

    def test_empty_host_label(self):
        with pytest.raises(DomainNameError) as exc_info:
            detect("www..foobar.com")

        assert exc_info.value.kind is ErrorKind.HOST_LENGTH
        assert exc_info.value.position == 1

    def test_first_bad_host_aborts(self):
        with pytest.raises(DomainNameError) as exc_info:
            detect("ok.-bad.%worse.foobar.com")

        assert exc_info.value.label == "-bad"
        assert exc_info.value.position == 1

    def test_tld_lookup_is_case_sensitive(self):
        assert _kind("www.foobar.COM") is ErrorKind.UNKNOWN_TLD

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            detect("com")

    def test_error_has_message(self):
        with pytest.raises(DomainNameError) as exc_info:
            detect("foobar.baz")

        assert "Invalid domain name" in str(exc_info.value)
        assert "baz" in exc_info.value.message


class TestDomainNameDetector:
    """Test suite for the detector with an injected registry"""

    def test_uses_injected_registry(self):
        detector = DomainNameDetector(TLDRegistry.from_lines(["foobar"]))

        dn = detector.detect("baz.foobar")
        assert dn.top_level_domains == (".foobar",)
        assert not detector.is_valid("baz.com")

    def test_compound_detection_follows_registry(self, registry):
        detector = DomainNameDetector(registry)

        assert detector.detect("foobar.co.uk").top_level_domains == (".co", ".uk")
        assert detector.detect("www.foobar.uk").top_level_domains == (".uk",)

    def test_is_valid(self, registry):
        detector = DomainNameDetector(registry)

        assert detector.is_valid("foobar.com") is True
        assert detector.is_valid("foobar.foobar") is False
        assert is_valid("foobar.com") is True
        assert is_valid("f.com") is False


class TestDomainNameRecord:
    """Test suite for the result record"""

    def test_detect_is_repeatable(self):
        assert detect("www.foobar.com.cn") == detect("www.foobar.com.cn")

    def test_record_is_frozen(self):
        dn = detect("foobar.com")
        with pytest.raises(dataclasses.FrozenInstanceError):
            dn.domain_label = "other"

    def test_derived_fields(self):
        dn = detect("www.foobar.com.cn")

        assert dn.suffix == ".com.cn"
        assert dn.registrable_domain == "foobar.com.cn"

    def test_to_dict(self):
        assert detect("www.foobar.com").to_dict() == {
            'name': "www.foobar.com",
            'hosts': ["www"],
            'domain_label': "foobar",
            'top_level_domains': [".com"],
        }

    def test_record_holds_no_registry(self):
        dn = detect("foobar.com")
        assert isinstance(dn, DomainName)
        assert set(f.name for f in dataclasses.fields(dn)) == {
            'name', 'hosts', 'domain_label', 'top_level_domains',
        }
