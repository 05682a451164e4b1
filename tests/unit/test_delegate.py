"""Unit tests for the delegate parse and its fallback chain."""

from legacy_url.parsing import AttemptStatus, attempt_parse, preprocess


class TestAttemptParse:
    """Test suite for attempt_parse."""

    def test_direct(self):
        """Test absolute URLs parse without the base."""
        attempt = attempt_parse(preprocess("http://example.com/a"))

        assert attempt.status is AttemptStatus.DIRECT
        assert not attempt.failed_direct
        assert attempt.pre_slash == ""
        assert attempt.url.host == "example.com"

    def test_fallback(self):
        """Test relative input is resolved against the placeholder base."""
        attempt = attempt_parse(preprocess("www.example.com"))

        assert attempt.status is AttemptStatus.FALLBACK
        assert attempt.failed_direct
        assert attempt.url.host == "w.w"
        assert attempt.url.pathname == "/www.example.com"

    def test_protocol_relative_path(self):
        """Test '//path' loses a slash for the fallback parse."""
        attempt = attempt_parse(preprocess("//foo/bar"))

        assert attempt.status is AttemptStatus.FALLBACK
        assert attempt.pre_slash == "/"
        assert attempt.source == "/foo/bar"

    def test_protocol_relative_host(self):
        """Test '//host.tld' is kept as an authority."""
        attempt = attempt_parse(preprocess("//example.com/path"))

        assert attempt.pre_slash == ""
        assert attempt.url.host == "example.com"

    def test_slashes_denote_host(self):
        """Test the option forces '//' to be an authority."""
        attempt = attempt_parse(preprocess("//foo/bar"), slashes_denote_host=True)

        assert attempt.pre_slash == ""
        assert attempt.url.host == "foo"
        assert attempt.url.pathname == "/bar"

    def test_explicit_protocol_keeps_slashes(self):
        """Test opaque schemes never get the '//path' treatment."""
        attempt = attempt_parse(preprocess("foo://bar/baz"))

        assert attempt.pre_slash == ""
        assert attempt.url.host == "bar"

    def test_failed(self):
        """Test input unparseable even against the base."""
        attempt = attempt_parse(preprocess("foo:"))

        assert attempt.status is AttemptStatus.FAILED
        assert attempt.url is None

    def test_failed_empty_authority(self):
        """Test an http URL with no host cannot be parsed."""
        attempt = attempt_parse(preprocess("http://"))

        assert attempt.status is AttemptStatus.FAILED
