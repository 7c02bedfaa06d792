import unittest

from scrubhtml.validators import is_email, is_mailto_href, is_web_uri


class TestIsWebUri(unittest.TestCase):
    def test_accepts_http_and_https(self) -> None:
        assert is_web_uri("http://example.com")
        assert is_web_uri("https://example.com/")
        assert is_web_uri("https://example.com:8443/a/b?c=d&e=f#frag")
        assert is_web_uri("HTTPS://EXAMPLE.COM/")
        assert is_web_uri("https://user@example.com/%20x")
        assert is_web_uri("http://[::1]/")

    def test_rejects_other_schemes(self) -> None:
        assert not is_web_uri("javascript:alert(1)")
        assert not is_web_uri("data:text/html;base64,PHNjcmlwdD4=")
        assert not is_web_uri("file:///etc/passwd")
        assert not is_web_uri("ftp://example.com/")
        assert not is_web_uri("vbscript:msgbox")

    def test_rejects_relative_references(self) -> None:
        assert not is_web_uri("/path")
        assert not is_web_uri("//example.com/path")
        assert not is_web_uri("example.com")
        assert not is_web_uri("http:example.com")
        assert not is_web_uri("https://")

    def test_rejects_illegal_characters(self) -> None:
        assert not is_web_uri("https://exa mple.com/")
        assert not is_web_uri(" https://example.com/")
        assert not is_web_uri('https://example.com/"onmouseover="x')
        assert not is_web_uri("https://example.com/<script>")
        assert not is_web_uri("https://exämple.com/")

    def test_rejects_broken_escapes_and_ports(self) -> None:
        assert not is_web_uri("https://example.com/%zz")
        assert not is_web_uri("https://example.com/%2")
        assert not is_web_uri("https://example.com:abc/")
        assert not is_web_uri("http://[::1/")

    def test_rejects_empty_and_non_strings(self) -> None:
        assert not is_web_uri("")
        assert not is_web_uri(None)  # type: ignore[arg-type]

    def test_custom_schemes(self) -> None:
        assert is_web_uri("ftp://example.com/", schemes={"ftp"})
        assert not is_web_uri("https://example.com/", schemes={"ftp"})


class TestIsEmail(unittest.TestCase):
    def test_valid_addresses(self) -> None:
        assert is_email("user@example.com")
        assert is_email("first.last+tag@example.org")

    def test_invalid_addresses(self) -> None:
        assert not is_email("")
        assert not is_email("not-an-email")
        assert not is_email("user@@example.com")
        assert not is_email("user@example.com?subject=hi")
        assert not is_email("@example.com")

    def test_mailto_href(self) -> None:
        assert is_mailto_href("mailto:user@example.com")
        assert not is_mailto_href("mailto:")
        assert not is_mailto_href("user@example.com")
        assert not is_mailto_href("Mailto:user@example.com")
