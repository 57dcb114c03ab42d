import pytest
from httpx import URL

from requestbuilder._utils import assemble, coerce_port, encode_query, expand_path
from requestbuilder.models.errors import MalformedURIError


class TestAssemble:
    @pytest.mark.parametrize(
        "scheme, host, port, path",
        [
            ("http", "api.example.com", None, "/users"),
            ("https", "api.example.com", 8443, "/v1/users"),
            ("http", "10.1.27.100", 8080, "/api/status"),
            ("https", "localhost", 9000, "/a b/c"),
            ("http", "example.org", None, ""),
        ],
    )
    def test_components_round_trip(
        self, scheme: str, host: str, port: int | None, path: str
    ) -> None:
        url = assemble(scheme, host, port, path)

        parsed = URL(str(url))
        assert parsed.scheme == scheme
        assert parsed.host == host
        assert parsed.port == port
        assert parsed.path == (path or "/")

    def test_defaults_to_http(self) -> None:
        assert str(assemble(None, "api.example.com", None, "/users")) == (
            "http://api.example.com/users"
        )

    def test_string_port(self) -> None:
        assert assemble("http", "localhost", "8080", "/").port == 8080

    def test_path_without_leading_slash(self) -> None:
        assert str(assemble("http", "localhost", None, "users")) == (
            "http://localhost/users"
        )

    def test_path_is_percent_encoded(self) -> None:
        url = assemble("http", "localhost", None, "/files/my report.pdf")

        assert str(url) == "http://localhost/files/my%20report.pdf"
        assert url.path == "/files/my report.pdf"

    def test_query_params_repeat_multi_valued_keys(self) -> None:
        url = assemble(
            "http",
            "localhost",
            None,
            "/search",
            params={"tag": ["a", "b"], "q": ["x y"]},
        )

        assert str(url) == "http://localhost/search?tag=a&tag=b&q=x%20y"
        assert url.params.get_list("tag") == ["a", "b"]
        assert url.params["q"] == "x y"

    def test_path_variables_substituted_in_order(self) -> None:
        url = assemble(
            "http",
            "localhost",
            None,
            "/users/{user}/orders/{order}",
            path_variables=["42", "7"],
        )

        assert url.path == "/users/42/orders/7"

    def test_path_variables_are_encoded(self) -> None:
        url = assemble(
            "http", "localhost", None, "/files/{name}", path_variables=["a b"]
        )

        assert str(url) == "http://localhost/files/a%20b"

    @pytest.mark.parametrize(
        "path, path_variables",
        [
            ("/users/{id}", []),
            ("/users/{id}", ["1", "2"]),
            ("/users", ["1"]),
        ],
    )
    def test_placeholder_count_mismatch(
        self, path: str, path_variables: list[str]
    ) -> None:
        with pytest.raises(MalformedURIError):
            assemble("http", "localhost", None, path, path_variables=path_variables)

    @pytest.mark.parametrize(
        "host", [None, "", "bad host", "user@host", "host/path", "host:80", "host?q"]
    )
    def test_invalid_host(self, host: str | None) -> None:
        with pytest.raises(MalformedURIError):
            assemble("http", host, None, "/")

    def test_internationalized_host(self) -> None:
        url = assemble("http", "münchen.de", None, "/x")

        assert str(url) == "http://xn--mnchen-3ya.de/x"
        assert url.raw_host == b"xn--mnchen-3ya.de"

    def test_ipv6_host(self) -> None:
        url = assemble("http", "[::1]", 8080, "/health")

        assert str(url) == "http://[::1]:8080/health"

    def test_invalid_scheme(self) -> None:
        with pytest.raises(MalformedURIError, match="Invalid scheme"):
            assemble("1http", "localhost", None, "/")


class TestHelpers:
    def test_expand_path_without_placeholders(self) -> None:
        assert expand_path("/users", []) == "/users"

    def test_encode_query_escapes_delimiters(self) -> None:
        assert encode_query({"q": ["a&b=c+d"]}) == "q=a%26b%3Dc%2Bd"

    def test_encode_query_key_without_values(self) -> None:
        assert encode_query({"flag": [], "a": ["1"]}) == "flag&a=1"

    @pytest.mark.parametrize(
        "port, expected", [(None, None), (80, 80), ("8080", 8080), (" 443 ", 443)]
    )
    def test_coerce_port(self, port: int | str | None, expected: int | None) -> None:
        assert coerce_port(port) == expected

    @pytest.mark.parametrize("port", ["http", "-1", 70000, True])
    def test_coerce_port_rejects_invalid(self, port: int | str) -> None:
        with pytest.raises(MalformedURIError):
            coerce_port(port)
