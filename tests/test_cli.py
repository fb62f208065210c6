"""Tests for the command-line interface."""

import io
from unittest.mock import AsyncMock, patch

import pytest
from rich.console import Console
from reqview import __version__
from reqview.cli import build_config, build_request, create_parser, main, run_request
from reqview.exceptions import TransportError
from reqview.http import HttpResponse
from reqview.models.config import ClientConfig
from reqview.models.request import GetRequest, KvPair, PostRequest


def make_console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, color_system=None, width=80), buffer


def make_client(response: HttpResponse | None = None, error: Exception | None = None) -> AsyncMock:
    """Create a mock AsyncHttpClient usable with 'async with'."""
    client = AsyncMock()
    client.__aenter__.return_value = client
    if error is not None:
        client.get.side_effect = error
        client.post.side_effect = error
    else:
        client.get.return_value = response
        client.post.return_value = response
    return client


RESPONSE = HttpResponse(
    status_code=200,
    content=b'{"ok": true}',
    content_type="application/json",
    headers=(("Content-Type", "application/json"), ("X", "1")),
    url="http://example.com/",
    reason="OK",
)


class TestParser:
    """Tests for argument parsing."""

    def test_get(self):
        """Test parsing a get command."""
        args = create_parser().parse_args(["get", "http://example.com/path"])
        assert args.command == "get"
        assert build_request(args) == GetRequest(url="http://example.com/path")

    def test_post_builds_body(self):
        """Test that post pairs build the JSON body mapping."""
        args = create_parser().parse_args(["post", "http://x/y", "a=1", "b=2"])
        request = build_request(args)
        assert request == PostRequest(url="http://x/y", body=(KvPair("a", "1"), KvPair("b", "2")))
        assert request.json_body() == {"a": "1", "b": "2"}

    def test_post_without_pairs(self):
        """Test a post with no body pairs."""
        args = create_parser().parse_args(["post", "http://x/y"])
        assert build_request(args).json_body() == {}

    def test_post_value_with_equals(self):
        """Test that values keep embedded '=' characters."""
        args = create_parser().parse_args(["post", "http://x/y", "q=a=b"])
        assert build_request(args).json_body() == {"q": "a=b"}

    def test_config_defaults(self):
        """Test configuration built from default options."""
        config = build_config(create_parser().parse_args(["get", "http://x/"]))
        assert config.render.highlight is True
        assert config.log_level == "WARNING"
        assert config.client == ClientConfig()

    def test_config_options(self):
        """Test configuration built from global options."""
        args = create_parser().parse_args(["-v", "--theme", "native", "--no-highlight", "get", "http://x/"])
        config = build_config(args)
        assert config.render.theme == "native"
        assert config.render.highlight is False
        assert config.log_level == "DEBUG"

    def test_quiet(self):
        """Test that --quiet only logs errors."""
        config = build_config(create_parser().parse_args(["-q", "get", "http://x/"]))
        assert config.log_level == "ERROR"


class TestMain:
    """Tests for main() argument errors."""

    def test_malformed_url_exits_before_network(self, capsys):
        """Test that a bad URL is a usage error and no client is built."""
        with patch("reqview.cli.AsyncHttpClient") as client_cls:
            with pytest.raises(SystemExit) as exc_info:
                main(["get", "ht!tp://bad"])

        assert exc_info.value.code == 2
        client_cls.assert_not_called()
        assert "invalid URL" in capsys.readouterr().err

    def test_malformed_pair_exits_before_network(self, capsys):
        """Test that a bad key=value token is a usage error."""
        with patch("reqview.cli.AsyncHttpClient") as client_cls:
            with pytest.raises(SystemExit) as exc_info:
                main(["post", "http://x/y", "a=1", "broken"])

        assert exc_info.value.code == 2
        client_cls.assert_not_called()
        assert "broken" in capsys.readouterr().err

    def test_missing_command(self):
        """Test that a command is required."""
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        """Test --version output."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_doctor(self):
        """Test that --doctor runs diagnostics."""
        with patch("reqview.doctor.run_doctor", return_value=0) as run_doctor:
            assert main(["--doctor"]) == 0
        run_doctor.assert_called_once()

    def test_get_success(self):
        """Test main() running a GET end to end with a mocked client."""
        client = make_client(RESPONSE)
        with patch("reqview.cli.AsyncHttpClient", return_value=client):
            assert main(["--no-highlight", "get", "http://example.com/"]) == 0
        client.get.assert_awaited_once_with("http://example.com/")


class TestRunRequest:
    """Tests for sending and rendering."""

    def test_get_renders_response(self):
        """Test that a GET response is fully rendered."""
        console, buffer = make_console()
        client = make_client(RESPONSE)
        args = create_parser().parse_args(["--no-highlight", "get", "http://example.com/"])

        with patch("reqview.cli.AsyncHttpClient", return_value=client) as client_cls:
            assert run_request(args, console=console) == 0

        client_cls.assert_called_once_with(ClientConfig())
        client.get.assert_awaited_once_with("http://example.com/")
        assert buffer.getvalue() == (
            "HTTP/1.1 200 OK\n\nContent-Type: application/json\nX: 1\n\n" '{"ok": true}\n'
        )

    def test_post_renders_like_get(self):
        """Test that POST responses use the same renderer."""
        console, buffer = make_console()
        client = make_client(RESPONSE)
        args = create_parser().parse_args(["--no-highlight", "post", "http://x/y", "a=1", "b=2"])

        with patch("reqview.cli.AsyncHttpClient", return_value=client):
            assert run_request(args, console=console) == 0

        client.post.assert_awaited_once_with("http://x/y", (KvPair("a", "1"), KvPair("b", "2")))
        assert buffer.getvalue().startswith("HTTP/1.1 200 OK\n\n")
        assert "X: 1\n" in buffer.getvalue()

    def test_transport_error_exits_non_zero(self):
        """Test that transport failures print an error and return 1."""
        console, buffer = make_console()
        error_console, error_buffer = make_console()
        client = make_client(error=TransportError("http://x/", "GET http://x/ failed: refused"))
        args = create_parser().parse_args(["get", "http://x/"])

        with patch("reqview.cli.AsyncHttpClient", return_value=client):
            assert run_request(args, console=console, error_console=error_console) == 1

        assert buffer.getvalue() == ""
        assert error_buffer.getvalue() == "Error: GET http://x/ failed: refused\n"

    def test_invalid_theme_is_configuration_error(self):
        """Test that an empty theme name is rejected before sending."""
        error_console, error_buffer = make_console()
        args = create_parser().parse_args(["--theme", "", "get", "http://x/"])

        with patch("reqview.cli.AsyncHttpClient") as client_cls:
            assert run_request(args, error_console=error_console) == 1

        client_cls.assert_not_called()
        assert error_buffer.getvalue().startswith("Configuration error:")
